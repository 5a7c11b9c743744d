from typing import Optional

import typer

from dp_tools import matrix_experiments, substring_experiments
from dp_tools.logging_config import setup_logging

app = typer.Typer(help="Dynamic-programming experiments: largest zero square and weighted common substring.")

app.add_typer(matrix_experiments.app, name="matrix", help="Largest all-zero square sub-matrix")
app.add_typer(substring_experiments.app, name="substring", help="Weighted approximate common substring")


@app.callback()
def main(
    log_level: Optional[str] = typer.Option(None, "--log-level", help="DEBUG, INFO, WARNING or ERROR (defaults to $LOG_LEVEL)."),
):
    setup_logging(log_level)


if __name__ == "__main__":
    app()
