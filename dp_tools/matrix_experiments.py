from typing import List, Optional

import numpy as np
import pandas as pd
import typer

from dp_tools.chart_builder import ascii_graph, build_chart, render_grid
from dp_tools.errors import DPError, InvalidConfigurationError
from dp_tools.generators import make_rng, random_grid
from dp_tools.logging_config import get_logger
from dp_tools.profiling import MB, matrix_memory_bytes, measure
from dp_tools.verifier import verify_square
from dp_tools.zero_square import ZeroSquareFinder

logger = get_logger(__name__)

app = typer.Typer(help="Largest all-zero square sub-matrix experiments.")

EXAMPLE_GRID = [
    [1, 0, 0, 1, 0],
    [0, 0, 0, 0, 1],
    [0, 0, 0, 0, 0],
    [1, 0, 0, 0, 0],
    [0, 0, 1, 0, 0],
]
DEFAULT_SIZES = ["10x10", "10x100", "10x1000", "100x1000", "1000x1000"]
DEFAULT_ZERO_PROBABILITY = 0.7
DEFAULT_SEED = 42
SMALL_GRID_CELLS = 10000


def parse_size(text):
    try:
        rows, cols = (int(part) for part in text.lower().replace("×", "x").split("x"))
    except ValueError:
        raise InvalidConfigurationError(f"Size must look like ROWSxCOLS, got {text!r}") from None
    if rows < 0 or cols < 0:
        raise InvalidConfigurationError(f"Size must be non-negative, got {text!r}")
    return rows, cols


def trials_for(m, n):
    return 10 if m * n <= SMALL_GRID_CELLS else 3


def run_benchmark(sizes, zero_probability=DEFAULT_ZERO_PROBABILITY, seed=DEFAULT_SEED, trials=None):
    rng = make_rng(seed)
    finder = ZeroSquareFinder()
    rows = []
    for m, n in sizes:
        count = trials or trials_for(m, n)
        logger.info("Benchmarking %dx%d grid over %d trials", m, n, count)
        times, squares, memories = [], [], []
        for _ in range(count):
            grid = random_grid(m, n, zero_probability, rng=rng)
            result, measurement = measure(finder.run, grid)
            times.append(measurement.elapsed_ms)
            memories.append(measurement.memory_mb)
            squares.append(result.size)
        rows.append({
            "Rows": m,
            "Cols": n,
            "Cells": m * n,
            "Max Square": float(np.mean(squares)),
            "Time (ms)": float(np.mean(times)),
            "Memory (MB)": matrix_memory_bytes(m, n) / MB,
            "Memory Used (MB)": float(pd.Series(memories).max()),
        })
    return pd.DataFrame(rows)


def run_verification(tests=10, seed=None, zero_probability=DEFAULT_ZERO_PROBABILITY):
    rng = make_rng(seed)
    finder = ZeroSquareFinder()
    outcomes = []
    for _ in range(tests):
        m = int(rng.integers(10, 30))
        n = int(rng.integers(10, 30))
        grid = random_grid(m, n, zero_probability, rng=rng)
        outcomes.append((m, n, verify_square(grid, finder.run(grid))))
    return outcomes


@app.command("example")
def example():
    result = ZeroSquareFinder().run(EXAMPLE_GRID)
    typer.echo("Matrix:")
    typer.echo(render_grid(EXAMPLE_GRID, result))
    typer.echo(str(result))


@app.command("benchmark")
def benchmark(
    size: List[str] = typer.Option(DEFAULT_SIZES, "--size", "-s", help="Grid size as ROWSxCOLS; repeat for several sizes."),
    zero_probability: float = typer.Option(DEFAULT_ZERO_PROBABILITY, "--zero-probability", "-p", help="Probability that a cell is empty."),
    seed: int = typer.Option(DEFAULT_SEED, "--seed", help="Random seed for reproducible grids."),
    trials: Optional[int] = typer.Option(None, "--trials", "-t", help="Trials per size (default: 10 for small grids, 3 otherwise)."),
    plot: bool = typer.Option(False, "--plot", help="Display a matplotlib chart of the timings."),
    save: Optional[str] = typer.Option(None, "--save", help="Save the chart as PNG to this path."),
):
    try:
        sizes = [parse_size(s) for s in size]
        df = run_benchmark(sizes, zero_probability, seed, trials)
    except DPError as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(code=1)

    typer.echo("=== PERFORMANCE EXPERIMENTS ===\n")
    typer.echo(df.to_string(index=False, float_format=lambda v: f"{v:.3f}"))
    typer.echo("\nTime Complexity: O(m x n) - each cell is processed once")
    typer.echo("Space Complexity: O(m x n) - DP table storage")

    cells = df["Cells"].tolist()
    typer.echo("\n=== TIME COMPLEXITY GRAPH (ASCII) ===")
    typer.echo(ascii_graph(cells, df["Time (ms)"].tolist(), "Matrix Size (m x n)", "Time (ms)"))
    typer.echo("\n=== MEMORY USAGE GRAPH (ASCII) ===")
    typer.echo(ascii_graph(cells, df["Memory (MB)"].tolist(), "Matrix Size (m x n)", "Memory (MB)"))

    if plot or save:
        build_chart(cells, {"Time (ms)": df["Time (ms)"].tolist()},
                    title="Largest zero square: running time",
                    xlabel="Matrix Size (m x n)", ylabel="Time (ms)",
                    save_path=save, show=plot)


@app.command("verify")
def verify(
    tests: int = typer.Option(10, "--tests", "-n", help="Number of random grids to verify."),
    seed: Optional[int] = typer.Option(None, "--seed", help="Random seed; omit for a fresh run."),
    zero_probability: float = typer.Option(DEFAULT_ZERO_PROBABILITY, "--zero-probability", "-p", help="Probability that a cell is empty."),
):
    try:
        outcomes = run_verification(tests, seed, zero_probability)
    except DPError as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(code=1)
    for k, (m, n, ok) in enumerate(outcomes, start=1):
        typer.echo(f"Test {k} ({m}x{n}): {'PASSED' if ok else 'FAILED'}")
    all_ok = all(ok for _, _, ok in outcomes)
    typer.echo(f"\nAll tests {'PASSED' if all_ok else 'FAILED'}")
    if not all_ok:
        raise typer.Exit(code=1)


if __name__ == "__main__":
    app()
