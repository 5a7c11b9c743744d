from typing import List, Optional

import numpy as np
import pandas as pd
import typer

from dp_tools.chart_builder import ascii_graph, build_chart, render_weights
from dp_tools.errors import DPError
from dp_tools.generators import make_rng, random_string
from dp_tools.logging_config import get_logger
from dp_tools.profiling import MB, measure, substring_memory_bytes
from dp_tools.weighted_substring import WeightedSubstringMatcher
from dp_tools.weights import UNIFORM_SCENARIO, WeightTable

logger = get_logger(__name__)

app = typer.Typer(help="Weighted approximate common substring experiments.")

EXAMPLE_PAIR = ("ABCAABCAA", "ABBCAACCBBBBBB")
DEFAULT_LENGTHS = [50, 100, 200, 500, 1000]
DEFAULT_PENALTY = 5.0
DEFAULT_MIN_WEIGHT = 1.0
DEFAULT_MAX_WEIGHT = 10.0
DEFAULT_TRIALS = 5
DEFAULT_SEED = 42
LARGE_LENGTH = 200
RANGE_STEP = 0.9


def length_pairs(lengths, limit=LARGE_LENGTH):
    return [(a, b) for a in lengths for b in lengths if not (a > limit and b > limit)]


def run_benchmark(weights, penalty, lengths=None, trials=DEFAULT_TRIALS, seed=DEFAULT_SEED):
    rng = make_rng(seed)
    matcher = WeightedSubstringMatcher(weights, penalty)
    rows = []
    for len1, len2 in length_pairs(lengths or DEFAULT_LENGTHS):
        logger.info("Benchmarking %d x %d strings over %d trials", len1, len2, trials)
        scores, lengths_found, times, memories = [], [], [], []
        for _ in range(trials):
            v = random_string(len1, rng=rng)
            w = random_string(len2, rng=rng)
            result, measurement = measure(matcher.run, v, w)
            scores.append(result.score)
            lengths_found.append(result.length)
            times.append(measurement.elapsed_ms)
            memories.append(measurement.memory_mb)
        rows.append({
            "Length 1": len1,
            "Length 2": len2,
            "Avg Score": float(np.mean(scores)),
            "Avg Length": float(np.mean(lengths_found)),
            "Avg Time (ms)": float(np.mean(times)),
            "Memory (MB)": substring_memory_bytes(len1, len2) / MB,
            "Memory Used (MB)": float(pd.Series(memories).max()),
        })
    return pd.DataFrame(rows)


def weight_ranges(steps=10, min_weight=DEFAULT_MIN_WEIGHT, step=RANGE_STEP):
    return [(min_weight, min_weight + i * step) for i in range(steps + 1)]


def echo_table(df):
    typer.echo(df.to_string(index=False, float_format=lambda v: f"{v:.3f}"))


@app.command("example")
def example(
    penalty: float = typer.Option(DEFAULT_PENALTY, "--penalty", "-p", help="Mismatch penalty."),
):
    v, w = EXAMPLE_PAIR
    try:
        result = WeightedSubstringMatcher(WeightTable.uniform(), penalty).run(v, w)
    except DPError as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(code=1)
    typer.echo(f"String 1: {v}")
    typer.echo(f"String 2: {w}")
    typer.echo("\nResult:")
    typer.echo(str(result))


@app.command("compare")
def compare(
    first: str = typer.Argument(..., help="First string."),
    second: str = typer.Argument(..., help="Second string."),
    scenario: int = typer.Option(UNIFORM_SCENARIO, "--scenario", help="1 = uniform weights, 2 = English-frequency weights."),
    penalty: float = typer.Option(DEFAULT_PENALTY, "--penalty", "-p", help="Mismatch penalty."),
    min_weight: float = typer.Option(DEFAULT_MIN_WEIGHT, "--min-weight", help="Smallest weight (scenario 2)."),
    max_weight: float = typer.Option(DEFAULT_MAX_WEIGHT, "--max-weight", help="Largest weight (scenario 2)."),
):
    try:
        weights = WeightTable.from_scenario(scenario, min_weight, max_weight)
        result = WeightedSubstringMatcher(weights, penalty).run(first, second)
    except DPError as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(code=1)
    typer.echo(str(result))


@app.command("weights")
def show_weights(
    scenario: int = typer.Option(UNIFORM_SCENARIO, "--scenario", help="1 = uniform weights, 2 = English-frequency weights."),
    min_weight: float = typer.Option(DEFAULT_MIN_WEIGHT, "--min-weight", help="Smallest weight (scenario 2)."),
    max_weight: float = typer.Option(DEFAULT_MAX_WEIGHT, "--max-weight", help="Largest weight (scenario 2)."),
):
    try:
        table = WeightTable.from_scenario(scenario, min_weight, max_weight)
    except DPError as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(code=1)
    typer.echo("Character weights:")
    typer.echo(render_weights(table))


@app.command("benchmark")
def benchmark(
    scenario: int = typer.Option(UNIFORM_SCENARIO, "--scenario", help="1 = uniform weights, 2 = English-frequency weights."),
    penalty: float = typer.Option(DEFAULT_PENALTY, "--penalty", "-p", help="Mismatch penalty."),
    min_weight: float = typer.Option(DEFAULT_MIN_WEIGHT, "--min-weight", help="Smallest weight (scenario 2)."),
    max_weight: float = typer.Option(DEFAULT_MAX_WEIGHT, "--max-weight", help="Largest weight (scenario 2)."),
    length: List[int] = typer.Option(DEFAULT_LENGTHS, "--length", "-l", help="String length; repeat for several lengths."),
    trials: int = typer.Option(DEFAULT_TRIALS, "--trials", "-t", help="Trials per length pair."),
    seed: int = typer.Option(DEFAULT_SEED, "--seed", help="Random seed for reproducible strings."),
    plot: bool = typer.Option(False, "--plot", help="Display a matplotlib chart of the timings."),
    save: Optional[str] = typer.Option(None, "--save", help="Save the chart as PNG to this path."),
):
    try:
        table = WeightTable.from_scenario(scenario, min_weight, max_weight)
        df = run_benchmark(table, penalty, length, trials, seed)
    except DPError as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(code=1)

    typer.echo(f"=== SCENARIO {scenario}, penalty={penalty} ===\n")
    echo_table(df)

    cells = (df["Length 1"] * df["Length 2"]).tolist()
    typer.echo("\n=== TIME COMPLEXITY GRAPH (ASCII) ===")
    typer.echo(ascii_graph(cells, df["Avg Time (ms)"].tolist(), "String Sizes (m x n)", "Time (ms)"))

    if plot or save:
        build_chart(cells, {"Avg Time (ms)": df["Avg Time (ms)"].tolist()},
                    title="Weighted substring: running time", chart_type="scatter",
                    xlabel="String Sizes (m x n)", ylabel="Time (ms)",
                    save_path=save, show=plot)


@app.command("sweep")
def sweep(
    penalty: float = typer.Option(DEFAULT_PENALTY, "--penalty", "-p", help="Mismatch penalty."),
    steps: int = typer.Option(10, "--steps", help="Number of widening weight ranges after [1, 1]."),
    length: List[int] = typer.Option(DEFAULT_LENGTHS, "--length", "-l", help="String length; repeat for several lengths."),
    trials: int = typer.Option(DEFAULT_TRIALS, "--trials", "-t", help="Trials per length pair."),
    seed: int = typer.Option(DEFAULT_SEED, "--seed", help="Random seed for reproducible strings."),
):
    for min_weight, max_weight in weight_ranges(steps):
        try:
            table = WeightTable.proportional(min_weight, max_weight)
            df = run_benchmark(table, penalty, length, trials, seed)
        except DPError as e:
            typer.echo(f"Error: {e}", err=True)
            raise typer.Exit(code=1)
        typer.echo(f"\nWeight range [{min_weight:.1f}, {max_weight:.1f}]:")
        echo_table(df)


if __name__ == "__main__":
    app()
