import matplotlib.pyplot as plt
import numpy as np
import typer

MAX_DISPLAY = 20


def render_grid(grid, result=None, max_display=MAX_DISPLAY):
    matrix = np.asarray(grid)
    if matrix.ndim != 2 or matrix.size == 0:
        return "Matrix is empty"
    if matrix.shape[0] > max_display or matrix.shape[1] > max_display:
        return "Matrix too large to display"
    lines = []
    for i, row in enumerate(matrix):
        cells = []
        for j, value in enumerate(row):
            if result is not None and result.contains(i, j):
                cells.append(f"[{value}]")
            else:
                cells.append(f" {value} ")
        lines.append("".join(cells))
    return "\n".join(lines)


def render_weights(table, per_line=6):
    lines, line = [], []
    for i, (symbol, weight) in enumerate(table.items(), start=1):
        line.append(f"{symbol}: {weight:.3f}")
        if i % per_line == 0:
            lines.append("  ".join(line))
            line = []
    if line:
        lines.append("  ".join(line))
    return "\n".join(lines)


def ascii_graph(x, y, x_label, y_label, width=60, height=15):
    if not x or len(x) != len(y):
        return "No data to plot"
    max_x = max(x) or 1
    max_y = max(y) if max(y) > 0 else 1.0
    points = {(int(xv * width / max_x), int(yv * height / max_y)) for xv, yv in zip(x, y)}
    lines = [y_label, "^"]
    for row in range(height, -1, -1):
        y_val = max_y * row / height
        cells = []
        for col in range(width):
            hit = any(abs(col - px) <= 1 and row == py for px, py in points)
            cells.append("*" if hit else ("-" if row == 0 else " "))
        lines.append(f"{y_val:7.1f} |" + "".join(cells))
    lines.append("        +" + "-" * width + "> " + x_label)
    lines.append("        0" + " " * (width - 5) + str(max_x))
    return "\n".join(lines)


def build_chart(x, series, title="Benchmark", xlabel="X-axis", ylabel="Y-axis",
                chart_type="line", save_path=None, show=True):
    plt.figure(figsize=(8, 6))
    for label, y in series.items():
        if len(y) != len(x):
            plt.close()
            raise ValueError(f"Length mismatch: '{label}' has {len(y)} points, x has {len(x)} points.")
        if chart_type == "bar":
            plt.bar(x, y, label=label, alpha=0.7)
        elif chart_type == "scatter":
            plt.scatter(x, y, label=label)
        else:
            plt.plot(x, y, label=label, marker='o')
    plt.title(title)
    plt.xlabel(xlabel)
    plt.ylabel(ylabel)
    if len(series) > 1:
        plt.legend()
    plt.tight_layout()
    if save_path is not None:
        plt.savefig(save_path, dpi=300)
        typer.echo(f"Chart saved as: {save_path}")
    if show:
        try:
            plt.show()
        except Exception as e:
            typer.echo(f"Unable to display chart: {e}")
    plt.close()
