"""ASCII diagnostics for small instances: the distance grid, a coarse plot of
the cities and a one-line rendering of a tour."""
from __future__ import annotations
from typing import List, Sequence, Tuple

GRAPH_PIXELS = 50


def format_grid(D: List[List[float]]) -> str:
    n = len(D)
    lines = ["", "Grid:", ""]
    lines.append("    " + "".join(f" {j:>5}" for j in range(n)))
    lines.append("    " + "______"*n)
    for i in range(n):
        lines.append(f"{i:^3} |" + "".join(f"{D[i][j]:>5.1f} " for j in range(n)))
    lines.append("")
    return "\n".join(lines)


def _scale(width: int, pixels: int) -> int:
    return max(1, width // pixels)


def plot_cell(point: Tuple[int, int], width: int, pixels: int = GRAPH_PIXELS) -> Tuple[int, int]:
    scale = _scale(width, pixels)
    x, y = point
    return min(x // scale, pixels - 1), min(y // scale, pixels - 1)


def format_city_table(points: Sequence[Tuple[int, int]], width: int, pixels: int = GRAPH_PIXELS) -> str:
    lines = []
    for i, p in enumerate(points):
        ix, iy = plot_cell(p, width, pixels)
        lines.append(f"City {i}: ({p[0]}, {p[1]})        ({ix}, {iy})")
    return "\n".join(lines)


def format_plot(points: Sequence[Tuple[int, int]], width: int, pixels: int = GRAPH_PIXELS) -> str:
    if pixels <= 0:
        raise ValueError("pixels must be positive")
    plot = [["  "]*pixels for _ in range(pixels)]
    for i, p in enumerate(points):
        ix, iy = plot_cell(p, width, pixels)
        plot[ix][iy] = f"{i:>2}"

    border = "x" + "--"*pixels + "x"
    lines = ["Plot:", border]
    # row 0 on screen is the top of the map
    for j in range(pixels):
        lines.append("|" + "".join(plot[i][pixels-1-j] for i in range(pixels)) + "|")
    lines.append(border)
    return "\n".join(lines)


def format_path(tour: Sequence[int]) -> str:
    if not tour:
        return "path: (empty)"
    return "path: " + " > ".join(str(c) for c in tour) + f" > {tour[0]}"
