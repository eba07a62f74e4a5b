"""Shared helpers for rendering a grid and a path as rich text."""

from __future__ import annotations

from rich.text import Text

from gridstar.search.grid import Grid

WALL = "#"
PATH = "."
START = "S"
GOAL = "E"
EMPTY = " "

TILE_STYLES = {
    WALL: "bright_magenta",
    PATH: "bright_cyan",
    START: "bold bright_green",
    GOAL: "bold red",
    EMPTY: "grey70",
}

CELL_WIDTH = 2


def build_symbol_grid(
    grid: Grid,
    path: list[tuple[int, int]],
    start: tuple[int, int],
    goal: tuple[int, int],
) -> list[list[str]]:
    """Return symbols indexed as ``rows[y][x]``."""
    rows = [
        [EMPTY if grid.is_walkable(x, y) else WALL for x in range(grid.width)]
        for y in range(grid.height)
    ]
    for x, y in path:
        if grid.in_bounds(x, y):
            rows[y][x] = PATH
    for (x, y), symbol in ((start, START), (goal, GOAL)):
        if grid.in_bounds(x, y):
            rows[y][x] = symbol
    return rows


def render_grid_lines(
    grid: Grid,
    path: list[tuple[int, int]],
    start: tuple[int, int],
    goal: tuple[int, int],
) -> list[Text]:
    lines: list[Text] = []
    for row in build_symbol_grid(grid, path, start, goal):
        line = Text()
        for symbol in row:
            line.append(symbol.rjust(CELL_WIDTH), style=TILE_STYLES.get(symbol))
        lines.append(line)
    return lines
