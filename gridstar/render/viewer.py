"""Rich viewer rendering for SearchReport."""

from __future__ import annotations

from rich.columns import Columns
from rich.console import Group, RenderableType
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from gridstar.render.grid_map import render_grid_lines
from gridstar.search.contracts import SearchReport
from gridstar.search.grid import Grid


def render_report(grid: Grid, report: SearchReport) -> RenderableType:
    header = Text(f"Grid {grid.width}x{grid.height}", style="bold")
    grid_map = Group(*render_grid_lines(grid, report.path, report.start, report.goal))
    summary = _render_summary(report)
    left = Group(header, grid_map)
    return Columns([Panel(left, title="Map"), Panel(summary, title="Search")])


def _render_summary(report: SearchReport) -> RenderableType:
    table = Table(show_header=False)
    table.add_column("Field")
    table.add_column("Value")
    table.add_row("Start", _format_cell(report.start))
    table.add_row("Goal", _format_cell(report.goal))
    table.add_row("Diagonal", report.diagonal.value)
    table.add_row("Expanded", str(report.expanded))
    if not report.found:
        table.add_row("Path", "No path found.")
        return table
    table.add_row("Path length", str(len(report.path)))
    table.add_row("Cost", _format_cost(report.cost))
    return table


def _format_cell(cell: tuple[int, int]) -> str:
    return f"({cell[0]}, {cell[1]})"


def _format_cost(cost: float) -> str:
    if float(cost).is_integer():
        return str(int(cost))
    return f"{cost:.3f}"
