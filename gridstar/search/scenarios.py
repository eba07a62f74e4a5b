"""Built-in search scenarios and CLI cell parsing."""

from __future__ import annotations

from dataclasses import dataclass, field

from gridstar.search.contracts import Cell
from gridstar.search.grid import Grid


@dataclass(frozen=True)
class Scenario:
    width: int
    height: int
    start: Cell
    goal: Cell
    walls: tuple[Cell, ...] = field(default_factory=tuple)

    def build_grid(self) -> Grid:
        grid = Grid(self.width, self.height)
        for x, y in self.walls:
            grid.set_blocked(x, y)
        return grid


DEMO_SCENARIO = Scenario(
    width=10,
    height=10,
    start=Cell(5, 0),
    goal=Cell(9, 9),
    walls=(
        # L-shaped wall around the start.
        Cell(1, 1),
        Cell(1, 2),
        Cell(1, 3),
        Cell(2, 3),
        Cell(3, 3),
        Cell(4, 3),
        Cell(5, 3),
        Cell(6, 3),
        Cell(6, 2),
        Cell(6, 1),
        Cell(6, 0),
        Cell(0, 6),
        Cell(1, 6),
        Cell(2, 6),
        Cell(5, 9),
        Cell(5, 8),
        Cell(9, 8),
        Cell(8, 8),
        Cell(7, 8),
    ),
)


def parse_cell(raw: str) -> Cell:
    """Parse ``"x,y"`` into a Cell."""
    parts = [part.strip() for part in raw.split(",")]
    if len(parts) != 2:
        raise ValueError(f"Expected a cell as 'x,y', got {raw!r}.")
    try:
        return Cell(int(parts[0]), int(parts[1]))
    except ValueError as exc:
        raise ValueError(f"Cell coordinates must be integers, got {raw!r}.") from exc
