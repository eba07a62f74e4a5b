"""Bounds-checked occupancy grid."""

from __future__ import annotations

from dataclasses import dataclass, field

from gridstar.search.contracts import Cell


@dataclass
class Grid:
    """Walkable/blocked map over [0, width) x [0, height).

    Coordinates outside the grid are never an error: they read as not
    walkable and writes to them are ignored.
    """

    width: int
    height: int
    walls: set[Cell] = field(default_factory=set)

    def __post_init__(self) -> None:
        if self.width <= 0 or self.height <= 0:
            raise ValueError(
                f"Grid dimensions must be positive, got {self.width}x{self.height}."
            )
        self.walls = {Cell(*wall) for wall in self.walls if self.in_bounds(*wall)}

    def in_bounds(self, x: int, y: int) -> bool:
        return 0 <= x < self.width and 0 <= y < self.height

    def set_blocked(self, x: int, y: int) -> None:
        if not self.in_bounds(x, y):
            return
        self.walls.add(Cell(x, y))

    def is_walkable(self, x: int, y: int) -> bool:
        if not self.in_bounds(x, y):
            return False
        return (x, y) not in self.walls

    def blocked_cells(self) -> list[Cell]:
        return sorted(self.walls)
