"""Grid-based pathfinding (A*).

Eight-directional movement with the Manhattan heuristic. Straight steps cost
``STRAIGHT_COST``; diagonal steps cost either the integer-truncated sqrt(2)
(equal to a straight step) or the exact sqrt(2), see ``DiagonalCost``. The
Manhattan heuristic overestimates diagonal-heavy routes in both modes, so a
returned path is the best the search finds under that heuristic and is not
guaranteed optimal once detours are involved.
"""

from __future__ import annotations

from dataclasses import dataclass
import heapq
import logging
import math

from gridstar.search.contracts import (
    Cell,
    DiagonalCost,
    SearchConfig,
    SearchReport,
    as_cell,
)
from gridstar.search.grid import Grid

logger = logging.getLogger(__name__)

STRAIGHT_COST = 1

NEIGHBOR_OFFSETS: tuple[tuple[int, int], ...] = tuple(
    (dx, dy) for dx in (-1, 0, 1) for dy in (-1, 0, 1) if (dx, dy) != (0, 0)
)


@dataclass(frozen=True)
class SearchNode:
    cell: Cell
    parent: int | None
    g_cost: float
    h_cost: int

    @property
    def f_cost(self) -> float:
        return self.g_cost + self.h_cost


def heuristic(a: tuple[int, int], b: tuple[int, int]) -> int:
    return abs(a[0] - b[0]) + abs(a[1] - b[1])


def diagonal_cost(mode: DiagonalCost) -> float:
    if mode == DiagonalCost.EXACT:
        return math.sqrt(2) * STRAIGHT_COST
    return int(math.sqrt(2) * STRAIGHT_COST)


def step_cost(dx: int, dy: int, config: SearchConfig) -> float:
    if abs(dx) + abs(dy) == 1:
        return STRAIGHT_COST
    return diagonal_cost(config.diagonal)


def path_cost(
    path: list[tuple[int, int]], config: SearchConfig | None = None
) -> float:
    config = config or SearchConfig()
    total: float = 0
    for (ax, ay), (bx, by) in zip(path, path[1:]):
        total += step_cost(bx - ax, by - ay, config)
    return total


class PathFinder:
    def __init__(self, config: SearchConfig | None = None) -> None:
        self._config = config or SearchConfig()

    @property
    def config(self) -> SearchConfig:
        return self._config

    def find_path(
        self, grid: Grid, start: tuple[int, int], goal: tuple[int, int]
    ) -> list[Cell]:
        path, _ = self._run(grid, as_cell(start), as_cell(goal))
        return path

    def search(
        self, grid: Grid, start: tuple[int, int], goal: tuple[int, int]
    ) -> SearchReport:
        path, expanded = self._run(grid, as_cell(start), as_cell(goal))
        return SearchReport(
            start=start,
            goal=goal,
            diagonal=self._config.diagonal,
            path=path,
            cost=path_cost(path, self._config),
            expanded=expanded,
        )

    def _run(self, grid: Grid, start: Cell, goal: Cell) -> tuple[list[Cell], int]:
        # Nodes live in an arena and refer to their parent by index. The
        # registry maps each cell to the index of its cheapest known node.
        nodes: list[SearchNode] = [
            SearchNode(
                cell=start, parent=None, g_cost=0, h_cost=heuristic(start, goal)
            )
        ]
        registry: dict[Cell, int] = {start: 0}
        open_set: list[tuple[float, int, Cell, int]] = []
        heapq.heappush(open_set, (nodes[0].f_cost, nodes[0].h_cost, start, 0))
        expanded = 0

        while open_set:
            _, _, cell, index = heapq.heappop(open_set)
            if registry[cell] != index:
                continue  # superseded
            current = nodes[index]
            if cell == goal:
                path = self._reconstruct_path(nodes, index)
                logger.debug(
                    "path %s -> %s: %d cells, %d expanded",
                    start,
                    goal,
                    len(path),
                    expanded,
                )
                return path, expanded

            expanded += 1
            for dx, dy in NEIGHBOR_OFFSETS:
                neighbor = Cell(cell.x + dx, cell.y + dy)
                if not self._can_step(grid, cell, dx, dy):
                    continue
                tentative = current.g_cost + step_cost(dx, dy, self._config)
                existing = registry.get(neighbor)
                if existing is not None and nodes[existing].g_cost <= tentative:
                    continue
                successor = SearchNode(
                    cell=neighbor,
                    parent=index,
                    g_cost=tentative,
                    h_cost=heuristic(neighbor, goal),
                )
                nodes.append(successor)
                registry[neighbor] = len(nodes) - 1
                heapq.heappush(
                    open_set,
                    (successor.f_cost, successor.h_cost, neighbor, len(nodes) - 1),
                )

        logger.debug("no path %s -> %s, %d expanded", start, goal, expanded)
        return [], expanded

    def _can_step(self, grid: Grid, cell: Cell, dx: int, dy: int) -> bool:
        if not grid.is_walkable(cell.x + dx, cell.y + dy):
            return False
        if self._config.allow_corner_cutting or dx == 0 or dy == 0:
            return True
        return grid.is_walkable(cell.x + dx, cell.y) and grid.is_walkable(
            cell.x, cell.y + dy
        )

    @staticmethod
    def _reconstruct_path(nodes: list[SearchNode], index: int | None) -> list[Cell]:
        path: list[Cell] = []
        while index is not None:
            node = nodes[index]
            path.append(node.cell)
            index = node.parent
        path.reverse()
        return path


def find_path(
    grid: Grid,
    start: tuple[int, int],
    goal: tuple[int, int],
    *,
    config: SearchConfig | None = None,
) -> list[Cell]:
    return PathFinder(config).find_path(grid, start, goal)
