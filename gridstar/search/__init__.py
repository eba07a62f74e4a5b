"""Grid model and A* search."""

from gridstar.search.contracts import Cell, DiagonalCost, SearchConfig, SearchReport
from gridstar.search.grid import Grid
from gridstar.search.pathfinding import PathFinder, find_path, heuristic, path_cost
from gridstar.search.scenarios import DEMO_SCENARIO, Scenario, parse_cell

__all__ = [
    "Cell",
    "DEMO_SCENARIO",
    "DiagonalCost",
    "Grid",
    "PathFinder",
    "Scenario",
    "SearchConfig",
    "SearchReport",
    "find_path",
    "heuristic",
    "parse_cell",
    "path_cost",
]
