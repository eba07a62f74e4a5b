"""Application entry for running a single grid search."""

from __future__ import annotations

import logging
import os

from gridstar.search.contracts import SearchConfig, SearchReport
from gridstar.search.grid import Grid
from gridstar.search.pathfinding import PathFinder
from gridstar.search.scenarios import Scenario

logger = logging.getLogger(__name__)

DEFAULT_DIAGONAL = "integer"
DEFAULT_CORNER_CUTTING = True

_TRUTHY = {"1", "true", "yes", "on"}
_FALSY = {"0", "false", "no", "off"}


def run_search(
    scenario: Scenario,
    *,
    diagonal: str | None = None,
    allow_corner_cutting: bool | None = None,
) -> tuple[Grid, SearchReport]:
    config = resolve_config(diagonal, allow_corner_cutting)
    grid = scenario.build_grid()
    logger.info(
        "searching %dx%d grid from %s to %s (%s diagonal)",
        grid.width,
        grid.height,
        scenario.start,
        scenario.goal,
        config.diagonal.value,
    )
    report = PathFinder(config).search(grid, scenario.start, scenario.goal)
    return grid, report


def resolve_config(
    diagonal: str | None = None, allow_corner_cutting: bool | None = None
) -> SearchConfig:
    mode = (diagonal or os.getenv("GRIDSTAR_DIAGONAL") or DEFAULT_DIAGONAL).lower()
    if allow_corner_cutting is None:
        allow_corner_cutting = _env_flag(
            "GRIDSTAR_CORNER_CUTTING", DEFAULT_CORNER_CUTTING
        )
    return SearchConfig(diagonal=mode, allow_corner_cutting=allow_corner_cutting)


def _env_flag(name: str, default: bool) -> bool:
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return default
    value = raw.strip().lower()
    if value in _TRUTHY:
        return True
    if value in _FALSY:
        return False
    raise ValueError(f"{name} must be a boolean flag, got {raw!r}.")
