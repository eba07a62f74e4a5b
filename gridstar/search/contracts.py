"""Core data contracts for grid search."""

from __future__ import annotations

from enum import Enum
from typing import NamedTuple

from pydantic import BaseModel, ConfigDict, Field, computed_field


class Cell(NamedTuple):
    x: int
    y: int


class DiagonalCost(str, Enum):
    """How a diagonal step is priced relative to a straight one.

    INTEGER truncates sqrt(2) to a whole number, so a diagonal step costs the
    same as a straight step. EXACT keeps the fractional sqrt(2).
    """

    INTEGER = "integer"
    EXACT = "exact"


class SearchConfig(BaseModel):
    model_config = ConfigDict(extra="forbid", frozen=True)

    diagonal: DiagonalCost = DiagonalCost.INTEGER
    allow_corner_cutting: bool = True


class SearchReport(BaseModel):
    model_config = ConfigDict(extra="forbid")

    start: tuple[int, int]
    goal: tuple[int, int]
    diagonal: DiagonalCost
    path: list[tuple[int, int]] = Field(default_factory=list)
    cost: float = 0
    expanded: int = 0

    @computed_field
    @property
    def found(self) -> bool:
        return bool(self.path)


def as_cell(value: tuple[int, int]) -> Cell:
    return Cell(*value)
