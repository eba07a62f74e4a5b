import pytest

from gridstar.search.contracts import Cell
from gridstar.search.grid import Grid


def test_new_grid_is_fully_walkable() -> None:
    grid = Grid(3, 2)

    assert all(grid.is_walkable(x, y) for x in range(3) for y in range(2))
    assert grid.blocked_cells() == []


def test_set_blocked_marks_cell_unwalkable() -> None:
    grid = Grid(4, 4)
    grid.set_blocked(2, 1)

    assert not grid.is_walkable(2, 1)
    assert grid.is_walkable(1, 2)
    assert grid.blocked_cells() == [Cell(2, 1)]


def test_out_of_bounds_reads_as_blocked() -> None:
    grid = Grid(3, 3)

    assert not grid.is_walkable(-1, 0)
    assert not grid.is_walkable(0, -1)
    assert not grid.is_walkable(3, 0)
    assert not grid.is_walkable(0, 3)


def test_set_blocked_out_of_bounds_is_ignored() -> None:
    grid = Grid(3, 3)
    grid.set_blocked(5, 5)
    grid.set_blocked(-1, 2)

    assert grid.blocked_cells() == []


def test_initial_walls_outside_grid_are_dropped() -> None:
    grid = Grid(2, 2, walls={(1, 1), (4, 4)})

    assert grid.blocked_cells() == [Cell(1, 1)]


@pytest.mark.parametrize("width,height", [(0, 3), (3, 0), (-2, 2)])
def test_grid_rejects_non_positive_size(width: int, height: int) -> None:
    with pytest.raises(ValueError):
        Grid(width, height)
