import pytest

from gridroute.search.contracts import CellState
from gridroute.search.grid import Grid


def test_bounds_and_open_cells() -> None:
    grid = Grid.from_rows([[0, 1, 0], [0, 0, 0]])

    assert grid.rows == 2
    assert grid.cols == 3
    assert grid.in_bounds(1, 2)
    assert not grid.in_bounds(2, 0)
    assert not grid.in_bounds(0, -1)

    assert grid.is_open(0, 0)
    assert not grid.is_open(0, 1)
    assert not grid.is_open(-1, 0)
    assert not grid.is_open(0, 3)


def test_annotated_cells_are_not_open() -> None:
    grid = Grid.from_rows([[0, 0, 0]])
    grid.set_status(0, 0, CellState.CLOSED)
    grid.set_status(0, 1, CellState.PATH)
    grid.set_status(0, 2, CellState.START)

    assert not any(grid.is_open(0, y) for y in range(3))


def test_copy_is_independent() -> None:
    grid = Grid.from_rows([[0, 0], [1, 0]])
    clone = grid.copy()
    clone.set_status(0, 0, CellState.FINISH)

    assert grid.status(0, 0) == CellState.EMPTY
    assert clone.count(CellState.FINISH) == 1
    assert grid.coords_with(CellState.OBSTACLE) == [(1, 0)]


def test_from_rows_rejects_ragged_or_empty() -> None:
    with pytest.raises(ValueError):
        Grid.from_rows([[0, 0], [0]])
    with pytest.raises(ValueError):
        Grid.from_rows([])
