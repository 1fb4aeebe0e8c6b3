from gridroute.search.contracts import CellState
from gridroute.search.expansion import expand_neighbours
from gridroute.search.grid import Grid
from gridroute.search.open_set import Node, OpenSet


def test_expands_in_up_left_down_right_order() -> None:
    grid = Grid.from_rows([[0, 0, 0], [0, 0, 0], [0, 0, 0]])
    open_set = OpenSet()
    current = Node(x=1, y=1, g=2, h=2)

    added = expand_neighbours(current, (2, 2), open_set, grid)

    assert [node.coord for node in added] == [(0, 1), (1, 0), (2, 1), (1, 2)]
    assert all(node.g == 3 for node in added)
    assert [node.h for node in added] == [3, 3, 1, 1]
    assert len(open_set) == 4
    assert all(grid.status(*node.coord) == CellState.CLOSED for node in added)


def test_skips_obstacles_closed_cells_and_edges() -> None:
    grid = Grid.from_rows([[0, 1], [0, 0]])
    grid.set_status(1, 0, CellState.CLOSED)
    open_set = OpenSet()

    added = expand_neighbours(Node(x=0, y=0, g=0, h=2), (1, 1), open_set, grid)

    assert added == []
    assert open_set.is_empty()
    assert grid.status(0, 1) == CellState.OBSTACLE
