"""Neighbour expansion for one A* iteration."""

from __future__ import annotations

from gridroute.search.contracts import CellState, Coord
from gridroute.search.grid import Grid
from gridroute.search.heuristic import heuristic
from gridroute.search.open_set import Node, OpenSet

# Up, left, down, right.
DIRECTIONS: tuple[tuple[int, int], ...] = ((-1, 0), (0, -1), (1, 0), (0, 1))


def add_to_open(node: Node, open_set: OpenSet, grid: Grid) -> None:
    """Queue a node and close its cell so it is never queued again."""
    open_set.insert(node)
    grid.set_status(node.x, node.y, CellState.CLOSED)


def expand_neighbours(
    current: Node, goal: Coord, open_set: OpenSet, grid: Grid
) -> list[Node]:
    added: list[Node] = []
    for dx, dy in DIRECTIONS:
        x = current.x + dx
        y = current.y + dy
        if not grid.is_open(x, y):
            continue
        node = Node(x=x, y=y, g=current.g + 1, h=heuristic(x, y, goal[0], goal[1]))
        add_to_open(node, open_set, grid)
        added.append(node)
    return added
