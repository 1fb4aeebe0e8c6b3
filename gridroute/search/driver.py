"""A* search driver over an occupancy grid."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field

from gridroute.search.contracts import (
    CellState,
    Coord,
    InvalidInputError,
    SearchAbortedError,
    SearchStatus,
    SearchSummary,
)
from gridroute.search.expansion import add_to_open, expand_neighbours
from gridroute.search.grid import Grid
from gridroute.search.heuristic import heuristic
from gridroute.search.open_set import Node, OpenSet

logger = logging.getLogger(__name__)

ROUTE_STATES = (CellState.PATH, CellState.START, CellState.FINISH)


@dataclass
class SearchResult:
    status: SearchStatus
    start: Coord
    goal: Coord
    grid: Grid | None = None
    cost: int | None = None
    expanded: int = 0
    inserted: list[Coord] = field(default_factory=list)

    @property
    def found(self) -> bool:
        return self.status == SearchStatus.FOUND

    def path_cells(self) -> list[Coord]:
        if self.grid is None:
            return []
        return self.grid.coords_with(*ROUTE_STATES)

    def summary(
        self, *, rows: int, cols: int, grid_file: str | None = None
    ) -> SearchSummary:
        return SearchSummary(
            grid_file=grid_file,
            rows=rows,
            cols=cols,
            start=self.start,
            goal=self.goal,
            status=self.status,
            cost=self.cost,
            expanded=self.expanded,
            path_cells=self.path_cells(),
        )


def validate_endpoints(grid: Grid, start: Coord, goal: Coord) -> None:
    if start == goal:
        raise InvalidInputError(f"Start and goal are the same cell {start}.")
    for label, (x, y) in (("Start", start), ("Goal", goal)):
        if not grid.in_bounds(x, y):
            raise InvalidInputError(
                f"{label} {(x, y)} is outside the {grid.rows}x{grid.cols} grid."
            )
        if grid.status(x, y) == CellState.OBSTACLE:
            raise InvalidInputError(f"{label} {(x, y)} is an obstacle.")
        if grid.status(x, y) != CellState.EMPTY:
            raise InvalidInputError(f"{label} {(x, y)} is not an empty cell.")


class AStarSearch:
    """One A* run, advanced an iteration at a time.

    The search works on a private copy of the grid; the caller's grid is never
    touched. Cells are closed when queued, so each cell enters the open set at
    most once and the first route found to it is kept.
    """

    def __init__(self, grid: Grid, start: Coord, goal: Coord) -> None:
        validate_endpoints(grid, start, goal)
        self._grid = grid.copy()
        self._start = start
        self._goal = goal
        self._open = OpenSet()
        self._cost: int | None = None
        self.status = SearchStatus.RUNNING
        self.steps = 0
        self.expanded = 0
        self.inserted: list[Coord] = []

        start_node = Node(
            x=start[0],
            y=start[1],
            g=0,
            h=heuristic(start[0], start[1], goal[0], goal[1]),
        )
        add_to_open(start_node, self._open, self._grid)
        self.inserted.append(start_node.coord)
        logger.debug(
            "Searching %sx%s grid from %s to %s",
            self._grid.rows,
            self._grid.cols,
            start,
            goal,
        )

    @property
    def grid(self) -> Grid:
        return self._grid

    @property
    def frontier_size(self) -> int:
        return len(self._open)

    def step(self) -> SearchStatus:
        if self.status != SearchStatus.RUNNING:
            return self.status
        self.steps += 1

        if self._open.is_empty():
            self.status = SearchStatus.EXHAUSTED
            logger.debug("Open set exhausted after %s expansions", self.expanded)
            return self.status

        current = self._open.extract_best()
        if current.coord == self._goal:
            self._grid.set_status(self._start[0], self._start[1], CellState.START)
            self._grid.set_status(current.x, current.y, CellState.FINISH)
            self._cost = current.g
            self.status = SearchStatus.FOUND
            logger.debug(
                "Reached goal at cost %s after %s expansions", current.g, self.expanded
            )
            return self.status

        self._grid.set_status(current.x, current.y, CellState.PATH)
        added = expand_neighbours(current, self._goal, self._open, self._grid)
        self.inserted.extend(node.coord for node in added)
        self.expanded += 1
        return self.status

    def run(self, *, max_steps: int | None = None) -> SearchResult:
        while self.status == SearchStatus.RUNNING:
            if max_steps is not None and self.steps >= max_steps:
                raise SearchAbortedError(
                    f"Search stopped after {self.steps} steps without finishing."
                )
            self.step()
        return self.result()

    def result(self) -> SearchResult:
        if self.status == SearchStatus.RUNNING:
            raise RuntimeError("Search has not finished yet.")
        return SearchResult(
            status=self.status,
            start=self._start,
            goal=self._goal,
            grid=self._grid if self.status == SearchStatus.FOUND else None,
            cost=self._cost,
            expanded=self.expanded,
            inserted=list(self.inserted),
        )


def search_path(
    grid: Grid, start: Coord, goal: Coord, *, max_steps: int | None = None
) -> SearchResult:
    """Run A* from start to goal and return the annotated grid or a no-path result."""
    return AStarSearch(grid, start, goal).run(max_steps=max_steps)
