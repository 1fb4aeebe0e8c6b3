"""Occupancy grid model."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable

from gridroute.search.contracts import CellState, Coord


@dataclass
class Grid:
    """Row-major matrix of cell states; x is the row index, y the column."""

    cells: list[list[CellState]]

    @classmethod
    def from_rows(cls, rows: Iterable[Iterable[int | CellState]]) -> "Grid":
        cells: list[list[CellState]] = []
        for row in rows:
            cells.append([_coerce_cell(value) for value in row])
        if not cells or not cells[0]:
            raise ValueError("grid must have at least one row and one column")
        width = len(cells[0])
        if any(len(row) != width for row in cells):
            raise ValueError("grid rows must all have the same length")
        return cls(cells=cells)

    @property
    def rows(self) -> int:
        return len(self.cells)

    @property
    def cols(self) -> int:
        return len(self.cells[0]) if self.cells else 0

    def in_bounds(self, x: int, y: int) -> bool:
        return 0 <= x < self.rows and 0 <= y < self.cols

    def is_open(self, x: int, y: int) -> bool:
        if not self.in_bounds(x, y):
            return False
        return self.cells[x][y] == CellState.EMPTY

    def status(self, x: int, y: int) -> CellState:
        return self.cells[x][y]

    def set_status(self, x: int, y: int, status: CellState) -> None:
        self.cells[x][y] = status

    def copy(self) -> "Grid":
        return Grid(cells=[list(row) for row in self.cells])

    def count(self, *statuses: CellState) -> int:
        wanted = set(statuses)
        return sum(1 for row in self.cells for cell in row if cell in wanted)

    def coords_with(self, *statuses: CellState) -> list[Coord]:
        wanted = set(statuses)
        return [
            (x, y)
            for x, row in enumerate(self.cells)
            for y, cell in enumerate(row)
            if cell in wanted
        ]


def _coerce_cell(value: int | CellState) -> CellState:
    if isinstance(value, CellState):
        return value
    return CellState.OBSTACLE if value else CellState.EMPTY
