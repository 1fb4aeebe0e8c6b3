"""Core data contracts for grid route search."""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field

Coord = tuple[int, int]


class CellState(str, Enum):
    EMPTY = "empty"
    OBSTACLE = "obstacle"
    CLOSED = "closed"
    PATH = "path"
    START = "start"
    FINISH = "finish"


class SearchStatus(str, Enum):
    RUNNING = "running"
    FOUND = "found"
    EXHAUSTED = "exhausted"


class InvalidInputError(ValueError):
    """Start or goal cannot be searched on the given grid."""


class MalformedGridError(ValueError):
    """Grid text could not be parsed into a rectangular occupancy matrix."""


class SearchAbortedError(RuntimeError):
    """Search stopped by a caller-imposed step cap."""


class SearchSummary(BaseModel):
    model_config = ConfigDict(extra="forbid")

    grid_file: str | None = None
    rows: int
    cols: int
    start: Coord
    goal: Coord
    status: SearchStatus
    cost: int | None = None
    expanded: int = 0
    path_cells: list[Coord] = Field(default_factory=list)
