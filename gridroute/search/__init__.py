"""A* route search over occupancy grids."""

from gridroute.search.contracts import (
    CellState,
    Coord,
    InvalidInputError,
    MalformedGridError,
    SearchAbortedError,
    SearchStatus,
    SearchSummary,
)
from gridroute.search.driver import (
    AStarSearch,
    SearchResult,
    search_path,
    validate_endpoints,
)
from gridroute.search.expansion import DIRECTIONS, expand_neighbours
from gridroute.search.grid import Grid
from gridroute.search.grid_loader import GridPaths, load_grid_file, parse_grid_text
from gridroute.search.heuristic import heuristic
from gridroute.search.open_set import Node, OpenSet

__all__ = [
    "AStarSearch",
    "CellState",
    "Coord",
    "DIRECTIONS",
    "Grid",
    "GridPaths",
    "InvalidInputError",
    "MalformedGridError",
    "Node",
    "OpenSet",
    "SearchAbortedError",
    "SearchResult",
    "SearchStatus",
    "SearchSummary",
    "expand_neighbours",
    "heuristic",
    "load_grid_file",
    "parse_grid_text",
    "search_path",
    "validate_endpoints",
]
