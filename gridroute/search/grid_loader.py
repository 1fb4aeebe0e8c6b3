"""Load occupancy grids from comma-separated 0/1 text files."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path

from gridroute.search.contracts import CellState, MalformedGridError
from gridroute.search.grid import Grid

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class GridPaths:
    base_dir: Path = Path("grid_files")

    def resolve(self, name: str | Path) -> Path:
        path = Path(name)
        if path.is_absolute() or path.exists() or len(path.parts) > 1:
            return path
        return self.base_dir / path

    def list_grid_files(self) -> list[str]:
        if not self.base_dir.is_dir():
            return []
        return sorted(entry.name for entry in self.base_dir.iterdir() if entry.is_file())


def parse_grid_line(line: str) -> list[CellState]:
    """Parse one row such as ``0,1,0,0,`` (trailing comma optional)."""
    tokens = [token.strip() for token in line.strip().split(",")]
    if tokens and tokens[-1] == "":
        tokens.pop()
    if not tokens:
        raise MalformedGridError("Row is empty.")
    row: list[CellState] = []
    for token in tokens:
        try:
            value = int(token)
        except ValueError as exc:
            raise MalformedGridError(f"Invalid cell value {token!r}.") from exc
        row.append(CellState.OBSTACLE if value != 0 else CellState.EMPTY)
    return row


def parse_grid_text(text: str) -> Grid:
    lines = text.splitlines()
    while lines and not lines[-1].strip():
        lines.pop()
    if not lines:
        raise MalformedGridError("Grid file has no rows.")

    cells: list[list[CellState]] = []
    for number, line in enumerate(lines, start=1):
        try:
            row = parse_grid_line(line)
        except MalformedGridError as exc:
            raise MalformedGridError(f"Line {number}: {exc}") from exc
        if cells and len(row) != len(cells[0]):
            raise MalformedGridError(
                f"Line {number}: expected {len(cells[0])} cells, got {len(row)}."
            )
        cells.append(row)
    return Grid(cells=cells)


def load_grid_file(path: Path) -> Grid:
    try:
        text = path.read_text(encoding="utf-8")
    except FileNotFoundError as exc:
        raise FileNotFoundError(f"Missing grid file: {path}") from exc
    grid = parse_grid_text(text)
    logger.info(
        "Loaded %sx%s grid from %s (%s obstacles)",
        grid.rows,
        grid.cols,
        path,
        grid.count(CellState.OBSTACLE),
    )
    return grid
