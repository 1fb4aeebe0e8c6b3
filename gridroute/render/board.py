"""Rich rendering for grids and search outcomes."""

from __future__ import annotations

from rich.console import Group, RenderableType
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from gridroute.search.contracts import CellState
from gridroute.search.driver import SearchResult
from gridroute.search.grid import Grid

EMOJI_GLYPHS = {
    CellState.OBSTACLE: "⛰️",
    CellState.PATH: "🚗",
    CellState.START: "🚦",
    CellState.FINISH: "🏁",
}
EMOJI_DEFAULT = "0"
EMOJI_VISITED = "·"

ASCII_GLYPHS = {
    CellState.OBSTACLE: "#",
    CellState.PATH: "*",
    CellState.START: "S",
    CellState.FINISH: "F",
}
ASCII_DEFAULT = "."
ASCII_VISITED = "o"

CELL_STYLES = {
    CellState.EMPTY: "grey70",
    CellState.OBSTACLE: "bright_magenta",
    CellState.CLOSED: "grey50",
    CellState.PATH: "bright_cyan",
    CellState.START: "bold bright_green",
    CellState.FINISH: "bold bright_red",
}


def cell_glyph(
    state: CellState, *, ascii: bool = False, show_visited: bool = False
) -> str:
    glyphs = ASCII_GLYPHS if ascii else EMOJI_GLYPHS
    if state in glyphs:
        return glyphs[state]
    if show_visited and state == CellState.CLOSED:
        return ASCII_VISITED if ascii else EMOJI_VISITED
    return ASCII_DEFAULT if ascii else EMOJI_DEFAULT


def board_lines(
    grid: Grid, *, ascii: bool = False, show_visited: bool = False
) -> list[str]:
    return [
        " ".join(
            cell_glyph(cell, ascii=ascii, show_visited=show_visited) for cell in row
        )
        for row in grid.cells
    ]


def render_board(
    grid: Grid, *, ascii: bool = False, show_visited: bool = False
) -> Text:
    text = Text()
    for index, row in enumerate(grid.cells):
        if index:
            text.append("\n")
        for col, cell in enumerate(row):
            if col:
                text.append(" ")
            text.append(
                cell_glyph(cell, ascii=ascii, show_visited=show_visited),
                style=CELL_STYLES.get(cell, "grey70"),
            )
    return text


def render_outcome(
    result: SearchResult,
    *,
    source: Grid,
    ascii: bool = False,
    show_visited: bool = False,
) -> RenderableType:
    summary = Table(show_header=False)
    summary.add_column("Field")
    summary.add_column("Value")
    summary.add_row("Start", _format_coord(result.start))
    summary.add_row("Goal", _format_coord(result.goal))
    summary.add_row("Expanded", str(result.expanded))

    if result.found and result.grid is not None:
        summary.add_row("Steps", str(result.cost))
        summary.add_row("Marked cells", str(len(result.path_cells())))
        board = render_board(result.grid, ascii=ascii, show_visited=show_visited)
        return Panel(Group(board, summary), title="Optimum path found")

    board = render_board(source, ascii=ascii)
    message = Text("No path found", style="bold red")
    return Panel(Group(board, message, summary), title="No route")


def _format_coord(coord: tuple[int, int]) -> str:
    return f"{coord[0]} {coord[1]}"
