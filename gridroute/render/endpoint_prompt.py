"""Interactive start/finish selection."""

from __future__ import annotations

from rich.console import Console
from rich.panel import Panel
from rich.prompt import Prompt
from rich.text import Text

from gridroute.search.contracts import CellState, Coord
from gridroute.search.grid import Grid


def parse_coordinate(raw: str) -> Coord | None:
    parts = raw.replace(",", " ").split()
    if len(parts) != 2:
        return None
    try:
        return int(parts[0]), int(parts[1])
    except ValueError:
        return None


def check_endpoint(grid: Grid, coord: Coord) -> str | None:
    x, y = coord
    if not grid.in_bounds(x, y):
        return f"Cell {x} {y} is not on the grid."
    if grid.status(x, y) != CellState.EMPTY:
        return f"Cell {x} {y} is not empty."
    return None


def endpoint_rules(grid: Grid) -> Panel:
    last = f"{grid.rows - 1} {grid.cols - 1}"
    rules = Text(
        "1. Row and column index values start from 0.\n"
        f'   Top left cell is "0 0" and bottom right cell is "{last}".\n'
        "2. Chosen cell must be on the grid.\n"
        "3. Only an empty cell (0 in the grid file) can be chosen.\n"
        "4. Starting and finishing cell cannot be the same."
    )
    return Panel(rules, title="Choosing start and finish cells")


def prompt_endpoints(
    grid: Grid,
    *,
    console: Console | None = None,
    start: Coord | None = None,
    goal: Coord | None = None,
) -> tuple[Coord, Coord]:
    """Ask for whichever of start and goal is not already known."""
    console = console or Console()
    console.print(endpoint_rules(grid))
    if start is None:
        start = _ask_cell(
            grid,
            console,
            "Enter starting cell row and column separated by a space",
            other=goal,
        )
    if goal is None:
        goal = _ask_cell(
            grid,
            console,
            "Enter finishing cell row and column separated by a space",
            other=start,
        )
    return start, goal


def _ask_cell(
    grid: Grid, console: Console, question: str, *, other: Coord | None = None
) -> Coord:
    while True:
        raw = Prompt.ask(question, console=console)
        coord = parse_coordinate(raw)
        if coord is None:
            console.print("[red]Invalid input![/red] Expected two integers.")
            continue
        problem = check_endpoint(grid, coord)
        if problem:
            console.print(f"[red]Invalid input![/red] {problem}")
            continue
        if coord == other:
            console.print(
                "[red]Invalid input![/red] Start and finish cannot be the same cell."
            )
            continue
        return coord
