"""Application entry for loading a grid, choosing endpoints and searching."""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from pathlib import Path

from rich.console import Console
from rich.logging import RichHandler
from rich.prompt import Prompt

from gridroute.db.run_log import append_search_summary, create_run_folder, write_header
from gridroute.render.board import render_board, render_outcome
from gridroute.render.endpoint_prompt import prompt_endpoints
from gridroute.render.live_search import animate_search
from gridroute.search.contracts import (
    Coord,
    InvalidInputError,
    MalformedGridError,
    SearchAbortedError,
)
from gridroute.search.driver import AStarSearch, SearchResult
from gridroute.search.grid import Grid
from gridroute.search.grid_loader import GridPaths, load_grid_file

logger = logging.getLogger(__name__)

DEFAULT_GRID_DIR = Path("grid_files")
DEFAULT_RECORD_DIR = Path("runs")
DEFAULT_LOG_LEVEL = "WARNING"

EXIT_FOUND = 0
EXIT_NO_PATH = 1
EXIT_INVALID = 2
EXIT_ABORTED = 3


@dataclass(frozen=True)
class RouteConfig:
    grid_file: str | None = None
    grid_dir: Path = DEFAULT_GRID_DIR
    start: Coord | None = None
    goal: Coord | None = None
    ascii: bool = False
    show_visited: bool = False
    animate: bool = False
    step_delay: float = 0.05
    max_steps: int | None = None
    record_dir: Path | None = None


def resolve_grid_dir(grid_dir: Path | None) -> Path:
    if grid_dir is not None:
        return grid_dir
    env_dir = os.getenv("GRIDROUTE_GRID_DIR")
    return Path(env_dir) if env_dir else DEFAULT_GRID_DIR


def resolve_max_steps(max_steps: int | None) -> int | None:
    if max_steps is not None:
        return max_steps
    raw = os.getenv("GRIDROUTE_MAX_STEPS")
    if not raw:
        return None
    message = f"GRIDROUTE_MAX_STEPS must be a positive integer, got {raw!r}."
    try:
        value = int(raw)
    except ValueError as exc:
        raise ValueError(message) from exc
    if value < 1:
        raise ValueError(message)
    return value


def resolve_log_level(log_level: str | None) -> str:
    return (log_level or os.getenv("GRIDROUTE_LOG_LEVEL") or DEFAULT_LOG_LEVEL).upper()


def configure_logging(level: str) -> None:
    logging.basicConfig(
        level=level,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(console=Console(stderr=True), show_path=False)],
        force=True,
    )


def run_route(config: RouteConfig, *, console: Console | None = None) -> int:
    console = console or Console()
    console.print(
        "Using A* search, find the optimum path between two cells "
        "of a grid with obstacles.\n"
    )
    paths = GridPaths(base_dir=config.grid_dir)
    grid_file = config.grid_file or _ask_grid_file(paths, console)

    try:
        grid = load_grid_file(paths.resolve(grid_file))
    except (FileNotFoundError, MalformedGridError) as exc:
        console.print(f"[red]Invalid grid file:[/red] {exc}")
        return EXIT_INVALID

    console.print("Valid grid board! Printing the grid")
    console.print(render_board(grid, ascii=config.ascii))

    if config.start is not None and config.goal is not None:
        start, goal = config.start, config.goal
    else:
        start, goal = prompt_endpoints(
            grid, console=console, start=config.start, goal=config.goal
        )

    try:
        search = AStarSearch(grid, start, goal)
    except InvalidInputError as exc:
        console.print(f"[red]Invalid input:[/red] {exc}")
        return EXIT_INVALID

    try:
        if config.animate:
            result = animate_search(
                search,
                console=console,
                step_delay=config.step_delay,
                ascii=config.ascii,
                max_steps=config.max_steps,
            )
        else:
            result = search.run(max_steps=config.max_steps)
    except SearchAbortedError as exc:
        console.print(f"[yellow]Search aborted:[/yellow] {exc}")
        return EXIT_ABORTED

    if config.record_dir is not None:
        record_result(config.record_dir, result, grid=grid, grid_file=grid_file)

    console.print(
        render_outcome(
            result, source=grid, ascii=config.ascii, show_visited=config.show_visited
        )
    )
    return EXIT_FOUND if result.found else EXIT_NO_PATH


def record_result(
    base_dir: Path, result: SearchResult, *, grid: Grid, grid_file: str | None
) -> Path:
    run_dir, log_path = create_run_folder(base_dir)
    write_header(
        log_path,
        metadata={"run_id": run_dir.name, "created_at": run_dir.name},
    )
    append_search_summary(
        log_path, result.summary(rows=grid.rows, cols=grid.cols, grid_file=grid_file)
    )
    logger.info("Recorded search to %s", log_path)
    return run_dir


def _ask_grid_file(paths: GridPaths, console: Console) -> str:
    available = paths.list_grid_files()
    if available:
        console.print(f"Grid files in {paths.base_dir}: {', '.join(available)}")
    return Prompt.ask(
        f"Choose a grid file from {paths.base_dir} and enter its name",
        console=console,
    )
