"""Animate an A* run frame by frame with Rich Live."""

from __future__ import annotations

import time

from rich.console import Console, Group, RenderableType
from rich.live import Live
from rich.panel import Panel
from rich.text import Text

from gridroute.render.board import render_board
from gridroute.search.contracts import SearchAbortedError, SearchStatus
from gridroute.search.driver import AStarSearch, SearchResult


def render_search_frame(search: AStarSearch, *, ascii: bool = False) -> RenderableType:
    board = render_board(search.grid, ascii=ascii, show_visited=True)
    status = Text(
        f"Step {search.steps}  expanded {search.expanded}  "
        f"frontier {search.frontier_size}",
        style="bold",
    )
    return Panel(Group(board, status), title=f"Searching ({search.status.value})")


def animate_search(
    search: AStarSearch,
    *,
    console: Console | None = None,
    step_delay: float = 0.05,
    ascii: bool = False,
    max_steps: int | None = None,
) -> SearchResult:
    console = console or Console()
    with Live(console=console, auto_refresh=False, transient=True) as live:
        live.update(render_search_frame(search, ascii=ascii), refresh=True)
        while search.status == SearchStatus.RUNNING:
            if max_steps is not None and search.steps >= max_steps:
                raise SearchAbortedError(
                    f"Search stopped after {search.steps} steps without finishing."
                )
            search.step()
            live.update(render_search_frame(search, ascii=ascii), refresh=True)
            if step_delay > 0:
                time.sleep(step_delay)
    return search.result()
