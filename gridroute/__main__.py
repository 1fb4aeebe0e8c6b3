"""Module entry point for `python -m gridroute`."""

from __future__ import annotations

import argparse
from pathlib import Path

from rich.console import Console

from gridroute.app import (
    DEFAULT_RECORD_DIR,
    EXIT_INVALID,
    RouteConfig,
    configure_logging,
    resolve_grid_dir,
    resolve_log_level,
    resolve_max_steps,
    run_route,
)
from gridroute.render.run_history import list_runs, render_history


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Find the optimum path between two grid cells with A*."
    )
    parser.add_argument(
        "--grid",
        default=None,
        help="Grid file name (looked up in the grid folder) or path.",
    )
    parser.add_argument(
        "--grid-dir",
        type=Path,
        default=None,
        help="Folder holding grid files (default: grid_files).",
    )
    parser.add_argument(
        "--start",
        type=int,
        nargs=2,
        metavar=("ROW", "COL"),
        default=None,
        help="Starting cell. Prompted for when omitted.",
    )
    parser.add_argument(
        "--goal",
        type=int,
        nargs=2,
        metavar=("ROW", "COL"),
        default=None,
        help="Finishing cell. Prompted for when omitted.",
    )
    parser.add_argument(
        "--ascii",
        action="store_true",
        help="Render with ASCII glyphs instead of emoji.",
    )
    parser.add_argument(
        "--show-visited",
        action="store_true",
        help="Mark cells that were queued but not expanded.",
    )
    parser.add_argument(
        "--animate",
        action="store_true",
        help="Show the search live, one expansion per frame.",
    )
    parser.add_argument(
        "--step-delay",
        type=float,
        default=0.05,
        help="Seconds between animation frames.",
    )
    parser.add_argument(
        "--max-steps",
        type=_positive_int,
        default=None,
        help="Abort the search after this many iterations.",
    )
    parser.add_argument(
        "--record-dir",
        type=Path,
        default=None,
        help="Record the search summary under this folder.",
    )
    parser.add_argument(
        "--history",
        action="store_true",
        help="List recorded searches and exit.",
    )
    parser.add_argument(
        "--log-level",
        default=None,
        help="Logging level (default: WARNING).",
    )
    return parser


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    configure_logging(resolve_log_level(args.log_level))

    if args.history:
        Console().print(render_history(list_runs(args.record_dir or DEFAULT_RECORD_DIR)))
        return 0

    try:
        max_steps = resolve_max_steps(args.max_steps)
    except ValueError as exc:
        Console().print(f"[red]Invalid configuration:[/red] {exc}")
        return EXIT_INVALID

    config = RouteConfig(
        grid_file=args.grid,
        grid_dir=resolve_grid_dir(args.grid_dir),
        start=tuple(args.start) if args.start else None,
        goal=tuple(args.goal) if args.goal else None,
        ascii=args.ascii,
        show_visited=args.show_visited,
        animate=args.animate,
        step_delay=args.step_delay,
        max_steps=max_steps,
        record_dir=args.record_dir,
    )
    return run_route(config)


def _positive_int(raw: str) -> int:
    try:
        value = int(raw)
    except ValueError as exc:
        raise argparse.ArgumentTypeError(f"expected an integer, got {raw!r}") from exc
    if value < 1:
        raise argparse.ArgumentTypeError(f"must be at least 1, got {value}")
    return value


if __name__ == "__main__":
    raise SystemExit(main())
