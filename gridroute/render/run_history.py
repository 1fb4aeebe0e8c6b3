"""Read recorded search runs and render them as a table."""

from __future__ import annotations

import json
from dataclasses import dataclass
from pathlib import Path
from typing import Iterator

from pydantic import ValidationError
from rich.console import RenderableType
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from gridroute.db.run_log import RUN_LOG_NAME
from gridroute.search.contracts import SearchSummary


@dataclass(frozen=True)
class RunEntry:
    run_dir: Path
    run_id: str
    summaries: list[SearchSummary]


def read_search_summaries(path: Path) -> Iterator[SearchSummary]:
    with path.open("r", encoding="utf-8") as handle:
        for line in handle:
            record = _parse_record(line)
            if not record or record.get("type") != "search":
                continue
            summary = record.get("summary")
            if summary is None:
                continue
            try:
                yield SearchSummary.model_validate(summary)
            except ValidationError:
                continue


def list_runs(base_dir: Path) -> list[RunEntry]:
    if not base_dir.exists():
        return []
    entries: list[RunEntry] = []
    for path in sorted(base_dir.iterdir()):
        if not path.is_dir():
            continue
        log_path = path / RUN_LOG_NAME
        if not log_path.exists():
            continue
        entries.append(
            RunEntry(
                run_dir=path,
                run_id=_read_run_id(log_path) or path.name,
                summaries=list(read_search_summaries(log_path)),
            )
        )
    return entries


def render_history(entries: list[RunEntry]) -> RenderableType:
    if not entries:
        return Panel(Text("No recorded runs."), title="Run History")
    table = Table(show_header=True, header_style="bold")
    table.add_column("Run ID")
    table.add_column("Grid")
    table.add_column("Start")
    table.add_column("Goal")
    table.add_column("Status")
    table.add_column("Steps")
    for entry in entries:
        for summary in entry.summaries:
            table.add_row(
                entry.run_id,
                summary.grid_file or "-",
                f"{summary.start[0]} {summary.start[1]}",
                f"{summary.goal[0]} {summary.goal[1]}",
                summary.status.value,
                str(summary.cost) if summary.cost is not None else "-",
            )
    return Panel(table, title="Run History")


def _read_run_id(log_path: Path) -> str | None:
    try:
        line = log_path.read_text(encoding="utf-8").splitlines()[0]
        record = json.loads(line)
    except (IndexError, json.JSONDecodeError):
        return None
    if not isinstance(record, dict):
        return None
    metadata = record.get("metadata")
    if not isinstance(metadata, dict):
        return None
    run_id = metadata.get("run_id")
    return run_id if isinstance(run_id, str) else None


def _parse_record(line: str) -> dict | None:
    try:
        record = json.loads(line)
    except json.JSONDecodeError:
        return None
    return record if isinstance(record, dict) else None
