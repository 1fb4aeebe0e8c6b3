"""Search run logging helpers (JSONL)."""

from __future__ import annotations

import json
from datetime import datetime, timezone
from pathlib import Path
from typing import Any

from gridroute.search.contracts import SearchSummary

SCHEMA_VERSION = 1
RUN_LOG_NAME = "run.jsonl"


def create_run_folder(
    base_dir: Path, *, timestamp: str | None = None
) -> tuple[Path, Path]:
    """Create a fresh run folder; same-second runs get a numeric suffix."""
    run_id = timestamp or _format_timestamp(datetime.now(timezone.utc))
    base_dir.mkdir(parents=True, exist_ok=True)
    suffix = 0
    while True:
        run_dir = base_dir / (f"{run_id}-{suffix}" if suffix else run_id)
        try:
            run_dir.mkdir()
        except FileExistsError:
            suffix += 1
            continue
        return run_dir, run_dir / RUN_LOG_NAME


def write_header(path: Path, metadata: dict[str, Any]) -> None:
    record: dict[str, Any] = {
        "type": "header",
        "schema_version": SCHEMA_VERSION,
        "metadata": metadata,
    }
    _append_record(path, record)


def append_search_summary(path: Path, summary: SearchSummary) -> None:
    record: dict[str, Any] = {
        "type": "search",
        "schema_version": SCHEMA_VERSION,
        "summary": summary.model_dump(mode="json"),
    }
    _append_record(path, record)


def _append_record(path: Path, record: dict[str, Any]) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)
    with path.open("a", encoding="utf-8") as handle:
        handle.write(json.dumps(record))
        handle.write("\n")


def _format_timestamp(value: datetime) -> str:
    return value.strftime("%Y-%m-%dT%H-%M-%SZ")
