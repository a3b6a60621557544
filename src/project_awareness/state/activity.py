"""Append-only activity, suggestion, and switch logs under logs/."""

from __future__ import annotations

import json
from datetime import datetime, timezone
from pathlib import Path

from project_awareness.paths import logs_dir

ACTIVITY_LOG = "project-activity.jsonl"
SIMPLE_ACTIVITY_LOG = "project-activity-simple.log"
SUGGESTIONS_LOG = "project-suggestions.jsonl"
SWITCHES_LOG = "project-switches.log"


def append_jsonl(path: Path, record: dict) -> None:
    """Append one JSON object as a line."""
    path.parent.mkdir(parents=True, exist_ok=True)
    with open(path, "a") as f:
        f.write(json.dumps(record) + "\n")


def append_line(path: Path, line: str) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)
    with open(path, "a") as f:
        f.write(line.rstrip("\n") + "\n")


def log_activity(record: dict, home: Path | str | None = None) -> Path:
    path = logs_dir(home) / ACTIVITY_LOG
    append_jsonl(path, record)
    return path


def log_suggestion(
    current_project: str,
    suggested_project: str,
    confidence: float,
    trigger: str,
    tool: str | None = None,
    home: Path | str | None = None,
    now: datetime | None = None,
) -> Path:
    """Record a project suggestion for later review."""
    path = logs_dir(home) / SUGGESTIONS_LOG
    append_jsonl(path, {
        "timestamp": (now or datetime.now(timezone.utc)).isoformat(),
        "current_project": current_project,
        "suggested_project": suggested_project,
        "confidence": confidence,
        "trigger": trigger,
        "tool": tool,
    })
    return path


def log_switch(
    previous: str,
    new: str,
    via: str,
    home: Path | str | None = None,
    now: datetime | None = None,
) -> Path:
    """Record a change of the current-project pointer."""
    ts = (now or datetime.now(timezone.utc)).isoformat()
    path = logs_dir(home) / SWITCHES_LOG
    append_line(path, f"{ts}: Project switch - {previous} → {new} (via {via})")
    return path
