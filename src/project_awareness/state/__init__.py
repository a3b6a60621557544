"""Persistent project state — current-project pointer, usage stats, activity logs."""

from project_awareness.state.activity import append_jsonl, log_suggestion, log_switch
from project_awareness.state.pointer import (
    NO_PROJECT,
    read_current_project,
    write_current_project,
)
from project_awareness.state.stats import (
    known_projects,
    load_stats,
    record_tool_use,
    save_stats,
)

__all__ = [
    "NO_PROJECT",
    "append_jsonl",
    "known_projects",
    "load_stats",
    "log_suggestion",
    "log_switch",
    "read_current_project",
    "record_tool_use",
    "save_stats",
    "write_current_project",
]
