"""Per-project usage statistics stored in project-stats.json.

Structure::

    {
      "<project>": {
        "tool_uses": 12,
        "last_used": "2025-01-01T00:00:00+00:00",
        "directories": ["/path/a", "/path/b"],
        "agents_used": ["main"]
      }
    }

Directory and agent lists keep first-seen order without duplicates.
"""

from __future__ import annotations

import json
import logging
from datetime import datetime, timezone
from pathlib import Path
from typing import Iterable

from project_awareness.paths import projects_dir, stats_path

logger = logging.getLogger(__name__)


def load_stats(home: Path | str | None = None) -> dict:
    """Load project-stats.json.

    A missing or unparseable file yields an empty mapping, so the next
    save starts the record over.
    """
    path = stats_path(home)
    if not path.is_file():
        return {}
    try:
        with open(path) as f:
            data = json.load(f)
    except (json.JSONDecodeError, OSError) as e:
        logger.warning("Discarding unreadable stats file %s: %s", path, e)
        return {}
    if not isinstance(data, dict):
        logger.warning("Discarding stats file %s: not a JSON object", path)
        return {}
    for project in [k for k, v in data.items() if not isinstance(v, dict)]:
        logger.warning("Dropping malformed stats entry %r in %s", project, path)
        del data[project]
    return data


def save_stats(stats: dict, home: Path | str | None = None) -> Path:
    """Write project-stats.json with consistent formatting."""
    path = stats_path(home)
    path.parent.mkdir(parents=True, exist_ok=True)
    with open(path, "w") as f:
        json.dump(stats, f, indent=2)
        f.write("\n")
    return path


def _merge_unique(existing: Iterable[str] | None, value: str | None) -> list[str]:
    merged = list(dict.fromkeys(existing or []))
    if value and value not in merged:
        merged.append(value)
    return merged


def record_tool_use(
    stats: dict,
    project: str,
    directory: str | None,
    agent: str | None,
    now: datetime | None = None,
) -> dict:
    """Count one tool invocation against a project.

    Mutates and returns ``stats``.
    """
    ts = (now or datetime.now(timezone.utc)).isoformat()
    entry = stats.get(project)
    if not isinstance(entry, dict):
        entry = stats[project] = {}
    entry["tool_uses"] = int(entry.get("tool_uses", 0)) + 1
    entry["last_used"] = ts
    entry["directories"] = _merge_unique(entry.get("directories"), directory)
    entry["agents_used"] = _merge_unique(entry.get("agents_used"), agent)
    return stats


def known_projects(
    home: Path | str | None = None,
    table: list[tuple[str, list[str]]] | None = None,
) -> list[str]:
    """Names of every project with a session directory, stats entry, or keyword entry."""
    names: list[str] = []
    root = projects_dir(home)
    if root.is_dir():
        names.extend(
            d.name for d in sorted(root.iterdir())
            if d.is_dir() and not d.name.startswith(".")
        )
    names.extend(load_stats(home).keys())
    if table:
        names.extend(name for name, _ in table)
    return list(dict.fromkeys(names))
