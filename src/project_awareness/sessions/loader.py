"""Read smart sessions back from disk."""

from __future__ import annotations

import logging
from pathlib import Path

from project_awareness.paths import projects_dir, smart_session_path
from project_awareness.sessions.models import SmartSession

logger = logging.getLogger(__name__)


def load_smart_session(project: str, home: Path | str | None = None) -> SmartSession | None:
    """Load a project's smart session.

    Returns:
        The session, or None if the record is missing or unreadable.
    """
    path = smart_session_path(project, home)
    if not path.is_file():
        return None
    try:
        lines = path.read_text().strip().splitlines()
        return SmartSession.from_lines(lines)
    except (ValueError, TypeError, OSError) as e:
        logger.warning("Error loading smart session %s: %s", path, e)
        return None


def list_projects(home: Path | str | None = None) -> list[str]:
    """Non-hidden project directory names, sorted."""
    root = projects_dir(home)
    if not root.is_dir():
        return []
    return [d.name for d in sorted(root.iterdir()) if d.is_dir() and not d.name.startswith(".")]


def list_smart_sessions(home: Path | str | None = None) -> list[SmartSession]:
    """Every readable smart session, most consolidated sessions first."""
    sessions = []
    for name in list_projects(home):
        path = smart_session_path(name, home)
        if not path.is_file():
            continue
        try:
            with open(path) as f:
                header_line = f.readline()
            sessions.append(SmartSession.from_lines([header_line]))
        except (ValueError, TypeError, OSError):
            continue
    sessions.sort(key=lambda s: s.consolidated_sessions, reverse=True)
    return sessions
