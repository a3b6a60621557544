"""Consolidate a project's session logs into one smart session.

No deduplication, ranking, or summarization happens here: the record is a
template filled with the project name and the number of session files.
"""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass
from datetime import datetime, timezone
from pathlib import Path

from project_awareness.paths import project_dir, projects_dir, smart_session_path
from project_awareness.sessions import (
    GENERATION_METHOD,
    SMART_SESSION_TYPE,
    SMART_SESSION_VERSION,
    SMART_START_MARKER,
)

logger = logging.getLogger(__name__)

CONTEXT_TEMPLATE = """\
## Smart Session Context for {project}

**Project Intelligence:** Synthesized from {count} previous sessions

### Project Overview
This is your consolidated smart session for **{project}**. Based on {count} previous work sessions, this project appears to be an active area of focus.

### Ready to Continue
Your previous work on **{project}** is available for context. The system has consolidated your session history and is ready to assist with continued work on this project.

### Session History Available
- **Total Sessions**: {count}
- **Latest Activity**: Recent work detected
- **Context Preserved**: Previous decisions and patterns maintained

**Ready to work on {project}!**"""

SUGGESTIONS_TEMPLATE = """\
## Quick Start Suggestions for {project}

Based on this being an active project with {count} sessions:

- Review recent file changes
- Continue previous workflows
- Access project-specific resources
- Build on established patterns

This smart session provides instant context restoration for efficient project continuation."""


@dataclass
class ConsolidationResult:
    project: str
    path: Path
    session_count: int


def find_session_files(project_path: Path) -> list[Path]:
    """Raw session logs directly inside a project directory.

    Smart session records are excluded.
    """
    if not project_path.is_dir():
        return []
    return sorted(
        p for p in project_path.iterdir()
        if p.is_file() and p.suffix == ".jsonl" and SMART_START_MARKER not in p.name
    )


def generate_smart_content(
    project: str,
    session_count: int,
    now: datetime | None = None,
) -> str:
    """Render the three-line smart session record."""
    ts = (now or datetime.now(timezone.utc)).isoformat()
    header = {
        "type": SMART_SESSION_TYPE,
        "project": project,
        "generated_at": ts,
        "consolidated_sessions": session_count,
        "version": SMART_SESSION_VERSION,
        "generation_method": GENERATION_METHOD,
    }
    context = {
        "role": "assistant",
        "content": CONTEXT_TEMPLATE.format(project=project, count=session_count),
        "timestamp": ts,
    }
    suggestions = {
        "role": "system",
        "content": SUGGESTIONS_TEMPLATE.format(project=project, count=session_count),
        "timestamp": ts,
    }
    return "\n".join(json.dumps(record) for record in (header, context, suggestions)) + "\n"


def consolidate_project(
    project: str,
    home: Path | str | None = None,
    now: datetime | None = None,
) -> ConsolidationResult | None:
    """Write ``<project>-SMART-START.jsonl`` for one project.

    Returns:
        The result, or None when the project directory is missing or has
        no session files. Nothing is written in that case.
    """
    path = project_dir(project, home)
    if not path.is_dir():
        logger.info("Project not found: %s", project)
        return None

    session_files = find_session_files(path)
    if not session_files:
        logger.info("No sessions found for %s", project)
        return None

    target = smart_session_path(project, home)
    target.write_text(generate_smart_content(project, len(session_files), now))
    logger.info("Smart session created for %s from %d sessions", project, len(session_files))
    return ConsolidationResult(project=project, path=target, session_count=len(session_files))


def consolidate_all(
    home: Path | str | None = None,
    now: datetime | None = None,
) -> list[ConsolidationResult]:
    """Consolidate every project directory that has session files."""
    root = projects_dir(home)
    if not root.is_dir():
        return []
    results = []
    for d in sorted(root.iterdir()):
        if not d.is_dir() or d.name.startswith("."):
            continue
        result = consolidate_project(d.name, home, now)
        if result:
            results.append(result)
    return results
