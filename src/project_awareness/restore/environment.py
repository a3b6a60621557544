"""Rebuild a project's working directory and environment variables."""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import MutableMapping

from project_awareness.sessions.models import SmartSession
from project_awareness.state.stats import load_stats

# Marker file → project type, checked in order
PROJECT_TYPE_MARKERS = [
    ("pyproject.toml", "python"),
    ("setup.py", "python"),
    ("package.json", "node"),
    ("Cargo.toml", "rust"),
    ("go.mod", "go"),
]
DEFAULT_PROJECT_TYPE = "general"


@dataclass
class RestoreResult:
    """Outcome of an environment restoration."""

    project: str
    success: bool = False
    working_directory: str = ""
    environment_variables: dict[str, str] = field(default_factory=dict)
    error: str | None = None


def detect_project_type(directory: Path) -> str:
    for marker, kind in PROJECT_TYPE_MARKERS:
        if (directory / marker).exists():
            return kind
    return DEFAULT_PROJECT_TYPE


def resolve_working_directory(
    project: str,
    home: Path | str | None = None,
    project_record: dict | None = None,
) -> Path:
    """Pick the directory a restored session should start in.

    Order: most recently recorded stats directory that still exists, then
    the project record's working directory, then the current directory.
    """
    entry = load_stats(home).get(project, {})
    for d in reversed(entry.get("directories") or []):
        if Path(d).is_dir():
            return Path(d)

    recorded = (project_record or {}).get("working_directory")
    if recorded and Path(recorded).is_dir():
        return Path(recorded)

    return Path.cwd()


def restore_project_environment(
    project: str,
    session: SmartSession,
    home: Path | str | None = None,
    environ: MutableMapping[str, str] | None = None,
    working_directory: Path | str | None = None,
    project_record: dict | None = None,
) -> RestoreResult:
    """Resolve the working directory and export project variables.

    Variables are set on ``environ`` (the process environment by default).
    """
    env = os.environ if environ is None else environ
    result = RestoreResult(project=project)

    if working_directory:
        workdir = Path(working_directory).expanduser()
    else:
        workdir = resolve_working_directory(project, home, project_record)
    if not workdir.is_dir():
        result.error = f"Working directory not found: {workdir}"
        return result

    variables = {
        "CHITTYCHAT_ACTIVE_PROJECT": project,
        "PROJECT_TYPE": detect_project_type(workdir),
        "PROJECT_SMART_SESSIONS": str(session.consolidated_sessions),
    }
    project_id = (project_record or {}).get("project_id")
    if project_id:
        variables["CHITTYCHAT_PROJECT_ID"] = project_id

    env.update(variables)
    result.working_directory = str(workdir)
    result.environment_variables = variables
    result.success = True
    return result
