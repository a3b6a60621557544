"""Smart start — load a smart session and restore the project environment.

The steps:
1. Load the project's smart session (missing → fail, nothing else runs)
2. Resolve the project record
3. Restore working directory and environment variables
4. Print the session context
5. Write the integration status file
6. Write the restore script for a new terminal
"""

from __future__ import annotations

import json
import logging
import os
import time
from datetime import datetime, timezone
from pathlib import Path
from typing import MutableMapping

from project_awareness.paths import integration_status_path
from project_awareness.restore.environment import restore_project_environment
from project_awareness.restore.script import write_restore_script
from project_awareness.sessions.loader import load_smart_session
from project_awareness.sessions.models import SmartSession

logger = logging.getLogger(__name__)

DEFAULT_ENDPOINT = "https://api.chitty.cc"


def chat_endpoint() -> str:
    return os.environ.get("CHITTYCHAT_ENDPOINT", DEFAULT_ENDPOINT)


def load_integration_status(home: Path | str | None = None) -> dict:
    path = integration_status_path(home)
    if not path.is_file():
        return {}
    try:
        with open(path) as f:
            data = json.load(f)
    except (json.JSONDecodeError, OSError):
        return {}
    return data if isinstance(data, dict) else {}


def connect_project(project: str, home: Path | str | None = None) -> dict:
    """Resolve the project record for a smart start.

    The project-management API is not called; the record is local. An id
    issued to the same project by an earlier start is reused.
    """
    status = load_integration_status(home)
    if status.get("project") == project and status.get("project_id"):
        project_id = status["project_id"]
    else:
        project_id = f"PROJ-{int(time.time() * 1000)}"
    return {"name": project, "project_id": project_id, "status": "local"}


def write_integration_status(
    project: str,
    record: dict,
    home: Path | str | None = None,
    now: datetime | None = None,
) -> Path:
    path = integration_status_path(home)
    path.parent.mkdir(parents=True, exist_ok=True)
    status = {
        "project": project,
        "project_id": record.get("project_id"),
        "endpoint": chat_endpoint(),
        "session_started": (now or datetime.now(timezone.utc)).isoformat(),
        "status": "active",
    }
    with open(path, "w") as f:
        json.dump(status, f, indent=2)
        f.write("\n")
    return path


def format_smart_context(session: SmartSession) -> str:
    rule = "=" * 60
    lines = ["", rule, "SMART SESSION CONTEXT", rule]
    if session.context:
        lines.append(session.context)
    if session.suggestions:
        lines.extend(["", session.suggestions])
    lines.extend(["", rule, "ENVIRONMENT READY", rule, ""])
    return "\n".join(lines)


def start_smart_session(
    project: str,
    home: Path | str | None = None,
    environ: MutableMapping[str, str] | None = None,
    script_dir: Path | str | None = None,
    working_directory: Path | str | None = None,
) -> bool:
    """Start a smart session with full environment setup.

    Returns:
        True when the environment was restored, False otherwise. A missing
        record is a False return, not an exception.
    """
    print(f"Starting smart session for {project}...")

    session = load_smart_session(project, home)
    if session is None:
        print(f"No smart session found for {project}")
        return False
    print(f"Smart session loaded ({session.consolidated_sessions} sessions consolidated)")

    try:
        record = connect_project(project, home)
        result = restore_project_environment(
            project, session,
            home=home,
            environ=environ,
            working_directory=working_directory,
            project_record=record,
        )
        if not result.success:
            print(f"Environment setup failed: {result.error}")
            return False

        print(format_smart_context(session))
        write_integration_status(project, record, home)
        script = write_restore_script(project, result, script_dir)
    except Exception as e:
        logger.error("Smart session failed for %s: %s", project, e)
        print(f"Smart session failed for {project}: {e}")
        return False

    logger.info("Smart session started for %s in %s", project, result.working_directory)
    print(f"Smart session active for {project}")
    print(f"  Working directory: {result.working_directory}")
    print(f"  Project id:        {record['project_id']}")
    print(f"  Restore script:    {script}")
    print(f"  Run: bash {script} (to restore the session in a new terminal)")
    return True
