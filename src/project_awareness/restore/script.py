"""Generate a shell script that replays a restored session in a new terminal."""

from __future__ import annotations

import shlex
from datetime import datetime, timezone
from pathlib import Path

from project_awareness.paths import restore_script_path
from project_awareness.restore.environment import RestoreResult


def render_restore_script(
    project: str,
    result: RestoreResult,
    now: datetime | None = None,
) -> str:
    ts = (now or datetime.now(timezone.utc)).isoformat()
    exports = "\n".join(
        f"export {name}={shlex.quote(value)}"
        for name, value in result.environment_variables.items()
    )
    return f"""#!/bin/bash
# Smart session restoration script for {project}
# Generated: {ts}

echo {shlex.quote(f"Restoring {project} session...")}

cd {shlex.quote(result.working_directory)} || exit 1

{exports}

echo {shlex.quote(f"{project} session restored")}
echo "Directory: $(pwd)"
echo ""

exec "$SHELL"
"""


def write_restore_script(
    project: str,
    result: RestoreResult,
    script_dir: Path | str | None = None,
    now: datetime | None = None,
) -> Path:
    """Write ``restore-<project>.sh`` and make it executable."""
    path = restore_script_path(project, script_dir)
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(render_restore_script(project, result, now))
    path.chmod(0o755)
    return path
