"""Claude home path resolution.

Resolves canonical paths to the flat files project awareness reads and
writes. Uses environment variables when available, falls back to
conventional defaults.

Environment variables:
    CLAUDE_CONFIG_DIR — Claude home directory (default: ~/.claude)

Layout under the Claude home:
    projects/<name>/<name>-SMART-START.jsonl
    current-project
    project-stats.json
    project-keywords.yaml
    settings.local.json
    logs/*.log, logs/*.jsonl
"""

from __future__ import annotations

import os
import tempfile
from pathlib import Path

_DEFAULT_HOME = Path.home() / ".claude"

SMART_START_SUFFIX = "-SMART-START.jsonl"


def claude_home(home: Path | str | None = None) -> Path:
    """Return the Claude home directory."""
    if home:
        return Path(home)
    return Path(os.environ.get("CLAUDE_CONFIG_DIR", str(_DEFAULT_HOME)))


def projects_dir(home: Path | str | None = None) -> Path:
    return claude_home(home) / "projects"


def project_dir(name: str, home: Path | str | None = None) -> Path:
    return projects_dir(home) / name


def smart_session_path(name: str, home: Path | str | None = None) -> Path:
    """Return the path of a project's consolidated smart session."""
    return project_dir(name, home) / f"{name}{SMART_START_SUFFIX}"


def current_project_path(home: Path | str | None = None) -> Path:
    return claude_home(home) / "current-project"


def stats_path(home: Path | str | None = None) -> Path:
    return claude_home(home) / "project-stats.json"


def keywords_path(home: Path | str | None = None) -> Path:
    return claude_home(home) / "project-keywords.yaml"


def logs_dir(home: Path | str | None = None) -> Path:
    return claude_home(home) / "logs"


def skip_prompts_path(home: Path | str | None = None) -> Path:
    """Marker file that disables post-tool project suggestions."""
    return claude_home(home) / "skip-project-prompts"


def integration_status_path(home: Path | str | None = None) -> Path:
    return claude_home(home) / "chittychat-integration-status.json"


def settings_path(home: Path | str | None = None) -> Path:
    """Return the path to the host's local settings file."""
    return claude_home(home) / "settings.local.json"


def restore_script_path(name: str, script_dir: Path | str | None = None) -> Path:
    """Return the path of a project's generated restore script."""
    d = Path(script_dir) if script_dir else Path(tempfile.gettempdir())
    return d / f"restore-{name.lower()}.sh"
