"""Register project-awareness hooks in the host's settings.local.json.

Hook entries follow the host settings layout::

    "hooks": {
      "PreToolUse": [
        {"matcher": "*", "hooks": [{"type": "command", "command": "project-awareness hook pre-tool"}]}
      ]
    }

Events that already carry a project-awareness command are left alone.
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

from project_awareness.paths import settings_path

DEFAULT_COMMAND = "project-awareness"

# Host event → (hook subcommand, tool matcher or None)
HOOK_EVENTS: dict[str, tuple[str, str | None]] = {
    "SessionStart": ("session-start", None),
    "PreToolUse":   ("pre-tool", "*"),
    "PostToolUse":  ("post-tool", "*"),
    "SessionEnd":   ("session-end", None),
}

_MARKER = "project-awareness"


def _entry_commands(entry: Any) -> list[str]:
    if not isinstance(entry, dict):
        return []
    inner = entry.get("hooks", [])
    if not isinstance(inner, list):
        raise ValueError("Hook entry 'hooks' is not a list")
    commands = [h.get("command") for h in inner if isinstance(h, dict)]
    commands.append(entry.get("command"))
    return [cmd for cmd in commands if isinstance(cmd, str)]


def _has_hook(entries: list, marker: str) -> bool:
    return any(marker in cmd for entry in entries for cmd in _entry_commands(entry))


def load_settings(path: Path) -> dict:
    if not path.exists():
        return {}
    with open(path) as f:
        data = json.load(f)
    if not isinstance(data, dict):
        raise ValueError(f"{path} is not a JSON object")
    return data


def install_hooks(
    settings: Path | str | None = None,
    command: str = DEFAULT_COMMAND,
    dry_run: bool = False,
    home: Path | str | None = None,
) -> dict[str, Any]:
    """Merge the four lifecycle hooks into the settings file.

    Args:
        settings: Path to settings.local.json. Defaults to the Claude home.
        command: Executable the host should call.
        dry_run: Report without writing.
        home: Claude home override used when ``settings`` is not given.

    Raises:
        json.JSONDecodeError: If the settings file is not valid JSON.
        ValueError: If the settings file or its hooks table is malformed.
    """
    path = Path(settings) if settings else settings_path(home)
    data = load_settings(path)
    hooks = data.setdefault("hooks", {})
    if not isinstance(hooks, dict):
        raise ValueError(f"{path}: 'hooks' is not a JSON object")

    installed = []
    skipped = []
    for event, (subcommand, matcher) in HOOK_EVENTS.items():
        entries = hooks.setdefault(event, [])
        if not isinstance(entries, list):
            raise ValueError(f"{path}: hooks for {event} are not a list")
        if _has_hook(entries, _MARKER) or _has_hook(entries, f"{command} hook {subcommand}"):
            skipped.append(event)
            continue
        entry: dict[str, Any] = {
            "hooks": [{"type": "command", "command": f"{command} hook {subcommand}"}],
        }
        if matcher:
            entry = {"matcher": matcher, **entry}
        entries.append(entry)
        installed.append(event)

    if installed and not dry_run:
        path.parent.mkdir(parents=True, exist_ok=True)
        with open(path, "w") as f:
            json.dump(data, f, indent=2)
            f.write("\n")

    return {
        "path": str(path),
        "installed": installed,
        "skipped": skipped,
        "dry_run": dry_run,
    }
