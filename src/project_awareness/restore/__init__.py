"""Environment restoration from smart sessions."""

from project_awareness.restore.environment import RestoreResult, restore_project_environment
from project_awareness.restore.script import render_restore_script, write_restore_script
from project_awareness.restore.smart_start import start_smart_session

__all__ = [
    "RestoreResult",
    "render_restore_script",
    "restore_project_environment",
    "start_smart_session",
    "write_restore_script",
]
