"""Read and write the current-project pointer file."""

from __future__ import annotations

from pathlib import Path

from project_awareness.paths import current_project_path

# Label used in logs and stats when no project is active
NO_PROJECT = "none"


def read_current_project(home: Path | str | None = None) -> str | None:
    """Return the active project name.

    An absent pointer file and an empty (or whitespace-only) one both mean
    no active project and return None.
    """
    path = current_project_path(home)
    if not path.is_file():
        return None
    name = path.read_text().strip()
    return name or None


def write_current_project(project: str, home: Path | str | None = None) -> Path:
    """Overwrite the pointer with a project name.

    Raises:
        ValueError: If the name is empty.
    """
    name = project.strip()
    if not name:
        raise ValueError("Project name must not be empty")
    path = current_project_path(home)
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(name + "\n")
    return path
