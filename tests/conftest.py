"""Shared test fixtures for project-awareness."""

from pathlib import Path

import pytest

FIXTURES = Path(__file__).parent / "fixtures"


@pytest.fixture
def home(tmp_path, monkeypatch):
    """An empty Claude home, also exported as CLAUDE_CONFIG_DIR."""
    claude_home = tmp_path / ".claude"
    claude_home.mkdir()
    monkeypatch.setenv("CLAUDE_CONFIG_DIR", str(claude_home))
    return claude_home


def make_project(home: Path, name: str, sessions: int) -> Path:
    """Create a project directory holding ``sessions`` raw session logs."""
    project = home / "projects" / name
    project.mkdir(parents=True, exist_ok=True)
    for i in range(sessions):
        (project / f"session-{i:03d}.jsonl").write_text('{"role": "user", "content": "hi"}\n')
    return project


@pytest.fixture
def project_factory(home):
    def _make(name: str, sessions: int = 3) -> Path:
        return make_project(home, name, sessions)
    return _make
