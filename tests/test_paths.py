"""Tests for Claude home path resolution."""

from pathlib import Path

from project_awareness import paths


class TestClaudeHome:
    def test_env_override(self, monkeypatch, tmp_path):
        monkeypatch.setenv("CLAUDE_CONFIG_DIR", str(tmp_path))
        assert paths.claude_home() == tmp_path

    def test_explicit_home_wins(self, monkeypatch, tmp_path):
        monkeypatch.setenv("CLAUDE_CONFIG_DIR", "/elsewhere")
        assert paths.claude_home(tmp_path) == tmp_path

    def test_default_is_dot_claude(self, monkeypatch):
        monkeypatch.delenv("CLAUDE_CONFIG_DIR", raising=False)
        assert paths.claude_home() == Path.home() / ".claude"


class TestLayout:
    def test_smart_session_path(self, tmp_path):
        p = paths.smart_session_path("Acme", tmp_path)
        assert p == tmp_path / "projects" / "Acme" / "Acme-SMART-START.jsonl"

    def test_flat_files(self, tmp_path):
        assert paths.current_project_path(tmp_path) == tmp_path / "current-project"
        assert paths.stats_path(tmp_path) == tmp_path / "project-stats.json"
        assert paths.logs_dir(tmp_path) == tmp_path / "logs"

    def test_restore_script_lowercases(self, tmp_path):
        p = paths.restore_script_path("Arias-v-Bianchi", tmp_path)
        assert p == tmp_path / "restore-arias-v-bianchi.sh"
