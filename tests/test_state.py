"""Tests for the current-project pointer, usage stats and activity logs."""

import json
from datetime import datetime, timezone

import pytest

from project_awareness.state.activity import append_jsonl, log_suggestion, log_switch
from project_awareness.state.pointer import read_current_project, write_current_project
from project_awareness.state.stats import (
    known_projects,
    load_stats,
    record_tool_use,
    save_stats,
)

NOW = datetime(2025, 3, 1, 12, 0, tzinfo=timezone.utc)


class TestPointer:
    def test_absent_is_none(self, home):
        assert read_current_project(home) is None

    def test_empty_is_none(self, home):
        (home / "current-project").write_text("  \n")
        assert read_current_project(home) is None

    def test_write_then_read(self, home):
        write_current_project("Acme", home)
        assert read_current_project(home) == "Acme"

    def test_write_strips_and_overwrites(self, home):
        write_current_project("Acme", home)
        write_current_project("  Beta\n", home)
        assert (home / "current-project").read_text() == "Beta\n"

    def test_write_empty_rejected(self, home):
        with pytest.raises(ValueError):
            write_current_project("   ", home)


class TestStats:
    def test_missing_file(self, home):
        assert load_stats(home) == {}

    def test_corrupt_file(self, home):
        (home / "project-stats.json").write_text("{not json")
        assert load_stats(home) == {}

    def test_non_object_file(self, home):
        (home / "project-stats.json").write_text("[1, 2]")
        assert load_stats(home) == {}

    def test_non_object_entries_dropped(self, home):
        (home / "project-stats.json").write_text(
            json.dumps({"x": 5, "Acme": {"tool_uses": 2}})
        )
        assert load_stats(home) == {"Acme": {"tool_uses": 2}}

    def test_record_replaces_non_object_entry(self):
        stats = record_tool_use({"Acme": "broken"}, "Acme", "/work/a", "main", NOW)
        assert stats["Acme"]["tool_uses"] == 1
        assert stats["Acme"]["directories"] == ["/work/a"]

    def test_record_accumulates(self):
        stats = {}
        record_tool_use(stats, "Acme", "/work/a", "main", NOW)
        record_tool_use(stats, "Acme", "/work/b", "main", NOW)
        record_tool_use(stats, "Acme", "/work/a", "reviewer", NOW)
        entry = stats["Acme"]
        assert entry["tool_uses"] == 3
        assert entry["last_used"] == NOW.isoformat()
        assert entry["directories"] == ["/work/a", "/work/b"]
        assert entry["agents_used"] == ["main", "reviewer"]

    def test_save_and_load(self, home):
        stats = record_tool_use({}, "Acme", "/work/a", "main", NOW)
        path = save_stats(stats, home)
        assert path.read_text().endswith("\n")
        assert load_stats(home) == stats

    def test_known_projects(self, home, project_factory):
        project_factory("Acme", sessions=0)
        save_stats({"Beta": {"tool_uses": 1}, "Acme": {"tool_uses": 2}}, home)
        names = known_projects(home, [("Gamma", ["g"]), ("Beta", ["b"])])
        assert names == ["Acme", "Beta", "Gamma"]


class TestActivity:
    def test_append_jsonl(self, tmp_path):
        path = tmp_path / "logs" / "x.jsonl"
        append_jsonl(path, {"a": 1})
        append_jsonl(path, {"a": 2})
        assert [json.loads(line)["a"] for line in path.read_text().splitlines()] == [1, 2]

    def test_log_suggestion(self, home):
        path = log_suggestion("none", "Acme", 0.5, "post_tool_result_analysis", "Read", home, NOW)
        record = json.loads(path.read_text())
        assert record == {
            "timestamp": NOW.isoformat(),
            "current_project": "none",
            "suggested_project": "Acme",
            "confidence": 0.5,
            "trigger": "post_tool_result_analysis",
            "tool": "Read",
        }

    def test_log_switch(self, home):
        path = log_switch("Acme", "Beta", "cli", home, NOW)
        assert path.read_text() == f"{NOW.isoformat()}: Project switch - Acme → Beta (via cli)\n"
