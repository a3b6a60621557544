"""Tests for the unified CLI (cli/__init__.py).

Covers:
- Parser construction and argument parsing
- --help for all command groups
- Session, project and hook commands against a temporary Claude home
- Dispatch table completeness
"""

import argparse
import io
import json
from unittest.mock import patch

import pytest

from project_awareness.cli import build_parser, main


def run_cli(*argv, stdin: str | None = None) -> int:
    with patch("sys.argv", ["project-awareness", *argv]):
        if stdin is None:
            return main()
        with patch("sys.stdin", io.StringIO(stdin)):
            return main()


# ── Parser construction ──────────────────────────────────────────


class TestParserConstruction:
    """Verify the parser builds without errors and recognizes all commands."""

    def test_build_parser_returns_parser(self):
        parser = build_parser()
        assert isinstance(parser, argparse.ArgumentParser)

    def test_no_args_shows_help(self, capsys):
        """No arguments should print help and return 0."""
        assert run_cli() == 0
        captured = capsys.readouterr()
        assert "project-awareness" in captured.out

    def test_parser_has_home_flag(self):
        parser = build_parser()
        args = parser.parse_args(["--home", "/tmp/claude", "list"])
        assert args.home == "/tmp/claude"

    def test_install_hooks_command_dest(self):
        args = build_parser().parse_args(["install-hooks", "--command", "/opt/pa"])
        assert args.hook_command == "/opt/pa"


# ── Help output ──────────────────────────────────────────────────


class TestHelpOutput:
    """Verify --help works for every command group."""

    @pytest.mark.parametrize("cmd", [
        ["--help"],
        ["init", "--help"],
        ["start", "--help"],
        ["list", "--help"],
        ["consolidate", "--help"],
        ["project", "--help"],
        ["hook", "--help"],
        ["install-hooks", "--help"],
    ])
    def test_help_exits_zero(self, cmd):
        parser = build_parser()
        with pytest.raises(SystemExit) as exc_info:
            parser.parse_args(cmd)
        assert exc_info.value.code == 0


# ── Dispatch table ───────────────────────────────────────────────


class TestDispatchTable:
    def test_all_project_subcommands_parse(self):
        parser = build_parser()
        for sub in ["current", "switch Acme --force", "stats", "skip-prompts --enable", "suggest"]:
            args = parser.parse_args(["project"] + sub.split())
            assert args.command == "project"

    def test_all_hook_subcommands_parse(self):
        parser = build_parser()
        for sub in ["session-start", "pre-tool", "post-tool", "session-end"]:
            args = parser.parse_args(["hook", sub])
            assert args.subcommand == sub

    def test_group_without_subcommand_shows_help(self):
        with pytest.raises(SystemExit) as exc_info:
            run_cli("project")
        assert exc_info.value.code == 0


# ── Session commands ─────────────────────────────────────────────


class TestSessionCommands:
    def test_consolidate_and_list(self, home, project_factory, capsys):
        project_factory("Acme", sessions=3)
        project_factory("Beta", sessions=5)
        assert run_cli("consolidate", "Acme") == 0
        assert run_cli("consolidate", "Beta") == 0
        capsys.readouterr()

        assert run_cli("list") == 0
        out = capsys.readouterr().out
        assert out.index("Beta (5 sessions)") < out.index("Acme (3 sessions)")

    def test_consolidate_missing_project(self, home, capsys):
        assert run_cli("consolidate", "Ghost") == 1
        assert "Nothing to consolidate" in capsys.readouterr().out

    def test_consolidate_without_project_lists(self, home, project_factory, capsys):
        project_factory("Acme", sessions=1)
        assert run_cli("consolidate") == 0
        assert "- Acme" in capsys.readouterr().out

    def test_consolidate_all(self, home, project_factory, capsys):
        project_factory("Acme", sessions=1)
        project_factory("Beta", sessions=2)
        assert run_cli("consolidate", "--all") == 0
        assert "Consolidated 2 project(s)" in capsys.readouterr().out

    def test_start_without_record_fails(self, home, capsys):
        assert run_cli("start", "Ghost") == 1
        assert "No smart session found" in capsys.readouterr().out

    def test_start(self, home, project_factory, tmp_path, monkeypatch):
        import os
        monkeypatch.setattr(os, "environ", dict(os.environ))
        project_factory("Acme", sessions=2)
        run_cli("consolidate", "Acme")
        rc = run_cli(
            "start", "Acme",
            "--workdir", str(tmp_path),
            "--script-dir", str(tmp_path / "scripts"),
        )
        assert rc == 0
        assert (tmp_path / "scripts" / "restore-acme.sh").is_file()

    def test_explicit_home_flag(self, tmp_path, capsys):
        other = tmp_path / "other-home"
        (other / "projects" / "Solo").mkdir(parents=True)
        (other / "projects" / "Solo" / "a.jsonl").write_text("{}\n")
        assert run_cli("--home", str(other), "consolidate", "Solo") == 0
        assert (other / "projects" / "Solo" / "Solo-SMART-START.jsonl").is_file()


# ── Project commands ─────────────────────────────────────────────


class TestProjectCommands:
    def test_current_none(self, home, capsys):
        assert run_cli("project", "current") == 0
        assert capsys.readouterr().out.strip() == "none"

    def test_switch_known(self, home, project_factory, capsys):
        project_factory("Acme", sessions=0)
        assert run_cli("project", "switch", "Acme") == 0
        assert (home / "current-project").read_text() == "Acme\n"
        switches = (home / "logs" / "project-switches.log").read_text()
        assert "none → Acme (via cli)" in switches

    def test_switch_to_keyword_table_project(self, home):
        assert run_cli("project", "switch", "ChittyFinance") == 0

    def test_switch_unknown_refused(self, home, capsys):
        assert run_cli("project", "switch", "Nowhere") == 1
        assert not (home / "current-project").exists()
        assert run_cli("project", "switch", "Nowhere", "--force") == 0
        assert (home / "current-project").read_text() == "Nowhere\n"

    def test_stats(self, home, capsys):
        (home / "project-stats.json").write_text(json.dumps({
            "Acme": {"tool_uses": 3, "last_used": None, "directories": ["/a"], "agents_used": ["main"]},
        }))
        assert run_cli("project", "stats") == 0
        out = capsys.readouterr().out
        assert "Acme" in out
        assert "3 tool uses" in out

    def test_skip_prompts_toggle(self, home):
        assert run_cli("project", "skip-prompts") == 0
        assert (home / "skip-project-prompts").exists()
        assert run_cli("project", "skip-prompts", "--enable") == 0
        assert not (home / "skip-project-prompts").exists()

    def test_suggest_from_stdin(self, home, capsys):
        assert run_cli("project", "suggest", stdin="tenant lease in chicago") == 0
        out = capsys.readouterr().out
        assert "ChiCo-Properties" in out
        assert "Suggested project: ChiCo-Properties (60% confidence)" in out

    def test_suggest_malformed_keywords(self, home, capsys):
        (home / "project-keywords.yaml").write_text("projects: [unclosed\n")
        assert run_cli("project", "suggest", stdin="tenant lease") == 1
        assert "Cannot load project keywords" in capsys.readouterr().out

    def test_switch_with_invalid_keywords(self, home, capsys):
        (home / "project-keywords.yaml").write_text("- a\n- b\n")
        assert run_cli("project", "switch", "Acme") == 1
        assert "Cannot load project keywords" in capsys.readouterr().out
        assert not (home / "current-project").exists()

    def test_stats_skips_malformed_entries(self, home, capsys):
        (home / "project-stats.json").write_text(json.dumps({
            "x": 5,
            "Acme": {"tool_uses": 3, "directories": ["/a"], "agents_used": ["main"]},
        }))
        assert run_cli("project", "stats") == 0
        out = capsys.readouterr().out
        assert "Acme" in out
        assert "x " not in out


# ── Hooks ────────────────────────────────────────────────────────


class TestHookCommands:
    def test_post_tool_hook(self, home, monkeypatch):
        monkeypatch.setenv("CLAUDE_TOOL_NAME", "Read")
        monkeypatch.setenv("CLAUDE_AGENT_NAME", "main")
        assert run_cli("hook", "post-tool", stdin="some tool output") == 0
        assert (home / "logs" / "project-activity.jsonl").is_file()
        assert "Post-tool analysis - Tool: Read" in (home / "logs" / "project-awareness.log").read_text()

    def test_hook_errors_never_fail(self, home, capsys):
        with patch("project_awareness.hooks.session.consolidate_project", side_effect=OSError("disk")):
            (home / "current-project").write_text("Acme\n")
            assert run_cli("hook", "session-end") == 0
        assert "session-end error: disk" in capsys.readouterr().err

    def test_init_runs_session_start(self, home, capsys):
        assert run_cli("init") == 0
        assert "initialization complete" in capsys.readouterr().out

    def test_install_hooks(self, home, capsys):
        assert run_cli("install-hooks") == 0
        assert "Hooks installed (4)" in capsys.readouterr().out
        assert (home / "settings.local.json").is_file()

    def test_install_hooks_bad_settings(self, home, capsys):
        (home / "settings.local.json").write_text("{broken")
        assert run_cli("install-hooks") == 1
        assert "Cannot update settings" in capsys.readouterr().out
