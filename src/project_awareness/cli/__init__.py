"""Unified CLI for project awareness.

Usage:
    project-awareness init
    project-awareness start <project> [--workdir DIR] [--script-dir DIR]
    project-awareness list
    project-awareness consolidate [<project>] [--all]
    project-awareness project current
    project-awareness project switch <name> [--force]
    project-awareness project stats
    project-awareness project skip-prompts [--enable]
    project-awareness project suggest [--keywords FILE] [--threshold N] < text
    project-awareness hook {session-start|pre-tool|post-tool|session-end}
    project-awareness install-hooks [--settings PATH] [--command CMD] [--dry-run]
"""

import argparse
import sys

from project_awareness.cli.hooks import cmd_hook, cmd_init, cmd_install_hooks
from project_awareness.cli.project import (
    cmd_project_current,
    cmd_project_skip_prompts,
    cmd_project_stats,
    cmd_project_suggest,
    cmd_project_switch,
)
from project_awareness.cli.session import cmd_consolidate, cmd_list, cmd_start
from project_awareness.install import DEFAULT_COMMAND
from project_awareness.suggest.scoring import SUGGESTION_THRESHOLD


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="project-awareness",
        description="Smart sessions, environment restoration and project suggestions for Claude Code",
    )
    parser.add_argument(
        "--home", default=None,
        help="Claude home directory (default: $CLAUDE_CONFIG_DIR or ~/.claude)",
    )
    sub = parser.add_subparsers(dest="command")

    # init
    sub.add_parser("init", help="Run the session-start analysis")

    # start
    start = sub.add_parser(
        "start", help="Start a smart session with full environment setup",
    )
    start.add_argument("project")
    start.add_argument(
        "--workdir", default=None,
        help="Working directory (default: last directory used by the project)",
    )
    start.add_argument(
        "--script-dir", default=None,
        help="Where to write the restore script (default: system temp dir)",
    )

    # list
    sub.add_parser("list", help="List available smart sessions")

    # consolidate
    cons = sub.add_parser(
        "consolidate", help="Generate smart sessions from session logs",
    )
    cons.add_argument("project", nargs="?", default=None)
    cons.add_argument(
        "--all", action="store_true",
        help="Consolidate every project directory",
    )

    # project
    proj = sub.add_parser("project", help="Current-project operations")
    proj_sub = proj.add_subparsers(dest="subcommand")
    proj_sub.add_parser("current", help="Show the current project")

    sw = proj_sub.add_parser("switch", help="Set the current project")
    sw.add_argument("name")
    sw.add_argument(
        "--force", action="store_true",
        help="Switch even if the project is unknown",
    )

    proj_sub.add_parser("stats", help="Show project usage statistics")

    skip = proj_sub.add_parser(
        "skip-prompts", help="Disable post-tool project suggestions",
    )
    skip.add_argument(
        "--enable", action="store_true",
        help="Re-enable suggestions instead",
    )

    sug = proj_sub.add_parser(
        "suggest", help="Score text from stdin against project keywords",
    )
    sug.add_argument(
        "--keywords", default=None,
        help="Path to project-keywords.yaml",
    )
    sug.add_argument(
        "--threshold", type=float, default=SUGGESTION_THRESHOLD,
        help=f"Minimum confidence (default {SUGGESTION_THRESHOLD})",
    )

    # hook
    hook = sub.add_parser("hook", help="Run a host lifecycle hook")
    hook_sub = hook.add_subparsers(dest="subcommand")
    hook_sub.add_parser("session-start", help="Session start analysis")
    hook_sub.add_parser("pre-tool", help="Analyse tool input from stdin")
    hook_sub.add_parser("post-tool", help="Analyse tool output from stdin")
    hook_sub.add_parser("session-end", help="Consolidate the current project")

    # install-hooks
    inst = sub.add_parser(
        "install-hooks", help="Register hooks in settings.local.json",
    )
    inst.add_argument(
        "--settings", default=None,
        help="Path to settings.local.json",
    )
    inst.add_argument(
        "--command", dest="hook_command", default=DEFAULT_COMMAND,
        help="Executable the host should run",
    )
    inst.add_argument(
        "--dry-run", action="store_true",
        help="Report without writing",
    )

    return parser


def main() -> int:
    parser = build_parser()
    args = parser.parse_args()

    if not args.command:
        parser.print_help()
        return 0

    dispatch = {
        ("project", "current"): cmd_project_current,
        ("project", "switch"): cmd_project_switch,
        ("project", "stats"): cmd_project_stats,
        ("project", "skip-prompts"): cmd_project_skip_prompts,
        ("project", "suggest"): cmd_project_suggest,
        ("hook", "session-start"): cmd_hook,
        ("hook", "pre-tool"): cmd_hook,
        ("hook", "post-tool"): cmd_hook,
        ("hook", "session-end"): cmd_hook,
    }

    # Handle top-level commands (no subcommand)
    top_level = {
        "init": cmd_init,
        "start": cmd_start,
        "list": cmd_list,
        "consolidate": cmd_consolidate,
        "install-hooks": cmd_install_hooks,
    }
    if args.command in top_level:
        return top_level[args.command](args)

    subcommand: str | None = getattr(args, "subcommand", None)
    handler = dispatch.get((args.command, subcommand or ""))
    if handler:
        return handler(args)

    parser.parse_args([args.command, "--help"])
    return 0


if __name__ == "__main__":
    sys.exit(main())
