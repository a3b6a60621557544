"""Hook runner and installer CLI commands."""

import argparse
import logging
import sys

logger = logging.getLogger(__name__)


def _read_stdin() -> str:
    if sys.stdin is None or sys.stdin.isatty():
        return ""
    return sys.stdin.read()


def cmd_init(args: argparse.Namespace) -> int:
    return _run_hook("session-start", args)


def cmd_hook(args: argparse.Namespace) -> int:
    return _run_hook(args.subcommand, args)


def _run_hook(event: str, args: argparse.Namespace) -> int:
    """Run one lifecycle hook. Always returns 0 so the host is never blocked."""
    from project_awareness.hooks.context import HookContext
    from project_awareness.hooks.session import session_end, session_start
    from project_awareness.hooks.tool import post_tool, pre_tool
    from project_awareness.logs import configure_logging

    configure_logging(args.home)
    ctx = HookContext.from_env(home=args.home)
    try:
        if event == "session-start":
            session_start(ctx)
        elif event == "session-end":
            session_end(ctx)
        elif event == "pre-tool":
            pre_tool(ctx, _read_stdin())
        elif event == "post-tool":
            post_tool(ctx, _read_stdin())
    except Exception as e:
        logger.error("%s hook error: %s", event, e)
        print(f"Project awareness {event} error: {e}", file=sys.stderr)
    return 0


def cmd_install_hooks(args: argparse.Namespace) -> int:
    from project_awareness.install import install_hooks

    try:
        result = install_hooks(
            settings=args.settings,
            command=args.hook_command,
            dry_run=args.dry_run,
            home=args.home,
        )
    except ValueError as e:
        print(f"Cannot update settings: {e}")
        return 1

    print(f"Settings: {result['path']}")
    if result["installed"]:
        print(f"Hooks installed ({len(result['installed'])}):")
        for event in result["installed"]:
            print(f"  - {event}")
    if result["skipped"]:
        print(f"Already present ({len(result['skipped'])}):")
        for event in result["skipped"]:
            print(f"  - {event}")
    if result["dry_run"]:
        print("\n[DRY RUN] No files were modified.")
    return 0
