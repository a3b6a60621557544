"""Pre- and post-tool hooks.

pre_tool inspects the tool input for file paths that belong to another
project and suggests a switch. post_tool records activity and usage
statistics, and scans the tool output for keywords of another project.
"""

from __future__ import annotations

import json
import logging
from datetime import datetime, timezone
from typing import Any

from project_awareness.hooks import SELF_COMMAND_MARKERS, SKIPPED_TOOLS
from project_awareness.hooks.context import HookContext
from project_awareness.paths import logs_dir, skip_prompts_path
from project_awareness.state.activity import (
    SIMPLE_ACTIVITY_LOG,
    append_line,
    log_activity,
    log_suggestion,
)
from project_awareness.state.pointer import NO_PROJECT, read_current_project
from project_awareness.state.stats import known_projects, load_stats, record_tool_use, save_stats
from project_awareness.suggest.keywords import load_keyword_table
from project_awareness.suggest.scoring import (
    MIN_RESULT_LENGTH,
    PATH_SUGGESTION_THRESHOLD,
    ProjectMatch,
    detect_project_from_path,
    suggest_project,
)

logger = logging.getLogger(__name__)


def _parse_tool_input(raw: str) -> tuple[str | None, dict[str, Any]]:
    """Split stdin into (tool name, tool arguments).

    Hosts may send the bare arguments or a payload wrapping them under
    "tool_input" next to "tool_name". Non-JSON input is kept as raw text.
    """
    try:
        data = json.loads(raw)
    except json.JSONDecodeError:
        return None, {"raw_input": raw}
    if not isinstance(data, dict):
        return None, {"raw_input": raw}
    nested = data.get("tool_input")
    if isinstance(nested, dict):
        return data.get("tool_name"), nested
    return None, data


def should_skip_pre_tool(tool_name: str, tool_input: str) -> bool:
    if tool_name in SKIPPED_TOOLS:
        return True
    if tool_name == "Bash":
        return any(marker in tool_input for marker in SELF_COMMAND_MARKERS)
    return False


def pre_tool(ctx: HookContext, tool_input: str) -> ProjectMatch | None:
    """Suggest a project switch when the tool targets another project's files.

    Returns:
        The suggested project match, or None.
    """
    payload_tool, data = _parse_tool_input(tool_input)
    if ctx.tool_name == "unknown" and payload_tool:
        ctx.tool_name = payload_tool

    logger.info("Pre-tool analysis - Tool: %s, Input: %s", ctx.tool_name, tool_input.strip())
    if should_skip_pre_tool(ctx.tool_name, tool_input):
        return None

    table = load_keyword_table(home=ctx.home)
    known = known_projects(ctx.home)

    suggestion = None
    for key in ("file_path", "path"):
        target = data.get(key)
        if not isinstance(target, str) or not target:
            continue
        match = detect_project_from_path(target, table, known)
        if match and match.confidence > PATH_SUGGESTION_THRESHOLD:
            suggestion = match

    if suggestion is None:
        return None

    current = read_current_project(ctx.home)
    if suggestion.project == current:
        return None

    current_label = current or NO_PROJECT
    print("\nPROJECT SWITCH SUGGESTED")
    print(f"   Current:   {current_label}")
    print(f"   Suggested: {suggestion.project} ({suggestion.percent}% confidence)")
    print("   Reason:    Tool operates on a path belonging to another project")
    print(f"   Switch with: project-awareness project switch {suggestion.project}")
    log_suggestion(
        current_label, suggestion.project, suggestion.confidence,
        trigger="pre_tool_path_analysis", tool=ctx.tool_name, home=ctx.home,
    )
    return suggestion


def post_tool(
    ctx: HookContext,
    tool_result: str,
    now: datetime | None = None,
) -> ProjectMatch | None:
    """Record tool activity and look for another project in the output.

    Returns:
        The suggested project match, or None.
    """
    if skip_prompts_path(ctx.home).exists():
        return None

    logger.info("Post-tool analysis - Tool: %s, Agent: %s", ctx.tool_name, ctx.agent_name)
    if ctx.tool_name in SKIPPED_TOOLS:
        return None

    ts = now or datetime.now(timezone.utc)
    current = read_current_project(ctx.home)
    current_label = current or NO_PROJECT

    log_activity({
        "timestamp": ts.isoformat(),
        "session_id": ctx.session_id,
        "tool": ctx.tool_name,
        "agent": ctx.agent_name,
        "project": current_label,
        "working_directory": ctx.working_directory,
        "result_size": len(tool_result),
    }, ctx.home)

    suggestion = None
    if len(tool_result) > MIN_RESULT_LENGTH:
        table = load_keyword_table(home=ctx.home)
        suggestion = suggest_project(tool_result, current_label, table)

    if suggestion:
        print("\nRELATED PROJECT DETECTED IN RESULTS")
        print(f"   Current Project: {current_label}")
        print(f"   Related Project: {suggestion.project} (based on tool output)")
        print(f"   Confidence: {suggestion.percent}%")
        log_suggestion(
            current_label, suggestion.project, suggestion.confidence,
            trigger="post_tool_result_analysis", tool=ctx.tool_name,
            home=ctx.home, now=ts,
        )
        print("   (Suggestion logged for future reference)")

    stats = load_stats(ctx.home)
    record_tool_use(stats, current_label, ctx.working_directory, ctx.agent_name, now=ts)
    save_stats(stats, ctx.home)

    if current:
        append_line(
            logs_dir(ctx.home) / SIMPLE_ACTIVITY_LOG,
            f"{ts.isoformat()}: {ctx.tool_name} used in {current}",
        )
    return suggestion
