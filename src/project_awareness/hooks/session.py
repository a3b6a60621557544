"""Session start and end hooks."""

from __future__ import annotations

import logging

from project_awareness.hooks.context import HookContext
from project_awareness.paths import logs_dir
from project_awareness.sessions.consolidator import ConsolidationResult, consolidate_project
from project_awareness.state.pointer import read_current_project
from project_awareness.state.stats import known_projects
from project_awareness.suggest.keywords import load_keyword_table
from project_awareness.suggest.scoring import PATH_SUGGESTION_THRESHOLD, detect_project_from_path

logger = logging.getLogger(__name__)


def session_start(ctx: HookContext) -> str | None:
    """Report the active project and whether the working directory fits it.

    Returns:
        The current project name, or None.
    """
    logs_dir(ctx.home).mkdir(parents=True, exist_ok=True)
    logger.info("Project awareness startup hook triggered for session %s", ctx.session_id)
    print("Project awareness: starting analysis...")

    current = read_current_project(ctx.home)
    if current:
        print(f"Current project: {current}")
    else:
        print("No current project set")

    table = load_keyword_table(home=ctx.home)
    match = detect_project_from_path(ctx.working_directory, table, known_projects(ctx.home))
    if match and match.confidence > PATH_SUGGESTION_THRESHOLD and match.project != current:
        print(f"Working directory looks like {match.project} ({match.percent}% confidence)")
        print(f"   Switch with: project-awareness project switch {match.project}")

    print("Project awareness initialization complete")
    return current


def session_end(ctx: HookContext) -> ConsolidationResult | None:
    """Regenerate the current project's smart session."""
    logger.info("Session end hook triggered for session %s", ctx.session_id)
    current = read_current_project(ctx.home)
    if not current:
        logger.info("No current project, nothing to consolidate")
        return None

    result = consolidate_project(current, ctx.home)
    if result:
        print(f"Session consolidation complete: {result.project} ({result.session_count} sessions)")
    else:
        print(f"No sessions to consolidate for {current}")
    return result
