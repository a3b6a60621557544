"""Keyword-based project suggestion."""

from project_awareness.suggest.keywords import DEFAULT_KEYWORD_TABLE, load_keyword_table
from project_awareness.suggest.scoring import (
    PATH_SUGGESTION_THRESHOLD,
    SUGGESTION_THRESHOLD,
    ProjectMatch,
    best_match,
    detect_project_from_path,
    score_projects,
    suggest_project,
)

__all__ = [
    "DEFAULT_KEYWORD_TABLE",
    "PATH_SUGGESTION_THRESHOLD",
    "SUGGESTION_THRESHOLD",
    "ProjectMatch",
    "best_match",
    "detect_project_from_path",
    "load_keyword_table",
    "score_projects",
    "suggest_project",
]
