"""Score free text against the keyword table.

confidence = matched keywords / total keywords for the project. Matching
is a case-insensitive substring test, one linear scan of the table.
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import PurePath
from typing import Iterable

SUGGESTION_THRESHOLD = 0.3
PATH_SUGGESTION_THRESHOLD = 0.6

# Post-tool results of at most this length are not worth analysing
MIN_RESULT_LENGTH = 100


@dataclass(frozen=True)
class ProjectMatch:
    project: str
    matches: int
    confidence: float

    @property
    def percent(self) -> int:
        return round(self.confidence * 100)


def score_projects(text: str, table: list[tuple[str, list[str]]]) -> list[ProjectMatch]:
    """Return a match for every project with at least one keyword in ``text``.

    Results keep table order.
    """
    lowered = text.lower()
    results = []
    for project, keywords in table:
        if not keywords:
            continue
        count = sum(1 for k in keywords if k.lower() in lowered)
        if count:
            results.append(ProjectMatch(project, count, count / len(keywords)))
    return results


def best_match(
    text: str,
    table: list[tuple[str, list[str]]],
    threshold: float = SUGGESTION_THRESHOLD,
) -> ProjectMatch | None:
    """Highest-confidence match strictly above ``threshold``.

    Ties go to the first-declared project.
    """
    best: ProjectMatch | None = None
    for match in score_projects(text, table):
        if match.confidence <= threshold:
            continue
        if best is None or match.confidence > best.confidence:
            best = match
    return best


def suggest_project(
    text: str,
    current_project: str | None,
    table: list[tuple[str, list[str]]],
    threshold: float = SUGGESTION_THRESHOLD,
) -> ProjectMatch | None:
    """Best match, unless it is already the current project."""
    match = best_match(text, table, threshold)
    if match and match.project != current_project:
        return match
    return None


def detect_project_from_path(
    path: str,
    table: list[tuple[str, list[str]]],
    known: Iterable[str] = (),
) -> ProjectMatch | None:
    """Guess the project a file or directory belongs to.

    A path component equal to a project name (case-insensitive) is a
    certain match. Otherwise the path text is keyword-scored.
    """
    names = list(dict.fromkeys([*known, *(name for name, _ in table)]))
    by_lower = {n.lower(): n for n in reversed(names)}
    for part in reversed(PurePath(path).parts):
        project = by_lower.get(part.lower())
        if project:
            return ProjectMatch(project, 1, 1.0)

    matches = score_projects(path, table)
    if not matches:
        return None
    return max(matches, key=lambda m: m.confidence)
