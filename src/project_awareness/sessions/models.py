"""Smart session data model."""

from __future__ import annotations

import json
from dataclasses import dataclass, field
from typing import Any

from project_awareness.sessions import (
    GENERATION_METHOD,
    SMART_SESSION_TYPE,
    SMART_SESSION_VERSION,
)


@dataclass
class SmartSession:
    """A loaded smart session: header fields plus the two message bodies."""

    project: str
    consolidated_sessions: int
    generated_at: str = ""
    version: str = SMART_SESSION_VERSION
    generation_method: str = GENERATION_METHOD
    context: str | None = None
    suggestions: str | None = None
    extra: dict[str, Any] = field(default_factory=dict)

    def header(self) -> dict[str, Any]:
        return {
            "type": SMART_SESSION_TYPE,
            "project": self.project,
            "generated_at": self.generated_at,
            "consolidated_sessions": self.consolidated_sessions,
            "version": self.version,
            "generation_method": self.generation_method,
            **self.extra,
        }

    @classmethod
    def from_lines(cls, lines: list[str]) -> SmartSession:
        """Build from the record's JSON lines.

        Raises:
            ValueError: If the header is missing or is not a smart session header.
            json.JSONDecodeError: If a line is not valid JSON.
        """
        if not lines:
            raise ValueError("Empty smart session record")
        header = json.loads(lines[0])
        if not isinstance(header, dict) or "project" not in header:
            raise ValueError("Smart session header has no project")

        context = json.loads(lines[1]) if len(lines) > 1 else None
        guidance = json.loads(lines[2]) if len(lines) > 2 else None
        for label, message in (("context", context), ("suggestions", guidance)):
            if message is not None and not isinstance(message, dict):
                raise ValueError(f"Smart session {label} line is not a JSON object")

        known = {"type", "project", "generated_at", "consolidated_sessions",
                 "version", "generation_method"}
        return cls(
            project=header["project"],
            consolidated_sessions=int(header.get("consolidated_sessions", 0)),
            generated_at=header.get("generated_at", ""),
            version=header.get("version", SMART_SESSION_VERSION),
            generation_method=header.get("generation_method", GENERATION_METHOD),
            context=(context or {}).get("content"),
            suggestions=(guidance or {}).get("content"),
            extra={k: v for k, v in header.items() if k not in known},
        )
