"""Invocation context passed to hooks by the host environment."""

from __future__ import annotations

import os
import time
from dataclasses import dataclass, field
from pathlib import Path
from typing import Mapping


@dataclass
class HookContext:
    tool_name: str = "unknown"
    agent_name: str = "unknown"
    session_id: str = ""
    working_directory: str = field(default_factory=os.getcwd)
    home: Path | str | None = None

    @classmethod
    def from_env(
        cls,
        environ: Mapping[str, str] | None = None,
        home: Path | str | None = None,
    ) -> HookContext:
        """Read CLAUDE_TOOL_NAME, CLAUDE_AGENT_NAME and CLAUDE_SESSION_ID."""
        env = os.environ if environ is None else environ
        return cls(
            tool_name=env.get("CLAUDE_TOOL_NAME") or "unknown",
            agent_name=env.get("CLAUDE_AGENT_NAME") or "unknown",
            session_id=env.get("CLAUDE_SESSION_ID") or str(int(time.time())),
            home=home,
        )
