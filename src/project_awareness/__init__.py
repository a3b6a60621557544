"""Project awareness for Claude Code sessions.

Consolidates per-project session logs into smart sessions, restores a
project's working environment from them, and suggests project switches
from keyword matches in tool activity.
"""

__version__ = "0.1.0"
