"""Host lifecycle hooks.

Each hook runs as its own process, triggered by the host on session
start/end and before/after every tool call. Hooks report to stdout and
the log files; they never fail the host.
"""

# Tools whose calls are never analysed: they only redirect to other tools
SKIPPED_TOOLS = ("Task", "TodoWrite")

# Bash commands mentioning these belong to project awareness itself
SELF_COMMAND_MARKERS = ("project-awareness", "chittychat")
