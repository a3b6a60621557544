"""Smart sessions — consolidated per-project session records.

A smart session is three JSON lines written to
``projects/<name>/<name>-SMART-START.jsonl``:

    1. header   {"type": "smart_start_session", "project": ..., "consolidated_sessions": N, ...}
    2. context  {"role": "assistant", "content": ...}
    3. guidance {"role": "system", "content": ...}

The record is regenerated wholesale on every consolidation.
"""

SMART_SESSION_TYPE = "smart_start_session"
SMART_SESSION_VERSION = "1.0.0"
GENERATION_METHOD = "quick_consolidation"

# Session files containing this marker are smart sessions, not raw logs
SMART_START_MARKER = "SMART-START"
