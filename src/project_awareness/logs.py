"""Log file setup for hook and CLI invocations.

Each invocation is a separate process, so the file handler is attached
once per process and appends to ``logs/project-awareness.log``.
"""

from __future__ import annotations

import logging
from pathlib import Path

from project_awareness.paths import logs_dir

LOG_FILE_NAME = "project-awareness.log"
LOG_FORMAT = "%(asctime)s: %(message)s"

_HANDLER_NAME = "project-awareness-file"


def configure_logging(home: Path | str | None = None, level: int = logging.INFO) -> Path:
    """Attach the project-awareness file handler to the package logger.

    Replaces a handler installed by an earlier call, so repeated calls
    with different homes never write to more than one file.

    Returns:
        Path to the log file.
    """
    log_dir = logs_dir(home)
    log_dir.mkdir(parents=True, exist_ok=True)
    log_path = log_dir / LOG_FILE_NAME

    logger = logging.getLogger("project_awareness")
    for handler in list(logger.handlers):
        if handler.get_name() == _HANDLER_NAME:
            logger.removeHandler(handler)
            handler.close()

    handler = logging.FileHandler(log_path)
    handler.set_name(_HANDLER_NAME)
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    logger.addHandler(handler)
    logger.setLevel(level)
    return log_path
