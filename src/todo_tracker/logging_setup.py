# src/todo_tracker/logging_setup.py

from __future__ import annotations

import logging
import sys
from pathlib import Path

from .tasks.task_models import TIMESTAMP_FORMAT

LOG_FILE_NAME = "todo_tracker.log"


class _ConsoleNoiseFilter(logging.Filter):
    """
    Keep the interactive menu readable:
    - allow todo_tracker logs (level is decided by the handler)
    - suppress third-party noise and captured Python warnings unless ERROR+
    """

    def filter(self, record: logging.LogRecord) -> bool:
        name = record.name

        if name == "todo_tracker" or name.startswith("todo_tracker."):
            return True

        return record.levelno >= logging.ERROR


def setup_logging(
    *,
    log_dir: str | Path = ".local/todo",
    console_level: int = logging.WARNING,
    file_level: int = logging.DEBUG,
) -> Path:
    """
    Configure diagnostic logging with:
    - Console handler: stderr, filtered so it does not drown the menu
    - File handler: full logs for debugging

    This is separate from the audit log (which records user actions).
    Call this ONCE, very early (before first logger.info). Returns the log file path.
    """
    log_file = Path(log_dir) / LOG_FILE_NAME
    log_file.parent.mkdir(parents=True, exist_ok=True)

    fmt = logging.Formatter(
        fmt="%(asctime)s.%(msecs)03d %(levelname)s %(name)s: %(message)s",
        datefmt=TIMESTAMP_FORMAT,
    )

    console = logging.StreamHandler(sys.stderr)
    console.addFilter(_ConsoleNoiseFilter())
    diagnostics = logging.FileHandler(log_file, encoding="utf-8", errors="backslashreplace")

    root = logging.getLogger()
    root.setLevel(logging.DEBUG)
    for h in list(root.handlers):
        root.removeHandler(h)
    for handler, level in ((console, console_level), (diagnostics, file_level)):
        handler.setLevel(level)
        handler.setFormatter(fmt)
        root.addHandler(handler)

    logging.captureWarnings(True)
    return log_file
