# src/todo_tracker/tasks/audit_log.py

from __future__ import annotations

import logging
from collections.abc import Callable
from datetime import datetime
from pathlib import Path

from .task_models import format_timestamp, local_now

logger = logging.getLogger(__name__)


class AuditLog:
    """
    Append-only audit trail of tracker actions.

    Each entry is one line: "[YYYY-MM-DD HH:MM:SS] <action>".
    The file is opened, appended to and closed on every call (no persistent handle).
    """

    def __init__(
        self,
        path: str | Path = "todo_log.txt",
        *,
        clock: Callable[[], datetime] = local_now,
    ) -> None:
        self._path = Path(path)
        self._clock = clock
        try:
            self._path.parent.mkdir(parents=True, exist_ok=True)
        except OSError:
            logger.warning("Could not create audit log directory for %s", self._path)

    @property
    def path(self) -> Path:
        return self._path

    def record(self, action: str) -> None:
        line = f"[{format_timestamp(self._clock())}] {action}\n"
        try:
            with open(self._path, "a", encoding="utf-8", errors="backslashreplace") as fh:
                fh.write(line)
        except OSError as e:
            # Audit failures never block the action itself.
            logger.warning("Audit log write failed path=%s action=%r: %s", self._path, action, e)
