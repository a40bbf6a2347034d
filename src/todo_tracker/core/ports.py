# src/todo_tracker/core/ports.py

from __future__ import annotations

"""
Ports (interfaces) used by the task store and the shell.

The store depends on Protocols instead of concrete implementations.
This keeps the audit sink swappable and makes testing easier.
"""

from pathlib import Path
from typing import Protocol

from ..tasks.exporters import ExportFormat
from ..tasks.task_models import Task, TaskCounts, Urgency


class AuditSink(Protocol):
    """Where the store reports state-changing actions (one line per action)."""

    def record(self, action: str) -> None: ...


class TaskRepo(Protocol):
    """What the interactive shell needs from a task store."""

    def __len__(self) -> int: ...

    def add(self, description: str, urgency: Urgency) -> int: ...

    def remove(self, task_id: int) -> bool: ...

    def mark_completed(self, task_id: int) -> bool: ...

    def list_all(self) -> list[Task]: ...

    def list_sorted_by_urgency(self) -> list[Task]: ...

    def filter_by_urgency(self, level: Urgency) -> list[Task]: ...

    def clear_completed(self) -> int: ...

    def counts(self) -> TaskCounts: ...

    def pending_by_urgency(self) -> dict[Urgency, int]: ...

    def export(self, fmt: ExportFormat, destination: str | Path) -> bool: ...

    def close(self) -> None: ...

