# src/todo_tracker/tasks/task_models.py

from __future__ import annotations

from dataclasses import dataclass, replace
from datetime import datetime
from enum import IntEnum

TIMESTAMP_FORMAT = "%Y-%m-%d %H:%M:%S"


def local_now() -> datetime:
    # Aware local time; aware datetimes compare by instant, not wall clock.
    return datetime.now().astimezone()


def format_timestamp(dt: datetime) -> str:
    return dt.strftime(TIMESTAMP_FORMAT)


def parse_timestamp(raw: str) -> datetime:
    return datetime.strptime(raw.strip(), TIMESTAMP_FORMAT)


class Urgency(IntEnum):
    """
    Task urgency level.

    Values are ordinal so comparisons follow LOW < MEDIUM < HIGH < CRITICAL.
    """

    LOW = 1
    MEDIUM = 2
    HIGH = 3
    CRITICAL = 4

    @classmethod
    def from_string(cls, raw: str) -> Urgency:
        """Parse a level name (case-insensitive) or its ordinal digit."""
        value = (raw or "").strip()
        if value.isdigit():
            try:
                return cls(int(value))
            except ValueError:
                pass
        else:
            try:
                return cls[value.upper()]
            except KeyError:
                pass
        valid = ", ".join(u.name for u in cls)
        raise ValueError(f"Invalid urgency '{raw}'. Must be one of: {valid} (or 1-4)")


@dataclass(frozen=True, slots=True)
class Task:
    id: int
    description: str
    urgency: Urgency
    created_at: datetime
    completed: bool = False

    @property
    def created_str(self) -> str:
        return format_timestamp(self.created_at)

    @property
    def status_label(self) -> str:
        return "COMPLETED" if self.completed else "PENDING"

    def as_completed(self) -> Task:
        return replace(self, completed=True)


@dataclass(frozen=True, slots=True)
class TaskCounts:
    total: int
    pending: int
    completed: int


def urgency_sort_key(task: Task) -> tuple[int, datetime, int]:
    # Highest urgency first; within a level, earliest created first, then lowest id.
    return (-int(task.urgency), task.created_at, task.id)
