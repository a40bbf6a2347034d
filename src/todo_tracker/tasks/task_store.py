# src/todo_tracker/tasks/task_store.py

from __future__ import annotations

import logging
from collections.abc import Callable
from datetime import datetime
from pathlib import Path

from ..core.ports import AuditSink
from .exporters import ExportFormat, render
from .task_models import Task, TaskCounts, Urgency, format_timestamp, local_now, urgency_sort_key

logger = logging.getLogger(__name__)

_EXPORT_AUDIT_LABELS = {
    ExportFormat.TEXT: "file",
    ExportFormat.CSV: "CSV",
    ExportFormat.JSON: "JSON",
}


class TaskStore:
    """
    In-memory task store.

    Ownership:
    - the task list is private; queries return new lists of immutable Task records
    - completing a task swaps in an updated record, so handed-out Tasks never dangle

    Ids start at 1 and are never reused, even after removal.
    State-changing operations report one line each to the audit sink.
    """

    def __init__(
        self,
        audit: AuditSink,
        *,
        clock: Callable[[], datetime] = local_now,
    ) -> None:
        self._audit = audit
        self._clock = clock
        self._tasks: list[Task] = []
        self._next_id = 1
        self._audit.record("Task tracker initialized")
        logger.info("TaskStore ready")

    def close(self) -> None:
        self._audit.record("Task tracker terminated")
        logger.info("TaskStore closed total=%s", len(self._tasks))

    def __len__(self) -> int:
        return len(self._tasks)

    # ---- low-level helpers ----

    def _index_of(self, task_id: int) -> int | None:
        for i, task in enumerate(self._tasks):
            if task.id == task_id:
                return i
        return None

    # ---- mutations ----

    def add(self, description: str, urgency: Urgency) -> int:
        task = Task(
            id=self._next_id,
            description=description,
            urgency=urgency,
            created_at=self._clock(),
        )
        self._next_id += 1
        self._tasks.append(task)
        self._audit.record(
            f'Added task [ID: {task.id}] "{task.description}" [{task.urgency.name}]'
        )
        logger.debug("Task added id=%s urgency=%s", task.id, task.urgency.name)
        return task.id

    def remove(self, task_id: int) -> bool:
        idx = self._index_of(task_id)
        if idx is None:
            logger.debug("remove: task id=%s not found", task_id)
            return False
        task = self._tasks.pop(idx)
        self._audit.record(f'Removed task [ID: {task.id}] "{task.description}"')
        return True

    def mark_completed(self, task_id: int) -> bool:
        idx = self._index_of(task_id)
        if idx is None:
            logger.debug("mark_completed: task id=%s not found", task_id)
            return False
        task = self._tasks[idx].as_completed()
        self._tasks[idx] = task
        self._audit.record(f'Completed task [ID: {task.id}] "{task.description}"')
        return True

    def clear_completed(self) -> int:
        before = len(self._tasks)
        self._tasks = [t for t in self._tasks if not t.completed]
        removed = before - len(self._tasks)
        if removed > 0:
            self._audit.record(f"Cleared {removed} completed tasks")
        return removed

    # ---- queries ----

    def get(self, task_id: int) -> Task | None:
        idx = self._index_of(task_id)
        return None if idx is None else self._tasks[idx]

    def list_all(self) -> list[Task]:
        return list(self._tasks)

    def list_sorted_by_urgency(self) -> list[Task]:
        # sorted() is stable, so equal keys keep insertion order.
        return sorted(self._tasks, key=urgency_sort_key)

    def filter_by_urgency(self, level: Urgency) -> list[Task]:
        return [t for t in self._tasks if t.urgency == level]

    def completed(self) -> list[Task]:
        return [t for t in self._tasks if t.completed]

    def pending(self) -> list[Task]:
        return [t for t in self._tasks if not t.completed]

    def counts(self) -> TaskCounts:
        done = 0
        for task in self._tasks:
            if task.completed:
                done += 1
        total = len(self._tasks)
        return TaskCounts(total=total, pending=total - done, completed=done)

    def pending_by_urgency(self) -> dict[Urgency, int]:
        out = {level: 0 for level in sorted(Urgency, reverse=True)}
        for task in self._tasks:
            if not task.completed:
                out[task.urgency] += 1
        return out

    # ---- export ----

    def export(self, fmt: ExportFormat, destination: str | Path) -> bool:
        """
        Write the current task list to `destination` in the given format.

        The document is rendered before the file is opened. Returns False only
        if the destination cannot be opened or written.
        """
        path = Path(destination)
        document = render(fmt, self._tasks, format_timestamp(self._clock()))
        try:
            with open(path, "w", encoding="utf-8", errors="backslashreplace", newline="") as fh:
                fh.write(document)
        except OSError as e:
            logger.error("Export failed fmt=%s path=%s: %s", fmt.value, path, e)
            return False

        self._audit.record(f"Exported tasks to {_EXPORT_AUDIT_LABELS[fmt]}: {path}")
        logger.info("Exported %d tasks fmt=%s path=%s", len(self._tasks), fmt.value, path)
        return True

    def export_text(self, destination: str | Path) -> bool:
        return self.export(ExportFormat.TEXT, destination)

    def export_csv(self, destination: str | Path) -> bool:
        return self.export(ExportFormat.CSV, destination)

    def export_json(self, destination: str | Path) -> bool:
        return self.export(ExportFormat.JSON, destination)
