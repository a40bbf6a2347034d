# src/todo_tracker/tasks/exporters.py

"""
Export formats for the task list.

Renderers are pure: they turn a task sequence into a document string and never
touch the filesystem. TaskStore owns opening/writing the destination.

Readers parse CSV/JSON exports back into Task records (second precision on
timestamps, since exports only carry YYYY-MM-DD HH:MM:SS).
"""

from __future__ import annotations

import csv
import json
from collections.abc import Sequence
from enum import StrEnum
from pathlib import Path
from typing import Any

from .task_models import Task, Urgency, parse_timestamp

TEXT_TITLE = "TODO APP EXPORT"
CSV_HEADER = ("ID", "Description", "Urgency", "Created", "Status")


class ExportFormat(StrEnum):
    TEXT = "text"
    CSV = "csv"
    JSON = "json"

    @property
    def extension(self) -> str:
        return {"text": ".txt", "csv": ".csv", "json": ".json"}[self.value]


def render_text(tasks: Sequence[Task], exported_at: str) -> str:
    lines = [f"{TEXT_TITLE} - {exported_at}", "=" * 50]
    for task in tasks:
        lines.append(f"ID: {task.id}")
        lines.append(f"Description: {task.description}")
        lines.append(f"Urgency: {task.urgency.name}")
        lines.append(f"Created: {task.created_str}")
        lines.append(f"Status: {task.status_label}")
        lines.append("-" * 30)
    return "\n".join(lines) + "\n"


def _quote(text: str) -> str:
    return '"' + text.replace('"', '""') + '"'


def render_csv(tasks: Sequence[Task]) -> str:
    # Only the description is quoted; the other columns never contain separators.
    lines = [",".join(CSV_HEADER)]
    for task in tasks:
        lines.append(
            ",".join(
                [
                    str(task.id),
                    _quote(task.description),
                    task.urgency.name,
                    task.created_str,
                    task.status_label,
                ]
            )
        )
    return "\n".join(lines) + "\n"


def task_to_dict(task: Task) -> dict[str, Any]:
    return {
        "id": task.id,
        "description": task.description,
        "urgency": task.urgency.name,
        "created": task.created_str,
        "completed": task.completed,
    }


def render_json(tasks: Sequence[Task], exported_at: str) -> str:
    doc = {
        "tasks": [task_to_dict(t) for t in tasks],
        "exported_at": exported_at,
    }
    return json.dumps(doc, ensure_ascii=False, indent=2) + "\n"


def render(fmt: ExportFormat, tasks: Sequence[Task], exported_at: str) -> str:
    if fmt is ExportFormat.TEXT:
        return render_text(tasks, exported_at)
    if fmt is ExportFormat.CSV:
        return render_csv(tasks)
    return render_json(tasks, exported_at)


# ---- readers ----


def read_csv(path: str | Path) -> list[Task]:
    out: list[Task] = []
    with open(path, newline="", encoding="utf-8") as fh:
        for row in csv.DictReader(fh):
            out.append(
                Task(
                    id=int(row["ID"]),
                    description=row["Description"],
                    urgency=Urgency.from_string(row["Urgency"]),
                    created_at=parse_timestamp(row["Created"]),
                    completed=row["Status"].strip().upper() == "COMPLETED",
                )
            )
    return out


def read_json(path: str | Path) -> list[Task]:
    data = json.loads(Path(path).read_text("utf-8"))
    items = data.get("tasks", []) if isinstance(data, dict) else []
    out: list[Task] = []
    for item in items:
        out.append(
            Task(
                id=int(item["id"]),
                description=str(item["description"]),
                urgency=Urgency.from_string(str(item["urgency"])),
                created_at=parse_timestamp(str(item["created"])),
                completed=bool(item["completed"]),
            )
        )
    return out
