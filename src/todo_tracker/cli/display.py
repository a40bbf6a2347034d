# src/todo_tracker/cli/display.py

"""Console formatting for task tables and statistics."""

from __future__ import annotations

from collections.abc import Mapping, Sequence

from tabulate import tabulate

from ..tasks.task_models import Task, TaskCounts, Urgency

DESCRIPTION_WIDTH = 39


def format_tasks_table(tasks: Sequence[Task], title: str, *, show_urgency: bool = True) -> str:
    if not tasks:
        return "No tasks available."

    headers = ["ID", "Description"]
    if show_urgency:
        headers.append("Urgency")
    headers += ["Created", "Status"]

    rows = []
    for task in tasks:
        row: list[object] = [task.id, _truncate(task.description, DESCRIPTION_WIDTH)]
        if show_urgency:
            row.append(task.urgency.name)
        row += [task.created_str, "DONE" if task.completed else "PENDING"]
        rows.append(row)

    table = tabulate(rows, headers=headers, tablefmt="simple")
    return f"\n=== {title} ===\n{table}\n"


def format_statistics(counts: TaskCounts, pending_by_urgency: Mapping[Urgency, int]) -> str:
    lines = [
        "",
        "=== STATISTICS ===",
        f"Total Tasks: {counts.total}",
        f"Pending Tasks: {counts.pending}",
        f"Completed Tasks: {counts.completed}",
        "",
        "Pending Tasks by Urgency:",
    ]
    for level in sorted(Urgency, reverse=True):
        lines.append(f"  {level.name.capitalize()}: {pending_by_urgency.get(level, 0)}")
    return "\n".join(lines) + "\n"


def _truncate(text: str, max_len: int) -> str:
    """Truncate text with ellipsis if too long."""
    if len(text) <= max_len:
        return text
    return text[: max_len - 1] + "…"
