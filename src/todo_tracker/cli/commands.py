# src/todo_tracker/cli/commands.py

from __future__ import annotations

import logging
from collections.abc import Callable
from pathlib import Path

from ..core.state import AppState
from .display import format_statistics, format_tasks_table
from .prompts import read_export_format, read_int, read_line, read_urgency

MenuHandler = Callable[[AppState], str]

EXIT_CHOICE = 0

logger = logging.getLogger(__name__)


class MenuRegistry:
    """Numbered menu used by the console connector (1 = add, 2 = list, ...)."""

    def __init__(self) -> None:
        self._handlers: dict[int, MenuHandler] = {}
        self._labels: dict[int, str] = {}

    def register(self, choice: int, handler: MenuHandler, label: str) -> None:
        if choice == EXIT_CHOICE:
            raise ValueError(f"Choice {EXIT_CHOICE} is reserved for exit")
        self._handlers[choice] = handler
        self._labels[choice] = label

    def handle(self, state: AppState, choice: int) -> str:
        """Run the handler for `choice` and return the text to show."""
        handler = self._handlers.get(choice)
        if not handler:
            return f"Invalid choice! Please select 0-{max(self._handlers, default=0)}."
        return handler(state)

    def build_menu(self, title: str = "TODO APP MENU") -> str:
        lines = [f"\n=== {title} ==="]
        for choice in sorted(self._labels):
            lines.append(f"{choice}. {self._labels[choice]}")
        lines.append(f"{EXIT_CHOICE}. Exit")
        return "\n".join(lines)


registry = MenuRegistry()


def _pick_task_id(state: AppState, prompt: str) -> int:
    print(format_tasks_table(state.store.list_all(), "ALL TASKS"))
    return read_int(prompt)


def menu_add(state: AppState) -> str:
    description = read_line("Enter task description: ")
    if not description.strip():
        return "Task description cannot be empty!"
    urgency = read_urgency()
    task_id = state.store.add(description, urgency)
    return f"Task added successfully! ID: {task_id}"


def menu_list(state: AppState) -> str:
    return format_tasks_table(state.store.list_all(), "ALL TASKS")


def menu_sorted(state: AppState) -> str:
    return format_tasks_table(state.store.list_sorted_by_urgency(), "TASKS SORTED BY URGENCY")


def menu_complete(state: AppState) -> str:
    if len(state.store) == 0:
        return "No tasks available!"
    task_id = _pick_task_id(state, "Enter task ID to mark as completed: ")
    if state.store.mark_completed(task_id):
        return "Task marked as completed!"
    return f"Task with ID {task_id} not found!"


def menu_remove(state: AppState) -> str:
    if len(state.store) == 0:
        return "No tasks available!"
    task_id = _pick_task_id(state, "Enter task ID to remove: ")
    if state.store.remove(task_id):
        return "Task removed successfully!"
    return f"Task with ID {task_id} not found!"


def menu_statistics(state: AppState) -> str:
    return format_statistics(state.store.counts(), state.store.pending_by_urgency())


def menu_export(state: AppState) -> str:
    """
    Ask for a format and a file stem; the extension is appended and the file
    is placed in settings.export_dir.
    """
    if len(state.store) == 0:
        return "No tasks to export!"

    fmt = read_export_format()
    if fmt is None:
        return "Invalid choice!"

    default_name = str(getattr(state.settings, "default_export_name", "todo_export"))
    name = read_line("Enter filename (without extension): ").strip() or default_name
    export_dir = Path(getattr(state.settings, "export_dir", "."))
    path = export_dir / f"{name}{fmt.extension}"
    logger.debug("Export requested fmt=%s path=%s", fmt.value, path)

    if not state.store.export(fmt, path):
        return f"Error: Could not open file {path} for writing.\nExport failed!"

    suffix = {"text": "", "csv": "CSV: ", "json": "JSON: "}[fmt.value]
    return f"Tasks exported successfully to {suffix}{path}"


def menu_clear_completed(state: AppState) -> str:
    removed = state.store.clear_completed()
    if removed > 0:
        return f"Cleared {removed} completed tasks."
    return "No completed tasks to clear."


def menu_filter(state: AppState) -> str:
    if len(state.store) == 0:
        return "No tasks available!"
    urgency = read_urgency()
    tasks = state.store.filter_by_urgency(urgency)
    if not tasks:
        return f"No tasks found with {urgency.name} urgency."
    return format_tasks_table(tasks, f"TASKS WITH {urgency.name} URGENCY", show_urgency=False)


registry.register(1, menu_add, "Add Task")
registry.register(2, menu_list, "View All Tasks")
registry.register(3, menu_sorted, "View Tasks Sorted by Urgency")
registry.register(4, menu_complete, "Mark Task as Completed")
registry.register(5, menu_remove, "Remove Task")
registry.register(6, menu_statistics, "View Statistics")
registry.register(7, menu_export, "Export Tasks")
registry.register(8, menu_clear_completed, "Clear Completed Tasks")
registry.register(9, menu_filter, "Filter Tasks by Urgency")
