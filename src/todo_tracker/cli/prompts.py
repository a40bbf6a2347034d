# src/todo_tracker/cli/prompts.py

"""Blocking console prompts. Invalid input is re-prompted, never fatal."""

from __future__ import annotations

from ..tasks.exporters import ExportFormat
from ..tasks.task_models import Urgency

URGENCY_MENU = (
    "\nSelect urgency level:\n"
    "1. Low\n"
    "2. Medium\n"
    "3. High\n"
    "4. Critical"
)

EXPORT_MENU = (
    "\nSelect export format:\n"
    "1. Text file (.txt)\n"
    "2. CSV file (.csv)\n"
    "3. JSON file (.json)"
)

EXPORT_CHOICES = {
    1: ExportFormat.TEXT,
    2: ExportFormat.CSV,
    3: ExportFormat.JSON,
}


def read_line(prompt: str) -> str:
    return input(prompt)


def read_int(prompt: str) -> int:
    raw = input(prompt)
    while True:
        try:
            return int(raw.strip())
        except ValueError:
            raw = input("Invalid input! Please enter a number: ")


def read_urgency() -> Urgency:
    """Show the urgency menu until a valid level (1-4 or its name) is entered."""
    while True:
        print(URGENCY_MENU)
        raw = input("Enter urgency (1-4): ")
        try:
            return Urgency.from_string(raw)
        except ValueError:
            print("Invalid input! Please enter a number between 1-4.")


def read_export_format() -> ExportFormat | None:
    """Single attempt: an out-of-range choice returns None."""
    print(EXPORT_MENU)
    return EXPORT_CHOICES.get(read_int("Enter format (1-3): "))
