# src/todo_tracker/core/state.py

from __future__ import annotations

from dataclasses import dataclass

from .ports import TaskRepo


@dataclass
class AppState:
    # Settings live on the state so handlers can read paths/defaults without globals.
    settings: object
    store: TaskRepo
