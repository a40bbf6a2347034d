# tests/conftest.py

from __future__ import annotations

from datetime import datetime
from pathlib import Path
from types import SimpleNamespace

import pytest

from todo_tracker.core.state import AppState
from todo_tracker.tasks.task_store import TaskStore

from .fakes import FakeAuditLog, FakeClock

START = datetime(2026, 1, 2, 9, 0, 0)


@pytest.fixture()
def settings(tmp_path: Path) -> SimpleNamespace:
    """
    Minimal settings object compatible with AppState and the shell.

    We intentionally use a SimpleNamespace rather than importing real config,
    to keep unit tests isolated and deterministic.
    """
    return SimpleNamespace(
        app_name="todo-test",
        log_level="WARNING",
        data_dir=tmp_path / "data",
        audit_log_path=tmp_path / "todo_log.txt",
        export_dir=tmp_path / "exports",
        default_export_name="todo_export",
        pause_after_action=False,
    )


@pytest.fixture()
def audit() -> FakeAuditLog:
    return FakeAuditLog()


@pytest.fixture()
def clock() -> FakeClock:
    return FakeClock(START)


@pytest.fixture()
def store(audit: FakeAuditLog, clock: FakeClock) -> TaskStore:
    return TaskStore(audit, clock=clock)


@pytest.fixture()
def state(settings: SimpleNamespace, store: TaskStore) -> AppState:
    settings.export_dir.mkdir(parents=True, exist_ok=True)
    return AppState(settings=settings, store=store)
