# tests/test_console.py

from __future__ import annotations

import pytest

from todo_tracker.connectors.console_connector import run_console_loop
from todo_tracker.core.state import AppState
from todo_tracker.tasks.exporters import read_csv
from todo_tracker.tasks.task_models import Urgency

from .fakes import ScriptedInput


def _run(monkeypatch: pytest.MonkeyPatch, state: AppState, lines: list[str]) -> ScriptedInput:
    scripted = ScriptedInput(lines)
    monkeypatch.setattr("builtins.input", scripted)
    run_console_loop(state)
    return scripted


def test_full_session(monkeypatch, capsys, state: AppState) -> None:
    _run(
        monkeypatch,
        state,
        [
            "1", "Buy milk", "1",
            "1", "Fix prod outage", "4",
            "3",
            "4", "1",
            "8",
            "0",
        ],
    )
    out = capsys.readouterr().out

    assert "Task added successfully! ID: 1" in out
    assert "Task added successfully! ID: 2" in out
    sorted_view = out[out.index("=== TASKS SORTED BY URGENCY ===") :]
    assert sorted_view.index("Fix prod outage") < sorted_view.index("Buy milk")
    assert "Task marked as completed!" in out
    assert "Cleared 1 completed tasks." in out
    assert "Goodbye" in out
    assert [t.id for t in state.store.list_all()] == [2]


def test_invalid_number_is_reprompted(monkeypatch, capsys, state: AppState) -> None:
    scripted = _run(monkeypatch, state, ["abc", "", "2", "0"])

    assert scripted.prompts.count("Invalid input! Please enter a number: ") == 2
    assert "No tasks available." in capsys.readouterr().out


def test_unknown_menu_choice(monkeypatch, capsys, state: AppState) -> None:
    _run(monkeypatch, state, ["42", "0"])
    assert "Invalid choice! Please select 0-9." in capsys.readouterr().out


def test_empty_description_is_rejected(monkeypatch, capsys, state: AppState) -> None:
    _run(monkeypatch, state, ["1", "   ", "0"])

    assert "Task description cannot be empty!" in capsys.readouterr().out
    assert len(state.store) == 0


def test_invalid_urgency_is_reprompted(monkeypatch, capsys, state: AppState) -> None:
    _run(monkeypatch, state, ["1", "Deploy", "9", "urgent", "high", "0"])

    out = capsys.readouterr().out
    assert out.count("Invalid input! Please enter a number between 1-4.") == 2
    task = state.store.list_all()[0]
    assert task.urgency is Urgency.HIGH


def test_complete_and_remove_unknown_id(monkeypatch, capsys, state: AppState) -> None:
    state.store.add("only task", Urgency.LOW)

    _run(monkeypatch, state, ["4", "7", "5", "8", "0"])

    out = capsys.readouterr().out
    assert out.count("Task with ID 7 not found!") == 1
    assert "Task with ID 8 not found!" in out
    assert len(state.store) == 1


def test_remove_task(monkeypatch, capsys, state: AppState) -> None:
    state.store.add("first", Urgency.LOW)
    state.store.add("second", Urgency.LOW)

    _run(monkeypatch, state, ["5", "1", "0"])

    assert "Task removed successfully!" in capsys.readouterr().out
    assert [t.description for t in state.store.list_all()] == ["second"]


def test_actions_on_empty_store(monkeypatch, capsys, state: AppState) -> None:
    _run(monkeypatch, state, ["4", "5", "7", "9", "8", "0"])

    out = capsys.readouterr().out
    assert out.count("No tasks available!") == 3
    assert "No tasks to export!" in out
    assert "No completed tasks to clear." in out


def test_export_with_default_filename(monkeypatch, capsys, state: AppState) -> None:
    state.store.add("Buy milk", Urgency.LOW)

    _run(monkeypatch, state, ["7", "2", "", "0"])

    path = state.settings.export_dir / "todo_export.csv"
    assert f"Tasks exported successfully to CSV: {path}" in capsys.readouterr().out
    assert [t.description for t in read_csv(path)] == ["Buy milk"]


def test_export_invalid_format(monkeypatch, capsys, state: AppState) -> None:
    state.store.add("Buy milk", Urgency.LOW)

    _run(monkeypatch, state, ["7", "5", "0"])

    assert "Invalid choice!" in capsys.readouterr().out
    assert list(state.settings.export_dir.iterdir()) == []


def test_export_failure_is_reported(monkeypatch, capsys, state: AppState, tmp_path) -> None:
    state.store.add("Buy milk", Urgency.LOW)
    state.settings.export_dir = tmp_path / "does-not-exist"

    _run(monkeypatch, state, ["7", "3", "backup", "0"])

    assert "Export failed!" in capsys.readouterr().out


def test_filter_by_urgency(monkeypatch, capsys, state: AppState) -> None:
    state.store.add("calm", Urgency.LOW)
    state.store.add("fire", Urgency.CRITICAL)

    _run(monkeypatch, state, ["9", "4", "9", "3", "0"])

    out = capsys.readouterr().out
    view = out[out.index("=== TASKS WITH CRITICAL URGENCY ===") :]
    assert "fire" in view
    assert "calm" not in view.split("No tasks found")[0]
    assert "No tasks found with HIGH urgency." in out


def test_statistics(monkeypatch, capsys, state: AppState) -> None:
    state.store.add("a", Urgency.CRITICAL)
    state.store.add("b", Urgency.LOW)
    state.store.mark_completed(2)

    _run(monkeypatch, state, ["6", "0"])

    out = capsys.readouterr().out
    assert "Total Tasks: 2" in out
    assert "Completed Tasks: 1" in out
    assert "  Critical: 1" in out
    assert "  Low: 0" in out


def test_eof_mid_action_exits_cleanly(monkeypatch, state: AppState) -> None:
    scripted = _run(monkeypatch, state, ["1"])

    assert scripted.remaining == 0
    assert len(state.store) == 0


def test_pause_after_action(monkeypatch, state: AppState) -> None:
    state.settings.pause_after_action = True

    scripted = _run(monkeypatch, state, ["2", "", "0"])

    assert "\nPress Enter to continue..." in scripted.prompts


def test_handler_crash_is_contained(monkeypatch, capsys, state: AppState) -> None:
    def boom():
        raise RuntimeError("kaboom")

    monkeypatch.setattr(state.store, "list_all", boom)

    _run(monkeypatch, state, ["2", "0"])

    assert "Internal error while handling a menu choice." in capsys.readouterr().out
