# tests/test_commands.py

from __future__ import annotations

import pytest

from todo_tracker.cli.commands import MenuRegistry, registry


def test_menu_registry_routes_choices(state) -> None:
    reg = MenuRegistry()
    called = {"a": 0, "b": 0}

    def ha(state):
        called["a"] += 1
        return "a"

    def hb(state):
        called["b"] += 1
        return "b"

    reg.register(1, ha, "Do A")
    reg.register(2, hb, "Do B")

    assert reg.handle(state, 1) == "a"
    assert reg.handle(state, 2) == "b"
    assert called == {"a": 1, "b": 1}


def test_menu_registry_unknown_choice(state) -> None:
    reg = MenuRegistry()
    reg.register(1, lambda s: "x", "X")
    reg.register(2, lambda s: "y", "Y")

    assert reg.handle(state, 42) == "Invalid choice! Please select 0-2."


def test_menu_registry_reserves_exit_choice() -> None:
    with pytest.raises(ValueError, match="reserved"):
        MenuRegistry().register(0, lambda s: "", "Nope")


def test_default_menu_lists_all_actions_in_order() -> None:
    menu = registry.build_menu().splitlines()

    assert menu[1] == "=== TODO APP MENU ==="
    assert menu[2:] == [
        "1. Add Task",
        "2. View All Tasks",
        "3. View Tasks Sorted by Urgency",
        "4. Mark Task as Completed",
        "5. Remove Task",
        "6. View Statistics",
        "7. Export Tasks",
        "8. Clear Completed Tasks",
        "9. Filter Tasks by Urgency",
        "0. Exit",
    ]
    assert registry.handle(None, 10) == "Invalid choice! Please select 0-9."
