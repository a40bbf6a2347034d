# src/todo_tracker/connectors/console_connector.py

from __future__ import annotations

import logging

from ..cli.commands import EXIT_CHOICE
from ..cli.commands import registry as menu_registry
from ..cli.prompts import read_int
from ..core.state import AppState

logger = logging.getLogger(__name__)


def run_console_loop(state: AppState) -> None:
    """
    Interactive menu loop. Returns on the exit choice, EOF or Ctrl+C.

    Every action runs to completion before the next menu is shown.
    """
    settings = state.settings
    app_name = str(getattr(settings, "app_name", "todo-tracker"))
    audit_path = getattr(settings, "audit_log_path", "todo_log.txt")
    pause = bool(getattr(settings, "pause_after_action", False))

    logger.info("Console connector started.")
    print(f"=== Welcome to {app_name} ===")
    print(f"Your tasks will be logged to '{audit_path}'")

    while True:
        try:
            print(menu_registry.build_menu())
            choice = read_int("Enter your choice: ")
        except (EOFError, KeyboardInterrupt):
            logger.info("Console input closed, exiting.")
            print()
            break

        if choice == EXIT_CHOICE:
            print("Thank you for using the task tracker! Goodbye!")
            break

        try:
            response = menu_registry.handle(state, choice)
        except (EOFError, KeyboardInterrupt):
            logger.info("Console input closed during menu choice %s, exiting.", choice)
            print()
            break
        except Exception:
            logger.exception("Menu handler crashed choice=%s.", choice)
            response = "Internal error while handling a menu choice."

        if response:
            print(response)

        if pause:
            try:
                input("\nPress Enter to continue...")
            except (EOFError, KeyboardInterrupt):
                print()
                break

    logger.info("Console connector finished.")
