# config.example.py

"""
Documentation-only module (safe to commit).

The real configuration is loaded from environment variables (optionally via a local .env file).
This file exists to make the repo self-documenting even without opening .env.
"""

ENV_VARS = {
    # App / logging
    "TODO_APP_NAME": "App display name (default: todo-tracker).",
    "TODO_LOG_LEVEL": "Console diagnostic log level (default: WARNING).",
    # Paths
    "TODO_DATA_DIR": "Diagnostics log directory (default: .local/todo).",
    "TODO_AUDIT_LOG_PATH": "Append-only audit log file (default: todo_log.txt).",
    "TODO_EXPORT_DIR": "Directory where exports are written (default: current directory).",
    # Shell
    "TODO_EXPORT_NAME": "File stem used when the export filename prompt is left empty (default: todo_export).",
    "TODO_PAUSE_AFTER_ACTION": "Wait for Enter after each menu action (true/false, default: true).",
}
