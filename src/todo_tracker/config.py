# src/todo_tracker/config.py

"""Centralized settings loaded from environment variables (+ optional .env).

Design goals:
- One Settings object for the whole app.
- Bad values fall back to defaults instead of failing at import time.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

from dotenv import load_dotenv

ENV_PREFIX = "TODO"

load_dotenv(override=False)


def _k(suffix: str) -> str:
    """Build env var name with the project prefix."""
    return f"{ENV_PREFIX}_{suffix}"


def _env(name: str, default: str = "") -> str:
    v = os.getenv(name)
    return default if v is None else v


def _env_bool(name: str, default: bool) -> bool:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    return raw.strip().lower() in {"1", "true", "yes", "y", "on"}


def _env_path(name: str, default: Path) -> Path:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    return Path(raw).expanduser()


@dataclass(frozen=True, slots=True)
class Settings:
    # ---- App / logging ----
    app_name: str
    log_level: str

    # ---- Paths ----
    data_dir: Path
    audit_log_path: Path
    export_dir: Path

    # ---- Shell ----
    default_export_name: str
    pause_after_action: bool

    @staticmethod
    def from_env() -> "Settings":
        app_name = _env(_k("APP_NAME"), "todo-tracker").strip() or "todo-tracker"
        log_level = _env(_k("LOG_LEVEL"), "WARNING").strip().upper() or "WARNING"

        data_dir = _env_path(_k("DATA_DIR"), Path(".local/todo"))
        audit_log_path = _env_path(_k("AUDIT_LOG_PATH"), Path("todo_log.txt"))
        export_dir = _env_path(_k("EXPORT_DIR"), Path("."))

        default_export_name = _env(_k("EXPORT_NAME"), "todo_export").strip() or "todo_export"
        pause_after_action = _env_bool(_k("PAUSE_AFTER_ACTION"), True)

        return Settings(
            app_name=app_name,
            log_level=log_level,
            data_dir=data_dir,
            audit_log_path=audit_log_path,
            export_dir=export_dir,
            default_export_name=default_export_name,
            pause_after_action=pause_after_action,
        )


SETTINGS = Settings.from_env()


def get_settings() -> Settings:
    return SETTINGS
