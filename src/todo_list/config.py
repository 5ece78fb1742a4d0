# src/todo_list/config.py

"""Centralized settings loaded from environment variables (+ optional .env).

One Settings object for the whole app. Every value has a default, so a bare
`todo-list` run needs no configuration at all.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

from dotenv import load_dotenv

ENV_PREFIX = "TODO"

DEFAULT_TASKS_FILE = "todo-list.json"
DEFAULT_MAX_RECORDS = 100_000

load_dotenv(override=False)


def _k(suffix: str) -> str:
    """Build env var name with the project prefix."""
    return f"{ENV_PREFIX}_{suffix}"


def _env(name: str, default: str = "") -> str:
    v = os.getenv(name)
    return default if v is None else v


def _env_int(name: str, default: int) -> int:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    try:
        return int(raw)
    except ValueError:
        return default


def _env_path(name: str, default: Path | None) -> Path | None:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    return Path(raw).expanduser()


@dataclass(frozen=True, slots=True)
class Settings:
    # ---- App / logging ----
    app_name: str
    log_level: str
    log_dir: Path | None

    # ---- Tasks file ----
    tasks_file: Path
    max_records: int
    json_indent: int

    @staticmethod
    def from_env() -> "Settings":
        app_name = _env(_k("APP_NAME"), "todo-list").strip() or "todo-list"
        log_level = _env(_k("LOG_LEVEL"), "WARNING")
        log_dir = _env_path(_k("LOG_DIR"), None)

        tasks_file = _env_path(_k("TASKS_FILE"), Path(DEFAULT_TASKS_FILE)) or Path(DEFAULT_TASKS_FILE)
        max_records = _env_int(_k("MAX_RECORDS"), DEFAULT_MAX_RECORDS)
        json_indent = max(0, _env_int(_k("JSON_INDENT"), 4))

        return Settings(
            app_name=app_name,
            log_level=log_level,
            log_dir=log_dir,
            tasks_file=tasks_file,
            max_records=max_records,
            json_indent=json_indent,
        )


SETTINGS = Settings.from_env()


def get_settings() -> Settings:
    return SETTINGS
