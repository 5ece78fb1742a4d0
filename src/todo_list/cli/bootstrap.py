# src/todo_list/cli/bootstrap.py

"""
CLI bootstrap helpers.

This module is the "composition root":
- resolves which tasks file to use,
- wires the JSON file store and the command factory into AppState.
"""

from __future__ import annotations

import logging
from pathlib import Path

from ..config import get_settings
from ..core.state import AppState
from ..tasks.task_store import JsonFileTaskStore
from .commands import CommandFactory

logger = logging.getLogger(__name__)


def resolve_tasks_file(raw: str | None, settings) -> Path:
    """Command-line value if given and not blank, else the configured default."""
    if raw is not None and raw.strip():
        return Path(raw)
    return Path(settings.tasks_file)


def create_initial_state(*, settings=None, tasks_file: str | Path | None = None) -> AppState:
    """
    Create AppState from the provided settings.

    Keeping settings injectable makes the app easier to test and avoids hidden global config reads.
    If settings is None, falls back to get_settings().
    """
    if settings is None:
        settings = get_settings()

    path = Path(tasks_file) if tasks_file is not None else Path(settings.tasks_file)
    store = JsonFileTaskStore(path, indent=settings.json_indent)

    logger.debug("AppState created tasks_file=%s", path)
    return AppState(
        settings=settings,
        task_store=store,
        commands=CommandFactory(store),
    )
