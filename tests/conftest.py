# tests/conftest.py

from __future__ import annotations

from pathlib import Path
from types import SimpleNamespace

import pytest

from todo_list.cli.commands import CommandFactory
from todo_list.tasks.task_models import Task, encode_tasks
from todo_list.tasks.task_store import JsonFileTaskStore

from .fakes import RecordingEmitter


@pytest.fixture()
def settings(tmp_path: Path) -> SimpleNamespace:
    """
    Minimal settings object compatible with bootstrap and main.

    We intentionally use a SimpleNamespace rather than importing real config,
    to keep unit tests isolated from the environment.
    """
    return SimpleNamespace(
        app_name="todo-list-test",
        log_level="WARNING",
        log_dir=None,
        tasks_file=tmp_path / "todo-list.json",
        max_records=100_000,
        json_indent=4,
    )


@pytest.fixture()
def tasks_file(tmp_path: Path) -> Path:
    """Two active tasks with ids 1 and 2."""
    path = tmp_path / "tasks.json"
    path.write_text(encode_tasks([Task("a", False, 1), Task("b", False, 2)]), "utf-8")
    return path


@pytest.fixture()
def store(tasks_file: Path) -> JsonFileTaskStore:
    return JsonFileTaskStore(tasks_file)


@pytest.fixture()
def factory(store: JsonFileTaskStore) -> CommandFactory:
    return CommandFactory(store)


@pytest.fixture()
def emit() -> RecordingEmitter:
    return RecordingEmitter()
