# src/todo_list/tasks/task_store.py

from __future__ import annotations

import logging
import os
from dataclasses import replace
from pathlib import Path

from ..core.result import Error, Result, Success
from ..core.utils import LONG_MAX
from .task_models import (
    Task,
    TaskFileFormatError,
    TaskNotFoundError,
    TaskStoreError,
    decode_tasks,
    encode_tasks,
    tasks_to_map,
)

logger = logging.getLogger(__name__)


class JsonFileTaskStore:
    """
    Task data source backed by a single JSON file.

    Every operation is load-modify-store:
    - read and decode the whole file
    - change the list in memory
    - write the whole list back

    Nothing is cached between calls; the file is the only source of truth.
    Failures come back as Error results, never as raised exceptions.
    """

    def __init__(self, path: str | Path, *, indent: int | None = 4) -> None:
        self._path = Path(path)
        self._indent = indent
        logger.info("JsonFileTaskStore ready path=%s", self._path)

    @property
    def path(self) -> Path:
        return self._path

    # ---- low-level helpers ----

    def _read_tasks(self) -> list[Task]:
        try:
            text = self._path.read_text(encoding="utf-8")
        except UnicodeDecodeError as e:
            raise TaskFileFormatError() from e
        return decode_tasks(text)

    def _write_text(self, text: str) -> None:
        tmp = self._path.with_name(self._path.name + ".tmp")
        try:
            tmp.write_text(text, encoding="utf-8")
            os.replace(tmp, self._path)
        except OSError:
            tmp.unlink(missing_ok=True)
            raise

    def _write_tasks(self, tasks: list[Task]) -> None:
        self._write_text(encode_tasks(tasks, indent=self._indent))

    # ---- public API ----

    def get_tasks(self) -> Result[list[Task]]:
        try:
            return Success(self._read_tasks())
        except (TaskStoreError, OSError) as e:
            logger.debug("get_tasks failed path=%s: %s", self._path, e)
            return Error(e)

    def get_task(self, task_id: int) -> Result[Task]:
        try:
            tasks = self._read_tasks()
        except (TaskStoreError, OSError) as e:
            return Error(e)
        for task in tasks:
            if task.id == task_id:
                return Success(task)
        return Error(TaskNotFoundError(task_id))

    def save_task(self, task: Task) -> Result[Task]:
        """Store a copy of `task` with id = max existing id + 1 (1 for an empty file)."""
        try:
            tasks = self._read_tasks()
            last_id = max((t.id for t in tasks), default=0)
            if last_id >= LONG_MAX:
                return Error(TaskStoreError(f"Task id limit {LONG_MAX} reached"))
            saved = replace(task, id=last_id + 1)
            tasks.append(saved)
            self._write_tasks(tasks)
        except (TaskStoreError, OSError) as e:
            logger.debug("save_task failed name=%r: %s", task.name, e)
            return Error(e)
        logger.debug("Task added id=%s name=%r", saved.id, saved.name)
        return Success(saved)

    def complete_task(self, task_id: int, value: bool) -> Result[None]:
        """
        Set the done flag of task `task_id`.

        The list is rewritten from an id -> task map, so duplicate ids collapse
        into one entry.
        """
        try:
            tasks_map = tasks_to_map(self._read_tasks())
            if task_id not in tasks_map:
                return Error(TaskNotFoundError(task_id))
            tasks_map[task_id] = replace(tasks_map[task_id], done=value)
            self._write_tasks(list(tasks_map.values()))
        except (TaskStoreError, OSError) as e:
            return Error(e)
        logger.debug("Task id=%s done=%s", task_id, value)
        return Success(None)

    def delete_task(self, task_id: int) -> Result[None]:
        """Remove the first task with `task_id`; the remaining order is kept."""
        try:
            tasks = self._read_tasks()
            index = next((i for i, t in enumerate(tasks) if t.id == task_id), None)
            if index is None:
                return Error(TaskNotFoundError(task_id))
            del tasks[index]
            self._write_tasks(tasks)
        except (TaskStoreError, OSError) as e:
            return Error(e)
        logger.debug("Task deleted id=%s", task_id)
        return Success(None)

    def delete_all_tasks(self) -> Result[None]:
        # Empty text, not "[]": blank content decodes to an empty list.
        try:
            self._write_text("")
        except OSError as e:
            return Error(e)
        logger.debug("All tasks deleted path=%s", self._path)
        return Success(None)
