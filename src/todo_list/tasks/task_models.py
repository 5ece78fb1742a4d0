# src/todo_list/tasks/task_models.py

from __future__ import annotations

import json
from collections.abc import Iterable
from dataclasses import dataclass
from typing import Any

from ..core.utils import LONG_MAX, LONG_MIN

_TASK_KEYS = frozenset({"name", "done", "id"})


class TaskStoreError(Exception):
    """Base class for runtime data source failures."""


class TaskNotFoundError(TaskStoreError):
    def __init__(self, task_id: int) -> None:
        super().__init__(f"Task with id: {task_id} not found")
        self.task_id = task_id


class TaskFileFormatError(TaskStoreError):
    def __init__(self, message: str = "Wrong file Format") -> None:
        super().__init__(message)


@dataclass(frozen=True, slots=True)
class Task:
    """
    A single to-do item.

    id stays 0 until the data source assigns one on save.
    Use dataclasses.replace() to get a copy with another done flag or id.
    """

    name: str
    done: bool = False
    id: int = 0

    def to_dict(self) -> dict[str, Any]:
        return {"name": self.name, "done": self.done, "id": self.id}

    @classmethod
    def from_dict(cls, raw: Any) -> Task:
        """Strict decoding: unknown keys and wrong types are rejected."""
        if not isinstance(raw, dict):
            raise TaskFileFormatError()
        if not _TASK_KEYS.issuperset(raw):
            raise TaskFileFormatError()

        name = raw.get("name")
        done = raw.get("done", False)
        task_id = raw.get("id", 0)

        if not isinstance(name, str):
            raise TaskFileFormatError()
        if not isinstance(done, bool):
            raise TaskFileFormatError()
        # bool is an int subclass; `"id": true` is not a valid id
        if isinstance(task_id, bool) or not isinstance(task_id, int):
            raise TaskFileFormatError()
        if not LONG_MIN <= task_id <= LONG_MAX:
            raise TaskFileFormatError()

        return cls(name=name, done=done, id=task_id)


def tasks_to_map(tasks: Iterable[Task]) -> dict[int, Task]:
    """id -> Task; a later duplicate id wins, the first occurrence keeps its position."""
    return {task.id: task for task in tasks}


def decode_tasks(text: str) -> list[Task]:
    """
    Parse the tasks file content.

    Blank text is an empty collection. Anything that is not a JSON array of
    task objects raises TaskFileFormatError.
    """
    if not text.strip():
        return []
    try:
        data = json.loads(text)
    except (ValueError, RecursionError) as e:
        raise TaskFileFormatError() from e
    if not isinstance(data, list):
        raise TaskFileFormatError()
    return [Task.from_dict(item) for item in data]


def encode_tasks(tasks: Iterable[Task], indent: int | None = 4) -> str:
    payload = [task.to_dict() for task in tasks]
    return json.dumps(payload, ensure_ascii=False, indent=indent)
