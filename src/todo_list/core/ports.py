# src/todo_list/core/ports.py

from __future__ import annotations

"""
Ports (interfaces) used by the core.

Commands depend on the TaskRepo Protocol instead of the JSON file store.
This keeps storage swappable and lets command tests run against an in-memory fake.
"""

from typing import TYPE_CHECKING, Protocol

from .result import Result

if TYPE_CHECKING:
    from ..tasks.task_models import Task


class TaskRepo(Protocol):
    """
    Task data source.

    Reads and mutations alike report failures through Error results;
    TaskNotFoundError is the expected error for an unknown id.
    """

    def get_tasks(self) -> Result[list[Task]]: ...
    def get_task(self, task_id: int) -> Result[Task]: ...

    # Returns the stored copy (with the assigned id).
    def save_task(self, task: Task) -> Result[Task]: ...
    def complete_task(self, task_id: int, value: bool) -> Result[None]: ...
    def delete_task(self, task_id: int) -> Result[None]: ...
    def delete_all_tasks(self) -> Result[None]: ...
