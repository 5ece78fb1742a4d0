# tests/fakes.py

from __future__ import annotations

from dataclasses import replace

from todo_list.core.result import Error, Result, Success
from todo_list.tasks.task_models import Task, TaskNotFoundError


class RecordingEmitter:
    """CommandEmitter that keeps every emitted line."""

    def __init__(self) -> None:
        self.lines: list[str] = []

    def __call__(self, text: str) -> None:
        self.lines.append(text)

    @property
    def text(self) -> str:
        return "\n".join(self.lines)


class FakeTaskRepo:
    """
    In-memory TaskRepo used for command unit tests.

    Mirrors JsonFileTaskStore semantics without touching the filesystem.
    `fail_with` makes every call return Error(fail_with).
    """

    def __init__(self, tasks: list[Task] | None = None, fail_with: Exception | None = None) -> None:
        self.tasks = list(tasks or [])
        self.fail_with = fail_with
        self.calls: list[tuple] = []

    def get_tasks(self) -> Result[list[Task]]:
        self.calls.append(("get_tasks",))
        if self.fail_with is not None:
            return Error(self.fail_with)
        return Success(list(self.tasks))

    def get_task(self, task_id: int) -> Result[Task]:
        self.calls.append(("get_task", task_id))
        if self.fail_with is not None:
            return Error(self.fail_with)
        for t in self.tasks:
            if t.id == task_id:
                return Success(t)
        return Error(TaskNotFoundError(task_id))

    def save_task(self, task: Task) -> Result[Task]:
        self.calls.append(("save_task", task))
        if self.fail_with is not None:
            return Error(self.fail_with)
        saved = replace(task, id=max((t.id for t in self.tasks), default=0) + 1)
        self.tasks.append(saved)
        return Success(saved)

    def complete_task(self, task_id: int, value: bool) -> Result[None]:
        self.calls.append(("complete_task", task_id, value))
        if self.fail_with is not None:
            return Error(self.fail_with)
        for i, t in enumerate(self.tasks):
            if t.id == task_id:
                self.tasks[i] = replace(t, done=value)
                return Success(None)
        return Error(TaskNotFoundError(task_id))

    def delete_task(self, task_id: int) -> Result[None]:
        self.calls.append(("delete_task", task_id))
        if self.fail_with is not None:
            return Error(self.fail_with)
        for i, t in enumerate(self.tasks):
            if t.id == task_id:
                del self.tasks[i]
                return Success(None)
        return Error(TaskNotFoundError(task_id))

    def delete_all_tasks(self) -> Result[None]:
        self.calls.append(("delete_all_tasks",))
        if self.fail_with is not None:
            return Error(self.fail_with)
        self.tasks.clear()
        return Success(None)
