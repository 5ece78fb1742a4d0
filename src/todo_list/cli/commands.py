# src/todo_list/cli/commands.py

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from collections.abc import Callable, Sequence
from typing import Any, ClassVar

from ..core.ports import TaskRepo
from ..core.result import Result, Success
from ..core.utils import can_convert_to_long
from ..tasks.task_models import Task

CommandEmitter = Callable[[str], None]

logger = logging.getLogger(__name__)

TASK_SEPARATOR = "=" * 10


class CommandFormatError(Exception):
    """The input line does not form a valid command."""


def _fmt_bool(value: bool) -> str:
    return "true" if value else "false"


def _require_task_id(tokens: list[str]) -> None:
    """Validation shared by the commands taking a single task id argument."""
    if len(tokens) == 1:
        raise CommandFormatError("you should add id of task")
    if len(tokens) > 2 or not can_convert_to_long(tokens[1]):
        raise CommandFormatError(f"{tokens[1]} is not digit")


class Command(ABC):
    """
    One parsed, validated user request.

    Subclasses provide:
    - name / usage / help_text for dispatch and the help listing
    - can_create(tokens): eligibility check, raising CommandFormatError on bad arguments
    - from_tokens(factory, tokens): build the instance
    - execute(): the data source call, returning a Result
    """

    name: ClassVar[str]
    usage: ClassVar[str]
    help_text: ClassVar[str]

    def __init__(self, store: TaskRepo) -> None:
        self.store = store

    @classmethod
    def matches(cls, tokens: list[str]) -> bool:
        return bool(tokens) and tokens[0] == cls.name

    @classmethod
    def can_create(cls, tokens: list[str]) -> bool:
        return cls.matches(tokens)

    @classmethod
    @abstractmethod
    def from_tokens(cls, factory: CommandFactory, tokens: list[str]) -> Command: ...

    @abstractmethod
    def execute(self) -> Result[Any]: ...

    def run(self, emit: CommandEmitter = print) -> None:
        result = self.execute()
        if isinstance(result, Success):
            self.on_success(result.value, emit)
        else:
            self.on_fail(result.exception, emit)

    @abstractmethod
    def on_success(self, value: Any, emit: CommandEmitter) -> None: ...

    def on_fail(self, exc: Exception, emit: CommandEmitter) -> None:
        logger.debug("%s failed: %r", self.name, exc)
        emit(str(exc))


class _TaskIdCommand(Command):
    """Base for commands of the form `<name> <id>`."""

    def __init__(self, store: TaskRepo, task_id: int) -> None:
        super().__init__(store)
        self.task_id = task_id

    @classmethod
    def can_create(cls, tokens: list[str]) -> bool:
        if not cls.matches(tokens):
            return False
        _require_task_id(tokens)
        return True

    @classmethod
    def from_tokens(cls, factory: CommandFactory, tokens: list[str]) -> Command:
        return cls(factory.store, int(tokens[1]))


class PrintAllTasksCommand(Command):
    name = "tasks"
    usage = "tasks [done|active]"
    help_text = "Show all tasks, or only done / active ones."

    FILTERS: ClassVar[tuple[str, ...]] = ("done", "active")

    def __init__(self, store: TaskRepo, status_filter: str | None = None) -> None:
        super().__init__(store)
        self.status_filter = status_filter

    @classmethod
    def can_create(cls, tokens: list[str]) -> bool:
        if not cls.matches(tokens):
            return False
        if len(tokens) > 1 and tokens[1] not in cls.FILTERS:
            raise CommandFormatError(f"Unknown param {tokens[1]} for tasks command")
        if len(tokens) > 2:
            raise CommandFormatError(f"Unknown param {tokens[2]} for tasks command")
        return True

    @classmethod
    def from_tokens(cls, factory: CommandFactory, tokens: list[str]) -> Command:
        return cls(factory.store, tokens[1] if len(tokens) > 1 else None)

    def execute(self) -> Result[list[Task]]:
        result = self.store.get_tasks()
        if not isinstance(result, Success) or self.status_filter is None:
            return result
        want_done = self.status_filter == "done"
        return Success([t for t in result.value if t.done == want_done])

    def on_success(self, value: list[Task], emit: CommandEmitter) -> None:
        emit("Tasks:")
        for task in value:
            emit(f"id: {task.id}")
            emit(f"name: {task.name}")
            emit(f"Done: {_fmt_bool(task.done)}")
            emit(TASK_SEPARATOR)


class PrintTaskByIdCommand(_TaskIdCommand):
    name = "task"
    usage = "task <id>"
    help_text = "Show one task."

    def execute(self) -> Result[Task]:
        return self.store.get_task(self.task_id)

    def on_success(self, value: Task, emit: CommandEmitter) -> None:
        emit(f"id: {value.id}")
        emit(f"name: {value.name}")
        emit(f"Done: {_fmt_bool(value.done)}")
        emit("")


class DeleteAllTasksCommand(Command):
    name = "delete-all"
    usage = "delete-all"
    help_text = "Delete every task."

    @classmethod
    def from_tokens(cls, factory: CommandFactory, tokens: list[str]) -> Command:
        return cls(factory.store)

    def execute(self) -> Result[None]:
        return self.store.delete_all_tasks()

    def on_success(self, value: None, emit: CommandEmitter) -> None:
        emit("All tasks are deleted")


class DeleteTaskByIdCommand(_TaskIdCommand):
    name = "delete"
    usage = "delete <id>"
    help_text = "Delete one task."

    def execute(self) -> Result[None]:
        return self.store.delete_task(self.task_id)

    def on_success(self, value: None, emit: CommandEmitter) -> None:
        emit(f"Task with id {self.task_id} deleted")


class CompleteTaskByIdCommand(_TaskIdCommand):
    name = "complete"
    usage = "complete <id>"
    help_text = "Mark a task as done."

    def execute(self) -> Result[None]:
        return self.store.complete_task(self.task_id, True)

    def on_success(self, value: None, emit: CommandEmitter) -> None:
        emit(f"Task with id {self.task_id} completed")


class ActivateTaskByIdCommand(_TaskIdCommand):
    name = "activate"
    usage = "activate <id>"
    help_text = "Mark a task as not done."

    def execute(self) -> Result[None]:
        return self.store.complete_task(self.task_id, False)

    def on_success(self, value: None, emit: CommandEmitter) -> None:
        emit(f"Task with id: {self.task_id} activated")


class CreateTaskCommand(Command):
    name = "create"
    usage = "create <name...>"
    help_text = "Create a task; every word after 'create' is the name."

    def __init__(self, store: TaskRepo, task_name: str) -> None:
        super().__init__(store)
        self.task_name = task_name

    @classmethod
    def can_create(cls, tokens: list[str]) -> bool:
        if not cls.matches(tokens):
            return False
        if len(tokens) == 1:
            raise CommandFormatError("task name not found")
        return True

    @classmethod
    def from_tokens(cls, factory: CommandFactory, tokens: list[str]) -> Command:
        return cls(factory.store, " ".join(tokens[1:]))

    def execute(self) -> Result[Task]:
        return self.store.save_task(Task(self.task_name))

    def on_success(self, value: Task, emit: CommandEmitter) -> None:
        emit(f"Task with name {self.task_name} created")


class HelpCommand(Command):
    name = "help"
    usage = "help"
    help_text = "Show available commands."

    def __init__(self, store: TaskRepo, help_text: str) -> None:
        super().__init__(store)
        self.text = help_text

    @classmethod
    def from_tokens(cls, factory: CommandFactory, tokens: list[str]) -> Command:
        return cls(factory.store, factory.build_help())

    def execute(self) -> Result[str]:
        return Success(self.text)

    def on_success(self, value: str, emit: CommandEmitter) -> None:
        emit(value)


# Trial order matters: the first command whose check passes wins,
# and a check that raises stops the search.
DEFAULT_COMMANDS: tuple[type[Command], ...] = (
    PrintAllTasksCommand,
    PrintTaskByIdCommand,
    DeleteAllTasksCommand,
    DeleteTaskByIdCommand,
    CompleteTaskByIdCommand,
    ActivateTaskByIdCommand,
    CreateTaskCommand,
    HelpCommand,
)


class CommandFactory:
    """Turns a raw input line into a ready-to-run Command for `store`."""

    def __init__(self, store: TaskRepo, commands: Sequence[type[Command]] = DEFAULT_COMMANDS) -> None:
        self.store = store
        self._commands = tuple(commands)

    @property
    def commands(self) -> tuple[type[Command], ...]:
        return self._commands

    def create(self, command_string: str) -> Command:
        """
        Split `command_string` on single spaces and build the first matching command.

        Raises CommandFormatError for an unknown command or invalid arguments.
        """
        tokens = command_string.split(" ")
        for command_cls in self._commands:
            if command_cls.can_create(tokens):
                logger.debug("Dispatching %r to %s", command_string, command_cls.__name__)
                return command_cls.from_tokens(self, tokens)
        raise CommandFormatError(f"command '{tokens[0]}' not found")

    def build_help(self) -> str:
        width = max((len(c.usage) for c in self._commands), default=0)
        lines = ["Available commands:"]
        for command_cls in self._commands:
            lines.append(f"  {command_cls.usage.ljust(width)}  {command_cls.help_text}")
        return "\n".join(lines)
