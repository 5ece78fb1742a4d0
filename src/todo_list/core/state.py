# src/todo_list/core/state.py

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

from .ports import TaskRepo

if TYPE_CHECKING:
    from ..cli.commands import CommandFactory


@dataclass
class AppState:
    # Settings object (config.Settings or a test stand-in).
    settings: Any

    task_store: TaskRepo
    commands: CommandFactory
