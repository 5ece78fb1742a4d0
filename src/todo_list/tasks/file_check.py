# src/todo_list/tasks/file_check.py

"""
Startup validation of the tasks file.

Runs once before the command loop. Any JsonFileError is fatal: the caller
prints it and exits without touching the file.
"""

from __future__ import annotations

import logging
from pathlib import Path

from ..config import DEFAULT_MAX_RECORDS
from .task_models import TaskFileFormatError, decode_tasks

logger = logging.getLogger(__name__)


class JsonFileError(Exception):
    """The tasks file cannot be used. Message carries the file name."""


class JsonFileNotExistsError(JsonFileError):
    def __init__(self, file_name: str) -> None:
        super().__init__(f"File '{file_name}' not exists")


class JsonFileIsBlankError(JsonFileError):
    def __init__(self, file_name: str) -> None:
        super().__init__(f"File '{file_name}' is blank")


class JsonFileWrongFormatError(JsonFileError):
    def __init__(self, file_name: str) -> None:
        super().__init__(f"File '{file_name}' has wrong json format")


class JsonFileUnreadableError(JsonFileError):
    def __init__(self, file_name: str) -> None:
        super().__init__(f"File '{file_name}' can't be read")


class JsonFileTooManyRecordsError(JsonFileError):
    def __init__(self, file_name: str) -> None:
        super().__init__(f"File '{file_name}' contains a lot of records")


def check_tasks_file(path: str | Path, *, max_records: int = DEFAULT_MAX_RECORDS) -> bool:
    """
    Check that `path` exists, is not blank, holds a JSON list of tasks
    and has at most `max_records` entries.

    Returns True on success; raises a JsonFileError subclass otherwise.
    """
    path = Path(path)
    name = path.name

    if not path.is_file():
        raise JsonFileNotExistsError(name)

    try:
        text = path.read_text(encoding="utf-8")
    except UnicodeDecodeError as e:
        raise JsonFileWrongFormatError(name) from e
    except OSError as e:
        raise JsonFileUnreadableError(name) from e

    if not text.strip():
        raise JsonFileIsBlankError(name)

    try:
        records = decode_tasks(text)
    except TaskFileFormatError as e:
        raise JsonFileWrongFormatError(name) from e

    if len(records) > max_records:
        raise JsonFileTooManyRecordsError(name)

    logger.info("Tasks file ok path=%s records=%d", path, len(records))
    return True
