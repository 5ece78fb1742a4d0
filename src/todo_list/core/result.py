# src/todo_list/core/result.py

"""
Tagged outcome of a data source call.

Every TaskRepo operation returns either Success(value) or Error(exception),
so commands handle reads and mutations the same way.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Generic, TypeVar

T = TypeVar("T")


@dataclass(frozen=True, slots=True)
class Success(Generic[T]):
    value: T

    @property
    def ok(self) -> bool:
        return True

    def unwrap(self) -> T:
        return self.value


@dataclass(frozen=True, slots=True)
class Error:
    exception: Exception

    @property
    def ok(self) -> bool:
        return False

    def unwrap(self):
        """Re-raise the wrapped exception."""
        raise self.exception


Result = Success[T] | Error
