# src/todo_list/core/utils.py

from __future__ import annotations

import re

LONG_MIN = -(2**63)
LONG_MAX = 2**63 - 1

_LONG_RE = re.compile(r"[+-]?[0-9]+")


def can_convert_to_long(value: str) -> bool:
    """
    True when `value` is a signed 64-bit integer literal ("-1", "+7", "123").

    Stricter than int(): surrounding whitespace and underscores are rejected.
    """
    if not _LONG_RE.fullmatch(value):
        return False
    return LONG_MIN <= int(value) <= LONG_MAX
