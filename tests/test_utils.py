# tests/test_utils.py

from __future__ import annotations

import pytest

from todo_list.core.utils import can_convert_to_long


@pytest.mark.parametrize("value", ["1", "123", "-1", "+5", "0", "9223372036854775807", "-9223372036854775808"])
def test_can_convert_to_long(value: str) -> None:
    assert can_convert_to_long(value)


@pytest.mark.parametrize(
    "value",
    ["", " ", "a", "1a", " 1", "1 ", "1_000", "1.0", "-", "9223372036854775808", "-9223372036854775809"],
)
def test_cannot_convert_to_long(value: str) -> None:
    assert not can_convert_to_long(value)
