"""Validation of unsigned integers given on the command line."""

from __future__ import annotations

from typing import Callable

_DECIMAL = frozenset("0123456789")
_USIZE_MAX = 2**64 - 1


def _parse_unsigned(text: str, maximum: int) -> int:
    """Parse a decimal unsigned integer no larger than ``maximum``."""
    if not text:
        raise ValueError("cannot parse integer from empty string")
    digits = text[1:] if text[0] == "+" else text
    if not digits or any(char not in _DECIMAL for char in digits):
        raise ValueError("invalid digit found in string")
    value = int(digits)
    if value > maximum:
        raise ValueError("number too large to fit in target type")
    return value


def in_range(low: int, high: int) -> Callable[[str], int]:
    """Return a checker that parses text and requires ``low <= value <= high``."""

    def check(text: str) -> int:
        value = _parse_unsigned(text, _USIZE_MAX)
        if not low <= value <= high:
            raise ValueError(f"not in range {low}-{high}")
        return value

    return check