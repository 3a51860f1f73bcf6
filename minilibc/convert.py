"""Conversion between text and 32-bit integers."""

from __future__ import annotations

import re

INT_MIN = -(2**31)
INT_MAX = 2**31 - 1

_LEADING_NUMBER = re.compile("[\t\n\v\f\r ]*([+-]?)([0-9]*)")


def _wrap_int32(value: int) -> int:
    return (value - INT_MIN) % 2**32 + INT_MIN


def atoi(text: str) -> int:
    """Parse a leading optionally signed decimal after whitespace; 0 if none.

    The result wraps around like a 32-bit signed integer.
    """
    match = _LEADING_NUMBER.match(text)
    sign, digits = match.groups()
    value = int(digits) if digits else 0
    if sign == "-":
        value = -value
    return _wrap_int32(value)


def itoa(n: int) -> str:
    """Decimal text of a 32-bit signed integer."""
    if not INT_MIN <= n <= INT_MAX:
        raise OverflowError(f"{n} does not fit in a 32-bit signed integer")
    return str(n)