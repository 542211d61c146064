"""Conversions between decimal text and integers."""

from __future__ import annotations

_SPACES = "\t\n\v\f\r "
_DIGITS = "0123456789"


def atoi(text: str) -> int:
    """Parse a leading decimal integer from text.

    Leading whitespace is skipped, then one optional '+' or '-', then as many
    digits as follow. Text with no digits there yields 0.
    """
    rest = text.lstrip(_SPACES)
    sign = 1
    if rest[:1] in ("+", "-"):
        if rest[0] == "-":
            sign = -1
        rest = rest[1:]
    end = len(rest) - len(rest.lstrip(_DIGITS))
    digits = rest[:end]
    return sign * int(digits) if digits else 0


def itoa(n: int) -> str:
    """Return the decimal representation of n, with a leading '-' if negative."""
    return str(int(n))