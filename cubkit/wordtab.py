"""Splitting on blanks and searching with an optional quote-awareness."""

from __future__ import annotations

import re
from typing import List, Optional

_BLANKS = re.compile(r"[ \t]+")


def _c_string(text: str) -> str:
    """Return text up to its first NUL, as a C string would see it."""
    return text.split("\0", 1)[0]


def str_to_wordtab(text: str) -> List[str]:
    """Split text into words separated by runs of spaces and tabs."""
    return [word for word in _BLANKS.split(_c_string(text)) if word]


def _check(find: str) -> None:
    if not find:
        raise ValueError("search string must not be empty")


def str_str(text: str, find: str, length: int) -> Optional[int]:
    """Return the first position of find in text, or None.

    None is also returned when find is longer than length.
    """
    _check(find)
    if len(find) > length:
        return None
    index = _c_string(text).find(find)
    return None if index < 0 else index


def str_str_quoted(text: str, find: str, length: int) -> Optional[int]:
    """Like str_str, but ignore matches inside double-quoted sections."""
    _check(find)
    if len(find) > length:
        return None
    text = _c_string(text)
    quoted = False
    for pos in range(len(text) - len(find) + 1):
        if text[pos] == '"':
            quoted = not quoted
        if not quoted and text.startswith(find, pos):
            return pos
    return None