"""Building new strings out of existing ones: splitting, trimming, slicing, mapping."""

from __future__ import annotations

from typing import Callable, List, Optional


def _check_separator(sep: str) -> None:
    if len(sep) != 1:
        raise ValueError("separator must be a single character")


def split(s: str, sep: str) -> List[str]:
    """Split s on every occurrence of sep, dropping empty words.

    Runs of separators count as one, and separators at either end produce
    no empty words.
    """
    _check_separator(sep)
    return [word for word in s.split(sep) if word]


def strtrim(s: str, charset: Optional[str]) -> str:
    """Remove every character found in charset from both ends of s.

    A charset of None returns s unchanged.
    """
    if charset is None:
        return s
    return s.strip(charset) if charset else s


def substr(s: str, start: int, length: int) -> str:
    """Return at most length characters of s beginning at start.

    A start past the end of s yields an empty string.
    """
    if start < 0:
        raise ValueError("start must not be negative")
    if length < 0:
        raise ValueError("length must not be negative")
    if start > len(s):
        return ""
    return s[start:start + length]


def strjoin(s1: Optional[str], s2: Optional[str]) -> Optional[str]:
    """Concatenate s1 and s2.

    When one of them is None the other is returned; when both are None the
    result is None.
    """
    if s1 is None and s2 is None:
        return None
    if s1 is None:
        return s2
    if s2 is None:
        return s1
    return s1 + s2


def strmapi(s: str, f: Callable[[int, str], str]) -> str:
    """Return a new string made of f(index, char) for every character of s."""
    return "".join(f(index, char) for index, char in enumerate(s))


def striteri(s: str, f: Callable[[int, str], Optional[str]]) -> str:
    """Call f(index, char) on every character of s in order.

    Where f returns a string it replaces that character; where it returns
    None the character is kept. The resulting string is returned.
    """
    chars = list(s)
    for index, char in enumerate(s):
        replacement = f(index, char)
        if replacement is not None:
            chars[index] = replacement
    return "".join(chars)