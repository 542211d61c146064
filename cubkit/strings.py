"""String searching, comparison and bounded copying.

Strings are ordinary Python strings. Functions that locate a character or
substring return an index, or None when nothing matches. A string is seen as
ending with a terminating NUL, so searching for code 0 finds the position
just past the last character.
"""

from __future__ import annotations

from itertools import chain, islice, repeat
from typing import Iterator, Optional, Tuple, Union

CharLike = Union[int, str]


def _code(c: CharLike) -> int:
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError("expected a single character")
        return ord(c)
    return int(c)


def _terminated(s: str) -> Iterator[int]:
    """Yield the character codes of s followed by an endless run of NULs."""
    return chain(map(ord, s), repeat(0))


def strlen(s: str) -> int:
    """Return the number of characters in s."""
    return len(s)


def strchr(s: str, c: CharLike) -> Optional[int]:
    """Return the index of the first occurrence of c in s, or None.

    Only the low byte of an integer code is used. Searching for NUL returns
    len(s).
    """
    code = _code(c) & 0xFF
    if code == 0:
        return len(s)
    index = s.find(chr(code))
    return None if index < 0 else index


def strrchr(s: str, c: CharLike) -> Optional[int]:
    """Return the index of the last occurrence of c in s, or None.

    Only the low byte of an integer code is used. Searching for NUL returns
    len(s).
    """
    code = _code(c) & 0xFF
    if code == 0:
        return len(s)
    index = s.rfind(chr(code))
    return None if index < 0 else index


def strncmp(s1: str, s2: str, n: int) -> int:
    """Compare at most n characters.

    Returns the difference between the first pair of differing character
    codes, or 0 when the compared parts are equal.
    """
    if n < 0:
        raise ValueError("n must not be negative")
    pairs = islice(zip(_terminated(s1), _terminated(s2)), n)
    for a, b in pairs:
        if a != b:
            return a - b
        if a == 0:
            return 0
    return 0


def strcmp(s1: str, s2: str) -> int:
    """Compare two strings; return the difference of the first mismatch or 0."""
    for a, b in zip(_terminated(s1), _terminated(s2)):
        if a != b:
            return a - b
        if a == 0:
            return 0
    return 0  # pragma: no cover - the terminator always ends the loop


def strnstr(haystack: str, needle: str, length: int) -> Optional[int]:
    """Find needle wholly inside the first length characters of haystack.

    An empty needle matches at index 0. Returns None when there is no match.
    """
    if length < 0:
        raise ValueError("length must not be negative")
    if not needle:
        return 0
    index = haystack[:length].find(needle)
    return None if index < 0 else index


def strlcpy(src: str, size: int) -> Tuple[str, int]:
    """Copy src into a destination of size characters, NUL included.

    Returns the copied text, truncated to size - 1 characters, and the full
    length of src so that truncation can be detected.
    """
    if size < 0:
        raise ValueError("size must not be negative")
    if size == 0:
        return "", len(src)
    return src[:size - 1], len(src)


def strlcat(dst: str, src: str, size: int) -> Tuple[str, int]:
    """Append src to dst inside a destination of size characters, NUL included.

    Returns the resulting text and the length it tried to create. When size is
    smaller than dst, dst is returned unchanged and the length reported is
    len(src) + size.
    """
    if size < 0:
        raise ValueError("size must not be negative")
    if size < len(dst):
        return dst, len(src) + size
    total = len(dst) + len(src)
    if size == len(dst):
        return dst, total
    combined = dst + src
    if len(combined) >= size:
        combined = combined[:size - 1]
    return combined, total


def strdup(s: str) -> str:
    """Return an independent copy of s."""
    return "".join(s)