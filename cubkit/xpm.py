"""Loading XPM pixmaps into in-memory images.

Only the parts of the format that a plain pixel loader needs are handled: the
header, the colour table (``c`` keys) and the pixel rows. Colour keys made of
one or two characters use a direct table where a later definition replaces an
earlier one; longer keys are searched in a list where the first definition
wins.
"""

from __future__ import annotations

import re
from pathlib import Path
from typing import Dict, Iterable, Iterator, List, Optional, Union

from cubkit.colors import find_color
from cubkit.convert import atoi
from cubkit.image import Image, new_image
from cubkit.wordtab import str_str, str_str_quoted, str_to_wordtab

TRANSPARENT = 0xFF000000
_NAME_LIMIT = 63
_HEX_PREFIX = re.compile(r"\s*([+-]?)(?:0[xX](?=[0-9a-fA-F]))?([0-9a-fA-F]*)")


class XpmError(ValueError):
    """Raised when XPM data cannot be turned into an image."""


def _to_int32(value: int) -> int:
    value &= 0xFFFFFFFF
    return value - (1 << 32) if value >= (1 << 31) else value


def color_key(text: str, cpp: int) -> int:
    """Pack the first cpp characters of text into one integer key."""
    if cpp < 1:
        raise XpmError("characters per pixel must be positive")
    if len(text) < cpp:
        raise XpmError(f"expected {cpp} characters for a colour key, got {text!r}")
    result = 0
    for char in text[:cpp]:
        result = (result << 8) + ord(char)
    return result


def _parse_hex(text: str) -> int:
    match = _HEX_PREFIX.match(text)
    sign, digits = match.group(1), match.group(2)
    value = int(digits, 16) if digits else 0
    if sign == "-":
        value = -value
    return _to_int32(value)


def text_rgb(name: str, suffix: Optional[str] = None) -> int:
    """Return the colour named by an XPM colour specification.

    ``#RRGGBB`` values are read as hexadecimal. Otherwise the name, joined
    with suffix by a space when one is given, is looked up in the colour
    table; an unknown name gives 0 and ``None`` gives -1.
    """
    if name.startswith("#"):
        return _parse_hex(name[1:])
    if suffix is not None:
        name = f"{name} {suffix}"[:_NAME_LIMIT]
    color = find_color(name)
    return 0 if color is None else color


def _blank(text: str, start: int, count: int) -> str:
    end = min(len(text), start + max(count, 0))
    return text[:start] + " " * (end - start) + text[end:]


def strip_comments(text: str) -> str:
    """Replace C-style comments outside quoted strings with spaces.

    The result has the same length as text. A ``//`` comment is blanked up to
    and including its newline.
    """
    size = len(text)
    while (begin := str_str_quoted(text, "/*", size)) is not None:
        end = str_str(text[begin + 2:], "*/", size - begin - 2)
        text = _blank(text, begin, (-1 if end is None else end) + 4)
    while (begin := str_str_quoted(text, "//", size)) is not None:
        end = str_str(text[begin + 2:], "\n", size - begin - 2)
        text = _blank(text, begin, (-1 if end is None else end) + 3)
    return text


def _next_line(lines: Iterator[str], what: str) -> str:
    try:
        return next(lines)
    except StopIteration:
        raise XpmError(f"XPM data ends before the {what}") from None


def _header(line: str) -> List[int]:
    words = str_to_wordtab(line)
    if len(words) < 4:
        raise XpmError(f"incomplete XPM header: {line!r}")
    values = [atoi(word) for word in words[:4]]
    if 0 in values:
        raise XpmError(f"invalid XPM header: {line!r}")
    return values


def _color_entry(line: str, cpp: int) -> int:
    if len(line) < cpp:
        raise XpmError(f"colour line too short: {line!r}")
    words = str_to_wordtab(line[cpp:])
    try:
        index = words.index("c") + 1
    except ValueError:
        raise XpmError(f"colour line has no 'c' key: {line!r}") from None
    if index >= len(words):
        raise XpmError(f"colour line has no colour after 'c': {line!r}")
    suffix = words[index + 1] if index + 1 < len(words) else None
    return text_rgb(words[index], suffix)


def parse_xpm(lines: Iterable[str]) -> Image:
    """Build an image from the strings of an XPM: header, colours, then rows."""
    source = iter(lines)
    width, height, ncolors, cpp = _header(_next_line(source, "header"))
    if ncolors < 0 or cpp < 0:
        raise XpmError("colour count and characters per pixel must be positive")

    direct = cpp <= 2
    colors: Dict[int, int] = {}
    for _ in range(ncolors):
        line = _next_line(source, "colour table")
        rgb = _color_entry(line, cpp)
        key = color_key(line, cpp)
        if direct:
            colors[key] = rgb
        else:
            colors.setdefault(key, rgb)

    try:
        image = new_image(width, height)
    except ValueError as exc:
        raise XpmError(str(exc)) from exc

    for y in range(height):
        line = _next_line(source, "pixel rows")
        for x in range(width):
            color = colors.get(color_key(line[cpp * x:], cpp), 0)
            if color == -1:
                color = TRANSPARENT
            image.put_pixel(x, y, color)
    return image


def xpm_to_image(data: Iterable[str]) -> Image:
    """Build an image from XPM data given as its list of strings."""
    return parse_xpm(data)


def _quoted_strings(text: str) -> Iterator[str]:
    pos = 0
    while True:
        start = text.find('"', pos)
        if start < 0:
            return
        end = text.find('"', start + 1)
        if end < 0:
            return
        yield text[start + 1:end]
        pos = end + 1


def xpm_file_to_image(path: Union[str, Path]) -> Image:
    """Read an XPM file written as C source and build an image from it."""
    text = Path(path).read_text(encoding="latin-1")
    return parse_xpm(_quoted_strings(strip_comments(text)))