# cubkit

A small toolkit of building blocks for raycasting and map-loading projects.
It has no dependencies beyond the standard library.

## Modules

- `cubkit.chars` – ASCII character classification and case mapping
  (`is_alpha`, `is_digit`, `is_alnum`, `is_ascii`, `is_print`, `to_upper`,
  `to_lower`). Each function takes an integer code or a one-character string;
  the case mappings return the same kind of value they were given.
- `cubkit.memory` – helpers for `bytearray` buffers (`bzero`, `calloc`,
  `memchr`, `memcmp`, `memcpy`, `memmove`, `memset`). Spans that run past a
  buffer raise `ValueError`; `calloc` raises `MemoryError` for sizes that
  would overflow.
- `cubkit.output` – writing a character, a string, a line or an integer to a
  text stream, standard output by default (`putchar_fd`, `putstr_fd`,
  `putendl_fd`, `putnbr_fd`).
- `cubkit.strings` – C-style string queries on Python strings (`strlen`,
  `strchr`, `strrchr`, `strncmp`, `strcmp`, `strnstr`, `strlcpy`, `strlcat`,
  `strdup`). Searches return an index or `None`; `strlcpy` and `strlcat`
  return the resulting text together with the length they tried to create.
- `cubkit.convert` – `atoi`, which reads a leading decimal integer after
  optional whitespace and sign and returns 0 when there are no digits, and
  `itoa`, which gives the decimal text of an integer.
- `cubkit.transform` – `split` (empty words dropped), `strtrim`, `substr`,
  `strjoin`, `strmapi`, `striteri`.
- `cubkit.linked` – a singly linked `LinkedList` of `Node` objects with
  `push_front`, `push_back`, `last`, `clear`, `for_each`, `map`, `len()` and
  iteration.
- `cubkit.reader` – `LineReader` and the module-level `get_next_line` for
  reading text or binary streams one line at a time, newline included.
  Leftover data is kept per stream between calls.
- `cubkit.wordtab` – splitting on runs of spaces and tabs (`str_to_wordtab`)
  and substring search, plain (`str_str`) or ignoring double-quoted sections
  (`str_str_quoted`).
- `cubkit.image` – in-memory pixel buffers (`Image`, `new_image`) with
  `put_pixel`, `get_pixel` and rows padded to 32 bits (`size_line`), plus
  `Visual` and `rgb_shifts` for packing `0xRRGGBB` colours on visuals of less
  than 24 bits.
- `cubkit.colors` – case-insensitive named colour lookup with `find_color`;
  unknown names give `None` and `"none"` gives -1.
- `cubkit.xpm` – reading XPM images from a list of strings (`xpm_to_image`,
  `parse_xpm`) or from an XPM file (`xpm_file_to_image`) into `Image`
  objects. Transparent pixels are stored as `0xFF000000`. Malformed data
  raises `XpmError`.

## Installation

```
pip install .
```

## Examples

Reading a map file line by line:

```python
from cubkit.reader import LineReader

reader = LineReader(buffer_size=64)
with open("level.cub") as stream:
    for line in reader.lines(stream):
        print(line.rstrip("\n"))
```

Splitting and converting fields:

```python
from cubkit.transform import split
from cubkit.convert import atoi

red, green, blue = (atoi(part) for part in split("220,100,0", ","))
```

Loading a texture:

```python
from cubkit.xpm import xpm_file_to_image

image = xpm_file_to_image("wall.xpm")
print(image.width, image.height, hex(image.get_pixel(0, 0)))
```

Drawing into a buffer:

```python
from cubkit.image import new_image

image = new_image(64, 64)
image.put_pixel(10, 10, 0xFF8800)
```

Looking up a colour by name:

```python
from cubkit.colors import find_color

find_color("dark orange")  # 0xff8c00
```

## What it does not do

cubkit opens no windows and talks to no display: images live only in memory
as byte buffers, and there is no event loop, keyboard or mouse handling, and
no way to show an image on screen. It has no command-line program either; it
is a library to import.

## Running the tests

```
pip install .[test]
pytest
```