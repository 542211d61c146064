"""Byte-buffer helpers working on bytearray objects."""

from __future__ import annotations

import sys
from typing import Optional, Union

Buffer = Union[bytes, bytearray, memoryview]

SIZE_MAX = sys.maxsize * 2 + 1


def _check_span(length: int, n: int) -> None:
    if n < 0:
        raise ValueError("length must not be negative")
    if n > length:
        raise ValueError(f"length {n} exceeds buffer of {length} bytes")


def bzero(buf: bytearray, n: int) -> bytearray:
    """Zero the first n bytes of buf and return it."""
    _check_span(len(buf), n)
    buf[:n] = bytes(n)
    return buf


def calloc(count: int, size: int) -> bytearray:
    """Return a zero-filled buffer of count * size bytes.

    Raises MemoryError where the size would overflow a machine size.
    """
    if count < 0 or size < 0:
        raise ValueError("count and size must not be negative")
    if size != 0 and count >= SIZE_MAX // size:
        raise MemoryError("requested allocation is too large")
    return bytearray(count * size)


def memchr(buf: Buffer, c: int, n: int) -> Optional[int]:
    """Return the index of the first byte equal to c among the first n, or None."""
    _check_span(len(buf), n)
    index = bytes(buf[:n]).find(c & 0xFF)
    return None if index < 0 else index


def memcmp(a: Buffer, b: Buffer, n: int) -> int:
    """Compare the first n bytes; return the difference of the first mismatch or 0."""
    _check_span(len(a), n)
    _check_span(len(b), n)
    for x, y in zip(bytes(a[:n]), bytes(b[:n])):
        if x != y:
            return x - y
    return 0


def memcpy(dst: bytearray, src: Buffer, n: int) -> bytearray:
    """Copy n bytes from src into the start of dst and return dst."""
    _check_span(len(dst), n)
    _check_span(len(src), n)
    dst[:n] = bytes(src[:n])
    return dst


def memmove(buf: bytearray, dst: int, src: int, n: int) -> bytearray:
    """Copy n bytes inside buf from offset src to offset dst; overlap is safe."""
    if dst < 0 or src < 0:
        raise ValueError("offsets must not be negative")
    _check_span(len(buf) - dst, n)
    _check_span(len(buf) - src, n)
    buf[dst:dst + n] = bytes(buf[src:src + n])
    return buf


def memset(buf: bytearray, c: int, n: int) -> bytearray:
    """Fill the first n bytes of buf with the low byte of c and return buf."""
    _check_span(len(buf), n)
    buf[:n] = bytes([c & 0xFF]) * n
    return buf