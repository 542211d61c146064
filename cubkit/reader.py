"""Reading a stream one line at a time, keeping leftovers per stream."""

from __future__ import annotations

from typing import AnyStr, Dict, Iterator, Optional, Any

BUFFER_SIZE = 1


class LineReader:
    """Read lines from any number of streams, one chunk of buffer_size at a time.

    Text that was read past the end of a returned line is kept for the next
    call on the same stream. Lines keep their trailing newline; the last line
    of a stream may lack one. Both text and binary streams are accepted.
    """

    def __init__(self, buffer_size: int = BUFFER_SIZE) -> None:
        if buffer_size < 1:
            raise ValueError("buffer_size must be at least 1")
        self.buffer_size = buffer_size
        self._stash: Dict[Any, Any] = {}

    def next_line(self, stream: Any) -> Optional[AnyStr]:
        """Return the next line of stream, or None once it is exhausted."""
        stash = self._stash.pop(stream, None)
        while True:
            chunk = stream.read(self.buffer_size)
            if not chunk and stash is None:
                return None
            stash = chunk if stash is None else stash + chunk
            newline = "\n" if isinstance(stash, str) else b"\n"
            if newline in stash or not chunk:
                break
        if not stash:
            return None
        index = stash.find(newline)
        if index < 0:
            line, rest = stash, stash[:0]
        else:
            line, rest = stash[:index + 1], stash[index + 1:]
        self._stash[stream] = rest
        return line

    def lines(self, stream: Any) -> Iterator[AnyStr]:
        """Yield every remaining line of stream."""
        while (line := self.next_line(stream)) is not None:
            yield line


_default_reader = LineReader()


def get_next_line(stream: Any) -> Optional[AnyStr]:
    """Return the next line of stream using a shared reader, or None at the end."""
    return _default_reader.next_line(stream)