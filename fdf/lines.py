"""Reading a stream one line at a time through a fixed-size read buffer."""

from __future__ import annotations

from typing import IO, AnyStr, Generic, Iterator, Optional

BUFFER_SIZE = 21


class LineReader(Generic[AnyStr]):
    """Read lines from a text or binary stream in chunks of ``buffer_size``.

    Each line keeps its trailing newline. A chunk shorter than the buffer
    is taken as the end of the data: whatever is pending is returned as the
    last line. Text left over after a newline is kept for the next call.
    """

    def __init__(self, stream: IO[AnyStr], buffer_size: int = BUFFER_SIZE) -> None:
        if buffer_size <= 0:
            raise ValueError(f"buffer size must be positive, got {buffer_size}")
        self._stream = stream
        self._size = buffer_size
        self._pending: Optional[AnyStr] = None

    def read_line(self) -> Optional[AnyStr]:
        """Return the next line, or None when nothing is left."""
        while True:
            chunk = self._stream.read(self._size)
            pending = chunk if self._pending is None else self._pending + chunk
            newline = "\n" if isinstance(pending, str) else b"\n"
            index = pending.find(newline)
            if index >= 0:
                self._pending = pending[index + 1:]
                return pending[:index + 1]
            if len(chunk) < self._size:
                self._pending = None
                return pending or None
            self._pending = pending

    def __iter__(self) -> Iterator[AnyStr]:
        while (line := self.read_line()) is not None:
            yield line


def read_lines(stream: IO[AnyStr], buffer_size: int = BUFFER_SIZE) -> Iterator[AnyStr]:
    """Yield the lines of ``stream``, each with its trailing newline."""
    yield from LineReader(stream, buffer_size)