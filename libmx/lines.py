"""Reading delimited records from a stream in fixed-size chunks."""

from __future__ import annotations

from collections.abc import Iterator
from typing import IO, AnyStr, Generic


class LineReader(Generic[AnyStr]):
    """Reads records ending in a delimiter from a text or binary stream.

    The stream is read ``buf_size`` units at a time. The delimiter is looked
    for only after a successful read, and whatever remains unterminated when
    the stream runs out is dropped.
    """

    def __init__(self, stream: IO[AnyStr], buf_size: int = 1024) -> None:
        if buf_size <= 0:
            raise ValueError("buffer size must be positive")
        self.stream = stream
        self.buf_size = buf_size
        self._leftover: AnyStr | None = None

    def read_line(self, delim: str | bytes = "\n") -> AnyStr | None:
        """Return the next record without its delimiter, or None at the end."""
        pending = self._leftover
        self._leftover = None
        while True:
            chunk = self.stream.read(self.buf_size)
            if not chunk:
                return None
            if isinstance(chunk, bytes) and isinstance(delim, str):
                delim = delim.encode()
            elif isinstance(chunk, str) and isinstance(delim, bytes):
                delim = delim.decode()
            if len(delim) != 1:
                raise ValueError("delimiter must be a single character")
            pending = chunk if pending is None else pending + chunk
            index = pending.find(delim)
            if index != -1:
                self._leftover = pending[index + 1 :]
                return pending[:index]

    def __iter__(self) -> Iterator[AnyStr]:
        while (line := self.read_line()) is not None:
            yield line