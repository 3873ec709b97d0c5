"""Read a stream line by line, pulling a fixed number of characters at a time."""

from __future__ import annotations

from collections.abc import Iterator
from typing import IO, AnyStr, Generic

DEFAULT_BUFFER_SIZE = 10


class LineReader(Generic[AnyStr]):
    """Splits a text or binary stream into lines, each keeping its newline.

    The stream is read in chunks of ``buffer_size`` until a newline shows up
    or the stream runs dry. Text left over after a line is kept for the next
    call. The last line is returned without a newline if the stream does not
    end with one.
    """

    def __init__(self, stream: IO[AnyStr], buffer_size: int = DEFAULT_BUFFER_SIZE) -> None:
        if buffer_size <= 0:
            raise ValueError(f"buffer_size must be positive, got {buffer_size}")
        self._stream = stream
        self._buffer_size = buffer_size
        self._pending: AnyStr | None = None
        self._newline: AnyStr | None = None

    def _read_chunk(self) -> AnyStr | None:
        chunk = self._stream.read(self._buffer_size)
        if not chunk:
            return None
        if self._newline is None:
            self._newline = b"\n" if isinstance(chunk, (bytes, bytearray)) else "\n"
        return chunk

    def readline(self) -> AnyStr | None:
        """Return the next line, or None once the stream is exhausted."""
        pending = self._pending
        while pending is None or self._newline not in pending:
            chunk = self._read_chunk()
            if chunk is None:
                break
            pending = chunk if pending is None else pending + chunk
        if not pending:
            self._pending = None
            return None
        end = pending.find(self._newline)
        if end < 0:
            self._pending = None
            return pending
        rest = pending[end + 1 :]
        self._pending = rest if rest else None
        return pending[: end + 1]

    def __iter__(self) -> Iterator[AnyStr]:
        while True:
            line = self.readline()
            if line is None:
                return
            yield line


def read_lines(stream: IO[AnyStr], buffer_size: int = DEFAULT_BUFFER_SIZE) -> Iterator[AnyStr]:
    """Yield every line of ``stream`` in order."""
    yield from LineReader(stream, buffer_size)