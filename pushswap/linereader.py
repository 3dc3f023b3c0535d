"""Line-by-line reading from a stream in fixed-size chunks."""

from __future__ import annotations

from collections.abc import Iterator
from typing import IO, AnyStr, Generic

__all__ = ["LineReader", "DEFAULT_BUFFER_SIZE"]

DEFAULT_BUFFER_SIZE = 1000


def _newline(sample: AnyStr) -> AnyStr:
    return "\n" if isinstance(sample, str) else b"\n"  # type: ignore[return-value]


class LineReader(Generic[AnyStr]):
    """Read a text or binary stream one line at a time.

    Data is pulled from the stream in chunks of ``buffer_size`` until a
    newline shows up; whatever follows the newline is kept for the next
    call. Each line keeps its terminating newline, the last one may lack it.
    """

    def __init__(self, stream: IO[AnyStr], buffer_size: int = DEFAULT_BUFFER_SIZE) -> None:
        if buffer_size <= 0:
            raise ValueError(f"buffer size must be positive, got {buffer_size}")
        self._stream = stream
        self._buffer_size = buffer_size
        self._pending: AnyStr | None = None

    def _fill(self) -> None:
        pending = self._pending
        while True:
            chunk = self._stream.read(self._buffer_size)
            if not chunk:
                break
            pending = chunk if pending is None else pending + chunk
            if _newline(chunk) in chunk:
                break
        self._pending = pending

    def read_line(self) -> AnyStr | None:
        """Return the next line, or None once the stream is exhausted."""
        if self._pending is None or _newline(self._pending) not in self._pending:
            self._fill()
        pending = self._pending
        if not pending:
            self._pending = None
            return None
        end = pending.find(_newline(pending))
        if end < 0:
            self._pending = None
            return pending
        line = pending[: end + 1]
        rest = pending[end + 1 :]
        self._pending = rest if rest else None
        return line

    def __iter__(self) -> Iterator[AnyStr]:
        return iter(self.read_line, None)