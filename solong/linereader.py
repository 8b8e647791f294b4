"""Line-by-line reading from a stream in fixed-size chunks."""

from __future__ import annotations

from collections.abc import Iterator
from typing import IO, AnyStr, Generic

BUFFER_SIZE = 42


def _split_line(data: AnyStr) -> tuple[AnyStr, AnyStr] | None:
    """Split data after its first newline, or return None if it has none."""
    newline = "\n" if isinstance(data, str) else b"\n"
    index = data.find(newline)  # type: ignore[arg-type]
    if index < 0:
        return None
    return data[:index + 1], data[index + 1:]


class LineReader(Generic[AnyStr]):
    """Read a stream line by line, pulling at most buffer_size items per read call.

    Works with both text and binary streams; lines keep their trailing newline.
    """

    def __init__(self, stream: IO[AnyStr], buffer_size: int = BUFFER_SIZE) -> None:
        if buffer_size <= 0:
            raise ValueError("buffer_size must be positive")
        self._stream = stream
        self._buffer_size = buffer_size
        self._pending: AnyStr | None = None

    def read_line(self) -> AnyStr | None:
        """Return the next line, or None once the stream is exhausted.

        A read error discards any buffered data and propagates.
        """
        pending = self._pending
        while pending is None or _split_line(pending) is None:
            try:
                chunk = self._stream.read(self._buffer_size)
            except OSError:
                self._pending = None
                raise
            if not chunk:
                break
            pending = chunk if pending is None else pending + chunk
        if not pending:
            self._pending = None
            return None
        split = _split_line(pending)
        if split is None:
            line, rest = pending, pending[:0]
        else:
            line, rest = split
        self._pending = rest or None
        return line

    def __iter__(self) -> Iterator[AnyStr]:
        while (line := self.read_line()) is not None:
            yield line