"""Reading a stream one line at a time through a fixed-size read buffer."""

from __future__ import annotations

import os
from typing import IO, Iterator

BUFFER_SIZE = 42

Chunk = bytes | str


class LineReader:
    """Return successive lines from a stream or file descriptor.

    Each line keeps its trailing newline; the last line may lack one. The
    stream is read ``buffer_size`` units at a time; text read past a newline
    is kept for the next call.
    """

    def __init__(self, stream: IO | int, buffer_size: int = BUFFER_SIZE) -> None:
        if buffer_size < 1:
            raise ValueError(f"buffer_size must be positive, got {buffer_size}")
        self._stream = stream
        self._buffer_size = buffer_size
        self._pending: Chunk | None = None

    def _read_chunk(self) -> Chunk:
        if isinstance(self._stream, int):
            return os.read(self._stream, self._buffer_size)
        return self._stream.read(self._buffer_size)

    def read_line(self) -> Chunk | None:
        """Return the next line, or None once the stream is exhausted."""
        pending = self._pending
        while True:
            if pending:
                newline = b"\n" if isinstance(pending, bytes) else "\n"
                index = pending.find(newline)
                if index >= 0:
                    self._pending = pending[index + 1:]
                    return pending[:index + 1]
            try:
                chunk = self._read_chunk()
            except OSError:
                self._pending = None
                raise
            if not chunk:
                self._pending = None
                return pending or None
            pending = chunk if pending is None else pending + chunk

    def __iter__(self) -> Iterator[Chunk]:
        while (line := self.read_line()) is not None:
            yield line