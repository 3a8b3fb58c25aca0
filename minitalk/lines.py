"""Line-by-line reading from a stream or file descriptor in fixed-size chunks."""

from __future__ import annotations

import os
from typing import IO, Iterator, Optional, Union

BUFFER_SIZE = 1024

Source = Union[int, IO[str], IO[bytes]]
Line = Union[str, bytes]


class LineReader:
    """Reads lines, keeping their newline, from a file object or descriptor.

    Data is read ``buffer_size`` units at a time until a newline turns up or
    the source is exhausted. Text streams yield ``str`` and binary streams
    and descriptors yield ``bytes``.
    """

    def __init__(self, stream: Source, buffer_size: int = BUFFER_SIZE) -> None:
        if isinstance(stream, int) and stream < 0:
            raise ValueError(f"invalid file descriptor {stream}")
        if buffer_size <= 0:
            raise ValueError(f"buffer_size must be positive, got {buffer_size}")
        self._stream = stream
        self._buffer_size = buffer_size
        self._pending: Optional[Line] = None
        self._newline: Line = "\n"
        self._scanned = 0

    def _read(self) -> Line:
        try:
            if isinstance(self._stream, int):
                return os.read(self._stream, self._buffer_size)
            chunk = self._stream.read(self._buffer_size)
        except OSError:
            self._pending = None
            self._scanned = 0
            raise
        if isinstance(chunk, bytearray):
            chunk = bytes(chunk)
        return chunk

    def _append(self, chunk: Line) -> None:
        if self._pending is None:
            self._newline = b"\n" if isinstance(chunk, bytes) else "\n"
            self._pending = chunk
        else:
            self._pending += chunk

    def _take(self, end: int) -> Line:
        assert self._pending is not None
        line, self._pending = self._pending[:end], self._pending[end:]
        self._scanned = 0
        return line

    def readline(self) -> Optional[Line]:
        """Return the next line, or None once nothing is left."""
        while True:
            if self._pending:
                index = self._pending.find(self._newline, self._scanned)
                if index >= 0:
                    return self._take(index + 1)
                self._scanned = len(self._pending)
            chunk = self._read()
            if not chunk:
                break
            self._append(chunk)
        if not self._pending:
            return None
        return self._take(len(self._pending))

    def __iter__(self) -> Iterator[Line]:
        while (line := self.readline()) is not None:
            yield line