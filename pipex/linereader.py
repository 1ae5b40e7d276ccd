"""Reading a file descriptor one line at a time."""

from __future__ import annotations

import os
from typing import Dict, Iterator, Optional

BUFFER_SIZE = 1


class LineReader:
    """Reads lines from a file descriptor, buffer_size bytes per read call."""

    def __init__(self, fd: int, buffer_size: int = BUFFER_SIZE) -> None:
        if fd < 0:
            raise ValueError(f"invalid file descriptor {fd}")
        if buffer_size < 1:
            raise ValueError("buffer size must be positive")
        self.fd = fd
        self.buffer_size = buffer_size
        self._pending = bytearray()

    @staticmethod
    def _decode(data: bytes) -> str:
        return data.decode("utf-8", errors="surrogateescape")

    def read_line(self) -> Optional[str]:
        """The next line with its newline, the unterminated rest at end of
        input, or None when nothing is left."""
        while True:
            newline = self._pending.find(b"\n")
            if newline >= 0:
                line = bytes(self._pending[:newline + 1])
                del self._pending[:newline + 1]
                return self._decode(line)
            chunk = os.read(self.fd, self.buffer_size)
            if not chunk:
                if self._pending:
                    line = bytes(self._pending)
                    self._pending.clear()
                    return self._decode(line)
                return None
            self._pending += chunk

    def __iter__(self) -> Iterator[str]:
        while True:
            line = self.read_line()
            if line is None:
                return
            yield line


_readers: Dict[int, LineReader] = {}


def get_next_line(fd: int) -> Optional[str]:
    """The next line of fd, keeping buffered input between calls per descriptor.

    The state of fd is dropped at end of input and on error.
    """
    reader = _readers.get(fd)
    if reader is None:
        reader = LineReader(fd)
        _readers[fd] = reader
    try:
        line = reader.read_line()
    except Exception:
        forget(fd)
        raise
    if line is None or not line.endswith("\n"):
        forget(fd)
    return line


def forget(fd: int) -> None:
    """Drop any input buffered for fd."""
    _readers.pop(fd, None)