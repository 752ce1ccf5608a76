"""Reading a file descriptor one line at a time."""

from __future__ import annotations

import os
from typing import Iterator, Optional

DEFAULT_BUFFER_SIZE = 1000


class LineReader:
    """Reads newline-terminated lines from a file descriptor.

    Each line keeps its trailing newline; the last line of the input may lack
    one. Data read past the end of a line is kept for the next call, so one
    reader must be used per descriptor.
    """

    def __init__(self, fd: int, buffer_size: int = DEFAULT_BUFFER_SIZE) -> None:
        if fd < 0:
            raise ValueError(f"invalid file descriptor {fd}")
        if buffer_size <= 0:
            raise ValueError(f"buffer size must be positive, got {buffer_size}")
        self.fd = fd
        self.buffer_size = buffer_size
        self._pending = bytearray()

    def next_line(self) -> Optional[bytes]:
        """Return the next line, or None when no data is left."""
        while b"\n" not in self._pending:
            chunk = os.read(self.fd, self.buffer_size)
            if not chunk:
                break
            self._pending += chunk
        newline = self._pending.find(b"\n")
        if newline < 0:
            line = bytes(self._pending)
            self._pending.clear()
        else:
            line = bytes(self._pending[: newline + 1])
            del self._pending[: newline + 1]
        return line or None

    def __iter__(self) -> Iterator[bytes]:
        while (line := self.next_line()) is not None:
            yield line


def read_lines(fd: int, buffer_size: int = DEFAULT_BUFFER_SIZE) -> Iterator[bytes]:
    """Iterate over the lines that remain to be read from fd."""
    return iter(LineReader(fd, buffer_size))