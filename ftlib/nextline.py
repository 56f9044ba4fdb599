"""Reading a file descriptor one line at a time."""

from __future__ import annotations

import os
from typing import Dict, Iterator, Optional

__all__ = ["LineReader", "get_next_line", "BUFFER_SIZE"]

BUFFER_SIZE = 1


class LineReader:
    """Reads lines from file descriptors, keeping unread data per descriptor.

    Data is read ``buffer_size`` bytes at a time until a newline is held or
    the end of input is reached. Returned lines keep their newline.
    """

    def __init__(self, buffer_size: int = BUFFER_SIZE) -> None:
        if buffer_size <= 0:
            raise ValueError(f"buffer size must be positive: {buffer_size}")
        self.buffer_size = buffer_size
        self._pending: Dict[int, bytes] = {}

    def _fill(self, fd: int) -> bytes:
        pending = self._pending.get(fd, b"")
        while b"\n" not in pending:
            try:
                chunk = os.read(fd, self.buffer_size)
            except OSError:
                self._pending.pop(fd, None)
                raise
            if not chunk:
                break
            pending += chunk
        return pending

    def next_line(self, fd: int) -> Optional[str]:
        """Return the next line from ``fd``, or None when nothing is left."""
        if fd < 0:
            raise ValueError(f"invalid file descriptor: {fd}")
        pending = self._fill(fd)
        if not pending:
            self._pending.pop(fd, None)
            return None
        newline = pending.find(b"\n")
        if newline < 0:
            self._pending.pop(fd, None)
            line = pending
        else:
            line = pending[: newline + 1]
            self._pending[fd] = pending[newline + 1 :]
        return line.decode("utf-8", errors="replace")

    def lines(self, fd: int) -> Iterator[str]:
        """Yield lines from ``fd`` until the input is exhausted."""
        while True:
            line = self.next_line(fd)
            if line is None:
                return
            yield line


_default_reader = LineReader()


def get_next_line(fd: int) -> Optional[str]:
    """Return the next line from ``fd`` using a shared reader."""
    return _default_reader.next_line(fd)