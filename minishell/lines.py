"""Reading a file descriptor one line at a time."""

from __future__ import annotations

import os
from collections.abc import Iterator

BUFFER_SIZE = 50


class LineReader:
    """Read newline-terminated lines from a file descriptor.

    Each line is returned as bytes, including its trailing newline when it has
    one.  Data beyond the returned line is kept for the next call.
    """

    def __init__(self, fd, buffer_size: int = BUFFER_SIZE) -> None:
        if hasattr(fd, "fileno"):
            fd = fd.fileno()
        if fd < 0:
            raise ValueError("file descriptor must not be negative")
        if buffer_size <= 0:
            raise ValueError("buffer size must be positive")
        self._fd = fd
        self._buffer_size = buffer_size
        self._stash = b""

    def next_line(self) -> bytes | None:
        """Return the next line, or None when no data is left."""
        while b"\n" not in self._stash:
            try:
                chunk = os.read(self._fd, self._buffer_size)
            except OSError:
                self._stash = b""
                raise
            if not chunk:
                break
            self._stash += chunk
        if not self._stash:
            return None
        newline = self._stash.find(b"\n")
        end = len(self._stash) if newline < 0 else newline + 1
        line, self._stash = self._stash[:end], self._stash[end:]
        return line

    def __iter__(self) -> Iterator[bytes]:
        while (line := self.next_line()) is not None:
            yield line


def iter_lines(fd, buffer_size: int = BUFFER_SIZE) -> Iterator[bytes]:
    """Yield every remaining line of ``fd``."""
    yield from LineReader(fd, buffer_size)