"""Reading a file descriptor one line at a time."""

from __future__ import annotations

import os
from typing import Dict, Iterator, Optional

__all__ = ["BUFFER_SIZE", "LineReader", "get_next_line"]

BUFFER_SIZE = 10000
_ENCODING = "utf-8"
_ERRORS = "surrogateescape"


class LineReader:
    """Return successive lines read from a file descriptor.

    Each line keeps its trailing newline; the final line may lack one.
    Data past the returned line is kept for the next call.
    """

    def __init__(self, fd: int, buffer_size: int = BUFFER_SIZE) -> None:
        if fd < 0:
            raise ValueError(f"invalid file descriptor {fd}")
        if buffer_size <= 0:
            raise ValueError(f"buffer size must be positive, got {buffer_size}")
        self.fd = fd
        self.buffer_size = buffer_size
        self._pending = b""

    def read_line(self) -> Optional[str]:
        """Return the next line, or None when nothing is left to read.

        A read error discards any buffered data and propagates.
        """
        while b"\n" not in self._pending:
            try:
                chunk = os.read(self.fd, self.buffer_size)
            except OSError:
                self._pending = b""
                raise
            if not chunk:
                break
            self._pending += chunk
        cut = self._pending.find(b"\n")
        if cut >= 0:
            line, self._pending = self._pending[: cut + 1], self._pending[cut + 1 :]
        else:
            line, self._pending = self._pending, b""
        if not line:
            return None
        return line.decode(_ENCODING, _ERRORS)

    def __iter__(self) -> Iterator[str]:
        while (line := self.read_line()) is not None:
            yield line


_readers: Dict[int, LineReader] = {}


def get_next_line(fd: int) -> Optional[str]:
    """Return the next line of ``fd``, keeping separate state for each descriptor."""
    reader = _readers.get(fd)
    if reader is None:
        reader = _readers[fd] = LineReader(fd)
    try:
        line = reader.read_line()
    except OSError:
        _readers.pop(fd, None)
        raise
    if line is None:
        _readers.pop(fd, None)
    return line