"""Line-buffered writing."""

from __future__ import annotations

import threading
from typing import Callable


class LineWriter:
    """Split written bytes on newlines and pass each line to a callback.

    Lines are passed with their trailing newline. Text after the last
    newline is held until more data arrives or :meth:`flush` is called.
    Safe for use from several threads.
    """

    def __init__(self, write_line: Callable[[bytes], None]) -> None:
        self._write_line = write_line
        self._pending = bytearray()
        self._lock = threading.Lock()

    def write(self, data: bytes) -> int:
        """Write ``data`` and return the number of bytes accepted."""
        data = bytes(data)
        with self._lock:
            rest = data
            while rest:
                line, newline, rest = rest.partition(b"\n")
                if not newline:
                    self._pending += line
                    break
                line += newline
                if self._pending:
                    self._pending += line
                    line = bytes(self._pending)
                    self._pending.clear()
                self._write_line(line)
        return len(data)

    def flush(self) -> None:
        """Pass on any buffered text, even if it does not end with a newline."""
        with self._lock:
            if self._pending:
                line = bytes(self._pending)
                self._pending.clear()
                self._write_line(line)

    def __enter__(self) -> LineWriter:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.flush()