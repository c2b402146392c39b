"""Line-at-a-time reading from text streams through a fixed-size read buffer."""

from __future__ import annotations

from collections.abc import Iterator
from os import PathLike
from typing import TextIO

BUFFER_SIZE = 1_000_000


class LineReader:
    """Yield the lines of a text stream, each with its trailing newline kept.

    The stream is read ``buffer_size`` characters at a time. Text left over
    after a newline is held back for the next call. The final line is
    returned without a newline when the stream does not end with one.
    """

    def __init__(self, stream: TextIO, buffer_size: int = BUFFER_SIZE) -> None:
        if buffer_size <= 0:
            raise ValueError("buffer_size must be positive")
        self._stream = stream
        self._buffer_size = buffer_size
        self._pending = ""
        self._exhausted = False

    def read_line(self) -> str | None:
        """Return the next line, or ``None`` once the stream is used up."""
        while "\n" not in self._pending and not self._exhausted:
            chunk = self._stream.read(self._buffer_size)
            if not chunk:
                self._exhausted = True
                break
            self._pending += chunk
        if not self._pending:
            return None
        end = self._pending.find("\n")
        if end < 0:
            line, self._pending = self._pending, ""
        else:
            line, self._pending = self._pending[: end + 1], self._pending[end + 1 :]
        return line

    def __iter__(self) -> Iterator[str]:
        return iter(self.read_line, None)


def read_lines(path: str | PathLike[str]) -> list[str]:
    """Read every line of the file at ``path``, newlines included."""
    with open(path, encoding="utf-8", newline="") as stream:
        return list(LineReader(stream))