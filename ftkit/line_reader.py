"""Reading a stream one line at a time through a fixed-size buffer."""

from __future__ import annotations

from collections.abc import Iterator
from typing import IO, AnyStr, Generic

__all__ = ["LineReader", "DEFAULT_BUFFER_SIZE"]

DEFAULT_BUFFER_SIZE = 42


def _newline_index(stash: AnyStr) -> int:
    """Position of the first newline in *stash*, or -1 when there is none."""
    if isinstance(stash, (bytes, bytearray)):
        return stash.find(b"\n")
    return stash.find("\n")


class LineReader(Generic[AnyStr]):
    """Hand out the lines of *stream*, each with its newline if it has one.

    The stream is read in chunks of *buffer_size*; whatever follows the
    last line handed out is kept for the next call. Works with text and
    binary streams alike.
    """

    def __init__(self, stream: IO[AnyStr], buffer_size: int = DEFAULT_BUFFER_SIZE) -> None:
        if buffer_size <= 0:
            raise ValueError(f"buffer_size must be positive, got {buffer_size}")
        self.stream = stream
        self.buffer_size = buffer_size
        self._stash: AnyStr | None = None

    def _fill(self) -> None:
        while self._stash is None or _newline_index(self._stash) < 0:
            try:
                chunk = self.stream.read(self.buffer_size)
            except Exception:
                self._stash = None
                raise
            if not chunk:
                return
            self._stash = chunk if self._stash is None else self._stash + chunk

    def read_line(self) -> AnyStr | None:
        """The next line, or ``None`` once nothing is left to read."""
        self._fill()
        stash = self._stash
        if not stash:
            self._stash = None
            return None
        end = _newline_index(stash)
        if end < 0:
            self._stash = None
            return stash
        self._stash = stash[end + 1 :] or None
        return stash[: end + 1]

    def __iter__(self) -> Iterator[AnyStr]:
        while (line := self.read_line()) is not None:
            yield line