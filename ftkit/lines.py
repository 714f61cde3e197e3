"""Line-by-line reading of a stream through a fixed-size read buffer."""

from __future__ import annotations

from collections.abc import Iterator
from typing import IO, AnyStr, Generic

DEFAULT_BUFFER_SIZE = 42


class LineReader(Generic[AnyStr]):
    """Read lines from a text or binary stream, buffer_size units at a time.

    Each line keeps its trailing newline; the last line may lack one.
    """

    def __init__(self, stream: IO[AnyStr], buffer_size: int = DEFAULT_BUFFER_SIZE) -> None:
        if buffer_size <= 0:
            raise ValueError(f"buffer size must be positive, got {buffer_size}")
        self._stream = stream
        self._buffer_size = buffer_size
        self._stash: AnyStr | None = None
        self._newline: AnyStr | None = None

    def _fill(self) -> None:
        while self._stash is None or self._newline not in self._stash:
            try:
                chunk = self._stream.read(self._buffer_size)
            except OSError:
                self._stash = None
                raise
            if not chunk:
                return
            if self._stash is None:
                if self._newline is None:
                    self._newline = "\n" if isinstance(chunk, str) else b"\n"  # type: ignore[assignment]
                self._stash = chunk
            else:
                self._stash = self._stash + chunk

    def next_line(self) -> AnyStr | None:
        """Return the next line, or None once the stream is exhausted."""
        self._fill()
        if self._stash is None or self._newline is None:
            return None
        end = self._stash.find(self._newline)
        cut = len(self._stash) if end < 0 else end + 1
        line, rest = self._stash[:cut], self._stash[cut:]
        self._stash = rest if rest else None
        return line if line else None

    def __iter__(self) -> Iterator[AnyStr]:
        return iter(self.next_line, None)


def read_lines(stream: IO[AnyStr], buffer_size: int = DEFAULT_BUFFER_SIZE) -> Iterator[AnyStr]:
    """Yield every line of stream."""
    yield from LineReader(stream, buffer_size)