"""Line-by-line reading from raw file descriptors with a fixed read size."""

from __future__ import annotations

import os
from collections.abc import Iterator

DEFAULT_BUFFER_SIZE = 42
MAX_FD = 1024


class LineReader:
    """Reads one line at a time from a file descriptor.

    Data is pulled with ``os.read`` in chunks of ``buffer_size`` bytes.
    Text read past the end of a line is kept for the next call.
    """

    def __init__(self, fd: int, buffer_size: int = DEFAULT_BUFFER_SIZE) -> None:
        if fd < 0:
            raise ValueError(f"invalid file descriptor: {fd}")
        if buffer_size <= 0:
            raise ValueError(f"buffer size must be positive, got {buffer_size}")
        self.fd = fd
        self.buffer_size = buffer_size
        self._pending = bytearray()

    def read_line(self) -> bytes | None:
        """Return the next line, newline included, or None at end of input.

        The last line is returned without a newline if the input has none.
        A read error discards any buffered data and propagates as OSError.
        """
        data = self._pending
        while b"\n" not in data:
            try:
                chunk = os.read(self.fd, self.buffer_size)
            except OSError:
                self._pending = bytearray()
                raise
            if not chunk:
                break
            data += chunk
        if not data:
            self._pending = bytearray()
            return None
        end = data.find(b"\n")
        if end == -1:
            self._pending = bytearray()
            return bytes(data)
        self._pending = data[end + 1:]
        return bytes(data[:end + 1])

    def __iter__(self) -> Iterator[bytes]:
        while (line := self.read_line()) is not None:
            yield line


class LineReaderPool:
    """Keeps separate line buffers for many file descriptors at once."""

    def __init__(self, buffer_size: int = DEFAULT_BUFFER_SIZE) -> None:
        if buffer_size <= 0:
            raise ValueError(f"buffer size must be positive, got {buffer_size}")
        self.buffer_size = buffer_size
        self._readers: dict[int, LineReader] = {}

    def read_line(self, fd: int) -> bytes | None:
        """Return the next line from ``fd``, or None at its end of input."""
        if not 0 <= fd < MAX_FD:
            raise ValueError(f"file descriptor out of range: {fd}")
        reader = self._readers.get(fd)
        if reader is None:
            reader = self._readers[fd] = LineReader(fd, self.buffer_size)
        try:
            line = reader.read_line()
        except OSError:
            del self._readers[fd]
            raise
        if line is None:
            del self._readers[fd]
        return line