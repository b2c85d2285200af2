"""Bit-level wire format: each byte travels as eight signals, most
significant bit first; SIGUSR1 carries a 1, SIGUSR2 a 0, and the
receiver acknowledges every bit with SIGUSR1.  A zero byte ends a
message."""

from __future__ import annotations

import signal
from collections.abc import Iterator

ONE_SIGNAL = signal.SIGUSR1
ZERO_SIGNAL = signal.SIGUSR2
ACK_SIGNAL = signal.SIGUSR1
TERMINATOR = 0


def bits_of(data: bytes | str) -> Iterator[int]:
    """Yield the bits of ``data`` most significant first, byte by byte.

    Text is encoded as UTF-8.
    """
    if isinstance(data, str):
        data = data.encode("utf-8")
    for byte in data:
        for shift in range(7, -1, -1):
            yield (byte >> shift) & 1


class MessageDecoder:
    """Assembles incoming bits into bytes."""

    def __init__(self) -> None:
        self._value = 0
        self._count = 0

    @property
    def bit_index(self) -> int:
        """Number of bits already received for the current byte."""
        return self._count

    def feed(self, bit: int) -> int | None:
        """Add one bit; return the byte it completes, else None."""
        if bit not in (0, 1):
            raise ValueError(f"a bit must be 0 or 1, got {bit!r}")
        self._value = (self._value << 1) | int(bit)
        self._count += 1
        if self._count < 8:
            return None
        byte = self._value
        self._value = 0
        self._count = 0
        return byte