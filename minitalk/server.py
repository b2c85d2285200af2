"""Receiving end: rebuilds bytes from SIGUSR1/SIGUSR2 and acknowledges
every bit back to its sender."""

from __future__ import annotations

import os
import signal
import sys
from typing import BinaryIO, NoReturn

from minitalk.fmt import render
from minitalk.protocol import (
    ACK_SIGNAL,
    ONE_SIGNAL,
    TERMINATOR,
    ZERO_SIGNAL,
    MessageDecoder,
)


class Server:
    """Decodes signals into bytes and writes them to ``output``."""

    def __init__(self, output: BinaryIO | None = None) -> None:
        self.output = sys.stdout.buffer if output is None else output
        self.client_pid = 0
        self._decoder = MessageDecoder()

    def handle(self, signum: int, sender_pid: int | None = None) -> int:
        """Process one bit signal and return the pid to acknowledge.

        The sender is recorded at the first bit of each byte.  A zero
        return means no sender is known yet.
        """
        if signum == ONE_SIGNAL:
            bit = 1
        elif signum == ZERO_SIGNAL:
            bit = 0
        else:
            raise ValueError(f"unexpected signal {signum}")
        if sender_pid is not None and self._decoder.bit_index == 0:
            self.client_pid = sender_pid
        byte = self._decoder.feed(bit)
        if byte is not None:
            self._emit(byte)
        return self.client_pid

    def _emit(self, byte: int) -> None:
        try:
            self.output.write(bytes([byte]))
            if byte == TERMINATOR:
                notice = render("\nEnd of message from client %d\n", self.client_pid)
                self.output.write(notice.encode("utf-8"))
            self.output.flush()
        except OSError:
            print("Write failing, exiting program.", file=sys.stderr)
            raise SystemExit(1) from None

    def serve(self) -> NoReturn:
        """Announce the pid and handle bit signals until interrupted."""
        signals = {ONE_SIGNAL, ZERO_SIGNAL}
        previous = signal.pthread_sigmask(signal.SIG_BLOCK, signals)
        try:
            self.output.write(render("📡Server ready. PID: %d\n", os.getpid()).encode("utf-8"))
            self.output.flush()
            while True:
                info = signal.sigwaitinfo(signals)
                ack_pid = self.handle(info.si_signo, info.si_pid)
                if ack_pid > 0:
                    try:
                        os.kill(ack_pid, ACK_SIGNAL)
                    except OSError:
                        pass
        finally:
            signal.pthread_sigmask(signal.SIG_SETMASK, previous)


def main(argv: list[str] | None = None) -> int:
    """Run the server; it takes no arguments."""
    try:
        Server().serve()
    except KeyboardInterrupt:
        return 0
    return 0


if __name__ == "__main__":
    sys.exit(main())