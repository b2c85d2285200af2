"""Sending end: transmits a message bit by bit as signals and waits for
an acknowledgement after each bit."""

from __future__ import annotations

import os
import signal
import sys

from minitalk.protocol import ACK_SIGNAL, ONE_SIGNAL, ZERO_SIGNAL, bits_of
from minitalk.textutil import atoi

DEFAULT_TIMEOUT = 1.0


class ClientError(Exception):
    """Raised when the target process cannot be signalled."""


def validate_pid(pid: int) -> int:
    """Check that ``pid`` names a process we may signal; return it."""
    if pid <= 0:
        raise ClientError(f"❌Invalid PID ({pid}). Must be > 0")
    try:
        os.kill(pid, 0)
    except OSError:
        raise ClientError(f"❌No such process or no permission for PID {pid}") from None
    return pid


def send_message(pid: int, message: bytes | str, timeout: float = DEFAULT_TIMEOUT) -> int:
    """Send ``message`` and a terminating zero byte to ``pid``.

    Each bit waits up to ``timeout`` seconds for an acknowledgement; a
    missing one is reported and sending goes on.  Returns the number of
    bits that were not acknowledged.
    """
    if isinstance(message, str):
        message = message.encode("utf-8")
    missed = 0
    previous = signal.pthread_sigmask(signal.SIG_BLOCK, {ACK_SIGNAL})
    try:
        for bit in bits_of(bytes(message) + b"\x00"):
            try:
                os.kill(pid, ONE_SIGNAL if bit else ZERO_SIGNAL)
            except OSError as exc:
                raise ClientError(f"cannot signal PID {pid}: {exc}") from exc
            if signal.sigtimedwait({ACK_SIGNAL}, timeout) is None:
                missed += 1
                print("Didn't receive acknowledgement in time.")
    finally:
        signal.pthread_sigmask(signal.SIG_SETMASK, previous)
    return missed


def main(argv: list[str] | None = None) -> int:
    """Usage: client <PID> <message>."""
    args = sys.argv[1:] if argv is None else argv
    if len(args) != 2:
        print("Usage: client <PID> <message>")
        return 0
    try:
        pid = validate_pid(atoi(args[0]))
        send_message(pid, os.fsencode(args[1]))
    except ClientError as exc:
        print(exc)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())