import os
import signal
from unittest import mock

import pytest

from minitalk.client import ClientError, main, send_message, validate_pid
from minitalk.protocol import MessageDecoder


def _decode_signals(calls):
    decoder = MessageDecoder()
    out = []
    for call in calls:
        signum = call.args[1]
        if signum == 0:
            continue
        byte = decoder.feed(1 if signum == signal.SIGUSR1 else 0)
        if byte is not None:
            out.append(byte)
    return bytes(out)


@pytest.mark.parametrize("pid", [0, -5])
def test_validate_rejects_non_positive(pid):
    with pytest.raises(ClientError, match="Invalid PID"):
        validate_pid(pid)


def test_validate_accepts_own_pid():
    assert validate_pid(os.getpid()) == os.getpid()


@mock.patch("os.kill", side_effect=ProcessLookupError)
def test_validate_missing_process(kill):
    with pytest.raises(ClientError, match="No such process"):
        validate_pid(999999)


@mock.patch("signal.sigtimedwait", return_value=object())
@mock.patch("os.kill")
def test_send_message_signals_encode_message(kill, wait):
    missed = send_message(4321, "hey", timeout=0.01)
    assert missed == 0
    assert len(kill.call_args_list) == 32
    assert {call.args[0] for call in kill.call_args_list} == {4321}
    assert _decode_signals(kill.call_args_list) == b"hey\x00"
    assert wait.call_count == 32


@mock.patch("signal.sigtimedwait", return_value=None)
@mock.patch("os.kill")
def test_missing_acks_are_counted(kill, wait, capsys):
    assert send_message(4321, b"a", timeout=0.01) == 16
    assert "in time" in capsys.readouterr().out


@mock.patch("os.kill", side_effect=ProcessLookupError)
def test_send_to_vanished_process(kill):
    with pytest.raises(ClientError):
        send_message(4321, b"a", timeout=0.01)


def test_main_usage(capsys):
    assert main(["123"]) == 0
    assert "Usage" in capsys.readouterr().out


@pytest.mark.parametrize("arg", ["0", "abc", "-7"])
def test_main_invalid_pid(arg, capsys):
    assert main([arg, "hi"]) == 1
    assert "Invalid PID" in capsys.readouterr().out


@mock.patch("signal.sigtimedwait", return_value=object())
@mock.patch("os.kill")
def test_main_sends(kill, wait):
    assert main(["  +4321", "ok"]) == 0
    assert kill.call_args_list[0].args == (4321, 0)
    assert _decode_signals(kill.call_args_list) == b"ok\x00"