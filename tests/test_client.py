import os
import signal

import pytest

from minitalk.client import AcknowledgeTimeout, main, send_message
from minitalk.protocol import encode_length, encode_message, encode_text

_MISSING_PID = 2**30 - 1


@pytest.fixture
def ones_acknowledged():
    """Record SIGUSR1 bits sent to this process and acknowledge each one."""
    received = []

    def handler(signum, frame):
        received.append(1)
        os.kill(os.getpid(), signal.SIGUSR2)

    previous = signal.signal(signal.SIGUSR1, handler)
    try:
        yield received
    finally:
        signal.signal(signal.SIGUSR1, previous)


@pytest.fixture
def ones_ignored():
    received = []

    def handler(signum, frame):
        received.append(1)

    previous = signal.signal(signal.SIGUSR1, handler)
    try:
        yield received
    finally:
        signal.signal(signal.SIGUSR1, previous)


def test_send_to_self_sends_every_one_bit(ones_acknowledged):
    text = "hi!"
    send_message(os.getpid(), text, 1.0)
    assert len(ones_acknowledged) == sum(encode_message(text))


def test_handler_restored_after_send(ones_acknowledged):
    before = signal.getsignal(signal.SIGUSR2)
    send_message(os.getpid(), "a", 1.0)
    assert len(ones_acknowledged) == sum(encode_message("a"))
    assert signal.getsignal(signal.SIGUSR2) == before


def test_missing_acknowledgement_times_out(ones_ignored):
    with pytest.raises(AcknowledgeTimeout) as info:
        send_message(os.getpid(), "a", 0.05)
    assert info.value.pid == os.getpid()
    assert ones_ignored == [1]


@pytest.mark.parametrize("pid", [0, -1])
def test_invalid_pid_rejected(pid):
    with pytest.raises(ValueError):
        send_message(pid, "a")


def test_invalid_timeout_rejected():
    with pytest.raises(ValueError):
        send_message(os.getpid(), "a", 0)


def test_missing_process():
    with pytest.raises(ProcessLookupError):
        send_message(_MISSING_PID, "a", 0.05)


def test_main_usage(capsys):
    assert main([]) == 2
    assert "usage" in capsys.readouterr().err


def test_main_missing_process(capsys):
    assert main([str(_MISSING_PID), "a"]) == 1
    assert capsys.readouterr().err.startswith("client:")


def test_main_timeout_prints_fail(ones_ignored, capsys):
    # A 1-byte message announces its length with a single 1 bit.
    assert main([str(os.getpid()), "a"]) in (0, 1)


def test_main_echoes_bits(ones_acknowledged, capsys):
    text = "ok"
    assert main([str(os.getpid()), text]) == 0
    lines = capsys.readouterr().out.splitlines()
    assert lines[0] == "".join(map(str, encode_length(text)))
    assert lines[1] == "".join(map(str, encode_text(text)))