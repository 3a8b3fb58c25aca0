import io
import os
import signal

import pytest

from minitalk.protocol import encode_message
from minitalk.server import SignalServer


def _signal_for(bit):
    return signal.SIGUSR1 if bit else signal.SIGUSR2


def _deliver(server, text, sender=None):
    for bit in encode_message(text):
        server.handle(_signal_for(bit), sender)


def test_message_output():
    output = io.StringIO()
    server = SignalServer(output)
    _deliver(server, "hi")
    assert output.getvalue() == "\nSIZE 2\n\n!!!! h !!!!\n\n!!!! hi !!!!\n"
    assert server.messages == ["hi"]


def test_messages_decoded_independently():
    server = SignalServer(io.StringIO())
    _deliver(server, "first")
    _deliver(server, "second one")
    assert server.messages == ["first", "second one"]


def test_utf8_round_trip():
    server = SignalServer(io.StringIO())
    _deliver(server, "päivää")
    assert server.messages == ["päivää"]


def test_empty_message():
    output = io.StringIO()
    server = SignalServer(output)
    _deliver(server, "")
    assert server.messages == [""]
    assert "!!!!" not in output.getvalue()


def test_no_output_before_header_complete():
    output = io.StringIO()
    server = SignalServer(output)
    for bit in encode_message("x")[:31]:
        server.handle(_signal_for(bit), None)
    assert output.getvalue() == ""
    assert server.messages == []


def test_unexpected_signal():
    server = SignalServer(io.StringIO())
    with pytest.raises(ValueError):
        server.handle(signal.SIGINT, None)


def test_acknowledges_sender():
    acks = []
    previous = signal.signal(signal.SIGUSR2, lambda signum, frame: acks.append(signum))
    try:
        server = SignalServer(io.StringIO())
        server.handle(signal.SIGUSR1, os.getpid())
        server.handle(signal.SIGUSR2, os.getpid())
    finally:
        signal.signal(signal.SIGUSR2, previous)
    assert acks == [signal.SIGUSR2, signal.SIGUSR2]