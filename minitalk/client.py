"""Sends a message to a server process one bit at a time over signals.

Every bit travels as SIGUSR1 (1) or SIGUSR2 (0); the client waits for the
server to answer each one with SIGUSR2 before sending the next.
"""

from __future__ import annotations

import os
import signal
import sys
import time
from types import FrameType, TracebackType
from typing import Callable, Iterable, Optional, Type

from minitalk.protocol import Text, encode_length, encode_message, encode_text
from minitalk.strings import atoi

ONE_SIGNAL = signal.SIGUSR1
ZERO_SIGNAL = signal.SIGUSR2
ACK_SIGNAL = signal.SIGUSR2
DEFAULT_TIMEOUT = 5.0
HEADER_PAUSE = 1.0
_POLL_INTERVAL = 0.001


class AcknowledgeTimeout(TimeoutError):
    """The server did not acknowledge a bit in time."""

    def __init__(self, pid: int, timeout: float) -> None:
        super().__init__(f"process {pid} did not acknowledge within {timeout} s")
        self.pid = pid
        self.timeout = timeout


class _Acknowledgements:
    """Installs the acknowledgement handler and sends bits that must be answered."""

    def __init__(self) -> None:
        self._received = False
        self._previous: signal.Handlers | Callable | int | None = None

    def __enter__(self) -> "_Acknowledgements":
        self._previous = signal.signal(ACK_SIGNAL, self._on_ack)
        return self

    def __exit__(
        self,
        exc_type: Optional[Type[BaseException]],
        exc: Optional[BaseException],
        tb: Optional[TracebackType],
    ) -> None:
        previous = signal.SIG_DFL if self._previous is None else self._previous
        signal.signal(ACK_SIGNAL, previous)

    def _on_ack(self, signum: int, frame: Optional[FrameType]) -> None:
        self._received = True

    def _wait(self, timeout: float) -> bool:
        deadline = time.monotonic() + timeout
        while not self._received:
            remaining = deadline - time.monotonic()
            if remaining <= 0:
                return False
            time.sleep(min(_POLL_INTERVAL, remaining))
        return True

    def send(self, pid: int, bit: int, timeout: float) -> None:
        self._received = False
        os.kill(pid, ONE_SIGNAL if bit else ZERO_SIGNAL)
        if not self._wait(timeout):
            raise AcknowledgeTimeout(pid, timeout)


def _check(pid: int, timeout: float) -> None:
    if pid <= 0:
        raise ValueError(f"invalid process id {pid}")
    if timeout <= 0:
        raise ValueError(f"timeout must be positive, got {timeout}")


def _transmit(
    acks: _Acknowledgements,
    pid: int,
    bits: Iterable[int],
    timeout: float,
    on_bit: Optional[Callable[[int], None]] = None,
) -> None:
    for bit in bits:
        acks.send(pid, bit, timeout)
        if on_bit is not None:
            on_bit(bit)


def send_message(pid: int, text: Text, timeout: float = DEFAULT_TIMEOUT) -> None:
    """Send ``text`` to process ``pid``, waiting up to ``timeout`` seconds per bit."""
    _check(pid, timeout)
    with _Acknowledgements() as acks:
        _transmit(acks, pid, encode_message(text), timeout)


def _echo(bit: int) -> None:
    sys.stdout.write(str(bit))
    sys.stdout.flush()


def main(argv: Optional[list[str]] = None) -> int:
    """Command entry point: ``client PID MESSAGE``."""
    args = sys.argv[1:] if argv is None else argv
    if len(args) < 2:
        sys.stderr.write("usage: client PID MESSAGE\n")
        return 2
    pid = atoi(args[0])
    text = args[1]
    try:
        _check(pid, DEFAULT_TIMEOUT)
        with _Acknowledgements() as acks:
            _transmit(acks, pid, encode_length(text), DEFAULT_TIMEOUT, _echo)
            sys.stdout.write("\n")
            sys.stdout.flush()
            time.sleep(HEADER_PAUSE)
            _transmit(acks, pid, encode_text(text), DEFAULT_TIMEOUT, _echo)
            sys.stdout.write("\n")
            sys.stdout.flush()
    except AcknowledgeTimeout:
        sys.stdout.write("fail\n")
        sys.stdout.flush()
        return 1
    except ValueError as error:
        sys.stderr.write(f"client: {error}\n")
        return 2
    except OSError as error:
        sys.stderr.write(f"client: {error}\n")
        return 1
    return 0