"""Receives messages sent bit by bit over SIGUSR1/SIGUSR2 and prints them."""

from __future__ import annotations

import os
import signal
import sys
from typing import Optional, TextIO

from minitalk.protocol import MessageDecoder

ONE_SIGNAL = signal.SIGUSR1
ZERO_SIGNAL = signal.SIGUSR2
ACK_SIGNAL = signal.SIGUSR2


class SignalServer:
    """Decodes incoming bits, reports progress to ``output`` and acknowledges senders."""

    def __init__(self, output: TextIO) -> None:
        self._output = output
        self._decoder = MessageDecoder()
        self._announced = False
        self.messages: list[str] = []

    def _write(self, text: str) -> None:
        self._output.write(text)
        self._output.flush()

    def handle(self, signum: int, sender: Optional[int]) -> None:
        """Take one bit signal; acknowledge ``sender`` unless it is None."""
        if signum == ONE_SIGNAL:
            bit = 1
        elif signum == ZERO_SIGNAL:
            bit = 0
        else:
            raise ValueError(f"unexpected signal {signum}")
        byte = self._decoder.feed(bit)
        if not self._announced and self._decoder.length is not None:
            self._write(f"\nSIZE {self._decoder.length}\n")
            self._announced = True
        if byte is not None:
            self._write(f"\n!!!! {self._decoder.text()} !!!!\n")
        if self._decoder.complete:
            self.messages.append(self._decoder.text())
            self._decoder = MessageDecoder()
            self._announced = False
        if sender is not None:
            os.kill(sender, ACK_SIGNAL)

    def serve(self) -> None:
        """Print this process id, then handle bit signals until interrupted."""
        signals = {ONE_SIGNAL, ZERO_SIGNAL}
        previous = signal.pthread_sigmask(signal.SIG_BLOCK, signals)
        try:
            self._write(f"{os.getpid()}\n")
            while True:
                info = signal.sigwaitinfo(signals)
                self.handle(info.si_signo, info.si_pid)
        finally:
            signal.pthread_sigmask(signal.SIG_SETMASK, previous)


def main(argv: Optional[list[str]] = None) -> int:
    """Command entry point: run the server until interrupted."""
    server = SignalServer(sys.stdout)
    try:
        server.serve()
    except KeyboardInterrupt:
        return 0
    return 0