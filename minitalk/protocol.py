"""Bit-level wire format for messages carried one signal per bit.

A message is a 32-bit length (the number of encoded bytes), most
significant bit first, followed by each byte of the text, again most
significant bit first. A bit of 1 travels as SIGUSR1, a bit of 0 as SIGUSR2.
"""

from __future__ import annotations

from typing import Optional, Union

LENGTH_BITS = 32
CHAR_BITS = 8
_MAX_LENGTH = (1 << LENGTH_BITS) - 1

Text = Union[str, bytes, bytearray]


def _to_bytes(text: Text) -> bytes:
    if isinstance(text, str):
        return text.encode("utf-8")
    return bytes(text)


def _bits(value: int, width: int) -> list[int]:
    return [(value >> shift) & 1 for shift in reversed(range(width))]


def encode_length(text: Text) -> list[int]:
    """Return the 32 bits announcing the byte length of ``text``."""
    length = len(_to_bytes(text))
    if length > _MAX_LENGTH:
        raise ValueError(f"message of {length} bytes does not fit in {LENGTH_BITS} bits")
    return _bits(length, LENGTH_BITS)


def encode_text(text: Text) -> list[int]:
    """Return the bits of every byte of ``text``, most significant first."""
    return [bit for byte in _to_bytes(text) for bit in _bits(byte, CHAR_BITS)]


def encode_message(text: Text) -> list[int]:
    """Return the full bit sequence for ``text``: length header, then body."""
    return encode_length(text) + encode_text(text)


class MessageDecoder:
    """Rebuilds a message from the bits of :func:`encode_message`, one at a time."""

    def __init__(self) -> None:
        self._length_bits = 0
        self._length = 0
        self._current = 0
        self._current_bits = 0
        self._data = bytearray()

    @property
    def length(self) -> Optional[int]:
        """The announced byte length, or None while the header is incomplete."""
        if self._length_bits < LENGTH_BITS:
            return None
        return self._length

    @property
    def complete(self) -> bool:
        """True once the header and every announced byte have arrived."""
        return self.length is not None and len(self._data) >= self._length

    @property
    def data(self) -> bytes:
        """The bytes received so far."""
        return bytes(self._data)

    def feed(self, bit: int) -> Optional[int]:
        """Take one bit; return the byte it completes, otherwise None."""
        if bit not in (0, 1):
            raise ValueError(f"bit must be 0 or 1, not {bit!r}")
        if self.complete:
            raise ValueError("message already complete")
        bit = int(bit)
        if self._length_bits < LENGTH_BITS:
            self._length = (self._length << 1) | bit
            self._length_bits += 1
            return None
        self._current = (self._current << 1) | bit
        self._current_bits += 1
        if self._current_bits < CHAR_BITS:
            return None
        byte = self._current
        self._data.append(byte)
        self._current = 0
        self._current_bits = 0
        return byte

    def text(self) -> str:
        """The text received so far, decoded as UTF-8."""
        return bytes(self._data).decode("utf-8", errors="replace")