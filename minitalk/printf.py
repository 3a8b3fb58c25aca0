"""Formatted output with a small set of conversions.

Supported conversions are ``%s``, ``%d``, ``%i``, ``%c``, ``%p``, ``%x``,
``%X``, ``%u`` and ``%%``. Any other character after ``%`` is written as
it is. A lone ``%`` at the very end of the format is dropped. Integer
conversions wrap their argument to the width of the matching C type.
"""

from __future__ import annotations

import sys
from typing import Any, Iterator, Optional, TextIO

_INT_BITS = 32
_INT_MASK = (1 << _INT_BITS) - 1
_POINTER_MASK = (1 << 64) - 1
_NULL_STRING = "(null)"
_CONVERSIONS = frozenset("sdicpxXu")


def _require_int(spec: str, value: Any) -> int:
    if not isinstance(value, int):
        raise TypeError(f"%{spec} requires an integer, not {type(value).__name__}")
    return int(value)


def _int32(value: int) -> int:
    value &= _INT_MASK
    return value - (1 << _INT_BITS) if value & (1 << (_INT_BITS - 1)) else value


def _char(value: Any) -> str:
    if isinstance(value, str):
        if len(value) != 1:
            raise ValueError(f"%c requires a single character, got {value!r}")
        return value
    return chr(_require_int("c", value) & 0xFF)


def _string(value: Any) -> str:
    if value is None:
        return _NULL_STRING
    if not isinstance(value, str):
        raise TypeError(f"%s requires a string, not {type(value).__name__}")
    return value


def _pointer(value: Any) -> str:
    address = 0 if value is None else _require_int("p", value)
    return f"0x{address & _POINTER_MASK:x}"


def _convert(spec: str, args: Iterator[Any]) -> str:
    if spec == "%":
        return "%"
    if spec not in _CONVERSIONS:
        return spec
    try:
        value = next(args)
    except StopIteration:
        raise TypeError(f"not enough arguments for %{spec}") from None
    if spec == "s":
        return _string(value)
    if spec in "di":
        return str(_int32(_require_int(spec, value)))
    if spec == "c":
        return _char(value)
    if spec == "p":
        return _pointer(value)
    if spec == "x":
        return f"{_require_int(spec, value) & _INT_MASK:x}"
    if spec == "X":
        return f"{_require_int(spec, value) & _INT_MASK:X}"
    return str(_require_int(spec, value) & _INT_MASK)


def format_string(fmt: str, *args: Any) -> str:
    """Return ``fmt`` with its conversions replaced by ``args`` in order."""
    pieces: list[str] = []
    values = iter(args)
    chars = iter(fmt)
    for char in chars:
        if char != "%":
            pieces.append(char)
            continue
        spec = next(chars, None)
        if spec is None:
            break
        pieces.append(_convert(spec, values))
    return "".join(pieces)


def print_formatted(fmt: str, *args: Any, stream: Optional[TextIO] = None) -> int:
    """Write the formatted text to ``stream`` (stdout by default); return its length."""
    text = format_string(fmt, *args)
    target = sys.stdout if stream is None else stream
    target.write(text)
    return len(text)