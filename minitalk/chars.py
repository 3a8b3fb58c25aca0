"""ASCII character classification and case conversion.

Each function takes either a character code (int) or a one-character
string. Only the ASCII letters and digits are recognised.
"""

from __future__ import annotations

from typing import Union

Char = Union[int, str]


def _code(c: Char) -> int:
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {c!r}")
        return ord(c)
    if isinstance(c, int):
        return c
    raise TypeError(f"expected int or str, not {type(c).__name__}")


def _is_upper(code: int) -> bool:
    return ord("A") <= code <= ord("Z")


def _is_lower(code: int) -> bool:
    return ord("a") <= code <= ord("z")


def isalpha(c: Char) -> bool:
    """True for an ASCII letter."""
    code = _code(c)
    return _is_upper(code) or _is_lower(code)


def isdigit(c: Char) -> bool:
    """True for an ASCII decimal digit."""
    return ord("0") <= _code(c) <= ord("9")


def isalnum(c: Char) -> bool:
    """True for an ASCII letter or digit."""
    return isalpha(c) or isdigit(c)


def isascii(c: Char) -> bool:
    """True for a code in 0..127."""
    return 0 <= _code(c) <= 127


def isprint(c: Char) -> bool:
    """True for a printable ASCII code, space through tilde."""
    return 32 <= _code(c) <= 126


def _convert(c: Char, code: int) -> Char:
    return chr(code) if isinstance(c, str) else code


def tolower(c: Char) -> Char:
    """Lower-case an ASCII upper-case letter; return anything else unchanged."""
    code = _code(c)
    return _convert(c, code + 32) if _is_upper(code) else c


def toupper(c: Char) -> Char:
    """Upper-case an ASCII lower-case letter; return anything else unchanged."""
    code = _code(c)
    return _convert(c, code - 32) if _is_lower(code) else c