"""String helpers: number parsing and formatting, splitting, trimming, searching.

Search functions return the remainder of the text from the match onward,
or None when there is no match. Searching for ``"\\0"`` matches the end of
the text and yields an empty string.
"""

from __future__ import annotations

from typing import Optional, Sequence, Union

_WHITESPACE = frozenset(" \t\n\v\f\r")
_LLONG_MAX = (1 << 63) - 1
_TERMINATOR = "\0"

Text = Union[str, bytes, bytearray]


def _to_int32(value: int) -> int:
    value &= 0xFFFFFFFF
    return value - (1 << 32) if value & 0x80000000 else value


def _single_char(char: str) -> str:
    if not isinstance(char, str) or len(char) != 1:
        raise ValueError(f"expected a single character, got {char!r}")
    return char


def _non_negative(name: str, value: int) -> int:
    if value < 0:
        raise ValueError(f"{name} must not be negative, got {value}")
    return value


def atoi(text: str) -> int:
    """Parse a leading decimal integer the way C's ``atoi`` does.

    Leading whitespace and one sign are accepted; parsing stops at the first
    non-digit. A value beyond the 64-bit range gives -1 (positive) or 0
    (negative). The result is wrapped to a 32-bit signed integer.
    """
    index = 0
    while index < len(text) and text[index] in _WHITESPACE:
        index += 1
    sign = 1
    if index < len(text) and text[index] in "+-":
        if text[index] == "-":
            sign = -1
        index += 1
    result = 0
    for char in text[index:]:
        if not "0" <= char <= "9":
            break
        result = result * 10 + (ord(char) - ord("0"))
        if result > _LLONG_MAX:
            return 0 if sign == -1 else -1
    return _to_int32(result * sign)


def itoa(number: int) -> str:
    """Return the decimal representation of an integer."""
    if isinstance(number, bool) or not isinstance(number, int):
        raise TypeError(f"expected int, not {type(number).__name__}")
    return str(number)


def split(text: str, sep: str) -> list[str]:
    """Split ``text`` on the character ``sep``, dropping empty fields."""
    if sep == "" or sep == _TERMINATOR:
        return [text] if text else []
    _single_char(sep)
    return [word for word in text.split(sep) if word]


def strtrim(text: str, charset: str) -> str:
    """Remove every character in ``charset`` from both ends of ``text``."""
    return text.strip(charset)


def strnstr(haystack: str, needle: str, length: int) -> Optional[str]:
    """Find ``needle`` lying wholly within the first ``length`` characters."""
    _non_negative("length", length)
    if not needle:
        return haystack
    index = haystack.find(needle, 0, length)
    return None if index < 0 else haystack[index:]


def substr(text: str, start: int, length: int) -> str:
    """Return at most ``length`` characters of ``text`` beginning at ``start``."""
    _non_negative("start", start)
    _non_negative("length", length)
    if start > len(text):
        return ""
    return text[start:start + length]


def _codes(text: Text) -> Sequence[int]:
    if isinstance(text, str):
        return [ord(char) for char in text]
    return bytes(text)


def strncmp(first: Text, second: Text, n: int) -> int:
    """Compare at most ``n`` characters; return the difference of the first mismatch."""
    _non_negative("n", n)
    left = _codes(first)
    right = _codes(second)
    limit = min(n, len(left), len(right))
    for a, b in zip(left[:limit], right[:limit]):
        if a != b:
            return a - b
    if limit == n:
        return 0
    a = left[limit] if limit < len(left) else 0
    b = right[limit] if limit < len(right) else 0
    return a - b


def strchr(text: str, char: str) -> Optional[str]:
    """Return ``text`` from the first occurrence of ``char``, or None."""
    if _single_char(char) == _TERMINATOR:
        return ""
    index = text.find(char)
    return None if index < 0 else text[index:]


def strrchr(text: str, char: str) -> Optional[str]:
    """Return ``text`` from the last occurrence of ``char``, or None."""
    if _single_char(char) == _TERMINATOR:
        return ""
    index = text.rfind(char)
    return None if index < 0 else text[index:]