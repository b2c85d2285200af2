"""String helpers with C-like semantics: 32-bit integer parsing and
formatting, splitting, trimming and bounded substring search."""

from __future__ import annotations

_UINT32 = 1 << 32
_SPACE = frozenset("\t\n\v\f\r ")


def _to_int32(value: int) -> int:
    value %= _UINT32
    return value - _UINT32 if value >= 1 << 31 else value


def atoi(text: str) -> int:
    """Parse a leading decimal integer, skipping whitespace.

    Stops at the first non-digit; returns 0 when there are no digits.
    The result wraps to a signed 32-bit integer.
    """
    pos = 0
    while pos < len(text) and text[pos] in _SPACE:
        pos += 1
    negative = False
    if pos < len(text) and text[pos] in "+-":
        negative = text[pos] == "-"
        pos += 1
    start = pos
    while pos < len(text) and "0" <= text[pos] <= "9":
        pos += 1
    value = int(text[start:pos]) if pos > start else 0
    return _to_int32(-value if negative else value)


def itoa(n: int) -> str:
    """Format ``n``, taken as a signed 32-bit integer, in decimal."""
    return str(_to_int32(n))


def split(text: str, sep: str) -> list[str]:
    """Split on a single separator character, dropping empty pieces."""
    if len(sep) != 1:
        raise ValueError("separator must be a single character")
    return [word for word in text.split(sep) if word]


def strtrim(text: str, charset: str) -> str:
    """Remove characters in ``charset`` from both ends of ``text``."""
    return text.strip(charset)


def substr(text: str, start: int, length: int) -> str:
    """Return at most ``length`` characters of ``text`` from ``start``."""
    if start < 0 or length < 0:
        raise ValueError("start and length must not be negative")
    if start >= len(text):
        return ""
    return text[start:start + length]


def strnstr(haystack: str, needle: str, length: int) -> int | None:
    """Find ``needle`` wholly within the first ``length`` characters.

    Returns the index of the first match, 0 for an empty needle, or
    None when there is no match.
    """
    if length < 0:
        raise ValueError("length must not be negative")
    if not needle:
        return 0
    index = haystack.find(needle, 0, length)
    return None if index == -1 else index