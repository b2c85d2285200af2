"""A small printf-style formatter with a fixed set of conversions.

Supported conversions: ``%c %s %p %d %i %u %x %X %%``.  Any other
character after ``%`` is emitted unchanged together with the ``%``.
Integers are treated as 32-bit C values: ``%d``/``%i`` wrap to a signed
32-bit range, ``%u``/``%x``/``%X`` to an unsigned one.
"""

from __future__ import annotations

import sys
from collections.abc import Iterator
from typing import Any, TextIO

_LOWER_DIGITS = "0123456789abcdef"
_UPPER_DIGITS = "0123456789ABCDEF"
_UINT32 = 1 << 32


def _to_int32(value: int) -> int:
    value %= _UINT32
    return value - _UINT32 if value >= 1 << 31 else value


def _to_uint32(value: int) -> int:
    return value % _UINT32


def _in_base(value: int, base: int, upper: bool = False) -> str:
    digits = _UPPER_DIGITS if upper else _LOWER_DIGITS
    if value == 0:
        return digits[0]
    out = []
    while value:
        value, rem = divmod(value, base)
        out.append(digits[rem])
    return "".join(reversed(out))


def _as_int(value: Any, spec: str) -> int:
    if isinstance(value, str) and len(value) == 1:
        return ord(value)
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f"%{spec} expects an integer, got {type(value).__name__}")
    return value


def _char(value: Any) -> str:
    return chr(_as_int(value, "c") & 0xFF)


def _string(value: Any) -> str:
    if value is None:
        return "(null)"
    if not isinstance(value, str):
        raise TypeError(f"%s expects a string, got {type(value).__name__}")
    return value


def _pointer(value: Any) -> str:
    if value is None:
        return "(nil)"
    address = value if isinstance(value, int) and not isinstance(value, bool) else id(value)
    if address == 0:
        return "(nil)"
    return "0x" + _in_base(address % (1 << 64), 16)


def _signed(value: Any) -> str:
    number = _to_int32(_as_int(value, "d"))
    if number < 0:
        return "-" + _in_base(-number, 10)
    return _in_base(number, 10)


_CONVERSIONS = {
    "c": _char,
    "s": _string,
    "p": _pointer,
    "d": _signed,
    "i": _signed,
    "u": lambda v: _in_base(_to_uint32(_as_int(v, "u")), 10),
    "x": lambda v: _in_base(_to_uint32(_as_int(v, "x")), 16),
    "X": lambda v: _in_base(_to_uint32(_as_int(v, "X")), 16, upper=True),
}


def _pieces(fmt: str, args: tuple[Any, ...]) -> Iterator[str]:
    remaining = iter(args)
    chars = iter(fmt)
    for ch in chars:
        if ch != "%":
            yield ch
            continue
        spec = next(chars, None)
        if spec is None:
            raise ValueError("format string ends with a lone '%'")
        if spec == "%":
            yield "%"
        elif spec in _CONVERSIONS:
            try:
                arg = next(remaining)
            except StopIteration:
                raise TypeError(f"not enough arguments for %{spec}") from None
            yield _CONVERSIONS[spec](arg)
        else:
            yield "%" + spec


def render(fmt: str, *args: Any) -> str:
    """Return ``fmt`` with its conversions replaced by ``args``."""
    if fmt is None:
        raise TypeError("format string must not be None")
    return "".join(_pieces(fmt, args))


def print_formatted(fmt: str, *args: Any, stream: TextIO | None = None) -> int:
    """Write the rendered text to ``stream`` (stdout by default).

    Returns the number of characters written.
    """
    text = render(fmt, *args)
    target = sys.stdout if stream is None else stream
    target.write(text)
    target.flush()
    return len(text)