"""Formatted and unformatted writing of text to streams.

``format_printf`` understands the conversions ``%c``, ``%s``, ``%d``,
``%i``, ``%u``, ``%x``, ``%X``, ``%p`` and ``%%``. Any other character
after ``%`` produces no output and consumes no argument. Integer
conversions behave like their 32-bit C counterparts: ``%d`` and ``%i``
wrap to a signed 32-bit value, while ``%u``, ``%x`` and ``%X`` wrap to an
unsigned one.
"""

from __future__ import annotations

import sys
from collections.abc import Callable
from typing import Any, TextIO

from ftkit.numbers import itoa

_UINT32 = 2**32
_INT32_SIGN = 2**31
_LOWER_DIGITS = "0123456789abcdef"
_UPPER_DIGITS = "0123456789ABCDEF"
NULL_STRING = "(null)"
NULL_POINTER = "(nil)"


def _stream(stream: TextIO | None) -> TextIO:
    return sys.stdout if stream is None else stream


def _require_int(value: Any, conversion: str) -> int:
    if not isinstance(value, int):
        raise TypeError(
            f"%{conversion} needs an integer, got {type(value).__name__}"
        )
    return value


def _char(value: str | int) -> str:
    """Return a single character from a one-character string or a code."""
    if isinstance(value, str):
        if len(value) != 1:
            raise ValueError(f"expected a single character, got {value!r}")
        return value
    if isinstance(value, int):
        return chr(value & 0xFF)
    raise TypeError(f"expected a str or int, got {type(value).__name__}")


def _signed32(value: int) -> int:
    return (value + _INT32_SIGN) % _UINT32 - _INT32_SIGN


def to_hex(n: int, upper: bool = False) -> str:
    """Return the hexadecimal digits of a non-negative integer, without prefix."""
    if n < 0:
        raise ValueError(f"cannot write a negative number in hex, got {n}")
    digits = _UPPER_DIGITS if upper else _LOWER_DIGITS
    if n == 0:
        return digits[0]
    out = []
    while n:
        n, rest = divmod(n, 16)
        out.append(digits[rest])
    return "".join(reversed(out))


def format_pointer(address: int | None) -> str:
    """Return an address as ``0x`` followed by hex digits, or ``(nil)`` for null."""
    if address is None or address == 0:
        return NULL_POINTER
    if address < 0:
        raise ValueError(f"an address must not be negative, got {address}")
    return "0x" + to_hex(address)


def _convert_string(value: Any) -> str:
    if value is None:
        return NULL_STRING
    if not isinstance(value, str):
        raise TypeError(f"%s needs a str or None, got {type(value).__name__}")
    return value


def _convert_pointer(value: Any) -> str:
    if value is None:
        return NULL_POINTER
    return format_pointer(_require_int(value, "p"))


_CONVERTERS: dict[str, Callable[[Any], str]] = {
    "c": _char,
    "s": _convert_string,
    "d": lambda v: str(_signed32(_require_int(v, "d"))),
    "i": lambda v: str(_signed32(_require_int(v, "i"))),
    "u": lambda v: str(_require_int(v, "u") % _UINT32),
    "x": lambda v: to_hex(_require_int(v, "x") % _UINT32),
    "X": lambda v: to_hex(_require_int(v, "X") % _UINT32, upper=True),
    "p": _convert_pointer,
}


def format_printf(fmt: str | None, *args: Any) -> str:
    """Return fmt with its conversions replaced by the formatted args.

    A None format gives an empty string. Too few arguments raise TypeError;
    surplus arguments are ignored.
    """
    if fmt is None:
        return ""
    values = iter(args)
    parts: list[str] = []
    chars = iter(fmt)
    for ch in chars:
        if ch != "%":
            parts.append(ch)
            continue
        conversion = next(chars, "")
        if conversion == "%":
            parts.append("%")
            continue
        converter = _CONVERTERS.get(conversion)
        if converter is None:
            continue
        try:
            value = next(values)
        except StopIteration:
            raise TypeError(f"not enough arguments for %{conversion}") from None
        parts.append(converter(value))
    return "".join(parts)


def printf(fmt: str | None, *args: Any, stream: TextIO | None = None) -> int:
    """Write the formatted text to stream (stdout by default); return its length."""
    text = format_printf(fmt, *args)
    _stream(stream).write(text)
    return len(text)


def put_char(c: str | int, stream: TextIO | None = None) -> None:
    """Write one character."""
    _stream(stream).write(_char(c))


def put_str(s: str, stream: TextIO | None = None) -> None:
    """Write a string."""
    if not isinstance(s, str):
        raise TypeError(f"expected a str, got {type(s).__name__}")
    _stream(stream).write(s)


def put_endl(s: str, stream: TextIO | None = None) -> None:
    """Write a string followed by a newline."""
    put_str(s, stream)
    _stream(stream).write("\n")


def put_nbr(n: int, stream: TextIO | None = None) -> None:
    """Write the decimal text of a 32-bit signed integer."""
    _stream(stream).write(itoa(n))