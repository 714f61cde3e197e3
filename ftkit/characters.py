"""ASCII character classification and case conversion.

Every function accepts either a one-character string or an integer
character code. The case converters return a value of the same kind
they were given.
"""

from __future__ import annotations

CharLike = str | int

_UPPER_A, _UPPER_Z = ord("A"), ord("Z")
_LOWER_A, _LOWER_Z = ord("a"), ord("z")
_DIGIT_0, _DIGIT_9 = ord("0"), ord("9")
_CASE_OFFSET = _LOWER_A - _UPPER_A


def _code(ch: CharLike) -> int:
    """Return the integer code of a character or code."""
    if isinstance(ch, str):
        if len(ch) != 1:
            raise ValueError(f"expected a single character, got {ch!r}")
        return ord(ch)
    if isinstance(ch, int):
        return ch
    raise TypeError(f"expected a str or int, got {type(ch).__name__}")


def _like(original: CharLike, code: int) -> CharLike:
    return chr(code) if isinstance(original, str) else code


def _is_upper(code: int) -> bool:
    return _UPPER_A <= code <= _UPPER_Z


def _is_lower(code: int) -> bool:
    return _LOWER_A <= code <= _LOWER_Z


def is_alpha(ch: CharLike) -> bool:
    """True for ASCII letters."""
    code = _code(ch)
    return _is_upper(code) or _is_lower(code)


def is_digit(ch: CharLike) -> bool:
    """True for the ASCII digits 0 to 9."""
    return _DIGIT_0 <= _code(ch) <= _DIGIT_9


def is_alnum(ch: CharLike) -> bool:
    """True for ASCII letters and digits."""
    return is_digit(ch) or is_alpha(ch)


def is_ascii(ch: CharLike) -> bool:
    """True for codes 0 to 127."""
    return 0 <= _code(ch) <= 127


def is_print(ch: CharLike) -> bool:
    """True for printable ASCII characters, space included."""
    return 32 <= _code(ch) <= 126


def to_lower(ch: CharLike) -> CharLike:
    """Lower-case an ASCII capital; anything else is returned unchanged."""
    code = _code(ch)
    if _is_upper(code):
        return _like(ch, code + _CASE_OFFSET)
    return ch


def to_upper(ch: CharLike) -> CharLike:
    """Upper-case an ASCII small letter; anything else is returned unchanged."""
    code = _code(ch)
    if _is_lower(code):
        return _like(ch, code - _CASE_OFFSET)
    return ch