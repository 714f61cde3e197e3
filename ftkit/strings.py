"""String helpers: searching, comparing, slicing, splitting and bounded copies.

Text functions work on Python strings and return new strings or indices.
``strlcpy`` and ``strlcat`` work in place on NUL-terminated byte buffers.
"""

from __future__ import annotations

from collections.abc import Callable, MutableSequence

NUL = "\0"


def _single_char(c: str) -> str:
    if not isinstance(c, str) or len(c) != 1:
        raise ValueError(f"expected a single character, got {c!r}")
    return c


def _check_non_negative(value: int, name: str) -> None:
    if value < 0:
        raise ValueError(f"{name} must not be negative, got {value}")


def strlen(s: str) -> int:
    """Return the number of characters in s."""
    return len(s)


def strlen_nl(s: str) -> int:
    """Return the number of characters before the first newline, or len(s)."""
    newline = s.find("\n")
    return len(s) if newline < 0 else newline


def strchr(s: str, c: str) -> int | None:
    """Return the index of the first c in s, or None.

    Searching for NUL finds the terminator position, len(s).
    """
    _single_char(c)
    if c == NUL:
        return len(s)
    index = s.find(c)
    return None if index < 0 else index


def strrchr(s: str, c: str) -> int | None:
    """Return the index of the last c in s, or None.

    Searching for NUL finds the terminator position, len(s).
    """
    _single_char(c)
    if c == NUL:
        return len(s)
    index = s.rfind(c)
    return None if index < 0 else index


def strncmp(s1: str, s2: str, n: int) -> int:
    """Compare at most n characters.

    Returns the code difference of the first differing pair, counting the
    end of a string as code 0, or 0 when the compared parts are equal.
    """
    _check_non_negative(n, "n")
    for a, b in zip(s1[:n] + NUL, s2[:n] + NUL):
        if a != b:
            return ord(a) - ord(b)
        if a == NUL:
            break
    return 0


def strnstr(big: str, little: str, length: int) -> int | None:
    """Return the index of little within the first length characters of big.

    An empty little is found at 0; a match must lie wholly inside the limit.
    """
    _check_non_negative(length, "length")
    if not little:
        return 0
    index = big[:length].find(little)
    return None if index < 0 else index


def strdup(s: str) -> str:
    """Return a copy of s."""
    return "".join(s)


def substr(s: str, start: int, length: int) -> str:
    """Return up to length characters of s beginning at start.

    A start past the end or a zero length gives an empty string.
    """
    _check_non_negative(start, "start")
    _check_non_negative(length, "length")
    if length == 0 or start >= len(s):
        return ""
    return s[start:start + length]


def strjoin(s1: str, s2: str) -> str:
    """Return s1 followed by s2."""
    return s1 + s2


def strtrim(s: str, charset: str) -> str:
    """Remove characters found in charset from both ends of s."""
    return s.strip(charset) if charset else s


def split(s: str, sep: str) -> list[str]:
    """Split s on the separator character, dropping empty words."""
    _single_char(sep)
    return [word for word in s.split(sep) if word]


def strmapi(s: str, func: Callable[[int, str], str]) -> str:
    """Return a new string of func(index, char) for every character of s."""
    return "".join(func(index, ch) for index, ch in enumerate(s))


def striteri(chars: MutableSequence[str], func: Callable[[int, str], str]) -> None:
    """Replace every element of chars in place by func(index, char)."""
    for index, ch in enumerate(chars):
        chars[index] = func(index, ch)


def _c_length(buf: bytes | bytearray | memoryview) -> int:
    """Length of the NUL-terminated string at the start of buf."""
    end = bytes(buf).find(b"\0")
    return len(buf) if end < 0 else end


def _check_size(dest: bytearray, size: int) -> None:
    _check_non_negative(size, "size")
    if size > len(dest):
        raise ValueError(f"size {size} exceeds destination length {len(dest)}")


def strlcpy(dest: bytearray, src: bytes, size: int) -> int:
    """Copy src into dest, writing at most size bytes including the NUL.

    Returns the length of src, so a result >= size means truncation.
    """
    _check_size(dest, size)
    src_len = _c_length(src)
    if size == 0:
        return src_len
    copied = min(src_len, size - 1)
    dest[:copied] = bytes(src[:copied])
    dest[copied] = 0
    return src_len


def strlcat(dest: bytearray, src: bytes, size: int) -> int:
    """Append src to the NUL-terminated string in dest within size bytes.

    Returns the length of the string it tried to build; when dest already
    holds size bytes or more, returns size plus the length of src.
    """
    _check_size(dest, size)
    dest_len = _c_length(dest)
    src_len = _c_length(src)
    if dest_len >= size:
        return size + src_len
    copied = min(src_len, size - dest_len - 1)
    dest[dest_len:dest_len + copied] = bytes(src[:copied])
    dest[dest_len + copied] = 0
    return dest_len + src_len