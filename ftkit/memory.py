"""Byte-buffer helpers working in place on mutable buffers."""

from __future__ import annotations

Buffer = bytearray | memoryview
ReadableBuffer = bytes | bytearray | memoryview


def _check_count(buf: ReadableBuffer, n: int, what: str = "buffer") -> None:
    if n < 0:
        raise ValueError(f"byte count must not be negative, got {n}")
    if n > len(buf):
        raise ValueError(f"byte count {n} exceeds {what} length {len(buf)}")


def _check_span(buf: ReadableBuffer, offset: int, n: int) -> None:
    if offset < 0:
        raise ValueError(f"offset must not be negative, got {offset}")
    if n < 0:
        raise ValueError(f"byte count must not be negative, got {n}")
    if offset + n > len(buf):
        raise ValueError(
            f"span {offset}..{offset + n} exceeds buffer length {len(buf)}"
        )


def calloc(count: int, size: int) -> bytearray:
    """Return a zero-filled buffer of count elements of size bytes."""
    if count < 0 or size < 0:
        raise ValueError("count and size must not be negative")
    return bytearray(count * size)


def memset(buf: Buffer, value: int, n: int) -> Buffer:
    """Fill the first n bytes of buf with the low byte of value."""
    _check_count(buf, n)
    buf[:n] = bytes([value & 0xFF]) * n
    return buf


def bzero(buf: Buffer, n: int) -> None:
    """Zero the first n bytes of buf."""
    memset(buf, 0, n)


def memchr(buf: ReadableBuffer, value: int, n: int) -> int | None:
    """Return the index of the first byte equal to value within n bytes, or None."""
    _check_count(buf, n)
    index = bytes(buf[:n]).find(value & 0xFF)
    return None if index < 0 else index


def memcmp(a: ReadableBuffer, b: ReadableBuffer, n: int) -> int:
    """Compare n bytes; return the difference of the first unequal pair, else 0."""
    _check_count(a, n, "first buffer")
    _check_count(b, n, "second buffer")
    for x, y in zip(bytes(a[:n]), bytes(b[:n])):
        if x != y:
            return x - y
    return 0


def memcpy(dest: Buffer, src: ReadableBuffer, n: int) -> Buffer:
    """Copy n bytes from src to the start of dest."""
    _check_count(dest, n, "destination")
    _check_count(src, n, "source")
    dest[:n] = bytes(src[:n])
    return dest


def memmove(dest: Buffer, dest_offset: int, src_offset: int, n: int) -> Buffer:
    """Copy n bytes inside dest from src_offset to dest_offset; spans may overlap."""
    _check_span(dest, src_offset, n)
    _check_span(dest, dest_offset, n)
    dest[dest_offset:dest_offset + n] = bytes(dest[src_offset:src_offset + n])
    return dest