"""Small validation helpers for file names, files and character grids."""

from __future__ import annotations

import os
from collections.abc import Sequence


def has_extension(filename: str | None, extension: str | None) -> bool:
    """True when filename ends with extension.

    A missing filename or extension gives False. A filename shorter than
    the extension cannot carry it.
    """
    if filename is None or extension is None:
        return False
    if len(filename) < len(extension):
        return False
    return filename[len(filename) - len(extension):] == extension


def file_opens(path: str | os.PathLike[str]) -> bool:
    """True when path can be opened read-only."""
    try:
        fd = os.open(path, os.O_RDONLY)
    except OSError:
        return False
    os.close(fd)
    return True


def count_char(text: str, ch: str) -> int:
    """Return how many times the character ch occurs in text."""
    if not isinstance(ch, str) or len(ch) != 1:
        raise ValueError(f"expected a single character, got {ch!r}")
    return text.count(ch)


def only_chars(rows: Sequence[str], allowed: str, height: int) -> bool:
    """True when the first height rows hold only characters from allowed."""
    if height > len(rows):
        raise ValueError(f"height {height} exceeds the {len(rows)} rows given")
    allowed_set = set(allowed)
    return all(ch in allowed_set for row in rows[:max(height, 0)] for ch in row)