# ftkit

A small library of helpers for characters, byte buffers, strings, linked
lists, buffered line reading and printf-style output. It has no runtime
dependencies.

## Modules

- `ftkit.characters`: `is_alnum`, `is_alpha`, `is_ascii`, `is_digit`,
  `is_print`, `to_lower`, `to_upper`. Each accepts a one-character string or
  an integer code; the case converters return the same kind they were given
  and only change ASCII letters.
- `ftkit.memory`: in-place helpers over `bytearray` (or `memoryview`):
  `calloc`, `bzero`, `memset`, `memchr` (returns an index or `None`),
  `memcmp`, `memcpy`, and `memmove(dest, dest_offset, src_offset, n)` for
  overlapping copies inside one buffer. Byte counts past the end of a buffer
  raise `ValueError`.
- `ftkit.numbers`: `atoi`, which parses a leading decimal integer after
  whitespace and an optional sign (returning 0 when there are no digits), and
  `itoa`, which raises `OverflowError` outside the signed 32-bit range.
- `ftkit.strings`: `strlen`, `strlen_nl`, `strchr`, `strrchr`, `strncmp`,
  `strnstr`, `strdup`, `substr`, `strjoin`, `strtrim`, `split`, `strmapi`,
  `striteri`. Search functions return an index or `None`. `strlcpy` and
  `strlcat` copy into NUL-terminated `bytearray` buffers and return the
  length of the string they tried to build.
- `ftkit.checks`: `has_extension`, `file_opens`, `count_char`, `only_chars`.
- `ftkit.linkedlist`: `LinkedList`, a singly linked list with `push_front`,
  `push_back`, `last`, `len()`, iteration, `clear(delete)`, `for_each(func)`
  and `map(func, delete)`.
- `ftkit.lines`: `LineReader` and `read_lines`, which read a text or binary
  stream `buffer_size` units at a time (42 by default) and return lines with
  their trailing newline.
- `ftkit.output`: `format_printf` (conversions `%c %s %d %i %u %x %X %p %%`),
  `printf` (writes to a stream, stdout by default, and returns the length),
  `to_hex`, `format_pointer`, `put_char`, `put_str`, `put_endl`, `put_nbr`.

## Install

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Examples

```python
import io

from ftkit.lines import read_lines
from ftkit.numbers import atoi, itoa
from ftkit.output import format_printf
from ftkit.strings import split, strtrim

atoi("  -42abc")            # -42
itoa(-2147483648)           # "-2147483648"
split("  a  bb c ", " ")    # ["a", "bb", "c"]
strtrim("xxhixx", "x")      # "hi"
format_printf("%d %x %s%%", 255, 255, "ok")   # "255 ff ok%"

for line in read_lines(io.StringIO("one\ntwo\n"), 42):
    print(line, end="")
```

`has_extension("level.ber", ".ber")` checks a file name's ending, and
`only_chars(rows, "01CEP", len(rows))` reports whether every row uses only the
allowed characters.

## What it does not do

`ftkit` is a library only. It installs no command, and it does not load,
check or play any map or game; the grid and file-name checks in
`ftkit.checks` are building blocks a caller can use for that.