# ftkit

A small collection of helpers for ASCII characters, byte buffers, 32-bit
integers, NUL-terminated strings, singly linked lists, simple output and
printf-style formatting. It has no dependencies outside the standard library.

## Installing

```
pip install .
```

For running the tests:

```
pip install ".[test]"
pytest
```

## Modules

- `ftkit.chars`: `is_alpha`, `is_digit`, `is_alnum`, `is_ascii`, `is_print`,
  `to_upper`, `to_lower`. Each accepts an integer code or a one-character
  string; the case functions return the same kind they were given.
- `ftkit.memory`: `memset`, `bzero`, `memcpy`, `memchr`, `memcmp` and
  `calloc` on `bytearray` buffers, and `memmove(buf, dst, src, n)`, which
  moves bytes between two offsets of one buffer and handles overlap.
  `memchr` returns an index or `None`; `calloc` raises `MemoryError` when
  the size would overflow.
- `ftkit.numbers`: `atoi` reads a leading integer from text (whitespace and
  one sign allowed, wrapping like a 32-bit signed integer); `itoa` gives the
  decimal text of a 32-bit signed integer and raises `OverflowError` outside
  that range.
- `ftkit.strings`: `strlcpy`, `strlcat`, `strchr`, `strrchr`, `strncmp`,
  `strnstr`, `substr`, `strjoin`, `strtrim`, `split`, `strmapi`, `striteri`.
  A NUL character ends a string. Search functions return an index or
  `None`. `strlcpy(src, size)` and `strlcat(dst, src, size)` return a pair:
  the text that fits in a buffer of `size` characters and the length the
  full result would have. `striteri` edits a mutable sequence in place,
  replacing an item wherever the callback returns something other than
  `None`.
- `ftkit.lists`: `Node` and `LinkedList`, a singly linked list supporting
  `len()`, iteration, `add_front`, `add_back`, `last`, `clear`, `iterate`
  and `map`.
- `ftkit.output`: `put_char`, `put_str`, `put_endl`, `put_nbr`, writing to a
  text stream (standard output by default).
- `ftkit.printf`: `format_string` returns the formatted text; `printf`
  writes it to standard output and returns its length. The conversions are
  `%c`, `%s`, `%p`, `%d`, `%i`, `%u`, `%x`, `%X` and `%%`.

## Example

```python
from ftkit.printf import format_string, printf
from ftkit.strings import split, strlcpy
from ftkit.lists import LinkedList

format_string("%s is %d years, %x in hex", "Ada", 36, 36)
# 'Ada is 36 years, 24 in hex'

count = printf("value: %u\n", 42)   # writes to standard output
# count == 10

split("  a  b c ", " ")
# ['a', 'b', 'c']

strlcpy("hello", 3)
# ('he', 5)

items = LinkedList([1, 2, 3])
doubled = items.map(lambda x: x * 2)
list(doubled)
# [2, 4, 6]
```

## Formatting rules

- `%s` with `None` prints `(null)`; `%p` with `None` or 0 prints `(nil)`,
  otherwise `0x` and the lower-case hex address (an object's `id()` when the
  argument is not an integer).
- `%d` and `%i` wrap to 32-bit signed; `%u`, `%x` and `%X` wrap to 32-bit
  unsigned.
- A `%` followed by an unknown character prints nothing and uses no
  argument; a lone `%` at the end of the format is dropped.
- Too few arguments, or an argument of the wrong type, raise `TypeError`;
  extra arguments are ignored.

## What it does not do

`printf` takes no flags, field widths or precisions. The package is a
library only and installs no command-line program.