"""Writing characters, strings and numbers to a text stream."""

import sys
from typing import Optional, TextIO

from ftkit.numbers import itoa

_NUL = "\0"


def _target(stream: Optional[TextIO]) -> TextIO:
    return sys.stdout if stream is None else stream


def _c_str(s: str) -> str:
    return s.split(_NUL, 1)[0]


def put_char(c: str, stream: Optional[TextIO] = None) -> None:
    """Write a single character to ``stream`` (standard output by default)."""
    if not isinstance(c, str) or len(c) != 1:
        raise ValueError(f"expected a single character, got {c!r}")
    _target(stream).write(c)


def put_str(s: str, stream: Optional[TextIO] = None) -> None:
    """Write ``s`` up to its first NUL character."""
    _target(stream).write(_c_str(s))


def put_endl(s: str, stream: Optional[TextIO] = None) -> None:
    """Write ``s`` up to its first NUL character, then a newline."""
    _target(stream).write(_c_str(s) + "\n")


def put_nbr(n: int, stream: Optional[TextIO] = None) -> None:
    """Write the decimal form of a 32-bit signed integer."""
    _target(stream).write(itoa(n))