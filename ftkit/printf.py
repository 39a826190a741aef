"""A small printf: %c %s %p %d %i %u %x %X and %%.

Conversions take no flags, widths or precisions. A ``%`` followed by an
unknown character prints nothing and consumes no argument. A ``%`` at the
very end of the format is dropped. A NUL character ends the format.
"""

import sys
from typing import Any, Callable, Dict, Iterator

from ftkit.numbers import itoa

_NUL = "\0"
_UINT_MODULUS = 2 ** 32
_INT_OFFSET = 2 ** 31
_POINTER_MODULUS = 2 ** 64


def _next_arg(remaining: Iterator[Any], tag: str) -> Any:
    try:
        return next(remaining)
    except StopIteration:
        raise TypeError(f"not enough arguments for %{tag}") from None


def _as_int(value: Any, tag: str) -> int:
    if not isinstance(value, int):
        raise TypeError(f"%{tag} needs an int, got {type(value).__name__}")
    return value


def _signed(value: Any, tag: str) -> str:
    wrapped = (_as_int(value, tag) + _INT_OFFSET) % _UINT_MODULUS - _INT_OFFSET
    return itoa(wrapped)


def _unsigned(value: Any, tag: str) -> int:
    return _as_int(value, tag) % _UINT_MODULUS


def _conv_c(value: Any) -> str:
    if isinstance(value, str):
        if len(value) != 1:
            raise TypeError(f"%c needs a single character, got {value!r}")
        return value
    return chr(_as_int(value, "c") & 0xFF)


def _conv_s(value: Any) -> str:
    if value is None:
        return "(null)"
    if not isinstance(value, str):
        raise TypeError(f"%s needs a str or None, got {type(value).__name__}")
    return value.split(_NUL, 1)[0]


def _conv_p(value: Any) -> str:
    if value is None:
        return "(nil)"
    address = value if isinstance(value, int) else id(value)
    address %= _POINTER_MODULUS
    if address == 0:
        return "(nil)"
    return "0x" + format(address, "x")


_CONVERSIONS: Dict[str, Callable[[Any], str]] = {
    "c": _conv_c,
    "s": _conv_s,
    "p": _conv_p,
    "d": lambda value: _signed(value, "d"),
    "i": lambda value: _signed(value, "i"),
    "u": lambda value: str(_unsigned(value, "u")),
    "x": lambda value: format(_unsigned(value, "x"), "x"),
    "X": lambda value: format(_unsigned(value, "X"), "X"),
}


def _convert(tag: str, remaining: Iterator[Any]) -> str:
    if tag == "%":
        return "%"
    conversion = _CONVERSIONS.get(tag)
    if conversion is None:
        return ""
    return conversion(_next_arg(remaining, tag))


def format_string(fmt: str, *args: Any) -> str:
    """Return the text that ``printf(fmt, *args)`` would write.

    Raises TypeError when arguments run out or have the wrong type.
    Extra arguments are ignored.
    """
    fmt = fmt.split(_NUL, 1)[0]
    remaining = iter(args)
    pieces = []
    pos = 0
    while pos < len(fmt):
        percent = fmt.find("%", pos)
        if percent < 0:
            pieces.append(fmt[pos:])
            break
        pieces.append(fmt[pos:percent])
        if percent + 1 >= len(fmt):
            break
        pieces.append(_convert(fmt[percent + 1], remaining))
        pos = percent + 2
    return "".join(pieces)


def printf(fmt: str, *args: Any) -> int:
    """Write the formatted text to standard output and return its length."""
    text = format_string(fmt, *args)
    sys.stdout.write(text)
    return len(text)