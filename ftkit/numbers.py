"""Conversion between decimal text and 32-bit signed integers."""

INT_MIN = -(2 ** 31)
INT_MAX = 2 ** 31 - 1

_WHITESPACE = " \t\n\v\f\r"
_DIGITS = "0123456789"


def _wrap_int32(value: int) -> int:
    return (value - INT_MIN) % 2 ** 32 + INT_MIN


def atoi(text: str) -> int:
    """Parse a leading decimal integer from ``text``.

    Leading whitespace is skipped and one sign is accepted. Two signs in a
    row give 0. Parsing stops at the first non-digit; no digits give 0. The
    result wraps around like a 32-bit signed integer.
    """
    rest = text.lstrip(_WHITESPACE)
    sign = 1
    if rest[:1] in ("-", "+") and rest[:1]:
        if rest[1:2] in ("-", "+") and rest[1:2]:
            return 0
        if rest[0] == "-":
            sign = -1
        rest = rest[1:]
    digits = []
    for ch in rest:
        if ch not in _DIGITS:
            break
        digits.append(ch)
    if not digits:
        return 0
    return _wrap_int32(int("".join(digits)) * sign)


def itoa(n: int) -> str:
    """Decimal text of a 32-bit signed integer."""
    if not INT_MIN <= n <= INT_MAX:
        raise OverflowError(f"{n} does not fit in a 32-bit signed integer")
    if n == 0:
        return "0"
    magnitude = -n if n < 0 else n
    out = []
    while magnitude:
        magnitude, digit = divmod(magnitude, 10)
        out.append(_DIGITS[digit])
    if n < 0:
        out.append("-")
    return "".join(reversed(out))