"""String helpers with C string semantics: bounded copy, search, compare and slicing.

Strings are treated as C strings, so a NUL character ends them. Positions
are returned as indices, and None stands for "not found".
"""

from itertools import zip_longest
from typing import Callable, MutableSequence, Optional, Tuple, Union

CharLike = Union[int, str]

_NUL = "\0"


def _c_str(s: str) -> str:
    """The part of ``s`` before its first NUL character."""
    return s.split(_NUL, 1)[0]


def _char(c: CharLike) -> str:
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {c!r}")
        return c
    if isinstance(c, int):
        return chr(c & 0xFF)
    raise TypeError(f"expected an int or a one-character str, got {type(c).__name__}")


def _check_size(size: int, name: str = "size") -> None:
    if size < 0:
        raise ValueError(f"{name} must not be negative, got {size}")


def strlcpy(src: str, size: int) -> Tuple[str, int]:
    """Copy ``src`` into a buffer of ``size`` characters, terminator included.

    Returns the text that fits (at most ``size - 1`` characters; empty when
    ``size`` is 0) and the full length of ``src``, so truncation shows as a
    length greater than or equal to ``size``.
    """
    _check_size(size)
    src = _c_str(src)
    copied = src[: size - 1] if size > 0 else ""
    return copied, len(src)


def strlcat(dst: str, src: str, size: int) -> Tuple[str, int]:
    """Append ``src`` to ``dst`` within a buffer of ``size`` characters.

    Returns the resulting text and the length the full result would have.
    When ``size`` does not exceed the length of ``dst``, ``dst`` is returned
    unchanged together with ``len(src) + size``.
    """
    _check_size(size)
    dst = _c_str(dst)
    src = _c_str(src)
    if size <= len(dst):
        return dst, len(src) + size
    room = size - len(dst) - 1
    return dst + src[:room], len(dst) + len(src)


def strchr(s: str, c: CharLike) -> Optional[int]:
    """Index of the first occurrence of ``c`` in ``s``, or None.

    Searching for NUL finds the terminator at ``len(s)``.
    """
    ch = _char(c)
    s = _c_str(s)
    if ch == _NUL:
        return len(s)
    index = s.find(ch)
    return None if index < 0 else index


def strrchr(s: str, c: CharLike) -> Optional[int]:
    """Index of the last occurrence of ``c`` in ``s``, or None.

    Searching for NUL finds the terminator at ``len(s)``.
    """
    ch = _char(c)
    s = _c_str(s)
    if ch == _NUL:
        return len(s)
    index = s.rfind(ch)
    return None if index < 0 else index


def strncmp(s1: str, s2: str, n: int) -> int:
    """Compare at most ``n`` characters of two strings.

    Returns the difference of the first differing character codes, or 0 when
    the compared prefixes are equal.
    """
    _check_size(n, "n")
    pairs = zip_longest(_c_str(s1)[:n], _c_str(s2)[:n], fillvalue=_NUL)
    for a, b in pairs:
        if a != b:
            return ord(a) - ord(b)
    return 0


def strnstr(haystack: str, needle: str, length: int) -> Optional[int]:
    """Index of the first ``needle`` lying wholly within the first ``length``
    characters of ``haystack``, or None. An empty needle matches at 0.
    """
    _check_size(length, "length")
    haystack = _c_str(haystack)
    needle = _c_str(needle)
    if not needle:
        return 0
    index = haystack[:length].find(needle)
    return None if index < 0 else index


def substr(s: str, start: int, length: int) -> str:
    """At most ``length`` characters of ``s`` from ``start``; empty past the end."""
    _check_size(start, "start")
    _check_size(length, "length")
    s = _c_str(s)
    if start > len(s):
        return ""
    return s[start:start + length]


def strjoin(s1: str, s2: str) -> str:
    """The concatenation of two strings."""
    return _c_str(s1) + _c_str(s2)


def strtrim(s: str, charset: str) -> str:
    """``s`` with every leading and trailing character found in ``charset`` removed."""
    return _c_str(s).strip(_c_str(charset))


def split(s: str, sep: CharLike) -> list:
    """The non-empty pieces of ``s`` between occurrences of ``sep``."""
    ch = _char(sep)
    s = _c_str(s)
    if ch == _NUL:
        return [s] if s else []
    return [piece for piece in s.split(ch) if piece]


def strmapi(s: str, func: Callable[[int, str], str]) -> str:
    """A new string made of ``func(index, char)`` for each character of ``s``."""
    return "".join(func(i, ch) for i, ch in enumerate(_c_str(s)))


def striteri(s: MutableSequence, func: Callable[[int, object], object]) -> None:
    """Call ``func(index, item)`` for each item of ``s`` and edit it in place.

    Where ``func`` returns something other than None, that value replaces the
    item. Iteration stops at a NUL item, as it would at a string's end.
    """
    for i, item in enumerate(s):
        if item in (_NUL, 0):
            break
        replacement = func(i, item)
        if replacement is not None:
            s[i] = replacement