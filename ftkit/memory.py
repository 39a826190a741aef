"""Byte-buffer operations: fill, copy, move, search and compare."""

import sys
from typing import Optional, Union

BytesLike = Union[bytes, bytearray, memoryview]

_SIZE_MAX = sys.maxsize * 2 + 1


def _check_length(buf: BytesLike, n: int, name: str) -> None:
    if n < 0:
        raise ValueError(f"length must not be negative, got {n}")
    if n > len(buf):
        raise IndexError(f"{name} holds {len(buf)} bytes, {n} requested")


def _check_span(buf: BytesLike, start: int, n: int, name: str) -> None:
    if start < 0 or start + n > len(buf):
        raise IndexError(f"{name} span [{start}, {start + n}) lies outside the buffer")


def memset(buf: bytearray, value: int, length: int) -> bytearray:
    """Fill the first ``length`` bytes of ``buf`` with ``value`` (taken modulo 256)."""
    _check_length(buf, length, "buffer")
    buf[:length] = bytes([value & 0xFF]) * length
    return buf


def bzero(buf: bytearray, length: int) -> None:
    """Zero the first ``length`` bytes of ``buf``."""
    memset(buf, 0, length)


def memcpy(dst: Optional[bytearray], src: Optional[BytesLike], n: int) -> Optional[bytearray]:
    """Copy ``n`` bytes from the start of ``src`` to the start of ``dst``.

    Returns ``dst``; when both buffers are None, returns None.
    """
    if dst is None and src is None:
        return None
    if dst is None or src is None:
        raise TypeError("memcpy needs both a source and a destination buffer")
    _check_length(dst, n, "destination")
    _check_length(src, n, "source")
    dst[:n] = bytes(src[:n])
    return dst


def memmove(buf: bytearray, dst: int, src: int, n: int) -> bytearray:
    """Move ``n`` bytes inside ``buf`` from offset ``src`` to offset ``dst``.

    Overlapping regions are handled correctly.
    """
    if n < 0:
        raise ValueError(f"length must not be negative, got {n}")
    _check_span(buf, src, n, "source")
    _check_span(buf, dst, n, "destination")
    buf[dst:dst + n] = bytes(buf[src:src + n])
    return buf


def memchr(data: BytesLike, value: int, n: int) -> Optional[int]:
    """Index of the first byte equal to ``value`` (modulo 256) in the first ``n`` bytes, or None."""
    _check_length(data, n, "data")
    index = bytes(data[:n]).find(value & 0xFF)
    return None if index < 0 else index


def memcmp(a: BytesLike, b: BytesLike, n: int) -> int:
    """Compare the first ``n`` bytes of ``a`` and ``b``.

    Returns the difference of the first differing bytes, read as unsigned,
    or 0 when the spans are equal.
    """
    _check_length(a, n, "first buffer")
    _check_length(b, n, "second buffer")
    for x, y in zip(bytes(a[:n]), bytes(b[:n])):
        if x != y:
            return x - y
    return 0


def calloc(count: int, size: int) -> bytearray:
    """Return a zero-filled buffer of ``count * size`` bytes.

    Raises MemoryError when the total size would overflow the address space.
    """
    if count < 0 or size < 0:
        raise ValueError("count and size must not be negative")
    if count and _SIZE_MAX // count < size:
        raise MemoryError(f"cannot allocate {count} elements of {size} bytes")
    return bytearray(count * size)