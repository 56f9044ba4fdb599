"""Byte-buffer operations on ``bytearray`` and bytes-like objects."""

from __future__ import annotations

from typing import Optional

__all__ = ["memset", "bzero", "calloc", "memcpy", "memmove", "memchr", "memcmp"]


def _check_length(n: int, *sizes: int) -> None:
    if n < 0:
        raise ValueError(f"byte count must not be negative: {n}")
    for size in sizes:
        if n > size:
            raise IndexError(f"byte count {n} exceeds buffer length {size}")


def memset(buffer: bytearray, value: int, n: int) -> bytearray:
    """Fill the first ``n`` bytes of ``buffer`` with ``value`` and return it."""
    _check_length(n, len(buffer))
    buffer[:n] = bytes([value & 0xFF]) * n
    return buffer


def bzero(buffer: bytearray, n: int) -> None:
    """Set the first ``n`` bytes of ``buffer`` to zero."""
    memset(buffer, 0, n)


def calloc(count: int, size: int) -> bytearray:
    """Return a zero-filled buffer of ``count * size`` bytes."""
    if count < 0 or size < 0:
        raise ValueError("count and size must not be negative")
    return bytearray(count * size)


def memcpy(dest: bytearray, src: bytes, n: int) -> bytearray:
    """Copy ``n`` bytes from ``src`` to the start of ``dest`` and return ``dest``."""
    _check_length(n, len(dest), len(src))
    dest[:n] = bytes(src[:n])
    return dest


def memmove(buffer: bytearray, dest: int, src: int, n: int) -> bytearray:
    """Copy ``n`` bytes inside ``buffer`` from offset ``src`` to offset ``dest``.

    The regions may overlap; the result is as if the source bytes were first
    copied aside.
    """
    if dest < 0 or src < 0:
        raise ValueError("offsets must not be negative")
    _check_length(n, len(buffer) - dest, len(buffer) - src)
    buffer[dest:dest + n] = bytes(buffer[src:src + n])
    return buffer


def memchr(data: bytes, c: int, n: int) -> Optional[int]:
    """Return the index of the first byte equal to ``c`` among the first ``n``.

    ``c`` is compared as an unsigned byte. Returns None when it is absent.
    """
    _check_length(n, len(data))
    index = bytes(data[:n]).find(bytes([c & 0xFF]))
    return None if index < 0 else index


def memcmp(a: bytes, b: bytes, n: int) -> int:
    """Compare the first ``n`` bytes of ``a`` and ``b``.

    Returns the difference of the first unequal pair of bytes, or 0.
    """
    _check_length(n, len(a), len(b))
    for x, y in zip(a[:n], b[:n]):
        if x != y:
            return x - y
    return 0