"""String helpers: conversion, searching, splitting, trimming and comparing."""

from __future__ import annotations

from typing import Callable, List, MutableSequence, Optional, Tuple, Union

__all__ = [
    "atoi",
    "itoa",
    "count_words",
    "split",
    "strchr",
    "strrchr",
    "strjoin",
    "strlcpy",
    "strlcat",
    "strmapi",
    "striteri",
    "strcmp",
    "strncmp",
    "strnstr",
    "strtrim",
    "substr",
]

INT_MIN = -(2**31)
INT_MAX = 2**31 - 1

_WHITESPACE = " \t\n\v\f\r"
_DIGITS = "0123456789"


def _char(c: Union[int, str]) -> str:
    """Return ``c`` as a one-character string."""
    if isinstance(c, bool):
        raise TypeError("expected an integer code or a one-character string")
    if isinstance(c, int):
        return chr(c & 0xFF)
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {len(c)}")
        return c
    raise TypeError("expected an integer code or a one-character string")


def _wrap_int32(value: int) -> int:
    value &= 0xFFFFFFFF
    return value - 2**32 if value > INT_MAX else value


def atoi(text: str) -> int:
    """Parse a leading decimal integer, as a 32-bit signed value.

    Leading spaces and the characters tab through carriage return are
    skipped, then one optional sign, then digits up to the first non-digit.
    Text without digits gives 0. Values out of range wrap around.
    """
    rest = text.lstrip(_WHITESPACE)
    sign = 1
    if rest[:1] in ("-", "+"):
        if rest[0] == "-":
            sign = -1
        rest = rest[1:]
    digits = []
    for ch in rest:
        if ch not in _DIGITS:
            break
        digits.append(ch)
    value = int("".join(digits)) if digits else 0
    return _wrap_int32(sign * value)


def itoa(n: int) -> str:
    """Return the decimal text of a 32-bit signed integer."""
    if not INT_MIN <= n <= INT_MAX:
        raise OverflowError(f"{n} does not fit in a 32-bit signed integer")
    return str(n)


def _check_sep(sep: str) -> None:
    if len(sep) != 1:
        raise ValueError(f"separator must be a single character, got {len(sep)}")


def split(text: str, sep: str) -> List[str]:
    """Split ``text`` on the character ``sep``, dropping empty pieces."""
    _check_sep(sep)
    return [piece for piece in text.split(sep) if piece]


def count_words(text: str, sep: str) -> int:
    """Count the non-empty pieces of ``text`` between ``sep`` characters."""
    return len(split(text, sep))


def strchr(s: str, c: Union[int, str]) -> Optional[int]:
    """Index of the first ``c`` in ``s``, or None.

    Searching for the NUL character finds the end of the string.
    """
    ch = _char(c)
    if ch == "\0":
        return len(s)
    index = s.find(ch)
    return None if index < 0 else index


def strrchr(s: str, c: Union[int, str]) -> Optional[int]:
    """Index of the last ``c`` in ``s``, or None.

    Searching for the NUL character finds the end of the string.
    """
    ch = _char(c)
    if ch == "\0":
        return len(s)
    index = s.rfind(ch)
    return None if index < 0 else index


def strjoin(s1: str, s2: str) -> str:
    """Return ``s1`` followed by ``s2``."""
    return s1 + s2


def strlcpy(src: str, size: int) -> Tuple[str, int]:
    """Copy ``src`` into a destination of ``size`` slots.

    Returns the copied text, at most ``size - 1`` characters, and the full
    length of ``src``. With a size of 0 nothing is copied.
    """
    if size < 0:
        raise ValueError(f"size must not be negative: {size}")
    if size == 0:
        return "", len(src)
    return src[: size - 1], len(src)


def strlcat(dest: str, src: str, size: int) -> Tuple[str, int]:
    """Append ``src`` to ``dest`` within a destination of ``size`` slots.

    Returns the resulting text and the length the full result would have
    had. When ``dest`` already fills ``size``, ``dest`` is returned unchanged
    together with ``size + len(src)``.
    """
    if size < 0:
        raise ValueError(f"size must not be negative: {size}")
    dest_len = min(len(dest), size)
    if size <= dest_len:
        return dest, size + len(src)
    room = size - 1 - dest_len
    return dest + src[:room], dest_len + len(src)


def strmapi(s: str, f: Callable[[int, str], str]) -> str:
    """Build a new string from ``f(index, char)`` for every character."""
    return "".join(f(index, ch) for index, ch in enumerate(s))


def striteri(
    chars: MutableSequence[str], f: Callable[[int, str], Optional[str]]
) -> None:
    """Call ``f(index, char)`` on every item of ``chars`` in place.

    A value returned by ``f`` replaces the item; None leaves it unchanged.
    """
    for index, ch in enumerate(chars):
        replacement = f(index, ch)
        if replacement is not None:
            chars[index] = replacement


def strcmp(s1: str, s2: str) -> int:
    """Compare two strings: -1, 0 or 1."""
    return (s1 > s2) - (s1 < s2)


def strncmp(s1: str, s2: str, n: int) -> int:
    """Compare at most the first ``n`` characters: -1, 0 or 1."""
    if n < 0:
        raise ValueError(f"count must not be negative: {n}")
    return strcmp(s1[:n], s2[:n])


def strnstr(big: str, little: str, length: int) -> Optional[int]:
    """Index of ``little`` lying wholly within the first ``length`` characters.

    An empty ``little`` is found at index 0. Returns None when absent.
    """
    if length < 0:
        raise ValueError(f"length must not be negative: {length}")
    if not little:
        return 0
    index = big[:length].find(little)
    return None if index < 0 else index


def strtrim(s: str, charset: str) -> str:
    """Strip every character in ``charset`` from both ends of ``s``."""
    return s.strip(charset)


def substr(s: str, start: int, length: int) -> str:
    """Return at most ``length`` characters of ``s`` from ``start``.

    A start at or beyond the end gives an empty string.
    """
    if start < 0 or length < 0:
        raise ValueError("start and length must not be negative")
    if start >= len(s):
        return ""
    return s[start : start + length]