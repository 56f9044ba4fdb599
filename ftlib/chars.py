"""Character classification and case conversion on single characters.

Every function accepts either an integer character code or a one-character
string.
"""

from __future__ import annotations

from typing import Union

CharLike = Union[int, str]

__all__ = [
    "is_alpha",
    "is_digit",
    "is_alnum",
    "is_ascii",
    "is_print",
    "is_white_space",
    "to_upper",
    "to_lower",
]


def _code(c: CharLike) -> int:
    """Return the integer code of ``c``."""
    if isinstance(c, bool):
        raise TypeError("expected an integer code or a one-character string")
    if isinstance(c, int):
        return c
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {len(c)}")
        return ord(c)
    raise TypeError("expected an integer code or a one-character string")


def is_alpha(c: CharLike) -> bool:
    """True for ASCII letters."""
    code = _code(c)
    return ord("a") <= code <= ord("z") or ord("A") <= code <= ord("Z")


def is_digit(c: CharLike) -> bool:
    """True for the ASCII digits 0 to 9."""
    return ord("0") <= _code(c) <= ord("9")


def is_alnum(c: CharLike) -> bool:
    """True for ASCII letters and digits."""
    return is_alpha(c) or is_digit(c)


def is_ascii(c: CharLike) -> bool:
    """True for codes 0 to 127."""
    return 0 <= _code(c) <= 127


def is_print(c: CharLike) -> bool:
    """True for printable ASCII, space through tilde."""
    return 32 <= _code(c) <= 126


def is_white_space(c: CharLike) -> bool:
    """True for a space.

    The range test for the control characters runs from carriage return
    down to tab, which is empty, so only the space character matches.
    """
    code = _code(c)
    return code == ord(" ") or ord("\r") <= code <= ord("\t")


def _convert(c: CharLike, code: int) -> CharLike:
    return chr(code) if isinstance(c, str) else code


def to_upper(c: CharLike) -> CharLike:
    """Upper-case an ASCII letter; other characters come back unchanged."""
    code = _code(c)
    if ord("a") <= code <= ord("z"):
        code -= 32
    return _convert(c, code)


def to_lower(c: CharLike) -> CharLike:
    """Lower-case an ASCII letter; other characters come back unchanged."""
    code = _code(c)
    if ord("A") <= code <= ord("Z"):
        code += 32
    return _convert(c, code)