"""A small formatted-output facility with the conversions c s p d i u x X %."""

from __future__ import annotations

from typing import Any, List, Optional, TextIO, Tuple

from ftlib.output import put_str_fd

__all__ = [
    "is_valid_base",
    "put_nbr_base",
    "format_pointer",
    "format_string",
    "printf",
]

_LOWER_HEX = "0123456789abcdef"
_UPPER_HEX = "0123456789ABCDEF"
_DECIMAL = "0123456789"
_UINT32 = 0xFFFFFFFF
_BASE_WHITESPACE = frozenset(chr(code) for code in range(8, 14)) | {" "}


def is_valid_base(base: str) -> bool:
    """Check that ``base`` has no repeated digits and no blank digits.

    The final digit is not checked for being blank.
    """
    if len(set(base)) != len(base):
        return False
    return not any(ch in _BASE_WHITESPACE for ch in base[:-1])


def put_nbr_base(number: int, base: str) -> str:
    """Return ``number`` written with the digits of ``base``.

    Raises ValueError for a base with fewer than two digits, an invalid
    base, or a negative number.
    """
    if not is_valid_base(base) or len(base) <= 1:
        raise ValueError(f"invalid base: {base!r}")
    if number < 0:
        raise ValueError(f"number must not be negative: {number}")
    radix = len(base)
    digits: List[str] = []
    while True:
        number, remainder = divmod(number, radix)
        digits.append(base[remainder])
        if number == 0:
            break
    return "".join(reversed(digits))


def format_pointer(address: Optional[int]) -> str:
    """Render an address as ``0x`` and lower-case hex; null gives ``(nil)``."""
    if not address:
        return "(nil)"
    return "0x" + put_nbr_base(address, _LOWER_HEX)


def _int32(value: int) -> int:
    value &= _UINT32
    return value - (1 << 32) if value >= 1 << 31 else value


def _char(value: Any) -> str:
    if isinstance(value, str):
        if len(value) != 1:
            raise ValueError(f"%c expects a single character, got {len(value)}")
        return value
    return chr(int(value) & 0xFF)


def _convert(spec: str, value: Any) -> str:
    if spec == "c":
        return _char(value)
    if spec == "s":
        return "(null)" if value is None else str(value)
    if spec == "p":
        return format_pointer(value)
    if spec in "di":
        return str(_int32(int(value)))
    if spec == "u":
        return str(int(value) & _UINT32)
    if spec == "x":
        return put_nbr_base(int(value) & _UINT32, _LOWER_HEX)
    return put_nbr_base(int(value) & _UINT32, _UPPER_HEX)


def _render(fmt: str, args: Tuple[Any, ...]) -> Tuple[str, int]:
    """Return the formatted text and the character count reported for it.

    A ``%`` not followed by a known conversion is written as it stands and
    the character after it is handled normally; that ``%`` is not counted.
    """
    pieces: List[str] = []
    count = 0
    remaining = iter(args)
    chars = iter(enumerate(fmt))
    for index, ch in chars:
        if ch != "%":
            pieces.append(ch)
            count += 1
            continue
        spec = fmt[index + 1] if index + 1 < len(fmt) else ""
        if spec == "%":
            next(chars)
            pieces.append("%")
            count += 1
        elif spec and spec in "cspdiuxX":
            next(chars)
            try:
                value = next(remaining)
            except StopIteration:
                raise TypeError(f"not enough arguments for %{spec}") from None
            text = _convert(spec, value)
            pieces.append(text)
            count += len(text)
        else:
            pieces.append("%")
    return "".join(pieces), count


def format_string(fmt: str, *args: Any) -> str:
    """Return ``fmt`` with its conversions replaced by ``args`` in order."""
    return _render(fmt, args)[0]


def printf(fmt: str, *args: Any, stream: Optional[TextIO] = None) -> int:
    """Write the formatted text to ``stream`` (standard output by default).

    Returns the number of characters counted, which leaves out any ``%``
    that did not start a known conversion.
    """
    text, count = _render(fmt, args)
    put_str_fd(text, stream)
    return count