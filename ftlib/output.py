"""Writing characters, strings and numbers to a text stream."""

from __future__ import annotations

import sys
from typing import Optional, TextIO

__all__ = ["put_char_fd", "put_str_fd", "put_endl_fd", "put_nbr_fd"]


def _target(stream: Optional[TextIO]) -> TextIO:
    return sys.stdout if stream is None else stream


def put_char_fd(c: str, stream: Optional[TextIO] = None) -> None:
    """Write the single character ``c``."""
    if len(c) != 1:
        raise ValueError(f"expected a single character, got {len(c)}")
    _target(stream).write(c)


def put_str_fd(s: str, stream: Optional[TextIO] = None) -> None:
    """Write the string ``s``."""
    _target(stream).write(s)


def put_endl_fd(s: str, stream: Optional[TextIO] = None) -> None:
    """Write the string ``s`` followed by a newline."""
    _target(stream).write(s + "\n")


def put_nbr_fd(n: int, stream: Optional[TextIO] = None) -> None:
    """Write the integer ``n`` in decimal."""
    _target(stream).write(str(n))