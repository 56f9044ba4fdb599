"""Character, byte-buffer, string, linked-list, line-reading and printf-style formatting helpers."""

__version__ = "0.1.0"
__all__ = ["chars", "memory", "output", "strings", "linkedlist", "nextline", "printf"]