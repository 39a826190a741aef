"""Helpers for ASCII characters, byte buffers, numbers, strings, linked lists, output and printf-style formatting."""

__version__ = "0.1.0"
__all__ = ["chars", "memory", "numbers", "strings", "lists", "output", "printf"]