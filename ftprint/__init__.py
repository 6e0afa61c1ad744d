"""Minimal printf-style formatting plus character, memory, string, linked-list and output helpers."""

__version__ = "0.1.0"
__all__ = ["chars", "memory", "strings", "linked", "output", "printf"]