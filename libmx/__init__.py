"""Utilities for strings, byte buffers, linked lists and line reading."""

__version__ = "0.1.0"
__all__ = ["utils", "text", "memory", "linked_list", "lines"]