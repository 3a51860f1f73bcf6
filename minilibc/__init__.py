"""C-library style helpers for characters, memory, strings, conversion and output."""

__version__ = "0.1.0"
__all__ = ["chars", "memory", "strings", "convert", "output"]