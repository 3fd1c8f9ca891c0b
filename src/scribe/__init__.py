"""Cursor and position model for line-structured text buffers."""

__all__ = [
    "buffer",
    "runtime",
]

__version__ = "0.1.0"
