"""Positions, cursors, and the text store they navigate."""

from .buffer import Buffer
from .cursor import Cursor
from .document import BufferDocument
from .position import Position
from .shared import DocumentEdit, SharedDocument
from .store import BufferBorrowError, BufferValidationError, TextStore
from .validation import ensure_position

__all__ = [
    "Buffer",
    "BufferBorrowError",
    "BufferDocument",
    "BufferValidationError",
    "Cursor",
    "DocumentEdit",
    "Position",
    "SharedDocument",
    "TextStore",
    "ensure_position",
]
