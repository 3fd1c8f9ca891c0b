"""Validation helpers shared across buffer services."""

from __future__ import annotations

from typing import TYPE_CHECKING

from .position import Position
from .store import BufferValidationError

if TYPE_CHECKING:
    from .document import BufferDocument


def ensure_position(document: "BufferDocument", position: Position) -> Position:
    if position.line < 0 or position.line >= document.line_count:
        raise BufferValidationError("Line out of range", position=position)
    line = document.get_line(position.line)
    if position.offset < 0 or position.offset > len(line):
        raise BufferValidationError("Offset out of range", position=position)
    return position
