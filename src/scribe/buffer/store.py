"""Query contract between cursors and the text store they navigate."""

from __future__ import annotations

from typing import Optional, Protocol

from .position import Position


class TextStore(Protocol):
    """Narrow read surface a cursor needs from the text it points into."""

    def in_bounds(self, position: Position) -> bool:
        """Return ``True`` if ``position`` addresses a character or end-of-line slot."""
        ...

    def line_length(self, line: int) -> Optional[int]:
        """Return the character count of ``line``, or ``None`` if it does not exist."""
        ...


class BufferValidationError(RuntimeError):
    """Raised when an edit addresses an out-of-bounds position."""

    def __init__(self, message: str, *, position: Position | None = None) -> None:
        super().__init__(message)
        self.position = position


class BufferBorrowError(RuntimeError):
    """Raised when a document mutation starts while another is in flight."""

    def __init__(self, message: str, *, label: str | None = None) -> None:
        super().__init__(message)
        self.label = label


__all__ = ["TextStore", "BufferValidationError", "BufferBorrowError"]
