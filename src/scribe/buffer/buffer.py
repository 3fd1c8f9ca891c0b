"""High-level buffer façade pairing a shared document with a primary cursor."""

from __future__ import annotations

from typing import List, Optional

from scribe.runtime import telemetry

from .cursor import Cursor
from .position import Position
from .shared import SharedDocument


class Buffer:
    def __init__(
        self,
        *,
        name: str = "default",
        document: Optional[SharedDocument] = None,
    ) -> None:
        self.name = name
        self.document = document or SharedDocument(name=name)
        self.cursor = Cursor(self.document, 0, 0)
        self._cursors: List[Cursor] = [self.cursor]

    @classmethod
    def from_text(cls, text: str, *, name: str = "default") -> "Buffer":
        return cls(name=name, document=SharedDocument.from_text(text, name=name))

    @property
    def cursors(self) -> tuple[Cursor, ...]:
        return tuple(self._cursors)

    def add_cursor(self, line: int = 0, offset: int = 0) -> Cursor:
        cursor = Cursor(self.document, line, offset)
        self._cursors.append(cursor)
        return cursor

    def to_string(self) -> str:
        return self.document.to_string()

    def insert(self, text: str) -> None:
        """Insert ``text`` at the primary cursor; the cursor stays where it was."""

        self.document.insert(self.cursor.position, text)

    def delete(self) -> bool:
        """Remove the character at the primary cursor, joining lines at EOL.

        Returns ``False`` without touching the document when the cursor sits at
        the end of the content or no longer addresses a valid slot.
        """

        start = self.cursor.position
        end = self._next_slot(start) if self.document.in_bounds(start) else None
        if end is None:
            telemetry.record_event(
                "buffer.delete_skipped",
                level="debug",
                data={"buffer": self.name, "line": start.line, "offset": start.offset},
            )
            return False
        self.document.delete(start, end)
        return True

    def _next_slot(self, position: Position) -> Optional[Position]:
        following = Position(line=position.line, offset=position.offset + 1)
        if self.document.in_bounds(following):
            return following
        wrapped = Position(line=position.line + 1, offset=0)
        if self.document.in_bounds(wrapped):
            return wrapped
        return None


__all__ = ["Buffer"]
