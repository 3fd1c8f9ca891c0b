"""Core document data structures for scribe buffers."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Optional, Sequence, Tuple

from .position import Position
from .validation import ensure_position


def _split_lines(text: str) -> List[str]:
    # Only "\n" separates lines so that to_string() reproduces the input.
    return text.split("\n")


@dataclass(slots=True)
class BufferDocument:
    """Immutable-ish text storage built on a simple list-of-lines model.

    Every edit returns a fresh document with a bumped version; the receiver is
    left untouched. Sharing a document between collaborators goes through
    :class:`~scribe.buffer.shared.SharedDocument`, which swaps snapshots.
    """

    _lines: List[str] = field(default_factory=lambda: [""])
    version: int = 0
    dirty: bool = False

    @classmethod
    def from_text(cls, text: str) -> "BufferDocument":
        return cls(_lines=_split_lines(text), version=0, dirty=False)

    def snapshot(self) -> Sequence[str]:
        """Return the current lines without exposing internal mutability."""

        return tuple(self._lines)

    @property
    def line_count(self) -> int:
        return len(self._lines)

    def get_line(self, index: int) -> str:
        return self._lines[index]

    def to_string(self) -> str:
        return "\n".join(self._lines)

    def in_bounds(self, position: Position) -> bool:
        """Check ``position`` against the current lines.

        The slot just past a line's final character is addressable, which is
        where a newline (or the end of the content) sits.
        """

        if position.line < 0 or position.line >= len(self._lines):
            return False
        return 0 <= position.offset <= len(self._lines[position.line])

    def line_length(self, line: int) -> Optional[int]:
        if line < 0 or line >= len(self._lines):
            return None
        return len(self._lines[line])

    def insert(
        self, position: Position, text: str
    ) -> Tuple["BufferDocument", Position]:
        """Return a document with ``text`` inserted and the position after it."""

        ensure_position(self, position)
        current = self._lines[position.line]
        head = current[: position.offset] + text
        tail = current[position.offset :]

        head_lines = _split_lines(head)
        end = Position(
            line=position.line + len(head_lines) - 1,
            offset=len(head_lines[-1]),
        )

        lines = list(self._lines)
        lines[position.line : position.line + 1] = _split_lines(head + tail)
        updated = BufferDocument(_lines=lines, version=self.version + 1, dirty=True)
        return updated, end

    def delete(self, start: Position, end: Position) -> "BufferDocument":
        """Return a document with the range between ``start`` and ``end`` removed."""

        ensure_position(self, start)
        ensure_position(self, end)
        if end < start:
            start, end = end, start

        joined = (
            self._lines[start.line][: start.offset]
            + self._lines[end.line][end.offset :]
        )
        lines = list(self._lines)
        lines[start.line : end.line + 1] = [joined]
        return BufferDocument(_lines=lines, version=self.version + 1, dirty=True)

    def replace(self, text: str) -> "BufferDocument":
        """Return a document holding ``text`` with a bumped version."""

        return BufferDocument(
            _lines=_split_lines(text), version=self.version + 1, dirty=True
        )
