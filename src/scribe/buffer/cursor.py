"""Bounds-checked cursor with sticky horizontal offset."""

from __future__ import annotations

from .position import Position
from .store import TextStore


class Cursor:
    """Read-only view of a :class:`Position` that only moves through bounds checks.

    The cursor never owns or caches the text it points into: every movement
    asks ``store`` about its current shape. Rejected moves leave the cursor
    untouched and raise nothing.

    ``sticky_offset`` is the column the user is aiming for. Vertical moves try
    to honour it and fall back to the end of shorter lines without forgetting it.
    """

    __slots__ = ("_store", "_position", "_sticky_offset")

    def __init__(self, store: TextStore, line: int = 0, offset: int = 0) -> None:
        self._store = store
        self._position = Position(line=line, offset=offset)
        self._sticky_offset = offset

    def __repr__(self) -> str:
        return (
            f"Cursor(line={self.line}, offset={self.offset}, "
            f"sticky_offset={self._sticky_offset})"
        )

    def __copy__(self) -> "Cursor":
        return self.copy()

    def copy(self) -> "Cursor":
        """Return an independent cursor sharing the same store."""

        clone = Cursor(self._store, self.line, self.offset)
        clone._sticky_offset = self._sticky_offset
        return clone

    @property
    def store(self) -> TextStore:
        return self._store

    @property
    def position(self) -> Position:
        return self._position

    @property
    def line(self) -> int:
        return self._position.line

    @property
    def offset(self) -> int:
        return self._position.offset

    @property
    def sticky_offset(self) -> int:
        return self._sticky_offset

    def move_to(self, position: Position) -> bool:
        """Move to ``position`` if the store accepts it.

        Returns ``True`` and adopts the position (and its offset as the sticky
        offset) when in bounds; otherwise returns ``False`` and changes nothing.
        """

        if not self._store.in_bounds(position):
            return False
        self._position = position
        self._sticky_offset = position.offset
        return True

    def move_up(self) -> None:
        if self.line == 0:
            return
        self._move_vertically(self.line - 1)

    def move_down(self) -> None:
        self._move_vertically(self.line + 1)

    def move_left(self) -> None:
        if self.offset == 0:
            return
        self.move_to(Position(line=self.line, offset=self.offset - 1))

    def move_right(self) -> None:
        self.move_to(Position(line=self.line, offset=self.offset + 1))

    def move_to_start_of_line(self) -> None:
        self.move_to(Position(line=self.line, offset=0))

    def move_to_end_of_line(self) -> None:
        length = self._store.line_length(self.line)
        if length is None:
            return
        self.move_to(Position(line=self.line, offset=length))

    def _move_vertically(self, target_line: int) -> None:
        desired = self._sticky_offset
        if self.move_to(Position(line=target_line, offset=desired)):
            return

        # The target line is shorter than the sticky offset; land on its end.
        length = self._store.line_length(target_line)
        if length is None:
            return
        if self.move_to(Position(line=target_line, offset=length)):
            # Keep aiming for the original column on the next vertical move.
            self._sticky_offset = desired


__all__ = ["Cursor"]
