"""Line/offset coordinates into line-structured text."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Tuple


@dataclass(frozen=True, slots=True, order=True)
class Position:
    """A ``(line, offset)`` coordinate.

    Positions are plain values: they are never validated on construction and
    only become meaningful when checked against a text store. Ordering is
    line-major, so any position on an earlier line sorts first regardless of
    its offset.
    """

    line: int
    offset: int

    def as_tuple(self) -> Tuple[int, int]:
        return (self.line, self.offset)

    @classmethod
    def from_tuple(cls, pair: Tuple[int, int]) -> "Position":
        line, offset = pair
        return cls(line=line, offset=offset)


__all__ = ["Position"]
