"""Shared handle through which every collaborator reaches one document."""

from __future__ import annotations

from contextlib import contextmanager
from typing import Iterator, Optional

from scribe.runtime import telemetry

from .document import BufferDocument
from .position import Position
from .store import BufferBorrowError


class SharedDocument:
    """Holds the current :class:`BufferDocument` snapshot for many readers.

    Cursors, renderers, and the buffer façade all keep a reference to the same
    handle. Reads always go to the latest committed snapshot; writes go through
    :meth:`edit`, which admits a single mutation at a time.
    """

    def __init__(
        self, document: Optional[BufferDocument] = None, *, name: str = "default"
    ) -> None:
        self.name = name
        self._document = document or BufferDocument()
        self._active_edit: Optional[DocumentEdit] = None

    @classmethod
    def from_text(cls, text: str, *, name: str = "default") -> "SharedDocument":
        return cls(BufferDocument.from_text(text), name=name)

    @property
    def document(self) -> BufferDocument:
        return self._document

    @property
    def version(self) -> int:
        return self._document.version

    @property
    def editing(self) -> bool:
        return self._active_edit is not None

    def in_bounds(self, position: Position) -> bool:
        return self._document.in_bounds(position)

    def line_length(self, line: int) -> Optional[int]:
        return self._document.line_length(line)

    def to_string(self) -> str:
        return self._document.to_string()

    @contextmanager
    def edit(self, label: str) -> Iterator["DocumentEdit"]:
        """Open the single in-flight mutation on this document.

        Build new snapshots from ``session.document`` and hand them to
        ``session.commit``; readers see each commit immediately. Starting a
        second edit before this one closes raises :class:`BufferBorrowError`.
        """

        if self._active_edit is not None:
            raise BufferBorrowError(
                f"Cannot start '{label}' while "
                f"'{self._active_edit.label}' is in flight",
                label=label,
            )
        session = DocumentEdit(self, label)
        self._active_edit = session
        try:
            with telemetry.span(
                f"document::{label}",
                component=True,
                metadata={"document": self.name},
            ):
                yield session
        finally:
            self._active_edit = None

    def _commit(self, document: BufferDocument, label: str) -> None:
        self._document = document
        telemetry.record_event(
            "document.commit",
            level="debug",
            data={"document": self.name, "label": label, "version": document.version},
        )

    def insert(self, position: Position, text: str) -> Position:
        """Insert ``text`` at ``position``; return the position just past it."""

        with self.edit("insert") as session:
            updated, end = session.document.insert(position, text)
            session.commit(updated)
        return end

    def delete(self, start: Position, end: Position) -> None:
        with self.edit("delete") as session:
            session.commit(session.document.delete(start, end))

    def replace_text(self, text: str) -> None:
        with self.edit("replace") as session:
            session.commit(session.document.replace(text))


class DocumentEdit:
    """Write access to a :class:`SharedDocument` for one ``edit`` block."""

    __slots__ = ("_shared", "label")

    def __init__(self, shared: SharedDocument, label: str) -> None:
        self._shared = shared
        self.label = label

    @property
    def document(self) -> BufferDocument:
        return self._shared.document

    def commit(self, document: BufferDocument) -> None:
        if self._shared._active_edit is not self:
            raise BufferBorrowError(
                f"Edit '{self.label}' is no longer in flight", label=self.label
            )
        self._shared._commit(document, self.label)


__all__ = ["DocumentEdit", "SharedDocument"]
