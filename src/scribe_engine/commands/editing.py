"""Concrete editing commands."""

from __future__ import annotations

from scribe_engine.buffer import (
    EditableDocument,
    HistoryLedger,
    ensure_count,
    ensure_font_size,
    ensure_position,
    ensure_text,
)

from .base import EditCommand


class WriteCommand(EditCommand):
    """Inserts text at the cursor."""

    name = "write"

    def __init__(
        self, document: EditableDocument, history: HistoryLedger, text: str
    ) -> None:
        super().__init__(document, history, description=f'Write "{text}"')
        self.text = ensure_text(text)

    def _apply(self) -> None:
        self.document.write(self.text)


class DeleteCommand(EditCommand):
    """Deletes ``count`` characters before the cursor."""

    name = "delete"

    def __init__(
        self, document: EditableDocument, history: HistoryLedger, count: int = 1
    ) -> None:
        super().__init__(
            document, history, description=f"Delete {count} character(s)"
        )
        self.count = ensure_count(count)

    def _apply(self) -> None:
        self.document.delete(self.count)


class FormatCommand(EditCommand):
    """Changes the document font size."""

    name = "format"

    def __init__(
        self, document: EditableDocument, history: HistoryLedger, font_size: int
    ) -> None:
        super().__init__(
            document, history, description=f"Change font size to {font_size}"
        )
        self.font_size = ensure_font_size(font_size)

    def _apply(self) -> None:
        self.document.set_font_size(self.font_size)


class MoveCursorCommand(EditCommand):
    """Moves the cursor to an absolute position, clamped to the text."""

    name = "move_cursor"

    def __init__(
        self, document: EditableDocument, history: HistoryLedger, position: int
    ) -> None:
        super().__init__(
            document, history, description=f"Move cursor to {position}"
        )
        self.position = ensure_position(position)

    def _apply(self) -> None:
        self.document.set_cursor(self.position)


class ClearCommand(EditCommand):
    """Empties the document and restores the default font size."""

    name = "clear"

    def __init__(self, document: EditableDocument, history: HistoryLedger) -> None:
        super().__init__(document, history, description="Clear content")

    def _apply(self) -> None:
        self.document.reset()


__all__ = [
    "ClearCommand",
    "DeleteCommand",
    "FormatCommand",
    "MoveCursorCommand",
    "WriteCommand",
]
