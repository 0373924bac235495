"""Live, mutable document state and its capture/restore contract."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from scribe_engine.runtime import telemetry
from scribe_engine.runtime.settings import load_settings

from .capture import BufferCapture
from .errors import InvalidInput
from .validation import (
    ensure_count,
    ensure_font_size,
    ensure_position,
    ensure_text,
)

LOGGER_NAME = "scribe_engine.buffer"


@dataclass(frozen=True, slots=True)
class DocumentView:
    """Read-only view handed to hosts that render the document."""

    text: str
    cursor: int
    font_size: int

    def render(self) -> str:
        return "\n".join(
            (
                f'Content: "{self.text}"',
                f"Cursor at position: {self.cursor}",
                f"Font size: {self.font_size}",
                "---",
            )
        )


class EditableDocument:
    """Owns text, cursor offset and font size for one editing session.

    Every mutator validates its argument before touching state, so a rejected
    call never leaves the document half-updated.
    """

    def __init__(self, *, font_size: Optional[int] = None) -> None:
        if font_size is None:
            font_size = load_settings().default_font_size
        self._default_font_size = ensure_font_size(font_size)
        self._text = ""
        self._cursor = 0
        self._font_size = self._default_font_size

    @property
    def text(self) -> str:
        return self._text

    @property
    def cursor(self) -> int:
        return self._cursor

    @property
    def font_size(self) -> int:
        return self._font_size

    def write(self, text: str) -> None:
        text = ensure_text(text)
        self._text = self._text[: self._cursor] + text + self._text[self._cursor :]
        self._cursor += len(text)

    def delete(self, count: int = 1) -> None:
        count = ensure_count(count)
        if self._cursor < count:
            telemetry.record_event(
                "document.delete_skipped",
                level="warning",
                data={"count": count, "cursor": self._cursor},
                logger_name=LOGGER_NAME,
            )
            return
        start = self._cursor - count
        self._text = self._text[:start] + self._text[self._cursor :]
        self._cursor = start

    def set_cursor(self, position: int) -> None:
        position = ensure_position(position)
        self._cursor = max(0, min(position, len(self._text)))

    def set_font_size(self, size: int) -> None:
        self._font_size = ensure_font_size(size)

    def reset(self) -> None:
        """Return to an empty document at the default font size."""

        self._text = ""
        self._cursor = 0
        self._font_size = self._default_font_size

    def snapshot(self) -> BufferCapture:
        return BufferCapture(
            text=self._text, cursor=self._cursor, font_size=self._font_size
        )

    def restore_from(self, capture: BufferCapture) -> None:
        if not isinstance(capture, BufferCapture):
            raise InvalidInput("Invalid snapshot", field="capture")
        self._text, self._cursor, self._font_size = (
            capture.text,
            capture.cursor,
            capture.font_size,
        )

    def view(self) -> DocumentView:
        return DocumentView(
            text=self._text, cursor=self._cursor, font_size=self._font_size
        )

    def __repr__(self) -> str:
        return (
            f"EditableDocument(text={self._text!r}, cursor={self._cursor}, "
            f"font_size={self._font_size})"
        )


__all__ = ["DocumentView", "EditableDocument"]
