"""Immutable captures of editable document state."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone

from .errors import InvalidInput
from .validation import ensure_font_size, ensure_position, is_int


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


@dataclass(frozen=True, slots=True)
class BufferCapture:
    """Full copy of a document's text, cursor and font size at one instant.

    Captures hold no reference back to the document that produced them, so
    they can be built, stored and discarded independently. ``created_at`` is
    informational; history ordering relies on insertion order alone.
    """

    text: str
    cursor: int
    font_size: int
    created_at: datetime = field(default_factory=_utcnow, compare=False)

    def __post_init__(self) -> None:
        if not isinstance(self.text, str):
            raise InvalidInput("Content must be a string", field="text")
        ensure_position(self.cursor)
        if self.cursor > len(self.text):
            raise InvalidInput("Cursor beyond end of content", field="position")
        ensure_font_size(self.font_size)

    def is_valid(self) -> bool:
        return (
            isinstance(self.text, str)
            and is_int(self.cursor)
            and 0 <= self.cursor <= len(self.text)
            and is_int(self.font_size)
            and self.font_size > 0
            and isinstance(self.created_at, datetime)
        )


__all__ = ["BufferCapture"]
