"""Document state, captures and the undo/redo ledger."""

from .capture import BufferCapture
from .document import DocumentView, EditableDocument
from .errors import InvalidInput, InvalidState, ScribeError
from .history import Capturable, HistoryInfo, HistoryLedger
from .validation import (
    ensure_capacity,
    ensure_count,
    ensure_font_size,
    ensure_position,
    ensure_present,
    ensure_text,
)

__all__ = [
    "BufferCapture",
    "Capturable",
    "DocumentView",
    "EditableDocument",
    "HistoryInfo",
    "HistoryLedger",
    "InvalidInput",
    "InvalidState",
    "ScribeError",
    "ensure_capacity",
    "ensure_count",
    "ensure_font_size",
    "ensure_position",
    "ensure_present",
    "ensure_text",
]
