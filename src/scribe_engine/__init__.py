"""In-memory text editing core with capture-based undo/redo."""

from .buffer import (
    BufferCapture,
    DocumentView,
    EditableDocument,
    HistoryInfo,
    HistoryLedger,
    InvalidInput,
    InvalidState,
    ScribeError,
)
from .commands import (
    ClearCommand,
    CommandInvoker,
    DeleteCommand,
    EditCommand,
    FormatCommand,
    MoveCursorCommand,
    WriteCommand,
)
from .session import EditorSession, SessionReport

__all__ = [
    "BufferCapture",
    "DocumentView",
    "EditableDocument",
    "HistoryInfo",
    "HistoryLedger",
    "InvalidInput",
    "InvalidState",
    "ScribeError",
    "EditCommand",
    "WriteCommand",
    "DeleteCommand",
    "FormatCommand",
    "MoveCursorCommand",
    "ClearCommand",
    "CommandInvoker",
    "EditorSession",
    "SessionReport",
]

__version__ = "0.1.0"
