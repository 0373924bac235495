"""Record-then-mutate editing commands and their invoker."""

from .base import EditCommand
from .editing import (
    ClearCommand,
    DeleteCommand,
    FormatCommand,
    MoveCursorCommand,
    WriteCommand,
)
from .invoker import CommandInvoker

__all__ = [
    "EditCommand",
    "WriteCommand",
    "DeleteCommand",
    "FormatCommand",
    "MoveCursorCommand",
    "ClearCommand",
    "CommandInvoker",
]
