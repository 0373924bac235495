"""Session façade wiring a document, its history and a command invoker."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from scribe_engine.buffer import (
    DocumentView,
    EditableDocument,
    HistoryInfo,
    HistoryLedger,
)
from scribe_engine.commands import (
    ClearCommand,
    CommandInvoker,
    DeleteCommand,
    EditCommand,
    FormatCommand,
    MoveCursorCommand,
    WriteCommand,
)
from scribe_engine.runtime.settings import EngineSettings, load_settings


@dataclass(frozen=True, slots=True)
class SessionReport:
    history: HistoryInfo
    commands_executed: int

    def render(self) -> str:
        return "\n".join(
            (
                str(self.history),
                f"Commands executed: {self.commands_executed}",
                f"Can undo: {self.history.can_undo}",
                f"Can redo: {self.history.can_redo}",
            )
        )


class EditorSession:
    """Entry point for hosts that drive the editor from user input.

    Mutations go through commands, so each one leaves a save point in the
    ledger first. The session never prints; hosts render ``view()`` and
    ``report()`` themselves.
    """

    def __init__(
        self,
        *,
        settings: Optional[EngineSettings] = None,
        document: Optional[EditableDocument] = None,
        history: Optional[HistoryLedger] = None,
        invoker: Optional[CommandInvoker] = None,
    ) -> None:
        settings = settings or load_settings()
        self.document = document or EditableDocument(
            font_size=settings.default_font_size
        )
        self.history = history or HistoryLedger(capacity=settings.history_capacity)
        self.invoker = invoker or CommandInvoker()

    def run(self, command: EditCommand) -> DocumentView:
        self.invoker.execute_command(command)
        return self.view()

    def write(self, text: str) -> DocumentView:
        return self.run(WriteCommand(self.document, self.history, text))

    def delete(self, count: int = 1) -> DocumentView:
        return self.run(DeleteCommand(self.document, self.history, count))

    def move_cursor(self, position: int) -> DocumentView:
        return self.run(MoveCursorCommand(self.document, self.history, position))

    def set_font_size(self, size: int) -> DocumentView:
        return self.run(FormatCommand(self.document, self.history, size))

    def clear(self) -> DocumentView:
        return self.run(ClearCommand(self.document, self.history))

    def undo(self) -> bool:
        return self.history.undo(self.document)

    def redo(self) -> bool:
        return self.history.redo(self.document)

    def view(self) -> DocumentView:
        return self.document.view()

    def report(self) -> SessionReport:
        return SessionReport(
            history=self.history.info(),
            commands_executed=self.invoker.executed_count,
        )


__all__ = ["EditorSession", "SessionReport"]
