"""Base class for record-then-mutate editing commands."""

from __future__ import annotations

from abc import ABC, abstractmethod

from scribe_engine.buffer import EditableDocument, HistoryLedger, ensure_present
from scribe_engine.runtime.telemetry import span

LOGGER_NAME = "scribe_engine.commands"


class EditCommand(ABC):
    """Binds a document, a history ledger and parameters into one action.

    ``execute`` always saves the document into the ledger before applying the
    mutation, so undoing right after a command restores the pre-command state.
    """

    name: str = "edit"

    def __init__(
        self, document: EditableDocument, history: HistoryLedger, description: str
    ) -> None:
        self.document = ensure_present(document, "document")
        self.history = ensure_present(history, "history")
        self._description = description

    @property
    def description(self) -> str:
        return self._description

    def execute(self) -> None:
        with span(
            f"commands::{self.name}",
            logger_name=LOGGER_NAME,
            component="commands",
            metadata={"description": self._description},
        ) as handle:
            self.history.save_state(self.document)
            handle.add_metadata("history_size", len(self.history))
            self._apply()

    @abstractmethod
    def _apply(self) -> None:
        """Perform the mutation once the save point exists."""

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._description!r})"


__all__ = ["EditCommand"]
