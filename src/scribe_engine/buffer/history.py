"""Bounded linear undo/redo history built from document captures."""

from __future__ import annotations

from dataclasses import dataclass
from typing import List, Optional, Protocol

from scribe_engine.runtime import telemetry
from scribe_engine.runtime.settings import load_settings

from .capture import BufferCapture
from .errors import InvalidInput, InvalidState
from .validation import ensure_capacity, ensure_present

LOGGER_NAME = "scribe_engine.history"


class Capturable(Protocol):
    """What the ledger needs from a document: capture and restore."""

    def snapshot(self) -> BufferCapture:
        ...

    def restore_from(self, capture: BufferCapture) -> None:
        ...


@dataclass(frozen=True, slots=True)
class HistoryInfo:
    """Diagnostic snapshot of ledger bookkeeping."""

    size: int
    current_index: int
    capacity: int
    can_undo: bool
    can_redo: bool

    def __str__(self) -> str:
        return f"History: {self.size} snapshots, current index: {self.current_index}"


class HistoryLedger:
    """Ordered captures plus a cursor into them.

    ``save_state`` is the only way captures enter the ledger. Saving after an
    undo discards every capture past ``current_index``. Undoing while the
    document has drifted from the capture at ``current_index`` saves it
    first, so the undo lands on the last save point and redo can return to
    the drifted state. That extra save is skipped when the undo would not
    go ahead anyway. Once the ledger holds more than ``capacity`` captures
    the oldest one is dropped and ``current_index`` stays where it was, so it
    silently ends up addressing the next newer save.
    """

    def __init__(self, *, capacity: Optional[int] = None) -> None:
        if capacity is None:
            capacity = load_settings().history_capacity
        self._capacity = ensure_capacity(capacity)
        self._captures: List[BufferCapture] = []
        self._index: int = -1

    @property
    def capacity(self) -> int:
        return self._capacity

    @property
    def current_index(self) -> int:
        return self._index

    @property
    def captures(self) -> tuple[BufferCapture, ...]:
        return tuple(self._captures)

    @property
    def current(self) -> Optional[BufferCapture]:
        if self._index < 0:
            return None
        return self._captures[self._index]

    def __len__(self) -> int:
        return len(self._captures)

    def save_state(self, document: Capturable) -> None:
        ensure_present(document, "document")
        try:
            capture = document.snapshot()
        except InvalidInput as exc:
            raise InvalidState("Invalid snapshot created") from exc
        if not isinstance(capture, BufferCapture) or not capture.is_valid():
            raise InvalidState("Invalid snapshot created")

        del self._captures[self._index + 1 :]
        self._captures.append(capture)
        if len(self._captures) > self._capacity:
            self._captures.pop(0)
        else:
            self._index += 1

        telemetry.record_event(
            "history.saved",
            level="debug",
            data={"size": len(self._captures), "index": self._index},
            logger_name=LOGGER_NAME,
        )

    def undo(self, document: Capturable) -> bool:
        ensure_present(document, "document")
        if not self.can_undo(document):
            telemetry.record_event(
                "history.undo_skipped", level="debug", logger_name=LOGGER_NAME
            )
            return False
        if self._has_unsaved_edits(document):
            self.save_state(document)
        self._index -= 1
        self._restore(document)
        return True

    def redo(self, document: Capturable) -> bool:
        ensure_present(document, "document")
        if not self.can_redo():
            telemetry.record_event(
                "history.redo_skipped", level="debug", logger_name=LOGGER_NAME
            )
            return False
        self._index += 1
        self._restore(document)
        return True

    def can_undo(self, document: Optional[Capturable] = None) -> bool:
        """Whether ``undo`` would move back, given ``document`` when supplied.

        Without a document only the stored captures are considered. With one,
        unsaved edits at index 0 count too, unless saving them would evict the
        capture the undo has to land on.
        """

        if self._index > 0:
            return True
        return (
            document is not None
            and self._capacity > 1
            and self._has_unsaved_edits(document)
        )

    def can_redo(self) -> bool:
        return self._index < len(self._captures) - 1

    def info(self) -> HistoryInfo:
        return HistoryInfo(
            size=len(self._captures),
            current_index=self._index,
            capacity=self._capacity,
            can_undo=self.can_undo(),
            can_redo=self.can_redo(),
        )

    def clear(self) -> None:
        self._captures.clear()
        self._index = -1
        telemetry.record_event("history.cleared", level="debug", logger_name=LOGGER_NAME)

    def set_capacity(self, capacity: int) -> None:
        self._capacity = ensure_capacity(capacity)
        excess = len(self._captures) - self._capacity
        if excess > 0:
            del self._captures[:excess]
            self._index = max(0, self._index - excess)

    def _has_unsaved_edits(self, document: Capturable) -> bool:
        return self._index >= 0 and document.snapshot() != self._captures[self._index]

    def _restore(self, document: Capturable) -> None:
        capture = self._captures[self._index]
        if not capture.is_valid():
            raise InvalidState("Invalid snapshot in history")
        document.restore_from(capture)
        telemetry.record_event(
            "history.restored",
            level="debug",
            data={"index": self._index, "size": len(self._captures)},
            logger_name=LOGGER_NAME,
        )


__all__ = ["Capturable", "HistoryInfo", "HistoryLedger"]
