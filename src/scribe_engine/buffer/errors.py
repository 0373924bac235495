"""Error taxonomy shared by documents, history ledgers and commands."""

from __future__ import annotations

from typing import Optional


class ScribeError(RuntimeError):
    """Base class for every error raised by the editing core."""

    def __init__(self, message: str, *, field: Optional[str] = None) -> None:
        super().__init__(message)
        self.field = field


class InvalidInput(ScribeError, ValueError):
    """Raised when a caller passes a malformed argument or a missing object."""


class InvalidState(ScribeError):
    """Raised when a produced or stored capture violates its own invariants."""


__all__ = ["ScribeError", "InvalidInput", "InvalidState"]
