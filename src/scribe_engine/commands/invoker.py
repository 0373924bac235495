"""Runs commands and keeps a log of the ones that completed."""

from __future__ import annotations

from typing import List

from scribe_engine.buffer import ensure_present
from scribe_engine.runtime import telemetry

from .base import LOGGER_NAME, EditCommand


class CommandInvoker:
    """Executes commands in order and records each successful run.

    The log is bookkeeping only; restoring earlier states is the history
    ledger's job.
    """

    def __init__(self) -> None:
        self._executed: List[EditCommand] = []

    @property
    def executed(self) -> tuple[EditCommand, ...]:
        return tuple(self._executed)

    @property
    def executed_count(self) -> int:
        return len(self._executed)

    def execute_command(self, command: EditCommand) -> None:
        ensure_present(command, "command")
        command.execute()
        self._executed.append(command)
        telemetry.record_event(
            "commands.executed",
            level="info",
            data={"description": command.description, "total": len(self._executed)},
            logger_name=LOGGER_NAME,
        )

    def clear_command_history(self) -> None:
        self._executed.clear()


__all__ = ["CommandInvoker"]
