"""Validation helpers shared across buffer services and commands."""

from __future__ import annotations

from typing import Any

from .errors import InvalidInput


def is_int(value: Any) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


def ensure_text(text: Any) -> str:
    if not isinstance(text, str) or not text:
        raise InvalidInput("Invalid text input", field="text")
    return text


def ensure_count(count: Any) -> int:
    if not is_int(count) or count < 0:
        raise InvalidInput("Invalid delete count", field="count")
    return count


def ensure_position(position: Any) -> int:
    if not is_int(position) or position < 0:
        raise InvalidInput("Invalid cursor position", field="position")
    return position


def ensure_font_size(size: Any) -> int:
    if not is_int(size) or size <= 0:
        raise InvalidInput("Invalid font size", field="font_size")
    return size


def ensure_capacity(capacity: Any) -> int:
    if not is_int(capacity) or capacity <= 0:
        raise InvalidInput("Invalid history size", field="capacity")
    return capacity


def ensure_present(value: Any, name: str) -> Any:
    if value is None:
        raise InvalidInput(f"Invalid {name} instance", field=name)
    return value


__all__ = [
    "ensure_capacity",
    "ensure_count",
    "ensure_font_size",
    "ensure_position",
    "ensure_present",
    "ensure_text",
    "is_int",
]
