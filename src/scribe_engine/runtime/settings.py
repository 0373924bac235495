"""Environment-driven defaults shared by documents and history ledgers."""

from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Mapping, Optional

from .telemetry import ENV_PREFIX

DEFAULT_HISTORY_CAPACITY = 50
DEFAULT_FONT_SIZE = 12


def _positive_int(env: Mapping[str, str], name: str, default: int) -> int:
    raw = env.get(f"{ENV_PREFIX}{name}")
    if raw is None or not raw.strip():
        return default
    try:
        value = int(raw.strip())
    except ValueError as exc:
        raise ValueError(f"{ENV_PREFIX}{name} must be an integer, got {raw!r}") from exc
    if value <= 0:
        raise ValueError(f"{ENV_PREFIX}{name} must be positive, got {value}")
    return value


@dataclass(frozen=True, slots=True)
class EngineSettings:
    """Defaults applied when callers do not pass explicit values."""

    history_capacity: int = DEFAULT_HISTORY_CAPACITY
    default_font_size: int = DEFAULT_FONT_SIZE


def load_settings(env: Optional[Mapping[str, str]] = None) -> EngineSettings:
    """Build ``EngineSettings`` from ``SCRIBE_ENGINE_*`` environment variables.

    ``HISTORY_CAPACITY`` and ``FONT_SIZE`` must be positive integers when set.
    """

    source = os.environ if env is None else env
    return EngineSettings(
        history_capacity=_positive_int(
            source, "HISTORY_CAPACITY", DEFAULT_HISTORY_CAPACITY
        ),
        default_font_size=_positive_int(source, "FONT_SIZE", DEFAULT_FONT_SIZE),
    )


__all__ = [
    "DEFAULT_FONT_SIZE",
    "DEFAULT_HISTORY_CAPACITY",
    "EngineSettings",
    "load_settings",
]
