"""Telemetry services for scribe_engine, built on ``logging`` and rich.

The rest of the engine only touches four names:

``configure(...)`` -- swap in an explicit config or a named preset
``get_logger(name)`` -- fetch a logger under the engine namespace
``record_event(name, ...)`` -- emit a structured event at a chosen level
``span(name, ...)`` -- time a block and optionally tag it with a component
"""

from __future__ import annotations

import json
import logging
import logging.handlers
import os
import time
from contextlib import contextmanager
from dataclasses import dataclass, field
from typing import Any, Dict, Iterator, Optional

from rich.console import Console
from rich.logging import RichHandler

ENV_PREFIX = "SCRIBE_ENGINE_"
DEFAULT_LOGGER_NAME = os.getenv(f"{ENV_PREFIX}LOGGER", "scribe_engine")

PRESETS = ("development", "production", "performance")

_MANAGED_ATTR = "_scribe_engine_managed"
DEFAULT_BUFFER_SIZE = 2048


def _env(name: str, default: Optional[str] = None) -> Optional[str]:
    return os.getenv(f"{ENV_PREFIX}{name}", default)


def _env_flag(name: str, default: bool) -> bool:
    raw = _env(name)
    if raw is None:
        return default
    return raw.strip().lower() in {"1", "true", "yes", "on"}


def _stringify(value: Any) -> str:
    if isinstance(value, str):
        return value
    return repr(value) if isinstance(value, (dict, list, tuple, set)) else str(value)


def _format_pairs(data: Dict[str, Any]) -> str:
    return " ".join(f"{key}={_stringify(value)}" for key, value in data.items())


@dataclass(frozen=True)
class TelemetryConfig:
    """Handler and level settings applied to the engine's root logger."""

    level: str = "INFO"
    console: bool = True
    colored: bool = True
    json_format: bool = False
    log_file: str = ""
    buffered: bool = False
    buffer_size: int = DEFAULT_BUFFER_SIZE


class _JsonFormatter(logging.Formatter):
    def format(self, record: logging.LogRecord) -> str:
        payload = {
            "time": self.formatTime(record),
            "logger": record.name,
            "level": record.levelname,
            "message": record.getMessage(),
        }
        data = getattr(record, "scribe_data", None)
        if data:
            payload["data"] = data
        return json.dumps(payload)


def _build_preset_config(preset: str) -> TelemetryConfig:
    key = preset.lower()
    log_file = _env("LOG_FILE") or ""

    if key == "development":
        return TelemetryConfig(level="DEBUG", console=True, colored=True)
    if key == "production":
        return TelemetryConfig(
            level="INFO",
            console=False,
            log_file=log_file or "scribe_engine.log",
            buffered=True,
        )
    if key == "performance":
        return TelemetryConfig(
            level="DEBUG",
            console=False,
            json_format=True,
            log_file=log_file or "scribe_engine-performance.log",
            buffered=True,
        )
    raise ValueError(f"Unknown preset '{preset}', expected one of {PRESETS}.")


def _buffer_size() -> int:
    raw = (_env("LOG_BUFFER_SIZE") or "").strip()
    if not raw:
        return DEFAULT_BUFFER_SIZE
    try:
        size = int(raw)
    except ValueError:
        raise ValueError(
            f"{ENV_PREFIX}LOG_BUFFER_SIZE must be an integer, got {raw!r}"
        ) from None
    if size <= 0:
        raise ValueError(f"{ENV_PREFIX}LOG_BUFFER_SIZE must be positive, got {size}")
    return size


def _build_default_config() -> TelemetryConfig:
    return TelemetryConfig(
        level=(_env("LOG_LEVEL") or "INFO").upper(),
        console=not _env_flag("DISABLE_CONSOLE", False),
        colored=not _env_flag("NO_COLOR", False),
        json_format=_env_flag("LOG_JSON", False),
        log_file=_env("LOG_FILE") or "",
        buffered=_env_flag("LOG_BUFFERED", False),
        buffer_size=_buffer_size(),
    )


def _make_handlers(config: TelemetryConfig) -> list[logging.Handler]:
    handlers: list[logging.Handler] = []
    if config.console:
        if config.json_format:
            stream: logging.Handler = logging.StreamHandler()
            stream.setFormatter(_JsonFormatter())
        else:
            stream = RichHandler(
                console=Console(stderr=True, no_color=not config.colored),
                show_path=False,
                rich_tracebacks=True,
                markup=False,
            )
            stream.setFormatter(logging.Formatter("%(message)s"))
        handlers.append(stream)
    if config.log_file:
        file_handler = logging.FileHandler(config.log_file, encoding="utf-8")
        file_handler.setFormatter(
            _JsonFormatter()
            if config.json_format
            else logging.Formatter("%(asctime)s %(name)s %(levelname)s %(message)s")
        )
        handlers.append(file_handler)
    if config.buffered:
        return [
            logging.handlers.MemoryHandler(
                capacity=config.buffer_size, flushLevel=logging.ERROR, target=handler
            )
            for handler in handlers
        ]
    return handlers


_ACTIVE_CONFIG: Optional[TelemetryConfig] = None


def configure(
    *, config: Optional[TelemetryConfig] = None, preset: Optional[str] = None
) -> TelemetryConfig:
    """Replace the handlers and level of the engine's root logger.

    Parameters
    ----------
    config:
        Explicit ``TelemetryConfig`` to adopt as-is.
    preset:
        One of ``"development"``, ``"production"`` or ``"performance"``.
        ``config`` and ``preset`` are mutually exclusive.

    Without arguments the config is rebuilt from ``SCRIBE_ENGINE_*``
    environment variables. Buffered configs wrap every handler in a
    ``MemoryHandler`` that flushes once ``buffer_size`` records pile up or an
    error arrives. Only handlers installed here are replaced, so handlers a
    host attached itself survive reconfiguration.
    """

    global _ACTIVE_CONFIG
    if config is not None and preset:
        raise ValueError("Provide either `config` or `preset`, not both.")

    if preset:
        config = _build_preset_config(preset)
    elif config is None:
        config = _build_default_config()

    root = logging.getLogger(DEFAULT_LOGGER_NAME)
    for handler in list(root.handlers):
        if getattr(handler, _MANAGED_ATTR, False):
            root.removeHandler(handler)
            target = getattr(handler, "target", None)
            handler.close()
            if target is not None:
                target.close()
    for handler in _make_handlers(config):
        setattr(handler, _MANAGED_ATTR, True)
        root.addHandler(handler)
    root.setLevel(getattr(logging, config.level.upper(), logging.INFO))

    _ACTIVE_CONFIG = config
    return config


def active_config() -> TelemetryConfig:
    if _ACTIVE_CONFIG is None:
        return configure()
    return _ACTIVE_CONFIG


def get_logger(name: Optional[str] = None) -> logging.Logger:
    """Return a logger under the engine namespace."""

    return logging.getLogger(name or DEFAULT_LOGGER_NAME)


def _resolve_level(level: str | int) -> int:
    if isinstance(level, int):
        return level
    resolved = logging.getLevelName(str(level).upper())
    if not isinstance(resolved, int):
        raise ValueError(f"Unsupported log level '{level}'.")
    return resolved


def _emit(
    logger: logging.Logger, level: str | int, message: str, payload: Dict[str, Any]
) -> None:
    levelno = _resolve_level(level)
    if not logger.isEnabledFor(levelno):
        return
    pairs = {key: _stringify(value) for key, value in payload.items()}
    logger.log(
        levelno,
        f"{message} {_format_pairs(pairs)}".rstrip(),
        extra={"scribe_data": pairs},
    )


def record_event(
    name: str,
    *,
    level: str | int = "info",
    data: Optional[Dict[str, Any]] = None,
    logger_name: Optional[str] = None,
) -> None:
    """Emit ``event::<name>`` with ``data`` attached as key/value pairs."""

    payload = {"event": name, **(data or {})}
    _emit(get_logger(logger_name), level, f"event::{name}", payload)


@dataclass
class SpanHandle:
    """Handle yielded by ``span`` for attaching metadata mid-block."""

    logger: logging.Logger
    span_name: str
    component_name: Optional[str] = None
    metadata: Dict[str, Any] = field(default_factory=dict)

    def add_metadata(self, key: str, value: Any) -> None:
        self.metadata[key] = _stringify(value)

    def _payload(self, extra: Optional[Dict[str, Any]] = None) -> Dict[str, Any]:
        payload: Dict[str, Any] = {"span": self.span_name, **self.metadata}
        if self.component_name:
            payload["component"] = self.component_name
        if extra:
            payload.update(extra)
        return payload

    def fail(self, reason: str) -> None:
        _emit(self.logger, "error", "span::fail", self._payload({"reason": reason}))


@contextmanager
def span(
    name: str,
    *,
    logger_name: Optional[str] = None,
    component: Optional[str | bool] = None,
    metadata: Optional[Dict[str, Any]] = None,
) -> Iterator[SpanHandle]:
    """Time a code block and (optionally) tag it with a component.

    ``component=True`` reuses ``name`` as the component identifier; a string
    names the component explicitly. The elapsed time is logged at debug level
    on exit. Exceptions raised inside the block are reported through
    ``SpanHandle.fail`` and re-raised.
    """

    log = get_logger(logger_name)
    component_name: Optional[str] = None
    if component is True:
        component_name = name
    elif isinstance(component, str):
        component_name = component

    handle = SpanHandle(
        logger=log,
        span_name=name,
        component_name=component_name,
        metadata={key: _stringify(value) for key, value in (metadata or {}).items()},
    )
    started = time.perf_counter()
    try:
        yield handle
    except Exception as exc:
        handle.fail(str(exc))
        raise
    finally:
        elapsed_ms = (time.perf_counter() - started) * 1000
        _emit(
            log, "debug", "span::end", handle._payload({"elapsed_ms": f"{elapsed_ms:.3f}"})
        )


configure()
logger = get_logger()

__all__ = [
    "PRESETS",
    "SpanHandle",
    "TelemetryConfig",
    "active_config",
    "configure",
    "get_logger",
    "record_event",
    "span",
    "logger",
]
