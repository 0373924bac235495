"""Logging and configuration services shared across the engine."""

from .settings import EngineSettings, load_settings

__all__ = ["EngineSettings", "load_settings"]
