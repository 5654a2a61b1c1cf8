"""Ports consumed by the application layer."""

from __future__ import annotations

from .logger import ERROR_SERIALIZER, LevelWriter, LeveledLoggerPort, Serializer

__all__ = ["ERROR_SERIALIZER", "LevelWriter", "LeveledLoggerPort", "Serializer"]
