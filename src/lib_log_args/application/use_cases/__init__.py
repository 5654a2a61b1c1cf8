"""Use cases composing the wrapped level methods."""

from __future__ import annotations

from .error_adapter import ErrorAdapter, describe_exception
from .format_resolver import FormatResolver, Resolution
from .level_gate import LevelGate
from .level_methods import ArgsLogger, build_level_method, install, wrap
from .normalize import ArgumentNormalizer

__all__ = [
    "ArgsLogger",
    "ArgumentNormalizer",
    "ErrorAdapter",
    "FormatResolver",
    "LevelGate",
    "Resolution",
    "build_level_method",
    "describe_exception",
    "install",
    "wrap",
]
