"""Domain value objects used by the argument-normalising level methods."""

from __future__ import annotations

from .invocation import Invocation, NormalizedCall
from .levels import SeverityLevel, TRACE_PYTHON_LEVEL
from .options import (
    CORE_FIELDS,
    ConfigurationError,
    DEFAULT_ERROR_INDICATOR_KEY,
    DEFAULT_PAYLOAD_KEY,
    WrapOptions,
)

__all__ = [
    "CORE_FIELDS",
    "ConfigurationError",
    "DEFAULT_ERROR_INDICATOR_KEY",
    "DEFAULT_PAYLOAD_KEY",
    "Invocation",
    "NormalizedCall",
    "SeverityLevel",
    "TRACE_PYTHON_LEVEL",
    "WrapOptions",
]
