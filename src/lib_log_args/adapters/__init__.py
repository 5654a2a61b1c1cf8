"""Concrete collaborators for the leveled-logger port."""

from __future__ import annotations

from .json_formatter import JsonRecordFormatter, json_safe
from .stdlib import FIELDS_ATTRIBUTE, StdlibLoggerAdapter

__all__ = ["FIELDS_ATTRIBUTE", "JsonRecordFormatter", "StdlibLoggerAdapter", "json_safe"]
