"""Argument-normalising, lazily evaluated level methods for structured loggers.

Wrap any leveled logger so ``log.info(...)`` accepts plain values,
exceptions, deferred producers, printf-style templates, or several strings,
and writes one structured record per call::

    log = wrap(StdlibLoggerAdapter("app"))
    log.info({"user": "ann"})
    log.debug(lambda: expensive_snapshot())  # only evaluated when DEBUG is on
    log.error(exc)                           # returns ``exc`` itself

The package logger stays silent unless the host application adds handlers.
"""

from __future__ import annotations

import logging

from .adapters import JsonRecordFormatter, StdlibLoggerAdapter
from .application.ports import LeveledLoggerPort
from .application.use_cases import ArgsLogger, install, wrap
from .domain import CORE_FIELDS, ConfigurationError, SeverityLevel, WrapOptions

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    "ArgsLogger",
    "CORE_FIELDS",
    "ConfigurationError",
    "JsonRecordFormatter",
    "LeveledLoggerPort",
    "SeverityLevel",
    "StdlibLoggerAdapter",
    "WrapOptions",
    "install",
    "wrap",
]
