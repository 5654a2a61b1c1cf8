"""Severity levels shared by the wrapped level methods.

Purpose
-------
Offer a domain-specific representation of the ranked severities that the
wrapped logger exposes as methods, with conversions to and from the stdlib
:mod:`logging` scale.

Contents
--------
* :class:`SeverityLevel` enum with conversion helpers.
* ``_PYTHON_LEVELS`` constant mapping severities to stdlib numbers.

System Role
-----------
Used by the level gate to compare a call's severity against the live
threshold and by the stdlib adapter to translate between rank scales.
"""

from __future__ import annotations

import logging
from enum import Enum

TRACE_PYTHON_LEVEL = 5
"""Numeric stdlib level registered for :attr:`SeverityLevel.TRACE`."""


class SeverityLevel(Enum):
    """Ranked severities; higher values are more severe."""

    TRACE = 10
    DEBUG = 20
    INFO = 30
    WARN = 40
    ERROR = 50
    FATAL = 60

    @property
    def method_name(self) -> str:
        """Return the lowercase name used for the level method."""

        return self.name.lower()

    def to_python_level(self) -> int:
        """Return the :mod:`logging` number matching this level."""

        return _PYTHON_LEVELS[self]

    @classmethod
    def ordered(cls) -> tuple["SeverityLevel", ...]:
        """Return all levels, most severe first.

        Examples
        --------
        >>> [level.method_name for level in SeverityLevel.ordered()]
        ['fatal', 'error', 'warn', 'info', 'debug', 'trace']
        """

        return tuple(sorted(cls, key=lambda level: level.value, reverse=True))

    @classmethod
    def from_name(cls, name: str) -> "SeverityLevel":
        normalized = name.strip().upper()
        normalized = _ALIASES.get(normalized, normalized)
        try:
            return cls[normalized]
        except KeyError as exc:
            raise ValueError(f"Unknown log level: {name!r}") from exc

    @classmethod
    def from_numeric(cls, level: int) -> "SeverityLevel":
        """Return the :class:`SeverityLevel` whose rank equals ``level``."""
        try:
            return cls(level)
        except ValueError as exc:
            raise ValueError(f"Unsupported log level numeric: {level}") from exc

    @classmethod
    def from_python_level(cls, level: int) -> "SeverityLevel":
        """Translate an exact stdlib logging number into :class:`SeverityLevel`."""
        for candidate, python_level in _PYTHON_LEVELS.items():
            if python_level == level:
                return candidate
        raise ValueError(f"Unsupported log level numeric: {level}")

    @classmethod
    def rank_for_python_threshold(cls, threshold: int) -> int:
        """Return the rank of the least severe level a stdlib threshold lets through.

        Stdlib thresholds may sit between the standard numbers (``25``) or
        above every level; the returned rank keeps gating exact in both cases.

        Examples
        --------
        >>> SeverityLevel.rank_for_python_threshold(logging.INFO)
        30
        >>> SeverityLevel.rank_for_python_threshold(25)
        40
        >>> SeverityLevel.rank_for_python_threshold(0)
        10
        >>> SeverityLevel.rank_for_python_threshold(100)
        70
        """

        for level in sorted(cls, key=lambda item: item.value):
            if level.to_python_level() >= threshold:
                return level.value
        return cls.FATAL.value + 10


_PYTHON_LEVELS = {
    SeverityLevel.TRACE: TRACE_PYTHON_LEVEL,
    SeverityLevel.DEBUG: logging.DEBUG,
    SeverityLevel.INFO: logging.INFO,
    SeverityLevel.WARN: logging.WARNING,
    SeverityLevel.ERROR: logging.ERROR,
    SeverityLevel.FATAL: logging.CRITICAL,
}

_ALIASES = {"WARNING": "WARN", "CRITICAL": "FATAL"}
# Stdlib spellings accepted by from_name.


__all__ = ["SeverityLevel", "TRACE_PYTHON_LEVEL"]
