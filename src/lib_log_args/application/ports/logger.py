"""Port describing the leveled logger whose methods get wrapped.

Purpose
-------
Define the minimal capability set the wrapping layer relies on so any
structured logger (stdlib-backed, bunyan-style, test double) can be wrapped
without the inner layers importing a concrete logging library.

Contents
--------
* :data:`ERROR_SERIALIZER` – serializer name looked up for exceptions.
* :data:`LevelWriter` – signature of one level write method.
* :class:`LeveledLoggerPort` – runtime-checkable protocol.
"""

from __future__ import annotations

from collections.abc import Callable, Set as AbstractSet
from typing import Any, Protocol, runtime_checkable

ERROR_SERIALIZER = "err"

LevelWriter = Callable[..., Any]
Serializer = Callable[[Any], Any]


@runtime_checkable
class LeveledLoggerPort(Protocol):
    """Structured logger with one write method per severity level.

    Each level method accepts a field mapping optionally followed by a message
    string. ``threshold`` returns the least severe rank currently emitted, on
    the :class:`~lib_log_args.domain.levels.SeverityLevel` scale, and must be
    read fresh on every call.
    """

    core_fields: AbstractSet[str]

    def threshold(self) -> int: ...

    def serializer(self, name: str) -> Serializer | None: ...

    def fatal(self, fields: Any, *args: Any) -> Any: ...

    def error(self, fields: Any, *args: Any) -> Any: ...

    def warn(self, fields: Any, *args: Any) -> Any: ...

    def info(self, fields: Any, *args: Any) -> Any: ...

    def debug(self, fields: Any, *args: Any) -> Any: ...

    def trace(self, fields: Any, *args: Any) -> Any: ...


__all__ = ["ERROR_SERIALIZER", "LevelWriter", "LeveledLoggerPort", "Serializer"]
