"""Leveled-logger adapter over :mod:`logging`.

Purpose
-------
Let a plain :class:`logging.Logger` serve as the logger whose level methods
get wrapped, so applications keep their existing handler configuration.

Contents
--------
* :data:`FIELDS_ATTRIBUTE` – ``LogRecord`` attribute carrying record fields.
* :class:`StdlibLoggerAdapter` – concrete :class:`LeveledLoggerPort`.

System Role
-----------
Outer adapter: translates between the :class:`SeverityLevel` scale and stdlib
numbers and hands normalised fields to handlers through ``extra``. Rendering
is left to handlers and formatters such as :class:`JsonRecordFormatter`.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any

from lib_log_args.application.ports.logger import LeveledLoggerPort, Serializer
from lib_log_args.domain.levels import TRACE_PYTHON_LEVEL, SeverityLevel
from lib_log_args.domain.options import CORE_FIELDS, DEFAULT_PAYLOAD_KEY

FIELDS_ATTRIBUTE = "fields"

logging.addLevelName(TRACE_PYTHON_LEVEL, "TRACE")


class StdlibLoggerAdapter(LeveledLoggerPort):
    """Expose a :class:`logging.Logger` through the leveled-logger port.

    Parameters
    ----------
    logger:
        Logger instance or logger name.
    serializers:
        Field serializers keyed by name; ``"err"`` converts exceptions.

    Examples
    --------
    >>> adapter = StdlibLoggerAdapter("lib_log_args.doctest")
    >>> adapter.set_threshold("warn")
    >>> adapter.threshold() == SeverityLevel.WARN.value
    True
    >>> adapter.serializer("err") is None
    True
    """

    core_fields = CORE_FIELDS

    def __init__(self, logger: logging.Logger | str, *, serializers: Mapping[str, Serializer] | None = None) -> None:
        self._logger = logging.getLogger(logger) if isinstance(logger, str) else logger
        self._serializers: dict[str, Serializer] = dict(serializers or {})

    @property
    def logger(self) -> logging.Logger:
        return self._logger

    def threshold(self) -> int:
        """Return the rank of the least severe level the logger currently emits."""

        return SeverityLevel.rank_for_python_threshold(self._logger.getEffectiveLevel())

    def set_threshold(self, level: SeverityLevel | str) -> None:
        if isinstance(level, str):
            level = SeverityLevel.from_name(level)
        self._logger.setLevel(level.to_python_level())

    def serializer(self, name: str) -> Serializer | None:
        return self._serializers.get(name)

    def fatal(self, fields: Any, *args: Any) -> None:
        self._write(SeverityLevel.FATAL, fields, args)

    def error(self, fields: Any, *args: Any) -> None:
        self._write(SeverityLevel.ERROR, fields, args)

    def warn(self, fields: Any, *args: Any) -> None:
        self._write(SeverityLevel.WARN, fields, args)

    def info(self, fields: Any, *args: Any) -> None:
        self._write(SeverityLevel.INFO, fields, args)

    def debug(self, fields: Any, *args: Any) -> None:
        self._write(SeverityLevel.DEBUG, fields, args)

    def trace(self, fields: Any, *args: Any) -> None:
        self._write(SeverityLevel.TRACE, fields, args)

    def _write(self, level: SeverityLevel, fields: Any, args: tuple[Any, ...]) -> None:
        """Forward one record to :meth:`logging.Logger.log`.

        ``fields`` may also be a message string (``info("text")``) or a
        non-mapping value, which is stored under the default payload key.
        Remaining ``args`` are the message followed by its template arguments.
        """

        python_level = level.to_python_level()
        if not self._logger.isEnabledFor(python_level):
            return
        if isinstance(fields, str):
            fields, args = {}, (fields, *args)
        elif not isinstance(fields, Mapping):
            fields = {DEFAULT_PAYLOAD_KEY: fields}
        message = "" if not args else args[0]
        self._logger.log(python_level, message, *args[1:], extra={FIELDS_ATTRIBUTE: dict(fields)})


__all__ = ["FIELDS_ATTRIBUTE", "StdlibLoggerAdapter"]
