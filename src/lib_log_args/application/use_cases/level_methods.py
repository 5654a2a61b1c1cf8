"""Build the argument-normalising level methods around a leveled logger.

Purpose
-------
Sequence gate, normalisation and the original write call for every severity
level, and expose the result either as a separate adapter (:func:`wrap`) or
by replacing the logger's own methods in place (:func:`install`).

Contents
--------
* :func:`build_level_method` – factory for one wrapped method.
* :class:`ArgsLogger` – adapter exposing the wrapped methods.
* :func:`wrap` / :func:`install` – setup entry points.

System Role
-----------
The composition point of the package: validates :class:`WrapOptions` against
the logger's reserved fields, then freezes the wiring into plain closures
executed on every call.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from typing import Any

from lib_log_args.application.ports.logger import LevelWriter, LeveledLoggerPort
from lib_log_args.domain.levels import SeverityLevel
from lib_log_args.domain.options import CORE_FIELDS, ConfigurationError, WrapOptions

from .level_gate import LevelGate
from .normalize import ArgumentNormalizer

logger = logging.getLogger(__name__)

LevelMethod = Callable[..., Any]


def build_level_method(level: SeverityLevel, write: LevelWriter, normalizer: ArgumentNormalizer) -> LevelMethod:
    """Return the wrapped method for ``level`` writing through ``write``.

    The wrapped method returns ``None`` without writing when a deferred
    producer is skipped by the gate; otherwise it writes the normalised
    record and returns the caller-visible value. Errors raised by ``write``
    propagate unchanged.
    """

    def level_method(*args: Any) -> Any:
        call = normalizer.normalize(level, args)
        if call is None:
            return None
        write(*call.write_args())
        return call.result

    level_method.__name__ = level.method_name
    level_method.__qualname__ = level.method_name
    level_method.__doc__ = f"Normalise the arguments and write a {level.name} record."
    return level_method


def _prepare(
    target: LeveledLoggerPort | None, options: WrapOptions | None
) -> tuple[LeveledLoggerPort, WrapOptions, dict[SeverityLevel, LevelWriter]]:
    if target is None:
        raise ConfigurationError("no logger given")
    resolved = options if options is not None else WrapOptions()
    resolved.ensure_compatible(getattr(target, "core_fields", CORE_FIELDS))
    writers: dict[SeverityLevel, LevelWriter] = {}
    for level in SeverityLevel.ordered():
        write = getattr(target, level.method_name, None)
        if not callable(write):
            raise ConfigurationError(f"logger has no {level.method_name!r} method")
        writers[level] = write
    return target, resolved, writers


def _build_methods(target: LeveledLoggerPort, options: WrapOptions, writers: dict[SeverityLevel, LevelWriter]) -> dict[SeverityLevel, LevelMethod]:
    normalizer = ArgumentNormalizer(target, options)
    return {level: build_level_method(level, write, normalizer) for level, write in writers.items()}


class ArgsLogger:
    """Adapter exposing argument-normalising level methods over a logger.

    The wrapped logger is left untouched; this object holds references to its
    original write methods.

    Examples
    --------
    >>> class _Logger:
    ...     core_fields = frozenset({"msg"})
    ...     def __init__(self):
    ...         self.records = []
    ...     def threshold(self):
    ...         return SeverityLevel.INFO.value
    ...     def serializer(self, name):
    ...         return None
    ...     def _write(self, *args):
    ...         self.records.append(args)
    ...     fatal = error = warn = info = debug = trace = _write
    >>> target = _Logger()
    >>> log = ArgsLogger(target)
    >>> log.info({"foo": "bar"})
    {'foo': 'bar'}
    >>> target.records
    [({'payload': {'foo': 'bar'}},)]
    """

    def __init__(self, target: LeveledLoggerPort, options: WrapOptions | None = None) -> None:
        target, resolved, writers = _prepare(target, options)
        self._logger = target
        self._options = resolved
        self._gate = LevelGate(target)
        self._methods = _build_methods(target, resolved, writers)
        logger.debug("wrapped %d level methods of %r", len(self._methods), target)

    @property
    def logger(self) -> LeveledLoggerPort:
        return self._logger

    @property
    def options(self) -> WrapOptions:
        return self._options

    def is_level_active(self, level: SeverityLevel | str) -> bool:
        """Return ``True`` when ``level`` passes the logger's current threshold."""

        if isinstance(level, str):
            level = SeverityLevel.from_name(level)
        return self._gate.is_active(level)

    def log(self, level: SeverityLevel | str, *args: Any) -> Any:
        """Dispatch ``args`` to the wrapped method of ``level``."""

        if isinstance(level, str):
            level = SeverityLevel.from_name(level)
        return self._methods[level](*args)

    def fatal(self, *args: Any) -> Any:
        return self._methods[SeverityLevel.FATAL](*args)

    def error(self, *args: Any) -> Any:
        return self._methods[SeverityLevel.ERROR](*args)

    def warn(self, *args: Any) -> Any:
        return self._methods[SeverityLevel.WARN](*args)

    def info(self, *args: Any) -> Any:
        return self._methods[SeverityLevel.INFO](*args)

    def debug(self, *args: Any) -> Any:
        return self._methods[SeverityLevel.DEBUG](*args)

    def trace(self, *args: Any) -> Any:
        return self._methods[SeverityLevel.TRACE](*args)

    warning = warn
    critical = fatal


def wrap(target: LeveledLoggerPort | None, options: WrapOptions | None = None) -> ArgsLogger:
    """Return an :class:`ArgsLogger` over ``target``.

    Raises
    ------
    ConfigurationError
        When ``target`` is ``None``, lacks a level method, or an option key
        collides with its core fields.
    """

    return ArgsLogger(target, options)  # type: ignore[arg-type]


def install(target: LeveledLoggerPort | None, options: WrapOptions | None = None) -> LeveledLoggerPort:
    """Replace the level methods of ``target`` in place and return ``target``.

    Validation happens before any method is replaced, so a failing setup
    leaves ``target`` unchanged. Installing twice on the same instance is not
    supported.
    """

    target, resolved, writers = _prepare(target, options)
    methods = _build_methods(target, resolved, writers)
    for level, method in methods.items():
        setattr(target, level.method_name, method)
    logger.debug("installed %d level methods on %r", len(methods), target)
    return target


__all__ = ["ArgsLogger", "LevelMethod", "build_level_method", "install", "wrap"]
