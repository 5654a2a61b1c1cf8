"""Decide whether a severity level is currently emitted."""

from __future__ import annotations

from lib_log_args.application.ports.logger import LeveledLoggerPort
from lib_log_args.domain.levels import SeverityLevel


class LevelGate:
    """Compare a level against the logger's live threshold.

    The threshold is queried on every call; nothing is cached so threshold
    changes made elsewhere apply to the very next call.

    Examples
    --------
    >>> class _Logger:
    ...     core_fields = frozenset()
    ...     def threshold(self):
    ...         return SeverityLevel.INFO.value
    >>> gate = LevelGate(_Logger())
    >>> gate.is_active(SeverityLevel.DEBUG), gate.is_active(SeverityLevel.WARN)
    (False, True)
    """

    def __init__(self, logger: LeveledLoggerPort) -> None:
        self._logger = logger

    def is_active(self, level: SeverityLevel) -> bool:
        return level.value >= self._logger.threshold()


__all__ = ["LevelGate"]
