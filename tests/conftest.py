from __future__ import annotations

from typing import Any, Callable

import pytest

from lib_log_args.application.ports.logger import LeveledLoggerPort
from lib_log_args.domain.levels import SeverityLevel
from lib_log_args.domain.options import CORE_FIELDS


class RecordingLogger(LeveledLoggerPort):
    """Leveled logger double that filters by threshold and records written calls."""

    core_fields = CORE_FIELDS

    def __init__(self, *, level: SeverityLevel = SeverityLevel.INFO, serializers: dict[str, Callable[[Any], Any]] | None = None) -> None:
        self.level = level
        self.serializers = dict(serializers or {})
        self.records: list[tuple[SeverityLevel, tuple[Any, ...]]] = []
        self.threshold_reads = 0

    def threshold(self) -> int:
        self.threshold_reads += 1
        return self.level.value

    def serializer(self, name: str) -> Callable[[Any], Any] | None:
        return self.serializers.get(name)

    def _write(self, level: SeverityLevel, args: tuple[Any, ...]) -> None:
        if level.value >= self.level.value:
            self.records.append((level, args))

    def fatal(self, fields: Any, *args: Any) -> None:
        self._write(SeverityLevel.FATAL, (fields, *args))

    def error(self, fields: Any, *args: Any) -> None:
        self._write(SeverityLevel.ERROR, (fields, *args))

    def warn(self, fields: Any, *args: Any) -> None:
        self._write(SeverityLevel.WARN, (fields, *args))

    def info(self, fields: Any, *args: Any) -> None:
        self._write(SeverityLevel.INFO, (fields, *args))

    def debug(self, fields: Any, *args: Any) -> None:
        self._write(SeverityLevel.DEBUG, (fields, *args))

    def trace(self, fields: Any, *args: Any) -> None:
        self._write(SeverityLevel.TRACE, (fields, *args))

    @property
    def last(self) -> tuple[Any, ...]:
        return self.records[-1][1]


@pytest.fixture
def recording_logger() -> RecordingLogger:
    return RecordingLogger()


@pytest.fixture
def logger_factory() -> Callable[..., RecordingLogger]:
    return RecordingLogger
