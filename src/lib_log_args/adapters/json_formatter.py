"""Render stdlib log records as single-line JSON documents.

Purpose
-------
Give records written through :class:`StdlibLoggerAdapter` the bunyan record
layout: the core fields first, then the normalised structured fields.

Contents
--------
* :func:`json_safe` – map values onto what strict JSON can hold.
* :class:`JsonRecordFormatter` – :class:`logging.Formatter` implementation.
"""

from __future__ import annotations

import json
import logging
import math
import socket
from collections.abc import Mapping, Set as AbstractSet
from datetime import datetime, timezone
from typing import Any

from lib_log_args.domain.levels import SeverityLevel
from lib_log_args.application.use_cases.format_resolver import safe_str

from .stdlib import FIELDS_ATTRIBUTE

RECORD_VERSION = 0


def json_safe(value: Any) -> Any:
    """Return ``value`` with NaN as ``None`` and other non-JSON values as strings.

    Examples
    --------
    >>> json_safe({"a": float("nan"), "b": [1, float("inf")], 3: b"x"})
    {'a': None, 'b': [1, 'inf'], '3': "b'x'"}
    """

    if value is None or isinstance(value, (str, bool, int)):
        return value
    if isinstance(value, float):
        if math.isnan(value):
            return None
        return safe_str(value) if math.isinf(value) else value
    if isinstance(value, Mapping):
        return {safe_str(key): json_safe(item) for key, item in value.items()}
    if isinstance(value, (list, tuple, AbstractSet)):
        return [json_safe(item) for item in value]
    return safe_str(value)


class JsonRecordFormatter(logging.Formatter):
    """Format records as JSON lines with bunyan core fields.

    Examples
    --------
    >>> record = logging.LogRecord("svc", logging.INFO, __file__, 1, "hello", None, None)
    >>> record.fields = {"payload": {"foo": "bar"}}
    >>> data = json.loads(JsonRecordFormatter(hostname="box").format(record))
    >>> data["level"], data["name"], data["hostname"], data["msg"], data["payload"]
    (30, 'svc', 'box', 'hello', {'foo': 'bar'})
    """

    def __init__(self, *, hostname: str | None = None) -> None:
        super().__init__()
        self._hostname = hostname if hostname is not None else socket.gethostname()

    def format(self, record: logging.LogRecord) -> str:
        data: dict[str, Any] = {
            "v": RECORD_VERSION,
            "level": SeverityLevel.rank_for_python_threshold(record.levelno),
            "name": record.name,
            "hostname": self._hostname,
            "pid": record.process,
            "time": self._format_time(record.created),
            "msg": record.getMessage(),
        }
        fields = getattr(record, FIELDS_ATTRIBUTE, None) or {}
        for key, value in json_safe(fields).items():
            data.setdefault(key, value)
        if record.exc_info:
            data.setdefault("err", self.formatException(record.exc_info))
        return json.dumps(data)

    @staticmethod
    def _format_time(created: float) -> str:
        stamp = datetime.fromtimestamp(created, tz=timezone.utc)
        return stamp.isoformat(timespec="milliseconds").replace("+00:00", "Z")


__all__ = ["JsonRecordFormatter", "RECORD_VERSION", "json_safe"]
