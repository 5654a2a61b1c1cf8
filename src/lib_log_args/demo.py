"""Showcase of the wrapped level methods against a JSON-line logger.

Purpose
-------
Run a fixed set of representative calls through :func:`wrap` over a stdlib
logger and capture what each call wrote and returned. Backs the ``demo`` CLI
command and doubles as an executable tour of the argument shapes.

Contents
--------
* :class:`DemoOutcome` – one showcase call and its effects.
* :func:`run_demo` – execute the showcase.
"""

from __future__ import annotations

import io
import logging
from collections.abc import Callable, Sequence
from dataclasses import dataclass
from typing import Any

from lib_log_args.adapters import JsonRecordFormatter, StdlibLoggerAdapter
from lib_log_args.application.use_cases.level_methods import wrap
from lib_log_args.domain.levels import SeverityLevel
from lib_log_args.domain.options import WrapOptions

DEMO_LOGGER_NAME = "lib_log_args.demo"


@dataclass(slots=True, frozen=True)
class DemoOutcome:
    """Label, level, returned value and emitted JSON line (``None`` when nothing was written)."""

    label: str
    level: SeverityLevel
    returned: Any
    line: str | None


def _failure() -> ValueError:
    error = ValueError("boom")
    error.code = "E_BOOM"  # type: ignore[attr-defined]
    return error


def _showcase() -> Sequence[tuple[str, SeverityLevel, Callable[[], tuple[Any, ...]]]]:
    return (
        ("object", SeverityLevel.INFO, lambda: ({"foo": "bar"},)),
        ("exception", SeverityLevel.ERROR, lambda: (_failure(),)),
        ("format string", SeverityLevel.INFO, lambda: ("value %s", {"an": "object"})),
        ("several strings", SeverityLevel.INFO, lambda: ("a", "b", "c")),
        ("plain string", SeverityLevel.WARN, lambda: ("disk almost full",)),
        ("lazy producer", SeverityLevel.WARN, lambda: (lambda: ["lazy %s", "value"],)),
        ("lazy producer below threshold", SeverityLevel.TRACE, lambda: (lambda: {"expensive": True},)),
        ("infinity", SeverityLevel.INFO, lambda: (float("inf"),)),
    )


def run_demo(*, options: WrapOptions | None = None, threshold: SeverityLevel = SeverityLevel.DEBUG) -> list[DemoOutcome]:
    """Run the showcase calls and return what each one produced.

    Examples
    --------
    >>> outcomes = run_demo()
    >>> [outcome.label for outcome in outcomes if outcome.line is None]
    ['lazy producer below threshold']
    >>> outcomes[3].returned
    'a'
    """

    stream = io.StringIO()
    handler = logging.StreamHandler(stream)
    handler.setFormatter(JsonRecordFormatter())
    target = logging.getLogger(DEMO_LOGGER_NAME)
    target.propagate = False
    target.addHandler(handler)
    adapter = StdlibLoggerAdapter(target)
    adapter.set_threshold(threshold)
    log = wrap(adapter, options)

    outcomes: list[DemoOutcome] = []
    try:
        for label, level, build_args in _showcase():
            before = stream.tell()
            returned = log.log(level, *build_args())
            written = stream.getvalue()[before:].strip()
            outcomes.append(DemoOutcome(label=label, level=level, returned=returned, line=written or None))
    finally:
        target.removeHandler(handler)
    return outcomes


__all__ = ["DEMO_LOGGER_NAME", "DemoOutcome", "run_demo"]
