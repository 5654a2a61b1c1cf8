"""Normalise the arguments of one level call into a structured record.

Purpose
-------
Level methods accept many argument shapes. This module classifies the first
argument in a fixed priority order and reshapes the call into record fields,
an optional message, and the value returned to the caller.

Contents
--------
* :class:`ArgumentNormalizer` – the dispatch pipeline.
* Classification helpers ``is_producer`` and ``is_opaque_scalar``.

System Role
-----------
Called by :mod:`lib_log_args.application.use_cases.level_methods` for every
wrapped call; delegates to :class:`LevelGate`, :class:`ErrorAdapter` and
:class:`FormatResolver`.
"""

from __future__ import annotations

import math
from collections.abc import Sequence
from decimal import Decimal
from enum import Enum
from fractions import Fraction
from typing import Any

from lib_log_args.application.ports.logger import LeveledLoggerPort
from lib_log_args.domain.invocation import Invocation, NormalizedCall
from lib_log_args.domain.levels import SeverityLevel
from lib_log_args.domain.options import WrapOptions

from .error_adapter import ErrorAdapter
from .format_resolver import FormatResolver, safe_str
from .level_gate import LevelGate


def is_producer(value: Any) -> bool:
    """Return ``True`` for deferred producers: callables that are not classes.

    Examples
    --------
    >>> is_producer(lambda: 1), is_producer(dict), is_producer("text")
    (True, False, False)
    """

    return callable(value) and not isinstance(value, type)


def is_opaque_scalar(value: Any) -> bool:
    """Return ``True`` for scalars JSON cannot represent as themselves.

    Examples
    --------
    >>> is_opaque_scalar(float("-inf")), is_opaque_scalar(Decimal("1.5"))
    (True, True)
    >>> is_opaque_scalar(float("nan")), is_opaque_scalar(True), is_opaque_scalar(10**30)
    (False, False, False)
    """

    if isinstance(value, float):
        return math.isinf(value)
    return isinstance(value, (complex, Decimal, Fraction, Enum))


class ArgumentNormalizer:
    """Turn raw level-call arguments into a :class:`NormalizedCall`.

    Parameters
    ----------
    logger:
        Wrapped logger; consulted for the threshold and the error serializer.
    options:
        Shared :class:`WrapOptions`.

    Examples
    --------
    >>> class _Logger:
    ...     core_fields = frozenset()
    ...     def threshold(self):
    ...         return SeverityLevel.INFO.value
    ...     def serializer(self, name):
    ...         return None
    >>> normalizer = ArgumentNormalizer(_Logger(), WrapOptions())
    >>> call = normalizer.normalize(SeverityLevel.INFO, ("a", "b", "c"))
    >>> call.message, call.result
    ('a b c', 'a')
    >>> normalizer.normalize(SeverityLevel.INFO, ({"foo": "bar"},)).fields
    {'payload': {'foo': 'bar'}}
    >>> normalizer.normalize(SeverityLevel.DEBUG, (lambda: "expensive",)) is None
    True
    """

    def __init__(self, logger: LeveledLoggerPort, options: WrapOptions) -> None:
        self._options = options
        self._gate = LevelGate(logger)
        self._errors = ErrorAdapter(logger)
        self._formats = FormatResolver()

    def normalize(self, level: SeverityLevel, args: Sequence[Any]) -> NormalizedCall | None:
        """Return the call to emit, or ``None`` when a producer was skipped."""

        invocation = Invocation.from_args(args)
        if is_producer(invocation.head):
            if not self._gate.is_active(level):
                return None
            invocation = self._run_producer(invocation)
        call, is_error = self._shape(invocation)
        self._tag(call, is_error)
        return call

    @staticmethod
    def _run_producer(invocation: Invocation) -> Invocation:
        produced = invocation.head(*invocation.rest)
        if isinstance(produced, (list, tuple)):
            return Invocation.from_args(produced)
        return Invocation(head=produced)

    def _shape(self, invocation: Invocation) -> tuple[NormalizedCall, bool]:
        head, rest = invocation.head, invocation.rest
        if isinstance(head, BaseException):
            fragment = self._errors.to_fragment(head)
            return self._payload(fragment, rest, result=head), True
        if is_opaque_scalar(head):
            return self._payload(safe_str(head), rest, result=head), False
        if isinstance(head, str):
            return self._text(head, rest), False
        return self._payload(head, rest, result=head), False

    def _payload(self, value: Any, rest: Sequence[Any], *, result: Any) -> NormalizedCall:
        fields = {self._options.payload_key: value}
        return NormalizedCall(fields=fields, message=self._trailing_message(rest), result=result)

    def _trailing_message(self, rest: Sequence[Any]) -> str | None:
        """Render arguments that follow a payload the way a message argument is rendered."""

        if not rest:
            return None
        head, tail = rest[0], rest[1:]
        if isinstance(head, str):
            resolution = self._formats.resolve(head, tail)
            if resolution is not None:
                return resolution.message
        return " ".join(safe_str(value) for value in rest)

    def _text(self, head: str, rest: Sequence[Any]) -> NormalizedCall:
        resolution = self._formats.resolve(head, rest)
        if resolution is not None:
            return NormalizedCall(message=resolution.message, result=resolution.surplus)
        if rest:
            message = " ".join([head, *(safe_str(value) for value in rest)])
            return NormalizedCall(message=message, result=head)
        return NormalizedCall(fields={self._options.payload_key: head}, result=head)

    def _tag(self, call: NormalizedCall, is_error: bool) -> None:
        if is_error:
            call.fields[self._options.error_indicator_key] = True
        elif self._options.always_show_error_indicator:
            call.fields[self._options.error_indicator_key] = False


__all__ = ["ArgumentNormalizer", "is_opaque_scalar", "is_producer"]
