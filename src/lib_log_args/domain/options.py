"""Wrapping options and the setup-time validation rules.

Purpose
-------
Capture the three knobs that shape every normalised record (payload key,
error indicator key, indicator visibility) in one immutable value object.

Contents
--------
* :data:`CORE_FIELDS` – reserved record fields of a bunyan-style logger.
* :class:`ConfigurationError` – fatal setup-time error.
* :class:`WrapOptions` – frozen dataclass shared by all wrapped methods.
"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass

DEFAULT_PAYLOAD_KEY = "payload"
DEFAULT_ERROR_INDICATOR_KEY = "isError"

CORE_FIELDS: frozenset[str] = frozenset({"v", "level", "name", "hostname", "pid", "time", "msg", "src"})
"""Record fields owned by the logger itself; option keys must avoid them."""


class ConfigurationError(ValueError):
    """Raised when wrapping cannot start because the setup is invalid."""


@dataclass(slots=True, frozen=True)
class WrapOptions:
    """Immutable configuration shared across all wrapped level methods.

    Attributes
    ----------
    payload_key:
        Record field holding non-message payloads.
    error_indicator_key:
        Record field flagging whether the payload came from an exception.
    always_show_error_indicator:
        When ``True`` the indicator is written as ``False`` for non-errors
        instead of being omitted.

    Examples
    --------
    >>> WrapOptions().payload_key
    'payload'
    >>> WrapOptions(payload_key="")
    Traceback (most recent call last):
    ...
    ValueError: payload_key must not be empty
    """

    payload_key: str = DEFAULT_PAYLOAD_KEY
    error_indicator_key: str = DEFAULT_ERROR_INDICATOR_KEY
    always_show_error_indicator: bool = False

    def __post_init__(self) -> None:
        if not self.payload_key:
            raise ValueError("payload_key must not be empty")
        if not self.error_indicator_key:
            raise ValueError("error_indicator_key must not be empty")
        object.__setattr__(self, "always_show_error_indicator", bool(self.always_show_error_indicator))

    def ensure_compatible(self, core_fields: Iterable[str]) -> None:
        """Raise :class:`ConfigurationError` when a key collides with ``core_fields``."""

        reserved = frozenset(core_fields)
        if self.payload_key in reserved:
            raise ConfigurationError(f"payload_key {self.payload_key!r} conflicts with the logger's core fields")
        if self.error_indicator_key in reserved:
            raise ConfigurationError(
                f"error_indicator_key {self.error_indicator_key!r} conflicts with the logger's core fields"
            )


__all__ = [
    "CORE_FIELDS",
    "ConfigurationError",
    "DEFAULT_ERROR_INDICATOR_KEY",
    "DEFAULT_PAYLOAD_KEY",
    "WrapOptions",
]
