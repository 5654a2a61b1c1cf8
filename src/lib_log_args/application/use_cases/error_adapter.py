"""Turn exceptions into plain record fragments.

Purpose
-------
Exceptions are not structured data. This module converts them into plain
dictionaries, preferring a serializer registered on the wrapped logger and
falling back to the exception's own attributes otherwise.

Contents
--------
* :class:`ErrorAdapter` – converter bound to one logger.
* :func:`describe_exception` – serializer-free fallback.
"""

from __future__ import annotations

import logging
import traceback
from typing import Any

from lib_log_args.application.ports.logger import ERROR_SERIALIZER, LeveledLoggerPort

from .format_resolver import safe_str

logger = logging.getLogger(__name__)


def describe_exception(error: BaseException) -> dict[str, Any]:
    """Return ``message``, ``stack``, every instance attribute, and ``name``.

    Instance attributes (e.g. an application ``code``) override ``message``
    and ``stack`` when they share a key; ``name`` is always the type name.

    Examples
    --------
    >>> err = KeyError("missing")
    >>> err.code = "E_MISSING"
    >>> fragment = describe_exception(err)
    >>> fragment["name"], fragment["code"], fragment["message"]
    ('KeyError', 'E_MISSING', "'missing'")
    >>> fragment["stack"].strip()
    "KeyError: 'missing'"
    """

    fragment: dict[str, Any] = {
        "message": safe_str(error),
        "stack": "".join(traceback.format_exception(type(error), error, error.__traceback__)),
    }
    try:
        fragment.update(vars(error))
    except Exception:
        logger.debug("attributes of %s are not enumerable", type(error).__name__, exc_info=True)
    fragment["name"] = type(error).__name__
    return fragment


class ErrorAdapter:
    """Convert exceptions into record fragments for one logger."""

    def __init__(self, logger: LeveledLoggerPort) -> None:
        self._logger = logger

    def to_fragment(self, error: BaseException) -> Any:
        """Return the serializer's output, or :func:`describe_exception` without one.

        A failing serializer is reported on this module's logger and the
        fallback fragment is used instead, so the call always yields a value.
        """

        serializer = self._logger.serializer(ERROR_SERIALIZER)
        if serializer is None:
            return describe_exception(error)
        try:
            return serializer(error)
        except Exception:
            logger.warning("error serializer failed; using attribute fallback", exc_info=True)
            return describe_exception(error)


__all__ = ["ErrorAdapter", "describe_exception"]
