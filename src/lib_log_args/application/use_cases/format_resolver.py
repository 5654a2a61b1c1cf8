"""Render printf-style templates passed as the first argument.

Purpose
-------
Recognise ``log.info("user %s logged in", name)`` style calls and render the
template with Python's ``%`` operator. A template whose rendering leaves it
unchanged is not a template at all and is handled as a plain string.

Contents
--------
* :class:`Resolution` – rendered message plus the caller-visible surplus.
* :class:`FormatResolver` – stateless resolver.
"""

from __future__ import annotations

import re
from collections.abc import Mapping, Sequence
from dataclasses import dataclass
from typing import Any

FORMAT_MARKER = "%"

_DIRECTIVE = re.compile(
    r"%(?P<key>\([^)]*\))?[#0\- +]*\d*(?:\.\d+)?[hlL]?[diouxXeEfFgGcrsa%]",
)
# printf conversion specifiers without "*" widths, which would consume extra arguments.


@dataclass(slots=True, frozen=True)
class Resolution:
    """Rendered template and the value the wrapped method returns."""

    message: str
    surplus: Any


def safe_str(value: Any) -> str:
    try:
        return str(value)
    except Exception:
        return object.__repr__(value)


def _render_strict(template: str, args: Sequence[Any]) -> str:
    if len(args) == 1 and isinstance(args[0], Mapping) and "%(" in template:
        return template % args[0]
    return template % tuple(args)


def _render_leniently(template: str, args: Sequence[Any]) -> tuple[str, bool]:
    """Substitute directives one at a time, never raising.

    Directives without a matching argument, or whose conversion rejects the
    next argument, stay in place; arguments without a directive are appended,
    separated by spaces. The flag tells whether any directive was substituted.

    Examples
    --------
    >>> _render_leniently("%s and %s", ["one"])
    ('one and %s', True)
    >>> _render_leniently("%d items", ["many", "extra"])
    ('%d items many extra', False)
    >>> _render_leniently("%d of %s", ["many"])
    ('%d of many', True)
    >>> _render_leniently("at 50%", ["now"])
    ('at 50% now', False)
    """

    remaining = list(args)
    substituted = False

    def substitute(match: re.Match[str]) -> str:
        nonlocal substituted
        directive = match.group(0)
        if directive == "%%":
            substituted = True
            return "%"
        if match.group("key") is not None or not remaining:
            return directive
        try:
            text = directive % (remaining[0],)
        except Exception:
            return directive
        remaining.pop(0)
        substituted = True
        return text

    rendered = _DIRECTIVE.sub(substitute, template)
    if remaining:
        rendered = " ".join([rendered, *(safe_str(value) for value in remaining)])
    return rendered, substituted


class FormatResolver:
    """Detect and render printf-style templates.

    Examples
    --------
    >>> resolver = FormatResolver()
    >>> resolver.resolve("value %s", ("x",))
    Resolution(message='value x', surplus='x')
    >>> resolver.resolve("%(user)s left", ({"user": "ann"},)).message
    'ann left'
    >>> resolver.resolve("50% off", ()) is None
    True
    """

    @staticmethod
    def is_candidate(template: str) -> bool:
        return FORMAT_MARKER in template

    def resolve(self, template: str, rest: Sequence[Any]) -> Resolution | None:
        """Return the rendering, or ``None`` when ``template`` is not a format string.

        A template counts as a format string only when at least one directive
        was substituted. ``surplus`` is the single trailing argument when
        exactly one was given, the template itself when none were given, otherwise
        the list of all trailing arguments.
        """

        if not self.is_candidate(template):
            return None
        try:
            message = _render_strict(template, rest)
            substituted = message != template
        except Exception:
            message, substituted = _render_leniently(template, rest)
        if not substituted:
            return None
        if not rest:
            return Resolution(message=message, surplus=template)
        surplus = rest[0] if len(rest) == 1 else list(rest)
        return Resolution(message=message, surplus=surplus)


__all__ = ["FORMAT_MARKER", "FormatResolver", "Resolution", "safe_str"]
