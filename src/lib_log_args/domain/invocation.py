"""Value objects describing one call to a wrapped level method."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass, field
from typing import Any


@dataclass(slots=True, frozen=True)
class Invocation:
    """Positional arguments of a level call split into ``head`` and ``rest``.

    Examples
    --------
    >>> Invocation.from_args(("a", "b", "c")).rest
    ('b', 'c')
    >>> Invocation.from_args(()).head is None
    True
    """

    head: Any = None
    rest: tuple[Any, ...] = ()

    @classmethod
    def from_args(cls, args: Sequence[Any]) -> "Invocation":
        if not args:
            return cls()
        return cls(head=args[0], rest=tuple(args[1:]))


@dataclass(slots=True)
class NormalizedCall:
    """Outcome of normalisation handed to the original write method.

    Attributes
    ----------
    fields:
        Structured record fields; always a fresh ``dict``.
    message:
        Rendered message, or ``None`` when the record carries a payload only.
    result:
        Value returned to the caller of the wrapped method.
    """

    fields: dict[str, Any] = field(default_factory=dict)
    message: str | None = None
    result: Any = None

    def write_args(self) -> tuple[Any, ...]:
        """Return the positional arguments for the original write method."""

        if self.message is None:
            return (self.fields,)
        return (self.fields, self.message)


__all__ = ["Invocation", "NormalizedCall"]
