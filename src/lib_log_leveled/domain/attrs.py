"""Structured attribute value object carried by entries and backends."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Mapping


Fields = Mapping[str, Any]
"""Mapping accepted by :meth:`Entry.with_fields`."""


@dataclass(slots=True, frozen=True)
class Attr:
    """Immutable ``key``/``value`` pair bound to a backend handle.

    The value is stored as given; stringification is left to the backend at
    formatting time.
    """

    key: str
    value: Any

    def as_pair(self) -> tuple[str, Any]:
        """Return the attribute as a plain ``(key, value)`` tuple."""

        return (self.key, self.value)


def attrs_from_mapping(fields: Fields) -> tuple[Attr, ...]:
    """Convert ``fields`` into attributes in the mapping's iteration order.

    Examples
    --------
    >>> attrs_from_mapping({"user": "alice"})
    (Attr(key='user', value='alice'),)
    """

    return tuple(Attr(key, value) for key, value in fields.items())


__all__ = ["Attr", "Fields", "attrs_from_mapping"]
