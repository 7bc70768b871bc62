"""Message rendering for the three call-shape families.

Purpose
-------
Turn the positional values handed to a level method into the single message
string forwarded to the backend.

Contents
--------
* :func:`to_text` – uniform default stringification of one value.
* :func:`render_direct` – plain concatenation (``info``/``log`` family).
* :func:`render_line` – space-joined values (``infoln``/``logln`` family).
* :func:`render_format` – printf-style substitution (``infof``/``logf`` family).

System Role
-----------
Pure functions used by :class:`lib_log_leveled.application.entry.Entry`; they
never touch the backend and never raise for well-behaved values.
"""

from __future__ import annotations

from collections.abc import Sequence
from functools import singledispatch
from typing import Any


@singledispatch
def to_text(value: Any) -> str:
    """Return the default textual form of ``value``.

    Examples
    --------
    >>> [to_text(v) for v in ("a", 1, 2.5, True, None)]
    ['a', '1', '2.5', 'true', 'None']
    """

    return str(value)


@to_text.register
def _(value: str) -> str:
    return value


@to_text.register
def _(value: bool) -> str:
    return "true" if value else "false"


@to_text.register
def _(value: bytes) -> str:
    return value.decode("utf-8", errors="replace")


@to_text.register
def _(value: BaseException) -> str:
    return str(value) or type(value).__name__


def render_direct(values: Sequence[Any]) -> str:
    """Concatenate the textual forms of ``values`` without separators.

    >>> render_direct(("a", "b"))
    'ab'
    """

    return "".join(to_text(value) for value in values)


def render_line(values: Sequence[Any]) -> str:
    """Join the textual forms of ``values`` with a single space.

    >>> render_line(("a", 1, True))
    'a 1 true'
    """

    return " ".join(to_text(value) for value in values)


def render_format(format_string: str, values: Sequence[Any]) -> str:
    """Apply printf-style substitution of ``values`` into ``format_string``.

    A mismatch between the format and its values degrades into a marked
    message instead of raising, so the record is still emitted.

    Examples
    --------
    >>> render_format("%d-%s", (7, "x"))
    '7-x'
    >>> render_format("%d", ("x",)).startswith("%d !(BADFORMAT")
    True
    """

    try:
        return format_string % tuple(values)
    except (TypeError, ValueError, KeyError) as exc:
        suffix = render_line(values)
        marked = f"{format_string} !(BADFORMAT {exc})"
        return f"{marked} {suffix}" if suffix else marked


__all__ = ["render_direct", "render_format", "render_line", "to_text"]
