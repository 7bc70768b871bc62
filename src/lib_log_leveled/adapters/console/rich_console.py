"""Rich-powered console handler for records emitted through :class:`StdlibBackend`.

Purpose
-------
Give the stdlib backend a human-facing sink: Rich renders level, time and
message while :class:`FieldsFormatter` appends the bound attributes.

Contents
--------
* :data:`_STYLE_MAP` - Rich theme entries for the extra TRACE/PANIC levels.
* :class:`FieldsFormatter` - appends ``key=value`` pairs to the message.
* :func:`create_console_handler` - handler factory used by the runtime.

System Role
-----------
Edge adapter only; the façade never depends on it.
"""

from __future__ import annotations

import logging
from typing import Any, Mapping

from rich.console import Console
from rich.logging import RichHandler
from rich.theme import Theme

from lib_log_leveled.adapters.stdlib import FIELDS_ATTRIBUTE


#: Theme additions so Rich colours the levels it does not know.
_STYLE_MAP: Mapping[str, str] = {
    "logging.level.trace": "dim",
    "logging.level.panic": "bold white on red",
}


def _format_value(value: Any) -> str:
    if isinstance(value, str) and (" " in value or not value):
        return repr(value)
    return str(value)


class FieldsFormatter(logging.Formatter):
    """Append the record's bound attributes as ``key=value`` pairs in attachment order.

    Examples
    --------
    >>> record = logging.LogRecord("svc", logging.INFO, __file__, 1, "ready", None, None)
    >>> record.fields = (("user", "alice"), ("attempt", 2))
    >>> FieldsFormatter().format(record)
    'ready user=alice attempt=2'
    """

    def format(self, record: logging.LogRecord) -> str:
        message = super().format(record)
        pairs = getattr(record, FIELDS_ATTRIBUTE, ())
        if not pairs:
            return message
        rendered = " ".join(f"{key}={_format_value(value)}" for key, value in pairs)
        return f"{message} {rendered}"


def create_console_handler(
    *,
    console: Console | None = None,
    force_color: bool = False,
    no_color: bool = False,
    level: int = logging.NOTSET,
) -> RichHandler:
    """Return a :class:`RichHandler` rendering bound attributes.

    Parameters
    ----------
    console:
        Optional pre-built console (tests pass ``Console(record=True)``). When
        omitted a console honouring the colour switches is created.
    force_color, no_color:
        Colour overrides for the created console; ignored when ``console`` is
        supplied.
    level:
        Handler threshold.
    """

    if console is None:
        console = Console(
            force_terminal=True if force_color else None,
            no_color=no_color,
            theme=Theme(dict(_STYLE_MAP)),
        )
    handler = RichHandler(console=console, level=level, show_path=False, markup=False, rich_tracebacks=True)
    handler.setFormatter(FieldsFormatter("%(message)s"))
    return handler


__all__ = ["FieldsFormatter", "create_console_handler"]
