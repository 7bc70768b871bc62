"""Backend adapter over a stdlib :class:`logging.Logger`.

Purpose
-------
Implement :class:`BackendPort` on top of the standard logging machinery so the
façade works with any handler/formatter configuration the host already has.

Contents
--------
* :data:`FIELDS_ATTRIBUTE` – name of the ``LogRecord`` attribute carrying the
  bound attributes.
* :class:`StdlibBackend` – immutable handle (logger + bound attributes).

System Role
-----------
Default collaborator wired by :func:`lib_log_leveled.runtime.new_console_logger`.
Filtering, formatting and writing stay with the stdlib logger and its handlers.
"""

from __future__ import annotations

import contextvars
import logging
import os
import sys

from lib_log_leveled.application.ports.backend import BackendPort
from lib_log_leveled.domain.attrs import Attr
from lib_log_leveled.domain.levels import register_level_names


FIELDS_ATTRIBUTE = "fields"
"""``LogRecord`` attribute holding the bound ``(key, value)`` pairs."""

_ADAPTERS_DIR = os.path.dirname(os.path.abspath(__file__))
_INTERNAL_PREFIXES = (
    _ADAPTERS_DIR + os.sep,
    os.path.join(os.path.dirname(_ADAPTERS_DIR), "application") + os.sep,
)


def _caller_stacklevel() -> int:
    """Return the ``stacklevel`` naming the first frame outside the façade.

    Level 1 is :meth:`StdlibBackend.log` itself; entry, logger and adapter
    frames above it are skipped so records carry the caller's location.
    """
    frame = sys._getframe(1)
    level = 1
    while frame is not None and frame.f_code.co_filename.startswith(_INTERNAL_PREFIXES):
        frame = frame.f_back
        level += 1
    return level


class StdlibBackend(BackendPort):
    """Bound view over ``logger``; :meth:`bind` never mutates the receiver.

    Examples
    --------
    >>> backend = StdlibBackend(logging.getLogger("doctest.stdlib"))
    >>> child = backend.bind(Attr("user", "alice"))
    >>> backend.attrs, child.attrs
    ((), (Attr(key='user', value='alice'),))
    """

    __slots__ = ("_logger", "_attrs")

    def __init__(self, logger: logging.Logger, attrs: tuple[Attr, ...] = ()) -> None:
        register_level_names()
        self._logger = logger
        self._attrs = tuple(attrs)

    @classmethod
    def from_name(cls, name: str) -> "StdlibBackend":
        """Return a backend for :func:`logging.getLogger` ``name``."""

        return cls(logging.getLogger(name))

    @property
    def logger(self) -> logging.Logger:
        return self._logger

    @property
    def attrs(self) -> tuple[Attr, ...]:
        return self._attrs

    def bind(self, *attrs: Attr) -> "StdlibBackend":
        return StdlibBackend(self._logger, self._attrs + attrs)

    def enabled(self, context: contextvars.Context, severity: int) -> bool:
        return self._logger.isEnabledFor(severity)

    def log(self, context: contextvars.Context, severity: int, message: str) -> None:
        """Emit through the stdlib logger inside a copy of ``context``.

        Running in a copy lets several threads emit through the same context
        at once, which :meth:`contextvars.Context.run` forbids for one object.
        """
        if not self._logger.isEnabledFor(severity):
            return
        extra = {FIELDS_ATTRIBUTE: tuple(attr.as_pair() for attr in self._attrs)}
        stacklevel = _caller_stacklevel()
        context.copy().run(self._logger.log, severity, message, extra=extra, stacklevel=stacklevel)


__all__ = ["FIELDS_ATTRIBUTE", "StdlibBackend"]
