"""Leveled severities and their translation into backend severities.

Purpose
-------
Offer the seven named severities of the leveled calling convention (with
``WARNING`` as an alias of ``WARN``) and a fixed, order-preserving mapping into
the stdlib :mod:`logging` integer space used by structured backends.

Contents
--------
* :class:`Level` enum with conversion helpers and presentation metadata.
* ``_BACKEND_TABLE`` constant mapping levels to backend severities.
* :func:`register_level_names` installing ``TRACE``/``PANIC`` in :mod:`logging`.

System Role
-----------
Every emission path of :class:`lib_log_leveled.application.entry.Entry` asks
this module for the backend severity, so the mapping is the single place where
the façade meets the backend's level model.
"""

from __future__ import annotations

import logging
from enum import Enum
from functools import total_ordering


TRACE_LEVEL_NUM = 5
"""Backend severity for :attr:`Level.TRACE` (below ``logging.DEBUG``)."""

PANIC_LEVEL_NUM = 60
"""Backend severity for :attr:`Level.PANIC` (above ``logging.CRITICAL``)."""


@total_ordering
class Level(Enum):
    """Enumerated severities, most severe first; compared by backend severity.

    >>> Level.TRACE < Level.DEBUG < Level.INFO < Level.WARN < Level.ERROR < Level.FATAL < Level.PANIC
    True
    """

    PANIC = 0
    FATAL = 1
    ERROR = 2
    WARN = 3
    WARNING = 3
    INFO = 4
    DEBUG = 5
    TRACE = 6

    @property
    def severity(self) -> str:
        """Return the lowercase severity name for structured payloads."""

        return "warning" if self is Level.WARN else self.name.lower()

    @property
    def icon(self) -> str:
        """Return the unicode icon visualizing the level on colored consoles."""

        return _ICON_TABLE[self]

    @property
    def code(self) -> str:
        """Return the four-letter code used in compact console layouts."""

        return _CODE_TABLE[self]

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, Level):
            return NotImplemented
        return self.to_backend() < other.to_backend()

    def to_backend(self) -> int:
        """Return the backend severity matching this level.

        Examples
        --------
        >>> Level.INFO.to_backend()
        20
        >>> Level.WARNING.to_backend() == Level.WARN.to_backend()
        True
        """

        return _BACKEND_TABLE[self]

    def to_python_level(self) -> int:
        """Return the :mod:`logging` constant matching this level."""

        return self.to_backend()

    @classmethod
    def from_name(cls, name: str) -> "Level":
        normalized = name.strip().upper()
        try:
            return cls[normalized]
        except KeyError as exc:
            raise ValueError(f"Unknown log level: {name!r}") from exc

    @classmethod
    def from_backend(cls, severity: int) -> "Level":
        """Translate a backend severity back into a :class:`Level`."""
        for level, number in _BACKEND_TABLE.items():
            if number == severity:
                return level
        raise ValueError(f"Unsupported log level numeric: {severity}")


_BACKEND_TABLE = {
    Level.TRACE: TRACE_LEVEL_NUM,
    Level.DEBUG: logging.DEBUG,
    Level.INFO: logging.INFO,
    Level.WARN: logging.WARNING,
    Level.ERROR: logging.ERROR,
    Level.FATAL: logging.CRITICAL,
    Level.PANIC: PANIC_LEVEL_NUM,
}
# Strictly increasing from TRACE to PANIC.

_ICON_TABLE = {
    Level.TRACE: "·",
    Level.DEBUG: "🐞",
    Level.INFO: "ℹ",
    Level.WARN: "⚠",
    Level.ERROR: "✖",
    Level.FATAL: "☠",
    Level.PANIC: "💥",
}

_CODE_TABLE = {
    Level.TRACE: "TRAC",
    Level.DEBUG: "DEBG",
    Level.INFO: "INFO",
    Level.WARN: "WARN",
    Level.ERROR: "ERRO",
    Level.FATAL: "FATL",
    Level.PANIC: "PANC",
}


def all_levels() -> tuple[Level, ...]:
    """Return every level once, most severe first."""

    return tuple(Level)


def register_level_names() -> None:
    """Make ``TRACE`` and ``PANIC`` known to :func:`logging.getLevelName`."""

    logging.addLevelName(TRACE_LEVEL_NUM, "TRACE")
    logging.addLevelName(PANIC_LEVEL_NUM, "PANIC")


__all__ = ["Level", "PANIC_LEVEL_NUM", "TRACE_LEVEL_NUM", "all_levels", "register_level_names"]
