"""Caller-facing logger owning a root :class:`Entry`.

Purpose
-------
Give host code one object per backend handle and context. The logger forwards
every entry operation to its root entry explicitly and adds the lazy
``*_fn`` variants, whose producer is only called when the level is enabled.

Contents
--------
* :data:`LogFunction` – zero-argument producer returning values to log.
* :class:`Logger` – root entry owner.
* :func:`new` / :func:`new_entry` – construction helpers.
"""

from __future__ import annotations

import contextvars
from typing import Any, Callable, NoReturn, Sequence

from lib_log_leveled.application import exit as exit_module
from lib_log_leveled.application.entry import Entry, LevelMethods, entry_of
from lib_log_leveled.application.ports.backend import BackendPort
from lib_log_leveled.domain.attrs import Attr, Fields
from lib_log_leveled.domain.errors import PanicError
from lib_log_leveled.domain.levels import Level

LogFunction = Callable[[], Sequence[Any]]


def _failure_reporting(fn: LogFunction) -> LogFunction:
    """Wrap ``fn`` so a failing producer yields a description instead of raising."""

    def produce() -> Sequence[Any]:
        try:
            return fn()
        except Exception as exc:
            return ("log function failed: ", exc)

    return produce


class Logger(LevelMethods):
    """Owner of exactly one root :class:`Entry`.

    The logger is never mutated after construction; customisation happens by
    deriving entries (``logger.with_field(...)`` returns an :class:`Entry`).

    Examples
    --------
    >>> class Quiet:
    ...     def bind(self, *attrs):
    ...         return self
    ...     def enabled(self, context, severity):
    ...         return False
    ...     def log(self, context, severity, message):
    ...         raise AssertionError("disabled")
    >>> logger = new(None, Quiet())
    >>> logger.info_fn(lambda: 1 / 0)
    >>> logger.with_field("k", "v").fields
    (Attr(key='k', value='v'),)
    """

    __slots__ = ("_entry",)

    def __init__(self, entry: Entry) -> None:
        self._entry = entry

    @classmethod
    def create(cls, context: contextvars.Context | None, backend: BackendPort) -> "Logger":
        return cls(entry_of(context, backend))

    @property
    def entry(self) -> Entry:
        """Root entry; usable wherever an :class:`Entry` is expected."""
        return self._entry

    @property
    def backend(self) -> BackendPort:
        return self._entry.backend

    @property
    def context(self) -> contextvars.Context:
        return self._entry.context

    @property
    def fields(self) -> tuple[Attr, ...]:
        return self._entry.fields

    def backend_handle(self) -> BackendPort:
        return self._entry.backend_handle()

    # Derivations return entries.

    def dup(self) -> Entry:
        return self._entry.dup()

    def with_field(self, key: str, value: Any) -> Entry:
        return self._entry.with_field(key, value)

    def with_fields(self, fields: Fields) -> Entry:
        return self._entry.with_fields(fields)

    def with_error(self, err: BaseException) -> Entry:
        return self._entry.with_error(err)

    def with_context(self, context: contextvars.Context) -> Entry:
        return self._entry.with_context(context)

    # Emission primitives

    def is_level_enabled(self, level: Level) -> bool:
        return self._entry.is_level_enabled(level)

    def log(self, level: Level, *args: Any) -> None:
        self._entry.log(level, *args)

    def logf(self, level: Level, format_string: str, *args: Any) -> None:
        self._entry.logf(level, format_string, *args)

    def logln(self, level: Level, *args: Any) -> None:
        self._entry.logln(level, *args)

    # Lazy family

    def log_fn(self, level: Level, fn: LogFunction) -> None:
        """Call ``fn`` and log its values only when ``level`` is enabled."""
        if self.is_level_enabled(level):
            self.log(level, *fn())

    def trace_fn(self, fn: LogFunction) -> None:
        self.log_fn(Level.TRACE, fn)

    def debug_fn(self, fn: LogFunction) -> None:
        self.log_fn(Level.DEBUG, fn)

    def info_fn(self, fn: LogFunction) -> None:
        self.log_fn(Level.INFO, fn)

    def print_fn(self, fn: LogFunction) -> None:
        self.info_fn(fn)

    def warn_fn(self, fn: LogFunction) -> None:
        self.log_fn(Level.WARN, fn)

    def warning_fn(self, fn: LogFunction) -> None:
        self.warn_fn(fn)

    def error_fn(self, fn: LogFunction) -> None:
        self.log_fn(Level.ERROR, fn)

    def fatal_fn(self, fn: LogFunction) -> NoReturn:
        """Log ``fn``'s values at FATAL when enabled, then terminate.

        A producer that raises is reported in the fatal record itself.
        """
        try:
            self.log_fn(Level.FATAL, _failure_reporting(fn))
        finally:
            exit_module.exit_process(exit_module.FATAL_EXIT_CODE)

    def panic_fn(self, fn: LogFunction) -> NoReturn:
        """Log ``fn``'s values at PANIC when enabled, then raise :class:`PanicError`."""
        self.log_fn(Level.PANIC, fn)
        raise PanicError(fn)


def new(context: contextvars.Context | None, backend: BackendPort) -> Logger:
    """Return a :class:`Logger` for ``backend``; ``None`` selects the background context."""

    return Logger.create(context, backend)


def new_entry(logger: Logger) -> Entry:
    """Return the root entry of ``logger``."""

    return logger.entry


__all__ = ["LogFunction", "Logger", "new", "new_entry"]
