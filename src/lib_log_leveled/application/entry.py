"""Immutable log entries: field chaining and level dispatch.

Purpose
-------
Provide the core of the leveled façade. An :class:`Entry` snapshots the
attributes attached so far, the request-scoped context, and a backend handle
already bound with those attributes. Derivations return new entries; emission
methods render a message and forward exactly one record to the backend.

Contents
--------
* :data:`ERROR_KEY` – attribute key used by :meth:`Entry.with_error`; change it
  with :func:`set_error_key` and read it with :func:`get_error_key`.
* :class:`LevelMethods` – level-named wrappers for the Direct (``info``),
  Formatted (``infof``) and Line (``infoln``) families, including the Fatal and
  Panic side effects.
* :class:`Entry` – the frozen entry dataclass.
* :func:`entry_of` – root entry construction.

System Role
-----------
:class:`lib_log_leveled.application.logger.Logger` owns a root entry and
forwards to it; every record of the system goes through :meth:`Entry._emit`.
"""

from __future__ import annotations

import contextvars
from dataclasses import dataclass, replace
from typing import Any, NoReturn

from lib_log_leveled.application import exit as exit_module
from lib_log_leveled.application.ports.backend import BackendPort
from lib_log_leveled.domain.attrs import Attr, Fields, attrs_from_mapping
from lib_log_leveled.domain.errors import PanicError
from lib_log_leveled.domain.levels import Level
from lib_log_leveled.domain.rendering import render_direct, render_format, render_line


ERROR_KEY = "error"
"""Attribute key used by :meth:`Entry.with_error`; read at call time."""


def set_error_key(key: str) -> None:
    """Change the attribute key used for errors attached via ``with_error``."""

    global ERROR_KEY
    ERROR_KEY = key


def get_error_key() -> str:
    """Return the attribute key currently used by ``with_error``.

    >>> get_error_key()
    'error'
    """

    return ERROR_KEY


def background_context() -> contextvars.Context:
    """Return an empty context, used when no context is supplied."""

    return contextvars.Context()


class LevelMethods:
    """Level-named wrappers over the ``log``/``logf``/``logln`` primitives.

    Subclasses provide the primitives and :meth:`is_level_enabled`; every
    wrapper below funnels into them, so side effects stay identical for
    entries and loggers.
    """

    __slots__ = ()

    def is_level_enabled(self, level: Level) -> bool:  # pragma: no cover - abstract
        raise NotImplementedError

    def log(self, level: Level, *args: Any) -> None:  # pragma: no cover - abstract
        raise NotImplementedError

    def logf(self, level: Level, format_string: str, *args: Any) -> None:  # pragma: no cover - abstract
        raise NotImplementedError

    def logln(self, level: Level, *args: Any) -> None:  # pragma: no cover - abstract
        raise NotImplementedError

    # Direct family

    def trace(self, *args: Any) -> None:
        self.log(Level.TRACE, *args)

    def debug(self, *args: Any) -> None:
        self.log(Level.DEBUG, *args)

    def info(self, *args: Any) -> None:
        self.log(Level.INFO, *args)

    def print(self, *args: Any) -> None:
        self.info(*args)

    def warn(self, *args: Any) -> None:
        self.log(Level.WARN, *args)

    def warning(self, *args: Any) -> None:
        self.warn(*args)

    def error(self, *args: Any) -> None:
        self.log(Level.ERROR, *args)

    def fatal(self, *args: Any) -> NoReturn:
        """Log at FATAL, then request process termination with status 1."""
        try:
            self.log(Level.FATAL, *args)
        finally:
            exit_module.exit_process(exit_module.FATAL_EXIT_CODE)

    def panic(self, *args: Any) -> NoReturn:
        """Log at PANIC, then raise :class:`PanicError` carrying ``args``."""
        self.log(Level.PANIC, *args)
        raise PanicError(args, render_direct(args))

    # Formatted family

    def tracef(self, format_string: str, *args: Any) -> None:
        self.logf(Level.TRACE, format_string, *args)

    def debugf(self, format_string: str, *args: Any) -> None:
        self.logf(Level.DEBUG, format_string, *args)

    def infof(self, format_string: str, *args: Any) -> None:
        self.logf(Level.INFO, format_string, *args)

    def printf(self, format_string: str, *args: Any) -> None:
        self.infof(format_string, *args)

    def warnf(self, format_string: str, *args: Any) -> None:
        self.logf(Level.WARN, format_string, *args)

    def warningf(self, format_string: str, *args: Any) -> None:
        self.warnf(format_string, *args)

    def errorf(self, format_string: str, *args: Any) -> None:
        self.logf(Level.ERROR, format_string, *args)

    def fatalf(self, format_string: str, *args: Any) -> NoReturn:
        """Log at FATAL when enabled; terminate the process in every case."""
        try:
            self.logf(Level.FATAL, format_string, *args)
        finally:
            exit_module.exit_process(exit_module.FATAL_EXIT_CODE)

    def panicf(self, format_string: str, *args: Any) -> None:
        """Log at PANIC and raise :class:`PanicError`, both only when PANIC is enabled."""
        if not self.is_level_enabled(Level.PANIC):
            return
        message = render_format(format_string, args)
        self.log(Level.PANIC, message)
        raise PanicError(args, message)

    # Line family

    def traceln(self, *args: Any) -> None:
        self.logln(Level.TRACE, *args)

    def debugln(self, *args: Any) -> None:
        self.logln(Level.DEBUG, *args)

    def infoln(self, *args: Any) -> None:
        self.logln(Level.INFO, *args)

    def println(self, *args: Any) -> None:
        self.infoln(*args)

    def warnln(self, *args: Any) -> None:
        self.logln(Level.WARN, *args)

    def warningln(self, *args: Any) -> None:
        self.warnln(*args)

    def errorln(self, *args: Any) -> None:
        self.logln(Level.ERROR, *args)

    def fatalln(self, *args: Any) -> NoReturn:
        """Log at FATAL when enabled; terminate the process in every case."""
        try:
            self.logln(Level.FATAL, *args)
        finally:
            exit_module.exit_process(exit_module.FATAL_EXIT_CODE)

    def panicln(self, *args: Any) -> None:
        """Log at PANIC when enabled.

        Unlike :meth:`panic` and :meth:`panicf` this does not raise
        :class:`PanicError`; callers relying on unwinding must use those.
        """
        self.logln(Level.PANIC, *args)


@dataclass(slots=True, frozen=True)
class Entry(LevelMethods):
    """Immutable snapshot of attributes, context and bound backend.

    Attributes
    ----------
    backend:
        Backend handle already bound with every attribute in ``fields``.
    context:
        Request-scoped :class:`contextvars.Context` handed to the backend with
        each record.
    fields:
        Attributes attached so far, in attachment order. Duplicate keys are
        kept; both are bound and both are sent.
    """

    backend: BackendPort
    context: contextvars.Context
    fields: tuple[Attr, ...] = ()

    @classmethod
    def create(cls, context: contextvars.Context | None, backend: BackendPort) -> "Entry":
        """Build a root entry; ``None`` selects the background context."""

        return entry_of(context, backend)

    def backend_handle(self) -> BackendPort:
        """Return the bound backend handle."""

        return self.backend

    def fields_dict(self) -> dict[str, Any]:
        """Return ``fields`` as a dict (later duplicates win); for inspection only."""

        return {attr.key: attr.value for attr in self.fields}

    # Derivations

    def dup(self) -> "Entry":
        """Return a shallow copy sharing the (immutable) handle, context and fields."""

        return replace(self)

    def _with_backend(self, backend: BackendPort) -> "Entry":
        return replace(self, backend=backend)

    def with_field(self, key: str, value: Any) -> "Entry":
        """Return a new entry with ``key=value`` bound and appended to ``fields``.

        Examples
        --------
        >>> class Echo:
        ...     def bind(self, *attrs):
        ...         return self
        >>> root = entry_of(None, Echo())
        >>> child = root.with_field("user", "alice")
        >>> child.fields, root.fields
        ((Attr(key='user', value='alice'),), ())
        """

        attr = Attr(key, value)
        derived = self._with_backend(self.backend.bind(attr))
        return replace(derived, fields=derived.fields + (attr,))

    def with_fields(self, fields: Fields) -> "Entry":
        """Return a new entry with every item of ``fields`` bound in one batch.

        The relative order of the new attributes follows the mapping's
        iteration order and must not be relied upon.
        """

        attrs = attrs_from_mapping(fields)
        if not attrs:
            return self.dup()
        return replace(self, backend=self.backend.bind(*attrs), fields=self.fields + attrs)

    def with_error(self, err: BaseException) -> "Entry":
        """Attach ``err`` itself under :data:`ERROR_KEY`."""

        return self.with_field(ERROR_KEY, err)

    def with_context(self, context: contextvars.Context) -> "Entry":
        """Return a new entry carrying ``context``; fields and backend are shared."""

        return replace(self, context=context)

    # Emission

    def is_level_enabled(self, level: Level) -> bool:
        return self.backend.enabled(self.context, level.to_backend())

    def _emit(self, level: Level, message: str) -> None:
        self.backend.log(self.context, level.to_backend(), message)

    def log(self, level: Level, *args: Any) -> None:
        """Concatenate ``args`` and forward; filtering is left to the backend."""
        self._emit(level, render_direct(args))

    def logf(self, level: Level, format_string: str, *args: Any) -> None:
        """Substitute ``args`` into ``format_string`` and forward, when enabled."""
        if self.is_level_enabled(level):
            self._emit(level, render_format(format_string, args))

    def logln(self, level: Level, *args: Any) -> None:
        """Space-join ``args`` and forward, when enabled."""
        if self.is_level_enabled(level):
            self._emit(level, render_line(args))


def entry_of(context: contextvars.Context | None, backend: BackendPort) -> Entry:
    """Return a root entry for ``backend``.

    >>> entry_of(None, object()).fields
    ()
    """

    if context is None:
        context = background_context()
    return Entry(backend=backend, context=context)


__all__ = ["ERROR_KEY", "Entry", "LevelMethods", "background_context", "entry_of", "get_error_key", "set_error_key"]
