"""Leveled, structured-logging façade with immutable field chaining.

Host code builds a :class:`Logger` over a backend handle, derives immutable
:class:`Entry` values by attaching fields, errors or a context, and emits
records through level-named methods (``info``, ``infof``, ``infoln``,
``info_fn``). The stdlib/Rich adapters give a working backend out of the box;
any object satisfying :class:`BackendPort` can replace them.
"""

from __future__ import annotations

from .adapters import FieldsFormatter, StdlibBackend, create_console_handler
from .application import (
    Entry,
    LogFunction,
    Logger,
    background_context,
    clear_exit_handlers,
    defer_exit_handler,
    entry_of,
    exit_process,
    get_error_key,
    new,
    new_entry,
    register_exit_handler,
    set_error_key,
)
from .application.ports import BackendPort
from .domain import Attr, Fields, Level, PanicError, all_levels
from .runtime import new_console_logger

__all__ = [
    "Attr",
    "BackendPort",
    "Entry",
    "Fields",
    "FieldsFormatter",
    "Level",
    "LogFunction",
    "Logger",
    "PanicError",
    "StdlibBackend",
    "all_levels",
    "background_context",
    "clear_exit_handlers",
    "create_console_handler",
    "defer_exit_handler",
    "entry_of",
    "exit_process",
    "get_error_key",
    "new",
    "new_console_logger",
    "new_entry",
    "register_exit_handler",
    "set_error_key",
]
