"""Application layer: entries, loggers and termination handling."""

from __future__ import annotations

from .exit import clear_exit_handlers, defer_exit_handler, exit_process, register_exit_handler
from .entry import Entry, LevelMethods, background_context, entry_of, get_error_key, set_error_key
from .logger import LogFunction, Logger, new, new_entry

__all__ = [
    "Entry",
    "LevelMethods",
    "LogFunction",
    "Logger",
    "background_context",
    "clear_exit_handlers",
    "defer_exit_handler",
    "entry_of",
    "exit_process",
    "get_error_key",
    "new",
    "new_entry",
    "register_exit_handler",
    "set_error_key",
]
