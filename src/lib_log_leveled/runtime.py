"""Composition helpers wiring the façade to the reference adapters.

Purpose
-------
Offer a one-call setup for scripts and the CLI: a stdlib logger with a Rich
console handler, wrapped in :class:`StdlibBackend`, owned by a
:class:`Logger`.

Contents
--------
* :func:`configure_stdlib_logger` – threshold + console handler installation.
* :func:`new_console_logger` – composition root returning a :class:`Logger`.
"""

from __future__ import annotations

import contextvars
import logging

from rich.console import Console

from lib_log_leveled.adapters.console.rich_console import create_console_handler
from lib_log_leveled.adapters.stdlib import StdlibBackend
from lib_log_leveled.application.logger import Logger, new
from lib_log_leveled.config import ConsoleSettings, load_console_settings

_HANDLER_MARKER = "_lib_log_leveled_console"


def configure_stdlib_logger(settings: ConsoleSettings, *, console: Console | None = None) -> logging.Logger:
    """Return the stdlib logger named in ``settings`` with one Rich console handler.

    A handler installed by an earlier call is replaced, so repeated calls do
    not duplicate output.
    """

    target = logging.getLogger(settings.logger_name)
    target.setLevel(settings.level.to_backend())
    target.propagate = False
    for existing in list(target.handlers):
        if getattr(existing, _HANDLER_MARKER, False):
            target.removeHandler(existing)
    handler = create_console_handler(
        console=console,
        force_color=settings.force_color,
        no_color=settings.no_color,
    )
    setattr(handler, _HANDLER_MARKER, True)
    target.addHandler(handler)
    return target


def new_console_logger(
    settings: ConsoleSettings | None = None,
    *,
    context: contextvars.Context | None = None,
    console: Console | None = None,
) -> Logger:
    """Build a :class:`Logger` writing to a Rich console.

    Parameters
    ----------
    settings:
        Resolved settings; ``None`` resolves them from the environment via
        :func:`lib_log_leveled.config.load_console_settings`.
    context:
        Context carried by the root entry; ``None`` selects the background
        context.
    console:
        Optional Rich console (tests pass a recording console).

    Examples
    --------
    >>> from io import StringIO
    >>> console = Console(file=StringIO(), record=True, width=120)
    >>> logger = new_console_logger(ConsoleSettings(logger_name="doctest.runtime"), console=console)
    >>> logger.with_field("user", "alice").info("ready")
    >>> "ready user=alice" in console.export_text()
    True
    """

    resolved = settings if settings is not None else load_console_settings()
    stdlib_logger = configure_stdlib_logger(resolved, console=console)
    return new(context, StdlibBackend(stdlib_logger))


__all__ = ["configure_stdlib_logger", "new_console_logger"]
