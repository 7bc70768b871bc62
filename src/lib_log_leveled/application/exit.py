"""Exit handlers and the termination request issued by Fatal paths.

Purpose
-------
Fatal level methods must end the process after their record is forwarded.
:func:`exit_process` runs the registered handlers, then raises
:class:`SystemExit` on the main thread (so tests can intercept it). On any
other thread ``SystemExit`` would only end that thread, so logging is flushed
and the process is terminated with :func:`os._exit`.

Contents
--------
* :func:`register_exit_handler` / :func:`defer_exit_handler` – registry
  mutators (append / prepend).
* :func:`run_exit_handlers` – invoke every handler, isolating failures.
* :func:`exit_process` – run handlers then request termination.
* :func:`clear_exit_handlers` – reset the registry.
"""

from __future__ import annotations

import logging
import os
import sys
import threading
from typing import Callable, NoReturn

logger = logging.getLogger(__name__)

ExitHandler = Callable[[], None]

FATAL_EXIT_CODE = 1
"""Status used by every Fatal variant."""

_HANDLERS: list[ExitHandler] = []
_HANDLERS_LOCK = threading.RLock()


def register_exit_handler(handler: ExitHandler) -> None:
    """Run ``handler`` (after those already registered) before a Fatal exit."""

    with _HANDLERS_LOCK:
        _HANDLERS.append(handler)


def defer_exit_handler(handler: ExitHandler) -> None:
    """Run ``handler`` before every already registered handler."""

    with _HANDLERS_LOCK:
        _HANDLERS.insert(0, handler)


def clear_exit_handlers() -> None:
    """Remove all registered handlers."""

    with _HANDLERS_LOCK:
        _HANDLERS.clear()


def run_exit_handlers() -> None:
    """Invoke every handler in order; a failing handler does not stop the rest."""

    with _HANDLERS_LOCK:
        handlers = tuple(_HANDLERS)
    for handler in handlers:
        try:
            handler()
        except Exception:
            logger.exception("exit handler %r failed", handler)


def exit_process(code: int = FATAL_EXIT_CODE) -> NoReturn:
    """Run the exit handlers, then terminate the process with ``code``.

    The main thread raises :class:`SystemExit`; worker threads flush logging
    and call :func:`os._exit`, skipping the interpreter's own cleanup.
    """

    run_exit_handlers()
    if threading.current_thread() is threading.main_thread():
        sys.exit(code)
    logging.shutdown()
    for stream in (sys.stdout, sys.stderr):
        if stream is not None:
            stream.flush()
    os._exit(code)


__all__ = [
    "ExitHandler",
    "FATAL_EXIT_CODE",
    "clear_exit_handlers",
    "defer_exit_handler",
    "exit_process",
    "register_exit_handler",
    "run_exit_handlers",
]
