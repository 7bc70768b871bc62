"""Demo and diagnostic helpers backing the CLI.

Purpose
-------
Keep the command-line layer thin: the metadata banner, the deterministic
failure used to exercise exit-code mapping, and :func:`logdemo`, which pushes
sample records through every non-terminal level of the three call-shape
families.

Contents
--------
* :func:`summary_info` – metadata banner as a string.
* :func:`i_should_fail` – raises ``RuntimeError("I should fail")``.
* :func:`logdemo` – emit sample records to a Rich console.
"""

from __future__ import annotations

from typing import Any, Mapping

from rich.console import Console

from .config import ConsoleSettings, coerce_level
from .domain.levels import Level
from .runtime import new_console_logger


_DEMO_LEVELS = (Level.TRACE, Level.DEBUG, Level.INFO, Level.WARN, Level.ERROR)
# FATAL and PANIC are left out: they terminate or unwind.


def i_should_fail() -> None:
    """Intentionally raise ``RuntimeError`` to test error propagation paths.

    Examples
    --------
    >>> i_should_fail()
    Traceback (most recent call last):
    ...
    RuntimeError: I should fail
    """

    raise RuntimeError("I should fail")


def summary_info() -> str:
    """Return the metadata banner used by the CLI entry point.

    >>> "version" in summary_info()
    True
    """
    from . import __init__conf__

    lines: list[str] = []

    def _capture(text: str) -> None:
        lines.append(text)

    __init__conf__.print_info(writer=_capture)
    return "".join(lines)


def logdemo(
    *,
    level: str | Level = Level.TRACE,
    fields: Mapping[str, Any] | None = None,
    console: Console | None = None,
    force_color: bool = False,
    no_color: bool = False,
) -> dict[str, Any]:
    """Emit one record per level and family and report what was let through.

    Parameters
    ----------
    level:
        Threshold of the temporary console logger.
    fields:
        Extra attributes bound to every demo record.
    console:
        Optional Rich console (tests pass a recording console).
    force_color, no_color:
        Colour overrides for the console created when ``console`` is omitted.

    Returns
    -------
    dict[str, Any]
        ``level`` (threshold name), ``emitted`` (records let through),
        ``skipped`` (levels below the threshold) and ``fields``.
    """

    threshold = coerce_level(level)
    settings = ConsoleSettings(
        level=threshold,
        logger_name="lib_log_leveled.logdemo",
        force_color=force_color,
        no_color=no_color,
    )
    logger = new_console_logger(settings, console=console)
    entry = logger.with_fields(dict(fields or {})).with_field("demo", "logdemo")

    emitted = 0
    skipped: list[str] = []
    for current in _DEMO_LEVELS:
        if not entry.is_level_enabled(current):
            skipped.append(current.severity)
            continue
        entry.log(current, "direct ", current.severity, " message")
        entry.logf(current, "formatted %s message #%d", current.severity, 2)
        entry.logln(current, "line", current.severity, "message", True)
        emitted += 3
    logger.info_fn(lambda: ("lazy message after ", emitted, " records"))
    if logger.is_level_enabled(Level.INFO):
        emitted += 1

    return {
        "level": threshold.severity,
        "emitted": emitted,
        "skipped": skipped,
        "fields": dict(fields or {}),
    }


__all__ = ["i_should_fail", "logdemo", "summary_info"]
