"""Environment and ``.env`` configuration for the console runtime and CLI.

Purpose
-------
Collect the few knobs of the reference console setup (threshold, logger name,
colour switches) from call arguments and environment variables, and
optionally pre-load a ``.env`` file with python-dotenv.

Contents
--------
* Environment variable names (``LOG_LEVEL``, ``LOG_LOGGER_NAME``,
  ``LOG_FORCE_COLOR``, ``LOG_NO_COLOR``, :data:`DOTENV_ENV_VAR`).
* :func:`env_bool` – truthy-string parsing.
* :class:`ConsoleSettings` / :func:`load_console_settings` – resolved settings.
* :func:`enable_dotenv` – load the nearest ``.env`` without overriding the
  existing environment.

System Role
-----------
Consumed by :mod:`lib_log_leveled.runtime` and :mod:`lib_log_leveled.cli`; the
façade in :mod:`lib_log_leveled.application` never reads configuration.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path
from threading import RLock

from dotenv import find_dotenv, load_dotenv

from lib_log_leveled.domain.levels import Level


LEVEL_ENV_VAR = "LOG_LEVEL"
LOGGER_NAME_ENV_VAR = "LOG_LOGGER_NAME"
FORCE_COLOR_ENV_VAR = "LOG_FORCE_COLOR"
NO_COLOR_ENV_VAR = "LOG_NO_COLOR"
DOTENV_ENV_VAR = "LIB_LOG_LEVELED_USE_DOTENV"

DEFAULT_LOGGER_NAME = "lib_log_leveled"

_TRUTHY = {"1", "true", "yes", "on"}

_DOTENV_PATH: Path | None = None
_DOTENV_LOCK = RLock()


def env_bool(name: str, default: bool) -> bool:
    """Return the boolean value of an environment variable with fallback.

    Examples
    --------
    >>> import os
    >>> _ = os.environ.pop('LOG_EXAMPLE_BOOL', None)
    >>> env_bool('LOG_EXAMPLE_BOOL', default=True)
    True
    >>> os.environ['LOG_EXAMPLE_BOOL'] = '0'
    >>> env_bool('LOG_EXAMPLE_BOOL', default=True)
    False
    """
    value = os.getenv(name)
    if value is None or not value.strip():
        return default
    return value.strip().lower() in _TRUTHY


def coerce_level(level: str | Level) -> Level:
    """Return ``level`` as :class:`Level`, parsing names case-insensitively.

    >>> coerce_level("warning") is Level.WARN
    True
    """
    if isinstance(level, Level):
        return level
    return Level.from_name(level)


@dataclass(slots=True, frozen=True)
class ConsoleSettings:
    """Resolved settings for :func:`lib_log_leveled.runtime.new_console_logger`."""

    level: Level = Level.INFO
    logger_name: str = DEFAULT_LOGGER_NAME
    force_color: bool = False
    no_color: bool = False


def load_console_settings(
    *,
    level: str | Level | None = None,
    logger_name: str | None = None,
    force_color: bool | None = None,
    no_color: bool | None = None,
) -> ConsoleSettings:
    """Resolve settings: explicit arguments, then environment, then defaults.

    Raises
    ------
    ValueError
        When the level (argument or ``LOG_LEVEL``) names no known level.
    """

    defaults = ConsoleSettings()
    raw_level = level if level is not None else os.getenv(LEVEL_ENV_VAR) or defaults.level
    return ConsoleSettings(
        level=coerce_level(raw_level),
        logger_name=logger_name or os.getenv(LOGGER_NAME_ENV_VAR) or defaults.logger_name,
        force_color=force_color if force_color is not None else env_bool(FORCE_COLOR_ENV_VAR, defaults.force_color),
        no_color=no_color if no_color is not None else env_bool(NO_COLOR_ENV_VAR, defaults.no_color),
    )


def should_use_dotenv(*, explicit: bool | None = None, env_value: str | None = None) -> bool:
    """Decide whether ``.env`` loading is wanted; an explicit flag beats the environment.

    >>> should_use_dotenv(explicit=None, env_value="yes")
    True
    >>> should_use_dotenv(explicit=False, env_value="1")
    False
    """

    if explicit is not None:
        return explicit
    if env_value is None:
        return False
    return env_value.strip().lower() in _TRUTHY


def enable_dotenv(search_from: Path | None = None) -> Path | None:
    """Load the nearest ``.env`` found upwards from ``search_from`` (default: cwd).

    Existing environment variables keep precedence. Returns the resolved path
    of the loaded file, or ``None`` when no file was found.
    """

    global _DOTENV_PATH
    with _DOTENV_LOCK:
        if search_from is None:
            found = find_dotenv(usecwd=True)
        else:
            found = _find_upwards(search_from)
        if not found:
            return None
        path = Path(found).resolve()
        load_dotenv(path, override=False)
        _DOTENV_PATH = path
        return path


def _find_upwards(start: Path) -> str:
    for directory in (start, *start.parents):
        candidate = directory / ".env"
        if candidate.is_file():
            return str(candidate)
    return ""


def loaded_dotenv_path() -> Path | None:
    """Return the ``.env`` path loaded by :func:`enable_dotenv`, if any."""

    with _DOTENV_LOCK:
        return _DOTENV_PATH


def _reset_dotenv_state_for_testing() -> None:
    global _DOTENV_PATH
    with _DOTENV_LOCK:
        _DOTENV_PATH = None


__all__ = [
    "ConsoleSettings",
    "DEFAULT_LOGGER_NAME",
    "DOTENV_ENV_VAR",
    "FORCE_COLOR_ENV_VAR",
    "LEVEL_ENV_VAR",
    "LOGGER_NAME_ENV_VAR",
    "NO_COLOR_ENV_VAR",
    "coerce_level",
    "enable_dotenv",
    "env_bool",
    "load_console_settings",
    "loaded_dotenv_path",
    "should_use_dotenv",
]
