from __future__ import annotations

import contextvars
import logging

import pytest

from lib_log_leveled import Logger, StdlibBackend, new_console_logger
from lib_log_leveled.config import ConsoleSettings
from lib_log_leveled.domain.levels import Level
from lib_log_leveled.lib_log_leveled import logdemo
from lib_log_leveled.runtime import configure_stdlib_logger


@pytest.fixture
def settings(request: pytest.FixtureRequest) -> ConsoleSettings:
    return ConsoleSettings(level=Level.DEBUG, logger_name=f"tests.runtime.{request.node.name}")


def test_new_console_logger_writes_fields_to_console(settings, record_console) -> None:
    logger = new_console_logger(settings, console=record_console)

    logger.with_fields({"user": "alice", "attempt": 2}).warnln("retrying", "now")

    output = record_console.export_text()
    assert isinstance(logger, Logger)
    assert isinstance(logger.backend, StdlibBackend)
    assert "WARNING" in output
    assert "retrying now" in output
    assert "user=alice" in output
    assert "attempt=2" in output


def test_threshold_comes_from_settings(settings, record_console) -> None:
    logger = new_console_logger(settings, console=record_console)

    logger.trace("hidden")
    logger.debug("visible")

    output = record_console.export_text()
    assert "hidden" not in output
    assert "visible" in output
    assert logger.backend.logger.level == logging.DEBUG


def test_repeated_configuration_keeps_one_console_handler(settings, record_console) -> None:
    configure_stdlib_logger(settings, console=record_console)
    target = configure_stdlib_logger(settings, console=record_console)

    marked = [handler for handler in target.handlers if getattr(handler, "_lib_log_leveled_console", False)]
    assert len(marked) == 1
    assert target.propagate is False


def test_settings_resolved_from_environment(monkeypatch: pytest.MonkeyPatch, record_console) -> None:
    monkeypatch.setenv("LOG_LEVEL", "error")
    monkeypatch.setenv("LOG_LOGGER_NAME", "tests.runtime.env")

    logger = new_console_logger(console=record_console)

    assert logger.backend.logger.name == "tests.runtime.env"
    assert not logger.is_level_enabled(Level.WARN)
    assert logger.is_level_enabled(Level.ERROR)


def test_context_is_carried_by_root_entry(settings, record_console) -> None:
    ctx = contextvars.copy_context()

    logger = new_console_logger(settings, context=ctx, console=record_console)

    assert logger.context is ctx


def test_logdemo_emits_every_family_for_enabled_levels(record_console) -> None:
    result = logdemo(level="trace", fields={"run": "t1"}, console=record_console)

    output = record_console.export_text()
    assert result["emitted"] == 5 * 3 + 1
    assert result["skipped"] == []
    assert result["fields"] == {"run": "t1"}
    assert "formatted error message #2" in output
    assert "line trace message true" in output
    assert "run=t1" in output
    assert "demo=logdemo" in output


def test_logdemo_reports_skipped_levels(record_console) -> None:
    result = logdemo(level=Level.WARN, console=record_console)

    assert result["level"] == "warning"
    assert result["skipped"] == ["trace", "debug", "info"]
    assert result["emitted"] == 2 * 3


def test_logdemo_rejects_unknown_level(record_console) -> None:
    with pytest.raises(ValueError, match="Unknown log level"):
        logdemo(level="loud", console=record_console)
