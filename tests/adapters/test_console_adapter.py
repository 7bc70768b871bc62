from __future__ import annotations

import logging
from typing import Iterator

import pytest
from rich.logging import RichHandler

from lib_log_leveled.adapters.console.rich_console import FieldsFormatter, create_console_handler
from lib_log_leveled.adapters.stdlib import StdlibBackend
from lib_log_leveled.application.logger import new
from lib_log_leveled.domain.levels import Level


def _record(message: str, fields: tuple = ()) -> logging.LogRecord:
    record = logging.LogRecord("tests", logging.INFO, __file__, 1, message, None, None)
    record.fields = fields
    return record


def test_fields_formatter_leaves_plain_messages_alone() -> None:
    assert FieldsFormatter().format(_record("hello")) == "hello"


def test_fields_formatter_quotes_values_with_spaces() -> None:
    rendered = FieldsFormatter().format(_record("hello", (("who", "big world"), ("empty", ""), ("n", 3))))

    assert rendered == "hello who='big world' empty='' n=3"


def test_fields_formatter_tolerates_records_without_fields() -> None:
    record = logging.LogRecord("tests", logging.INFO, __file__, 1, "foreign", None, None)

    assert FieldsFormatter().format(record) == "foreign"


@pytest.fixture
def console_logger(record_console, request: pytest.FixtureRequest) -> Iterator[logging.Logger]:
    target = logging.getLogger(f"tests.console.{request.node.name}")
    target.setLevel(Level.TRACE.to_backend())
    target.propagate = False
    handler = create_console_handler(console=record_console)
    target.addHandler(handler)
    yield target
    target.removeHandler(handler)


def test_create_console_handler_returns_rich_handler(record_console) -> None:
    handler = create_console_handler(console=record_console, level=logging.WARNING)

    assert isinstance(handler, RichHandler)
    assert handler.level == logging.WARNING
    assert isinstance(handler.formatter, FieldsFormatter)


def test_console_output_contains_level_message_and_fields(console_logger, record_console) -> None:
    new(None, StdlibBackend(console_logger)).with_fields({"foo": "bar"}).info("hello")

    output = record_console.export_text()
    assert "INFO" in output
    assert "hello foo=bar" in output


def test_console_renders_custom_levels(console_logger, record_console) -> None:
    new(None, StdlibBackend(console_logger)).traceln("deep", "dive")

    output = record_console.export_text()
    assert "TRACE" in output
    assert "deep dive" in output


def test_no_color_console_stays_plain(record_console) -> None:
    handler = create_console_handler(no_color=True)

    assert handler.console.no_color is True
    assert handler.console is not record_console
