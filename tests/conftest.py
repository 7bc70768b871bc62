from __future__ import annotations

import contextvars
from dataclasses import dataclass, field
from io import StringIO
from typing import Any, Iterator

import pytest
from rich.console import Console

from lib_log_leveled.application import clear_exit_handlers
from lib_log_leveled.domain.attrs import Attr
from lib_log_leveled.domain.levels import Level


@dataclass(frozen=True)
class Record:
    context: contextvars.Context
    severity: int
    message: str
    attrs: tuple[Attr, ...]

    @property
    def pairs(self) -> tuple[tuple[str, Any], ...]:
        return tuple(attr.as_pair() for attr in self.attrs)


@dataclass
class _Journal:
    records: list[Record] = field(default_factory=list)
    bind_calls: list[tuple[Attr, ...]] = field(default_factory=list)
    enabled_calls: list[int] = field(default_factory=list)


class RecordingBackend:
    """In-memory ``BackendPort`` sharing one journal across bound handles."""

    def __init__(
        self,
        *,
        threshold: int = Level.TRACE.to_backend(),
        attrs: tuple[Attr, ...] = (),
        journal: _Journal | None = None,
    ) -> None:
        self.threshold = threshold
        self.attrs = attrs
        self.journal = journal if journal is not None else _Journal()

    @property
    def records(self) -> list[Record]:
        return self.journal.records

    @property
    def bind_calls(self) -> list[tuple[Attr, ...]]:
        return self.journal.bind_calls

    @property
    def enabled_calls(self) -> list[int]:
        return self.journal.enabled_calls

    def bind(self, *attrs: Attr) -> "RecordingBackend":
        self.journal.bind_calls.append(attrs)
        return RecordingBackend(threshold=self.threshold, attrs=self.attrs + attrs, journal=self.journal)

    def enabled(self, context: contextvars.Context, severity: int) -> bool:
        self.journal.enabled_calls.append(severity)
        return severity >= self.threshold

    def log(self, context: contextvars.Context, severity: int, message: str) -> None:
        # No filtering: records show what the façade forwarded.
        self.journal.records.append(Record(context, severity, message, self.attrs))


@pytest.fixture
def backend() -> RecordingBackend:
    return RecordingBackend()


@pytest.fixture
def quiet_backend() -> RecordingBackend:
    """Backend enabling nothing below PANIC."""

    return RecordingBackend(threshold=Level.PANIC.to_backend())


@pytest.fixture
def silent_backend() -> RecordingBackend:
    """Backend whose threshold sits above every level."""

    return RecordingBackend(threshold=1000)


@pytest.fixture(autouse=True)
def _reset_exit_handlers() -> Iterator[None]:
    clear_exit_handlers()
    yield
    clear_exit_handlers()


@pytest.fixture
def record_console() -> Console:
    return Console(file=StringIO(), record=True, width=160, color_system=None)
