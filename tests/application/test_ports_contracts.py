from __future__ import annotations

import contextvars
import logging

from lib_log_leveled.adapters.stdlib import StdlibBackend
from lib_log_leveled.application.ports.backend import BackendPort
from lib_log_leveled.domain.attrs import Attr


def test_recording_backend_satisfies_port(backend) -> None:
    assert isinstance(backend, BackendPort)


def test_stdlib_backend_satisfies_port() -> None:
    assert isinstance(StdlibBackend(logging.getLogger("tests.ports")), BackendPort)


def test_objects_missing_methods_do_not_satisfy_port() -> None:
    class _BindOnly:
        def bind(self, *attrs: Attr) -> "_BindOnly":
            return self

    assert not isinstance(_BindOnly(), BackendPort)


def test_bind_is_pure_for_recording_backend(backend) -> None:
    bound = backend.bind(Attr("a", 1))

    assert backend.attrs == ()
    assert bound.attrs == (Attr("a", 1),)
    bound.log(contextvars.Context(), logging.INFO, "x")
    assert backend.records[0].attrs == (Attr("a", 1),)
