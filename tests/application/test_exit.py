from __future__ import annotations

import logging
import os
import subprocess
import sys
import textwrap
import threading
from pathlib import Path

import pytest

from lib_log_leveled.application import exit as exit_module
from lib_log_leveled.application.exit import (
    FATAL_EXIT_CODE,
    clear_exit_handlers,
    defer_exit_handler,
    exit_process,
    register_exit_handler,
    run_exit_handlers,
)


def test_handlers_run_in_registration_order() -> None:
    calls: list[str] = []
    register_exit_handler(lambda: calls.append("first"))
    register_exit_handler(lambda: calls.append("second"))
    defer_exit_handler(lambda: calls.append("deferred"))

    run_exit_handlers()

    assert calls == ["deferred", "first", "second"]


def test_failing_handler_is_logged_and_does_not_stop_others(caplog: pytest.LogCaptureFixture) -> None:
    calls: list[str] = []

    def broken() -> None:
        raise RuntimeError("handler exploded")

    register_exit_handler(broken)
    register_exit_handler(lambda: calls.append("after"))

    with caplog.at_level(logging.ERROR, logger="lib_log_leveled.application.exit"):
        run_exit_handlers()

    assert calls == ["after"]
    assert "exit handler" in caplog.text
    assert "handler exploded" in caplog.text


def test_exit_process_runs_handlers_then_raises_system_exit() -> None:
    calls: list[str] = []
    register_exit_handler(lambda: calls.append("flushed"))

    with pytest.raises(SystemExit) as excinfo:
        exit_process()

    assert excinfo.value.code == FATAL_EXIT_CODE == 1
    assert calls == ["flushed"]


def test_clear_exit_handlers_empties_registry() -> None:
    calls: list[str] = []
    register_exit_handler(lambda: calls.append("never"))
    clear_exit_handlers()

    run_exit_handlers()

    assert calls == []


def test_exit_process_off_main_thread_terminates_with_os_exit(monkeypatch: pytest.MonkeyPatch) -> None:
    calls: list[object] = []
    register_exit_handler(lambda: calls.append("flushed"))
    monkeypatch.setattr(logging, "shutdown", lambda: calls.append("shutdown"))
    monkeypatch.setattr(exit_module.os, "_exit", lambda code: calls.append(("os._exit", code)))

    worker = threading.Thread(target=exit_process)
    worker.start()
    worker.join()

    assert calls == ["flushed", "shutdown", ("os._exit", 1)]


_FATAL_IN_WORKER = textwrap.dedent(
    """
    import logging
    import sys
    import threading

    from lib_log_leveled import StdlibBackend, new

    logging.basicConfig(stream=sys.stderr, format="%(message)s")
    logger = new(None, StdlibBackend.from_name("child"))
    worker = threading.Thread(target=logger.with_field("job", "sync").fatal, args=("boom",))
    worker.start()
    worker.join()
    print("STILL ALIVE")
    """
)


def test_fatal_from_worker_thread_ends_the_process() -> None:
    src = Path(__file__).resolve().parents[2] / "src"
    env = dict(os.environ)
    env["PYTHONPATH"] = os.pathsep.join(filter(None, [str(src), env.get("PYTHONPATH")]))

    completed = subprocess.run(
        [sys.executable, "-c", _FATAL_IN_WORKER],
        capture_output=True,
        text=True,
        env=env,
        timeout=60,
    )

    assert completed.returncode == 1
    assert "STILL ALIVE" not in completed.stdout
    assert "boom" in completed.stderr
