from __future__ import annotations

import pytest

from lib_log_leveled.domain.attrs import Attr, attrs_from_mapping
from lib_log_leveled.domain.errors import PanicError
from lib_log_leveled.domain.rendering import render_direct, render_format, render_line, to_text


class _Custom:
    def __str__(self) -> str:
        return "custom!"


@pytest.mark.parametrize(
    "value, expected",
    [
        ("text", "text"),
        (1, "1"),
        (2.5, "2.5"),
        (True, "true"),
        (False, "false"),
        (None, "None"),
        (b"raw", "raw"),
        (ValueError("bad value"), "bad value"),
        (KeyboardInterrupt(), "KeyboardInterrupt"),
        (_Custom(), "custom!"),
    ],
)
def test_to_text_default_stringification(value: object, expected: str) -> None:
    assert to_text(value) == expected


def test_render_direct_adds_no_separator() -> None:
    assert render_direct(("a", "b")) == "ab"
    assert render_direct(("n=", 1, " ok=", False)) == "n=1 ok=false"
    assert render_direct(()) == ""


def test_render_line_joins_with_single_space() -> None:
    assert render_line(("a", 1, True)) == "a 1 true"
    assert render_line(("solo",)) == "solo"
    assert render_line(()) == ""


def test_render_format_substitutes_printf_style() -> None:
    assert render_format("%d-%s", (7, "x")) == "7-x"
    assert render_format("100%%", ()) == "100%"
    assert render_format("plain", ()) == "plain"


@pytest.mark.parametrize("format_string, values", [("%d", ("x",)), ("%s %s", ("only",)), ("%(name)s", ("x",)), ("%s", ())])
def test_render_format_degrades_instead_of_raising(format_string: str, values: tuple) -> None:
    message = render_format(format_string, values)

    assert message.startswith(f"{format_string} !(BADFORMAT ")


def test_attrs_from_mapping_preserves_values() -> None:
    error = RuntimeError("x")
    attrs = attrs_from_mapping({"a": 1, "error": error})

    assert set(attrs) == {Attr("a", 1), Attr("error", error)}
    assert Attr("k", "v").as_pair() == ("k", "v")


def test_panic_error_str_prefers_message() -> None:
    assert str(PanicError(("a", 1), "a1")) == "a1"
    assert str(PanicError(("a", 1))) == "('a', 1)"
    assert PanicError(("a",)).payload == ("a",)
