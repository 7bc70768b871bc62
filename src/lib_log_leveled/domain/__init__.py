"""Domain value objects used by the leveled logging façade."""

from __future__ import annotations

from .attrs import Attr, Fields, attrs_from_mapping
from .errors import PanicError
from .levels import PANIC_LEVEL_NUM, TRACE_LEVEL_NUM, Level, all_levels, register_level_names
from .rendering import render_direct, render_format, render_line, to_text

__all__ = [
    "Attr",
    "Fields",
    "Level",
    "PANIC_LEVEL_NUM",
    "PanicError",
    "TRACE_LEVEL_NUM",
    "all_levels",
    "attrs_from_mapping",
    "register_level_names",
    "render_direct",
    "render_format",
    "render_line",
    "to_text",
]
