"""Concrete backend and console adapters."""

from __future__ import annotations

from .console import FieldsFormatter, create_console_handler
from .stdlib import FIELDS_ATTRIBUTE, StdlibBackend

__all__ = ["FIELDS_ATTRIBUTE", "FieldsFormatter", "StdlibBackend", "create_console_handler"]
