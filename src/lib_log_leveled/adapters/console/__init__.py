"""Console adapters."""

from __future__ import annotations

from .rich_console import FieldsFormatter, create_console_handler

__all__ = ["FieldsFormatter", "create_console_handler"]
