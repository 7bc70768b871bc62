"""Backend port describing the structured-logging collaborator.

Purpose
-------
Define the narrow contract the façade needs from a structured-logging backend:
bind attributes, ask whether a severity is enabled, and log one record.

Contents
--------
* :class:`BackendPort` – runtime-checkable protocol with ``bind``, ``enabled``
  and ``log``.

System Role
-----------
The only boundary between :class:`lib_log_leveled.application.entry.Entry` and
whatever performs filtering, formatting and writing. Adapters such as
:class:`lib_log_leveled.adapters.stdlib.StdlibBackend` implement it; tests
supply recording fakes.
"""

from __future__ import annotations

import contextvars
from typing import Protocol, runtime_checkable

from lib_log_leveled.domain.attrs import Attr


@runtime_checkable
class BackendPort(Protocol):
    """Accept leveled records carrying pre-bound attributes.

    Why
    ---
    Entries rebind the handle on every field derivation, so ``bind`` must be a
    pure function of (old handle, attributes): the old handle stays usable and
    unchanged.

    Examples
    --------
    >>> class Null:
    ...     def bind(self, *attrs):
    ...         return self
    ...     def enabled(self, context, severity):
    ...         return False
    ...     def log(self, context, severity, message):
    ...         pass
    >>> isinstance(Null(), BackendPort)
    True
    """

    def bind(self, *attrs: Attr) -> "BackendPort":
        """Return a new handle carrying ``attrs`` in addition to the current ones."""

    def enabled(self, context: contextvars.Context, severity: int) -> bool:
        """Return ``True`` when records at ``severity`` would be kept."""

    def log(self, context: contextvars.Context, severity: int, message: str) -> None:
        """Emit one record with the bound attributes."""


__all__ = ["BackendPort"]
