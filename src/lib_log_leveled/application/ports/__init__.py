"""Ports the leveled façade depends on."""

from __future__ import annotations

from .backend import BackendPort

__all__ = ["BackendPort"]
