"""Exceptions raised by the leveled façade."""

from __future__ import annotations

from typing import Any


class PanicError(Exception):
    """Raised by the Panic variants once the record has been forwarded.

    Attributes
    ----------
    payload:
        What the caller handed to the Panic method: the positional values for
        ``panic``/``panicf`` or the producer callable for ``panic_fn``.
    message:
        The rendered message when one was produced, otherwise ``""``.
    """

    def __init__(self, payload: Any, message: str = "") -> None:
        super().__init__(payload)
        self.payload = payload
        self.message = message

    def __str__(self) -> str:
        return self.message or repr(self.payload)


__all__ = ["PanicError"]
