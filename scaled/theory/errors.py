from __future__ import annotations

"""Errors raised while resolving notes, modes and tunings."""

from typing import Iterable


class ScaledError(ValueError):
    """Base class for user-facing input errors."""


class InvalidNote(ScaledError):
    def __init__(self, note: str) -> None:
        super().__init__(f"Invalid note: {note}")
        self.note = note


class InvalidMode(ScaledError):
    def __init__(self, mode: str, available: Iterable[str]) -> None:
        self.mode = mode
        self.available = tuple(available)
        super().__init__(f"Invalid mode: {mode}. Available modes: {', '.join(self.available)}")
