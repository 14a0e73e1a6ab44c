from __future__ import annotations
from dataclasses import dataclass
from typing import Tuple

from .note_utils import normalize_note
from .scales import scale_notes
from .tuning import guitar_tuning


@dataclass(frozen=True)
class Scale:
    """A concrete root+mode (e.g., F# dorian) and its seven notes."""

    root_name: str
    mode: str
    notes: Tuple[str, ...]

    @staticmethod
    def build(root: str, mode: str) -> "Scale":
        notes = tuple(scale_notes(root, mode))
        return Scale(root_name=notes[0], mode=mode.lower(), notes=notes)

    def __contains__(self, note: object) -> bool:
        return note in self.notes

    def label(self) -> str:
        return f"{self.root_name} {self.mode}"


@dataclass(frozen=True)
class Tuning:
    """Open strings of a six-string guitar, top row (highest string) first."""

    root_name: str
    drop: bool
    strings: Tuple[str, ...]

    @staticmethod
    def build(root: str, drop: bool = False) -> "Tuning":
        strings = tuple(guitar_tuning(root, drop))
        return Tuning(root_name=normalize_note(root), drop=drop, strings=strings)

    def label(self) -> str:
        return "Drop" if self.drop else "Standard"

    def joined(self) -> str:
        return "-".join(self.strings)
