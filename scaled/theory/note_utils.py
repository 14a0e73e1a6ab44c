# scaled/theory/note_utils.py
from __future__ import annotations
from typing import Dict

from .errors import InvalidNote

PITCH_CLASS_NAMES = ("C","C#","D","D#","E","F","F#","G","G#","A","A#","B")
NAME_TO_PC: Dict[str, int] = {name: pc for pc, name in enumerate(PITCH_CLASS_NAMES)}


def normalize_note(name: str) -> str:
    """Uppercase `name` and return the matching sharp-spelled pitch class.

    Flats are not converted: "Bb" uppercases to "BB" and is rejected.
    """
    upper = name.upper()
    if upper not in NAME_TO_PC:
        raise InvalidNote(name)
    return upper


def note_index(name: str) -> int:
    return NAME_TO_PC[name]


def note_at(index: int) -> str:
    """Name of the pitch class at `index`, wrapping around the octave."""
    return PITCH_CLASS_NAMES[index % 12]


def transpose(name: str, semitones: int) -> str:
    return note_at(note_index(name) + semitones)
