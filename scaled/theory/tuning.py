from __future__ import annotations

"""Six-string guitar tunings derived from the lowest string's note."""

from typing import List, Tuple

from .note_utils import normalize_note, note_at, note_index


# Semitones above the lowest string, low to high.
STANDARD_TUNING_INTERVALS: Tuple[int, ...] = (0, 5, 10, 15, 19, 24)
DROP_TUNING_INTERVALS: Tuple[int, ...] = (0, 7, 12, 17, 21, 26)


def tuning_intervals(drop: bool = False) -> Tuple[int, ...]:
    return DROP_TUNING_INTERVALS if drop else STANDARD_TUNING_INTERVALS


def guitar_tuning(tuning_root: str, drop: bool = False) -> List[str]:
    """Open-string notes for a tuning, highest string first.

    Args:
        tuning_root: Note of the lowest string, any case.
        drop: Use the drop pattern (lowest string a whole step below
            the standard relationship to the others).

    Returns:
        Six note names ordered top row first as drawn on the diagram,
        e.g. ["E", "B", "G", "D", "A", "E"] for standard E.
    """
    root_pc = note_index(normalize_note(tuning_root))
    strings = [note_at(root_pc + interval) for interval in tuning_intervals(drop)]
    strings.reverse()
    return strings
