from __future__ import annotations

"""Mode step patterns and scale construction for 12-TET.

Each mode is a sequence of seven semitone steps summing to an octave.
Walking the steps from a root yields the seven scale notes.
"""

from typing import Dict, List, Tuple

from .errors import InvalidMode
from .note_utils import normalize_note, note_at, note_index


MODE_PATTERNS: Dict[str, Tuple[int, ...]] = {
    "major": (2, 2, 1, 2, 2, 2, 1),
    "dorian": (2, 1, 2, 2, 2, 1, 2),
    "phrygian": (1, 2, 2, 2, 1, 2, 2),
    "lydian": (2, 2, 2, 1, 2, 2, 1),
    "mixolydian": (2, 2, 1, 2, 2, 1, 2),
    "minor": (2, 1, 2, 2, 1, 2, 2),
    "locrian": (1, 2, 2, 1, 2, 2, 2),
}

MODE_NAMES: Tuple[str, ...] = tuple(MODE_PATTERNS)


def mode_pattern(mode: str) -> Tuple[int, ...]:
    """Return the step pattern for a mode name (case-insensitive).

    Raises:
        InvalidMode: if the name is not in MODE_PATTERNS.
    """
    steps = MODE_PATTERNS.get(mode.lower())
    if steps is None:
        raise InvalidMode(mode, MODE_NAMES)
    return steps


def scale_notes(root: str, mode: str) -> List[str]:
    """Build the seven notes of `mode` starting at `root`.

    The root is validated before the mode, so a bad root is reported
    even when the mode is also wrong.

    Args:
        root: Root note name, any case (e.g. "c#").
        mode: One of MODE_NAMES, any case.

    Returns:
        Seven sharp-spelled note names, root first.
    """
    current = note_index(normalize_note(root))
    steps = mode_pattern(mode)
    notes: List[str] = []
    for step in steps:
        notes.append(note_at(current))
        current = (current + step) % 12
    return notes
