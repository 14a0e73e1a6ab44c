from __future__ import annotations

"""ASCII fretboard diagram.

One row per string (first tuning entry on top), one column per fret from
the open string up to `frets`. A cell shows its note when the note is in
the scale; the open string is always shown.
"""

import sys
from typing import Container, List, Sequence, TextIO

from ..theory.note_utils import note_index, note_at

DEFAULT_FRETS = 12


def string_frets(open_note: str, frets: int = DEFAULT_FRETS) -> List[str]:
    """Notes on one string from the open string (fret 0) up to `frets`."""
    start = note_index(open_note)
    return [note_at(start + fret) for fret in range(frets + 1)]


def _cell(text: str, fret: int) -> str:
    # Two-digit fret numbers need one more column.
    width = 4 if fret > 9 else 3
    return "  " + text.ljust(width)


def _row(cells: Sequence[str]) -> str:
    last = len(cells) - 1
    return "│" + "".join(c + ("│" if i == last else "|") for i, c in enumerate(cells))


def render_fretboard(
    scale: Container[str], tuning: Sequence[str], frets: int = DEFAULT_FRETS
) -> List[str]:
    """Return the diagram as a list of lines (no trailing newlines).

    Args:
        scale: Anything supporting `in` for note names, e.g. the list
            from scale_notes() or a Scale.
        tuning: Open-string notes, top row first.
        frets: Highest fret to draw.
    """
    header = _row([_cell(str(f), f) for f in range(frets + 1)])
    inner = len(header) - 2

    lines = ["┌" + "─" * inner + "┐", header, "│" + "─" * inner + "│"]
    for open_note in tuning:
        cells = []
        for fret, note in enumerate(string_frets(open_note, frets)):
            shown = fret == 0 or note in scale
            cells.append(_cell(note if shown else "", fret))
        lines.append(_row(cells))
    lines.append("└" + "─" * inner + "┘")
    return lines


def display_fretboard(
    scale: Container[str],
    tuning: Sequence[str],
    frets: int = DEFAULT_FRETS,
    out: TextIO | None = None,
) -> None:
    """Print the diagram to `out` (stdout by default)."""
    stream = out if out is not None else sys.stdout
    for line in render_fretboard(scale, tuning, frets):
        print(line, file=stream)
