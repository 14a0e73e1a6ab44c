"""Text renderers for fretboard diagrams."""

from .fretboard import display_fretboard, render_fretboard  # noqa: F401
