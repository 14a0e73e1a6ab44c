"""scaled: show musical scales on a guitar fretboard."""

__version__ = "1.0.0"

__all__ = ["__version__"]
