"""Note, scale and tuning theory.

Functional API in note_utils/scales/tuning; value objects in scale.
"""

from .errors import InvalidMode, InvalidNote, ScaledError  # noqa: F401
from .scale import Scale, Tuning  # noqa: F401
