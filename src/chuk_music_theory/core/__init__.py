"""
Core music theory primitives.

These are the spelled-pitch value types everything else composes on:
- Note: Letter + alteration + optional octave (C#4, Bb, F##)
- Interval: Quality + diatonic number (M3, d5, m9)
- Chord: Root note + ordered intervals, with inversions
- TheoryError: Raised when any of them cannot be constructed
"""

from chuk_music_theory.core.chord import (
    CHORD_ALIASES,
    CHORD_QUALITIES,
    Chord,
    is_chord_quality,
    resolve_quality,
)
from chuk_music_theory.core.errors import TheoryError
from chuk_music_theory.core.interval import Interval, step_class
from chuk_music_theory.core.note import Note

__all__ = [
    # Note
    "Note",
    # Interval
    "Interval",
    "step_class",
    # Chord
    "Chord",
    "CHORD_QUALITIES",
    "CHORD_ALIASES",
    "is_chord_quality",
    "resolve_quality",
    # Errors
    "TheoryError",
]
