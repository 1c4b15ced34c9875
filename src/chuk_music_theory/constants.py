"""
Constants and enums for the music theory system.

No magic strings - use enums and Literal types for constrained values.
"""

from enum import Enum
from typing import Literal


class IntervalQuality(str, Enum):
    """
    Interval qualities.

    The value is the symbol used in interval notation ("M3", "dd5", ...).
    """

    PERFECT = "P"
    MINOR = "m"
    MAJOR = "M"
    DIMINISHED = "d"
    DOUBLY_DIMINISHED = "dd"
    AUGMENTED = "A"
    DOUBLY_AUGMENTED = "AA"


# Natural letter names in diatonic order, starting from C
LETTERS = "CDEFGAB"

# Semitone offset of each natural letter from C
NATURAL_SEMITONES: dict[str, int] = {
    "C": 0,
    "D": 2,
    "E": 4,
    "F": 5,
    "G": 7,
    "A": 9,
    "B": 11,
}

# Accidental glyph <-> alteration in semitones
ACCIDENTALS: dict[str, int] = {
    "bb": -2,
    "b": -1,
    "": 0,
    "#": 1,
    "##": 2,
}
ACCIDENTAL_GLYPHS: dict[int, str] = {value: glyph for glyph, value in ACCIDENTALS.items()}

# Bounds
MIN_ALTERATION = -2
MAX_ALTERATION = 2
MIN_OCTAVE = -1
MAX_OCTAVE = 9
MIN_MIDI = 0
MAX_MIDI = 127

# Octave assumed when an octave-less note needs an absolute pitch
DEFAULT_OCTAVE = 4

# Step classes 1, 4 and 5 (and their compounds) take perfect qualities
PERFECT_STEPS = frozenset({1, 4, 5})
IMPERFECT_STEPS = frozenset({2, 3, 6, 7})

# Transport modes for the server entry point
Transport = Literal["stdio", "http"]


class ErrorMessages:
    """Standardized error messages."""

    INVALID_NOTE = "Invalid note: {value}"
    INVALID_PITCH_CLASS = "Invalid note pitch class {value}"
    INVALID_ALTERATION = "Invalid note alteration {value}"
    INVALID_OCTAVE = "Invalid note octave {value}"
    INVALID_MIDI = "Invalid MIDI note {value}"
    INVALID_INTERVAL = "Invalid interval: {value}"
    INVALID_INTERVAL_NUMBER = "Invalid interval number: {value}"
    INVALID_INTERVAL_QUALITY = "Invalid interval quality: {value}"
    INVALID_SEMITONES = "Invalid interval semitones: {value}"
    UNEXPECTED_SEMITONE_DIFF = "Unexpected semitone difference {value} between {a} and {b}"
    INVALID_CHORD = "Invalid chord"
    INVALID_CHORD_NAME = "Invalid chord name {value}"
    INVALID_CHORD_QUALITY = "Invalid chord quality {value}"
    INVALID_BASE_NOTE = "Invalid base note {value}"
