"""
CHUK Music Theory - spelled notes, intervals and chord symbols.

Quick start:
    from chuk_music_theory import Chord, Interval, Note

    Note.parse("C4").transpose(Interval.parse("m3"))  # Eb4
    Interval.between(Note.parse("C"), Note.parse("D#"))  # A2
    str(Chord.parse("C°7"))  # 'Cdim7'
"""

from chuk_music_theory.core import Chord, Interval, Note, TheoryError

__version__ = "0.1.0"

__all__ = [
    "Chord",
    "Interval",
    "Note",
    "TheoryError",
]
