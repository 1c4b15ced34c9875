"""
Interval primitive - the distance between two spelled notes.

An interval is a diatonic number (how many letters apart) plus a quality
(how the chromatic distance compares to the major/perfect default).
M3 and d4 both span four semitones but are different intervals.
"""

from __future__ import annotations

import re
from dataclasses import dataclass, replace
from typing import TYPE_CHECKING

from chuk_music_theory.constants import (
    IMPERFECT_STEPS,
    LETTERS,
    PERFECT_STEPS,
    ErrorMessages,
    IntervalQuality,
)
from chuk_music_theory.core.errors import TheoryError

if TYPE_CHECKING:
    from chuk_music_theory.core.note import Note

_INTERVAL_PATTERN = re.compile(r"^(AA|A|dd|d|P|M|m)([0-9]+)$", re.ASCII)


def _is_int(value: object) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


_Q = IntervalQuality

_PERFECT_QUALITIES = frozenset(
    {_Q.PERFECT, _Q.AUGMENTED, _Q.DOUBLY_AUGMENTED, _Q.DIMINISHED, _Q.DOUBLY_DIMINISHED}
)
_IMPERFECT_QUALITIES = frozenset(
    {_Q.MAJOR, _Q.MINOR, _Q.AUGMENTED, _Q.DOUBLY_AUGMENTED, _Q.DIMINISHED, _Q.DOUBLY_DIMINISHED}
)

# Semitones for the major/perfect interval of each step class
_STEP_SEMITONES: dict[int, int] = {1: 0, 2: 2, 3: 4, 4: 5, 5: 7, 6: 9, 7: 11}

_QUALITY_OFFSETS: dict[IntervalQuality, int] = {
    _Q.PERFECT: 0,
    _Q.MAJOR: 0,
    _Q.MINOR: -1,
    _Q.DIMINISHED: -1,
    _Q.DOUBLY_DIMINISHED: -2,
    _Q.AUGMENTED: 1,
    _Q.DOUBLY_AUGMENTED: 2,
}

# Canonical spelling for each semitone count within an octave
_SEMITONE_INTERVALS: dict[int, tuple[IntervalQuality, int]] = {
    0: (_Q.PERFECT, 1),
    1: (_Q.MINOR, 2),
    2: (_Q.MAJOR, 2),
    3: (_Q.MINOR, 3),
    4: (_Q.MAJOR, 3),
    5: (_Q.PERFECT, 4),
    6: (_Q.DIMINISHED, 5),
    7: (_Q.PERFECT, 5),
    8: (_Q.MINOR, 6),
    9: (_Q.MAJOR, 6),
    10: (_Q.MINOR, 7),
    11: (_Q.MAJOR, 7),
}

_INVERTED_QUALITIES: dict[IntervalQuality, IntervalQuality] = {
    _Q.PERFECT: _Q.PERFECT,
    _Q.MINOR: _Q.MAJOR,
    _Q.MAJOR: _Q.MINOR,
    _Q.AUGMENTED: _Q.DIMINISHED,
    _Q.DOUBLY_AUGMENTED: _Q.DOUBLY_DIMINISHED,
    _Q.DIMINISHED: _Q.AUGMENTED,
    _Q.DOUBLY_DIMINISHED: _Q.DOUBLY_AUGMENTED,
}


def step_class(number: int) -> int:
    """Reduce a diatonic number to 1-7 (9 -> 2, 15 -> 1)."""
    return (number - 1) % 7 + 1


@dataclass(frozen=True)
class Interval:
    """
    A quality plus a diatonic number, e.g. M3, P5, dd7, m9.

    Perfect qualities are only legal on unisons, fourths, fifths and
    their compounds; major/minor only on seconds, thirds, sixths and
    sevenths. Augmented and diminished qualities fit both families.

    Immutable and hashable.
    """

    quality: IntervalQuality
    number: int

    def __post_init__(self) -> None:
        """Validate number and quality."""
        if not _is_int(self.number) or self.number <= 0:
            raise TheoryError(ErrorMessages.INVALID_INTERVAL_NUMBER.format(value=self.number))

        try:
            quality = IntervalQuality(self.quality)
        except ValueError:
            raise TheoryError(
                ErrorMessages.INVALID_INTERVAL_QUALITY.format(value=self.quality)
            ) from None

        allowed = _PERFECT_QUALITIES if self.step in PERFECT_STEPS else _IMPERFECT_QUALITIES
        if quality not in allowed:
            raise TheoryError(ErrorMessages.INVALID_INTERVAL_QUALITY.format(value=quality.value))

        object.__setattr__(self, "quality", quality)

    @classmethod
    def parse(cls, text: str) -> Interval:
        """Parse an interval token like 'P5', 'm7', 'AA2' or 'dd5'."""
        match = _INTERVAL_PATTERN.match(text)
        if match is None:
            raise TheoryError(ErrorMessages.INVALID_INTERVAL.format(value=text))
        return cls(IntervalQuality(match.group(1)), int(match.group(2)))

    @classmethod
    def from_semitones(cls, semitones: int) -> Interval:
        """
        Canonical interval for a semitone count.

        Within the octave the spelling is fixed (6 is always d5), and each
        full octave adds 7 to the number: 12 -> P8, 14 -> M9.
        """
        if not _is_int(semitones) or semitones < 0:
            raise TheoryError(ErrorMessages.INVALID_SEMITONES.format(value=semitones))

        quality, number = _SEMITONE_INTERVALS[semitones % 12]
        return cls(quality, number + 7 * (semitones // 12))

    @classmethod
    def between(cls, a: Note, b: Note) -> Interval:
        """
        The interval from note a up to note b.

        Octave-less notes are treated as sitting in octave 4, so b must
        not be spelled on a lower letter than a unless octaves say so.

        Args:
            a: Lower note
            b: Upper note

        Returns:
            The spelled interval, e.g. C -> Eb is m3, C -> D# is A2
        """
        octaves = b.octave_or_default - a.octave_or_default
        number = LETTERS.index(b.pitch_class) - LETTERS.index(a.pitch_class) + 1 + 7 * octaves

        plain = cls(_Q.PERFECT if step_class(number) in PERFECT_STEPS else _Q.MAJOR, number)

        # Same as b.midi - a.transpose(plain).midi, without building the note
        diff = (b.midi - a.midi - plain.semitones) % 12
        if diff > 6:
            diff -= 12

        if diff == 1:
            return cls(_Q.AUGMENTED, number)
        if diff == 0:
            return plain
        if diff == -1:
            return cls(_Q.MINOR if plain.quality is _Q.MAJOR else _Q.DIMINISHED, number)

        # Doubly altered intervals are never derived from notes
        raise TheoryError(ErrorMessages.UNEXPECTED_SEMITONE_DIFF.format(value=diff, a=a, b=b))

    @property
    def step(self) -> int:
        """Step class of the number (1-7)."""
        return step_class(self.number)

    @property
    def semitones(self) -> int:
        """Number of semitones spanned, including compound octaves."""
        step = self.step
        semitones = _STEP_SEMITONES[step] + _QUALITY_OFFSETS[self.quality]

        # Diminished sits below minor, not below major
        if step in IMPERFECT_STEPS and self.quality in (_Q.DIMINISHED, _Q.DOUBLY_DIMINISHED):
            semitones -= 1

        return semitones + 12 * ((self.number - 1) // 7)

    @property
    def is_compound(self) -> bool:
        """True for intervals wider than an octave."""
        return self.number > 8

    def copy(self) -> Interval:
        """Return an equal, independent interval."""
        return replace(self)

    def simple(self) -> Interval:
        """
        Reduce a compound interval to within an octave.

        M9 -> M2, P15 -> P1. The octave itself stays P8.
        """
        return Interval(self.quality, 8 if self.number == 8 else self.step)

    def invert(self) -> Interval:
        """
        Invert within the octave.

        M3 -> m6, A4 -> d5, P1 -> P8. Compound intervals are reduced first.
        """
        return Interval(_INVERTED_QUALITIES[self.quality], 9 - self.simple().number)

    def __str__(self) -> str:
        return f"{self.quality.value}{self.number}"

    def __repr__(self) -> str:
        return f"Interval.parse({str(self)!r})"
