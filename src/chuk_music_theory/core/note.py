"""
Note primitive - a spelled pitch.

A Note is a natural letter (pitch class), a chromatic alteration and an
optional octave. Unlike a bare chromatic pitch number, a Note keeps its
spelling: C# and Db are different notes that happen to sound the same.
"""

from __future__ import annotations

import re
from dataclasses import dataclass, replace
from typing import TYPE_CHECKING

from chuk_music_theory.constants import (
    ACCIDENTAL_GLYPHS,
    ACCIDENTALS,
    DEFAULT_OCTAVE,
    LETTERS,
    MAX_ALTERATION,
    MAX_MIDI,
    MAX_OCTAVE,
    MIN_ALTERATION,
    MIN_MIDI,
    MIN_OCTAVE,
    NATURAL_SEMITONES,
    ErrorMessages,
)
from chuk_music_theory.core.errors import TheoryError

if TYPE_CHECKING:
    from chuk_music_theory.core.interval import Interval

# Letter, accidental, octave. The letter and octave are deliberately loose
# so that a bad letter or out-of-range octave gets its own error message.
_NOTE_PATTERN = re.compile(r"^([A-Za-z])(##|#|bb|b)?(-?[0-9]+)?$", re.ASCII)


def _is_int(value: object) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


# Spelling for each MIDI semitone (sharps on the black keys)
_MIDI_LETTERS = "CCDDEFFGGAAB"
_MIDI_SHARPS = frozenset({1, 3, 6, 8, 10})


@dataclass(frozen=True, eq=False)
class Note:
    """
    A spelled note, optionally anchored to an octave.

    Equality depends on whether both notes carry an octave:
    - if either is octave-less, spelling must match (C# != Db)
    - if both have an octave, the sounding pitch must match (C#4 == Db4)

    Immutable and hashable.
    """

    pitch_class: str
    alteration: int = 0
    octave: int | None = None

    def __post_init__(self) -> None:
        """Validate components."""
        if not Note.is_pitch_class(self.pitch_class):
            raise TheoryError(ErrorMessages.INVALID_PITCH_CLASS.format(value=self.pitch_class))
        if not _is_int(self.alteration) or not (
            MIN_ALTERATION <= self.alteration <= MAX_ALTERATION
        ):
            raise TheoryError(ErrorMessages.INVALID_ALTERATION.format(value=self.alteration))
        if self.octave is not None and (
            not _is_int(self.octave) or not MIN_OCTAVE <= self.octave <= MAX_OCTAVE
        ):
            raise TheoryError(ErrorMessages.INVALID_OCTAVE.format(value=self.octave))

    @staticmethod
    def is_pitch_class(value: object) -> bool:
        """True for one of the natural letters A-G."""
        return isinstance(value, str) and len(value) == 1 and value in LETTERS

    @classmethod
    def parse(cls, text: str) -> Note:
        """
        Parse a note from a string like 'C', 'F#', 'Bb3' or 'G##-1'.

        Args:
            text: Letter, optional accidental (#, ##, b, bb), optional octave

        Returns:
            The parsed Note

        Raises:
            TheoryError: If the text is malformed or out of range
        """
        match = _NOTE_PATTERN.match(text)
        if match is None:
            raise TheoryError(ErrorMessages.INVALID_NOTE.format(value=text))

        letter, accidental, octave = match.groups()
        # No leading zeros and no negative zero
        if octave is not None and octave != str(int(octave)):
            raise TheoryError(ErrorMessages.INVALID_NOTE.format(value=text))
        if not cls.is_pitch_class(letter):
            raise TheoryError(ErrorMessages.INVALID_PITCH_CLASS.format(value=letter))

        return cls(
            letter,
            ACCIDENTALS[accidental or ""],
            int(octave) if octave is not None else None,
        )

    @classmethod
    def from_midi(cls, midi: int) -> Note:
        """
        Build a note from a MIDI note number. C4 = 60.

        Black keys are always spelled with sharps.
        """
        if not _is_int(midi) or not MIN_MIDI <= midi <= MAX_MIDI:
            raise TheoryError(ErrorMessages.INVALID_MIDI.format(value=midi))

        semitone = midi % 12
        return cls(
            _MIDI_LETTERS[semitone],
            1 if semitone in _MIDI_SHARPS else 0,
            midi // 12 - 1,
        )

    def copy(self) -> Note:
        """Return an equal, independent note."""
        return replace(self)

    def with_octave(self, octave: int | None) -> Note:
        """Return the same spelling in another octave (or none)."""
        return replace(self, octave=octave)

    @property
    def octave_or_default(self) -> int:
        """The octave, or 4 for octave-less notes."""
        return DEFAULT_OCTAVE if self.octave is None else self.octave

    @property
    def midi(self) -> int:
        """
        MIDI note number.

        Octave-less notes are measured as if they were in octave 4.
        """
        natural = NATURAL_SEMITONES[self.pitch_class]
        return (self.octave_or_default + 1) * 12 + natural + self.alteration

    @property
    def name(self) -> str:
        """Letter and accidental, without octave."""
        return self.to_string(with_octave=False)

    def to_string(self, with_octave: bool = True) -> str:
        """Format as e.g. 'Eb4', or 'Eb' without the octave."""
        result = f"{self.pitch_class}{ACCIDENTAL_GLYPHS[self.alteration]}"
        if with_octave and self.octave is not None:
            result += str(self.octave)
        return result

    def transpose(self, interval: Interval) -> Note:
        """
        Transpose up by an interval, keeping correct spelling.

        The letter always moves by the interval's diatonic number; the
        alteration absorbs whatever chromatic difference remains.
        C + m3 = Eb (never D#), D + M3 = F#.

        Raises:
            TheoryError: If the result needs more than a double accidental
                or leaves the octave range
        """
        index = LETTERS.index(self.pitch_class) + interval.number - 1
        pitch_class = LETTERS[index % len(LETTERS)]
        octave_shift = index // len(LETTERS)

        # Both measured with the source pinned to octave 0
        target_midi = (octave_shift + 1) * 12 + NATURAL_SEMITONES[pitch_class]
        source_midi = 12 + NATURAL_SEMITONES[self.pitch_class] + self.alteration

        alteration = interval.semitones - (target_midi - source_midi)
        octave = None if self.octave is None else self.octave + octave_shift

        return Note(pitch_class, alteration, octave)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Note):
            return NotImplemented
        if self.octave is None or other.octave is None:
            return self.pitch_class == other.pitch_class and self.alteration == other.alteration
        return self.midi == other.midi

    def __hash__(self) -> int:
        # Equal notes always share a chroma, whichever equality rule applied
        return hash((NATURAL_SEMITONES[self.pitch_class] + self.alteration) % 12)

    def __str__(self) -> str:
        return self.to_string()
