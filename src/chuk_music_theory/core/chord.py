"""
Chord primitive - a root note plus an ordered stack of intervals.

Intervals are measured from the root, not stacked. Their order encodes
the inversion: the position of the unison (P1) in the sequence tells how
far the chord has been rotated from root position.
"""

from __future__ import annotations

import re
from collections.abc import Mapping
from dataclasses import dataclass, replace
from types import MappingProxyType

from chuk_music_theory.constants import ErrorMessages, IntervalQuality
from chuk_music_theory.core.errors import TheoryError
from chuk_music_theory.core.interval import Interval
from chuk_music_theory.core.note import Note

UNISON = Interval(IntervalQuality.PERFECT, 1)

# Declaration order matters: quality detection returns the first match
# fmt: off
_QUALITY_TEMPLATES: dict[str, tuple[str, ...]] = {
    "M":        ("P1", "M3", "P5"),
    "m":        ("P1", "m3", "P5"),
    "dim":      ("P1", "m3", "d5"),
    "aug":      ("P1", "M3", "A5"),
    "sus2":     ("P1", "M2", "P5"),
    "sus4":     ("P1", "P4", "P5"),
    "7":        ("P1", "M3", "P5", "m7"),
    "maj7":     ("P1", "M3", "P5", "M7"),
    "m7":       ("P1", "m3", "P5", "m7"),
    "m(maj7)":  ("P1", "m3", "P5", "M7"),
    "m7b5":     ("P1", "m3", "d5", "m7"),
    "dim7":     ("P1", "m3", "d5", "d7"),
    "aug7":     ("P1", "M3", "A5", "m7"),
    "maj7(#5)": ("P1", "M3", "A5", "M7"),
    "7(b5)":    ("P1", "M3", "d5", "m7"),
    "maj7(b5)": ("P1", "M3", "d5", "M7"),
}
# fmt: on

CHORD_QUALITIES: Mapping[str, tuple[Interval, ...]] = MappingProxyType(
    {
        name: tuple(Interval.parse(token) for token in tokens)
        for name, tokens in _QUALITY_TEMPLATES.items()
    }
)

CHORD_ALIASES: Mapping[str, str] = MappingProxyType(
    {
        "": "M",
        "°": "dim",
        "°7": "dim7",
        "+": "aug",
        "+7": "aug7",
        "ø": "m7b5",
        "sus": "sus4",
    }
)


def _build_symbol_pattern() -> re.Pattern[str]:
    # Longest keys first so 'm7b5' wins over 'm7' and 'm'
    keys = sorted(
        (key for key in [*CHORD_QUALITIES, *CHORD_ALIASES] if key),
        key=len,
        reverse=True,
    )
    qualities = "|".join(re.escape(key) for key in keys)
    note = r"[A-G](?:##|#|bb|b)?"
    return re.compile(rf"^(?P<root>{note})(?P<quality>{qualities})?(?:/(?P<bass>{note}))?$")


_SYMBOL_PATTERN = _build_symbol_pattern()


def is_chord_quality(value: str) -> bool:
    """True for a canonical quality keyword ('m7', 'dim', ...)."""
    return value in CHORD_QUALITIES


def resolve_quality(value: str) -> str:
    """
    Resolve a quality keyword or alias to its canonical keyword.

    '°7' -> 'dim7', '' -> 'M', 'm7' -> 'm7'.
    """
    quality = CHORD_ALIASES.get(value, value)
    if not is_chord_quality(quality):
        raise TheoryError(ErrorMessages.INVALID_CHORD_QUALITY.format(value=value))
    return quality


@dataclass(frozen=True)
class Chord:
    """
    A concrete chord: root note plus intervals from the root.

    Must contain at least three intervals, one of which is the unison.
    invert() and to_root_position() return new chords.

    Immutable and hashable.
    """

    root: Note
    intervals: tuple[Interval, ...]

    def __post_init__(self) -> None:
        """Validate the interval stack."""
        intervals = tuple(self.intervals)
        if len(intervals) < 3 or UNISON not in intervals:
            raise TheoryError(ErrorMessages.INVALID_CHORD)
        object.__setattr__(self, "intervals", intervals)

    @classmethod
    def parse(cls, symbol: str, octave: int | None = None) -> Chord:
        """
        Parse a chord symbol like 'C', 'F#m7', 'Bbø', 'C°7' or 'C/E'.

        Args:
            symbol: Root, optional quality (or alias), optional /bass
            octave: Optional octave for the root

        Returns:
            The chord, rotated into the inversion the bass note implies

        Raises:
            TheoryError: If the symbol is malformed or the bass note is
                not a chord tone
        """
        match = _SYMBOL_PATTERN.match(symbol)
        if match is None:
            raise TheoryError(ErrorMessages.INVALID_CHORD_NAME.format(value=symbol))

        root = Note.parse(match.group("root"))
        if octave is not None:
            root = root.with_octave(octave)

        intervals = CHORD_QUALITIES[resolve_quality(match.group("quality") or "")]

        bass_name = match.group("bass")
        if bass_name:
            bass = Note.parse(bass_name)
            for index, interval in enumerate(intervals):
                if root.transpose(interval) == bass:
                    break
            else:
                raise TheoryError(ErrorMessages.INVALID_BASE_NOTE.format(value=bass))
            intervals = intervals[index:] + intervals[:index]

        return cls(root, intervals)

    @classmethod
    def from_quality(cls, root: Note, quality: str) -> Chord:
        """Build a root-position chord from a quality keyword or alias."""
        return cls(root, CHORD_QUALITIES[resolve_quality(quality)])

    def copy(self) -> Chord:
        """Return an equal, independent chord."""
        return replace(self)

    @property
    def root_index(self) -> int:
        """Position of the unison in the interval sequence."""
        return self.intervals.index(UNISON)

    @property
    def inversion(self) -> int:
        """0 for root position, 1 for first inversion, and so on."""
        return (len(self.intervals) - self.root_index) % len(self.intervals)

    def invert(self, times: int = 1) -> Chord:
        """Rotate the lowest tone to the top, `times` times."""
        shift = times % len(self.intervals)
        return Chord(self.root, self.intervals[shift:] + self.intervals[:shift])

    def to_root_position(self) -> Chord:
        """Undo any inversion so the unison comes first."""
        return self.invert(len(self.intervals) - self.inversion)

    @property
    def quality(self) -> str | None:
        """
        Canonical quality keyword, or None for unnamed interval sets.

        The chord is compared in root position, so C/E is still 'M'.
        """
        intervals = self.to_root_position().intervals
        for name, template in CHORD_QUALITIES.items():
            if template == intervals:
                return name
        return None

    @property
    def notes(self) -> list[Note]:
        """
        Chord tones in voicing order.

        Tones rotated in front of the root (the bass of an inversion and
        anything before the root) drop an octave when the root has one.
        """
        root_index = self.root_index
        notes: list[Note] = []
        for index, interval in enumerate(self.intervals):
            note = self.root.transpose(interval)
            if index < root_index and note.octave is not None:
                note = note.with_octave(note.octave - 1)
            notes.append(note)
        return notes

    @property
    def bass(self) -> Note:
        """The lowest chord tone, derived from the first interval."""
        return self.notes[0]

    def __str__(self) -> str:
        quality = self.quality
        result = self.root.name

        if quality is None:
            result += "(?)"
        elif quality != "M":
            result += quality

        if self.inversion > 0:
            result += f"/{self.root.transpose(self.intervals[0]).name}"

        return result
