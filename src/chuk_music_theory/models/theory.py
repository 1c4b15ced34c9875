"""
Serializable views of the theory primitives.

The core types are plain frozen dataclasses; these pydantic models are
what tools hand back to callers as JSON.
"""

from __future__ import annotations

from pydantic import BaseModel, Field

from chuk_music_theory.core import Chord, Interval, Note


class NoteInfo(BaseModel):
    """A note as seen from outside."""

    name: str = Field(..., description="Spelling with octave if present (e.g., 'Eb4')")
    pitch_class: str = Field(..., description="Natural letter A-G")
    alteration: int = Field(0, ge=-2, le=2, description="Semitone alteration (-2 to 2)")
    octave: int | None = Field(None, ge=-1, le=9, description="Octave, if anchored")
    midi: int = Field(..., description="MIDI note number (octave 4 assumed if none)")

    model_config = {"frozen": True}

    @classmethod
    def from_note(cls, note: Note) -> NoteInfo:
        """Create info from a note."""
        return cls(
            name=str(note),
            pitch_class=note.pitch_class,
            alteration=note.alteration,
            octave=note.octave,
            midi=note.midi,
        )


class IntervalInfo(BaseModel):
    """An interval as seen from outside."""

    name: str = Field(..., description="Interval token (e.g., 'm7')")
    quality: str = Field(..., description="Quality symbol (P, m, M, d, dd, A, AA)")
    number: int = Field(..., gt=0, description="Diatonic number")
    semitones: int = Field(..., description="Chromatic size in semitones")
    compound: bool = Field(False, description="Wider than an octave")
    simple: str = Field(..., description="Reduced to within an octave")
    inverted: str = Field(..., description="Inversion within the octave")

    model_config = {"frozen": True}

    @classmethod
    def from_interval(cls, interval: Interval) -> IntervalInfo:
        """Create info from an interval."""
        return cls(
            name=str(interval),
            quality=interval.quality.value,
            number=interval.number,
            semitones=interval.semitones,
            compound=interval.is_compound,
            simple=str(interval.simple()),
            inverted=str(interval.invert()),
        )


class ChordInfo(BaseModel):
    """A chord as seen from outside."""

    symbol: str = Field(..., description="Chord symbol (e.g., 'Cm7', 'C/E', 'C(?)')")
    root: NoteInfo
    quality: str | None = Field(None, description="Canonical quality, None if unnamed")
    intervals: list[str] = Field(default_factory=list, description="Intervals in voicing order")
    inversion: int = Field(0, ge=0, description="0 = root position")
    notes: list[NoteInfo] = Field(default_factory=list, description="Chord tones, lowest first")

    model_config = {"frozen": True}

    @classmethod
    def from_chord(cls, chord: Chord) -> ChordInfo:
        """Create info from a chord."""
        return cls(
            symbol=str(chord),
            root=NoteInfo.from_note(chord.root),
            quality=chord.quality,
            intervals=[str(interval) for interval in chord.intervals],
            inversion=chord.inversion,
            notes=[NoteInfo.from_note(note) for note in chord.notes],
        )
