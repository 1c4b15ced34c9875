"""
MIDI export - hear what a chord progression spells.

This module turns chords into MIDI files using mido. Each chord tone
becomes a ToneEvent that remembers its spelled Note, and each chord
leaves a marker with its symbol so a sequencer shows the progression.
Only note data is written; playback is left to whatever opens the file.
All operations are deterministic: same input → same output.
"""

from __future__ import annotations

from dataclasses import dataclass, replace
from typing import TYPE_CHECKING

from mido import Message, MetaMessage, MidiFile, MidiTrack

from chuk_music_theory.constants import DEFAULT_OCTAVE, MAX_MIDI, MIN_MIDI

if TYPE_CHECKING:
    from collections.abc import Sequence

    from chuk_music_theory.core import Chord, Note


# Standard ticks per beat (quarter note) - industry standard
TICKS_PER_BEAT = 480

DEFAULT_VELOCITY = 90

# At a shared tick: release, then label, then strike
_MESSAGE_ORDER = {"note_off": 0, "marker": 1, "note_on": 2}


@dataclass(frozen=True)
class ToneEvent:
    """
    One sounding chord tone.

    The spelled note is kept so the event can be traced back to the
    chord it came from; the file itself only stores the MIDI number.
    Times are absolute ticks from the start of the track.
    """

    note: Note
    start_ticks: int
    duration_ticks: int
    velocity: int = DEFAULT_VELOCITY
    channel: int = 0

    def __post_init__(self) -> None:
        """Validate MIDI ranges."""
        if not MIN_MIDI <= self.note.midi <= MAX_MIDI:
            raise ValueError(f"Note {self.note} is outside MIDI range (midi {self.note.midi})")
        if not 0 <= self.velocity <= 127:
            raise ValueError(f"Velocity must be 0-127, got {self.velocity}")
        if not 0 <= self.channel <= 15:
            raise ValueError(f"Channel must be 0-15, got {self.channel}")
        if self.start_ticks < 0:
            raise ValueError(f"Start ticks must be >= 0, got {self.start_ticks}")
        if self.duration_ticks < 0:
            raise ValueError(f"Duration ticks must be >= 0, got {self.duration_ticks}")

    @property
    def pitch(self) -> int:
        return self.note.midi

    @property
    def end_ticks(self) -> int:
        return self.start_ticks + self.duration_ticks

    def messages(self) -> list[tuple[int, Message]]:
        """The note_on/note_off pair, tagged with absolute ticks."""
        return [
            (
                self.start_ticks,
                Message("note_on", channel=self.channel, note=self.pitch, velocity=self.velocity),
            ),
            (
                self.end_ticks,
                Message("note_off", channel=self.channel, note=self.pitch, velocity=0),
            ),
        ]


def events_to_midi(
    events: Sequence[ToneEvent],
    tempo_bpm: int = 120,
    ticks_per_beat: int = TICKS_PER_BEAT,
    markers: Sequence[tuple[int, str]] = (),
) -> MidiFile:
    """
    Write tone events to a single-track MidiFile.

    Args:
        events: Tone events in any order
        tempo_bpm: Tempo in beats per minute
        ticks_per_beat: Resolution (default 480)
        markers: (absolute tick, text) pairs written as marker meta messages

    Returns:
        A mido MidiFile ready to be saved
    """
    mid = MidiFile(ticks_per_beat=ticks_per_beat)
    track = MidiTrack()
    mid.tracks.append(track)

    track.append(MetaMessage("set_tempo", tempo=int(60_000_000 / tempo_bpm), time=0))

    timeline: list[tuple[int, Message | MetaMessage]] = [
        (tick, MetaMessage("marker", text=text)) for tick, text in markers
    ]
    for event in events:
        timeline.extend(event.messages())

    # Stable sort keeps chord tones in voicing order
    timeline.sort(key=lambda item: (item[0], _MESSAGE_ORDER[item[1].type]))

    current_time = 0
    for abs_time, msg in timeline:
        track.append(msg.copy(time=abs_time - current_time))
        current_time = abs_time

    track.append(MetaMessage("end_of_track", time=0))

    return mid


def chord_to_events(
    chord: Chord,
    start_ticks: int,
    duration_ticks: int,
    velocity: int = DEFAULT_VELOCITY,
    channel: int = 0,
    strum_ticks: int = 0,
) -> list[ToneEvent]:
    """
    Voice a chord from its bass upwards.

    Tones come from chord.notes, so inversions sound with their bass
    lowest. Octave-less chords are voiced with the root in octave 4.
    With strum_ticks each tone enters that much after the one below it,
    and all tones still release together. Tones that would enter at or
    after the release are dropped.
    """
    if strum_ticks < 0:
        raise ValueError(f"Strum ticks must be >= 0, got {strum_ticks}")
    if chord.root.octave is None:
        chord = replace(chord, root=chord.root.with_octave(DEFAULT_OCTAVE))

    events: list[ToneEvent] = []
    for index, note in enumerate(chord.notes):
        offset = index * strum_ticks
        if offset and offset >= duration_ticks:
            break
        events.append(
            ToneEvent(
                note=note,
                start_ticks=start_ticks + offset,
                duration_ticks=duration_ticks - offset,
                velocity=velocity,
                channel=channel,
            )
        )
    return events


def chords_to_midi(
    chords: Sequence[Chord],
    beats_per_chord: float = 4,
    velocity: int = DEFAULT_VELOCITY,
    tempo_bpm: int = 120,
    ticks_per_beat: int = TICKS_PER_BEAT,
    strum_ticks: int = 0,
) -> MidiFile:
    """
    Render a chord progression one chord after another.

    Args:
        chords: Chords in playing order
        beats_per_chord: Length of each chord in beats
        velocity: Note velocity (0-127)
        tempo_bpm: Tempo in beats per minute
        ticks_per_beat: Resolution (default 480)
        strum_ticks: Delay between successive tones of a chord (0 = block chords)

    Returns:
        A mido MidiFile with one marker per chord symbol
    """
    duration = beats_to_ticks(beats_per_chord, ticks_per_beat)
    events: list[ToneEvent] = []
    markers: list[tuple[int, str]] = []
    for index, chord in enumerate(chords):
        start = index * duration
        markers.append((start, str(chord)))
        events.extend(
            chord_to_events(chord, start, duration, velocity, strum_ticks=strum_ticks)
        )

    return events_to_midi(
        events, tempo_bpm=tempo_bpm, ticks_per_beat=ticks_per_beat, markers=markers
    )


def beats_to_ticks(beats: float, ticks_per_beat: int = TICKS_PER_BEAT) -> int:
    """Convert a beat position to ticks."""
    return int(beats * ticks_per_beat)
