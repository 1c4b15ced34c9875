"""
Compilers from theory values to output formats.

- midi: Chord progressions to MIDI files (mido)
"""

from chuk_music_theory.compiler.midi import (
    TICKS_PER_BEAT,
    ToneEvent,
    beats_to_ticks,
    chord_to_events,
    chords_to_midi,
    events_to_midi,
)

__all__ = [
    "TICKS_PER_BEAT",
    "ToneEvent",
    "beats_to_ticks",
    "chord_to_events",
    "chords_to_midi",
    "events_to_midi",
]
