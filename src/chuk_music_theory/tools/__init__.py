"""
MCP tool implementations.

Tools are organized by domain:
- notes - Spelling, MIDI numbers, transposition
- intervals - Naming, measuring and inverting intervals
- chords - Chord symbols, inversions, quality detection
- export - MIDI export of chord progressions
"""

from chuk_music_theory.tools.chords import register_chord_tools
from chuk_music_theory.tools.export import register_export_tools
from chuk_music_theory.tools.intervals import register_interval_tools
from chuk_music_theory.tools.notes import register_note_tools

__all__ = [
    "register_chord_tools",
    "register_export_tools",
    "register_interval_tools",
    "register_note_tools",
]
