"""
Pydantic models for the music theory system.

This module provides:
- NoteInfo: Serializable view of a Note
- IntervalInfo: Serializable view of an Interval
- ChordInfo: Serializable view of a Chord
"""

from chuk_music_theory.models.theory import ChordInfo, IntervalInfo, NoteInfo

__all__ = [
    "ChordInfo",
    "IntervalInfo",
    "NoteInfo",
]
