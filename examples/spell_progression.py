#!/usr/bin/env python3
"""
Example: Spell a chord progression and export it to MIDI.

This walks a ii-V-I with inversions through the theory primitives:
parse symbols, print the spelled tones, then write a MIDI file.

Usage:
    python examples/spell_progression.py
    # Creates: examples/output/ii_V_I.mid
"""

from pathlib import Path

from chuk_music_theory import Chord, Interval, Note
from chuk_music_theory.compiler import chords_to_midi


def main() -> None:
    """Spell and export a progression."""
    output_dir = Path(__file__).parent / "output"
    output_dir.mkdir(exist_ok=True)

    # Example 1: Intervals keep their spelling
    print("Transpositions from C4:")
    c4 = Note.parse("C4")
    for token in ["m3", "A2", "d5", "A4", "M9"]:
        print(f"  C4 + {token:<3} = {c4.transpose(Interval.parse(token))}")

    # Example 2: Chords with smooth bass motion
    print("\nii-V-I in Bb:")
    chords = [Chord.parse(symbol, octave=3) for symbol in ["Cm7", "F7/A", "Bbmaj7"]]
    for chord in chords:
        tones = " ".join(str(note) for note in chord.notes)
        print(f"  {chord!s:<8} {tones}")

    # Example 3: Write it out
    mid = chords_to_midi(chords, beats_per_chord=4, tempo_bpm=96)
    mid.save(str(output_dir / "ii_V_I.mid"))
    print(f"\nCreated: {output_dir / 'ii_V_I.mid'}")


if __name__ == "__main__":
    main()
