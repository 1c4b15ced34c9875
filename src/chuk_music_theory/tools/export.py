"""
Export tools - MCP tools for writing chord progressions to MIDI.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import TYPE_CHECKING, Any

from chuk_music_theory.compiler import chords_to_midi
from chuk_music_theory.core import Chord, TheoryError

if TYPE_CHECKING:
    from chuk_mcp_server import ChukMCPServer

logger = logging.getLogger(__name__)


def register_export_tools(mcp: ChukMCPServer, output_dir: Path) -> dict[str, Any]:
    """
    Register export tools with the MCP server.

    Args:
        mcp: The MCP server instance
        output_dir: Directory for output files

    Returns:
        Dictionary of registered tool functions
    """
    tools: dict[str, Any] = {}

    @mcp.tool  # type: ignore[arg-type]
    async def theory_export_midi(
        symbols: list[str],
        octave: int = 4,
        beats_per_chord: float = 4,
        tempo: int = 120,
        output_name: str = "progression",
        strum_ticks: int = 0,
    ) -> str:
        """
        Write a chord progression to a MIDI file, one marker per chord.

        Args:
            symbols: Chord symbols in order, e.g. ['C', 'Am/C', 'F', 'G7']
            octave: Octave for every chord root
            beats_per_chord: Length of each chord in beats
            tempo: Tempo in BPM
            output_name: Output filename (without .mid extension)
            strum_ticks: Delay between successive chord tones (0 = block chords)

        Returns:
            JSON string with the file path and the chords written

        Example:
            theory_export_midi(symbols=["Dm7", "G7", "Cmaj7"])
        """
        try:
            if not symbols:
                return json.dumps({"status": "error", "message": "No chords to export"})

            chords = [Chord.parse(symbol, octave=octave) for symbol in symbols]
            midi_file = chords_to_midi(
                chords,
                beats_per_chord=beats_per_chord,
                tempo_bpm=tempo,
                strum_ticks=strum_ticks,
            )

            output_path = output_dir / f"{output_name}.mid"
            output_dir.mkdir(parents=True, exist_ok=True)
            midi_file.save(str(output_path))

            return json.dumps(
                {
                    "status": "success",
                    "path": str(output_path),
                    "chords": [str(chord) for chord in chords],
                    "message": f"Exported {len(chords)} chords to {output_path.name}",
                }
            )
        except TheoryError as e:
            logger.debug("Rejected progression %r: %s", symbols, e)
            return json.dumps({"status": "error", "message": str(e)})
        except Exception as e:
            logger.exception("Failed to export MIDI")
            return json.dumps({"status": "error", "message": str(e)})

    tools["theory_export_midi"] = theory_export_midi

    return tools
