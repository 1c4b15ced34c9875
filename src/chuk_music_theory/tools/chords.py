"""
Chord tools - MCP tools for parsing, building and inverting chords.
"""

from __future__ import annotations

import json
import logging
from typing import TYPE_CHECKING, Any

from chuk_music_theory.core import (
    CHORD_ALIASES,
    CHORD_QUALITIES,
    Chord,
    Interval,
    Note,
    TheoryError,
)
from chuk_music_theory.models import ChordInfo

if TYPE_CHECKING:
    from chuk_mcp_server import ChukMCPServer

logger = logging.getLogger(__name__)


def register_chord_tools(mcp: ChukMCPServer) -> dict[str, Any]:
    """
    Register chord tools with the MCP server.

    Args:
        mcp: The MCP server instance

    Returns:
        Dictionary of registered tool functions
    """
    tools: dict[str, Any] = {}

    @mcp.tool  # type: ignore[arg-type]
    async def theory_parse_chord(symbol: str, octave: int | None = None) -> str:
        """
        Parse a chord symbol into its intervals and notes.

        Accepts canonical qualities (m7, dim7, maj7(#5), ...), aliases
        (°, °7, +, +7, ø, sus) and a slash bass for inversions.

        Args:
            symbol: Chord symbol like 'Cm7b5', 'F#°7' or 'C/E'
            octave: Optional octave for the root (notes get octaves too)

        Returns:
            JSON string with chord details

        Example:
            theory_parse_chord(symbol="C/E", octave=4)
        """
        try:
            chord = Chord.parse(symbol, octave=octave)
            return json.dumps(
                {"status": "success", "chord": ChordInfo.from_chord(chord).model_dump()}
            )
        except TheoryError as e:
            logger.debug("Rejected chord %r: %s", symbol, e)
            return json.dumps({"status": "error", "message": str(e)})
        except Exception as e:
            logger.exception("Failed to parse chord")
            return json.dumps({"status": "error", "message": str(e)})

    tools["theory_parse_chord"] = theory_parse_chord

    @mcp.tool  # type: ignore[arg-type]
    async def theory_build_chord(
        root: str,
        quality: str | None = None,
        intervals: list[str] | None = None,
    ) -> str:
        """
        Build a chord from a root and either a quality or explicit intervals.

        Interval sets that match no named quality are reported with
        quality null and a '(?)' symbol.

        Args:
            root: Root note like 'A' or 'Bb3'
            quality: Quality keyword or alias (default: major)
            intervals: Interval tokens from the root, e.g. ['P1', 'M2', 'M3']

        Returns:
            JSON string with chord details

        Example:
            theory_build_chord(root="A", quality="dim")
        """
        try:
            root_note = Note.parse(root)
            if intervals is not None:
                chord = Chord(root_note, tuple(Interval.parse(token) for token in intervals))
            else:
                chord = Chord.from_quality(root_note, quality or "M")

            return json.dumps(
                {"status": "success", "chord": ChordInfo.from_chord(chord).model_dump()}
            )
        except TheoryError as e:
            logger.debug("Rejected chord on %r: %s", root, e)
            return json.dumps({"status": "error", "message": str(e)})
        except Exception as e:
            logger.exception("Failed to build chord")
            return json.dumps({"status": "error", "message": str(e)})

    tools["theory_build_chord"] = theory_build_chord

    @mcp.tool  # type: ignore[arg-type]
    async def theory_invert_chord(
        symbol: str,
        times: int = 1,
        octave: int | None = None,
    ) -> str:
        """
        Invert a chord by rotating its lowest tone to the top.

        Args:
            symbol: Chord symbol like 'C' or 'G7/B'
            times: Number of rotations (wraps around the chord size)
            octave: Optional octave for the root

        Returns:
            JSON string with the original and inverted chords

        Example:
            theory_invert_chord(symbol="C", times=2)
        """
        try:
            chord = Chord.parse(symbol, octave=octave)
            inverted = chord.invert(times)
            return json.dumps(
                {
                    "status": "success",
                    "original": ChordInfo.from_chord(chord).model_dump(),
                    "chord": ChordInfo.from_chord(inverted).model_dump(),
                    "message": f"{chord} inverted {times}x = {inverted}",
                }
            )
        except TheoryError as e:
            logger.debug("Rejected chord %r: %s", symbol, e)
            return json.dumps({"status": "error", "message": str(e)})
        except Exception as e:
            logger.exception("Failed to invert chord")
            return json.dumps({"status": "error", "message": str(e)})

    tools["theory_invert_chord"] = theory_invert_chord

    @mcp.tool  # type: ignore[arg-type]
    async def theory_list_chord_qualities() -> str:
        """
        List the named chord qualities and their aliases.

        Returns:
            JSON string with qualities (in detection order) and aliases

        Example:
            theory_list_chord_qualities()
        """
        try:
            return json.dumps(
                {
                    "status": "success",
                    "qualities": [
                        {
                            "name": name,
                            "intervals": [str(interval) for interval in intervals],
                            "aliases": [
                                alias for alias, target in CHORD_ALIASES.items() if target == name
                            ],
                        }
                        for name, intervals in CHORD_QUALITIES.items()
                    ],
                    "count": len(CHORD_QUALITIES),
                }
            )
        except Exception as e:
            logger.exception("Failed to list chord qualities")
            return json.dumps({"status": "error", "message": str(e)})

    tools["theory_list_chord_qualities"] = theory_list_chord_qualities

    return tools
