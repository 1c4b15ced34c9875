"""
Note tools - MCP tools for spelling and transposing notes.
"""

from __future__ import annotations

import json
import logging
from typing import TYPE_CHECKING, Any

from chuk_music_theory.core import Interval, Note, TheoryError
from chuk_music_theory.models import NoteInfo

if TYPE_CHECKING:
    from chuk_mcp_server import ChukMCPServer

logger = logging.getLogger(__name__)


def register_note_tools(mcp: ChukMCPServer) -> dict[str, Any]:
    """
    Register note tools with the MCP server.

    Args:
        mcp: The MCP server instance

    Returns:
        Dictionary of registered tool functions
    """
    tools: dict[str, Any] = {}

    @mcp.tool  # type: ignore[arg-type]
    async def theory_describe_note(note: str) -> str:
        """
        Describe a note: spelling, alteration, octave and MIDI number.

        Args:
            note: Note name like 'C', 'F#3' or 'Bbb-1'

        Returns:
            JSON string with note details

        Example:
            theory_describe_note(note="Eb4")
        """
        try:
            return json.dumps(
                {"status": "success", "note": NoteInfo.from_note(Note.parse(note)).model_dump()}
            )
        except TheoryError as e:
            logger.debug("Rejected note %r: %s", note, e)
            return json.dumps({"status": "error", "message": str(e)})
        except Exception as e:
            logger.exception("Failed to describe note")
            return json.dumps({"status": "error", "message": str(e)})

    tools["theory_describe_note"] = theory_describe_note

    @mcp.tool  # type: ignore[arg-type]
    async def theory_note_from_midi(midi: int) -> str:
        """
        Spell a MIDI note number. Black keys are spelled with sharps.

        Args:
            midi: MIDI note number (0-127, 60 = C4)

        Returns:
            JSON string with note details

        Example:
            theory_note_from_midi(midi=61)
        """
        try:
            return json.dumps(
                {"status": "success", "note": NoteInfo.from_note(Note.from_midi(midi)).model_dump()}
            )
        except TheoryError as e:
            logger.debug("Rejected MIDI number %r: %s", midi, e)
            return json.dumps({"status": "error", "message": str(e)})
        except Exception as e:
            logger.exception("Failed to spell MIDI note")
            return json.dumps({"status": "error", "message": str(e)})

    tools["theory_note_from_midi"] = theory_note_from_midi

    @mcp.tool  # type: ignore[arg-type]
    async def theory_transpose_note(note: str, interval: str) -> str:
        """
        Transpose a note up by an interval with correct spelling.

        The letter always moves by the interval's number, so
        C + m3 = Eb and C + A2 = D#.

        Args:
            note: Note name like 'C4'
            interval: Interval token like 'm3', 'P5', 'M9'

        Returns:
            JSON string with the original and transposed notes

        Example:
            theory_transpose_note(note="D4", interval="M3")
        """
        try:
            source = Note.parse(note)
            result = source.transpose(Interval.parse(interval))
            return json.dumps(
                {
                    "status": "success",
                    "note": NoteInfo.from_note(source).model_dump(),
                    "interval": interval,
                    "result": NoteInfo.from_note(result).model_dump(),
                    "message": f"{source} + {interval} = {result}",
                }
            )
        except TheoryError as e:
            logger.debug("Rejected transposition %r + %r: %s", note, interval, e)
            return json.dumps({"status": "error", "message": str(e)})
        except Exception as e:
            logger.exception("Failed to transpose note")
            return json.dumps({"status": "error", "message": str(e)})

    tools["theory_transpose_note"] = theory_transpose_note

    return tools
