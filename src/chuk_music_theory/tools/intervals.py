"""
Interval tools - MCP tools for naming and measuring intervals.
"""

from __future__ import annotations

import json
import logging
from typing import TYPE_CHECKING, Any

from chuk_music_theory.core import Interval, Note, TheoryError
from chuk_music_theory.models import IntervalInfo

if TYPE_CHECKING:
    from chuk_mcp_server import ChukMCPServer

logger = logging.getLogger(__name__)


def register_interval_tools(mcp: ChukMCPServer) -> dict[str, Any]:
    """
    Register interval tools with the MCP server.

    Args:
        mcp: The MCP server instance

    Returns:
        Dictionary of registered tool functions
    """
    tools: dict[str, Any] = {}

    def _success(interval: Interval, **extra: Any) -> str:
        return json.dumps(
            {
                "status": "success",
                "interval": IntervalInfo.from_interval(interval).model_dump(),
                **extra,
            }
        )

    @mcp.tool  # type: ignore[arg-type]
    async def theory_describe_interval(interval: str) -> str:
        """
        Describe an interval: size in semitones, simple form and inversion.

        Args:
            interval: Interval token like 'M3', 'd5', 'AA2' or 'm10'

        Returns:
            JSON string with interval details

        Example:
            theory_describe_interval(interval="m10")
        """
        try:
            return _success(Interval.parse(interval))
        except TheoryError as e:
            logger.debug("Rejected interval %r: %s", interval, e)
            return json.dumps({"status": "error", "message": str(e)})
        except Exception as e:
            logger.exception("Failed to describe interval")
            return json.dumps({"status": "error", "message": str(e)})

    tools["theory_describe_interval"] = theory_describe_interval

    @mcp.tool  # type: ignore[arg-type]
    async def theory_interval_between(lower: str, upper: str) -> str:
        """
        Name the interval from one note up to another.

        Octave-less notes are compared within the same octave, so the
        upper note must not sit on an earlier letter.

        Args:
            lower: Lower note like 'C4'
            upper: Upper note like 'Eb4'

        Returns:
            JSON string with interval details

        Example:
            theory_interval_between(lower="A4", upper="D5")
        """
        try:
            interval = Interval.between(Note.parse(lower), Note.parse(upper))
            return _success(interval, message=f"{lower} -> {upper} = {interval}")
        except TheoryError as e:
            logger.debug("Rejected notes %r, %r: %s", lower, upper, e)
            return json.dumps({"status": "error", "message": str(e)})
        except Exception as e:
            logger.exception("Failed to name interval")
            return json.dumps({"status": "error", "message": str(e)})

    tools["theory_interval_between"] = theory_interval_between

    @mcp.tool  # type: ignore[arg-type]
    async def theory_interval_from_semitones(semitones: int) -> str:
        """
        Canonical interval for a semitone count (6 is always d5).

        Args:
            semitones: Non-negative number of semitones

        Returns:
            JSON string with interval details

        Example:
            theory_interval_from_semitones(semitones=14)
        """
        try:
            return _success(Interval.from_semitones(semitones))
        except TheoryError as e:
            logger.debug("Rejected semitone count %r: %s", semitones, e)
            return json.dumps({"status": "error", "message": str(e)})
        except Exception as e:
            logger.exception("Failed to convert semitones")
            return json.dumps({"status": "error", "message": str(e)})

    tools["theory_interval_from_semitones"] = theory_interval_from_semitones

    @mcp.tool  # type: ignore[arg-type]
    async def theory_invert_interval(interval: str) -> str:
        """
        Invert an interval within the octave (M3 -> m6, A4 -> d5).

        Args:
            interval: Interval token

        Returns:
            JSON string with the inverted interval's details

        Example:
            theory_invert_interval(interval="M2")
        """
        try:
            original = Interval.parse(interval)
            inverted = original.invert()
            return _success(inverted, message=f"{original} inverts to {inverted}")
        except TheoryError as e:
            logger.debug("Rejected interval %r: %s", interval, e)
            return json.dumps({"status": "error", "message": str(e)})
        except Exception as e:
            logger.exception("Failed to invert interval")
            return json.dumps({"status": "error", "message": str(e)})

    tools["theory_invert_interval"] = theory_invert_interval

    return tools
