#!/usr/bin/env python3
"""
Async Music Theory MCP Server using chuk-mcp-server

This server provides MCP tools for spelled-pitch music theory:
notes, intervals and chord symbols, with correct enharmonic spelling.

The server provides tools for:
- Describing notes, spelling MIDI numbers and transposing by intervals
- Naming intervals between notes, inverting and measuring them
- Parsing and building chords, including inversions and aliases
- Exporting chord progressions to MIDI files
"""

import logging
import os
from pathlib import Path

from chuk_mcp_server import ChukMCPServer

from chuk_music_theory.tools import (
    register_chord_tools,
    register_export_tools,
    register_interval_tools,
    register_note_tools,
)

logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)

# Create the MCP server instance
mcp = ChukMCPServer("chuk-music-theory")

# Paths - MIDI exports land here unless overridden
OUTPUT_DIR = Path(os.environ.get("CHUK_MUSIC_THEORY_OUTPUT_DIR", Path.cwd() / "output"))

# Register all tools
note_tools = register_note_tools(mcp)
interval_tools = register_interval_tools(mcp)
chord_tools = register_chord_tools(mcp)
export_tools = register_export_tools(mcp, OUTPUT_DIR)

# Export tool functions for direct access
theory_describe_note = note_tools["theory_describe_note"]
theory_note_from_midi = note_tools["theory_note_from_midi"]
theory_transpose_note = note_tools["theory_transpose_note"]

theory_describe_interval = interval_tools["theory_describe_interval"]
theory_interval_between = interval_tools["theory_interval_between"]
theory_interval_from_semitones = interval_tools["theory_interval_from_semitones"]
theory_invert_interval = interval_tools["theory_invert_interval"]

theory_parse_chord = chord_tools["theory_parse_chord"]
theory_build_chord = chord_tools["theory_build_chord"]
theory_invert_chord = chord_tools["theory_invert_chord"]
theory_list_chord_qualities = chord_tools["theory_list_chord_qualities"]

theory_export_midi = export_tools["theory_export_midi"]

logger.info("CHUK Music Theory MCP Server initialized")
logger.info(f"  Output dir: {OUTPUT_DIR}")
