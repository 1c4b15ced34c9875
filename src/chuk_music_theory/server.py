#!/usr/bin/env python3
"""
Entry point for the CHUK Music Theory MCP Server.

This module provides the main entry point for the MCP server,
supporting multiple transport modes (stdio, http).
"""

import argparse
import asyncio
import logging
import os
from typing import get_args

from chuk_music_theory.constants import Transport

logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)


def main() -> None:
    """Main entry point with transport detection."""
    parser = argparse.ArgumentParser(description="CHUK Music Theory MCP Server")
    parser.add_argument(
        "--transport",
        choices=get_args(Transport),
        default="stdio",
        help="Transport mode (default: stdio)",
    )
    parser.add_argument(
        "--port",
        type=int,
        default=8000,
        help="HTTP port (only for http transport)",
    )
    parser.add_argument(
        "--output-dir",
        default=None,
        help="Directory for exported MIDI files (default: ./output)",
    )
    parser.add_argument(
        "--debug",
        action="store_true",
        help="Enable debug logging",
    )

    args = parser.parse_args()

    if args.debug:
        logging.getLogger().setLevel(logging.DEBUG)

    if args.output_dir:
        os.environ["CHUK_MUSIC_THEORY_OUTPUT_DIR"] = args.output_dir

    # Import after argument parsing so the output dir is picked up
    from chuk_music_theory.async_server import mcp

    if args.transport == "stdio":
        logger.info("Starting CHUK Music Theory MCP Server (stdio)")
        asyncio.run(mcp.run_stdio())
    else:
        logger.info(f"Starting CHUK Music Theory MCP Server (http:{args.port})")
        asyncio.run(mcp.run_http(port=args.port))


if __name__ == "__main__":
    main()
