#!/usr/bin/env python3
"""
Async Songwriter MCP Server using chuk-mcp-server

This server provides MCP tools for procedural songwriting: melodies that
follow a contour over a scale, chord sequences built from progression
templates, and MIDI/project export of the results.

The server provides tools for:
- Listing the scale, chord type and progression vocabulary
- Spelling scales and chords
- Generating melodies (optionally sized to lyrics) and harmonies
- Suggesting chord substitutions
- Exporting MIDI files and project documents
"""

import logging
from pathlib import Path

from chuk_mcp_server import ChukMCPServer

from chuk_mcp_songwriter.settings import get_settings
from chuk_mcp_songwriter.tools import (
    register_export_tools,
    register_generation_tools,
    register_theory_tools,
)

logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)

# Create the MCP server instance
mcp = ChukMCPServer("chuk-mcp-songwriter")

# Paths - use standard project structure
BASE_PATH = Path.cwd()
OUTPUT_DIR = BASE_PATH / "output"

settings = get_settings()

# Register all tools
theory_tools = register_theory_tools(mcp)
generation_tools = register_generation_tools(mcp, settings)
export_tools = register_export_tools(mcp, OUTPUT_DIR)

# Export tool functions for direct access
songwriter_list_vocabulary = theory_tools["songwriter_list_vocabulary"]
songwriter_scale_notes = theory_tools["songwriter_scale_notes"]
songwriter_chord_notes = theory_tools["songwriter_chord_notes"]

songwriter_generate_melody = generation_tools["songwriter_generate_melody"]
songwriter_melody_for_lyrics = generation_tools["songwriter_melody_for_lyrics"]
songwriter_generate_harmony = generation_tools["songwriter_generate_harmony"]
songwriter_progression_chords = generation_tools["songwriter_progression_chords"]
songwriter_suggest_substitutions = generation_tools["songwriter_suggest_substitutions"]

songwriter_export_midi = export_tools["songwriter_export_midi"]
songwriter_export_project = export_tools["songwriter_export_project"]
songwriter_parse_project = export_tools["songwriter_parse_project"]

logger.info("CHUK Songwriter MCP Server initialized")
logger.info(f"  Output dir: {OUTPUT_DIR}")
logger.info(f"  Rhythm thresholds: {settings.rhythm.model_dump()}")
