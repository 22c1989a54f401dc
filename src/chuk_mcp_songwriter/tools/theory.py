"""
Theory tools - MCP tools for the fixed music-theory vocabulary.

Tools for listing scales, chord types and progressions, and spelling
scales and chords.
"""

from __future__ import annotations

import json
import logging
from typing import TYPE_CHECKING, Any

from chuk_mcp_songwriter.core import (
    chord_intervals,
    chord_notes,
    list_chord_types,
    list_scales,
    scale_intervals,
    scale_notes,
    scale_pitches,
)
from chuk_mcp_songwriter.generation import PROGRESSIONS, list_progressions

if TYPE_CHECKING:
    from chuk_mcp_server import ChukMCPServer

logger = logging.getLogger(__name__)


def register_theory_tools(mcp: ChukMCPServer) -> dict[str, Any]:
    """
    Register theory lookup tools with the MCP server.

    Args:
        mcp: The MCP server instance

    Returns:
        Dictionary of registered tool functions
    """
    tools: dict[str, Any] = {}

    @mcp.tool  # type: ignore[arg-type]
    async def songwriter_list_vocabulary() -> str:
        """
        List the scales, chord types and progressions the generators know.

        Names are returned in display order.

        Returns:
            JSON string with scales, chord_types and progressions

        Example:
            songwriter_list_vocabulary()
        """
        try:
            return json.dumps(
                {
                    "status": "success",
                    "scales": list_scales(),
                    "chord_types": list_chord_types(),
                    "progressions": [
                        {"name": name, "degrees": list(PROGRESSIONS[name])}
                        for name in list_progressions()
                    ],
                }
            )
        except Exception as e:
            logger.exception("Failed to list vocabulary")
            return json.dumps({"status": "error", "message": str(e)})

    tools["songwriter_list_vocabulary"] = songwriter_list_vocabulary

    @mcp.tool  # type: ignore[arg-type]
    async def songwriter_scale_notes(
        root: str,
        scale: str = "major",
        octave: int | None = None,
    ) -> str:
        """
        Spell a scale.

        Unknown scale names fall back to major.

        Args:
            root: Root pitch class (e.g., 'C', 'F#')
            scale: Scale name (e.g., 'major', 'blues')
            octave: Optional octave; when given, pitches include octaves

        Returns:
            JSON string with the scale's notes and intervals

        Example:
            songwriter_scale_notes(root="A", scale="minor")
        """
        try:
            notes = scale_notes(root, scale) if octave is None else scale_pitches(root, scale, octave)
            return json.dumps(
                {
                    "status": "success",
                    "root": root,
                    "scale": scale,
                    "intervals": scale_intervals(scale),
                    "notes": notes,
                }
            )
        except Exception as e:
            logger.exception("Failed to spell scale")
            return json.dumps({"status": "error", "message": str(e)})

    tools["songwriter_scale_notes"] = songwriter_scale_notes

    @mcp.tool  # type: ignore[arg-type]
    async def songwriter_chord_notes(
        root: str,
        chord_type: str = "major",
        octave: int = 3,
    ) -> str:
        """
        Spell a chord as pitches.

        Unknown chord types fall back to a major triad.

        Args:
            root: Root pitch class
            chord_type: Chord type (e.g., 'minor', 'dominant7')
            octave: Octave of the root (default 3)

        Returns:
            JSON string with the chord's pitches and intervals

        Example:
            songwriter_chord_notes(root="A", chord_type="minor")
        """
        try:
            return json.dumps(
                {
                    "status": "success",
                    "root": root,
                    "chord_type": chord_type,
                    "intervals": chord_intervals(chord_type),
                    "notes": chord_notes(root, chord_type, octave),
                }
            )
        except Exception as e:
            logger.exception("Failed to spell chord")
            return json.dumps({"status": "error", "message": str(e)})

    tools["songwriter_chord_notes"] = songwriter_chord_notes

    return tools
