"""
CHUK Songwriter - procedural melody and harmony generation.

The engine turns a key, a scale, a progression name and a bar count into
time-stamped notes and chords:

    from chuk_mcp_songwriter import MelodyConfig, generate_harmony, generate_melody

    config = MelodyConfig(key="A", scale="minor", tempo=96)
    notes = generate_melody(config, bars=8)
    chords = generate_harmony("A", "minor", "vi-IV-I-V", bars=8)

The MCP server (chuk_mcp_songwriter.server) exposes the same operations
as tools.
"""

from chuk_mcp_songwriter.generation import (
    generate_harmony,
    generate_melody,
    generate_melody_for_lyrics,
    suggest_chord_substitutions,
)
from chuk_mcp_songwriter.models import Chord, MelodyConfig, Note

__version__ = "0.1.0"

__all__ = [
    "Chord",
    "MelodyConfig",
    "Note",
    "generate_harmony",
    "generate_melody",
    "generate_melody_for_lyrics",
    "suggest_chord_substitutions",
]
