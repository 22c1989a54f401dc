"""
Procedural generators.

- harmony: progression templates resolved to one chord per bar
- rhythm: greedy sixteenth-unit patterns toward a target note count
- melody: contour-driven walks over scale degrees

All generators are synchronous and pure apart from an injectable
random.Random.
"""

from chuk_mcp_songwriter.generation.harmony import (
    PROGRESSIONS,
    generate_harmony,
    get_progression_chords,
    list_progressions,
    suggest_chord_substitutions,
)
from chuk_mcp_songwriter.generation.melody import (
    Contour,
    generate_melody,
    generate_melody_for_lyrics,
    octave_for_degree,
    select_contour_index,
)
from chuk_mcp_songwriter.generation.rhythm import generate_controlled_rhythm

__all__ = [
    # Harmony
    "PROGRESSIONS",
    "generate_harmony",
    "get_progression_chords",
    "list_progressions",
    "suggest_chord_substitutions",
    # Rhythm
    "generate_controlled_rhythm",
    # Melody
    "Contour",
    "generate_melody",
    "generate_melody_for_lyrics",
    "octave_for_degree",
    "select_contour_index",
]
