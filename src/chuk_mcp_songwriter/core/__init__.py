"""
Core music primitives.

These are the deterministic building blocks the generators compose on:
- PitchClass / note_index / note_name: pitch arithmetic over 12 sharp names
- ScaleType / scale_notes: the scale table
- ChordType / chord_notes: the chord interval table
- DurationToken / Position: the sixteenth-grid time codec
"""

from chuk_mcp_songwriter.core.chord import (
    CHORD_TYPES,
    ChordType,
    chord_intervals,
    chord_notes,
    chord_symbol,
    degree_numeral,
    list_chord_types,
)
from chuk_mcp_songwriter.core.pitch import (
    NOTE_NAMES,
    PitchClass,
    format_pitch,
    note_index,
    note_name,
    parse_pitch,
    pitch_to_midi,
)
from chuk_mcp_songwriter.core.rhythm import (
    SIXTEENTHS_PER_BAR,
    DurationToken,
    Position,
    duration_to_token,
    position_from_sixteenths,
    token_to_sixteenths,
)
from chuk_mcp_songwriter.core.scale import (
    SCALES,
    ScaleType,
    is_minor_scale,
    list_scales,
    scale_intervals,
    scale_notes,
    scale_pitches,
)

__all__ = [
    # Pitch
    "NOTE_NAMES",
    "PitchClass",
    "format_pitch",
    "note_index",
    "note_name",
    "parse_pitch",
    "pitch_to_midi",
    # Scale
    "SCALES",
    "ScaleType",
    "is_minor_scale",
    "list_scales",
    "scale_intervals",
    "scale_notes",
    "scale_pitches",
    # Chord
    "CHORD_TYPES",
    "ChordType",
    "chord_intervals",
    "chord_notes",
    "chord_symbol",
    "degree_numeral",
    "list_chord_types",
    # Rhythm
    "SIXTEENTHS_PER_BAR",
    "DurationToken",
    "Position",
    "duration_to_token",
    "position_from_sixteenths",
    "token_to_sixteenths",
]
