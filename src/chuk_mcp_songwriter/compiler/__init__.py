"""
Export pipeline - turns generated notes and chords into MIDI.

The pipeline:
    Note / Chord records → MidiEvent (absolute ticks) → MidiTrack → MIDI File
"""

from chuk_mcp_songwriter.compiler.midi import (
    TICKS_PER_BEAT,
    MidiEvent,
    duration_to_ticks,
    events_to_track,
    position_to_ticks,
    song_to_midi,
    velocity_float_to_int,
)

__all__ = [
    "TICKS_PER_BEAT",
    "MidiEvent",
    "duration_to_ticks",
    "events_to_track",
    "position_to_ticks",
    "song_to_midi",
    "velocity_float_to_int",
]
