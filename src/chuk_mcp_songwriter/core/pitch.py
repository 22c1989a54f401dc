"""
Pitch primitives - pitch classes, note names and pitch strings.

A pitch class is one of the 12 chromatic names (octave-independent).
A pitch string is a pitch class followed by an octave ("C4", "F#5").
Output always uses sharp spelling; flats are accepted on input.
"""

from __future__ import annotations

import logging
import re
from enum import IntEnum

logger = logging.getLogger(__name__)

# Canonical spellings (module level to avoid IntEnum member issues)
NOTE_NAMES: tuple[str, ...] = (
    "C",
    "C#",
    "D",
    "D#",
    "E",
    "F",
    "F#",
    "G",
    "G#",
    "A",
    "A#",
    "B",
)
_FLAT_NAMES: tuple[str, ...] = (
    "C",
    "Db",
    "D",
    "Eb",
    "E",
    "F",
    "Gb",
    "G",
    "Ab",
    "A",
    "Bb",
    "B",
)

# Returned by note_index() for names it cannot place; callers read it as "C".
FALLBACK_INDEX = 0

# Pitch used for unparseable pitch strings when a MIDI number is required
FALLBACK_MIDI = 60

_PITCH_RE = re.compile(r"^([A-G](?:#|b)?)(-?\d+)$")


class PitchClass(IntEnum):
    """
    The 12 chromatic pitch classes (0-11).

    Octave-independent - C4 and C5 are both PitchClass.C.
    Enharmonic equivalents share the same value (C# == Db == 1).
    """

    C = 0
    Cs = 1  # C# / Db
    D = 2
    Ds = 3  # D# / Eb
    E = 4
    F = 5
    Fs = 6  # F# / Gb
    G = 7
    Gs = 8  # G# / Ab
    A = 9
    As = 10  # A# / Bb
    B = 11

    def transpose(self, semitones: int) -> PitchClass:
        """Transpose by a number of semitones (positive or negative)."""
        return PitchClass((self.value + semitones) % 12)

    def to_midi(self, octave: int = 4) -> int:
        """Convert to MIDI note number. C4 = 60."""
        return self.value + (octave + 1) * 12

    def spell(self) -> str:
        """Get the canonical (sharp) name."""
        return NOTE_NAMES[self.value]

    @classmethod
    def parse(cls, name: str) -> PitchClass:
        """Parse a pitch class from a string like 'C', 'C#', 'Db'."""
        name = name.strip()
        if name in NOTE_NAMES:
            return cls(NOTE_NAMES.index(name))
        if name in _FLAT_NAMES:
            return cls(_FLAT_NAMES.index(name))
        raise ValueError(f"Unknown pitch class: {name}")


def strip_octave(pitch: str) -> str:
    """Remove trailing octave digits (and a negative sign) from a pitch string."""
    return pitch.strip().rstrip("0123456789").rstrip("-")


def note_index(pitch: str) -> int:
    """
    Get the chromatic index (0-11) of a pitch class or pitch string.

    Trailing octave digits are ignored, so "A", "A3" and "A-1" all give 9.
    Unknown names never raise; they return FALLBACK_INDEX (C).

    Args:
        pitch: Pitch class ("F#") or pitch ("F#4")

    Returns:
        Index in 0..11
    """
    try:
        return PitchClass.parse(strip_octave(pitch)).value
    except ValueError:
        logger.debug(f"Unknown pitch {pitch!r}, falling back to C")
        return FALLBACK_INDEX


def note_name(index: int) -> str:
    """Get the canonical pitch class name for any integer (floor-mod 12)."""
    return PitchClass(index % 12).spell()


def format_pitch(pitch_class: str, octave: int) -> str:
    """Build a pitch string, normalising the pitch class to sharp spelling."""
    return f"{note_name(note_index(pitch_class))}{octave}"


def parse_pitch(pitch: str) -> tuple[str, int] | None:
    """
    Split a pitch string into (canonical pitch class, octave).

    Returns None when the string is not of the form <name><octave> or the
    name is a spelling outside the sharp and flat tables (Cb, E#).
    """
    match = _PITCH_RE.match(pitch.strip())
    if match is None:
        return None
    name, octave = match.groups()
    try:
        pitch_class = PitchClass.parse(name)
    except ValueError:
        return None
    return pitch_class.spell(), int(octave)


def pitch_to_midi(pitch: str) -> int:
    """
    Convert a pitch string to a MIDI note number (C4 = 60).

    Unparseable pitches map to FALLBACK_MIDI (middle C).
    """
    parsed = parse_pitch(pitch)
    if parsed is None:
        logger.debug(f"Unparseable pitch {pitch!r}, using middle C")
        return FALLBACK_MIDI
    name, octave = parsed
    return PitchClass.parse(name).to_midi(octave)
