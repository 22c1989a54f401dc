"""
Chord primitives - ChordType, interval table and chord spelling.

Chords are interval stacks measured from the root, not stacked thirds.
A major triad is root + M3 + P5 (0, 4, 7 semitones).
Unknown chord types resolve to the major triad.
"""

from __future__ import annotations

from enum import Enum
from types import MappingProxyType

from .pitch import note_index, note_name


class ChordType(str, Enum):
    """The chord qualities the generators and exporters understand."""

    MAJOR = "major"
    MINOR = "minor"
    DIM = "dim"
    AUG = "aug"
    DOMINANT7 = "dominant7"
    MAJOR7 = "major7"
    MINOR7 = "minor7"
    SUS2 = "sus2"
    SUS4 = "sus4"

    @property
    def intervals(self) -> tuple[int, ...]:
        """Semitone offsets from the root."""
        return CHORD_TYPES[self.value]

    @property
    def symbol(self) -> str:
        """Lead-sheet suffix (C, Cm, Cdim, C7, ...)."""
        return _SYMBOLS[self]


CHORD_TYPES: MappingProxyType[str, tuple[int, ...]] = MappingProxyType(
    {
        "major": (0, 4, 7),
        "minor": (0, 3, 7),
        "dim": (0, 3, 6),
        "aug": (0, 4, 8),
        "dominant7": (0, 4, 7, 10),
        "major7": (0, 4, 7, 11),
        "minor7": (0, 3, 7, 10),
        "sus2": (0, 2, 7),
        "sus4": (0, 5, 7),
    }
)

_SYMBOLS = {
    ChordType.MAJOR: "",
    ChordType.MINOR: "m",
    ChordType.DIM: "dim",
    ChordType.AUG: "aug",
    ChordType.DOMINANT7: "7",
    ChordType.MAJOR7: "maj7",
    ChordType.MINOR7: "m7",
    ChordType.SUS2: "sus2",
    ChordType.SUS4: "sus4",
}

_NUMERALS = ("I", "II", "III", "IV", "V", "VI", "VII")


def list_chord_types() -> list[str]:
    """Chord type names in display order."""
    return list(CHORD_TYPES)


def chord_intervals(chord_type: str) -> list[int]:
    """Semitone offsets for a chord type (major triad if unknown)."""
    key = chord_type.value if isinstance(chord_type, ChordType) else chord_type
    return list(CHORD_TYPES.get(key, CHORD_TYPES["major"]))


def chord_notes(root: str, chord_type: str, octave: int = 3) -> list[str]:
    """
    Spell a chord as pitch strings.

    The root sits in the given octave; each chord tone's octave is
    octave + (root_index + interval) // 12, so tones that pass B roll
    into the next octave (A minor at octave 3 is A3, C4, E4).

    Args:
        root: Root pitch class
        chord_type: Chord type name; unknown names use major
        octave: Octave of the root

    Returns:
        Pitch strings in ascending order
    """
    root_index = note_index(root)
    notes = []
    for interval in chord_intervals(chord_type):
        semitone = root_index + interval
        notes.append(f"{note_name(semitone)}{octave + semitone // 12}")
    return notes


def chord_symbol(root: str, chord_type: str) -> str:
    """Lead-sheet name such as 'Am' or 'G7'."""
    try:
        suffix = ChordType(chord_type).symbol
    except ValueError:
        suffix = ""
    return f"{note_name(note_index(root))}{suffix}"


def degree_numeral(degree: int, chord_type: str) -> str:
    """
    Roman numeral for a 0-based scale degree.

    Case indicates quality: upper case for major-family chords, lower case
    for minor and diminished, with a trailing ° for diminished.
    """
    base = _NUMERALS[degree % len(_NUMERALS)]
    if chord_type in (ChordType.MINOR, ChordType.MINOR7, ChordType.DIM):
        base = base.lower()
    if chord_type == ChordType.DIM:
        base += "°"
    elif chord_type == ChordType.AUG:
        base += "+"
    return base
