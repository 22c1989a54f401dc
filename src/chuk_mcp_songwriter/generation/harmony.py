"""
Harmony generator - progression templates resolved in a key.

A progression is a list of 0-based diatonic degrees. Resolving it in a key
takes each degree's root from the scale and its quality from the diatonic
quality table (natural minor for scales named "...minor", major otherwise).
One chord is placed per bar and the progression repeats to fill the bars.
"""

from __future__ import annotations

import logging
from types import MappingProxyType

from chuk_mcp_songwriter.core.chord import ChordType, degree_numeral
from chuk_mcp_songwriter.core.pitch import PitchClass, note_index
from chuk_mcp_songwriter.core.rhythm import DurationToken, bar_start
from chuk_mcp_songwriter.core.scale import DIATONIC_LENGTH, is_minor_scale, scale_notes
from chuk_mcp_songwriter.models.song import Chord, ProgressionChord

logger = logging.getLogger(__name__)

PROGRESSIONS: MappingProxyType[str, tuple[int, ...]] = MappingProxyType(
    {
        "I-IV-V-I": (0, 3, 4, 0),
        "I-V-vi-IV": (0, 4, 5, 3),
        "ii-V-I": (1, 4, 0),
        "I-vi-IV-V": (0, 5, 3, 4),
        "vi-IV-I-V": (5, 3, 0, 4),
        "I-IV-vi-V": (0, 3, 5, 4),
    }
)

MAJOR_QUALITIES: tuple[ChordType, ...] = (
    ChordType.MAJOR,
    ChordType.MINOR,
    ChordType.MINOR,
    ChordType.MAJOR,
    ChordType.MAJOR,
    ChordType.MINOR,
    ChordType.DIM,
)
MINOR_QUALITIES: tuple[ChordType, ...] = (
    ChordType.MINOR,
    ChordType.DIM,
    ChordType.MAJOR,
    ChordType.MINOR,
    ChordType.MINOR,
    ChordType.MAJOR,
    ChordType.MAJOR,
)

# Semitone moves for substitutions
RELATIVE_MINOR = 9
RELATIVE_MAJOR = 3
TRITONE = 6


def list_progressions() -> list[str]:
    """Progression names in display order."""
    return list(PROGRESSIONS)


def diatonic_qualities(scale_name: str) -> tuple[ChordType, ...]:
    """Chord quality per degree for a scale."""
    return MINOR_QUALITIES if is_minor_scale(scale_name) else MAJOR_QUALITIES


def diatonic_roots(key: str, scale_name: str) -> list[str]:
    """
    Chord roots per degree.

    Scales with fewer than seven notes (pentatonic, blues) cannot be
    indexed by a diatonic degree, so their parent major or natural minor
    scale supplies the roots.
    """
    roots = scale_notes(key, scale_name)
    if len(roots) < DIATONIC_LENGTH:
        parent = "minor" if is_minor_scale(scale_name) else "major"
        roots = scale_notes(key, parent)
    return roots


def generate_harmony(key: str, scale_name: str, progression_name: str, bars: int) -> list[Chord]:
    """
    Generate one chord per bar from a named progression.

    Args:
        key: Key root pitch class (e.g., 'C', 'F#')
        scale_name: Scale name; selects minor or major chord qualities
        progression_name: Key of PROGRESSIONS (e.g., 'I-V-vi-IV')
        bars: Number of bars to fill

    Returns:
        Exactly `bars` whole-bar chords starting at 'i:0:0', or an empty
        list when the progression is unknown or bars <= 0

    Example:
        generate_harmony("C", "major", "I-IV-V-I", 4)
        # C, F, G, C major chords at 0:0:0 .. 3:0:0
    """
    progression = PROGRESSIONS.get(progression_name)
    if progression is None:
        logger.debug(f"Unknown progression {progression_name!r}; nothing to generate")
        return []

    roots = diatonic_roots(key, scale_name)
    qualities = diatonic_qualities(scale_name)

    chords: list[Chord] = []
    for bar in range(max(bars, 0)):
        degree = progression[bar % len(progression)]
        chords.append(
            Chord(
                root=roots[degree],
                type=qualities[degree],
                duration=DurationToken.WHOLE,
                start_time=bar_start(bar),
            )
        )
    return chords


def get_progression_chords(
    key: str, scale_name: str, progression_name: str
) -> list[ProgressionChord]:
    """
    Resolve a progression once through, with Roman numerals.

    Returns an empty list for unknown progressions.
    """
    progression = PROGRESSIONS.get(progression_name)
    if progression is None:
        return []

    roots = diatonic_roots(key, scale_name)
    qualities = diatonic_qualities(scale_name)
    return [
        ProgressionChord(
            root=roots[degree],
            type=qualities[degree],
            numeral=degree_numeral(degree, qualities[degree]),
        )
        for degree in progression
    ]


def suggest_chord_substitutions(chord: Chord) -> list[Chord]:
    """
    Propose common substitutes for a chord.

    - major: relative minor, major 7th, sus4
    - minor: relative major, minor 7th
    - dominant 7th: tritone substitution
    Other qualities get no suggestions. Substitutes keep the chord's
    duration and start time; order is significant, duplicates are not
    removed.
    """
    root = PitchClass(note_index(chord.root))
    substitutions: list[Chord] = []

    if chord.type == ChordType.MAJOR:
        substitutions.append(
            chord.model_copy(
                update={"root": root.transpose(RELATIVE_MINOR).spell(), "type": ChordType.MINOR}
            )
        )
        substitutions.append(chord.model_copy(update={"type": ChordType.MAJOR7}))
        substitutions.append(chord.model_copy(update={"type": ChordType.SUS4}))
    elif chord.type == ChordType.MINOR:
        substitutions.append(
            chord.model_copy(
                update={"root": root.transpose(RELATIVE_MAJOR).spell(), "type": ChordType.MAJOR}
            )
        )
        substitutions.append(chord.model_copy(update={"type": ChordType.MINOR7}))

    if chord.type == ChordType.DOMINANT7:
        substitutions.append(
            chord.model_copy(update={"root": root.transpose(TRITONE).spell()})
        )

    return substitutions
