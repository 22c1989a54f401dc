"""
Scale primitives - ScaleType and the scale table.

Scales are semitone offsets from a root. The table below is the fixed
vocabulary offered to callers; its key order is the user-facing order.
Unknown scale names resolve to the major scale.
"""

from __future__ import annotations

from dataclasses import dataclass
from types import MappingProxyType
from typing import ClassVar

from .pitch import note_index, note_name


@dataclass(frozen=True)
class ScaleType:
    """
    A scale defined by its offsets from the root.

    Offsets are cumulative (0, 2, 4, ...), start at the root and stay
    within one octave. A major scale is (0, 2, 4, 5, 7, 9, 11).

    Immutable and hashable.
    """

    offsets: tuple[int, ...]
    name: str = ""

    MAJOR: ClassVar[ScaleType]
    MINOR: ClassVar[ScaleType]
    PENTATONIC: ClassVar[ScaleType]
    BLUES: ClassVar[ScaleType]
    DORIAN: ClassVar[ScaleType]
    MIXOLYDIAN: ClassVar[ScaleType]

    def __post_init__(self) -> None:
        if not self.offsets or self.offsets[0] != 0:
            raise ValueError(f"Scale offsets must start at 0, got {self.offsets}")
        if any(b <= a for a, b in zip(self.offsets, self.offsets[1:])):
            raise ValueError(f"Scale offsets must be strictly ascending, got {self.offsets}")
        if self.offsets[-1] >= 12:
            raise ValueError(f"Scale offsets must stay within an octave, got {self.offsets}")

    def __len__(self) -> int:
        return len(self.offsets)

    def get_notes(self, root: str) -> list[str]:
        """Get the pitch class names of this scale starting from root."""
        root_index = note_index(root)
        return [note_name(root_index + offset) for offset in self.offsets]

    def __str__(self) -> str:
        return self.name or f"ScaleType({self.offsets})"


ScaleType.MAJOR = ScaleType((0, 2, 4, 5, 7, 9, 11), "major")
ScaleType.MINOR = ScaleType((0, 2, 3, 5, 7, 8, 10), "minor")
ScaleType.PENTATONIC = ScaleType((0, 2, 4, 7, 9), "pentatonic")
ScaleType.BLUES = ScaleType((0, 3, 5, 6, 7, 10), "blues")
ScaleType.DORIAN = ScaleType((0, 2, 3, 5, 7, 9, 10), "dorian")
ScaleType.MIXOLYDIAN = ScaleType((0, 2, 4, 5, 7, 9, 10), "mixolydian")

SCALES: MappingProxyType[str, ScaleType] = MappingProxyType(
    {
        "major": ScaleType.MAJOR,
        "minor": ScaleType.MINOR,
        "pentatonic": ScaleType.PENTATONIC,
        "blues": ScaleType.BLUES,
        "dorian": ScaleType.DORIAN,
        "mixolydian": ScaleType.MIXOLYDIAN,
    }
)

DIATONIC_LENGTH = 7


def get_scale(scale_name: str) -> ScaleType:
    """Look up a scale by name, falling back to major."""
    return SCALES.get(scale_name, ScaleType.MAJOR)


def list_scales() -> list[str]:
    """Scale names in display order."""
    return list(SCALES)


def is_minor_scale(scale_name: str) -> bool:
    """Whether a scale name selects minor-key harmony."""
    return "minor" in scale_name


def scale_intervals(scale_name: str) -> list[int]:
    """Semitone offsets of a named scale (major if unknown)."""
    return list(get_scale(scale_name).offsets)


def scale_notes(root: str, scale_name: str) -> list[str]:
    """
    Get the ordered pitch classes of a scale.

    Args:
        root: Root pitch class (octave digits are ignored)
        scale_name: Scale name; unknown names use major

    Returns:
        Pitch class names, one per scale degree (7, 5 or 6 of them)
    """
    return get_scale(scale_name).get_notes(root)


def scale_pitches(root: str, scale_name: str, octave: int = 4) -> list[str]:
    """
    Get the scale as pitch strings starting at the given octave.

    The octave increments when a degree passes B into the next C,
    so pitches always ascend.
    """
    root_index = note_index(root)
    pitches = []
    for offset in get_scale(scale_name).offsets:
        semitone = root_index + offset
        pitches.append(f"{note_name(semitone)}{octave + semitone // 12}")
    return pitches
