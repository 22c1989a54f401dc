"""
Rhythm primitives - DurationToken and Position.

Time is counted in sixteenth-units on a fixed grid of 4 beats per bar and
4 sixteenths per beat (16 per bar). The grid does not follow the configured
time signature: generation always lays notes out on it, and consumers read
"bar:beat:sixteenth" strings literally.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from types import MappingProxyType

SIXTEENTHS_PER_BEAT = 4
BEATS_PER_BAR = 4
SIXTEENTHS_PER_BAR = SIXTEENTHS_PER_BEAT * BEATS_PER_BAR


class DurationToken(str, Enum):
    """The five canonical note values."""

    WHOLE = "whole"
    HALF = "half"
    QUARTER = "quarter"
    EIGHTH = "eighth"
    SIXTEENTH = "sixteenth"

    @property
    def sixteenths(self) -> int:
        """Length in sixteenth-units."""
        return _TOKEN_UNITS[self]


_TOKEN_UNITS = MappingProxyType(
    {
        DurationToken.WHOLE: 16,
        DurationToken.HALF: 8,
        DurationToken.QUARTER: 4,
        DurationToken.EIGHTH: 2,
        DurationToken.SIXTEENTH: 1,
    }
)
_UNIT_TOKENS = MappingProxyType({units: token for token, units in _TOKEN_UNITS.items()})


def duration_to_token(sixteenths: int) -> DurationToken:
    """
    Map a length in sixteenth-units to its token.

    Only 1, 2, 4, 8 and 16 have exact tokens; any other length is
    reported as an eighth.
    """
    return _UNIT_TOKENS.get(sixteenths, DurationToken.EIGHTH)


def token_to_sixteenths(token: str) -> int:
    """Length of a duration token in sixteenth-units (quarter if unknown)."""
    try:
        return DurationToken(token).sixteenths
    except ValueError:
        return DurationToken.QUARTER.sixteenths


@dataclass(frozen=True, order=True)
class Position:
    """
    A position on the sixteenth grid: bar, beat within bar, sixteenth within beat.

    All fields are 0-indexed. Ordered by (bar, beat, sixteenth).

    Examples:
        Position(0, 0, 0) = start of the first bar
        Position(1, 2, 0) = third beat of the second bar
    """

    bar: int
    beat: int = 0
    sixteenth: int = 0

    def __post_init__(self) -> None:
        if self.bar < 0:
            raise ValueError(f"Bar must be non-negative, got {self.bar}")
        if not 0 <= self.beat < BEATS_PER_BAR:
            raise ValueError(f"Beat must be 0-{BEATS_PER_BAR - 1}, got {self.beat}")
        if not 0 <= self.sixteenth < SIXTEENTHS_PER_BEAT:
            raise ValueError(f"Sixteenth must be 0-{SIXTEENTHS_PER_BEAT - 1}, got {self.sixteenth}")

    @classmethod
    def from_sixteenths(cls, sixteenths: int) -> Position:
        """Create a position from a running sixteenth count."""
        if sixteenths < 0:
            raise ValueError(f"Sixteenth count must be non-negative, got {sixteenths}")
        return cls(
            sixteenths // SIXTEENTHS_PER_BAR,
            (sixteenths % SIXTEENTHS_PER_BAR) // SIXTEENTHS_PER_BEAT,
            sixteenths % SIXTEENTHS_PER_BEAT,
        )

    def to_sixteenths(self) -> int:
        """Absolute sixteenth count from the start."""
        return self.bar * SIXTEENTHS_PER_BAR + self.beat * SIXTEENTHS_PER_BEAT + self.sixteenth

    @classmethod
    def parse(cls, notation: str) -> Position:
        """
        Parse a position from 'bar:beat:sixteenth' notation.

        Args:
            notation: Position string such as '2:1:0'

        Returns:
            Position
        """
        parts = notation.strip().split(":")
        if len(parts) != 3:
            raise ValueError(f"Invalid position format: {notation}. Expected 'bar:beat:sixteenth'")
        try:
            bar, beat, sixteenth = (int(part) for part in parts)
        except ValueError:
            raise ValueError(f"Invalid position format: {notation}") from None
        return cls(bar, beat, sixteenth)

    def __str__(self) -> str:
        return f"{self.bar}:{self.beat}:{self.sixteenth}"


def position_from_sixteenths(sixteenths: int) -> Position:
    """Position on the 16-per-bar grid for a running sixteenth count."""
    return Position.from_sixteenths(sixteenths)


def bar_start(bar: int) -> str:
    """Start time string of a bar ('3:0:0')."""
    return str(Position(bar))
