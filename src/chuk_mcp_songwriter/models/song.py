"""
Song models - the records the generators emit.

Notes and chords are immutable; an edit replaces the whole record.
Their string fields are contracts with playback, notation and MIDI
consumers: pitches are always <name><octave>, start times are always
three colon-separated integers.
"""

from __future__ import annotations

from pydantic import BaseModel, Field, field_validator

from chuk_mcp_songwriter.constants import MAX_TEMPO, MIN_TEMPO
from chuk_mcp_songwriter.core.chord import ChordType, chord_notes, chord_symbol
from chuk_mcp_songwriter.core.pitch import format_pitch, note_index, note_name, parse_pitch
from chuk_mcp_songwriter.core.rhythm import DurationToken, Position


def _validate_start_time(v: str) -> str:
    return str(Position.parse(v))


class MelodyConfig(BaseModel):
    """
    Musical context for generation.

    The numerator of the time signature sets the beat count per bar;
    positions are still laid out on the fixed 16-per-bar grid.
    """

    key: str = Field("C", description="Root pitch class (e.g., 'C', 'F#')")
    scale: str = Field("major", description="Scale name (e.g., 'major', 'dorian')")
    tempo: int = Field(120, ge=MIN_TEMPO, le=MAX_TEMPO, description="Tempo in BPM")
    time_signature: tuple[int, int] = Field((4, 4), description="(numerator, denominator)")

    @field_validator("key")
    @classmethod
    def validate_key(cls, v: str) -> str:
        """Normalise the key to sharp spelling."""
        return note_name(note_index(v))

    @field_validator("time_signature")
    @classmethod
    def validate_time_signature(cls, v: tuple[int, int]) -> tuple[int, int]:
        """Both parts must be positive."""
        if v[0] <= 0 or v[1] <= 0:
            raise ValueError(f"Invalid time signature: {v[0]}/{v[1]}")
        return v

    @property
    def beats_per_bar(self) -> int:
        return self.time_signature[0]


class Note(BaseModel):
    """A single melody note."""

    pitch: str = Field(..., description="Pitch string such as 'C4' or 'F#5'")
    duration: DurationToken = Field(..., description="Note value")
    start_time: str = Field(..., description="Position as 'bar:beat:sixteenth'")

    model_config = {"frozen": True}

    @field_validator("pitch")
    @classmethod
    def validate_pitch(cls, v: str) -> str:
        """Pitch must be <name><octave>; flats are respelled as sharps."""
        parsed = parse_pitch(v)
        if parsed is None:
            raise ValueError(f"Invalid pitch: {v}")
        return format_pitch(*parsed)

    @field_validator("start_time")
    @classmethod
    def validate_start_time(cls, v: str) -> str:
        return _validate_start_time(v)

    @property
    def position(self) -> Position:
        return Position.parse(self.start_time)

    @property
    def end_sixteenths(self) -> int:
        """Sixteenth count at which the note ends."""
        return self.position.to_sixteenths() + self.duration.sixteenths


class Chord(BaseModel):
    """A chord occupying a span of the timeline."""

    root: str = Field(..., description="Root pitch class")
    type: ChordType = Field(ChordType.MAJOR, description="Chord quality")
    duration: DurationToken = Field(DurationToken.WHOLE, description="Chord length")
    start_time: str = Field("0:0:0", description="Position as 'bar:beat:sixteenth'")

    model_config = {"frozen": True}

    @field_validator("root")
    @classmethod
    def validate_root(cls, v: str) -> str:
        """Normalise the root to a sharp pitch class."""
        return note_name(note_index(v))

    @field_validator("start_time")
    @classmethod
    def validate_start_time(cls, v: str) -> str:
        return _validate_start_time(v)

    @property
    def symbol(self) -> str:
        return chord_symbol(self.root, self.type)

    def get_notes(self, octave: int = 3) -> list[str]:
        """Chord tones as pitch strings with the root in the given octave."""
        return chord_notes(self.root, self.type, octave)


class ProgressionChord(BaseModel):
    """One step of a progression resolved in a key, with its Roman numeral."""

    root: str
    type: ChordType
    numeral: str

    model_config = {"frozen": True}

    @property
    def symbol(self) -> str:
        return chord_symbol(self.root, self.type)
