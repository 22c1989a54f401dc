"""
Project model - the saved-song file format.

A project bundles lyrics settings, the melody, the harmony and the
instrument mix into one JSON document. Parsing is lenient at the top
level: a file that is not JSON, or lacks a required section, yields
None rather than an exception.
"""

from __future__ import annotations

import logging
import re
from datetime import UTC, date, datetime
from enum import Enum

from pydantic import BaseModel, Field, ValidationError

from chuk_mcp_songwriter.models.song import Chord, MelodyConfig, Note

logger = logging.getLogger(__name__)

PROJECT_VERSION = "1.0.0"
DEFAULT_FILENAME = "songwriter-export"


class SectionType(str, Enum):
    """Song section kinds."""

    INTRO = "intro"
    VERSE = "verse"
    CHORUS = "chorus"
    BRIDGE = "bridge"
    OUTRO = "outro"


class InstrumentType(str, Enum):
    """What part an instrument plays."""

    MELODY = "melody"
    CHORDS = "chords"
    BASS = "bass"
    DRUMS = "drums"


class SongSection(BaseModel):
    """A block of lyric lines."""

    id: str
    type: SectionType
    lines: list[str] = Field(default_factory=list)


class LyricsData(BaseModel):
    """Lyric settings and text."""

    theme: str = ""
    mood: str = ""
    genre: str = ""
    syllables_per_line: int | None = Field(None, gt=0)
    words_per_line: int | None = Field(None, gt=0)
    rhyme_scheme: str = Field("free", description="ABAB, AABB, ABBA, free or custom")
    sections: list[SongSection] = Field(default_factory=list)


class MelodyData(BaseModel):
    """The melody and the context it was generated in."""

    config: MelodyConfig = Field(default_factory=MelodyConfig)
    notes: list[Note] = Field(default_factory=list)
    bars: int = Field(4, ge=0)


class HarmonyData(BaseModel):
    """The chord sequence and the progression it came from."""

    chords: list[Chord] = Field(default_factory=list)
    progression_name: str | None = None


class Instrument(BaseModel):
    """A mixer channel."""

    id: str
    name: str
    type: InstrumentType
    volume: float = Field(0.0, description="Volume in dB")
    muted: bool = False
    solo: bool = False


class ProjectData(BaseModel):
    """A complete saved song."""

    version: str = PROJECT_VERSION
    title: str
    created_at: datetime
    updated_at: datetime
    lyrics: LyricsData
    melody: MelodyData
    harmony: HarmonyData
    instruments: list[Instrument] = Field(default_factory=list)


def export_project(
    title: str,
    lyrics: LyricsData,
    melody: MelodyData,
    harmony: HarmonyData,
    instruments: list[Instrument] | None = None,
) -> str:
    """
    Serialise a project to JSON, stamping the version and timestamps.

    Args:
        title: Song title
        lyrics: Lyric settings
        melody: Melody and its config
        harmony: Chords and progression name
        instruments: Optional instrument list

    Returns:
        Indented JSON text
    """
    now = datetime.now(UTC)
    project = ProjectData(
        version=PROJECT_VERSION,
        title=title,
        created_at=now,
        updated_at=now,
        lyrics=lyrics,
        melody=melody,
        harmony=harmony,
        instruments=instruments or [],
    )
    return project.model_dump_json(indent=2)


def parse_project(text: str) -> ProjectData | None:
    """
    Parse project JSON.

    Returns:
        The project, or None if the text is not a valid project file
    """
    try:
        return ProjectData.model_validate_json(text)
    except ValidationError as e:
        logger.error(f"Invalid project file: {e}")
        return None


def generate_filename(title: str, extension: str, today: date | None = None) -> str:
    """
    Build a download filename such as 'my-song-2025-03-01.mid'.

    Non-alphanumeric runs become single dashes; an empty result falls
    back to DEFAULT_FILENAME.
    """
    sanitized = re.sub(r"[^a-z0-9]+", "-", title.lower()).strip("-") or DEFAULT_FILENAME
    stamp = (today or datetime.now(UTC).date()).isoformat()
    return f"{sanitized}-{stamp}.{extension}"
