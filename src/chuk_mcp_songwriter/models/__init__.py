"""
Pydantic models for the songwriter.

This module provides:
- MelodyConfig: Key, scale, tempo and time signature for generation
- Note / Chord: Generated timeline records
- ProgressionChord: A progression step with its Roman numeral
- ProjectData: The saved-song file format
"""

from chuk_mcp_songwriter.models.project import (
    HarmonyData,
    Instrument,
    InstrumentType,
    LyricsData,
    MelodyData,
    ProjectData,
    SectionType,
    SongSection,
    export_project,
    generate_filename,
    parse_project,
)
from chuk_mcp_songwriter.models.song import Chord, MelodyConfig, Note, ProgressionChord

__all__ = [
    "Chord",
    "HarmonyData",
    "Instrument",
    "InstrumentType",
    "LyricsData",
    "MelodyConfig",
    "MelodyData",
    "Note",
    "ProgressionChord",
    "ProjectData",
    "SectionType",
    "SongSection",
    "export_project",
    "generate_filename",
    "parse_project",
]
