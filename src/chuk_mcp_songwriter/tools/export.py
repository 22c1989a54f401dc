"""
Export tools - MCP tools for MIDI files and project documents.

MIDI and project files are written under the server's output directory.
Notes and chords are passed in the same shape the generation tools return.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import TYPE_CHECKING, Any

from chuk_mcp_songwriter.compiler import song_to_midi
from chuk_mcp_songwriter.constants import (
    DEFAULT_BARS,
    MAX_TEMPO,
    MIN_TEMPO,
    ErrorMessages,
    SuccessMessages,
)
from chuk_mcp_songwriter.models import (
    Chord,
    HarmonyData,
    LyricsData,
    MelodyConfig,
    MelodyData,
    Note,
    export_project,
    generate_filename,
    parse_project,
)

if TYPE_CHECKING:
    from chuk_mcp_server import ChukMCPServer

logger = logging.getLogger(__name__)


def _check_tempo(tempo: int) -> None:
    if not MIN_TEMPO <= tempo <= MAX_TEMPO:
        raise ValueError(
            ErrorMessages.INVALID_TEMPO.format(
                tempo=tempo, min_tempo=MIN_TEMPO, max_tempo=MAX_TEMPO
            )
        )


def register_export_tools(mcp: ChukMCPServer, output_dir: Path) -> dict[str, Any]:
    """
    Register export tools with the MCP server.

    Args:
        mcp: The MCP server instance
        output_dir: Directory for written files

    Returns:
        Dictionary of registered tool functions
    """
    tools: dict[str, Any] = {}

    @mcp.tool  # type: ignore[arg-type]
    async def songwriter_export_midi(
        notes: list[dict[str, Any]],
        chords: list[dict[str, Any]] | None = None,
        tempo: int = 120,
        title: str = "Songwriter Export",
    ) -> str:
        """
        Export a melody and chords to a MIDI file.

        Writes a type-1 file with Melody, Chords and Bass tracks (empty
        parts are skipped).

        Args:
            notes: Notes as returned by songwriter_generate_melody
            chords: Chords as returned by songwriter_generate_harmony
            tempo: Tempo in BPM (20-400)
            title: Song title (also used for the filename)

        Returns:
            JSON string with the output path and track summary

        Example:
            songwriter_export_midi(notes=melody["notes"], chords=harmony["chords"], tempo=96)
        """
        try:
            _check_tempo(tempo)
            parsed_notes = [Note.model_validate(n) for n in notes]
            parsed_chords = [Chord.model_validate(c) for c in chords or []]

            mid = song_to_midi(parsed_notes, parsed_chords, tempo_bpm=tempo, title=title)

            output_dir.mkdir(parents=True, exist_ok=True)
            output_path = output_dir / generate_filename(title, "mid")
            mid.save(str(output_path))
            logger.info(f"Wrote {len(parsed_notes)} notes, {len(parsed_chords)} chords to {output_path}")

            return json.dumps(
                {
                    "status": "success",
                    "message": SuccessMessages.MIDI_EXPORTED.format(path=output_path),
                    "path": str(output_path),
                    "tracks": [track.name for track in mid.tracks],
                    "notes": len(parsed_notes),
                    "chords": len(parsed_chords),
                }
            )
        except ValueError as e:
            return json.dumps({"status": "error", "message": str(e)})
        except Exception as e:
            logger.exception("Failed to export MIDI")
            return json.dumps({"status": "error", "message": str(e)})

    tools["songwriter_export_midi"] = songwriter_export_midi

    @mcp.tool  # type: ignore[arg-type]
    async def songwriter_export_project(
        title: str,
        notes: list[dict[str, Any]] | None = None,
        chords: list[dict[str, Any]] | None = None,
        key: str = "C",
        scale: str = "major",
        tempo: int = 120,
        bars: int = DEFAULT_BARS,
        progression: str | None = None,
        lyrics: dict[str, Any] | None = None,
        save: bool = True,
    ) -> str:
        """
        Export a song as a project JSON document.

        Args:
            title: Song title
            notes: Melody notes
            chords: Harmony chords
            key: Key root the melody was written in
            scale: Scale name
            tempo: Tempo in BPM
            bars: Melody length in bars
            progression: Progression name the chords came from
            lyrics: Optional lyric settings (theme, mood, genre, sections, ...)
            save: Whether to also write the file to the output directory

        Returns:
            JSON string with the project document (and path if saved)

        Example:
            songwriter_export_project(title="My Song", notes=..., chords=...)
        """
        try:
            melody = MelodyData(
                config=MelodyConfig(key=key, scale=scale, tempo=tempo),
                notes=[Note.model_validate(n) for n in notes or []],
                bars=bars,
            )
            harmony = HarmonyData(
                chords=[Chord.model_validate(c) for c in chords or []],
                progression_name=progression,
            )
            content = export_project(
                title=title,
                lyrics=LyricsData.model_validate(lyrics or {}),
                melody=melody,
                harmony=harmony,
            )

            result: dict[str, Any] = {"status": "success", "project": json.loads(content)}
            if save:
                output_dir.mkdir(parents=True, exist_ok=True)
                output_path = output_dir / generate_filename(title, "json")
                output_path.write_text(content)
                result["path"] = str(output_path)
                result["message"] = SuccessMessages.PROJECT_EXPORTED.format(path=output_path)

            return json.dumps(result)
        except ValueError as e:
            return json.dumps({"status": "error", "message": str(e)})
        except Exception as e:
            logger.exception("Failed to export project")
            return json.dumps({"status": "error", "message": str(e)})

    tools["songwriter_export_project"] = songwriter_export_project

    @mcp.tool  # type: ignore[arg-type]
    async def songwriter_parse_project(content: str) -> str:
        """
        Parse and validate a project JSON document.

        Args:
            content: Project file text

        Returns:
            JSON string with a summary of the project

        Example:
            songwriter_parse_project(content=open("my-song.json").read())
        """
        try:
            project = parse_project(content)
            if project is None:
                return json.dumps({"status": "error", "message": ErrorMessages.INVALID_PROJECT})

            return json.dumps(
                {
                    "status": "success",
                    "project": {
                        "title": project.title,
                        "version": project.version,
                        "key": project.melody.config.key,
                        "scale": project.melody.config.scale,
                        "tempo": project.melody.config.tempo,
                        "bars": project.melody.bars,
                        "notes": len(project.melody.notes),
                        "chords": len(project.harmony.chords),
                        "progression": project.harmony.progression_name,
                        "sections": len(project.lyrics.sections),
                    },
                }
            )
        except Exception as e:
            logger.exception("Failed to parse project")
            return json.dumps({"status": "error", "message": str(e)})

    tools["songwriter_parse_project"] = songwriter_parse_project

    return tools
