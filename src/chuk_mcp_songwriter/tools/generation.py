"""
Generation tools - MCP tools for melodies and chord progressions.

Every generation tool accepts an optional seed so a result can be
reproduced exactly.
"""

from __future__ import annotations

import json
import logging
import random
from typing import TYPE_CHECKING, Any

from chuk_mcp_songwriter.constants import DEFAULT_BARS, MAX_BARS, ErrorMessages
from chuk_mcp_songwriter.generation import (
    PROGRESSIONS,
    generate_harmony,
    generate_melody,
    generate_melody_for_lyrics,
    get_progression_chords,
    suggest_chord_substitutions,
)
from chuk_mcp_songwriter.models import Chord, MelodyConfig
from chuk_mcp_songwriter.settings import DEFAULT_SETTINGS, GenerationSettings

if TYPE_CHECKING:
    from chuk_mcp_server import ChukMCPServer

logger = logging.getLogger(__name__)


def parse_time_signature(notation: str) -> tuple[int, int]:
    """Parse '4/4' style notation into (numerator, denominator)."""
    parts = notation.split("/")
    if len(parts) != 2:
        raise ValueError(f"Invalid time signature format: {notation}")
    return int(parts[0]), int(parts[1])


def _check_bars(bars: int) -> None:
    if not 1 <= bars <= MAX_BARS:
        raise ValueError(ErrorMessages.INVALID_BARS.format(bars=bars, max_bars=MAX_BARS))


def register_generation_tools(
    mcp: ChukMCPServer,
    settings: GenerationSettings | None = None,
) -> dict[str, Any]:
    """
    Register melody and harmony generation tools with the MCP server.

    Args:
        mcp: The MCP server instance
        settings: Generation tunables (defaults if omitted)

    Returns:
        Dictionary of registered tool functions
    """
    tools: dict[str, Any] = {}
    settings = settings or DEFAULT_SETTINGS

    @mcp.tool  # type: ignore[arg-type]
    async def songwriter_generate_melody(
        key: str = "C",
        scale: str = "major",
        bars: int = DEFAULT_BARS,
        tempo: int = 120,
        time_signature: str = "4/4",
        syllable_pattern: list[int] | None = None,
        seed: int | None = None,
    ) -> str:
        """
        Generate a melody.

        The melody follows one randomly chosen contour (ascending,
        descending, arch, wave or random walk) over the scale, at about two
        notes per beat or one note per syllable, whichever is more.

        Args:
            key: Key root (e.g., 'C', 'F#')
            scale: Scale name (e.g., 'major', 'minor', 'pentatonic')
            bars: Number of bars (1-256)
            tempo: Tempo in BPM
            time_signature: Time signature (default: '4/4')
            syllable_pattern: Optional syllables per lyric line
            seed: Optional random seed for reproducible output

        Returns:
            JSON string with the config and generated notes

        Example:
            songwriter_generate_melody(key="A", scale="minor", bars=8, seed=42)
        """
        try:
            _check_bars(bars)
            if syllable_pattern and any(count <= 0 for count in syllable_pattern):
                raise ValueError(ErrorMessages.INVALID_SYLLABLES)
            config = MelodyConfig(
                key=key,
                scale=scale,
                tempo=tempo,
                time_signature=parse_time_signature(time_signature),
            )
            notes = generate_melody(
                config,
                bars,
                syllable_pattern,
                rng=random.Random(seed),
                settings=settings,
            )
            return json.dumps(
                {
                    "status": "success",
                    "config": config.model_dump(mode="json"),
                    "bars": bars,
                    "notes": [note.model_dump(mode="json") for note in notes],
                }
            )
        except ValueError as e:
            return json.dumps({"status": "error", "message": str(e)})
        except Exception as e:
            logger.exception("Failed to generate melody")
            return json.dumps({"status": "error", "message": str(e)})

    tools["songwriter_generate_melody"] = songwriter_generate_melody

    @mcp.tool  # type: ignore[arg-type]
    async def songwriter_melody_for_lyrics(
        lines: list[str],
        key: str = "C",
        scale: str = "major",
        bars: int = DEFAULT_BARS,
        tempo: int = 120,
        seed: int | None = None,
    ) -> str:
        """
        Generate a melody sized to lyric lines.

        Syllables are estimated from the word count; long lyrics get extra
        bars (at least one per eight words).

        Args:
            lines: Lyric lines
            key: Key root
            scale: Scale name
            bars: Minimum number of bars
            tempo: Tempo in BPM
            seed: Optional random seed

        Returns:
            JSON string with the generated notes

        Example:
            songwriter_melody_for_lyrics(lines=["hello darkness", "my old friend"])
        """
        try:
            _check_bars(bars)
            config = MelodyConfig(key=key, scale=scale, tempo=tempo)
            notes = generate_melody_for_lyrics(
                config,
                lines,
                bars,
                rng=random.Random(seed),
                settings=settings,
            )
            return json.dumps(
                {
                    "status": "success",
                    "config": config.model_dump(mode="json"),
                    "notes": [note.model_dump(mode="json") for note in notes],
                }
            )
        except ValueError as e:
            return json.dumps({"status": "error", "message": str(e)})
        except Exception as e:
            logger.exception("Failed to generate melody for lyrics")
            return json.dumps({"status": "error", "message": str(e)})

    tools["songwriter_melody_for_lyrics"] = songwriter_melody_for_lyrics

    @mcp.tool  # type: ignore[arg-type]
    async def songwriter_generate_harmony(
        progression: str,
        key: str = "C",
        scale: str = "major",
        bars: int = DEFAULT_BARS,
    ) -> str:
        """
        Generate a chord sequence from a named progression.

        One chord per bar; the progression repeats to fill the bars.
        An unknown progression yields an empty chord list.

        Args:
            progression: Progression name (e.g., 'I-V-vi-IV')
            key: Key root
            scale: Scale name ('minor' scales use minor-key chord qualities)
            bars: Number of bars (1-256)

        Returns:
            JSON string with the generated chords

        Example:
            songwriter_generate_harmony(progression="I-IV-V-I", key="G", bars=8)
        """
        try:
            _check_bars(bars)
            chords = generate_harmony(key, scale, progression, bars)
            result: dict[str, Any] = {
                "status": "success",
                "progression": progression,
                "chords": [chord.model_dump(mode="json") for chord in chords],
            }
            if progression not in PROGRESSIONS:
                result["message"] = ErrorMessages.UNKNOWN_PROGRESSION.format(name=progression)
            return json.dumps(result)
        except ValueError as e:
            return json.dumps({"status": "error", "message": str(e)})
        except Exception as e:
            logger.exception("Failed to generate harmony")
            return json.dumps({"status": "error", "message": str(e)})

    tools["songwriter_generate_harmony"] = songwriter_generate_harmony

    @mcp.tool  # type: ignore[arg-type]
    async def songwriter_progression_chords(
        progression: str,
        key: str = "C",
        scale: str = "major",
    ) -> str:
        """
        Resolve a progression in a key, once through, with Roman numerals.

        Args:
            progression: Progression name
            key: Key root
            scale: Scale name

        Returns:
            JSON string with one entry per progression step

        Example:
            songwriter_progression_chords(progression="ii-V-I", key="Bb")
        """
        try:
            steps = get_progression_chords(key, scale, progression)
            return json.dumps(
                {
                    "status": "success",
                    "progression": progression,
                    "chords": [
                        {**step.model_dump(mode="json"), "symbol": step.symbol}
                        for step in steps
                    ],
                }
            )
        except Exception as e:
            logger.exception("Failed to resolve progression")
            return json.dumps({"status": "error", "message": str(e)})

    tools["songwriter_progression_chords"] = songwriter_progression_chords

    @mcp.tool  # type: ignore[arg-type]
    async def songwriter_suggest_substitutions(
        root: str,
        chord_type: str = "major",
        duration: str = "whole",
        start_time: str = "0:0:0",
    ) -> str:
        """
        Suggest substitutes for a chord.

        Major chords get the relative minor, a major 7th and a sus4; minor
        chords get the relative major and a minor 7th; dominant 7ths get the
        tritone substitution.

        Args:
            root: Chord root
            chord_type: Chord type
            duration: Chord duration token
            start_time: Chord position ('bar:beat:sixteenth')

        Returns:
            JSON string with suggested chords in order

        Example:
            songwriter_suggest_substitutions(root="G", chord_type="dominant7")
        """
        try:
            chord = Chord(root=root, type=chord_type, duration=duration, start_time=start_time)
            suggestions = suggest_chord_substitutions(chord)
            return json.dumps(
                {
                    "status": "success",
                    "chord": chord.model_dump(mode="json"),
                    "substitutions": [
                        {**sub.model_dump(mode="json"), "symbol": sub.symbol}
                        for sub in suggestions
                    ],
                }
            )
        except ValueError as e:
            return json.dumps({"status": "error", "message": str(e)})
        except Exception as e:
            logger.exception("Failed to suggest substitutions")
            return json.dumps({"status": "error", "message": str(e)})

    tools["songwriter_suggest_substitutions"] = songwriter_suggest_substitutions

    return tools
