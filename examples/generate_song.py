#!/usr/bin/env python3
"""
Example: Generate a short song and export it.

This runs the whole pipeline: melody and harmony generation, chord
substitutions, MIDI export and a project document.

Usage:
    python examples/generate_song.py
    # Creates: examples/output/a_minor_song.mid and a_minor_song.json
"""

import random
from pathlib import Path

from chuk_mcp_songwriter.compiler import song_to_midi
from chuk_mcp_songwriter.generation import (
    generate_harmony,
    generate_melody_for_lyrics,
    get_progression_chords,
    suggest_chord_substitutions,
)
from chuk_mcp_songwriter.models import (
    HarmonyData,
    LyricsData,
    MelodyConfig,
    MelodyData,
    SectionType,
    SongSection,
    export_project,
)

LYRICS = [
    "walking home beneath the streetlights",
    "counting every step I take",
    "all the words I never told you",
    "echo louder when I wake",
]


def main() -> None:
    """Generate an A minor song with a vi-IV-I-V progression."""
    output_dir = Path(__file__).parent / "output"
    output_dir.mkdir(exist_ok=True)

    rng = random.Random(2024)
    config = MelodyConfig(key="A", scale="minor", tempo=92)

    print("Progression vi-IV-I-V in A minor:")
    for step in get_progression_chords(config.key, config.scale, "vi-IV-I-V"):
        print(f"  {step.numeral:>4}  {step.symbol}")

    notes = generate_melody_for_lyrics(config, LYRICS, bars=4, rng=rng)
    bars = notes[-1].position.bar + 1
    chords = generate_harmony(config.key, config.scale, "vi-IV-I-V", bars)
    print(f"\nGenerated {len(notes)} notes and {len(chords)} chords over {bars} bars")

    print("\nSubstitutes for the first chord:")
    for sub in suggest_chord_substitutions(chords[0]):
        print(f"  {chords[0].symbol} -> {sub.symbol}")

    midi_path = output_dir / "a_minor_song.mid"
    song_to_midi(notes, chords, tempo_bpm=config.tempo, title="A Minor Song").save(str(midi_path))
    print(f"\nCreated: {midi_path}")

    project = export_project(
        title="A Minor Song",
        lyrics=LyricsData(
            theme="night walk",
            mood="melancholic",
            rhyme_scheme="ABCB",
            sections=[SongSection(id="verse-1", type=SectionType.VERSE, lines=LYRICS)],
        ),
        melody=MelodyData(config=config, notes=notes, bars=bars),
        harmony=HarmonyData(chords=chords, progression_name="vi-IV-I-V"),
    )
    project_path = output_dir / "a_minor_song.json"
    project_path.write_text(project)
    print(f"Created: {project_path}")


if __name__ == "__main__":
    main()
