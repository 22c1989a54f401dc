"""
Melody generator - a contour-driven walk over scale degrees.

Generation runs in three passes:

1. A rhythm pattern fills the bars (see generation.rhythm), aiming for
   two notes per beat or the lyric syllable count, whichever is larger.
2. One contour is drawn for the whole melody: ascending, descending, arch,
   wave or random walk.
3. Each rhythm slot gets a scale degree from the contour at its relative
   position in the melody; the degree picks an octave (low degrees drop to
   octave 3, high ones rise to 5) so lines span more than one octave.

Positions are accumulated on the fixed 16-per-bar grid whatever the
configured time signature; the numerator only sets how many beats are
filled.

Pseudocode::

    rhythm = generate_controlled_rhythm(total_beats, target)
    contour = rng.choice(CONTOURS)
    for i, length in enumerate(rhythm):
        degree = select_contour_index(contour, i, len(rhythm), ...)
        emit Note(scale[degree] + octave_for_degree(degree), length, position)
        position += length
"""

from __future__ import annotations

import logging
import math
import random
from collections.abc import Sequence
from enum import Enum

from chuk_mcp_songwriter.core.rhythm import Position, duration_to_token
from chuk_mcp_songwriter.core.scale import scale_notes
from chuk_mcp_songwriter.generation.rhythm import generate_controlled_rhythm
from chuk_mcp_songwriter.models.song import MelodyConfig, Note
from chuk_mcp_songwriter.settings import DEFAULT_SETTINGS, GenerationSettings, MelodySettings

logger = logging.getLogger(__name__)

LOW_OCTAVE = 3
MIDDLE_OCTAVE = 4
HIGH_OCTAVE = 5

# Lyric heuristics for generate_melody_for_lyrics
SYLLABLES_PER_WORD = 1.3
WORDS_PER_BAR = 8


class Contour(str, Enum):
    """Melodic shapes; one is chosen per melody."""

    ASCENDING = "ascending"
    DESCENDING = "descending"
    ARCH = "arch"
    WAVE = "wave"
    RANDOM_WALK = "random_walk"


def choose_contour(rng: random.Random) -> Contour:
    """Draw a contour uniformly."""
    return rng.choice(list(Contour))


def random_walk_step(rng: random.Random, step_probability: float = 0.7) -> int:
    """A step of ±1 (with step_probability) or a leap of ±2."""
    size = 1 if rng.random() < step_probability else 2
    return -size if rng.random() < 0.5 else size


def select_contour_index(
    contour: Contour,
    note_index: int,
    total_notes: int,
    scale_length: int,
    previous_index: int,
    rng: random.Random,
    settings: MelodySettings | None = None,
) -> int:
    """
    Scale degree for one note of a melody.

    Args:
        contour: Melody shape
        note_index: Position of the note in the melody
        total_notes: Length of the melody
        scale_length: Number of degrees in the scale
        previous_index: Degree of the previous note (random walk only)
        rng: Entropy source (random walk only)
        settings: Random-walk step probability

    Returns:
        Degree in 0..scale_length-1
    """
    top = scale_length - 1
    progress = note_index / total_notes

    if contour == Contour.ASCENDING:
        return math.floor(progress * top)
    if contour == Contour.DESCENDING:
        return math.floor((1 - progress) * top)
    if contour == Contour.ARCH:
        if progress < 0.5:
            return math.floor(progress * 2 * top)
        return math.floor((1 - progress) * 2 * top)
    if contour == Contour.WAVE:
        return math.floor(((math.sin(progress * math.pi * 4) + 1) / 2) * top)

    settings = settings or DEFAULT_SETTINGS.melody
    step = random_walk_step(rng, settings.step_probability)
    return max(0, min(top, previous_index + step))


def octave_for_degree(degree: int, scale_length: int) -> int:
    """The bottom two degrees sit in octave 3, the top two in octave 5."""
    if degree < 2:
        return LOW_OCTAVE
    if degree > scale_length - 3:
        return HIGH_OCTAVE
    return MIDDLE_OCTAVE


def target_note_count(
    total_beats: int, syllable_pattern: Sequence[int] | None, notes_per_beat: int = 2
) -> int:
    """Notes to aim for: the default density, raised to the syllable total."""
    default = total_beats * notes_per_beat
    if not syllable_pattern:
        return default
    return max(sum(syllable_pattern), default)


def generate_melody(
    config: MelodyConfig,
    bars: int,
    syllable_pattern: Sequence[int] | None = None,
    *,
    rng: random.Random | None = None,
    settings: GenerationSettings | None = None,
) -> list[Note]:
    """
    Generate a melody filling a number of bars.

    Args:
        config: Key, scale and time signature
        bars: Bars to fill; zero or fewer gives an empty melody
        syllable_pattern: Optional syllables per lyric line; raises the
            note count when the lyrics need more notes than the default
            density. An empty pattern counts as none.
        rng: Entropy source; pass a seeded random.Random for repeatable output
        settings: Generation tunables

    Returns:
        Notes in time order

    Example:
        generate_melody(MelodyConfig(key="A", scale="minor"), 4, rng=random.Random(7))
    """
    if bars <= 0:
        return []

    rng = rng or random.Random()
    settings = settings or DEFAULT_SETTINGS

    notes_in_scale = scale_notes(config.key, config.scale)
    scale_length = len(notes_in_scale)

    total_beats = bars * config.beats_per_bar
    target = target_note_count(total_beats, syllable_pattern, settings.melody.notes_per_beat)
    rhythm = generate_controlled_rhythm(total_beats, target, rng, settings.rhythm)

    contour = choose_contour(rng)
    logger.debug(
        f"Generating {len(rhythm)} notes over {bars} bars "
        f"(target {target}, contour {contour.value})"
    )

    notes: list[Note] = []
    position = 0
    previous_index = scale_length // 2

    for index, length in enumerate(rhythm):
        degree = select_contour_index(
            contour,
            index,
            len(rhythm),
            scale_length,
            previous_index,
            rng,
            settings.melody,
        )
        previous_index = degree
        octave = octave_for_degree(degree, scale_length)

        notes.append(
            Note(
                pitch=f"{notes_in_scale[degree]}{octave}",
                duration=duration_to_token(length),
                start_time=str(Position.from_sixteenths(position)),
            )
        )
        position += length

    return notes


def count_words(lines: Sequence[str]) -> int:
    """Whitespace-separated words across all lines."""
    return sum(len(line.split()) for line in lines)


def generate_melody_for_lyrics(
    config: MelodyConfig,
    lines: Sequence[str],
    bars: int = 4,
    *,
    rng: random.Random | None = None,
    settings: GenerationSettings | None = None,
) -> list[Note]:
    """
    Generate a melody sized to a set of lyric lines.

    The syllable count is estimated from the word count (about 1.3
    syllables per word) and the melody gets at least one bar per eight
    words.
    """
    words = count_words(lines)
    estimated_syllables = math.ceil(words * SYLLABLES_PER_WORD)
    bars = max(bars, math.ceil(words / WORDS_PER_BAR))
    return generate_melody(
        config,
        bars,
        [estimated_syllables],
        rng=rng,
        settings=settings,
    )
