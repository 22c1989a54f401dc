"""
Rhythm model - greedy duration selection toward a target note count.

The pattern is a list of lengths in sixteenth-units that exactly fills the
requested beats. Each step divides the remaining sixteenths by the notes
still wanted and picks the duration tier nearest that ideal, so the result
lands close to the target count while keeping some variation in the middle
tier. The last wanted note absorbs whatever remains.
"""

from __future__ import annotations

import random

from chuk_mcp_songwriter.core.rhythm import SIXTEENTHS_PER_BEAT
from chuk_mcp_songwriter.settings import DEFAULT_SETTINGS, RhythmSettings

QUARTER = 4
EIGHTH = 2
SIXTEENTH = 1


def choose_duration(ideal: float, rng: random.Random, settings: RhythmSettings) -> int:
    """Pick a duration tier (in sixteenths) for an ideal per-note length."""
    if ideal >= settings.quarter_threshold:
        return QUARTER
    if ideal >= settings.mixed_threshold:
        return QUARTER if rng.random() < settings.quarter_probability else EIGHTH
    if ideal >= settings.eighth_threshold:
        return EIGHTH
    return SIXTEENTH


def generate_controlled_rhythm(
    total_beats: int,
    target_note_count: int,
    rng: random.Random | None = None,
    settings: RhythmSettings | None = None,
) -> list[int]:
    """
    Generate note lengths that fill total_beats and approach a note count.

    Args:
        total_beats: Beats to fill (4 sixteenths each)
        target_note_count: Desired number of notes
        rng: Entropy source for the mixed quarter/eighth tier
        settings: Tier thresholds and safety bound

    Returns:
        Lengths in sixteenth-units summing to total_beats * 4
        (empty when there is nothing to fill)
    """
    rng = rng or random.Random()
    settings = settings or DEFAULT_SETTINGS.rhythm

    target_note_count = max(target_note_count, 1)
    rhythm: list[int] = []
    remaining = total_beats * SIXTEENTHS_PER_BEAT
    limit = target_note_count * settings.safety_factor

    while remaining > 0 and len(rhythm) < limit:
        notes_left = target_note_count - len(rhythm)
        if notes_left <= 1:
            rhythm.append(remaining)
            break

        duration = choose_duration(remaining / notes_left, rng, settings)
        duration = max(1, min(duration, remaining))
        rhythm.append(duration)
        remaining -= duration

    return rhythm
