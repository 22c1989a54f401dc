"""
Tests for the rhythm model and the melody generator.

Tests cover:
- Greedy rhythm patterns (duration tiers, exact fill, final remainder)
- Contour degree selection and the random walk
- Octave placement
- generate_melody output invariants
- Lyric-driven sizing
"""

import random

import pytest

from chuk_mcp_songwriter.core import DurationToken, Position, scale_notes
from chuk_mcp_songwriter.generation import (
    Contour,
    generate_controlled_rhythm,
    generate_melody,
    generate_melody_for_lyrics,
    octave_for_degree,
    select_contour_index,
)
from chuk_mcp_songwriter.generation.melody import (
    choose_contour,
    count_words,
    random_walk_step,
    target_note_count,
)
from chuk_mcp_songwriter.generation.rhythm import choose_duration
from chuk_mcp_songwriter.models import MelodyConfig
from chuk_mcp_songwriter.settings import (
    DEFAULT_SETTINGS,
    GenerationSettings,
    MelodySettings,
    RhythmSettings,
)


class TestChooseDuration:
    """Tests for duration tier selection."""

    def test_tiers(self, rng: random.Random) -> None:
        """Ideal lengths map to their tiers."""
        settings = DEFAULT_SETTINGS.rhythm
        assert choose_duration(8.0, rng, settings) == 4
        assert choose_duration(6.0, rng, settings) == 4
        assert choose_duration(2.0, rng, settings) == 2
        assert choose_duration(1.5, rng, settings) == 2
        assert choose_duration(1.2, rng, settings) == 1

    def test_mixed_tier(self, scripted_rng) -> None:
        """Between the mixed and quarter cutoffs a coin decides."""
        settings = DEFAULT_SETTINGS.rhythm
        rng = scripted_rng([0.59, 0.6])
        assert choose_duration(4.0, rng, settings) == 4
        assert choose_duration(4.0, rng, settings) == 2


class TestControlledRhythm:
    """Tests for generate_controlled_rhythm."""

    def test_even_eighths(self, rng: random.Random) -> None:
        """Two notes per beat over four bars is all eighths."""
        assert generate_controlled_rhythm(16, 32, rng) == [2] * 32

    def test_single_note_takes_everything(self, rng: random.Random) -> None:
        """A target of one gives one note spanning the whole length."""
        assert generate_controlled_rhythm(4, 1, rng) == [16]

    def test_last_note_absorbs_remainder(self, rng: random.Random) -> None:
        """The final wanted note gets whatever is left."""
        assert generate_controlled_rhythm(4, 2, rng) == [4, 12]

    def test_scripted_mixed_tier(self, scripted_rng) -> None:
        """Mixed-tier choices follow the random source."""
        rng = scripted_rng([0.1, 0.9, 0.5])
        assert generate_controlled_rhythm(4, 4, rng) == [4, 2, 4, 6]

    def test_zero_target_is_clamped(self, rng: random.Random) -> None:
        """A target below one behaves like one."""
        assert generate_controlled_rhythm(2, 0, rng) == [8]

    def test_nothing_to_fill(self, rng: random.Random) -> None:
        """No beats gives an empty pattern."""
        assert generate_controlled_rhythm(0, 8, rng) == []

    @pytest.mark.parametrize("total_beats", [1, 3, 4, 7, 16, 32])
    @pytest.mark.parametrize("target", [1, 2, 5, 8, 13, 40, 100])
    @pytest.mark.parametrize("seed", [0, 1, 99])
    def test_exact_fill(self, total_beats: int, target: int, seed: int) -> None:
        """Lengths are positive and sum to the requested span."""
        pattern = generate_controlled_rhythm(total_beats, target, random.Random(seed))
        assert sum(pattern) == total_beats * 4
        assert all(length >= 1 for length in pattern)
        assert len(pattern) <= target * DEFAULT_SETTINGS.rhythm.safety_factor

    def test_custom_thresholds(self, rng: random.Random) -> None:
        """Raising the quarter cutoff turns quarters into eighths."""
        settings = RhythmSettings(quarter_threshold=10.0, mixed_threshold=9.0)
        assert generate_controlled_rhythm(4, 2, rng, settings) == [2, 14]


class TestContourSelection:
    """Tests for select_contour_index."""

    def _indices(self, contour: Contour, total: int = 8, scale_length: int = 7) -> list[int]:
        rng = random.Random(0)
        return [
            select_contour_index(contour, i, total, scale_length, 3, rng) for i in range(total)
        ]

    def test_ascending(self) -> None:
        """Ascending rises from the root."""
        assert self._indices(Contour.ASCENDING) == [0, 0, 1, 2, 3, 3, 4, 5]

    def test_descending(self) -> None:
        """Descending falls from the top degree."""
        assert self._indices(Contour.DESCENDING) == [6, 5, 4, 3, 3, 2, 1, 0]

    def test_arch(self) -> None:
        """Arch peaks in the middle."""
        assert self._indices(Contour.ARCH) == [0, 1, 3, 4, 6, 4, 3, 1]

    def test_wave_starts_mid_scale(self) -> None:
        """Wave starts halfway up and stays in range."""
        indices = self._indices(Contour.WAVE, total=32)
        assert indices[0] == 3
        assert all(0 <= i <= 6 for i in indices)

    @pytest.mark.parametrize("contour", list(Contour))
    @pytest.mark.parametrize("scale_length", [5, 6, 7])
    def test_in_range(self, contour: Contour, scale_length: int) -> None:
        """Every contour stays inside the scale."""
        for total in (1, 2, 9, 50):
            indices = self._indices(contour, total, scale_length)
            assert all(0 <= i < scale_length for i in indices)

    def test_random_walk_step(self, scripted_rng) -> None:
        """Steps are one degree, leaps two, in either direction."""
        assert random_walk_step(scripted_rng([0.5, 0.2])) == -1
        assert random_walk_step(scripted_rng([0.5, 0.8])) == 1
        assert random_walk_step(scripted_rng([0.9, 0.2])) == -2
        assert random_walk_step(scripted_rng([0.9, 0.8])) == 2

    def test_random_walk_moves_from_previous(self, scripted_rng) -> None:
        """The walk moves relative to the previous degree."""
        rng = scripted_rng([0.9, 0.9])
        assert select_contour_index(Contour.RANDOM_WALK, 0, 8, 7, 3, rng) == 5

    def test_random_walk_clamps(self, scripted_rng) -> None:
        """The walk cannot leave the scale."""
        up = scripted_rng([0.1, 0.9])
        assert select_contour_index(Contour.RANDOM_WALK, 0, 8, 7, 6, up) == 6
        down = scripted_rng([0.9, 0.1])
        assert select_contour_index(Contour.RANDOM_WALK, 0, 8, 7, 0, down) == 0

    def test_step_probability_setting(self, scripted_rng) -> None:
        """A zero step probability always leaps."""
        settings = MelodySettings(step_probability=0.0)
        rng = scripted_rng([0.0, 0.9])
        assert select_contour_index(Contour.RANDOM_WALK, 0, 8, 7, 3, rng, settings) == 5

    def test_choose_contour(self, rng: random.Random) -> None:
        """Contours are drawn from the five shapes."""
        drawn = {choose_contour(rng) for _ in range(200)}
        assert drawn == set(Contour)


class TestOctaves:
    """Tests for octave_for_degree."""

    def test_seven_note_scale(self) -> None:
        """Bottom two degrees low, top two high."""
        assert [octave_for_degree(d, 7) for d in range(7)] == [3, 3, 4, 4, 4, 5, 5]

    def test_five_note_scale(self) -> None:
        """Pentatonic has a single middle degree."""
        assert [octave_for_degree(d, 5) for d in range(5)] == [3, 3, 4, 5, 5]


class TestTargetNoteCount:
    """Tests for target_note_count."""

    def test_default_density(self) -> None:
        """Two notes per beat without lyrics."""
        assert target_note_count(16, None) == 32
        assert target_note_count(16, []) == 32

    def test_syllables_raise_target(self) -> None:
        """More syllables than the default raise the target."""
        assert target_note_count(16, [20, 20]) == 40

    def test_syllables_never_lower_target(self) -> None:
        """Fewer syllables keep the default."""
        assert target_note_count(16, [4, 4]) == 32


class TestGenerateMelody:
    """Tests for generate_melody."""

    def test_default_four_bars(self) -> None:
        """Four bars of 4/4 is 32 eighth notes laid end to end."""
        notes = generate_melody(MelodyConfig(), 4)
        assert len(notes) == 32
        assert all(n.duration == DurationToken.EIGHTH for n in notes)
        assert notes[0].start_time == "0:0:0"
        assert notes[1].start_time == "0:0:2"
        assert notes[2].start_time == "0:1:0"
        assert notes[-1].start_time == "3:3:2"

    @pytest.mark.parametrize("bars", [0, -1, -10])
    def test_no_bars(self, bars: int) -> None:
        """Zero or negative bars give an empty melody."""
        assert generate_melody(MelodyConfig(), bars) == []

    @pytest.mark.parametrize("seed", range(20))
    @pytest.mark.parametrize("bars", [1, 2, 4, 8])
    def test_fits_in_bars(self, seed: int, bars: int) -> None:
        """The last note ends within the requested bars."""
        notes = generate_melody(
            MelodyConfig(key="E", scale="minor"),
            bars,
            [7, 9, 11, 13],
            rng=random.Random(seed),
        )
        assert notes
        assert notes[-1].end_sixteenths <= bars * 16

    @pytest.mark.parametrize("seed", range(10))
    def test_notes_in_scale(self, seed: int) -> None:
        """Every pitch belongs to the scale in octave 3, 4 or 5."""
        config = MelodyConfig(key="D", scale="dorian")
        allowed = set(scale_notes("D", "dorian"))
        for note in generate_melody(config, 4, rng=random.Random(seed)):
            name, octave = note.pitch[:-1], int(note.pitch[-1])
            assert name in allowed
            assert octave in (3, 4, 5)

    @pytest.mark.parametrize("seed", range(10))
    def test_start_times_ascend(self, seed: int) -> None:
        """Notes are in time order without overlap."""
        notes = generate_melody(MelodyConfig(), 8, [30, 30], rng=random.Random(seed))
        positions = [Position.parse(n.start_time).to_sixteenths() for n in notes]
        assert positions == sorted(set(positions))
        for previous, current in zip(notes, notes[1:]):
            assert previous.end_sixteenths <= current.position.to_sixteenths()

    def test_reproducible_with_seed(self) -> None:
        """Equal seeds give equal melodies."""
        config = MelodyConfig(key="G", scale="mixolydian")
        first = generate_melody(config, 4, [10, 12], rng=random.Random(42))
        second = generate_melody(config, 4, [10, 12], rng=random.Random(42))
        assert first == second

    def test_empty_pattern_same_as_none(self) -> None:
        """An empty syllable pattern counts as no pattern."""
        config = MelodyConfig()
        assert generate_melody(config, 4, [], rng=random.Random(3)) == generate_melody(
            config, 4, None, rng=random.Random(3)
        )

    def test_syllables_add_notes(self) -> None:
        """Enough syllables raise the note count."""
        notes = generate_melody(MelodyConfig(), 4, [20, 20], rng=random.Random(5))
        assert len(notes) == 40

    def test_three_four_uses_fixed_grid(self) -> None:
        """Non-4/4 meters fill fewer beats but keep the 16-per-bar grid."""
        notes = generate_melody(MelodyConfig(time_signature=(3, 4)), 2, rng=random.Random(0))
        assert len(notes) == 12
        assert notes[8].start_time == "1:0:0"
        assert notes[-1].end_sixteenths == 24

    def test_custom_density(self) -> None:
        """notes_per_beat sets the default target."""
        settings = GenerationSettings(melody=MelodySettings(notes_per_beat=1))
        notes = generate_melody(MelodyConfig(), 4, rng=random.Random(8), settings=settings)
        assert len(notes) == 16

    def test_flat_key(self) -> None:
        """Flat keys produce sharp-spelled pitches."""
        notes = generate_melody(MelodyConfig(key="Bb"), 1, rng=random.Random(2))
        assert all("b" not in n.pitch for n in notes)


class TestMelodyForLyrics:
    """Tests for generate_melody_for_lyrics."""

    def test_count_words(self) -> None:
        """Words are whitespace separated across lines."""
        assert count_words(["hello darkness", "my  old friend", ""]) == 5

    def test_long_lyrics_extend_bars(self) -> None:
        """Twenty words need three bars and about 26 syllables."""
        lines = ["one two three four five six seven eight nine ten"] * 2
        notes = generate_melody_for_lyrics(MelodyConfig(), lines, bars=1, rng=random.Random(4))
        assert len(notes) == 26
        assert notes[-1].end_sixteenths <= 3 * 16

    def test_short_lyrics_keep_bars(self) -> None:
        """Short lyrics keep the requested length and default density."""
        notes = generate_melody_for_lyrics(MelodyConfig(), ["la la"], bars=4, rng=random.Random(4))
        assert len(notes) == 32

    def test_no_lyrics(self) -> None:
        """No lines behaves like a plain melody."""
        notes = generate_melody_for_lyrics(MelodyConfig(), [], rng=random.Random(1))
        assert len(notes) == 32
