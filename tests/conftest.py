"""
Pytest configuration and shared fixtures.
"""

import random
import tempfile
from pathlib import Path

import pytest


@pytest.fixture
def temp_dir() -> Path:
    """Create a temporary directory for test outputs."""
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)


@pytest.fixture
def temp_midi_path(temp_dir: Path) -> Path:
    """Path for a temporary MIDI file."""
    return temp_dir / "test.mid"


@pytest.fixture
def rng() -> random.Random:
    """Seeded random source for repeatable generation."""
    return random.Random(1234)


class ScriptedRandom(random.Random):
    """Random source that replays a fixed sequence from random()."""

    def __init__(self, values: list[float]):
        super().__init__(0)
        self._values = list(values)

    def random(self) -> float:
        return self._values.pop(0)


@pytest.fixture
def scripted_rng() -> type[ScriptedRandom]:
    """Factory for random sources with a scripted random() sequence."""
    return ScriptedRandom
