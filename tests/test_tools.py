"""
Tests for MCP tools.

Tests the MCP tool implementations for theory lookups, generation and
export.
"""

import json
from pathlib import Path

import pytest

from chuk_mcp_songwriter.tools import (
    register_export_tools,
    register_generation_tools,
    register_theory_tools,
)
from chuk_mcp_songwriter.tools.generation import parse_time_signature


# Mock MCP server for testing tools
class MockMCPServer:
    """Mock MCP server that just stores registered tools."""

    def __init__(self, name: str):
        self.name = name
        self.tools: dict = {}

    def tool(self, func):
        """Decorator to register a tool."""
        self.tools[func.__name__] = func
        return func


@pytest.fixture
def theory_tools() -> dict:
    return register_theory_tools(MockMCPServer("test"))


@pytest.fixture
def generation_tools() -> dict:
    return register_generation_tools(MockMCPServer("test"))


@pytest.fixture
def export_tools(temp_dir: Path) -> dict:
    return register_export_tools(MockMCPServer("test"), temp_dir / "output")


class TestRegistration:
    """Tests for tool registration."""

    def test_tools_registered_on_server(self, temp_dir: Path) -> None:
        """Every returned tool is registered with the server."""
        mcp = MockMCPServer("test")
        tools = {}
        tools.update(register_theory_tools(mcp))
        tools.update(register_generation_tools(mcp))
        tools.update(register_export_tools(mcp, temp_dir))
        assert set(tools) == set(mcp.tools)
        assert all(name.startswith("songwriter_") for name in tools)
        assert len(tools) == 11


class TestTheoryTools:
    """Tests for theory tools."""

    @pytest.mark.asyncio
    async def test_list_vocabulary(self, theory_tools: dict) -> None:
        """Vocabulary lists scales, chord types and progressions."""
        data = json.loads(await theory_tools["songwriter_list_vocabulary"]())
        assert data["status"] == "success"
        assert data["scales"][0] == "major"
        assert "dominant7" in data["chord_types"]
        assert {"name": "ii-V-I", "degrees": [1, 4, 0]} in data["progressions"]

    @pytest.mark.asyncio
    async def test_scale_notes(self, theory_tools: dict) -> None:
        """Scales spell as pitch classes."""
        data = json.loads(await theory_tools["songwriter_scale_notes"](root="A", scale="minor"))
        assert data["status"] == "success"
        assert data["notes"] == ["A", "B", "C", "D", "E", "F", "G"]
        assert data["intervals"] == [0, 2, 3, 5, 7, 8, 10]

    @pytest.mark.asyncio
    async def test_scale_notes_with_octave(self, theory_tools: dict) -> None:
        """With an octave, pitches carry octave numbers."""
        data = json.loads(
            await theory_tools["songwriter_scale_notes"](root="G", scale="pentatonic", octave=4)
        )
        assert data["notes"] == ["G4", "A4", "B4", "D5", "E5"]

    @pytest.mark.asyncio
    async def test_chord_notes(self, theory_tools: dict) -> None:
        """Chords spell as pitches."""
        data = json.loads(
            await theory_tools["songwriter_chord_notes"](root="A", chord_type="minor")
        )
        assert data["notes"] == ["A3", "C4", "E4"]


class TestGenerationTools:
    """Tests for generation tools."""

    @pytest.mark.asyncio
    async def test_generate_melody(self, generation_tools: dict) -> None:
        """A four-bar melody comes back with its config."""
        data = json.loads(
            await generation_tools["songwriter_generate_melody"](key="A", scale="minor", seed=1)
        )
        assert data["status"] == "success"
        assert data["config"]["key"] == "A"
        assert len(data["notes"]) == 32
        assert data["notes"][0]["start_time"] == "0:0:0"

    @pytest.mark.asyncio
    async def test_generate_melody_seeded(self, generation_tools: dict) -> None:
        """Equal seeds give equal melodies."""
        tool = generation_tools["songwriter_generate_melody"]
        first = json.loads(await tool(bars=2, syllable_pattern=[5, 7], seed=7))
        second = json.loads(await tool(bars=2, syllable_pattern=[5, 7], seed=7))
        assert first["notes"] == second["notes"]

    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        "kwargs,message",
        [
            ({"bars": 0}, "Invalid bar count"),
            ({"bars": 1000}, "Invalid bar count"),
            ({"time_signature": "4-4"}, "Invalid time signature"),
            ({"syllable_pattern": [3, 0]}, "Syllable counts"),
            ({"tempo": 1000}, "tempo"),
        ],
    )
    async def test_generate_melody_errors(
        self, generation_tools: dict, kwargs: dict, message: str
    ) -> None:
        """Bad arguments return an error status."""
        data = json.loads(await generation_tools["songwriter_generate_melody"](**kwargs))
        assert data["status"] == "error"
        assert message in data["message"]

    @pytest.mark.asyncio
    async def test_melody_for_lyrics(self, generation_tools: dict) -> None:
        """Long lyrics extend the melody."""
        lines = ["one two three four five six seven eight nine ten"] * 2
        data = json.loads(
            await generation_tools["songwriter_melody_for_lyrics"](lines=lines, bars=1, seed=3)
        )
        assert data["status"] == "success"
        assert len(data["notes"]) == 26

    @pytest.mark.asyncio
    async def test_generate_harmony(self, generation_tools: dict) -> None:
        """Harmony follows the progression."""
        data = json.loads(
            await generation_tools["songwriter_generate_harmony"](
                progression="I-IV-V-I", key="C", bars=4
            )
        )
        assert data["status"] == "success"
        assert [c["root"] for c in data["chords"]] == ["C", "F", "G", "C"]
        assert data["chords"][1] == {
            "root": "F",
            "type": "major",
            "duration": "whole",
            "start_time": "1:0:0",
        }
        assert "message" not in data

    @pytest.mark.asyncio
    async def test_generate_harmony_unknown(self, generation_tools: dict) -> None:
        """Unknown progressions give no chords and a message."""
        data = json.loads(
            await generation_tools["songwriter_generate_harmony"](progression="I-II-III")
        )
        assert data["status"] == "success"
        assert data["chords"] == []
        assert "Unknown progression" in data["message"]

    @pytest.mark.asyncio
    async def test_progression_chords(self, generation_tools: dict) -> None:
        """Progression steps include numerals and symbols."""
        data = json.loads(
            await generation_tools["songwriter_progression_chords"](
                progression="ii-V-I", key="F"
            )
        )
        assert [(c["symbol"], c["numeral"]) for c in data["chords"]] == [
            ("Gm", "ii"),
            ("C", "V"),
            ("F", "I"),
        ]

    @pytest.mark.asyncio
    async def test_suggest_substitutions(self, generation_tools: dict) -> None:
        """Substitutes come back in order with symbols."""
        data = json.loads(
            await generation_tools["songwriter_suggest_substitutions"](
                root="C", chord_type="major", start_time="2:0:0"
            )
        )
        assert data["status"] == "success"
        assert [s["symbol"] for s in data["substitutions"]] == ["Am", "Cmaj7", "Csus4"]
        assert all(s["start_time"] == "2:0:0" for s in data["substitutions"])

    @pytest.mark.asyncio
    async def test_suggest_substitutions_bad_chord(self, generation_tools: dict) -> None:
        """Unknown chord types are an error."""
        data = json.loads(
            await generation_tools["songwriter_suggest_substitutions"](
                root="C", chord_type="mystery"
            )
        )
        assert data["status"] == "error"

    def test_parse_time_signature(self) -> None:
        """Notation parses into a tuple."""
        assert parse_time_signature("3/4") == (3, 4)
        with pytest.raises(ValueError):
            parse_time_signature("3:4")


class TestExportTools:
    """Tests for export tools."""

    @pytest.mark.asyncio
    async def test_export_midi(
        self, generation_tools: dict, export_tools: dict, temp_dir: Path
    ) -> None:
        """Generated parts export to a MIDI file."""
        melody = json.loads(await generation_tools["songwriter_generate_melody"](seed=5))
        harmony = json.loads(
            await generation_tools["songwriter_generate_harmony"](progression="I-V-vi-IV")
        )
        data = json.loads(
            await export_tools["songwriter_export_midi"](
                notes=melody["notes"], chords=harmony["chords"], title="Demo Song"
            )
        )
        assert data["status"] == "success"
        assert data["tracks"] == ["Demo Song", "Melody", "Chords", "Bass"]
        assert data["notes"] == 32
        assert data["chords"] == 4
        path = Path(data["path"])
        assert path.exists()
        assert path.parent == temp_dir / "output"
        assert path.name.startswith("demo-song-")

    @pytest.mark.asyncio
    async def test_export_midi_bad_note(self, export_tools: dict) -> None:
        """Malformed notes are an error."""
        data = json.loads(
            await export_tools["songwriter_export_midi"](
                notes=[{"pitch": "Z9", "duration": "quarter", "start_time": "0:0:0"}]
            )
        )
        assert data["status"] == "error"

    @pytest.mark.asyncio
    @pytest.mark.parametrize("tempo", [0, -10, 19, 401])
    async def test_export_midi_bad_tempo(
        self, export_tools: dict, temp_dir: Path, tempo: int
    ) -> None:
        """Out-of-range tempos return an error without writing a file."""
        data = json.loads(
            await export_tools["songwriter_export_midi"](
                notes=[{"pitch": "C4", "duration": "quarter", "start_time": "0:0:0"}],
                tempo=tempo,
            )
        )
        assert data["status"] == "error"
        assert "Invalid tempo" in data["message"]
        assert not (temp_dir / "output").exists()

    @pytest.mark.asyncio
    async def test_export_and_parse_project(
        self, generation_tools: dict, export_tools: dict
    ) -> None:
        """A saved project parses back to the same summary."""
        melody = json.loads(await generation_tools["songwriter_generate_melody"](bars=2, seed=2))
        harmony = json.loads(
            await generation_tools["songwriter_generate_harmony"](progression="ii-V-I", bars=2)
        )
        exported = json.loads(
            await export_tools["songwriter_export_project"](
                title="Demo",
                notes=melody["notes"],
                chords=harmony["chords"],
                bars=2,
                progression="ii-V-I",
                lyrics={"theme": "night", "sections": [{"id": "v1", "type": "verse"}]},
            )
        )
        assert exported["status"] == "success"
        path = Path(exported["path"])
        assert path.exists()

        parsed = json.loads(
            await export_tools["songwriter_parse_project"](content=path.read_text())
        )
        assert parsed["status"] == "success"
        assert parsed["project"]["title"] == "Demo"
        assert parsed["project"]["notes"] == 16
        assert parsed["project"]["chords"] == 2
        assert parsed["project"]["progression"] == "ii-V-I"
        assert parsed["project"]["sections"] == 1

    @pytest.mark.asyncio
    async def test_export_project_without_saving(
        self, export_tools: dict, temp_dir: Path
    ) -> None:
        """save=False returns the document only."""
        data = json.loads(
            await export_tools["songwriter_export_project"](title="Draft", save=False)
        )
        assert data["status"] == "success"
        assert data["project"]["title"] == "Draft"
        assert "path" not in data
        assert not (temp_dir / "output").exists()

    @pytest.mark.asyncio
    async def test_parse_invalid_project(self, export_tools: dict) -> None:
        """Invalid documents return an error."""
        data = json.loads(await export_tools["songwriter_parse_project"](content="{}"))
        assert data["status"] == "error"
        assert data["message"] == "Not a valid project file."
