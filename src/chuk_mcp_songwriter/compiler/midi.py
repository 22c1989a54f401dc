"""
MIDI export - the end of the pipeline.

Converts generated notes and chords to a multi-track MIDI file using mido.
Timing comes straight from the 'bar:beat:sixteenth' strings on the fixed
16-per-bar grid. All operations are deterministic: same input → same output.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from mido import Message, MetaMessage, MidiFile, MidiTrack

from chuk_mcp_songwriter.core.pitch import format_pitch, pitch_to_midi
from chuk_mcp_songwriter.core.rhythm import (
    BEATS_PER_BAR,
    SIXTEENTHS_PER_BEAT,
    Position,
    token_to_sixteenths,
)

if TYPE_CHECKING:
    from collections.abc import Sequence

    from chuk_mcp_songwriter.models.song import Chord, Note


# Standard ticks per beat (quarter note) - industry standard
TICKS_PER_BEAT = 480

MELODY_CHANNEL = 0
CHORDS_CHANNEL = 1
BASS_CHANNEL = 2

MELODY_VELOCITY = 0.8
CHORDS_VELOCITY = 0.6
BASS_VELOCITY = 0.7

CHORD_OCTAVE = 3
BASS_OCTAVE = 2


@dataclass(frozen=True)
class MidiEvent:
    """
    A single MIDI note event.

    This is the lowest-level representation before writing to MIDI.
    All times are in ticks (absolute from start of track).
    """

    pitch: int  # MIDI note number (0-127)
    start_ticks: int  # Absolute start time in ticks
    duration_ticks: int  # Duration in ticks
    velocity: int  # 0-127
    channel: int = 0  # 0-15

    def __post_init__(self) -> None:
        """Validate MIDI ranges."""
        if not 0 <= self.pitch <= 127:
            raise ValueError(f"Pitch must be 0-127, got {self.pitch}")
        if not 0 <= self.velocity <= 127:
            raise ValueError(f"Velocity must be 0-127, got {self.velocity}")
        if not 0 <= self.channel <= 15:
            raise ValueError(f"Channel must be 0-15, got {self.channel}")
        if self.start_ticks < 0:
            raise ValueError(f"Start ticks must be >= 0, got {self.start_ticks}")
        if self.duration_ticks < 0:
            raise ValueError(f"Duration ticks must be >= 0, got {self.duration_ticks}")


def velocity_float_to_int(velocity: float) -> int:
    """Convert velocity from 0.0-1.0 range to 0-127."""
    return max(0, min(127, int(velocity * 127)))


def position_to_ticks(start_time: str, ticks_per_beat: int = TICKS_PER_BEAT) -> int:
    """
    Convert a 'bar:beat:sixteenth' string to absolute ticks.

    Assumes the fixed grid of 4 beats per bar.
    """
    position = Position.parse(start_time)
    return (
        position.bar * BEATS_PER_BAR * ticks_per_beat
        + position.beat * ticks_per_beat
        + position.sixteenth * ticks_per_beat // SIXTEENTHS_PER_BEAT
    )


def duration_to_ticks(token: str, ticks_per_beat: int = TICKS_PER_BEAT) -> int:
    """Convert a duration token to ticks (unknown tokens count as a quarter)."""
    return token_to_sixteenths(token) * ticks_per_beat // SIXTEENTHS_PER_BEAT


def events_to_track(events: Sequence[MidiEvent], name: str) -> MidiTrack:
    """
    Convert absolute-time events into a named track of delta-timed messages.

    Note-offs sort before note-ons at the same tick so repeated pitches
    retrigger cleanly.
    """
    track = MidiTrack()
    track.append(MetaMessage("track_name", name=name, time=0))

    messages: list[tuple[int, Message]] = []
    for event in events:
        messages.append(
            (
                event.start_ticks,
                Message(
                    "note_on",
                    channel=event.channel,
                    note=event.pitch,
                    velocity=event.velocity,
                    time=0,
                ),
            )
        )
        messages.append(
            (
                event.start_ticks + event.duration_ticks,
                Message("note_off", channel=event.channel, note=event.pitch, velocity=0, time=0),
            )
        )

    messages.sort(key=lambda x: (x[0], x[1].type != "note_off"))

    current_time = 0
    for abs_time, msg in messages:
        msg.time = abs_time - current_time
        track.append(msg)
        current_time = abs_time

    track.append(MetaMessage("end_of_track", time=0))
    return track


def melody_events(notes: Sequence[Note], ticks_per_beat: int = TICKS_PER_BEAT) -> list[MidiEvent]:
    """One event per melody note."""
    velocity = velocity_float_to_int(MELODY_VELOCITY)
    return [
        MidiEvent(
            pitch=pitch_to_midi(note.pitch),
            start_ticks=position_to_ticks(note.start_time, ticks_per_beat),
            duration_ticks=duration_to_ticks(note.duration, ticks_per_beat),
            velocity=velocity,
            channel=MELODY_CHANNEL,
        )
        for note in notes
    ]


def chord_events(chords: Sequence[Chord], ticks_per_beat: int = TICKS_PER_BEAT) -> list[MidiEvent]:
    """One event per chord tone, root in octave 3."""
    velocity = velocity_float_to_int(CHORDS_VELOCITY)
    events: list[MidiEvent] = []
    for chord in chords:
        start = position_to_ticks(chord.start_time, ticks_per_beat)
        length = duration_to_ticks(chord.duration, ticks_per_beat)
        for pitch in chord.get_notes(CHORD_OCTAVE):
            events.append(
                MidiEvent(
                    pitch=pitch_to_midi(pitch),
                    start_ticks=start,
                    duration_ticks=length,
                    velocity=velocity,
                    channel=CHORDS_CHANNEL,
                )
            )
    return events


def bass_events(chords: Sequence[Chord], ticks_per_beat: int = TICKS_PER_BEAT) -> list[MidiEvent]:
    """The chord root in octave 2 for each chord."""
    velocity = velocity_float_to_int(BASS_VELOCITY)
    return [
        MidiEvent(
            pitch=pitch_to_midi(format_pitch(chord.root, BASS_OCTAVE)),
            start_ticks=position_to_ticks(chord.start_time, ticks_per_beat),
            duration_ticks=duration_to_ticks(chord.duration, ticks_per_beat),
            velocity=velocity,
            channel=BASS_CHANNEL,
        )
        for chord in chords
    ]


def song_to_midi(
    notes: Sequence[Note],
    chords: Sequence[Chord],
    tempo_bpm: int = 120,
    title: str = "Songwriter Export",
    ticks_per_beat: int = TICKS_PER_BEAT,
) -> MidiFile:
    """
    Build a multi-track MIDI file from a melody and a chord sequence.

    Args:
        notes: Melody notes (Melody track, channel 0)
        chords: Chords (Chords track on channel 1, Bass track on channel 2)
        tempo_bpm: Tempo in beats per minute
        title: Song title, written to the conductor track
        ticks_per_beat: Resolution (default 480)

    Returns:
        A type-1 mido MidiFile ready to be saved; parts with no content
        are left out
    """
    if tempo_bpm <= 0:
        raise ValueError(f"Tempo must be positive, got {tempo_bpm}")

    mid = MidiFile(type=1, ticks_per_beat=ticks_per_beat)

    conductor = MidiTrack()
    conductor.append(MetaMessage("track_name", name=title, time=0))
    conductor.append(MetaMessage("set_tempo", tempo=int(60_000_000 / tempo_bpm), time=0))
    conductor.append(MetaMessage("end_of_track", time=0))
    mid.tracks.append(conductor)

    if notes:
        mid.tracks.append(events_to_track(melody_events(notes, ticks_per_beat), "Melody"))
    if chords:
        mid.tracks.append(events_to_track(chord_events(chords, ticks_per_beat), "Chords"))
        mid.tracks.append(events_to_track(bass_events(chords, ticks_per_beat), "Bass"))

    return mid
