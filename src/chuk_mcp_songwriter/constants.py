"""
Constants for the songwriter tools.

No magic strings - tool responses share these messages.
"""

DEFAULT_BARS = 4
MAX_BARS = 256
MIN_TEMPO = 20
MAX_TEMPO = 400


class ErrorMessages:
    """Standardized error messages."""

    INVALID_BARS = "Invalid bar count: {bars}. Must be between 1 and {max_bars}."
    INVALID_TEMPO = "Invalid tempo: {tempo}. Must be between {min_tempo} and {max_tempo} BPM."
    UNKNOWN_PROGRESSION = "Unknown progression: '{name}'."
    INVALID_PROJECT = "Not a valid project file."
    INVALID_SYLLABLES = "Syllable counts must be positive integers."


class SuccessMessages:
    """Standardized success messages."""

    MIDI_EXPORTED = "Exported MIDI to {path}."
    PROJECT_EXPORTED = "Exported project to {path}."
