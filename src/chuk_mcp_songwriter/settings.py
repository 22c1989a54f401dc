"""
Generation settings - tunable constants for the melody generator.

The rhythm thresholds are empirically tuned; the defaults reproduce the
tool's established musical character. Settings can be overridden from a
YAML file:

    rhythm:
      quarter_threshold: 6.0
      mixed_threshold: 3.0
      eighth_threshold: 1.5
      quarter_probability: 0.6
      safety_factor: 1.5
    melody:
      notes_per_beat: 2
      step_probability: 0.7
"""

from __future__ import annotations

import logging
import os
from pathlib import Path

import yaml
from pydantic import BaseModel, Field, model_validator

logger = logging.getLogger(__name__)

SETTINGS_ENV_VAR = "SONGWRITER_SETTINGS_FILE"
DEFAULT_SETTINGS_FILENAME = "songwriter.yaml"


class RhythmSettings(BaseModel):
    """
    Duration-tier cutoffs for the greedy rhythm model.

    Each step compares the ideal remaining sixteenths per remaining note
    against these cutoffs to pick a quarter, quarter-or-eighth, eighth
    or sixteenth.
    """

    quarter_threshold: float = Field(6.0, gt=0, description="Ideal length at or above → quarter")
    mixed_threshold: float = Field(3.0, gt=0, description="At or above → quarter or eighth")
    eighth_threshold: float = Field(1.5, gt=0, description="At or above → eighth")
    quarter_probability: float = Field(
        0.6, ge=0.0, le=1.0, description="Chance of a quarter in the mixed tier"
    )
    safety_factor: float = Field(
        1.5, ge=1.0, description="Stop after this multiple of the target note count"
    )

    model_config = {"frozen": True}

    @model_validator(mode="after")
    def check_order(self) -> RhythmSettings:
        """Cutoffs must descend."""
        if not self.quarter_threshold >= self.mixed_threshold >= self.eighth_threshold:
            raise ValueError("Rhythm thresholds must satisfy quarter >= mixed >= eighth")
        return self


class MelodySettings(BaseModel):
    """Note density and random-walk behaviour."""

    notes_per_beat: int = Field(2, gt=0, description="Default target density")
    step_probability: float = Field(
        0.7, ge=0.0, le=1.0, description="Random walk: chance of a step (else a leap of 2)"
    )

    model_config = {"frozen": True}


class GenerationSettings(BaseModel):
    """All tunables for generation."""

    rhythm: RhythmSettings = Field(default_factory=RhythmSettings)
    melody: MelodySettings = Field(default_factory=MelodySettings)

    model_config = {"frozen": True}


DEFAULT_SETTINGS = GenerationSettings()


def load_settings(path: Path) -> GenerationSettings:
    """
    Load settings from a YAML file.

    Missing keys keep their defaults. Errors reading or validating the
    file propagate to the caller.

    Args:
        path: YAML file path

    Returns:
        GenerationSettings
    """
    with open(path) as f:
        data = yaml.safe_load(f) or {}
    if not isinstance(data, dict):
        raise ValueError(f"Settings file must contain a mapping: {path}")
    settings = GenerationSettings.model_validate(data)
    logger.info(f"Loaded generation settings from {path}")
    return settings


def resolve_settings_path(explicit: Path | None = None, cwd: Path | None = None) -> Path | None:
    """
    Find the settings file to use.

    Order: explicit path, then $SONGWRITER_SETTINGS_FILE, then
    songwriter.yaml in the working directory (only if it exists).
    """
    if explicit is not None:
        return explicit
    env_path = os.environ.get(SETTINGS_ENV_VAR)
    if env_path:
        return Path(env_path).expanduser()
    candidate = (cwd or Path.cwd()) / DEFAULT_SETTINGS_FILENAME
    return candidate if candidate.exists() else None


def get_settings(explicit: Path | None = None) -> GenerationSettings:
    """Load settings from the resolved path, or the defaults if there is none."""
    path = resolve_settings_path(explicit)
    if path is None:
        return DEFAULT_SETTINGS
    return load_settings(path)
