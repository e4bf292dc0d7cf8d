#!/usr/bin/env python3
"""
Startup configuration: which presets and speeds exist, and which are selected first.
"""
from dataclasses import dataclass
from datetime import timedelta
from typing import Optional

from .choice import Choice, ChoiceSet
from .constants import DEFAULT_PRESET_INDEX, DEFAULT_SPEED_INDEX, SPEEDS
from .presets import Preset, builtin_presets
from .presets_loader import PRESETS_DIR, load_presets


@dataclass(frozen=True)
class Config:
    initial_preset: Choice[Preset]
    initial_speed: Choice[timedelta]

    @classmethod
    def default(cls, presets_dir: Optional[str] = PRESETS_DIR) -> "Config":
        """Built-in presets followed by any JSON presets found in presets_dir."""
        presets = builtin_presets()
        if presets_dir is not None:
            presets.extend(load_presets(presets_dir))
        return cls(
            initial_preset=ChoiceSet(presets).by_index(DEFAULT_PRESET_INDEX),
            initial_speed=ChoiceSet(SPEEDS).by_index(DEFAULT_SPEED_INDEX),
        )
