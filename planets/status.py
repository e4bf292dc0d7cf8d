#!/usr/bin/env python3
"""
Read-only view of the controller, for whatever presents it (UI, window title, logs).
"""
from dataclasses import dataclass
from datetime import datetime, timedelta
from typing import Optional

from .choice import Choice
from .presets import Preset
from .utils import duration_short_string, format_timestamp


@dataclass(frozen=True)
class SimulationStatus:
    timestamp: datetime
    running: bool
    speed: Choice[timedelta]
    reverse: bool
    preset: Optional[Choice[Preset]] = None

    def describe(self) -> str:
        """One-line summary, e.g. '2017-08-21 15:46 UTC | running | 1h/s'."""
        parts = [
            format_timestamp(self.timestamp),
            "running" if self.running else "stopped",
            f"{duration_short_string(self.speed.get())}/s",
        ]
        if self.reverse:
            parts.append("reverse")
        if self.preset is not None:
            parts.append(self.preset.get().name)
        return " | ".join(parts)
