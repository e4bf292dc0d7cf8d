#!/usr/bin/env python3
"""
Built-in preset states.

Each preset is a named Snapshot taken from hand-entered ephemeris data for a
real event, or a simple test configuration. More presets can be dropped into
the presets/ directory as JSON (see presets_loader).
"""
from dataclasses import dataclass
from datetime import datetime, timezone
from typing import List

from .constants import EARTH_APHELION
from .data_models import Snapshot

# Distance between Earth and Moon during the Aug 21, 2017 solar eclipse.
MOON_TO_EARTH = 372_000.0  # km


@dataclass(frozen=True)
class Preset:
    name: str
    snapshot: Snapshot


def solar_eclipse_aug_2017() -> Snapshot:
    # JPL Horizons (https://ssd.jpl.nasa.gov/horizons/app.html), vector table,
    # targets Earth and Luna, coordinate center @sun, 2017-08-21 15:46:48 TDB.
    return Snapshot(
        timestamp=datetime(2017, 8, 21, 15, 46, 48, tzinfo=timezone.utc),
        earth_position=(1.290745457486534e+08, -7.899200932997707e+07, 2.689484561856836e+03),
        earth_velocity=(1.507209745469294e+01, 2.530788781266470e+01, -2.302676624889699e-03),
        moon_position=(1.287626991572680e+08, -7.878974778529878e+07, 4.510853649180382e+03),
        moon_velocity=(1.446304692640349e+01, 2.444380218816157e+01, 9.547778835418086e-02),
    )


def no_moon_inclination() -> Snapshot:
    """Earth at aphelion, Moon between Earth and Sun in the ecliptic plane."""
    return Snapshot(
        timestamp=datetime(2000, 1, 1, tzinfo=timezone.utc),
        earth_position=(EARTH_APHELION, 0.0, 0.0),
        earth_velocity=(0.0, 29.3, 0.0),
        moon_position=(EARTH_APHELION - MOON_TO_EARTH, 0.0, 0.0),
        moon_velocity=(0.0, 29.3 - 1.022, 0.0),
    )


def high_moon_inclination() -> Snapshot:
    """Same as no_moon_inclination, with the Moon lifted 3000 km out of the ecliptic."""
    return Snapshot(
        timestamp=datetime(2000, 1, 1, tzinfo=timezone.utc),
        earth_position=(EARTH_APHELION, 0.0, 0.0),
        earth_velocity=(0.0, 29.3, 0.0),
        moon_position=(EARTH_APHELION - MOON_TO_EARTH, 0.0, 3_000.0),
        moon_velocity=(0.0, 29.3 - 1.022, 0.0),
    )


def builtin_presets() -> List[Preset]:
    return [
        Preset("Solar eclipse Aug 2017", solar_eclipse_aug_2017()),
        Preset("Test - no moon inclination", no_moon_inclination()),
        Preset("Test - high moon inclination", high_moon_inclination()),
    ]
