#!/usr/bin/env python3
"""
Shared constants for the Planets Simulator.

Units differ from plain SI on purpose: positions are kilometers [km], velocities
kilometers per second [km/s], masses kilograms [kg] and time seconds [s].
Keeping constants in one place helps ensure values are consistent across the
codebase and makes tuning easier.
"""
from datetime import datetime, timedelta, timezone

# Physical constants
G = 6.67430e-11  # N m^2 kg^-2
# km^2 -> m^2 in the denominator and m -> km in the result of gacc().
KM_GRAVITY_SCALE = 1e-9

SUN_MASS = 1.9885e30  # kg
SUN_RADIUS = 696342.0  # km
EARTH_MASS = 5.97237e24  # kg
EARTH_RADIUS = 6378.137  # km, equatorial
MOON_MASS = 7.34767309e22  # kg
MOON_RADIUS = 1737.5  # km

EARTH_APHELION = 152.10e6  # km
EARTH_TILT_DEGREES = 23.4
EARTH_TROPICAL_YEAR = 365.2412 * 24.0 * 3600.0  # s
KNOWN_SOLSTICE = datetime(2000, 6, 21, 1, 47, 43, tzinfo=timezone.utc)

# Time control
DEFAULT_STEP = 60.0  # simulated seconds per integration step
MIN_STEPS_PER_WALL_SECOND = 100.0
MAX_STEPS_PER_WALL_SECOND = 10000.0
# When this limit binds the simulation no longer keeps up with wall time.
MAX_STEPS_PER_FRAME = 1000

# Simulated duration per elapsed wall-clock second.
SPEEDS = (
    timedelta(minutes=1),
    timedelta(minutes=15),
    timedelta(hours=1),
    timedelta(hours=4),
    timedelta(days=1),
    timedelta(days=5),
    timedelta(days=30),
    timedelta(days=90),
)
DEFAULT_SPEED_INDEX = 2
DEFAULT_PRESET_INDEX = 0

# Driver loop
TARGET_FPS = 60
WINDOW_WIDTH = 480
WINDOW_HEIGHT = 120
BACKGROUND_COLOR = (10, 12, 18)
