#!/usr/bin/env python3
"""
Data models for the Planets Simulator.

This module defines the body table and the Snapshot value shared between the
integrator, the controller and whatever renders the scene.

Units and usage
- positions are in kilometers [km], velocities in kilometers per second [km/s],
  radii in kilometers [km], masses in kg.
- The frame is heliocentric: the Sun sits at the origin and never moves, so it
  is not stored in a Snapshot at all.
- Snapshots are immutable; the integrator returns a new one per step.
"""
import math
from dataclasses import dataclass
from datetime import datetime
from enum import Enum
from types import MappingProxyType
from typing import Mapping, Tuple

from .constants import (
    EARTH_MASS,
    EARTH_RADIUS,
    MOON_MASS,
    MOON_RADIUS,
    SUN_MASS,
    SUN_RADIUS,
)
from .orientation import Quaternion, relative_earth_orientation
from .vector_utils import ORIGIN, Vec3, Z_AXIS, vec_len, vec_sub


class Body(Enum):
    SUN = "Sun"
    EARTH = "Earth"
    MOON = "Moon"

    @property
    def props(self) -> "BodyProperties":
        return BODY_PROPERTIES[self]

    @property
    def mass(self) -> float:
        return self.props.mass

    @property
    def radius(self) -> float:
        return self.props.radius


@dataclass(frozen=True)
class BodyProperties:
    """
    Fixed physical properties of a body.

    Fields:
    - mass: Mass in kilograms
    - radius: Radius in kilometers
    - color: RGB tuple (0..1) for whoever renders the body
    """
    mass: float
    radius: float
    color: Tuple[float, float, float]


BODY_PROPERTIES: Mapping[Body, BodyProperties] = MappingProxyType({
    Body.SUN: BodyProperties(SUN_MASS, SUN_RADIUS, (1.0, 0.8, 0.3)),
    Body.EARTH: BodyProperties(EARTH_MASS, EARTH_RADIUS, (0.1, 0.5, 1.0)),
    Body.MOON: BodyProperties(MOON_MASS, MOON_RADIUS, (0.7, 0.7, 0.7)),
})


@dataclass(frozen=True)
class Snapshot:
    """
    Full physical state of the Earth/Moon system at one instant.

    Fields:
    - timestamp: timezone-aware UTC datetime of this state
    - earth_position, earth_velocity: Earth state in km and km/s
    - moon_position, moon_velocity: Moon state in km and km/s
    """
    timestamp: datetime
    earth_position: Vec3
    earth_velocity: Vec3
    moon_position: Vec3
    moon_velocity: Vec3

    def position(self, body: Body) -> Vec3:
        if body is Body.EARTH:
            return self.earth_position
        if body is Body.MOON:
            return self.moon_position
        return ORIGIN

    def velocity(self, body: Body) -> Vec3:
        if body is Body.EARTH:
            return self.earth_velocity
        if body is Body.MOON:
            return self.moon_velocity
        return ORIGIN

    def earth_sun_distance(self) -> float:
        return vec_len(self.earth_position)

    def earth_moon_distance(self) -> float:
        return vec_len(vec_sub(self.moon_position, self.earth_position))

    def earth_orientation(self) -> Quaternion:
        """Orbital phase around the Sun combined with axial tilt and time-of-day spin."""
        angle_around_sun = math.atan2(self.earth_position[1], self.earth_position[0])
        return Quaternion.from_axis_angle(Z_AXIS, angle_around_sun) * relative_earth_orientation(self.timestamp)

    def moon_orientation(self) -> Quaternion:
        """Turn the Moon so its near side (-x) always faces Earth."""
        earth_angle = math.atan2(
            self.moon_position[1] - self.earth_position[1],
            self.moon_position[0] - self.earth_position[0],
        )
        return Quaternion.from_axis_angle(Z_AXIS, earth_angle)
