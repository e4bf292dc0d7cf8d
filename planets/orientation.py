#!/usr/bin/env python3
"""
Rotations for body orientation queries.

The renderer needs to know how Earth and Moon are turned, not just where they
are. Rotations are unit quaternions kept as a small immutable value type; the
only construction used is axis/angle, and composition follows the usual
convention that (a * b) applies b first, then a.
"""
import math
from dataclasses import dataclass
from datetime import datetime

from .constants import EARTH_TILT_DEGREES, EARTH_TROPICAL_YEAR, KNOWN_SOLSTICE
from .vector_utils import Vec3, Z_AXIS, vec_add, vec_cross, vec_norm, vec_scale


@dataclass(frozen=True)
class Quaternion:
    """Unit quaternion w + xi + yj + zk."""
    w: float
    x: float
    y: float
    z: float

    @classmethod
    def identity(cls) -> "Quaternion":
        return cls(1.0, 0.0, 0.0, 0.0)

    @classmethod
    def from_axis_angle(cls, axis: Vec3, angle: float) -> "Quaternion":
        """Rotation by angle (radians, right-handed) about axis; axis need not be unit length."""
        ax, ay, az = vec_norm(axis)
        half = 0.5 * angle
        s = math.sin(half)
        return cls(math.cos(half), ax * s, ay * s, az * s)

    def __mul__(self, other: "Quaternion") -> "Quaternion":
        w1, x1, y1, z1 = self.w, self.x, self.y, self.z
        w2, x2, y2, z2 = other.w, other.x, other.y, other.z
        return Quaternion(
            w1 * w2 - x1 * x2 - y1 * y2 - z1 * z2,
            w1 * x2 + x1 * w2 + y1 * z2 - z1 * y2,
            w1 * y2 - x1 * z2 + y1 * w2 + z1 * x2,
            w1 * z2 + x1 * y2 - y1 * x2 + z1 * w2,
        )

    def conjugate(self) -> "Quaternion":
        return Quaternion(self.w, -self.x, -self.y, -self.z)

    def rotate(self, v: Vec3) -> Vec3:
        """Rotate vector v: v' = v + 2w(q x v) + 2 q x (q x v)."""
        q = (self.x, self.y, self.z)
        t = vec_scale(vec_cross(q, v), 2.0)
        return vec_add(vec_add(v, vec_scale(t, self.w)), vec_cross(q, t))

    def angle(self) -> float:
        """Rotation angle in radians, in [0, 2*pi]."""
        return 2.0 * math.acos(max(-1.0, min(1.0, self.w)))


def relative_earth_orientation(timestamp: datetime) -> Quaternion:
    """
    Rotation that turns Earth to match the time of day and season at timestamp.

    Assumes the Sun lies along -x and that at noon UTC the Greenwich meridian
    faces it. The spin angle comes from the UTC time of day; the tilt axis
    completes one turn per tropical year, counted from a known summer solstice
    (angle 0 at the summer solstice, pi at the winter solstice).
    """
    seconds_of_day = timestamp.second + 60 * (timestamp.minute + 60 * timestamp.hour)
    rotation_angle = math.pi * (seconds_of_day / (12.0 * 3600.0) - 1.0)

    delta = float(int((timestamp - KNOWN_SOLSTICE).total_seconds()))
    axis_orientation = math.fmod(delta, EARTH_TROPICAL_YEAR) / EARTH_TROPICAL_YEAR * 2.0 * math.pi
    # At angle 0 the tilt is a rotation about the y axis.
    axis = (math.sin(axis_orientation), math.cos(axis_orientation), 0.0)

    tilt = Quaternion.from_axis_angle(axis, -math.radians(EARTH_TILT_DEGREES))
    spin = Quaternion.from_axis_angle(Z_AXIS, rotation_angle)
    return tilt * spin
