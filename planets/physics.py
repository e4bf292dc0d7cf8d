#!/usr/bin/env python3
"""
Core Physics Engine for the Planets Simulator

Responsibilities
- Compute Newtonian gravitational accelerations on Earth and Moon from the Sun and
  from each other.
- Advance a Snapshot by one fixed time step using velocity-Verlet integration.

Units and conventions
- Positions are in kilometers [km], velocities in [km/s], accelerations in [km/s^2].
- Masses are in kilograms [kg]; G is kept in SI (N m^2 kg^-2), so gacc() applies a
  1e-9 factor: km^2 -> m^2 in the denominator and m -> km in the result.
- The Sun is fixed at the origin and is never accelerated.

Numerical notes
- Velocity-Verlet is symplectic and time-symmetric: stepping by dt and then by -dt
  returns to the starting state up to rounding, and orbital energy does not drift
  secularly the way it does with RK4.
- This is a fixed-step integrator. Accuracy depends on the caller choosing a dt that
  is small against the Moon's orbital period; there is no error estimation here.
  The step-size policy lives in SimulationController.advance().

Threading
- Pure compute with no state. The controller calls it under its own lock.
"""

from typing import Tuple

from .constants import G, KM_GRAVITY_SCALE
from .data_models import Body, Snapshot
from .seconds import Seconds
from .vector_utils import ORIGIN, Vec3, vec_add, vec_len_sq, vec_norm, vec_scale, vec_sub


def gacc(pos: Vec3, other_pos: Vec3, other_mass: float) -> Vec3:
    """
    Gravitational acceleration at pos due to a body of other_mass at other_pos.

        a = G * M / |r|^2 * r_hat,   r = other_pos - pos

    Args:
        pos: Position of the attracted body in km.
        other_pos: Position of the attracting body in km.
        other_mass: Mass of the attracting body in kg.

    Returns:
        Acceleration vector in km/s^2, pointing toward other_pos.
    """
    r = vec_sub(other_pos, pos)
    amount = G * other_mass / vec_len_sq(r) * KM_GRAVITY_SCALE
    return vec_scale(vec_norm(r), amount)


def gacc_earth_and_moon(earth_position: Vec3, moon_position: Vec3) -> Tuple[Vec3, Vec3]:
    """
    Compute the accelerations on Earth and Moon at the given positions.

    Each body is pulled by the Sun (at the origin) and by the other moving body.

    Returns:
        (earth_acceleration, moon_acceleration) in km/s^2.
    """
    earth_acc = vec_add(
        gacc(earth_position, ORIGIN, Body.SUN.mass),
        gacc(earth_position, moon_position, Body.MOON.mass),
    )
    moon_acc = vec_add(
        gacc(moon_position, ORIGIN, Body.SUN.mass),
        gacc(moon_position, earth_position, Body.EARTH.mass),
    )
    return earth_acc, moon_acc


def verlet_step(snapshot: Snapshot, dt: Seconds) -> Snapshot:
    """
    Perform one velocity-Verlet integration step.

    Workflow:
    1) a(t) from the current positions
    2) x(t+dt) = x(t) + v(t)*dt + a(t)*dt^2/2
    3) a(t+dt) from the new positions
    4) v(t+dt) = v(t) + (a(t) + a(t+dt))*dt/2
    5) timestamp advanced by dt as a calendar duration

    Args:
        snapshot: State to advance; it is not modified.
        dt: Step size. A negative dt integrates backward in time; direction is the
            caller's choice, this function applies the same formulas either way.

    Returns:
        A new Snapshot at snapshot.timestamp + dt.
    """
    new_timestamp = snapshot.timestamp + dt.to_duration()
    h = dt.value

    earth_acc, moon_acc = gacc_earth_and_moon(snapshot.earth_position, snapshot.moon_position)

    new_earth_pos = vec_add(
        vec_add(snapshot.earth_position, vec_scale(snapshot.earth_velocity, h)),
        vec_scale(earth_acc, 0.5 * h * h),
    )
    new_moon_pos = vec_add(
        vec_add(snapshot.moon_position, vec_scale(snapshot.moon_velocity, h)),
        vec_scale(moon_acc, 0.5 * h * h),
    )

    new_earth_acc, new_moon_acc = gacc_earth_and_moon(new_earth_pos, new_moon_pos)

    new_earth_vel = vec_add(snapshot.earth_velocity, vec_scale(vec_add(earth_acc, new_earth_acc), 0.5 * h))
    new_moon_vel = vec_add(snapshot.moon_velocity, vec_scale(vec_add(moon_acc, new_moon_acc), 0.5 * h))

    return Snapshot(
        timestamp=new_timestamp,
        earth_position=new_earth_pos,
        earth_velocity=new_earth_vel,
        moon_position=new_moon_pos,
        moon_velocity=new_moon_vel,
    )
