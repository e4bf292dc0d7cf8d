#!/usr/bin/env python3
"""
Scalar duration type used for all time arithmetic in the integrator and controller.

Seconds wraps a float and converts to and from the two other notions of
duration in play: wall-clock durations (float seconds, as returned by
differences of time.perf_counter()) and calendar durations
(datetime.timedelta, which timestamps are shifted by).

Values are expected to be finite. Nothing checks this at runtime; a NaN or
infinite Seconds is a bug in the caller.
"""
from dataclasses import dataclass
from datetime import timedelta
from typing import Union

_ONE_MICROSECOND = timedelta(microseconds=1)


@dataclass(frozen=True, order=True)
class Seconds:
    value: float

    @classmethod
    def from_wall_clock(cls, elapsed: float) -> "Seconds":
        """Wrap a wall-clock duration in float seconds."""
        return cls(float(elapsed))

    def to_wall_clock(self) -> float:
        return self.value

    @classmethod
    def from_duration(cls, duration: timedelta) -> "Seconds":
        """Convert a calendar duration (exact microsecond count) to Seconds."""
        return cls((duration // _ONE_MICROSECOND) / 1e6)

    def to_duration(self) -> timedelta:
        """
        Convert to a calendar duration.

        The value is truncated toward zero to whole nanoseconds first;
        timedelta only resolves microseconds, so the nanosecond count is then
        rounded to the nearest microsecond.
        """
        nanoseconds = int(self.value * 1e9)
        return timedelta(microseconds=nanoseconds / 1000.0)

    def at_least(self, other: "Seconds") -> "Seconds":
        return Seconds(max(self.value, other.value))

    def at_most(self, other: "Seconds") -> "Seconds":
        return Seconds(min(self.value, other.value))

    def __mul__(self, factor: float) -> "Seconds":
        return Seconds(self.value * factor)

    __rmul__ = __mul__

    def __truediv__(self, other: Union["Seconds", float]) -> Union["Seconds", float]:
        # Seconds / Seconds is a dimensionless ratio.
        if isinstance(other, Seconds):
            return self.value / other.value
        return Seconds(self.value / other)

    def __neg__(self) -> "Seconds":
        return Seconds(-self.value)

    def __float__(self) -> float:
        return self.value
