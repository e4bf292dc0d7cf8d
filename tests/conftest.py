"""
Shared fixtures for the Planets Simulator test suite.
"""
from datetime import datetime, timezone

import pytest

from planets.choice import ChoiceSet
from planets.constants import SPEEDS
from planets.data_models import Snapshot
from planets.presets import no_moon_inclination


class FakeClock:
    """Stand-in for time.perf_counter that only moves when told to."""

    def __init__(self, now: float = 1000.0):
        self.now = now

    def __call__(self) -> float:
        return self.now

    def tick(self, seconds: float) -> None:
        self.now += seconds


@pytest.fixture
def clock():
    return FakeClock()


@pytest.fixture
def speeds():
    return ChoiceSet(SPEEDS)


@pytest.fixture
def one_day_per_sec(speeds):
    return speeds.by_index(4)


@pytest.fixture
def flat_snapshot():
    """Earth at aphelion, Moon in the ecliptic between Earth and Sun."""
    return no_moon_inclination()


@pytest.fixture
def scenario_snapshot():
    """Near-circular Earth with a retrograde Moon, starting 2000-01-01T00:00:00Z."""
    earth = (1.5210e8, 0.0, 0.0)
    return Snapshot(
        timestamp=datetime(2000, 1, 1, tzinfo=timezone.utc),
        earth_position=earth,
        earth_velocity=(0.0, 29.3, 0.0),
        moon_position=(earth[0] - 372000.0, 0.0, 0.0),
        moon_velocity=(0.0, 30.322, 0.0),
    )
