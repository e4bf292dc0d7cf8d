#!/usr/bin/env python3
"""
Simulation controller: maps elapsed wall-clock time to simulated time.

The controller owns the current Snapshot and the playback state (stopped or
running, speed, reverse). A frame loop calls advance() once per frame and then
reads current/status(); control input arrives through handle_event().

While running, simulated time is computed from the wall time elapsed since
start() and the speed selected at that moment:

    target = start.timestamp +/- speed * (now - start.instant)

so speed, direction and the state itself may only change through a stop,
mutate, restart sequence (_stopped()). Otherwise time that elapsed before the
change would be replayed at the new speed.

Threading
- All public methods take the controller's re-entrant lock, so a UI thread can
  send events while another thread drives advance().
"""
import logging
import math
import threading
import time
from contextlib import contextmanager
from dataclasses import dataclass
from datetime import datetime, timedelta
from typing import Callable, Iterator, Optional

from .choice import Choice, ChoiceSet
from .config import Config
from .constants import (
    DEFAULT_SPEED_INDEX,
    DEFAULT_STEP,
    MAX_STEPS_PER_FRAME,
    MAX_STEPS_PER_WALL_SECOND,
    MIN_STEPS_PER_WALL_SECOND,
    SPEEDS,
)
from .controls import ControlEvent, Event, LoadPreset, SetSpeed
from .data_models import Snapshot
from .physics import verlet_step
from .presets import Preset
from .seconds import Seconds
from .status import SimulationStatus
from .utils import duration_short_string

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class StartInfo:
    """Wall-clock instant and simulation timestamp captured by start()."""
    instant: float
    timestamp: datetime


class SimulationController:
    """
    Owns the simulated state and advances it in step with the wall clock.

    Attributes:
        current: latest Snapshot.
        speed: selected simulated duration per wall-clock second.
        reverse: simulated time runs backward while set.
        state: StartInfo while running, None while stopped.
        preset: preset the state was last loaded from, if any.
    """

    def __init__(
        self,
        start: Snapshot,
        speed: Optional[Choice[timedelta]] = None,
        preset: Optional[Choice[Preset]] = None,
        clock: Callable[[], float] = time.perf_counter,
    ):
        self.lock = threading.RLock()
        self.current = start
        self.speed = speed if speed is not None else ChoiceSet(SPEEDS).by_index(DEFAULT_SPEED_INDEX)
        self.reverse = False
        self.state: Optional[StartInfo] = None
        self.preset = preset
        self._clock = clock

    @classmethod
    def from_config(cls, config: Config, clock: Callable[[], float] = time.perf_counter) -> "SimulationController":
        return cls(
            config.initial_preset.get().snapshot,
            speed=config.initial_speed,
            preset=config.initial_preset,
            clock=clock,
        )

    # ----- run state -------------------------------------------------------

    def start(self) -> None:
        with self.lock:
            self.state = StartInfo(instant=self._clock(), timestamp=self.current.timestamp)
            logger.debug("Simulation started at %s", self.current.timestamp.isoformat())

    def stop(self) -> None:
        with self.lock:
            self.state = None
            logger.debug("Simulation stopped at %s", self.current.timestamp.isoformat())

    def toggle_start(self) -> None:
        with self.lock:
            if self.is_running():
                self.stop()
            else:
                self.start()
            logger.info("Simulation %s", "running" if self.is_running() else "paused")

    def is_running(self) -> bool:
        return self.state is not None

    @contextmanager
    def _stopped(self) -> Iterator[None]:
        """Stop while the body runs, then restart if the simulation was running."""
        was_running = self.is_running()
        if was_running:
            self.stop()
        try:
            yield
        finally:
            if was_running:
                self.start()

    # ----- stepping --------------------------------------------------------

    def advance(self) -> None:
        """
        Bring current up to the simulated time implied by the wall clock.

        The nominal step is DEFAULT_STEP, clamped so that between
        MIN_STEPS_PER_WALL_SECOND and MAX_STEPS_PER_WALL_SECOND steps are
        taken per wall-clock second at the current speed. The whole gap is
        always closed in this call; if that needs more than
        MAX_STEPS_PER_FRAME steps, fewer and larger steps are taken.
        """
        with self.lock:
            if self.state is None:
                return
            speed_per_sec = Seconds.from_duration(self.speed.get())

            elapsed = Seconds.from_wall_clock(self._clock() - self.state.instant)
            simulation_elapsed = speed_per_sec * elapsed.value

            if not self.reverse:
                target_timestamp = self.state.timestamp + simulation_elapsed.to_duration()
                simulation_advance = Seconds.from_duration(target_timestamp - self.current.timestamp)
            else:
                target_timestamp = self.state.timestamp - simulation_elapsed.to_duration()
                simulation_advance = Seconds.from_duration(self.current.timestamp - target_timestamp)

            target_step = (
                Seconds(DEFAULT_STEP)
                .at_least(speed_per_sec / MAX_STEPS_PER_WALL_SECOND)
                .at_most(speed_per_sec / MIN_STEPS_PER_WALL_SECOND)
            )
            num_steps = math.ceil(simulation_advance / target_step)
            self._advance_by(simulation_advance, num_steps)

    def _advance_by(self, simulation_advance: Seconds, num_steps: int) -> None:
        # Timestamps resolve microseconds, so a frame can land a hair past its
        # target; the following frame then has nothing to do.
        if num_steps <= 0 or simulation_advance.value <= 0.0:
            return
        if num_steps > MAX_STEPS_PER_FRAME:
            logger.debug("Step cap hit: %d steps wanted, taking %d", num_steps, MAX_STEPS_PER_FRAME)
            num_steps = MAX_STEPS_PER_FRAME
        step = simulation_advance / num_steps * (-1.0 if self.reverse else 1.0)
        for _ in range(num_steps):
            self.current = verlet_step(self.current, step)

    # ----- mutations -------------------------------------------------------

    def adjust_speed(self, new_speed: Choice[timedelta]) -> None:
        with self.lock, self._stopped():
            self.speed = new_speed
            logger.info("Speed set to %s/s", duration_short_string(new_speed.get()))

    def toggle_reverse(self) -> None:
        with self.lock, self._stopped():
            self.reverse = not self.reverse
            logger.info("Reverse %s", "on" if self.reverse else "off")

    def load_preset(self, preset: Choice[Preset]) -> None:
        with self.lock, self._stopped():
            self.preset = preset
            self.current = preset.get().snapshot
            logger.info("Loaded preset: %s", preset.get().name)

    def jump(self, backward: bool) -> None:
        """Advance by one speed unit of simulated time; ignored while running."""
        with self.lock:
            if self.is_running():
                return
            old_reverse = self.reverse
            self.reverse = backward
            try:
                self._advance_by(Seconds.from_duration(self.speed.get()), MAX_STEPS_PER_FRAME)
            finally:
                self.reverse = old_reverse

    def handle_event(self, event: Event) -> None:
        with self.lock:
            if event is ControlEvent.START_STOP:
                self.toggle_start()
            elif event is ControlEvent.FASTER:
                self.adjust_speed(self.speed.next())
            elif event is ControlEvent.SLOWER:
                self.adjust_speed(self.speed.prev())
            elif event is ControlEvent.REVERSE:
                self.toggle_reverse()
            elif event is ControlEvent.JUMP_FORWARD:
                self.jump(backward=False)
            elif event is ControlEvent.JUMP_BACK:
                self.jump(backward=True)
            elif isinstance(event, SetSpeed):
                self.adjust_speed(self.speed.choice_set.by_index(event.index))
            elif isinstance(event, LoadPreset):
                if self.preset is None:
                    raise ValueError("controller was created without a preset list")
                self.load_preset(self.preset.choice_set.by_index(event.index))
            else:
                raise TypeError(f"Unknown control event: {event!r}")

    # ----- observation -----------------------------------------------------

    def status(self) -> SimulationStatus:
        with self.lock:
            return SimulationStatus(
                timestamp=self.current.timestamp,
                running=self.is_running(),
                speed=self.speed,
                reverse=self.reverse,
                preset=self.preset,
            )
