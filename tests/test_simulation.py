"""
Tests for SimulationController: run state, wall-clock driven stepping,
restart-on-mutate, step bounding, jumps, events and status.
"""
import dataclasses
from datetime import datetime, timedelta, timezone

import pytest

import planets.simulation as simulation
from planets.config import Config
from planets.constants import MAX_STEPS_PER_FRAME
from planets.controls import ControlEvent, LoadPreset, SetSpeed
from planets.presets import no_moon_inclination
from planets.simulation import SimulationController


@pytest.fixture
def sim(flat_snapshot, speeds, clock):
    return SimulationController(flat_snapshot, speed=speeds.by_index(2), clock=clock)


@pytest.fixture
def step_counter(monkeypatch):
    calls = []
    real_step = simulation.verlet_step

    def counting_step(snapshot, dt):
        calls.append(dt)
        return real_step(snapshot, dt)

    monkeypatch.setattr(simulation, "verlet_step", counting_step)
    return calls


class TestRunState:

    def test_initially_stopped(self, sim):
        assert not sim.is_running()
        assert sim.state is None

    def test_start_captures_clock_and_timestamp(self, sim, clock):
        sim.start()
        assert sim.state.instant == clock.now
        assert sim.state.timestamp == sim.current.timestamp

    def test_stop_keeps_current(self, sim, clock):
        sim.start()
        clock.tick(1.0)
        sim.advance()
        advanced = sim.current
        sim.stop()
        assert not sim.is_running()
        assert sim.current is advanced

    def test_toggle_start(self, sim):
        sim.toggle_start()
        assert sim.is_running()
        sim.toggle_start()
        assert not sim.is_running()

    def test_start_while_running_restarts(self, sim, clock):
        sim.start()
        clock.tick(2.0)
        sim.start()
        assert sim.state.instant == clock.now


class TestAdvance:

    def test_noop_while_stopped(self, sim, clock, step_counter):
        before = sim.current
        clock.tick(10.0)
        sim.advance()
        assert sim.current is before
        assert step_counter == []

    def test_no_elapsed_time_no_steps(self, sim, step_counter):
        sim.start()
        sim.advance()
        assert step_counter == []

    def test_forward_one_second_at_one_hour(self, sim, clock, step_counter):
        start = sim.current.timestamp
        sim.start()
        clock.tick(1.0)
        sim.advance()
        assert sim.current.timestamp == start + timedelta(hours=1)
        # Nominal 60 s step clamped to 3600/100 = 36 s.
        assert len(step_counter) == 100
        assert all(dt.value == pytest.approx(36.0) for dt in step_counter)

    def test_reverse_runs_backward(self, sim, clock, step_counter):
        start = sim.current.timestamp
        sim.toggle_reverse()
        sim.start()
        clock.tick(1.0)
        sim.advance()
        assert sim.current.timestamp == start - timedelta(hours=1)
        assert all(dt.value < 0 for dt in step_counter)

    def test_frames_accumulate_against_start(self, sim, clock):
        start = sim.current.timestamp
        sim.start()
        for _ in range(4):
            clock.tick(0.25)
            sim.advance()
        assert abs(sim.current.timestamp - (start + timedelta(hours=1))) <= timedelta(milliseconds=1)

    def test_step_count_bounded_at_extreme_speed(self, flat_snapshot, speeds, clock, step_counter):
        sim = SimulationController(flat_snapshot, speed=speeds.by_index(7), clock=clock)
        start = sim.current.timestamp
        sim.start()
        clock.tick(10.0)
        sim.advance()
        assert len(step_counter) == MAX_STEPS_PER_FRAME
        # The whole gap is still closed, with larger steps.
        assert abs(sim.current.timestamp - (start + timedelta(days=900))) <= timedelta(milliseconds=1)
        assert step_counter[0].value == pytest.approx(900 * 86400.0 / MAX_STEPS_PER_FRAME)

    def test_end_to_end_one_day(self, scenario_snapshot, one_day_per_sec, clock):
        sim = SimulationController(scenario_snapshot, speed=one_day_per_sec, clock=clock)
        start_distance = scenario_snapshot.earth_sun_distance()
        sim.start()
        clock.tick(1.0)
        sim.advance()
        expected = datetime(2000, 1, 2, tzinfo=timezone.utc)
        assert abs(sim.current.timestamp - expected) <= timedelta(seconds=60)
        assert sim.current.earth_sun_distance() == pytest.approx(start_distance, rel=1e-3)


class TestRestartOnMutate:

    def test_speed_change_does_not_replay_elapsed_time(self, flat_snapshot, speeds, clock, one_day_per_sec):
        sim = SimulationController(flat_snapshot, speed=speeds.by_index(2), clock=clock)
        sim.start()
        clock.tick(0.5)
        sim.advance()
        at_change = sim.current
        change_time = clock.now
        sim.adjust_speed(one_day_per_sec)
        clock.tick(1.0)
        sim.advance()

        fresh_clock = type(clock)(change_time)
        fresh = SimulationController(at_change, speed=one_day_per_sec, clock=fresh_clock)
        fresh.start()
        fresh_clock.tick(1.0)
        fresh.advance()

        assert sim.current == fresh.current

    def test_adjust_speed_while_running_recaptures_start(self, sim, clock, one_day_per_sec):
        sim.start()
        clock.tick(0.5)
        sim.advance()
        sim.adjust_speed(one_day_per_sec)
        assert sim.is_running()
        assert sim.state.instant == clock.now
        assert sim.state.timestamp == sim.current.timestamp
        assert sim.speed == one_day_per_sec

    def test_adjust_speed_while_stopped_stays_stopped(self, sim, one_day_per_sec):
        sim.adjust_speed(one_day_per_sec)
        assert not sim.is_running()
        assert sim.speed.get() == timedelta(days=1)

    def test_reverse_while_running_restarts(self, sim, clock):
        sim.start()
        clock.tick(1.0)
        sim.advance()
        turned_at = sim.current.timestamp
        sim.toggle_reverse()
        assert sim.reverse
        assert sim.state.timestamp == turned_at
        clock.tick(1.0)
        sim.advance()
        assert sim.current.timestamp == turned_at - timedelta(hours=1)


class TestJump:

    def test_jump_forward_and_back(self, sim, one_day_per_sec, step_counter):
        sim.adjust_speed(one_day_per_sec)
        start = sim.current.timestamp
        sim.handle_event(ControlEvent.JUMP_FORWARD)
        assert sim.current.timestamp == start + timedelta(days=1)
        assert len(step_counter) == MAX_STEPS_PER_FRAME
        assert not sim.is_running()
        assert sim.reverse is False

        sim.handle_event(ControlEvent.JUMP_BACK)
        assert sim.current.timestamp == start
        assert sim.reverse is False
        assert not sim.is_running()

    def test_jump_restores_reverse(self, sim):
        sim.toggle_reverse()
        start = sim.current.timestamp
        sim.handle_event(ControlEvent.JUMP_FORWARD)
        assert sim.current.timestamp == start + timedelta(hours=1)
        assert sim.reverse is True

    def test_jump_ignored_while_running(self, sim, step_counter):
        sim.start()
        before = sim.current
        sim.handle_event(ControlEvent.JUMP_FORWARD)
        sim.handle_event(ControlEvent.JUMP_BACK)
        assert sim.current is before
        assert step_counter == []
        assert sim.is_running()


class TestEvents:

    def test_start_stop(self, sim):
        sim.handle_event(ControlEvent.START_STOP)
        assert sim.is_running()
        sim.handle_event(ControlEvent.START_STOP)
        assert not sim.is_running()

    def test_faster_slower_clamp(self, sim):
        for _ in range(10):
            sim.handle_event(ControlEvent.FASTER)
        assert sim.speed.get() == timedelta(days=90)
        for _ in range(10):
            sim.handle_event(ControlEvent.SLOWER)
        assert sim.speed.get() == timedelta(minutes=1)

    def test_set_speed(self, sim):
        sim.handle_event(SetSpeed(5))
        assert sim.speed.index == 5
        assert sim.speed.get() == timedelta(days=5)

    def test_set_speed_out_of_range(self, sim):
        with pytest.raises(IndexError):
            sim.handle_event(SetSpeed(8))

    def test_reverse_toggle(self, sim):
        sim.handle_event(ControlEvent.REVERSE)
        assert sim.reverse
        sim.handle_event(ControlEvent.REVERSE)
        assert not sim.reverse

    def test_unknown_event(self, sim):
        with pytest.raises(TypeError):
            sim.handle_event("faster")


class TestPresets:

    @pytest.fixture
    def configured(self, clock):
        return SimulationController.from_config(Config.default(presets_dir=None), clock=clock)

    def test_from_config(self, configured):
        assert configured.preset.index == 0
        assert configured.current == configured.preset.get().snapshot
        assert configured.speed.get() == timedelta(hours=1)

    def test_load_preset_event(self, configured):
        configured.handle_event(LoadPreset(1))
        assert configured.preset.index == 1
        assert configured.current == no_moon_inclination()

    def test_load_preset_while_running_restarts_from_preset(self, configured, clock):
        configured.start()
        clock.tick(1.0)
        configured.advance()
        configured.handle_event(LoadPreset(1))
        assert configured.is_running()
        assert configured.state.timestamp == no_moon_inclination().timestamp
        assert configured.state.instant == clock.now

    def test_load_preset_without_list(self, sim):
        with pytest.raises(ValueError):
            sim.handle_event(LoadPreset(0))


class TestStatus:

    def test_reflects_controller(self, sim, clock):
        status = sim.status()
        assert status.timestamp == sim.current.timestamp
        assert status.running is False
        assert status.speed.get() == timedelta(hours=1)
        assert status.reverse is False

        sim.toggle_reverse()
        sim.start()
        status = sim.status()
        assert status.running is True
        assert status.reverse is True

    def test_is_read_only(self, sim):
        status = sim.status()
        with pytest.raises(dataclasses.FrozenInstanceError):
            status.running = True
        assert not sim.is_running()

    def test_describe(self, sim):
        sim.adjust_speed(sim.speed.choice_set.by_index(4))
        sim.toggle_reverse()
        assert sim.status().describe() == "2000-01-01 00:00 UTC | stopped | 1d/s | reverse"
