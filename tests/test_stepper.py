"""
Tests for the live stepper and the wall-clock driver.
"""

import io
import unittest
from dataclasses import replace

from rich.console import Console

from missionsim.driver import run_live
from missionsim.advice import STATUS_COMPLETED, STATUS_TIME_CAP, status_line
from missionsim.models import Environment, FlightState, MissionPlan, VehicleProfile
from missionsim.simulator import (
    LiveSession,
    distance_summary,
    initial_state,
    is_terminal,
    simulate,
    tick,
    tick_summary,
)
from missionsim.unit import Second

VEHICLE = VehicleProfile(mass_kg=2.4, capacity_wh=160, base_power_w=120)
CALM = Environment(wind_speed=0)
SHORT_HOP = MissionPlan(route_km=5, speed_mps=10)
HEADWIND = Environment(wind_speed=10, wind_direction="headwind", temperature_c=25)
LONG_HAUL = MissionPlan(route_km=50, speed_mps=15, altitude_m=100, payload_kg=3)


def run_to_end(vehicle, environment, mission):
    state = initial_state(mission)
    terminal = False
    ticks = 0
    while not terminal:
        state, terminal = tick(vehicle, environment, mission, state)
        ticks += 1
    return state, ticks


class TestTick(unittest.TestCase):
    """Test the pure tick transition."""

    def test_initial_state_is_clamped(self):
        state = initial_state(replace(SHORT_HOP, initial_battery_percent=5))
        self.assertEqual(state, FlightState(distance_m=0.0, battery_percent=10.0, elapsed_s=0.0))

    def test_single_tick(self):
        state, terminal = tick(VEHICLE, CALM, SHORT_HOP, initial_state(SHORT_HOP))
        self.assertFalse(terminal)
        self.assertEqual(state.distance_m, 10.0)
        self.assertEqual(state.elapsed_s, 1.0)
        self.assertAlmostEqual(state.battery_percent, 100.0 - 0.125)

    def test_matches_batch_result(self):
        """Test ticking to the end reproduces the batch numbers exactly."""
        state, ticks = run_to_end(VEHICLE, CALM, SHORT_HOP)
        self.assertEqual(ticks, 500)
        self.assertEqual(tick_summary(SHORT_HOP, state), simulate(VEHICLE, CALM, SHORT_HOP))

    def test_battery_exhaustion_is_terminal(self):
        state, _ = run_to_end(VEHICLE, HEADWIND, LONG_HAUL)
        summary = tick_summary(LONG_HAUL, state)
        self.assertFalse(summary.completed)
        self.assertEqual(summary.battery_left_percent, 0.0)
        self.assertEqual(summary, simulate(VEHICLE, HEADWIND, LONG_HAUL))

    def test_terminal_state_is_not_advanced(self):
        state, _ = run_to_end(VEHICLE, CALM, SHORT_HOP)
        again, terminal = tick(VEHICLE, CALM, SHORT_HOP, state)
        self.assertTrue(terminal)
        self.assertIs(again, state)
        self.assertTrue(is_terminal(SHORT_HOP, state))


class TestElapsedTimeDefinitions(unittest.TestCase):
    """Test the tick-based and distance-based elapsed time figures."""

    def test_agree_at_cruise_speed(self):
        state, _ = run_to_end(VEHICLE, CALM, SHORT_HOP)
        self.assertEqual(distance_summary(SHORT_HOP, state).total_time_s, 500.0)
        self.assertEqual(tick_summary(SHORT_HOP, state).total_time_s, 500.0)

    def test_diverge_at_crawling_speed(self):
        """Test speed below 0.1 m/s is floored in the distance-based figure."""
        mission = MissionPlan(route_km=1, speed_mps=0.05)
        state = initial_state(mission)
        for _ in range(10):
            state, _ = tick(VEHICLE, CALM, mission, state)
        self.assertEqual(tick_summary(mission, state).total_time_s, 10.0)
        self.assertAlmostEqual(distance_summary(mission, state).total_time_s, 5.0)
        self.assertEqual(distance_summary(mission, state).metadata["time_basis"], "distance")


class TestLiveSession(unittest.TestCase):
    """Test LiveSession lifecycle."""

    def setUp(self):
        self.session = LiveSession(VEHICLE, CALM, SHORT_HOP)

    def test_start_pause(self):
        self.assertFalse(self.session.running)
        self.session.start()
        self.assertTrue(self.session.running)
        self.session.pause()
        self.assertFalse(self.session.running)

    def test_runs_to_completion(self):
        self.session.start()
        while not self.session.tick():
            pass
        self.assertTrue(self.session.done)
        self.assertFalse(self.session.running)
        self.assertEqual(self.session.ticks, 500)
        summary = self.session.summary()
        self.assertTrue(summary.completed)
        self.assertEqual(summary.total_time_s, 500.0)

    def test_reset(self):
        for _ in range(20):
            self.session.tick()
        self.session.reset(mission=replace(SHORT_HOP, initial_battery_percent=60))
        self.assertEqual(self.session.state.distance_m, 0.0)
        self.assertEqual(self.session.state.battery_percent, 60.0)
        self.assertEqual(self.session.ticks, 0)

    def test_overlapping_tick_rejected(self):
        """Test a tick arriving while another is in flight raises."""
        self.session._lock.acquire()
        try:
            with self.assertRaises(RuntimeError):
                self.session.tick()
        finally:
            self.session._lock.release()
        self.assertEqual(self.session.ticks, 0)

    def test_sessions_are_independent(self):
        other = LiveSession(VEHICLE, HEADWIND, LONG_HAUL)
        for _ in range(5):
            self.session.tick()
        self.assertEqual(other.ticks, 0)
        self.assertEqual(other.state.distance_m, 0.0)


class TestDriver(unittest.TestCase):
    """Test run_live."""

    def setUp(self):
        self.console = Console(file=io.StringIO(), width=100)

    def test_runs_session_to_completion(self):
        session = LiveSession(VEHICLE, CALM, SHORT_HOP)
        summary = run_live(session, interval=Second(0), console=self.console)
        self.assertTrue(session.done)
        self.assertTrue(summary.completed)
        self.assertEqual(summary.distance_km_covered, 5.0)
        self.assertEqual(status_line(summary), STATUS_COMPLETED)
        self.assertFalse(summary.metadata["cap_reached"])
        self.assertIn("Current State", self.console.file.getvalue())

    def test_stops_at_max_ticks(self):
        session = LiveSession(VEHICLE, CALM, MissionPlan(route_km=1, speed_mps=0))
        summary = run_live(session, interval=0, console=self.console, max_ticks=10)
        self.assertFalse(session.done)
        self.assertFalse(session.running)
        self.assertEqual(session.ticks, 10)
        self.assertFalse(summary.completed)
        self.assertTrue(summary.metadata["cap_reached"])
        self.assertEqual(status_line(summary), STATUS_TIME_CAP)

    def test_guard_matches_batch_time_cap(self):
        """Test a stalled live run is labelled like the batch run it mirrors."""
        vehicle = VehicleProfile(capacity_wh=1000)
        mission = MissionPlan(route_km=1, speed_mps=0)
        live = run_live(LiveSession(vehicle, CALM, mission), interval=0, console=self.console)
        batch = simulate(vehicle, CALM, mission)
        self.assertGreater(live.battery_left_percent, 0.0)
        self.assertEqual(status_line(live), status_line(batch))
        self.assertEqual(status_line(live), STATUS_TIME_CAP)

    def test_summary_passes_metadata(self):
        session = LiveSession(VEHICLE, CALM, SHORT_HOP)
        self.assertEqual(session.summary(cap_reached=True).metadata["cap_reached"], True)
        self.assertEqual(tick_summary(SHORT_HOP, session.state, note="x").metadata["note"], "x")


if __name__ == '__main__':
    unittest.main()
