"""
Tests for the mission energy simulator models.
"""

import dataclasses
import unittest

from missionsim.exceptions import DegenerateConfigurationError, InvalidParameterError
from missionsim.models import (
    Environment,
    FlightState,
    MissionPlan,
    OutcomeSummary,
    VehicleProfile,
    WindDirection,
)
from missionsim.power import mission_power
from missionsim.unit import Hour, Kilometer, Meter, Minute, Second, WattHour


class TestVehicleProfile(unittest.TestCase):
    """Test VehicleProfile class."""

    def test_defaults(self):
        """Test the default training drone."""
        vehicle = VehicleProfile()
        self.assertEqual(vehicle.mass_kg, 2.4)
        self.assertEqual(vehicle.capacity_wh, 160.0)
        self.assertEqual(vehicle.base_power_w, 120.0)

    def test_immutable(self):
        """Test a profile cannot be changed after creation."""
        vehicle = VehicleProfile()
        with self.assertRaises(dataclasses.FrozenInstanceError):
            vehicle.capacity_wh = 10

    def test_invalid_values(self):
        """Test non-finite and non-positive values are rejected."""
        with self.assertRaises(InvalidParameterError):
            VehicleProfile(mass_kg=float("nan"))
        with self.assertRaises(InvalidParameterError):
            VehicleProfile(base_power_w=0)
        with self.assertRaises(DegenerateConfigurationError):
            VehicleProfile(capacity_wh=0)


class TestEnvironment(unittest.TestCase):
    """Test Environment class."""

    def test_direction_parsing(self):
        """Test wind directions given as strings."""
        self.assertIs(Environment(wind_direction="Tailwind").wind_direction, WindDirection.TAILWIND)
        self.assertIs(Environment(wind_direction=WindDirection.CROSSWIND).wind_direction, WindDirection.CROSSWIND)
        self.assertIsNone(Environment(wind_direction="sideways").wind_direction)

    def test_invalid_values(self):
        with self.assertRaises(InvalidParameterError):
            Environment(wind_speed=-1)
        with self.assertRaises(InvalidParameterError):
            Environment(temperature_c=float("inf"))


class TestMissionPlan(unittest.TestCase):
    """Test MissionPlan class."""

    def test_route_in_meters(self):
        self.assertEqual(MissionPlan(route_km=5).route_m, 5000.0)

    def test_battery_clamps(self):
        """Test starting charge and health are clamped when used."""
        mission = MissionPlan(route_km=1, initial_battery_percent=5, battery_health=0.3)
        self.assertEqual(mission.initial_battery_percent, 5.0)
        self.assertEqual(mission.start_battery_percent, 10.0)
        self.assertEqual(mission.effective_health, 0.5)
        self.assertEqual(MissionPlan(route_km=1, initial_battery_percent=120).start_battery_percent, 100.0)

    def test_invalid_values(self):
        """Test non-finite and out-of-domain fields fail fast."""
        with self.assertRaises(InvalidParameterError):
            MissionPlan(route_km=float("nan"))
        with self.assertRaises(InvalidParameterError):
            MissionPlan(route_km=0)
        with self.assertRaises(InvalidParameterError):
            MissionPlan(route_km=1, speed_mps=-3)
        with self.assertRaises(InvalidParameterError):
            MissionPlan(route_km=1, speed_mps=float("inf"))
        with self.assertRaises(InvalidParameterError):
            MissionPlan(route_km=1, payload_kg="heavy")


class TestNeutralDefaults(unittest.TestCase):
    """Test the bare constructors add no power penalty."""

    def test_bare_inputs_draw_base_power(self):
        breakdown = mission_power(VehicleProfile(), Environment(), MissionPlan(route_km=1))
        self.assertEqual(breakdown.wind, 0.0)
        self.assertEqual(breakdown.temperature, 0.0)
        self.assertEqual(breakdown.altitude, 0.0)
        self.assertEqual(breakdown.payload, 0.0)
        self.assertEqual(breakdown.aero, 0.0)
        self.assertEqual(breakdown.total, 120.0)

    def test_bare_mission_has_full_healthy_pack(self):
        mission = MissionPlan(route_km=1)
        self.assertEqual(mission.start_battery_percent, 100.0)
        self.assertEqual(mission.effective_health, 1.0)


class TestOutcomeSummary(unittest.TestCase):
    """Test OutcomeSummary and FlightState."""

    def test_get_summary(self):
        summary = OutcomeSummary(
            total_time_s=600.0,
            completed=True,
            battery_left_percent=37.5,
            distance_km_covered=5.0,
        )
        data = summary.get_summary()
        self.assertEqual(data["total_time_s"], 600.0)
        self.assertTrue(data["completed"])
        self.assertEqual(data["battery_left_percent"], 37.5)
        self.assertEqual(summary.total_time_min, 10.0)

    def test_metadata_not_compared(self):
        a = OutcomeSummary(1.0, False, 0.0, 0.0, metadata={"time_basis": "ticks"})
        b = OutcomeSummary(1.0, False, 0.0, 0.0, metadata={"time_basis": "distance"})
        self.assertEqual(a, b)

    def test_metadata_is_read_only(self):
        """Test a finished outcome cannot be edited through its metadata."""
        source = {"cap_reached": True}
        summary = OutcomeSummary(10800.0, False, 64.0, 0.0, metadata=source)
        with self.assertRaises(TypeError):
            summary.metadata["cap_reached"] = False
        source["cap_reached"] = False
        self.assertTrue(summary.metadata["cap_reached"])
        self.assertEqual(dict(OutcomeSummary(1.0, True, 50.0, 1.0).metadata), {})

    def test_flight_state_distance_km(self):
        self.assertEqual(FlightState(distance_m=2500.0).distance_km, 2.5)


class TestUnits(unittest.TestCase):
    """Test the unit conversions used by the models."""

    def test_conversions(self):
        self.assertEqual(float(Kilometer(5)), 5000.0)
        self.assertEqual(Second(90).to(Minute), 1.5)
        self.assertEqual(float(Hour(3)), 10800.0)
        self.assertEqual(WattHour(160).to(WattHour), 160.0)
        self.assertEqual(Meter(1500).as_unit(Kilometer).to(Kilometer), 1.5)

    def test_family_mismatch(self):
        with self.assertRaises(TypeError):
            Meter(1) + Second(1)
        with self.assertRaises(TypeError):
            Kilometer(1).to(Minute)


if __name__ == '__main__':
    unittest.main()
