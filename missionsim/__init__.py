"""Educational energy simulator for battery-powered drone missions.

MissionSim estimates whether a drone can fly a single-leg route before its
battery runs out, given simplified aerodynamic, payload, wind, altitude and
temperature effects. It is a teaching tool for exploring how flight
parameters trade off against an energy budget, not an accurate flight model.

Framework Components:
    Data Model (missionsim.models):
        • VehicleProfile, Environment, MissionPlan: validated, immutable inputs
        • FlightState: progress of an active run
        • OutcomeSummary: terminal result (completion, time, battery, distance)

    Energy Model:
        • missionsim.power: polynomial/linear power draw with a 50 W floor
        • missionsim.battery: percent-per-second depletion with health clamping

    Simulation Engine (missionsim.simulator):
        • simulate: batch run advanced in one-second steps with a 3 h safety cap
        • tick / LiveSession: the same step, one call at a time, for live views

    Around the Core:
        • missionsim.analysis: sweeps, range estimate, JSON export and plots
        • missionsim.report / missionsim.advice: Rich rendering and tips
        • missionsim.cli: ``python -m missionsim {simulate,live,sweep}``

Example:
    >>> from missionsim import Environment, MissionPlan, VehicleProfile, simulate
    >>> vehicle = VehicleProfile(mass_kg=2.4, capacity_wh=160, base_power_w=120)
    >>> mission = MissionPlan(route_km=5, speed_mps=10)
    >>> outcome = simulate(vehicle, Environment(), mission)
    >>> outcome.completed
    True
"""

from missionsim.battery import percent_drop_per_second
from missionsim.exceptions import DegenerateConfigurationError, InvalidParameterError, SimulationError
from missionsim.models import (
    Environment,
    FlightState,
    MissionPlan,
    OutcomeSummary,
    StepResult,
    VehicleProfile,
    WindDirection,
)
from missionsim.power import estimate_power
from missionsim.simulator import LiveSession, simulate, tick

__version__ = "0.1.0"

__all__ = [
    "VehicleProfile",
    "Environment",
    "MissionPlan",
    "WindDirection",
    "FlightState",
    "StepResult",
    "OutcomeSummary",
    "estimate_power",
    "percent_drop_per_second",
    "simulate",
    "tick",
    "LiveSession",
    "SimulationError",
    "InvalidParameterError",
    "DegenerateConfigurationError",
]
