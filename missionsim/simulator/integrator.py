"""Batch single-run simulation.

``simulate`` loops the one-second kernel until the route is flown, the
battery is empty, or the three-hour safety cap is reached. Hitting the cap is
a legitimate "not feasible in reasonable time" outcome and is reported as an
incomplete ``OutcomeSummary`` rather than raised.

Example:
    >>> vehicle = VehicleProfile(capacity_wh=160, base_power_w=120)
    >>> mission = MissionPlan(route_km=5, speed_mps=10)
    >>> outcome = simulate(vehicle, Environment(), mission)
    >>> outcome.completed, outcome.total_time_s
    (True, 500.0)
"""

from __future__ import annotations

import logging

import numpy as np
import pandas as pd

from missionsim import config
from missionsim.models import Environment, FlightState, MissionPlan, OutcomeSummary, VehicleProfile
from missionsim.simulator.kernel import advance, initial_state, summarize

logger = logging.getLogger(__name__)

SIMULATION_CAP_S = float(config.SIMULATION_CAP)

TRACE_COLUMNS = ["time_s", "distance_km", "battery_percent", "power_w"]


def _running(mission: MissionPlan, state: FlightState) -> bool:
    return (
        state.distance_m < mission.route_m
        and state.battery_percent > 0
        and state.elapsed_s < SIMULATION_CAP_S
    )


def simulate(vehicle: VehicleProfile, environment: Environment, mission: MissionPlan) -> OutcomeSummary:
    """Run a whole mission in simulated time and summarize the outcome.

    Args:
        vehicle: Vehicle characteristics.
        environment: Wind and temperature for the run.
        mission: Route and flight parameters.

    Returns:
        OutcomeSummary: Completion flag, elapsed seconds, battery left and
        distance covered.

    Raises:
        InvalidParameterError: If an input is non-finite.
        DegenerateConfigurationError: If usable capacity is not positive.
    """
    logger.debug("Simulating %.2f km at %.1f m/s", mission.route_km, mission.speed_mps)
    state = initial_state(mission)
    while _running(mission, state):
        state, _ = advance(vehicle, environment, mission, state)

    cap_reached = _cap_reached(mission, state)
    if cap_reached:
        logger.warning(
            "Simulation stopped at the %.0f s safety cap after %.2f km",
            SIMULATION_CAP_S,
            state.distance_km,
        )
    outcome = summarize(mission, state, state.elapsed_s, time_basis="ticks", cap_reached=cap_reached)
    logger.debug("Simulation finished: %r", outcome)
    return outcome


def simulate_trace(vehicle: VehicleProfile, environment: Environment, mission: MissionPlan) -> pd.DataFrame:
    """Run ``simulate``'s loop and record every simulated second.

    Returns:
        pandas.DataFrame: One row per second with ``time_s``, ``distance_km``,
        ``battery_percent`` and ``power_w``. Row 0 is the starting state and
        has no power figure (NaN).
    """
    state = initial_state(mission)
    rows = [(state.elapsed_s, state.distance_km, state.battery_percent, np.nan)]
    while _running(mission, state):
        state, step = advance(vehicle, environment, mission, state)
        rows.append((state.elapsed_s, state.distance_km, state.battery_percent, step.power_w))
    return pd.DataFrame(rows, columns=TRACE_COLUMNS)


def _cap_reached(mission: MissionPlan, state: FlightState) -> bool:
    return (
        state.elapsed_s >= SIMULATION_CAP_S
        and state.distance_m < mission.route_m
        and state.battery_percent > 0
    )
