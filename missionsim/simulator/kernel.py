"""Per-second transition shared by the batch and live simulation paths.

Both execution modes advance a ``FlightState`` through ``advance`` only, so
given identical inputs they produce bit-identical per-step numbers.
"""

from __future__ import annotations

from missionsim import config
from missionsim.battery import percent_drop_per_second
from missionsim.models import (
    Environment,
    FlightState,
    MissionPlan,
    OutcomeSummary,
    StepResult,
    VehicleProfile,
)
from missionsim.power import mission_power

DT = float(config.TIME_STEP)


def initial_state(mission: MissionPlan) -> FlightState:
    """Fresh progress for a run of ``mission``, starting from the clamped charge."""
    return FlightState(
        distance_m=0.0,
        battery_percent=mission.start_battery_percent,
        elapsed_s=0.0,
    )


def advance(
    vehicle: VehicleProfile,
    environment: Environment,
    mission: MissionPlan,
    state: FlightState,
) -> tuple[FlightState, StepResult]:
    """Advance ``state`` by one simulated second.

    Returns:
        tuple[FlightState, StepResult]: The next state and the power/charge
        figures of the step that produced it.
    """
    power = mission_power(vehicle, environment, mission).total
    drop = percent_drop_per_second(power, vehicle.capacity_wh, mission.effective_health)
    next_state = FlightState(
        distance_m=state.distance_m + mission.speed_mps * DT,
        battery_percent=max(state.battery_percent - drop, 0.0),
        elapsed_s=state.elapsed_s + DT,
    )
    return next_state, StepResult(power_w=power, percent_drop=drop)


def summarize(mission: MissionPlan, state: FlightState, total_time_s: float, **metadata) -> OutcomeSummary:
    """Build the outcome of a finished run from its last state."""
    return OutcomeSummary(
        total_time_s=total_time_s,
        completed=state.distance_m >= mission.route_m and state.battery_percent > 0,
        battery_left_percent=max(state.battery_percent, 0.0),
        distance_km_covered=state.distance_km,
        metadata=metadata,
    )
