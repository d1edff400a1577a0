"""Instantaneous power draw model.

Power is the vehicle's baseline draw plus a handful of penalty terms:

    aero         0.6 * speed^3          (speed floored at 0)
    payload      10 * payload
    wind         +6 headwind, +2 crosswind, -3 tailwind (per m/s of wind)
    altitude     0.02 * altitude        (only above 0 m)
    temperature  1.5 * (10 - T)         (only below 10 degC)

The total is floored at 50 W. The model is deliberately crude; it exists to
show how flight parameters trade off against the energy budget.
"""

from __future__ import annotations

from dataclasses import dataclass

from missionsim import config
from missionsim.checks import ensure_finite
from missionsim.models import Environment, MissionPlan, VehicleProfile, WindDirection

_WIND_COEFFICIENTS = {
    WindDirection.HEADWIND: config.HEADWIND_COEFFICIENT,
    WindDirection.CROSSWIND: config.CROSSWIND_COEFFICIENT,
    WindDirection.TAILWIND: config.TAILWIND_COEFFICIENT,
}


@dataclass(frozen=True)
class PowerBreakdown:
    """Individual contributions to the power draw, in watts."""

    base: float
    aero: float
    payload: float
    wind: float
    altitude: float
    temperature: float
    total: float


def power_breakdown(
    base_power_w: float,
    speed: float,
    altitude: float,
    payload: float,
    wind_speed: float,
    wind_direction: WindDirection | str | None,
    temperature: float,
) -> PowerBreakdown:
    """Compute every term of the power model.

    Args:
        base_power_w: Baseline (hover-equivalent) power of the vehicle in W.
        speed: Airspeed in m/s. Negative values are treated as 0.
        altitude: Altitude in m.
        payload: Payload mass in kg. Negative values are treated as 0.
        wind_speed: Wind speed in m/s.
        wind_direction: Headwind, tailwind or crosswind. Anything else adds
            no wind term.
        temperature: Ambient temperature in degC.

    Returns:
        PowerBreakdown: Per-term contributions and the floored total.

    Raises:
        InvalidParameterError: If any numeric input is NaN or infinite.
    """
    base = ensure_finite("base_power_w", base_power_w)
    speed = max(ensure_finite("speed", speed), 0.0)
    altitude = ensure_finite("altitude", altitude)
    payload = ensure_finite("payload", payload)
    wind_speed = ensure_finite("wind_speed", wind_speed)
    temperature = ensure_finite("temperature", temperature)

    aero = config.AERO_COEFFICIENT * speed**3
    payload_term = config.PAYLOAD_COEFFICIENT * max(payload, 0.0)
    direction = WindDirection.parse(wind_direction)
    wind = _WIND_COEFFICIENTS.get(direction, 0.0) * wind_speed
    altitude_term = config.ALTITUDE_COEFFICIENT * altitude if altitude > 0 else 0.0
    if temperature < config.COLD_THRESHOLD_C:
        temperature_term = config.COLD_COEFFICIENT * (config.COLD_THRESHOLD_C - temperature)
    else:
        temperature_term = 0.0

    total = base + aero + payload_term + wind + altitude_term + temperature_term
    return PowerBreakdown(
        base=base,
        aero=aero,
        payload=payload_term,
        wind=wind,
        altitude=altitude_term,
        temperature=temperature_term,
        total=max(total, float(config.POWER_FLOOR)),
    )


def estimate_power(
    base_power_w: float,
    speed: float,
    altitude: float,
    payload: float,
    wind_speed: float,
    wind_direction: WindDirection | str | None,
    temperature: float,
) -> float:
    """Estimate instantaneous power draw in watts (never below 50 W)."""
    return power_breakdown(
        base_power_w, speed, altitude, payload, wind_speed, wind_direction, temperature
    ).total


def mission_power(
    vehicle: VehicleProfile, environment: Environment, mission: MissionPlan
) -> PowerBreakdown:
    """Power breakdown for cruising the given mission in the given weather."""
    return power_breakdown(
        vehicle.base_power_w,
        mission.speed_mps,
        mission.altitude_m,
        mission.payload_kg,
        environment.wind_speed,
        environment.wind_direction,
        environment.temperature_c,
    )
