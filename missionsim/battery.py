"""Battery depletion model.

Converts a power draw into the fraction of charge (in percent) consumed per
simulated second. Battery health scales the nominal capacity down to the
energy that is actually usable; it is always clamped to [0.5, 1.0] here,
whatever the caller passes in.

Example:
    >>> round(percent_drop_per_second(720.0, 160.0, 1.0), 6)
    0.125
"""

from missionsim import config
from missionsim.checks import clamp, ensure_finite
from missionsim.exceptions import DegenerateConfigurationError


def clamp_health(health: float) -> float:
    """Clamp a battery health factor to [0.5, 1.0]."""
    return clamp(ensure_finite("battery_health", health), *config.BATTERY_HEALTH_RANGE)


def clamp_battery_percent(percent: float) -> float:
    """Clamp a starting charge to [10, 100] percent."""
    return clamp(ensure_finite("battery_percent", percent), *config.BATTERY_PERCENT_RANGE)


def usable_capacity_wh(capacity_wh: float, health: float) -> float:
    """Nominal capacity scaled by the clamped health factor.

    Raises:
        InvalidParameterError: If an input is NaN or infinite.
        DegenerateConfigurationError: If the usable capacity is zero or negative.
    """
    capacity_wh = ensure_finite("capacity_wh", capacity_wh)
    usable = capacity_wh * clamp_health(health)
    if usable <= 0:
        msg = f"usable battery capacity must be positive, got {usable} Wh"
        raise DegenerateConfigurationError(msg)
    return usable


def percent_drop_per_second(power_w: float, capacity_wh: float, health: float) -> float:
    """Percent of charge consumed in one second at ``power_w``.

    Args:
        power_w: Power draw in watts.
        capacity_wh: Nominal battery capacity in watt-hours.
        health: Battery health factor, clamped to [0.5, 1.0].

    Returns:
        float: Charge drop in percent per second.
    """
    power_w = ensure_finite("power_w", power_w)
    usable = usable_capacity_wh(capacity_wh, health)
    wh_per_second = power_w / config.SECONDS_PER_HOUR
    return (wh_per_second / usable) * 100.0


def endurance_s(power_w: float, capacity_wh: float, health: float, start_percent: float = 100.0) -> float:
    """Seconds until the battery is empty at a constant ``power_w``.

    Returns ``inf`` when the power draw consumes no charge.
    """
    drop = percent_drop_per_second(power_w, capacity_wh, health)
    if drop <= 0:
        return float("inf")
    return clamp_battery_percent(start_percent) / drop
