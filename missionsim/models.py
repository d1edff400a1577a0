"""Core data models for the mission energy simulator.

The three input structures (``VehicleProfile``, ``Environment`` and
``MissionPlan``) are immutable and validated on construction. Progress of an
active run is carried separately in ``FlightState`` so the inputs can be
shared read-only between any number of concurrent runs.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from types import MappingProxyType
from typing import Any, Dict, Mapping, Optional

from missionsim import config
from missionsim.checks import clamp, ensure_finite
from missionsim.exceptions import DegenerateConfigurationError, InvalidParameterError
from missionsim.unit import Kilometer, Meter, Minute, Second, Watt, WattHour


class WindDirection(Enum):
    """Wind direction relative to the direction of travel."""

    HEADWIND = "headwind"
    TAILWIND = "tailwind"
    CROSSWIND = "crosswind"

    @classmethod
    def parse(cls, value: "WindDirection | str | None") -> Optional["WindDirection"]:
        """Return the matching member, or None for unknown values.

        Unknown directions are not an error: the power model simply applies
        no wind term for them.
        """
        if value is None or isinstance(value, cls):
            return value
        try:
            return cls(str(value).strip().lower())
        except ValueError:
            return None


def _require_positive(name: str, value: float) -> None:
    if value <= 0:
        msg = f"{name} must be greater than zero, got {value}"
        raise InvalidParameterError(msg)


def _require_non_negative(name: str, value: float) -> None:
    if value < 0:
        msg = f"{name} must not be negative, got {value}"
        raise InvalidParameterError(msg)


@dataclass(frozen=True)
class VehicleProfile:
    """Immutable description of the vehicle.

    Attributes:
        mass_kg: Vehicle mass in kilograms.
        capacity_wh: Nominal usable energy capacity in watt-hours.
        base_power_w: Hover-equivalent baseline power draw in watts.
    """

    mass_kg: float = config.DEFAULT_MASS_KG
    capacity_wh: float = config.DEFAULT_CAPACITY.to(WattHour)
    base_power_w: float = config.DEFAULT_BASE_POWER.to(Watt)

    def __post_init__(self):
        for name in ("mass_kg", "capacity_wh", "base_power_w"):
            object.__setattr__(self, name, ensure_finite(name, getattr(self, name)))
        _require_positive("mass_kg", self.mass_kg)
        _require_positive("base_power_w", self.base_power_w)
        if self.capacity_wh <= 0:
            msg = f"capacity_wh must be greater than zero, got {self.capacity_wh}"
            raise DegenerateConfigurationError(msg)


@dataclass(frozen=True)
class Environment:
    """Weather conditions for one simulation run.

    ``wind_direction`` accepts a ``WindDirection`` or its string value. Any
    other string is stored as None, which means no wind effect.

    The bare defaults describe still, mild air that adds no power penalty.
    The CLI starts from the form defaults in ``config`` instead
    (``DEFAULT_WIND_SPEED``, ``DEFAULT_TEMPERATURE_C``).
    """

    wind_speed: float = 0.0
    wind_direction: Optional[WindDirection] = WindDirection.HEADWIND
    temperature_c: float = 20.0

    def __post_init__(self):
        object.__setattr__(self, "wind_speed", ensure_finite("wind_speed", self.wind_speed))
        object.__setattr__(
            self, "temperature_c", ensure_finite("temperature_c", self.temperature_c)
        )
        object.__setattr__(self, "wind_direction", WindDirection.parse(self.wind_direction))
        _require_non_negative("wind_speed", self.wind_speed)


@dataclass(frozen=True)
class MissionPlan:
    """Immutable single-leg mission description.

    Battery percent and health are accepted as given and clamped when used
    (see ``start_battery_percent`` and ``effective_health``). Apart from the
    route, the bare defaults add no power penalty and assume a full, healthy
    pack; the CLI fills in the form defaults from ``config``.

    Attributes:
        route_km: Route length in kilometers.
        altitude_m: Cruise altitude in meters.
        speed_mps: Cruise airspeed in meters per second.
        payload_kg: Payload mass in kilograms.
        initial_battery_percent: Starting charge, clamped to [10, 100].
        battery_health: Capacity degradation factor, clamped to [0.5, 1.0].
        location: Free-text label shown in reports.
    """

    route_km: float
    altitude_m: float = 0.0
    speed_mps: float = 0.0
    payload_kg: float = 0.0
    initial_battery_percent: float = 100.0
    battery_health: float = 1.0
    location: str = ""

    def __post_init__(self):
        for name in (
            "route_km",
            "altitude_m",
            "speed_mps",
            "payload_kg",
            "initial_battery_percent",
            "battery_health",
        ):
            object.__setattr__(self, name, ensure_finite(name, getattr(self, name)))
        _require_positive("route_km", self.route_km)
        _require_non_negative("altitude_m", self.altitude_m)
        _require_non_negative("speed_mps", self.speed_mps)
        _require_non_negative("payload_kg", self.payload_kg)

    @property
    def route_m(self) -> float:
        """Route length in meters."""
        return float(Kilometer(self.route_km))

    @property
    def start_battery_percent(self) -> float:
        return clamp(self.initial_battery_percent, *config.BATTERY_PERCENT_RANGE)

    @property
    def effective_health(self) -> float:
        return clamp(self.battery_health, *config.BATTERY_HEALTH_RANGE)


@dataclass(frozen=True)
class FlightState:
    """Progress of an active run after a whole number of simulated seconds."""

    distance_m: float = 0.0
    battery_percent: float = 100.0
    elapsed_s: float = 0.0

    @property
    def distance_km(self) -> float:
        return Meter.from_si(self.distance_m).to(Kilometer)


@dataclass(frozen=True)
class StepResult:
    """Power draw and charge drop for a single one-second step."""

    power_w: float
    percent_drop: float


@dataclass(frozen=True)
class OutcomeSummary:
    """Terminal result of a simulation run.

    ``metadata`` is a read-only view of how the run ended, e.g. ``time_basis``
    and ``cap_reached``.
    """

    total_time_s: float
    completed: bool
    battery_left_percent: float
    distance_km_covered: float
    metadata: Mapping[str, Any] = field(default_factory=dict, compare=False)

    def __post_init__(self):
        object.__setattr__(self, "metadata", MappingProxyType(dict(self.metadata)))

    @property
    def total_time_min(self) -> float:
        return Second(self.total_time_s).to(Minute)

    def get_summary(self) -> Dict[str, Any]:
        """Get the outcome as a plain dictionary."""
        return {
            "total_time_s": self.total_time_s,
            "completed": self.completed,
            "battery_left_percent": self.battery_left_percent,
            "distance_km_covered": self.distance_km_covered,
        }

    def __repr__(self) -> str:
        return (f"OutcomeSummary(completed={self.completed}, "
                f"time={self.total_time_s:.0f}s, "
                f"battery={self.battery_left_percent:.1f}%, "
                f"distance={self.distance_km_covered:.2f}km)")
