"""Float-based physical units used by the mission energy model.

Values are stored internally in SI units (meters, seconds, watts, joules)
while keeping the unit they were created with for display. Operations are
only allowed between units of the same family, so a distance cannot be
added to a duration by accident.

Unit Families:
    - Distance: Meter (root), Kilometer
    - Time: Second (root), Minute, Hour
    - Power: Watt (root)
    - Energy: WattSecond (root), WattHour

Example:
    >>> route = Kilometer(5)
    >>> float(route)  # meters
    5000.0
    >>> Second(90).to(Minute)
    1.5
    >>> print(WattHour(160))
    160.0 Wh
"""

from __future__ import annotations

from typing import ClassVar

Number = int | float


class UnitFloat(float):
    """Base class for float units with automatic SI conversion.

    Subclasses set ``SCALE_TO_SI`` and ``SYMBOL``. The first ancestor marked
    with ``IS_FAMILY_ROOT = True`` becomes the ``ROOT`` of the family.

    Attributes:
        ROOT (ClassVar[type[UnitFloat]]): Root class defining the unit family.
        SCALE_TO_SI (ClassVar[float]): Conversion factor to SI units.
        SYMBOL (ClassVar[str]): Unit symbol for display purposes.
        IS_FAMILY_ROOT (ClassVar[bool]): Marks the base unit of a family.
    """

    ROOT: ClassVar[type[UnitFloat]]
    SCALE_TO_SI: ClassVar[float] = 1.0
    SYMBOL: ClassVar[str] = ""
    IS_FAMILY_ROOT: ClassVar[bool] = False

    def __init_subclass__(cls, **kwargs):
        super().__init_subclass__(**kwargs)
        if cls.__dict__.get("IS_FAMILY_ROOT", False):
            cls.ROOT = cls
            return
        for base in cls.mro()[1:]:
            if base.__dict__.get("IS_FAMILY_ROOT", False):
                cls.ROOT = base
                return
        cls.ROOT = cls

    def __new__(cls, value: Number):
        return float.__new__(cls, float(value) * cls.SCALE_TO_SI)

    @classmethod
    def from_si(cls, si_value: float) -> UnitFloat:
        """Create an instance from a value already expressed in SI units."""
        return float.__new__(cls, si_value)

    @classmethod
    def _check_same_root(cls, unit_type: type) -> None:
        if getattr(unit_type, "ROOT", None) is not cls.ROOT:
            msg = f"Incompatible units: {cls.__name__} and {unit_type.__name__}"
            raise TypeError(msg)

    def to(self, unit_type: type[UnitFloat]) -> float:
        """Return the value expressed in ``unit_type`` as a plain float.

        Raises:
            TypeError: If ``unit_type`` belongs to another family.
        """
        self._check_same_root(unit_type)
        return float(self) / unit_type.SCALE_TO_SI

    def as_unit(self, unit_type: type[UnitFloat]) -> UnitFloat:
        """Convert to another unit of the same family, keeping unit type information."""
        self._check_same_root(unit_type)
        return unit_type.from_si(float(self))

    def __add__(self, other: UnitFloat) -> UnitFloat:
        self._check_same_root(type(other))
        return type(self).from_si(float(self) + float(other))

    def __sub__(self, other: UnitFloat) -> UnitFloat:
        self._check_same_root(type(other))
        return type(self).from_si(float(self) - float(other))

    def __mul__(self, k: Number) -> UnitFloat:
        if isinstance(k, UnitFloat) or not isinstance(k, Number):
            raise TypeError
        return type(self).from_si(float(self) * float(k))

    __rmul__ = __mul__

    def __truediv__(self, k: Number) -> UnitFloat:
        if isinstance(k, UnitFloat) or not isinstance(k, Number):
            raise TypeError
        return type(self).from_si(float(self) / float(k))

    def __lt__(self, other: UnitFloat) -> bool:
        self._check_same_root(type(other))
        return float(self) < float(other)

    def __le__(self, other: UnitFloat) -> bool:
        self._check_same_root(type(other))
        return float(self) <= float(other)

    def __gt__(self, other: UnitFloat) -> bool:
        self._check_same_root(type(other))
        return float(self) > float(other)

    def __ge__(self, other: UnitFloat) -> bool:
        self._check_same_root(type(other))
        return float(self) >= float(other)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, UnitFloat):
            return NotImplemented
        self._check_same_root(type(other))
        return float(self) == float(other)

    def __ne__(self, other: object) -> bool:
        result = self.__eq__(other)
        if result is NotImplemented:
            return result
        return not result

    __hash__ = float.__hash__

    def __str__(self) -> str:
        return f"{self.to(type(self))} {type(self).SYMBOL}".strip()

    def __repr__(self) -> str:
        return f"{self.to(type(self)):g} {type(self).SYMBOL} (= {float(self):g} SI)"


class Meter(UnitFloat):
    """Distance in meters (SI base unit for length)."""

    IS_FAMILY_ROOT = True
    SCALE_TO_SI = 1.0
    SYMBOL = "m"


class Kilometer(Meter):
    """Distance in kilometers, used for route lengths."""

    SCALE_TO_SI = 1000.0
    SYMBOL = "km"


class Second(UnitFloat):
    """Duration in seconds (SI base unit for time)."""

    IS_FAMILY_ROOT = True
    SCALE_TO_SI = 1.0
    SYMBOL = "s"


class Minute(Second):
    SCALE_TO_SI = 60.0
    SYMBOL = "min"


class Hour(Second):
    SCALE_TO_SI = 3600.0
    SYMBOL = "h"


class Watt(UnitFloat):
    """Power in watts."""

    IS_FAMILY_ROOT = True
    SCALE_TO_SI = 1.0
    SYMBOL = "W"


class WattSecond(UnitFloat):
    """Energy in watt-seconds (joules)."""

    IS_FAMILY_ROOT = True
    SCALE_TO_SI = 1.0
    SYMBOL = "Ws"


class WattHour(WattSecond):
    """Energy in watt-hours, the unit battery capacities are quoted in."""

    SCALE_TO_SI = 3600.0
    SYMBOL = "Wh"


Length = Meter | Kilometer
Time = Second | Minute | Hour
Energy = WattSecond | WattHour

__all__ = [
    "UnitFloat",
    "Meter",
    "Kilometer",
    "Length",
    "Second",
    "Minute",
    "Hour",
    "Time",
    "Watt",
    "WattSecond",
    "WattHour",
    "Energy",
]
