"""Small numeric guards shared by the models and the simulation kernel."""

from math import isfinite

from missionsim.exceptions import InvalidParameterError

Number = int | float


def ensure_finite(name: str, value: Number) -> float:
    """Return ``value`` as a float, rejecting NaN, infinities and non-numbers.

    Raises:
        InvalidParameterError: If ``value`` is not a finite real number.
    """
    if isinstance(value, bool) or not isinstance(value, Number):
        try:
            value = float(value)
        except (TypeError, ValueError):
            msg = f"{name} must be a number, got {value!r}"
            raise InvalidParameterError(msg) from None
    if not isfinite(value):
        msg = f"{name} must be finite, got {value!r}"
        raise InvalidParameterError(msg)
    return float(value)


def clamp(value: float, low: float, high: float) -> float:
    """Clamp a value to the closed range ``[low, high]``."""
    return max(low, min(high, value))
