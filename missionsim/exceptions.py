"""Error taxonomy for the mission energy simulator.

Both errors derive from ``ValueError`` so callers that already guard input
parsing with ``except ValueError`` keep working.
"""


class SimulationError(ValueError):
    """Base exception for simulation input errors."""

    kind = "SimulationError"


class InvalidParameterError(SimulationError):
    """Raised when an input is non-finite or outside its allowed domain."""

    kind = "InvalidParameter"


class DegenerateConfigurationError(SimulationError):
    """Raised when battery capacity or health resolves to zero or below."""

    kind = "DegenerateConfiguration"
