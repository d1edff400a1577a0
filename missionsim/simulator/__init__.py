"""Simulation engine: batch integrator and live stepper.

Both paths share the one-second transition in ``kernel`` and differ only in
who drives the loop:

    • ``simulate`` loops internally and returns an ``OutcomeSummary``
    • ``tick`` advances one step per call for an external driver
    • ``LiveSession`` wraps ``tick`` with caller-owned run state
"""

from .integrator import simulate, simulate_trace
from .kernel import advance, initial_state
from .stepper import LiveSession, distance_summary, is_terminal, tick, tick_summary

__all__ = [
    "simulate",
    "simulate_trace",
    "advance",
    "initial_state",
    "tick",
    "is_terminal",
    "tick_summary",
    "distance_summary",
    "LiveSession",
]
