"""Incremental (live) simulation.

The live path exposes the same one-second transition as the batch
integrator, but one tick at a time so an external driver can observe and
display intermediate progress. This module owns no timers: the driver
decides the cadence and simply stops calling ``tick`` to halt a run.

Elapsed time is available under two definitions:

    ``tick_summary``      seconds accumulated tick by tick (same as batch)
    ``distance_summary``  distance / max(speed, 0.1), the historical live figure

With a constant cruise speed of at least 0.1 m/s the two agree up to float
rounding. Below that the distance-based figure stops tracking the real
number of ticks.
"""

from __future__ import annotations

import logging
import threading
from typing import Optional

from missionsim import config
from missionsim.models import Environment, FlightState, MissionPlan, OutcomeSummary, VehicleProfile
from missionsim.simulator.kernel import advance, initial_state, summarize

logger = logging.getLogger(__name__)


def is_terminal(mission: MissionPlan, state: FlightState) -> bool:
    """True once the route is flown or the battery is empty."""
    return state.distance_m >= mission.route_m or state.battery_percent <= 0


def tick(
    vehicle: VehicleProfile,
    environment: Environment,
    mission: MissionPlan,
    state: FlightState,
) -> tuple[FlightState, bool]:
    """Advance a live run by one simulated second.

    Args:
        vehicle: Vehicle characteristics.
        environment: Wind and temperature for the run.
        mission: Route and flight parameters.
        state: Current progress, e.g. from ``initial_state``.

    Returns:
        tuple[FlightState, bool]: The next state and whether the run is over.
        A state that is already terminal is returned unchanged.
    """
    if is_terminal(mission, state):
        return state, True
    next_state, _ = advance(vehicle, environment, mission, state)
    return next_state, is_terminal(mission, next_state)


def tick_summary(mission: MissionPlan, state: FlightState, **metadata) -> OutcomeSummary:
    """Outcome using the tick-accumulated elapsed time."""
    return summarize(mission, state, state.elapsed_s, time_basis="ticks", **metadata)


def distance_summary(mission: MissionPlan, state: FlightState, **metadata) -> OutcomeSummary:
    """Outcome using elapsed time derived from distance and cruise speed."""
    total_time_s = state.distance_m / max(mission.speed_mps, config.MIN_LIVE_SPEED)
    return summarize(mission, state, total_time_s, time_basis="distance", **metadata)


class LiveSession:
    """Caller-owned state of one live run.

    A session pairs the immutable inputs with the current ``FlightState``
    and a ``running`` flag that a driver can use for start/pause controls.
    Any number of sessions can coexist. Ticks on a single session must not
    overlap; a tick that arrives while another is in flight raises
    ``RuntimeError`` instead of interleaving.

    Attributes:
        vehicle (VehicleProfile): Vehicle characteristics.
        environment (Environment): Weather for the run.
        mission (MissionPlan): Route and flight parameters.
        state (FlightState): Progress after the last tick.
        running (bool): Whether the driver should keep ticking.
    """

    def __init__(self, vehicle: VehicleProfile, environment: Environment, mission: MissionPlan):
        self.vehicle = vehicle
        self.environment = environment
        self.mission = mission
        self.state = initial_state(mission)
        self.running = False
        self._lock = threading.Lock()

    @property
    def done(self) -> bool:
        return is_terminal(self.mission, self.state)

    @property
    def ticks(self) -> int:
        return int(self.state.elapsed_s)

    def start(self) -> None:
        if not self.done:
            self.running = True

    def pause(self) -> None:
        self.running = False

    def reset(self, environment: Optional[Environment] = None, mission: Optional[MissionPlan] = None) -> None:
        """Stop the run and start over, optionally with new inputs."""
        with self._lock:
            self.running = False
            if environment is not None:
                self.environment = environment
            if mission is not None:
                self.mission = mission
            self.state = initial_state(self.mission)

    def tick(self) -> bool:
        """Advance by one simulated second and return whether the run is over.

        Raises:
            RuntimeError: If another tick on this session is still in progress.
        """
        if not self._lock.acquire(blocking=False):
            msg = "A tick is already in progress for this session"
            raise RuntimeError(msg)
        try:
            self.state, terminal = tick(self.vehicle, self.environment, self.mission, self.state)
        finally:
            self._lock.release()
        if terminal:
            self.running = False
            logger.debug("Live run finished after %d ticks", self.ticks)
        return terminal

    def summary(self, **metadata) -> OutcomeSummary:
        """Outcome of the run so far, with distance-derived elapsed time.

        Extra keyword arguments are stored in the summary's ``metadata``.
        """
        return distance_summary(self.mission, self.state, **metadata)
