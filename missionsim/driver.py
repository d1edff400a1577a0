"""Wall-clock driver for live runs.

Calls ``LiveSession.tick`` once per interval and mirrors progress on two
Rich progress bars (battery and distance) above a "Current State" panel,
the same way the simulator reports queue progress next to its state table.
Ticks are issued from a single loop, so they never overlap. Setting the
interval to zero runs as fast as possible.
"""

from __future__ import annotations

import logging
import time

from rich.console import Console, Group
from rich.live import Live
from rich.panel import Panel
from rich.progress import BarColumn, Progress, TaskProgressColumn, TextColumn, TimeElapsedColumn

from missionsim import config
from missionsim.models import OutcomeSummary
from missionsim.report import CONSOLE, telemetry_table
from missionsim.simulator import LiveSession
from missionsim.unit import Time

logger = logging.getLogger(__name__)

MAX_LIVE_TICKS = int(float(config.SIMULATION_CAP))


def _live_view(progress: Progress, session: LiveSession) -> Group:
    panel = Panel(telemetry_table(session.mission, session.state), title="Current State", padding=(1, 2))
    return Group(progress, panel)


def run_live(
    session: LiveSession,
    interval: Time = config.LIVE_TICK_INTERVAL,
    console: Console = CONSOLE,
    max_ticks: int = MAX_LIVE_TICKS,
) -> OutcomeSummary:
    """Drive ``session`` until it finishes, is paused, or ``max_ticks`` is hit.

    Args:
        session: Live session to advance. It is started if not running.
        interval: Wall-clock delay between ticks.
        console: Rich console used for the progress display.
        max_ticks: Upper bound on ticks, guarding against a zero-speed run.

    Returns:
        OutcomeSummary: The session's summary when the loop stops. Its
        metadata has ``cap_reached`` set when ``max_ticks`` ended the run.
    """
    delay = float(interval)
    mission = session.mission
    session.start()
    progress = Progress(
        TextColumn("[progress.description]{task.description}"),
        BarColumn(bar_width=40),
        TaskProgressColumn(),
        TimeElapsedColumn(),
        console=console,
    )
    battery_bar = progress.add_task(
        "[green]Battery ", total=100.0, completed=session.state.battery_percent
    )
    distance_bar = progress.add_task("[cyan]Distance", total=mission.route_m, completed=0.0)

    with Live(_live_view(progress, session), console=console, auto_refresh=True) as live:
        while session.running and session.ticks < max_ticks:
            session.tick()
            progress.update(battery_bar, completed=session.state.battery_percent)
            progress.update(distance_bar, completed=min(session.state.distance_m, mission.route_m))
            live.update(_live_view(progress, session))
            if session.running and delay > 0:
                time.sleep(delay)

    cap_reached = not session.done and session.ticks >= max_ticks
    if cap_reached:
        session.pause()
        logger.warning("Live run stopped after %d ticks without finishing", session.ticks)
    return session.summary(cap_reached=cap_reached)
