"""Terminal rendering of outcomes and live telemetry with Rich."""

from __future__ import annotations

from rich.console import Console, Group
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from missionsim.advice import mission_tips, status_line
from missionsim.models import Environment, FlightState, MissionPlan, OutcomeSummary

CONSOLE = Console()


def _wind_label(environment: Environment) -> str:
    if environment.wind_direction is None:
        return "calm"
    return environment.wind_direction.value


def outcome_panel(summary: OutcomeSummary, mission: MissionPlan, environment: Environment) -> Panel:
    """Build the outcome card shown after a batch or live run.

    The card carries the status, time in minutes, battery left, distance
    covered, an echo of the wind/altitude/speed inputs and the advice tips.
    """
    style = "bold green" if summary.completed else "bold yellow"
    lines = [
        Text(status_line(summary), style=style),
        Text(
            f"Time: {summary.total_time_min:.0f} min • "
            f"Battery Left: {summary.battery_left_percent:.0f}% • "
            f"Distance: {summary.distance_km_covered:.1f} km"
        ),
        Text(
            f"Wind: {_wind_label(environment)} at {environment.wind_speed:.1f} m/s • "
            f"Altitude: {mission.altitude_m:.0f} m • "
            f"Speed: {mission.speed_mps:.1f} m/s"
        ),
        Text.assemble(("Tips: ", "italic"), " ".join(mission_tips(summary, mission, environment))),
    ]
    title = f"Outcome - {mission.location}" if mission.location else "Outcome"
    return Panel(Group(*lines), title=title, padding=(1, 2))


def telemetry_table(mission: MissionPlan, state: FlightState) -> Table:
    """Snapshot of a live run: battery, distance, speed and altitude."""
    t = Table.grid(padding=(0, 2))
    t.add_row("[b]Battery[/b]: ", f"{max(state.battery_percent, 0.0):.0f}%")
    t.add_row("[b]Distance[/b]: ", f"{state.distance_km:.1f} / {mission.route_km:.1f} km")
    t.add_row("[b]Speed[/b]: ", f"{mission.speed_mps:.1f} m/s")
    t.add_row("[b]Altitude[/b]: ", f"{mission.altitude_m:.0f} m")
    t.add_row("[b]Elapsed[/b]: ", f"{state.elapsed_s:.0f} s")
    return t


def print_outcome(
    summary: OutcomeSummary,
    mission: MissionPlan,
    environment: Environment,
    console: Console = CONSOLE,
) -> None:
    console.print(outcome_panel(summary, mission, environment))
