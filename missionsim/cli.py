"""Command line entry point.

Usage:
  python -m missionsim simulate --route-km 5 --speed 10
  python -m missionsim live --interval 0.05
  python -m missionsim sweep --param speed_mps --start 2 --stop 25 --num 24 --plot sweep.png
"""

from __future__ import annotations

import argparse
import logging
from typing import Optional, Sequence

from rich.logging import RichHandler

from missionsim import config
from missionsim.analysis import SWEEP_PARAMS, MissionAnalyzer
from missionsim.driver import run_live
from missionsim.exceptions import SimulationError
from missionsim.models import Environment, MissionPlan, VehicleProfile, WindDirection
from missionsim.report import CONSOLE, print_outcome
from missionsim.simulator import LiveSession, simulate
from missionsim.unit import Kilometer, Meter, Second, Watt, WattHour

logger = logging.getLogger(__name__)

EXIT_OK = 0
EXIT_INVALID_INPUT = 2


def _add_mission_arguments(parser: argparse.ArgumentParser) -> None:
    vehicle = parser.add_argument_group("vehicle")
    vehicle.add_argument("--mass-kg", type=float, default=config.DEFAULT_MASS_KG)
    vehicle.add_argument("--capacity-wh", type=float, default=config.DEFAULT_CAPACITY.to(WattHour))
    vehicle.add_argument("--base-power-w", type=float, default=config.DEFAULT_BASE_POWER.to(Watt))

    environment = parser.add_argument_group("environment")
    environment.add_argument("--wind-speed", type=float, default=config.DEFAULT_WIND_SPEED)
    environment.add_argument(
        "--wind-dir",
        choices=[d.value for d in WindDirection],
        default=config.DEFAULT_WIND_DIRECTION,
    )
    environment.add_argument("--temp-c", type=float, default=config.DEFAULT_TEMPERATURE_C)

    mission = parser.add_argument_group("mission")
    mission.add_argument("--location", default=config.DEFAULT_LOCATION)
    mission.add_argument("--route-km", type=float, default=config.DEFAULT_ROUTE.to(Kilometer))
    mission.add_argument("--altitude-m", type=float, default=config.DEFAULT_ALTITUDE.to(Meter))
    mission.add_argument("--speed", type=float, default=config.DEFAULT_SPEED_MPS, help="cruise airspeed in m/s")
    mission.add_argument("--payload-kg", type=float, default=config.DEFAULT_PAYLOAD_KG)
    mission.add_argument("--battery-pct", type=float, default=config.DEFAULT_BATTERY_PERCENT)
    mission.add_argument("--battery-health", type=float, default=config.DEFAULT_BATTERY_HEALTH)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="missionsim",
        description="Estimate whether a battery-powered drone can finish a mission.",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="enable debug logging")
    commands = parser.add_subparsers(dest="command", required=True)

    simulate_cmd = commands.add_parser("simulate", help="run the mission in simulated time")
    _add_mission_arguments(simulate_cmd)

    live_cmd = commands.add_parser("live", help="run the mission tick by tick with a progress display")
    _add_mission_arguments(live_cmd)
    live_cmd.add_argument(
        "--interval",
        type=float,
        default=float(config.LIVE_TICK_INTERVAL),
        help="wall-clock seconds between ticks (0 = as fast as possible)",
    )

    sweep_cmd = commands.add_parser("sweep", help="simulate over a range of one parameter")
    _add_mission_arguments(sweep_cmd)
    sweep_cmd.add_argument("--param", choices=SWEEP_PARAMS, default="speed_mps")
    sweep_cmd.add_argument("--start", type=float, required=True)
    sweep_cmd.add_argument("--stop", type=float, required=True)
    sweep_cmd.add_argument("--num", type=int, default=20)
    sweep_cmd.add_argument("--json", dest="json_path", help="write results to this JSON file")
    sweep_cmd.add_argument("--plot", dest="plot_path", help="save a plot to this image file")
    return parser


def build_inputs(args: argparse.Namespace) -> tuple[VehicleProfile, Environment, MissionPlan]:
    """Turn parsed arguments into validated simulation inputs.

    Raises:
        SimulationError: If any value is out of its domain.
    """
    vehicle = VehicleProfile(
        mass_kg=args.mass_kg,
        capacity_wh=args.capacity_wh,
        base_power_w=args.base_power_w,
    )
    environment = Environment(
        wind_speed=args.wind_speed,
        wind_direction=args.wind_dir,
        temperature_c=args.temp_c,
    )
    mission = MissionPlan(
        route_km=args.route_km,
        altitude_m=args.altitude_m,
        speed_mps=args.speed,
        payload_kg=args.payload_kg,
        initial_battery_percent=args.battery_pct,
        battery_health=args.battery_health,
        location=args.location,
    )
    return vehicle, environment, mission


def setup_logging(verbose: bool = False) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(console=CONSOLE, rich_tracebacks=True)],
        force=True,
    )


def _run(args: argparse.Namespace) -> int:
    vehicle, environment, mission = build_inputs(args)

    if args.command == "simulate":
        summary = simulate(vehicle, environment, mission)
        print_outcome(summary, mission, environment)
        return EXIT_OK

    if args.command == "live":
        session = LiveSession(vehicle, environment, mission)
        summary = run_live(session, interval=Second(args.interval))
        print_outcome(summary, mission, environment)
        return EXIT_OK

    analyzer = MissionAnalyzer(vehicle, environment, mission)
    df = analyzer.sweep_range(args.param, args.start, args.stop, args.num)
    CONSOLE.print(df.to_string(index=False))
    stats = analyzer.get_statistics(df)
    if stats:
        CONSOLE.print(f"Feasible: {stats['feasible_runs']}/{stats['num_runs']}")
    if args.json_path:
        analyzer.export_to_json(args.json_path, df)
    if args.plot_path:
        analyzer.visualize_sweep(df, args.param, save_path=args.plot_path)
    return EXIT_OK


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Parse ``argv``, run the chosen command and return the exit code."""
    args = build_parser().parse_args(argv)
    setup_logging(args.verbose)
    try:
        return _run(args)
    except SimulationError as e:
        CONSOLE.print(f"[bold red]{e.kind}[/bold red]: {e}")
        CONSOLE.print("Correct the input and run again.")
        return EXIT_INVALID_INPUT
