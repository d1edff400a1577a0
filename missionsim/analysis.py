"""
Analyzer for exploring how mission parameters trade off against the energy budget.
"""

from __future__ import annotations

import json
import logging
from dataclasses import replace
from typing import Any, Dict, Iterable, Optional

import numpy as np
import pandas as pd

from missionsim import config
from missionsim.battery import endurance_s
from missionsim.exceptions import InvalidParameterError
from missionsim.models import Environment, MissionPlan, VehicleProfile
from missionsim.power import mission_power
from missionsim.simulator import simulate, simulate_trace

logger = logging.getLogger(__name__)

MISSION_PARAMS = (
    "route_km",
    "altitude_m",
    "speed_mps",
    "payload_kg",
    "initial_battery_percent",
    "battery_health",
)
ENVIRONMENT_PARAMS = ("wind_speed", "temperature_c")
SWEEP_PARAMS = MISSION_PARAMS + ENVIRONMENT_PARAMS

SWEEP_COLUMNS = [
    "completed",
    "total_time_s",
    "battery_left_percent",
    "distance_km_covered",
    "endurance_s",
]


class MissionAnalyzer:
    """Runs families of simulations around one baseline mission."""

    def __init__(self, vehicle: VehicleProfile, environment: Environment, mission: MissionPlan):
        self.vehicle = vehicle
        self.environment = environment
        self.mission = mission

    def _variant(self, param: str, value: float) -> tuple[Environment, MissionPlan]:
        if param in MISSION_PARAMS:
            return self.environment, replace(self.mission, **{param: value})
        if param in ENVIRONMENT_PARAMS:
            return replace(self.environment, **{param: value}), self.mission
        msg = f"Unknown sweep parameter {param!r}; expected one of {', '.join(SWEEP_PARAMS)}"
        raise InvalidParameterError(msg)

    def sweep(self, param: str, values: Iterable[float]) -> pd.DataFrame:
        """
        Simulate the baseline mission once per value of ``param``.

        Args:
            param: Name of a MissionPlan or Environment field
            values: Values to substitute for that field

        Returns:
            DataFrame with the swept value, the outcome fields and the
            constant-power endurance of the variant
        """
        rows = []
        for value in np.asarray(list(values), dtype=float):
            environment, mission = self._variant(param, float(value))
            outcome = simulate(self.vehicle, environment, mission)
            rows.append({
                param: float(value),
                **outcome.get_summary(),
                "endurance_s": self._endurance_s(environment, mission),
            })
        logger.debug("Swept %s over %d values", param, len(rows))
        return pd.DataFrame(rows, columns=[param, *SWEEP_COLUMNS])

    def _endurance_s(self, environment: Environment, mission: MissionPlan) -> float:
        power = mission_power(self.vehicle, environment, mission).total
        return endurance_s(
            power, self.vehicle.capacity_wh, mission.effective_health, mission.initial_battery_percent
        )

    def sweep_range(self, param: str, start: float, stop: float, num: int = 20) -> pd.DataFrame:
        """Sweep ``param`` over ``num`` evenly spaced values from start to stop."""
        return self.sweep(param, np.linspace(start, stop, num))

    def estimate_range_km(self) -> float:
        """
        Distance the vehicle can cover before the battery runs out.

        Flies the baseline mission on a route long enough that only the
        battery or the safety cap can end the run.
        """
        unreachable_km = self.mission.speed_mps * float(config.SIMULATION_CAP) / 1000.0 + 1.0
        outcome = simulate(self.vehicle, self.environment, replace(self.mission, route_km=unreachable_km))
        return outcome.distance_km_covered

    def trace(self) -> pd.DataFrame:
        """Per-second trace of the baseline mission."""
        return simulate_trace(self.vehicle, self.environment, self.mission)

    @staticmethod
    def get_statistics(df: pd.DataFrame) -> Dict[str, Any]:
        """
        Get statistical summary of a sweep.

        Returns:
            Dictionary with feasibility rate and min/max/avg of each outcome field
        """
        if df.empty:
            return {}

        stats: Dict[str, Any] = {
            "num_runs": int(len(df)),
            "feasible_runs": int(df["completed"].sum()),
            "feasibility_rate": float(df["completed"].mean()),
        }
        for column in ("total_time_s", "battery_left_percent", "distance_km_covered", "endurance_s"):
            stats[column] = {
                "min": float(df[column].min()),
                "max": float(df[column].max()),
                "avg": float(df[column].mean()),
            }
        return stats

    def export_to_json(self, filepath: str, df: pd.DataFrame):
        """
        Export a sweep and its statistics to a JSON file.

        Args:
            filepath: Path to output JSON file
            df: Sweep result from ``sweep``
        """
        data = {
            "baseline": {
                "vehicle": self.vehicle.__dict__,
                "environment": {
                    "wind_speed": self.environment.wind_speed,
                    "wind_direction": (
                        self.environment.wind_direction.value
                        if self.environment.wind_direction else None
                    ),
                    "temperature_c": self.environment.temperature_c,
                },
                "mission": self.mission.__dict__,
            },
            "statistics": self.get_statistics(df),
            "results": json.loads(df.to_json(orient="records")),
        }

        with open(filepath, 'w') as f:
            json.dump(data, f, indent=2)

    def visualize_trace(self, save_path: Optional[str] = None):
        """
        Plot battery and distance over time for the baseline mission.

        Args:
            save_path: Path to save the figure (if None, displays interactively)
        """
        import matplotlib.pyplot as plt

        df = self.trace()
        fig, ax_battery = plt.subplots(figsize=(10, 5))
        ax_battery.plot(df["time_s"], df["battery_percent"], color="tab:green", label="Battery (%)")
        ax_battery.set_xlabel("Time (s)")
        ax_battery.set_ylabel("Battery (%)")
        ax_battery.set_ylim(0, 100)

        ax_distance = ax_battery.twinx()
        ax_distance.plot(df["time_s"], df["distance_km"], color="tab:blue", label="Distance (km)")
        ax_distance.axhline(self.mission.route_km, color="tab:blue", linestyle="--", alpha=0.4)
        ax_distance.set_ylabel("Distance (km)")

        ax_battery.set_title(f"Mission trace ({self.mission.route_km:.1f} km at {self.mission.speed_mps:.1f} m/s)")
        ax_battery.grid(True, alpha=0.3)
        fig.tight_layout()
        self._show_or_save(fig, save_path)

    def visualize_sweep(self, df: pd.DataFrame, param: str, save_path: Optional[str] = None):
        """
        Plot battery left against the swept parameter, marking infeasible runs.

        Args:
            df: Sweep result from ``sweep``
            param: Name of the swept column
            save_path: Path to save the figure (if None, displays interactively)
        """
        import matplotlib.pyplot as plt

        fig, ax = plt.subplots(figsize=(8, 5))
        feasible = df[df["completed"]]
        infeasible = df[~df["completed"]]
        ax.plot(df[param], df["battery_left_percent"], color="gray", alpha=0.5)
        ax.scatter(feasible[param], feasible["battery_left_percent"], c="green", label="Completed")
        ax.scatter(infeasible[param], infeasible["battery_left_percent"], c="red", marker="x", label="Not completed")
        ax.set_xlabel(param)
        ax.set_ylabel("Battery left (%)")
        ax.set_title(f"Battery left vs {param}")
        ax.legend()
        ax.grid(True, alpha=0.3)
        fig.tight_layout()
        self._show_or_save(fig, save_path)

    @staticmethod
    def _show_or_save(fig, save_path: Optional[str]):
        import matplotlib.pyplot as plt

        if save_path:
            fig.savefig(save_path, dpi=150, bbox_inches='tight')
            logger.info("Visualization saved to %s", save_path)
            plt.close(fig)
        else:
            plt.show()
