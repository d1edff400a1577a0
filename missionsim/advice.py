"""Plain-language status and tips for a finished mission."""

from __future__ import annotations

from missionsim import config
from missionsim.models import Environment, MissionPlan, OutcomeSummary, WindDirection

STATUS_COMPLETED = "Mission Completed"
STATUS_LOW_BATTERY = "Mission Aborted (Low Battery)"
STATUS_TIME_CAP = "Mission Not Finished (Time Cap)"


def status_line(summary: OutcomeSummary) -> str:
    if summary.completed:
        return STATUS_COMPLETED
    if summary.metadata.get("cap_reached"):
        return STATUS_TIME_CAP
    return STATUS_LOW_BATTERY


def mission_tips(summary: OutcomeSummary, mission: MissionPlan, environment: Environment) -> list[str]:
    """Suggestions for the next attempt, based on the outcome and its inputs."""
    if summary.completed:
        return [
            "Mission parameters look safe. Consider extending route length "
            "or testing different winds."
        ]

    tips = ["Reduce speed or payload to conserve energy."]
    if (
        environment.wind_direction is WindDirection.HEADWIND
        and environment.wind_speed > config.WINDY_HEADWIND_MPS
    ):
        tips.append("Headwinds are costly. Try a tailwind or calmer conditions.")
    if mission.initial_battery_percent < config.LOW_START_BATTERY_PERCENT:
        tips.append("Start with a higher battery percentage for safety.")
    if mission.battery_health < config.WORN_BATTERY_HEALTH:
        tips.append("Old batteries reduce usable energy. Consider better packs.")
    if summary.metadata.get("cap_reached"):
        tips.append("The route could not be flown within three hours. Check the cruise speed.")
    return tips
