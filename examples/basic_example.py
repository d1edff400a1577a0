"""
Basic example of using the mission energy simulator.
"""

from missionsim import Environment, LiveSession, MissionPlan, VehicleProfile, simulate
from missionsim.analysis import MissionAnalyzer


def main():
    print("=" * 80)
    print("Mission Energy Simulator - Basic Example")
    print("=" * 80)

    vehicle = VehicleProfile(mass_kg=2.4, capacity_wh=160, base_power_w=120)
    environment = Environment(wind_speed=3, wind_direction="headwind", temperature_c=25)
    mission = MissionPlan(
        route_km=5,
        altitude_m=80,
        speed_mps=12,
        payload_kg=0.5,
        initial_battery_percent=100,
        battery_health=0.95,
    )

    # Batch run
    print("\n" + "-" * 80)
    print("Simulating in one go...")
    outcome = simulate(vehicle, environment, mission)
    print(f"Completed: {outcome.completed}")
    print(f"Time: {outcome.total_time_min:.1f} min")
    print(f"Battery Left: {outcome.battery_left_percent:.1f}%")
    print(f"Distance: {outcome.distance_km_covered:.2f} km")

    # Live run, driven by hand
    print("\n" + "-" * 80)
    print("Ticking a live session...")
    session = LiveSession(vehicle, environment, mission)
    session.start()
    while session.running:
        session.tick()
        if session.ticks % 60 == 0:
            print(f"  t={session.ticks:4d}s  battery={session.state.battery_percent:5.1f}%  "
                  f"distance={session.state.distance_km:.2f} km")
    print(f"Live summary: {session.summary()}")

    # Sweep
    print("\n" + "-" * 80)
    print("Sweeping cruise speed...")
    analyzer = MissionAnalyzer(vehicle, environment, mission)
    df = analyzer.sweep_range("speed_mps", 4, 20, num=9)
    print(df.to_string(index=False))
    print(f"Battery-limited range: {analyzer.estimate_range_km():.2f} km")

    print("\n" + "=" * 80)
    print("Example completed!")
    print("=" * 80)


if __name__ == "__main__":
    main()
