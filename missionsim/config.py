"""Model coefficients, limits and defaults for the mission energy simulator.

All tunable numbers of the power and battery models live here so the
simulation modules stay free of magic constants. Values are tuned for an
educational model, not for real flight.
"""

from missionsim.unit import Hour, Kilometer, Meter, Second, Watt, WattHour

# Simulation Configuration
TIME_STEP = Second(1)
SIMULATION_CAP = Hour(3)
SECONDS_PER_HOUR = float(Hour(1))

# Live mode: wall-clock seconds between ticks, and the speed floor used when
# deriving elapsed time from distance
LIVE_TICK_INTERVAL = Second(1)
MIN_LIVE_SPEED = 0.1

# Power model coefficients
AERO_COEFFICIENT = 0.6  # W per (m/s)^3
PAYLOAD_COEFFICIENT = 10.0  # W per kg
HEADWIND_COEFFICIENT = 6.0  # W per m/s
CROSSWIND_COEFFICIENT = 2.0
TAILWIND_COEFFICIENT = -3.0
ALTITUDE_COEFFICIENT = 0.02  # W per m
COLD_THRESHOLD_C = 10.0
COLD_COEFFICIENT = 1.5  # W per degree below threshold
POWER_FLOOR = Watt(50)

# Battery clamps
BATTERY_PERCENT_RANGE = (10.0, 100.0)
BATTERY_HEALTH_RANGE = (0.5, 1.0)

# Vehicle defaults
DEFAULT_MASS_KG = 2.4
DEFAULT_CAPACITY = WattHour(160)
DEFAULT_BASE_POWER = Watt(120)

# Environment defaults
DEFAULT_WIND_SPEED = 3.0
DEFAULT_WIND_DIRECTION = "headwind"
DEFAULT_TEMPERATURE_C = 25.0

# Mission defaults
DEFAULT_LOCATION = "Training Field"
DEFAULT_ROUTE = Kilometer(5)
DEFAULT_ALTITUDE = Meter(80)
DEFAULT_SPEED_MPS = 12.0
DEFAULT_PAYLOAD_KG = 0.5
DEFAULT_BATTERY_PERCENT = 100.0
DEFAULT_BATTERY_HEALTH = 0.95

# Advice thresholds
WINDY_HEADWIND_MPS = 2.0
LOW_START_BATTERY_PERCENT = 80.0
WORN_BATTERY_HEALTH = 0.9
