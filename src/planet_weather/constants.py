"""Fixed constants: epochs, time units, angles, solar and lunar references.

From the NASA planetary fact sheets and Meeus, Astronomical Algorithms.
"""

import math

# Epochs (Julian Day)
J2000_JD = 2451545.0  # 2000-01-01T12:00:00Z
GREGORIAN_SWITCH_JD = 2299161.0  # 1582-10-15, first Gregorian calendar day
KNOWN_NEW_MOON_JD = 2451550.1  # 2000-01-06 18:14 UTC

# Time: seconds per unit
SECONDS_PER_MINUTE = 60.0
SECONDS_PER_HOUR = 3600.0
SECONDS_PER_DAY = 86400.0
HOURS_PER_DAY = 24.0
MINUTES_PER_DAY = 1440.0

# Angle
DEGREES_PER_CIRCLE = 360.0
TWOPI = 2.0 * math.pi

# Solar geometry (fractions of a local solar day)
EPOCH_SOLAR_TIME = 0.5  # prime meridian is at local noon on the J2000 epoch
SUNRISE_FRACTION = 0.25
SUNSET_FRACTION = 0.75
MAX_SUN_ELEVATION_DEG = 90.0

# Solar flux: solar constant at 1 AU (149.6 million km)
SOLAR_CONSTANT_W_M2 = 1361.0
EARTH_DISTANCE_MKM = 149.6
MAX_UV_INDEX = 15

# Lunar
SYNODIC_MONTH_DAYS = 29.53058867

# Weather noise amplitudes (uniform, +/-)
TEMPERATURE_NOISE_C = 0.5
HIGH_LOW_NOISE_C = 1.0
WIND_GUST_FRACTION = 0.1
WIND_DIRECTION_NOISE_DEG = 15.0
VISIBILITY_NOISE_FRACTION = 0.1
DAILY_HIGH_LOW_NOISE_C = 3.0
CONVECTIVE_WIND_GAIN = 0.3

# Forecast lengths
HOURLY_FORECAST_STEPS = 24
DAILY_FORECAST_DAYS = 10

# Star activity draw: (cumulative probability upper bound, condition name)
SOLAR_ACTIVITY_THRESHOLDS: tuple[tuple[float, str], ...] = (
    (0.70, 'quiet'),
    (0.90, 'solar_wind'),
    (0.98, 'solar_flare'),
    (1.00, 'coronal_mass_ejection'),
)

# Galilean moon orbital periods (days), for the Jupiter overlay
GALILEAN_PERIODS_DAYS: dict[str, float] = {
    'Io': 1.769,
    'Europa': 3.551,
    'Ganymede': 7.155,
    'Callisto': 16.689,
}

# Compass points for wind direction, clockwise from north
CARDINAL_POINTS = ('N', 'NE', 'E', 'SE', 'S', 'SW', 'W', 'NW')
