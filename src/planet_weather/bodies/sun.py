"""Sun: the primary star, fixed at the orrery origin."""

from __future__ import annotations

from planet_weather.bodies.base import BodyType, CelestialBody, WeatherBaseline
from planet_weather.conditions import ConditionType

SUN = CelestialBody(
    id='sun',
    name='Sun',
    body_type=BodyType.STAR,
    gravity=27.96,
    distance_from_sun_mkm=0.0,
    mean_temperature_c=5505.0,  # photosphere
    rotation_period_hours=609.12,  # 25.38 days at the equator
    solar_day_hours=609.12,
    orbital_period_days=0.0,
    atmospheric_pressure_bar=None,
    atmosphere_composition='H 73%, He 25%',
    moon_count=0,
    has_rings=False,
    initial_longitude_deg=0.0,
    axial_tilt_rad=0.126,
    relative_scale=5.0,
    orbit_radius=0.0,
    thermal_inertia=0.0,
    baseline=WeatherBaseline(
        high_c=5505.0,
        low_c=5505.0,
        wind_speed_kmh=400.0,  # solar wind, ~400 km/s
        wind_direction_deg=0.0,
        condition=ConditionType.QUIET,
    ),
    primary=None,
)
