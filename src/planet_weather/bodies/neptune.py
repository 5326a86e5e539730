"""Neptune planet configuration."""

from __future__ import annotations

from planet_weather.bodies.base import BodyType, CelestialBody, WeatherBaseline
from planet_weather.conditions import ConditionType

NEPTUNE = CelestialBody(
    id='neptune',
    name='Neptune',
    body_type=BodyType.ICE_GIANT,
    gravity=1.137,
    distance_from_sun_mkm=4515.0,
    mean_temperature_c=-200.0,
    rotation_period_hours=16.11,
    solar_day_hours=16.11,
    orbital_period_days=59800.0,
    atmospheric_pressure_bar=1.0,
    atmosphere_composition='H2 80%, He 19%, CH4 1.5%',
    moon_count=16,
    has_rings=True,
    initial_longitude_deg=304.88,
    axial_tilt_rad=0.494,
    relative_scale=1.8,
    orbit_radius=84.0,
    thermal_inertia=0.1,
    baseline=WeatherBaseline(
        high_c=-200.0,
        low_c=-220.0,
        wind_speed_kmh=2100.0,  # fastest planetary winds
        wind_direction_deg=90.0,
        condition=ConditionType.DIAMOND_RAIN,
        pressure_bar=1.0,
    ),
)
