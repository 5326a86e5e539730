"""Saturn planet configuration."""

from __future__ import annotations

from planet_weather.bodies.base import BodyType, CelestialBody, WeatherBaseline
from planet_weather.conditions import ConditionType

SATURN = CelestialBody(
    id='saturn',
    name='Saturn',
    body_type=BodyType.GAS_GIANT,
    gravity=1.065,
    distance_from_sun_mkm=1432.0,
    mean_temperature_c=-140.0,
    rotation_period_hours=10.656,
    solar_day_hours=10.7,
    orbital_period_days=10747.0,
    atmospheric_pressure_bar=1.0,
    atmosphere_composition='H2 96.3%, He 3.25%',
    moon_count=146,
    has_rings=True,
    initial_longitude_deg=49.94,
    axial_tilt_rad=0.466,
    relative_scale=2.5,
    orbit_radius=60.0,
    thermal_inertia=0.1,
    baseline=WeatherBaseline(
        high_c=-130.0,
        low_c=-180.0,
        wind_speed_kmh=1800.0,
        wind_direction_deg=90.0,
        condition=ConditionType.BANDED_CLOUDS,
        pressure_bar=1.0,
    ),
)
