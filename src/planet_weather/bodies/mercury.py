"""Mercury: airless, slow rotation, extreme day/night swing."""

from __future__ import annotations

from planet_weather.bodies.base import BodyType, CelestialBody, WeatherBaseline
from planet_weather.conditions import ConditionType

MERCURY = CelestialBody(
    id='mercury',
    name='Mercury',
    body_type=BodyType.TERRESTRIAL,
    gravity=0.378,
    distance_from_sun_mkm=57.9,
    mean_temperature_c=167.0,
    rotation_period_hours=1407.6,
    solar_day_hours=4222.6,
    orbital_period_days=87.97,
    atmospheric_pressure_bar=0.0,
    atmosphere_composition='Traces: O2, Na, H2, He, K',
    moon_count=0,
    has_rings=False,
    initial_longitude_deg=252.25,
    axial_tilt_rad=0.0005,
    relative_scale=0.4,
    orbit_radius=12.0,
    thermal_inertia=1.0,
    baseline=WeatherBaseline(
        high_c=430.0,
        low_c=-180.0,
        wind_speed_kmh=0.0,
        wind_direction_deg=0.0,
        condition=ConditionType.NO_ATMOSPHERE,
        pressure_bar=0.0,
    ),
)
