"""Uranus: retrograde spin, axis tipped past 90 degrees."""

from __future__ import annotations

from planet_weather.bodies.base import BodyType, CelestialBody, WeatherBaseline
from planet_weather.conditions import ConditionType

URANUS = CelestialBody(
    id='uranus',
    name='Uranus',
    body_type=BodyType.ICE_GIANT,
    gravity=0.886,
    distance_from_sun_mkm=2867.0,
    mean_temperature_c=-195.0,
    rotation_period_hours=-17.24,
    solar_day_hours=17.24,
    orbital_period_days=30589.0,
    atmospheric_pressure_bar=1.0,
    atmosphere_composition='H2 82.5%, He 15.2%, CH4 2.3%',
    moon_count=28,
    has_rings=True,
    initial_longitude_deg=313.23,
    axial_tilt_rad=1.706,
    relative_scale=1.8,
    orbit_radius=72.0,
    thermal_inertia=0.1,
    baseline=WeatherBaseline(
        high_c=-193.0,
        low_c=-224.0,
        wind_speed_kmh=900.0,
        wind_direction_deg=270.0,
        condition=ConditionType.METHANE_CLOUDS,
        pressure_bar=1.0,
    ),
)
