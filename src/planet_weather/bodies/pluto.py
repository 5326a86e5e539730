"""Pluto dwarf planet configuration (retrograde, ~10 microbar atmosphere)."""

from __future__ import annotations

from planet_weather.bodies.base import BodyType, CelestialBody, WeatherBaseline
from planet_weather.conditions import ConditionType

PLUTO = CelestialBody(
    id='pluto',
    name='Pluto',
    body_type=BodyType.DWARF_PLANET,
    gravity=0.063,
    distance_from_sun_mkm=5906.4,
    mean_temperature_c=-225.0,
    rotation_period_hours=-153.3,
    solar_day_hours=153.3,
    orbital_period_days=90560.0,
    atmospheric_pressure_bar=0.00001,
    atmosphere_composition='N2 ~99%, CH4, CO traces',
    moon_count=5,
    has_rings=False,
    initial_longitude_deg=238.93,
    axial_tilt_rad=2.138,
    relative_scale=0.4,
    orbit_radius=95.0,
    thermal_inertia=0.7,
    baseline=WeatherBaseline(
        high_c=-220.0,
        low_c=-240.0,
        wind_speed_kmh=3.0,
        wind_direction_deg=0.0,
        condition=ConditionType.EXTREME_COLD,
        pressure_bar=0.00001,
        visibility_km=100.0,
    ),
)
