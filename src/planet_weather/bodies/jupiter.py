"""Jupiter: fastest rotation; pressure quoted at the 1-bar level."""

from __future__ import annotations

from planet_weather.bodies.base import BodyType, CelestialBody, WeatherBaseline
from planet_weather.conditions import ConditionType

JUPITER = CelestialBody(
    id='jupiter',
    name='Jupiter',
    body_type=BodyType.GAS_GIANT,
    gravity=2.528,
    distance_from_sun_mkm=778.5,
    mean_temperature_c=-110.0,  # cloud tops
    rotation_period_hours=9.925,
    solar_day_hours=9.93,
    orbital_period_days=4331.0,
    atmospheric_pressure_bar=1.0,
    atmosphere_composition='H2 89.8%, He 10.2%',
    moon_count=95,
    has_rings=True,
    initial_longitude_deg=34.40,
    axial_tilt_rad=0.054,
    relative_scale=2.8,
    orbit_radius=45.0,
    thermal_inertia=0.1,
    baseline=WeatherBaseline(
        high_c=-108.0,
        low_c=-145.0,
        wind_speed_kmh=550.0,  # equatorial jet
        wind_direction_deg=90.0,
        condition=ConditionType.ANTICYCLONIC_STORM,
        pressure_bar=1.0,
    ),
)
