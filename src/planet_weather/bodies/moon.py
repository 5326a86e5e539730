"""Moon: Earth's tidally locked satellite; orbit radius is relative to Earth."""

from __future__ import annotations

from planet_weather.bodies.base import BodyType, CelestialBody, WeatherBaseline
from planet_weather.conditions import ConditionType

MOON = CelestialBody(
    id='moon',
    name='Moon',
    body_type=BodyType.TERRESTRIAL,
    gravity=0.165,
    distance_from_sun_mkm=149.6,
    mean_temperature_c=-20.0,
    rotation_period_hours=655.7,
    solar_day_hours=708.7,  # one synodic month
    orbital_period_days=27.32,  # sidereal month around Earth
    atmospheric_pressure_bar=None,
    atmosphere_composition='Exosphere: He, Ar, Na traces',
    moon_count=0,
    has_rings=False,
    initial_longitude_deg=218.32,
    axial_tilt_rad=0.0267,
    relative_scale=0.4,
    orbit_radius=3.0,
    thermal_inertia=1.0,
    baseline=WeatherBaseline(
        high_c=120.0,
        low_c=-170.0,
        wind_speed_kmh=0.0,
        wind_direction_deg=0.0,
        condition=ConditionType.NO_ATMOSPHERE,
    ),
    primary='earth',
)
