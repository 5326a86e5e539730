"""Earth: reference body (1 g, 1 bar, 1 AU, 24 h day)."""

from __future__ import annotations

from planet_weather.bodies.base import BodyType, CelestialBody, WeatherBaseline
from planet_weather.conditions import ConditionType

EARTH = CelestialBody(
    id='earth',
    name='Earth',
    body_type=BodyType.TERRESTRIAL,
    gravity=1.0,
    distance_from_sun_mkm=149.6,
    mean_temperature_c=15.0,
    rotation_period_hours=23.9345,
    solar_day_hours=24.0,
    orbital_period_days=365.25,
    atmospheric_pressure_bar=1.0,
    atmosphere_composition='N2 78%, O2 21%, Ar 0.9%',
    moon_count=1,
    has_rings=False,
    initial_longitude_deg=100.46,
    axial_tilt_rad=0.408,
    relative_scale=1.0,
    orbit_radius=24.0,
    thermal_inertia=0.6,
    baseline=WeatherBaseline(
        high_c=20.0,
        low_c=10.0,
        wind_speed_kmh=15.0,
        wind_direction_deg=45.0,
        condition=ConditionType.PARTLY_CLOUDY,
        pressure_bar=1.0,
        visibility_km=50.0,
    ),
)
