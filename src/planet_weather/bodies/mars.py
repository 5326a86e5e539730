"""Mars: thin CO2 atmosphere; sols counted from the InSight landing."""

from __future__ import annotations

from datetime import datetime, timezone

from planet_weather.bodies.base import BodyType, CelestialBody, WeatherBaseline
from planet_weather.conditions import ConditionType

# InSight Sol 0
INSIGHT_LANDING = datetime(2018, 11, 26, 19, 52, tzinfo=timezone.utc)

MARS = CelestialBody(
    id='mars',
    name='Mars',
    body_type=BodyType.TERRESTRIAL,
    gravity=0.379,
    distance_from_sun_mkm=227.9,
    mean_temperature_c=-65.0,
    rotation_period_hours=24.6229,
    solar_day_hours=24.66,  # sol, ~24h 37min
    orbital_period_days=687.0,
    atmospheric_pressure_bar=0.006,
    atmosphere_composition='CO2 95.3%, N2 2.7%, Ar 1.6%',
    moon_count=2,
    has_rings=False,
    initial_longitude_deg=355.45,
    axial_tilt_rad=0.440,
    relative_scale=0.6,
    orbit_radius=30.0,
    thermal_inertia=0.85,
    baseline=WeatherBaseline(
        high_c=-20.0,
        low_c=-100.0,
        wind_speed_kmh=30.0,
        wind_direction_deg=180.0,
        condition=ConditionType.DUST,
        pressure_bar=0.006,
        visibility_km=40.0,
    ),
    sol_epoch=INSIGHT_LANDING,
)
