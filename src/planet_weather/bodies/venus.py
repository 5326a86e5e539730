"""Venus: retrograde spin under a 92-bar greenhouse atmosphere."""

from __future__ import annotations

from planet_weather.bodies.base import BodyType, CelestialBody, WeatherBaseline
from planet_weather.conditions import ConditionType

VENUS = CelestialBody(
    id='venus',
    name='Venus',
    body_type=BodyType.TERRESTRIAL,
    gravity=0.907,
    distance_from_sun_mkm=108.2,
    mean_temperature_c=464.0,
    rotation_period_hours=-5832.5,
    solar_day_hours=2802.0,  # 116.75 Earth days
    orbital_period_days=224.7,
    atmospheric_pressure_bar=92.0,
    atmosphere_composition='CO2 96.5%, N2 3.5%',
    moon_count=0,
    has_rings=False,
    initial_longitude_deg=181.98,
    axial_tilt_rad=3.096,
    relative_scale=1.0,
    orbit_radius=18.0,
    thermal_inertia=0.05,
    baseline=WeatherBaseline(
        high_c=471.0,
        low_c=446.0,
        wind_speed_kmh=360.0,  # cloud-top super-rotation
        wind_direction_deg=90.0,
        condition=ConditionType.ACID_RAIN,
        pressure_bar=92.0,
        visibility_km=1.0,
        precipitation_probability=0.8,
    ),
)
