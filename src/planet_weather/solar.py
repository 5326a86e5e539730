"""Local solar time, day/night and sun elevation on any body.

A deliberately simple model: the day window is a fixed [0.25, 0.75) fraction
of the local solar day regardless of season, latitude or axial tilt, and the
elevation is a sinusoidal proxy rather than a true geometric angle.
"""

from __future__ import annotations

import math
from datetime import datetime

from planet_weather.angle_utils import format_hour_minute, wrap_unit
from planet_weather.bodies.base import CelestialBody
from planet_weather.constants import (
    DEGREES_PER_CIRCLE,
    EPOCH_SOLAR_TIME,
    HOURS_PER_DAY,
    MAX_SUN_ELEVATION_DEG,
    SUNRISE_FRACTION,
    SUNSET_FRACTION,
    TWOPI,
)
from planet_weather.time_utils import days_since_j2000


def local_solar_time(body: CelestialBody, instant: datetime, longitude_deg: float = 0.0) -> float:
    """Local solar time on body as a fraction of its solar day.

    The prime meridian of every body is at local noon on the J2000 epoch
    (2000-01-01T12:00Z); time then advances one full day per solar_day_hours
    Earth hours. Longitude shifts the result by longitude/360 of a day.

    Parameters:
        body: Body to evaluate.
        instant: UTC instant.
        longitude_deg: Observer longitude (any real value; wrapped).

    Returns:
        Fraction in [0, 1): 0.0 = midnight, 0.25 = sunrise, 0.5 = noon,
        0.75 = sunset.
    """
    planetary_days = days_since_j2000(instant) * HOURS_PER_DAY / body.solar_day_hours
    offset = EPOCH_SOLAR_TIME + longitude_deg / DEGREES_PER_CIRCLE
    return wrap_unit(wrap_unit(planetary_days) + wrap_unit(offset))


def is_daytime(body: CelestialBody, instant: datetime, longitude_deg: float = 0.0) -> bool:
    """True when local solar time is in [0.25, 0.75)."""
    solar_time = local_solar_time(body, instant, longitude_deg)
    return SUNRISE_FRACTION <= solar_time < SUNSET_FRACTION


def sun_elevation_deg(body: CelestialBody, instant: datetime, longitude_deg: float = 0.0) -> float:
    """Sun elevation proxy in [-90, 90] degrees: +90 at noon, -90 at midnight, 0 at sunrise/sunset."""
    solar_time = local_solar_time(body, instant, longitude_deg)
    return math.sin((solar_time - SUNRISE_FRACTION) * TWOPI) * MAX_SUN_ELEVATION_DEG


def local_solar_hour(body: CelestialBody, instant: datetime, longitude_deg: float = 0.0) -> float:
    """Local solar time on a 24-hour clock, in [0, 24)."""
    return local_solar_time(body, instant, longitude_deg) * HOURS_PER_DAY


def format_solar_time(body: CelestialBody, instant: datetime, longitude_deg: float = 0.0) -> str:
    """Local solar time as 'HH:MM'."""
    return format_hour_minute(local_solar_hour(body, instant, longitude_deg))
