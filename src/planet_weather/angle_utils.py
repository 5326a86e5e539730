"""Angle wrapping, longitude parsing and clock-style formatting."""

from __future__ import annotations

import math
import re

from planet_weather.constants import DEGREES_PER_CIRCLE, TWOPI


def wrap_unit(value: float) -> float:
    """Wrap value into [0, 1).

    Negative remainders get 1.0 added; a tiny negative input can round up to
    exactly 1.0, which folds back to 0.0.
    """
    wrapped = math.fmod(value, 1.0)
    if wrapped < 0.0:
        wrapped += 1.0
    if wrapped >= 1.0:
        wrapped = 0.0
    return wrapped


def wrap_radians(angle: float) -> float:
    """Wrap angle (radians) into [0, 2*pi), adding 2*pi to negative remainders."""
    wrapped = math.fmod(angle, TWOPI)
    if wrapped < 0.0:
        wrapped += TWOPI
    if wrapped >= TWOPI:
        wrapped = 0.0
    return wrapped


def wrap_degrees(angle: float) -> float:
    """Wrap angle (degrees) into [0, 360)."""
    wrapped = math.fmod(angle, DEGREES_PER_CIRCLE)
    if wrapped < 0.0:
        wrapped += DEGREES_PER_CIRCLE
    if wrapped >= DEGREES_PER_CIRCLE:
        wrapped = 0.0
    return wrapped


def parse_longitude(string: str) -> float | None:
    """Parse a longitude as degrees, or degrees/minutes/seconds.

    Accepts one to three whitespace-separated numbers ("12.5", "12 30",
    "-12 30 15"). Minutes and seconds must be non-negative; a leading minus
    applies to the whole angle.

    Parameters:
        string: Longitude text.

    Returns:
        Longitude in degrees, or None on parse failure.
    """
    s = string.strip()
    if not s:
        return None
    parts = re.split(r'\s+', s)
    if len(parts) > 3:
        return None
    try:
        values = [float(p) for p in parts]
    except ValueError:
        return None
    if any(v < 0 for v in values[1:]):
        return None
    degrees = abs(values[0])
    for i, v in enumerate(values[1:], start=1):
        degrees += v / 60.0**i
    if s.startswith('-'):
        degrees = -degrees
    return degrees


def format_hour_minute(hours: float) -> str:
    """Format fractional hours in [0, 24) as 'HH:MM' (minutes truncated)."""
    whole = int(hours)
    minutes = int((hours - whole) * 60.0)
    return f'{whole:02d}:{minutes:02d}'
