"""Lunar phase of Earth's moon from the mean synodic month.

Precision is about a day for the named phase; good enough for display.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from datetime import datetime, timedelta
from enum import Enum

from planet_weather.angle_utils import wrap_unit
from planet_weather.constants import KNOWN_NEW_MOON_JD, SYNODIC_MONTH_DAYS, TWOPI
from planet_weather.time_utils import julian_day, to_utc


class LunarPhaseName(Enum):
    """The eight named phases, in order through one lunation."""

    NEW_MOON = 'New moon'
    WAXING_CRESCENT = 'Waxing crescent'
    FIRST_QUARTER = 'First quarter'
    WAXING_GIBBOUS = 'Waxing gibbous'
    FULL_MOON = 'Full moon'
    WANING_GIBBOUS = 'Waning gibbous'
    LAST_QUARTER = 'Last quarter'
    WANING_CRESCENT = 'Waning crescent'


# Upper bound (exclusive) of each bucket; phases at or above the last bound
# wrap back to a new moon.
_PHASE_BOUNDS: tuple[tuple[float, LunarPhaseName], ...] = (
    (0.025, LunarPhaseName.NEW_MOON),
    (0.225, LunarPhaseName.WAXING_CRESCENT),
    (0.275, LunarPhaseName.FIRST_QUARTER),
    (0.475, LunarPhaseName.WAXING_GIBBOUS),
    (0.525, LunarPhaseName.FULL_MOON),
    (0.725, LunarPhaseName.WANING_GIBBOUS),
    (0.775, LunarPhaseName.LAST_QUARTER),
    (0.975, LunarPhaseName.WANING_CRESCENT),
)


@dataclass(frozen=True)
class LunarPhaseState:
    """Phase summary for one instant."""

    phase: float
    illumination: float
    name: LunarPhaseName
    next_full_moon: datetime
    next_new_moon: datetime


def phase(instant: datetime) -> float:
    """Lunar phase fraction in [0, 1): 0 = new, 0.25 = first quarter, 0.5 = full, 0.75 = last quarter."""
    lunations = (julian_day(instant) - KNOWN_NEW_MOON_JD) / SYNODIC_MONTH_DAYS
    return wrap_unit(lunations)


def illumination_for_fraction(phase_fraction: float) -> float:
    """Illuminated percentage (0-100) for a phase fraction."""
    return (1.0 - math.cos(phase_fraction * TWOPI)) / 2.0 * 100.0


def illumination_percent(instant: datetime) -> float:
    """Illuminated percentage of the lunar disk at instant (0 at new moon, 100 at full)."""
    return illumination_for_fraction(phase(instant))


def phase_name_for_fraction(phase_fraction: float) -> LunarPhaseName:
    """Map a phase fraction in [0, 1) to exactly one named bucket."""
    for upper, name in _PHASE_BOUNDS:
        if phase_fraction < upper:
            return name
    return LunarPhaseName.NEW_MOON


def phase_name(instant: datetime) -> LunarPhaseName:
    """Named lunar phase at instant."""
    return phase_name_for_fraction(phase(instant))


def lunar_phase_state(instant: datetime) -> LunarPhaseState:
    """Phase, illumination, name and estimated next full/new moon for instant."""
    current = phase(instant)
    days_to_full = (0.5 - current) * SYNODIC_MONTH_DAYS
    if days_to_full < 0:
        days_to_full += SYNODIC_MONTH_DAYS
    days_to_new = (1.0 - current) * SYNODIC_MONTH_DAYS
    start = to_utc(instant)
    return LunarPhaseState(
        phase=current,
        illumination=illumination_for_fraction(current),
        name=phase_name_for_fraction(current),
        next_full_moon=start + timedelta(days=days_to_full),
        next_new_moon=start + timedelta(days=days_to_new),
    )
