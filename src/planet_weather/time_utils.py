"""Julian Day conversions (Meeus) and instant parsing via rms-julian."""

from __future__ import annotations

import logging
import math
from datetime import date, datetime, timedelta, timezone

import julian

from planet_weather.config import get_leapsecs_path
from planet_weather.constants import (
    GREGORIAN_SWITCH_JD,
    HOURS_PER_DAY,
    J2000_JD,
    MINUTES_PER_DAY,
    SECONDS_PER_DAY,
)

logger = logging.getLogger(__name__)

J2000 = datetime(2000, 1, 1, 12, 0, 0, tzinfo=timezone.utc)
_J2000_MIDNIGHT = datetime(2000, 1, 1, tzinfo=timezone.utc)
_FIRST_GREGORIAN_DAY = (1582, 10, 15)

# Leap seconds loaded once at first parse.
_leapsecs_loaded = False


def _ensure_leapsecs() -> None:
    """Load the leap seconds kernel used by the rms-julian string parser.

    Uses PLANET_WEATHER_LEAPSECS when it names a usable NAIF LSK, otherwise
    the kernel bundled with rms-julian.
    """
    global _leapsecs_loaded
    if _leapsecs_loaded:
        return
    path = get_leapsecs_path()
    if path is not None:
        try:
            julian.load_lsk(path)
            _leapsecs_loaded = True
            return
        except (OSError, KeyError, ValueError) as e:
            logger.info('Leap seconds from %s not used (%s); using bundled LSK.', path, e)
    julian.load_lsk()
    _leapsecs_loaded = True


def to_utc(dt: datetime) -> datetime:
    """Return dt as an aware UTC datetime; naive values are taken to be UTC."""
    if dt.tzinfo is None:
        return dt.replace(tzinfo=timezone.utc)
    return dt.astimezone(timezone.utc)


def utc_now() -> datetime:
    """Current instant in UTC. Only the CLI defaults to it."""
    return datetime.now(timezone.utc)


def parse_instant(string: str) -> datetime | None:
    """Parse a date/time string to an aware UTC datetime.

    Parameters:
        string: Date/time string in any format accepted by rms-julian, with or
            without an ISO-8601 trailing 'Z'.

    Returns:
        UTC datetime, or None on parse failure.
    """
    _ensure_leapsecs()
    stripped = string.strip()
    if not stripped:
        return None
    candidate_strings = [stripped]
    if stripped.endswith(('Z', 'z')):
        candidate_strings.append(stripped[:-1])
    for candidate in candidate_strings:
        try:
            day, sec = julian.day_sec_from_string(candidate)[:2]
        except (ValueError, TypeError, LookupError, OSError):
            continue
        return _J2000_MIDNIGHT + timedelta(days=int(day), seconds=float(sec))
    return None


def _coerce_datetime(value: object) -> datetime | None:
    """Return value as a UTC datetime, or None when it cannot be decomposed."""
    if isinstance(value, datetime):
        return to_utc(value)
    if isinstance(value, date):
        return datetime(value.year, value.month, value.day, tzinfo=timezone.utc)
    if isinstance(value, str):
        return parse_instant(value)
    return None


def julian_day(instant: datetime | date | str) -> float:
    """Convert a UTC calendar instant to a continuous Julian Day (Meeus ch. 7).

    Dates before 1582-10-15 are read as Julian-calendar dates so that
    calendar_from_julian_day() inverts this exactly.

    Parameters:
        instant: datetime (naive = UTC), date, or parseable date/time string.

    Returns:
        Julian Day including the fractional day. Input that cannot be
        decomposed into year/month/day/time yields the J2000 epoch.
    """
    dt = _coerce_datetime(instant)
    if dt is None:
        logger.info('Unparseable instant %r; using J2000 epoch', instant)
        return J2000_JD
    seconds = dt.second + dt.microsecond / 1e6
    y = float(dt.year)
    m = float(dt.month)
    d = dt.day + dt.hour / HOURS_PER_DAY + dt.minute / MINUTES_PER_DAY + seconds / SECONDS_PER_DAY
    if m <= 2:
        y -= 1
        m += 12
    if (dt.year, dt.month, dt.day) >= _FIRST_GREGORIAN_DAY:
        a = math.floor(y / 100)
        b = 2 - a + math.floor(a / 4)
    else:
        b = 0
    return math.floor(365.25 * (y + 4716)) + math.floor(30.6001 * (m + 1)) + d + b - 1524.5


def calendar_from_julian_day(jd: float) -> datetime:
    """Convert a Julian Day back to an aware UTC datetime (Meeus ch. 7).

    Uses the Julian calendar below JD 2299161 and the Gregorian calendar
    from there on.

    Parameters:
        jd: Julian Day (must fall on or after 0001-01-01).

    Returns:
        UTC datetime with microsecond resolution.

    Raises:
        ValueError: If the date falls outside the datetime range.
    """
    z = math.floor(jd + 0.5)
    f = jd + 0.5 - z
    if z < GREGORIAN_SWITCH_JD:
        a = z
    else:
        alpha = math.floor((z - 1867216.25) / 36524.25)
        a = z + 1 + alpha - math.floor(alpha / 4)
    b = a + 1524
    c = math.floor((b - 122.1) / 365.25)
    d = math.floor(365.25 * c)
    e = math.floor((b - d) / 30.6001)
    day = int(b - d - math.floor(30.6001 * e))
    month = int(e - 1 if e < 14 else e - 13)
    year = int(c - 4716 if month > 2 else c - 4715)
    return datetime(year, month, day, tzinfo=timezone.utc) + timedelta(days=f)


def days_since_j2000(instant: datetime | date | str) -> float:
    """Elapsed days (fractional, signed) from the J2000 epoch to instant."""
    return julian_day(instant) - J2000_JD


def hours_between(start: datetime, stop: datetime) -> float:
    """Elapsed hours from start to stop (negative when stop precedes start)."""
    return (julian_day(stop) - julian_day(start)) * HOURS_PER_DAY


def noon_utc(instant: datetime) -> datetime:
    """Return 12:00:00 UTC on the calendar day of instant."""
    return to_utc(instant).replace(hour=12, minute=0, second=0, microsecond=0)
