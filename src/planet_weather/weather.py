"""Diurnal weather simulation: current snapshot, hourly and daily forecasts.

Temperature follows a sinusoid over the local solar day, peaking at noon and
bottoming out at midnight, damped by each body's thermal inertia. Bounded
uniform noise is layered on top so repeated queries do not look static; that
noise may push the current temperature slightly outside the reported
high/low band.

Randomness comes from an injected numpy Generator. When none is given a
fresh one is created per call, so concurrent callers never share random
state.
"""

from __future__ import annotations

import logging
import math
from collections.abc import Callable, Iterator
from dataclasses import dataclass
from datetime import date, datetime, timedelta
from typing import Generic, TypeVar

import numpy as np

from planet_weather.angle_utils import wrap_degrees
from planet_weather.bodies import solar_flux
from planet_weather.bodies.base import BodyType, CelestialBody
from planet_weather.conditions import ConditionType
from planet_weather.constants import (
    CARDINAL_POINTS,
    CONVECTIVE_WIND_GAIN,
    DAILY_FORECAST_DAYS,
    DAILY_HIGH_LOW_NOISE_C,
    HIGH_LOW_NOISE_C,
    HOURLY_FORECAST_STEPS,
    MAX_UV_INDEX,
    SOLAR_ACTIVITY_THRESHOLDS,
    SOLAR_CONSTANT_W_M2,
    SUNRISE_FRACTION,
    TEMPERATURE_NOISE_C,
    TWOPI,
    VISIBILITY_NOISE_FRACTION,
    WIND_DIRECTION_NOISE_DEG,
    WIND_GUST_FRACTION,
)
from planet_weather.solar import local_solar_time
from planet_weather.time_utils import hours_between, noon_utc, to_utc

logger = logging.getLogger(__name__)

T = TypeVar('T')


@dataclass(frozen=True)
class WeatherSnapshot:
    """Weather on one body at one instant. None marks a field that does not apply."""

    body_id: str
    temperature_c: float
    high_c: float
    low_c: float
    wind_speed_kmh: float
    wind_direction_deg: float
    pressure_bar: float | None
    condition: ConditionType
    visibility_km: float | None
    solar_flux_w_m2: float
    timestamp: datetime
    is_simulated: bool = True
    sol: int | None = None

    @property
    def wind_cardinal(self) -> str:
        """Eight-point compass direction the wind blows from (N, NE, ... NW)."""
        index = int(wrap_degrees(self.wind_direction_deg + 22.5) // 45.0) % len(CARDINAL_POINTS)
        return CARDINAL_POINTS[index]

    @property
    def uv_index(self) -> int:
        """UV index equivalent: Earth's top-of-atmosphere flux maps to 11, capped at 15."""
        return min(int(self.solar_flux_w_m2 / SOLAR_CONSTANT_W_M2 * 11), MAX_UV_INDEX)


@dataclass(frozen=True)
class HourlyForecast:
    """One planetary hour of an hourly forecast (hour 0-23 from the start instant)."""

    hour: int
    timestamp: datetime
    temperature_c: float
    condition: ConditionType
    wind_speed_kmh: float


@dataclass(frozen=True)
class DailyForecast:
    """One Earth day of a daily forecast, sampled at 12:00 UTC."""

    date: date
    timestamp: datetime
    high_c: float
    low_c: float
    condition: ConditionType
    precipitation_probability: float


class ForecastSeries(Generic[T]):
    """Finite, restartable sequence computed lazily on each iteration."""

    def __init__(self, factory: Callable[[], Iterator[T]], length: int) -> None:
        self._factory = factory
        self._length = length

    def __iter__(self) -> Iterator[T]:
        return self._factory()

    def __len__(self) -> int:
        return self._length


def _resolve_rng(rng: np.random.Generator | None) -> np.random.Generator:
    return np.random.default_rng() if rng is None else rng


def _series_seed(rng: np.random.Generator | None) -> int | None:
    """Seed for a forecast series, drawn once; None means fresh entropy on every pass."""
    if rng is None:
        return None
    return int(rng.integers(np.iinfo(np.int64).max))


def _noise(rng: np.random.Generator, amplitude: float) -> float:
    """Uniform noise in [-amplitude, +amplitude]."""
    amplitude = abs(amplitude)
    if amplitude == 0:
        return 0.0
    return float(rng.uniform(-amplitude, amplitude))


def diurnal_phase(solar_time: float) -> float:
    """Angle (radians) of the diurnal sinusoid: -pi/2 at midnight, +pi/2 at noon."""
    return (solar_time - SUNRISE_FRACTION) * TWOPI


def diurnal_temperature(body: CelestialBody, solar_time: float) -> float:
    """Noiseless temperature (C) at a local solar time.

    mean + amplitude * sin(phase) * thermal_inertia, where mean and amplitude
    come from the body's baseline high and low.
    """
    baseline = body.baseline
    mean = (baseline.high_c + baseline.low_c) / 2.0
    amplitude = (baseline.high_c - baseline.low_c) / 2.0
    return mean + amplitude * math.sin(diurnal_phase(solar_time)) * body.thermal_inertia


def convective_factor(solar_time: float) -> float:
    """Daytime wind multiplier, 0.7 at midnight to 1.3 at noon."""
    return 1.0 + CONVECTIVE_WIND_GAIN * math.sin(diurnal_phase(solar_time))


def draw_solar_condition(rng: np.random.Generator) -> ConditionType:
    """Draw space-weather activity: quiet 70%, solar wind 20%, flare 8%, CME 2%."""
    activity = float(rng.random())
    for upper, name in SOLAR_ACTIVITY_THRESHOLDS:
        if activity < upper:
            return ConditionType(name)
    return ConditionType(SOLAR_ACTIVITY_THRESHOLDS[-1][1])


def sol_count(body: CelestialBody, instant: datetime) -> int | None:
    """Whole local solar days since the body's sol epoch, or None if it has none.

    Instants before the epoch count as sol 0.
    """
    if body.sol_epoch is None:
        return None
    sols = hours_between(body.sol_epoch, instant) / body.solar_day_hours
    return max(0, math.floor(sols))


def _pressure(body: CelestialBody) -> float | None:
    pressure = body.baseline.pressure_bar
    if pressure is None or pressure <= 0:
        return None
    return pressure


def simulate(
    body: CelestialBody,
    instant: datetime,
    *,
    longitude_deg: float = 0.0,
    rng: np.random.Generator | None = None,
) -> WeatherSnapshot:
    """Simulate the weather on body at instant.

    Parameters:
        body: Body to simulate.
        instant: UTC instant.
        longitude_deg: Observer longitude on the body.
        rng: Random source (numpy Generator); a fresh one when None.

    Returns:
        Snapshot flagged as simulated. Noise bounds: +/-0.5 C on the current
        temperature, +/-1 C on high and low, +/-10% wind speed, +/-15 deg wind
        direction, +/-10% visibility.
    """
    rng = _resolve_rng(rng)
    baseline = body.baseline
    solar_time = local_solar_time(body, instant, longitude_deg)

    temperature = diurnal_temperature(body, solar_time) + _noise(rng, TEMPERATURE_NOISE_C)
    high = baseline.high_c + _noise(rng, HIGH_LOW_NOISE_C)
    low = baseline.low_c + _noise(rng, HIGH_LOW_NOISE_C)

    gust = _noise(rng, baseline.wind_speed_kmh * WIND_GUST_FRACTION)
    wind_speed = max(0.0, baseline.wind_speed_kmh * convective_factor(solar_time) + gust)
    wind_direction = wrap_degrees(
        baseline.wind_direction_deg + _noise(rng, WIND_DIRECTION_NOISE_DEG)
    )

    visibility = None
    if baseline.visibility_km is not None and baseline.visibility_km > 0:
        visibility = baseline.visibility_km + _noise(
            rng, baseline.visibility_km * VISIBILITY_NOISE_FRACTION
        )

    if body.body_type is BodyType.STAR:
        condition = draw_solar_condition(rng)
    else:
        condition = baseline.condition

    logger.debug(
        'Simulated %s at %s: solar time %.4f, %.1f C, %s',
        body.id,
        instant,
        solar_time,
        temperature,
        condition.value,
    )
    return WeatherSnapshot(
        body_id=body.id,
        temperature_c=temperature,
        high_c=high,
        low_c=low,
        wind_speed_kmh=wind_speed,
        wind_direction_deg=wind_direction,
        pressure_bar=_pressure(body),
        condition=condition,
        visibility_km=visibility,
        solar_flux_w_m2=solar_flux(body.distance_from_sun_mkm),
        timestamp=to_utc(instant),
        is_simulated=True,
        sol=sol_count(body, instant),
    )


def hourly_forecast(
    body: CelestialBody,
    start: datetime,
    *,
    rng: np.random.Generator | None = None,
) -> ForecastSeries[HourlyForecast]:
    """24 planetary hours from start, each solar_day_hours/24 Earth hours apart.

    The returned series can be iterated repeatedly; points are simulated as
    they are consumed. With an injected rng every pass yields the same
    points, each from its own generator.
    """
    step = timedelta(hours=body.solar_day_hours / HOURLY_FORECAST_STEPS)
    origin = to_utc(start)
    seed = _series_seed(rng)

    def _points() -> Iterator[HourlyForecast]:
        source = np.random.default_rng(seed)
        for hour in range(HOURLY_FORECAST_STEPS):
            when = origin + step * hour
            weather = simulate(body, when, rng=source)
            yield HourlyForecast(
                hour=hour,
                timestamp=when,
                temperature_c=weather.temperature_c,
                condition=weather.condition,
                wind_speed_kmh=weather.wind_speed_kmh,
            )

    return ForecastSeries(_points, HOURLY_FORECAST_STEPS)


def daily_forecast(
    body: CelestialBody,
    start: datetime,
    *,
    rng: np.random.Generator | None = None,
) -> ForecastSeries[DailyForecast]:
    """10 Earth days from start, sampled at 12:00 UTC, with +/-3 C day-to-day noise on high/low.

    Noon here is 12:00 UTC on each calendar day, not the body's local solar
    noon. Each day is still one Earth day for bodies with very short or very
    long solar days. Passes over the series repeat like hourly_forecast().
    """
    origin = to_utc(start)
    seed = _series_seed(rng)

    def _points() -> Iterator[DailyForecast]:
        source = np.random.default_rng(seed)
        for day in range(DAILY_FORECAST_DAYS):
            noon = noon_utc(origin + timedelta(days=day))
            weather = simulate(body, noon, rng=source)
            yield DailyForecast(
                date=noon.date(),
                timestamp=noon,
                high_c=weather.high_c + _noise(source, DAILY_HIGH_LOW_NOISE_C),
                low_c=weather.low_c + _noise(source, DAILY_HIGH_LOW_NOISE_C),
                condition=weather.condition,
                precipitation_probability=body.baseline.precipitation_probability,
            )

    return ForecastSeries(_points, DAILY_FORECAST_DAYS)
