"""Tests for the diurnal weather simulation and forecasts."""

from __future__ import annotations

import dataclasses
from datetime import date, datetime, timedelta, timezone

import numpy as np
import pytest

from planet_weather.bodies import default_catalog
from planet_weather.bodies.base import BodyType
from planet_weather.bodies.earth import EARTH
from planet_weather.bodies.mars import INSIGHT_LANDING, MARS
from planet_weather.bodies.mercury import MERCURY
from planet_weather.bodies.sun import SUN
from planet_weather.bodies.venus import VENUS
from planet_weather.conditions import ConditionType
from planet_weather.solar import local_solar_time
from planet_weather.time_utils import J2000
from planet_weather.weather import (
    convective_factor,
    daily_forecast,
    diurnal_temperature,
    draw_solar_condition,
    hourly_forecast,
    simulate,
    sol_count,
)


class _FixedRng:
    """Random source that always lands at the same point of each interval."""

    def __init__(self, position: float, activity: float = 0.0) -> None:
        self.position = position
        self.activity = activity

    def uniform(self, low: float, high: float) -> float:
        return low + (high - low) * self.position

    def random(self) -> float:
        return self.activity


def _quiet() -> _FixedRng:
    return _FixedRng(0.5)


def test_earth_at_local_noon_without_noise() -> None:
    """Zero noise at noon gives the diurnal peak and baseline values."""
    weather = simulate(EARTH, J2000, rng=_quiet())
    assert weather.body_id == 'earth'
    assert weather.temperature_c == pytest.approx(15.0 + 5.0 * 0.6)
    assert weather.high_c == 20.0
    assert weather.low_c == 10.0
    assert weather.wind_speed_kmh == pytest.approx(15.0 * 1.3)
    assert weather.wind_direction_deg == pytest.approx(45.0)
    assert weather.wind_cardinal == 'NE'
    assert weather.pressure_bar == 1.0
    assert weather.visibility_km == 50.0
    assert weather.condition is ConditionType.PARTLY_CLOUDY
    assert weather.solar_flux_w_m2 == pytest.approx(1361.0)
    assert weather.uv_index == 11
    assert weather.timestamp == J2000
    assert weather.is_simulated
    assert weather.sol is None


def test_earth_at_local_midnight_without_noise() -> None:
    """At midnight the temperature bottoms out and convective wind weakens."""
    weather = simulate(EARTH, J2000, longitude_deg=180.0, rng=_quiet())
    assert weather.temperature_c == pytest.approx(15.0 - 5.0 * 0.6)
    assert weather.wind_speed_kmh == pytest.approx(15.0 * 0.7)


@pytest.mark.parametrize('position', [0.0, 1.0])
def test_noise_extremes(position: float) -> None:
    """Noise at either end of its range stays within the documented bounds."""
    sign = 1.0 if position else -1.0
    weather = simulate(EARTH, J2000, rng=_FixedRng(position))
    assert weather.temperature_c == pytest.approx(18.0 + 0.5 * sign)
    assert weather.high_c == pytest.approx(20.0 + sign)
    assert weather.low_c == pytest.approx(10.0 + sign)
    assert weather.wind_speed_kmh == pytest.approx(19.5 + 1.5 * sign)
    assert weather.wind_direction_deg == pytest.approx(45.0 + 15.0 * sign)
    assert weather.visibility_km == pytest.approx(50.0 + 5.0 * sign)


def test_noise_envelope_with_seeded_generator() -> None:
    """Seeded random draws never leave the noise envelope of any body."""
    rng = np.random.default_rng(1969)
    for body in default_catalog():
        baseline = body.baseline
        for _ in range(100):
            instant = J2000 + timedelta(days=float(rng.uniform(-3000.0, 3000.0)))
            longitude = float(rng.uniform(-180.0, 180.0))
            weather = simulate(body, instant, longitude_deg=longitude, rng=rng)
            solar_time = local_solar_time(body, instant, longitude)
            expected = diurnal_temperature(body, solar_time)
            assert abs(weather.temperature_c - expected) <= 0.5 + 1e-9, body.id
            assert abs(weather.high_c - baseline.high_c) <= 1.0 + 1e-9
            assert abs(weather.low_c - baseline.low_c) <= 1.0 + 1e-9
            calm = baseline.wind_speed_kmh * convective_factor(solar_time)
            assert weather.wind_speed_kmh >= 0.0
            assert abs(weather.wind_speed_kmh - calm) <= baseline.wind_speed_kmh * 0.1 + 1e-9
            assert 0.0 <= weather.wind_direction_deg < 360.0
            offset = abs(weather.wind_direction_deg - baseline.wind_direction_deg) % 360.0
            assert min(offset, 360.0 - offset) <= 15.0 + 1e-9
            if baseline.visibility_km is None:
                assert weather.visibility_km is None
            else:
                assert weather.visibility_km is not None
                assert abs(weather.visibility_km - baseline.visibility_km) <= (
                    baseline.visibility_km * 0.1 + 1e-9
                )


def test_higher_thermal_inertia_swings_more() -> None:
    """With the same baseline, the diurnal amplitude grows with thermal inertia."""
    damped = dataclasses.replace(EARTH, thermal_inertia=0.2)
    lively = dataclasses.replace(EARTH, thermal_inertia=0.9)

    def swing(body: object) -> float:
        noon = simulate(body, J2000, rng=_quiet())  # type: ignore[arg-type]
        midnight = simulate(body, J2000, longitude_deg=180.0, rng=_quiet())  # type: ignore[arg-type]
        return noon.temperature_c - midnight.temperature_c

    assert swing(damped) < swing(EARTH) < swing(lively)
    assert swing(lively) == pytest.approx(10.0 * 0.9)


def test_zero_thermal_inertia_is_flat() -> None:
    """A body without thermal inertia keeps its mean temperature all day."""
    for solar_time in (0.0, 0.25, 0.5, 0.9):
        assert diurnal_temperature(SUN, solar_time) == SUN.baseline.high_c


@pytest.mark.parametrize(
    ('activity', 'expected'),
    [
        (0.0, ConditionType.QUIET),
        (0.699, ConditionType.QUIET),
        (0.70, ConditionType.SOLAR_WIND),
        (0.899, ConditionType.SOLAR_WIND),
        (0.90, ConditionType.SOLAR_FLARE),
        (0.98, ConditionType.CORONAL_MASS_EJECTION),
        (0.9999, ConditionType.CORONAL_MASS_EJECTION),
    ],
)
def test_star_condition_thresholds(activity: float, expected: ConditionType) -> None:
    """Space-weather activity maps to quiet, solar wind, flare or CME."""
    assert draw_solar_condition(_FixedRng(0.5, activity)) is expected  # type: ignore[arg-type]
    assert simulate(SUN, J2000, rng=_FixedRng(0.5, activity)).condition is expected


def test_star_condition_frequencies() -> None:
    """Seeded draws reproduce the 70/20/8/2 split."""
    rng = np.random.default_rng(11)
    draws = [draw_solar_condition(rng) for _ in range(20000)]
    share = {c: draws.count(c) / len(draws) for c in set(draws)}
    assert share[ConditionType.QUIET] == pytest.approx(0.70, abs=0.02)
    assert share[ConditionType.SOLAR_WIND] == pytest.approx(0.20, abs=0.02)
    assert share[ConditionType.SOLAR_FLARE] == pytest.approx(0.08, abs=0.01)
    assert share[ConditionType.CORONAL_MASS_EJECTION] == pytest.approx(0.02, abs=0.01)


def test_star_has_no_pressure_visibility_or_flux() -> None:
    """The star reports no pressure, no visibility and zero flux at itself."""
    weather = simulate(SUN, J2000, rng=_quiet())
    assert SUN.body_type is BodyType.STAR
    assert weather.pressure_bar is None
    assert weather.visibility_km is None
    assert weather.solar_flux_w_m2 == 0.0
    assert weather.uv_index == 0


def test_airless_body_reports_missing_pressure() -> None:
    """Zero surface pressure is reported as not applicable."""
    weather = simulate(MERCURY, J2000, rng=_quiet())
    assert weather.pressure_bar is None
    assert weather.visibility_km is None
    assert weather.condition is ConditionType.NO_ATMOSPHERE
    assert weather.uv_index == 15


def test_sol_count_from_landing() -> None:
    """Sols count whole Mars days from the landing; earlier instants are sol 0."""
    ten_sols = INSIGHT_LANDING + timedelta(hours=10 * MARS.solar_day_hours + 1)
    assert sol_count(MARS, ten_sols) == 10
    assert sol_count(MARS, INSIGHT_LANDING - timedelta(days=30)) == 0
    assert sol_count(EARTH, ten_sols) is None
    assert simulate(MARS, ten_sols, rng=_quiet()).sol == 10


def test_default_generator_is_created_per_call() -> None:
    """Without an injected source the simulation still produces bounded values."""
    weather = simulate(EARTH, datetime(2024, 3, 1, 15, tzinfo=timezone.utc))
    assert 10.0 - 1.0 <= weather.low_c <= 10.0 + 1.0
    assert weather.is_simulated


def test_hourly_forecast_steps_by_planetary_hour() -> None:
    """24 points, one planetary hour apart, within the noise envelope."""
    series = hourly_forecast(MARS, J2000, rng=np.random.default_rng(5))
    points = list(series)
    assert len(series) == 24
    assert len(points) == 24
    assert [p.hour for p in points] == list(range(24))
    step = timedelta(hours=MARS.solar_day_hours / 24)
    assert points[0].timestamp == J2000
    assert points[23].timestamp - points[22].timestamp == step
    for point in points:
        solar_time = local_solar_time(MARS, point.timestamp)
        assert abs(point.temperature_c - diurnal_temperature(MARS, solar_time)) <= 0.5 + 1e-9
    assert all(p.condition is ConditionType.DUST for p in points)


def test_hourly_forecast_with_seeded_generator_repeats_on_every_pass() -> None:
    """Iterating the same series twice yields identical points."""
    series = hourly_forecast(MARS, J2000, rng=np.random.default_rng(5))
    first = list(series)
    second = list(series)
    assert first == second
    assert len({p.temperature_c for p in first}) > 1


def test_hourly_forecast_passes_are_independent() -> None:
    """A partly consumed pass does not disturb a later one."""
    series = hourly_forecast(EARTH, J2000, rng=np.random.default_rng(17))
    partial = iter(series)
    head = [next(partial), next(partial)]
    full = list(series)
    rest = list(partial)
    assert head + rest == full


def test_same_seed_same_hourly_forecast() -> None:
    """Equally seeded generators give equal series; iteration never reads the injected generator."""
    rng = np.random.default_rng(8)
    twin = np.random.default_rng(8)
    series = hourly_forecast(EARTH, J2000, rng=rng)
    twin.integers(np.iinfo(np.int64).max)
    points = list(series)
    assert rng.random() == twin.random()
    assert list(hourly_forecast(EARTH, J2000, rng=np.random.default_rng(8))) == points


def test_daily_forecast_noon_samples() -> None:
    """Ten consecutive days sampled at 12:00 UTC with baseline precipitation."""
    start = datetime(2025, 12, 28, 22, 30, tzinfo=timezone.utc)
    series = daily_forecast(VENUS, start, rng=np.random.default_rng(3))
    days = list(series)
    assert len(series) == 10
    assert [d.date for d in days] == [date(2025, 12, 28) + timedelta(days=i) for i in range(10)]
    assert all(d.timestamp.hour == 12 and d.timestamp.minute == 0 for d in days)
    assert all(d.precipitation_probability == pytest.approx(0.8) for d in days)
    assert list(series) == days


def test_daily_forecast_high_low_noise_bound() -> None:
    """Day-to-day noise adds at most 3 C on top of the snapshot noise."""
    for seed in range(20):
        for day in daily_forecast(EARTH, J2000, rng=np.random.default_rng(seed)):
            assert abs(day.high_c - 20.0) <= 1.0 + 3.0 + 1e-9
            assert abs(day.low_c - 10.0) <= 1.0 + 3.0 + 1e-9


def test_daily_forecast_without_generator_is_restartable() -> None:
    """Without an injected generator every pass still yields ten noon points."""
    series = daily_forecast(EARTH, J2000)
    assert [d.date for d in series] == [d.date for d in series]
    assert len(list(series)) == 10


def test_giants_report_no_visibility() -> None:
    """Gas and ice giants have no surface visibility."""
    for body in default_catalog():
        if body.body_type in (BodyType.GAS_GIANT, BodyType.ICE_GIANT):
            assert simulate(body, J2000, rng=_quiet()).visibility_km is None, body.id
