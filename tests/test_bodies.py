"""Tests for the body catalog, body validation and solar flux."""

from __future__ import annotations

import dataclasses

import pytest

from planet_weather.bodies import BodyType, Catalog, default_catalog, solar_flux
from planet_weather.bodies.earth import EARTH
from planet_weather.bodies.mars import MARS
from planet_weather.bodies.sun import SUN
from planet_weather.conditions import ConditionType


def test_default_catalog_order() -> None:
    """Star first, then outward, with the Moon right after Earth."""
    assert default_catalog().ids() == [
        'sun',
        'mercury',
        'venus',
        'earth',
        'moon',
        'mars',
        'jupiter',
        'saturn',
        'uranus',
        'neptune',
        'pluto',
    ]


def test_lookup_is_case_insensitive() -> None:
    """Ids match regardless of case and surrounding blanks."""
    catalog = default_catalog()
    assert catalog.get('MARS') is MARS
    assert catalog.get(' Earth ') is EARTH
    assert 'Jupiter' in catalog


def test_unknown_body_is_not_found() -> None:
    """An unknown id returns None, never a default body."""
    catalog = default_catalog()
    assert catalog.get('vulcan') is None
    assert 'vulcan' not in catalog
    assert catalog.index_of('vulcan') is None


def test_catalog_rejects_duplicate_ids() -> None:
    """Two bodies with the same id cannot share a catalog."""
    with pytest.raises(ValueError, match='Duplicate'):
        Catalog([EARTH, dataclasses.replace(MARS, id='EARTH')])


def test_catalog_groupings() -> None:
    """Type filters and classical planets follow catalog order."""
    catalog = default_catalog()
    assert catalog.of_type(BodyType.STAR) == [SUN]
    assert [b.id for b in catalog.of_type(BodyType.ICE_GIANT)] == ['uranus', 'neptune']
    assert [b.id for b in catalog.classical_planets()] == [
        'mercury',
        'venus',
        'earth',
        'mars',
        'jupiter',
        'saturn',
        'uranus',
        'neptune',
    ]
    assert catalog.index_of('moon') == catalog.index_of('earth') + 1


def test_every_body_satisfies_catalog_invariants() -> None:
    """Positive solar days, inertia in [0, 1] and a zero orbital period only for the star."""
    for body in default_catalog():
        assert body.solar_day_hours > 0, body.id
        assert 0.0 <= body.thermal_inertia <= 1.0, body.id
        assert body.orbital_period_days >= 0, body.id
        if body.orbital_period_days == 0:
            assert body.body_type is BodyType.STAR


def test_retrograde_rotators() -> None:
    """Venus, Uranus and Pluto spin backwards."""
    retrograde = sorted(b.id for b in default_catalog() if b.is_retrograde)
    assert retrograde == ['pluto', 'uranus', 'venus']


def test_moon_orbits_earth() -> None:
    """The Moon's primary is Earth; the star has none."""
    catalog = default_catalog()
    moon = catalog.get('moon')
    assert moon is not None
    assert moon.primary == 'earth'
    assert SUN.primary is None


@pytest.mark.parametrize(
    'changes',
    [
        {'solar_day_hours': 0.0},
        {'orbital_period_days': -1.0},
        {'orbital_period_days': 0.0},
        {'thermal_inertia': 1.5},
        {'thermal_inertia': -0.1},
    ],
)
def test_invalid_bodies_are_rejected(changes: dict[str, float]) -> None:
    """Construction fails for values outside the physical domain."""
    with pytest.raises(ValueError):
        dataclasses.replace(EARTH, **changes)


def test_has_atmosphere() -> None:
    """Zero or missing surface pressure means no atmosphere."""
    catalog = default_catalog()
    assert EARTH.has_atmosphere
    mercury = catalog.get('mercury')
    moon = catalog.get('moon')
    assert mercury is not None and not mercury.has_atmosphere
    assert moon is not None and not moon.has_atmosphere


def test_solar_flux_inverse_square() -> None:
    """Flux is the solar constant at 1 AU and falls off with distance squared."""
    assert solar_flux(149.6) == pytest.approx(1361.0)
    assert solar_flux(2 * 149.6) == pytest.approx(1361.0 / 4)
    assert solar_flux(0.0) == 0.0
    assert solar_flux(-5.0) == 0.0


def test_condition_labels_and_severity() -> None:
    """Every condition has a readable label and a severity in 0-3."""
    assert ConditionType.PARTLY_CLOUDY.label == 'Partly cloudy'
    assert ConditionType.CORONAL_MASS_EJECTION.label == 'Coronal mass ejection'
    for condition in ConditionType:
        assert 0 <= condition.severity <= 3
    assert ConditionType.QUIET.severity < ConditionType.SOLAR_FLARE.severity


@pytest.mark.parametrize('body_id', [None, 3, b'earth'])
def test_non_string_id_is_not_found(body_id: object) -> None:
    """Lookups with a non-string id report not found instead of raising."""
    catalog = default_catalog()
    assert catalog.get(body_id) is None  # type: ignore[arg-type]
    assert catalog.index_of(body_id) is None  # type: ignore[arg-type]
    assert body_id not in catalog
