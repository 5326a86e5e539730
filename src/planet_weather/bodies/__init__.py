"""Body catalog: immutable lookup of every simulated body, plus solar flux."""

from __future__ import annotations

import logging
from collections.abc import Iterable, Iterator

from planet_weather.bodies.base import BodyType, CelestialBody, WeatherBaseline
from planet_weather.bodies.earth import EARTH
from planet_weather.bodies.jupiter import JUPITER
from planet_weather.bodies.mars import MARS
from planet_weather.bodies.mercury import MERCURY
from planet_weather.bodies.moon import MOON
from planet_weather.bodies.neptune import NEPTUNE
from planet_weather.bodies.pluto import PLUTO
from planet_weather.bodies.saturn import SATURN
from planet_weather.bodies.sun import SUN
from planet_weather.bodies.uranus import URANUS
from planet_weather.bodies.venus import VENUS
from planet_weather.constants import EARTH_DISTANCE_MKM, SOLAR_CONSTANT_W_M2

__all__ = [
    'BodyType',
    'Catalog',
    'CelestialBody',
    'WeatherBaseline',
    'default_catalog',
    'solar_flux',
]

logger = logging.getLogger(__name__)

# Star first, then outward; the moon follows its primary.
_DEFAULT_BODIES: tuple[CelestialBody, ...] = (
    SUN,
    MERCURY,
    VENUS,
    EARTH,
    MOON,
    MARS,
    JUPITER,
    SATURN,
    URANUS,
    NEPTUNE,
    PLUTO,
)


class Catalog:
    """Read-only, ordered collection of bodies keyed by lowercase id."""

    def __init__(self, bodies: Iterable[CelestialBody]) -> None:
        by_id: dict[str, CelestialBody] = {}
        for body in bodies:
            key = body.id.lower()
            if key in by_id:
                raise ValueError(f'Duplicate body id {body.id!r} in catalog')
            by_id[key] = body
        self._by_id = by_id

    def __len__(self) -> int:
        return len(self._by_id)

    def __iter__(self) -> Iterator[CelestialBody]:
        return iter(self._by_id.values())

    def __contains__(self, body_id: object) -> bool:
        return isinstance(body_id, str) and body_id.strip().lower() in self._by_id

    def get(self, body_id: str) -> CelestialBody | None:
        """Return the body with this id (case-insensitive), or None if unknown.

        Unknown ids are never mapped to a default body, so callers can tell
        "no data for this body" apart from "this body has no atmosphere".
        """
        if not isinstance(body_id, str):
            logger.debug('Non-string body id %r', body_id)
            return None
        body = self._by_id.get(body_id.strip().lower())
        if body is None:
            logger.debug('Unknown body id %r', body_id)
        return body

    def ids(self) -> list[str]:
        """Body ids in catalog order."""
        return list(self._by_id)

    def of_type(self, body_type: BodyType) -> list[CelestialBody]:
        """Bodies of the given physical class, in catalog order."""
        return [b for b in self._by_id.values() if b.body_type is body_type]

    def classical_planets(self) -> list[CelestialBody]:
        """Planets orbiting the star directly, excluding dwarf planets."""
        return [
            b
            for b in self._by_id.values()
            if b.primary == 'sun' and b.body_type not in (BodyType.STAR, BodyType.DWARF_PLANET)
        ]

    def index_of(self, body_id: str) -> int | None:
        """Position of the body in catalog order, or None if unknown."""
        if not isinstance(body_id, str):
            return None
        key = body_id.strip().lower()
        for i, candidate in enumerate(self._by_id):
            if candidate == key:
                return i
        return None


def default_catalog() -> Catalog:
    """Build the standard catalog (sun, eight planets, the Moon and Pluto)."""
    return Catalog(_DEFAULT_BODIES)


def solar_flux(distance_mkm: float) -> float:
    """Solar flux (W/m^2) at a distance from the sun, by the inverse square law.

    Parameters:
        distance_mkm: Distance in millions of km.

    Returns:
        Flux in W/m^2; 0 for distances <= 0 (the star itself).
    """
    if distance_mkm <= 0:
        return 0.0
    ratio = EARTH_DISTANCE_MKM / distance_mkm
    return SOLAR_CONSTANT_W_M2 * ratio * ratio
