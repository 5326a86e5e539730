"""Live-data provider contract and the simulation fallback.

Live weather (a public forecast API for Earth, historical lander patterns for
Mars) is fetched by collaborators outside this package. Whatever they are,
they return a WeatherSnapshot or fail, and the simulation stands in for them.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import datetime
from typing import Protocol

import numpy as np

from planet_weather.bodies.base import CelestialBody
from planet_weather.weather import WeatherSnapshot, simulate

logger = logging.getLogger(__name__)


class ProviderError(Exception):
    """A weather provider could not deliver data for a body."""


@dataclass(frozen=True)
class Location:
    """Observer location on the body's surface (degrees)."""

    latitude_deg: float
    longitude_deg: float


class WeatherProvider(Protocol):
    """Source of weather snapshots with the same shape as the simulation."""

    def fetch(
        self,
        body: CelestialBody,
        instant: datetime,
        location: Location | None = None,
    ) -> WeatherSnapshot:
        """Return current weather for body, or raise ProviderError."""
        ...


class SimulatedProvider:
    """Provider backed by the simulation (used for bodies without live data)."""

    def __init__(self, rng: np.random.Generator | None = None) -> None:
        self._rng = rng

    def fetch(
        self,
        body: CelestialBody,
        instant: datetime,
        location: Location | None = None,
    ) -> WeatherSnapshot:
        longitude = location.longitude_deg if location is not None else 0.0
        return simulate(body, instant, longitude_deg=longitude, rng=self._rng)


def weather_with_fallback(
    body: CelestialBody,
    instant: datetime,
    provider: WeatherProvider | None = None,
    *,
    location: Location | None = None,
    rng: np.random.Generator | None = None,
) -> WeatherSnapshot:
    """Weather from provider, falling back to simulate() when it is absent or fails.

    Parameters:
        body: Body to query.
        instant: UTC instant.
        provider: Live-data provider, or None to simulate directly.
        location: Optional observer location passed to the provider; its
            longitude is also used by the fallback simulation.
        rng: Random source for the fallback simulation.

    Returns:
        Provider snapshot, or a simulated snapshot (is_simulated=True).
    """
    longitude = location.longitude_deg if location is not None else 0.0
    if provider is not None:
        try:
            return provider.fetch(body, instant, location)
        except (ProviderError, OSError, ValueError) as e:
            logger.warning('Weather provider failed for %s (%s); using simulation', body.id, e)
    return simulate(body, instant, longitude_deg=longitude, rng=rng)
