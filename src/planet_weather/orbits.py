"""Orrery geometry: circular-orbit positions and axial spin angles since J2000."""

from __future__ import annotations

import math
from dataclasses import dataclass
from datetime import datetime

from planet_weather.angle_utils import wrap_radians, wrap_unit
from planet_weather.bodies.base import CelestialBody
from planet_weather.constants import DEGREES_PER_CIRCLE, GALILEAN_PERIODS_DAYS, TWOPI
from planet_weather.time_utils import days_since_j2000


@dataclass(frozen=True)
class OrbitalState:
    """Scene placement of a body: position on the XZ plane (y = 0) and spin (radians)."""

    x: float
    y: float
    z: float
    spin_angle: float

    @property
    def radius(self) -> float:
        return math.hypot(self.x, self.z)


def position(body: CelestialBody, instant: datetime, visual_radius: float) -> tuple[float, float]:
    """Position of body on its circular orbit at instant.

    Eccentricity is ignored; visual_radius is an artistic scale, not the
    physical distance.

    Parameters:
        body: Body to place.
        instant: UTC instant.
        visual_radius: Orbit radius in scene units.

    Returns:
        (x, z); the origin for the star (orbital period 0).
    """
    if body.orbital_period_days == 0:
        return (0.0, 0.0)
    orbits_completed = days_since_j2000(instant) / body.orbital_period_days
    angle = math.radians(body.initial_longitude_deg + orbits_completed * DEGREES_PER_CIRCLE)
    return (math.cos(angle) * visual_radius, math.sin(angle) * visual_radius)


def spin_angle(body: CelestialBody, instant: datetime) -> float:
    """Axial rotation angle of body at instant, in [0, 2*pi).

    A negative rotation period spins the body backwards (retrograde). A zero
    period means a non-rotating body and returns 0.
    """
    period_days = body.rotation_period_days
    if period_days == 0:
        return 0.0
    direction = 1.0 if period_days > 0 else -1.0
    rotations = days_since_j2000(instant) / abs(period_days)
    # Reduce to a single turn before scaling so large elapsed times keep precision.
    return wrap_radians(math.fmod(rotations, 1.0) * TWOPI * direction)


def orbital_state(
    body: CelestialBody,
    instant: datetime,
    visual_radius: float | None = None,
) -> OrbitalState:
    """Position and spin together; visual_radius defaults to the body's orbit_radius."""
    radius = body.orbit_radius if visual_radius is None else visual_radius
    x, z = position(body, instant, radius)
    return OrbitalState(x=x, y=0.0, z=z, spin_angle=spin_angle(body, instant))


def galilean_moon_positions(instant: datetime) -> dict[str, float]:
    """Apparent offsets of Jupiter's Galilean moons, -1 (left) to +1 (right).

    0 means the moon is in front of or behind the planet.
    """
    days = days_since_j2000(instant)
    return {
        name: math.sin(wrap_unit(days / period) * TWOPI)
        for name, period in GALILEAN_PERIODS_DAYS.items()
    }
