"""Base body dataclasses: physical constants, orbit, rotation and baseline weather."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from enum import Enum

from planet_weather.conditions import ConditionType
from planet_weather.constants import HOURS_PER_DAY


class BodyType(Enum):
    """Physical class of a body."""

    TERRESTRIAL = 'terrestrial'
    GAS_GIANT = 'gas_giant'
    ICE_GIANT = 'ice_giant'
    DWARF_PLANET = 'dwarf_planet'
    STAR = 'star'


@dataclass(frozen=True)
class WeatherBaseline:
    """Typical conditions for a body, used when no live data is available."""

    high_c: float
    low_c: float
    wind_speed_kmh: float
    wind_direction_deg: float
    condition: ConditionType
    pressure_bar: float | None = None
    visibility_km: float | None = None
    precipitation_probability: float = 0.0


@dataclass(frozen=True)
class CelestialBody:
    """Static physical and orbital description of one body.

    rotation_period_hours is the signed sidereal period (negative for
    retrograde spin, 0 for a non-rotating body); solar_day_hours is the
    length of the local solar day that drives the diurnal models.
    """

    id: str
    name: str
    body_type: BodyType
    gravity: float
    distance_from_sun_mkm: float
    mean_temperature_c: float
    rotation_period_hours: float
    solar_day_hours: float
    orbital_period_days: float
    atmospheric_pressure_bar: float | None
    atmosphere_composition: str
    moon_count: int
    has_rings: bool
    initial_longitude_deg: float
    axial_tilt_rad: float
    relative_scale: float
    orbit_radius: float
    thermal_inertia: float
    baseline: WeatherBaseline
    primary: str | None = 'sun'
    sol_epoch: datetime | None = None

    def __post_init__(self) -> None:
        if self.orbital_period_days < 0:
            raise ValueError(f'{self.id}: orbital period must be >= 0')
        if self.solar_day_hours <= 0:
            raise ValueError(f'{self.id}: solar day must be > 0 hours')
        if not 0.0 <= self.thermal_inertia <= 1.0:
            raise ValueError(f'{self.id}: thermal inertia must be in [0, 1]')
        if self.orbital_period_days == 0 and self.body_type is not BodyType.STAR:
            raise ValueError(f'{self.id}: only the star may have a zero orbital period')

    @property
    def has_atmosphere(self) -> bool:
        """True when the body has a measurable surface (or 1-bar) pressure."""
        return self.atmospheric_pressure_bar is not None and self.atmospheric_pressure_bar > 0

    @property
    def is_retrograde(self) -> bool:
        return self.rotation_period_hours < 0

    @property
    def rotation_period_days(self) -> float:
        """Signed sidereal rotation period in Earth days."""
        return self.rotation_period_hours / HOURS_PER_DAY
