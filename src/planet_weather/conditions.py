"""Weather condition categories for every kind of body, with display label and severity."""

from __future__ import annotations

from enum import Enum


class ConditionType(Enum):
    """Weather phenomena across the solar system."""

    # Terrestrial and Mars
    CLEAR = 'clear'
    PARTLY_CLOUDY = 'partly_cloudy'
    CLOUDY = 'cloudy'
    DUST_STORM = 'dust_storm'
    DUST = 'dust'
    FOG = 'fog'
    FROST = 'frost'
    DRIZZLE = 'drizzle'
    RAIN = 'rain'
    SHOWERS = 'showers'
    SNOW = 'snow'
    THUNDERSTORM = 'thunderstorm'
    # Venus
    ACID_RAIN = 'acid_rain'
    SULFURIC_CLOUDS = 'sulfuric_clouds'
    EXTREME_GREENHOUSE = 'extreme_greenhouse'
    # Giants
    HURRICANE_STORM = 'hurricane_storm'
    ANTICYCLONIC_STORM = 'anticyclonic_storm'
    BANDED_CLOUDS = 'banded_clouds'
    AMMONIA_CLOUDS = 'ammonia_clouds'
    METHANE_CLOUDS = 'methane_clouds'
    DIAMOND_RAIN = 'diamond_rain'
    # Space weather
    SOLAR_WIND = 'solar_wind'
    SOLAR_FLARE = 'solar_flare'
    GEOMAGNETIC_STORM = 'geomagnetic_storm'
    CORONAL_MASS_EJECTION = 'coronal_mass_ejection'
    QUIET = 'quiet'
    # Extremes
    EXTREME_COLD = 'extreme_cold'
    EXTREME_HEAT = 'extreme_heat'
    NO_ATMOSPHERE = 'no_atmosphere'
    CRYOVOLCANISM = 'cryovolcanism'

    @property
    def label(self) -> str:
        """Human-readable name (e.g. 'Partly cloudy')."""
        return self.value.replace('_', ' ').capitalize()

    @property
    def severity(self) -> int:
        """Severity level 0 (benign) to 3 (extreme) for UI styling."""
        return _SEVERITY[self]


_SEVERITY: dict[ConditionType, int] = {
    ConditionType.CLEAR: 0,
    ConditionType.QUIET: 0,
    ConditionType.PARTLY_CLOUDY: 0,
    ConditionType.CLOUDY: 1,
    ConditionType.DUST: 1,
    ConditionType.FOG: 1,
    ConditionType.FROST: 1,
    ConditionType.BANDED_CLOUDS: 1,
    ConditionType.AMMONIA_CLOUDS: 1,
    ConditionType.METHANE_CLOUDS: 1,
    ConditionType.DRIZZLE: 1,
    ConditionType.DUST_STORM: 2,
    ConditionType.ACID_RAIN: 2,
    ConditionType.SULFURIC_CLOUDS: 2,
    ConditionType.HURRICANE_STORM: 2,
    ConditionType.ANTICYCLONIC_STORM: 2,
    ConditionType.SOLAR_WIND: 2,
    ConditionType.EXTREME_COLD: 2,
    ConditionType.EXTREME_HEAT: 2,
    ConditionType.DIAMOND_RAIN: 2,
    ConditionType.CRYOVOLCANISM: 2,
    ConditionType.RAIN: 2,
    ConditionType.SHOWERS: 2,
    ConditionType.SNOW: 2,
    ConditionType.EXTREME_GREENHOUSE: 3,
    ConditionType.SOLAR_FLARE: 3,
    ConditionType.GEOMAGNETIC_STORM: 3,
    ConditionType.CORONAL_MASS_EJECTION: 3,
    ConditionType.NO_ATMOSPHERE: 3,
    ConditionType.THUNDERSTORM: 3,
}
