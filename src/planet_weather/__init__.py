"""Planetary weather simulation core.

This package provides the time-based models behind the planet weather views:
- Orbital position and axial spin of each body on a flat circular orrery
- Local solar time, day/night and sun elevation on any body
- Lunar phase and illumination for Earth's moon
- Simulated diurnal weather snapshots and hourly/daily forecasts

All models are pure functions of (body, UTC instant); the catalog of bodies is
an immutable object built once and passed in by the caller.
"""

__all__: list[str] = []
