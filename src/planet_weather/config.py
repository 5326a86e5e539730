"""Configuration: log level, random seed, leap seconds and default body from environment."""

import logging
import os

logger = logging.getLogger(__name__)

DEFAULT_BODY_ID = 'earth'
LOG_LEVEL_NAMES = ('DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL')


def get_log_level_name() -> str | None:
    """Return log level name from PLANET_WEATHER_LOG, or None if unset/invalid.

    Returns:
        Upper-case level name (e.g. 'DEBUG') or None.
    """
    name = os.environ.get('PLANET_WEATHER_LOG', '').strip().upper()
    if name in LOG_LEVEL_NAMES:
        return name
    return None


def get_seed() -> int | None:
    """Return random seed from PLANET_WEATHER_SEED, or None for fresh entropy.

    Returns:
        Integer seed, or None when unset or not an integer (logged).
    """
    raw = os.environ.get('PLANET_WEATHER_SEED', '').strip()
    if not raw:
        return None
    try:
        return int(raw)
    except ValueError:
        logger.warning('Ignoring non-integer PLANET_WEATHER_SEED %r', raw)
        return None


def get_leapsecs_path() -> str | None:
    """Return path to a NAIF LSK for rms-julian (PLANET_WEATHER_LEAPSECS), or None.

    None means the kernel bundled with rms-julian is used.
    """
    path = os.environ.get('PLANET_WEATHER_LEAPSECS', '').strip()
    return path or None


def get_default_body_id() -> str:
    """Return default body id for CLI commands (PLANET_WEATHER_BODY env var or 'earth')."""
    body_id = os.environ.get('PLANET_WEATHER_BODY', '').strip().lower()
    return body_id or DEFAULT_BODY_ID
