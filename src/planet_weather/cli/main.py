"""CLI entry point: planet-weather bodies|weather|hourly|daily|position|solar|moon subcommands."""

from __future__ import annotations

import argparse
import logging
import sys
from datetime import datetime
from typing import NoReturn, TextIO

import numpy as np

from planet_weather.angle_utils import parse_longitude
from planet_weather.bodies import Catalog, CelestialBody, default_catalog
from planet_weather.config import get_default_body_id, get_log_level_name, get_seed
from planet_weather.lunar import lunar_phase_state
from planet_weather.orbits import orbital_state
from planet_weather.record import write_table
from planet_weather.solar import format_solar_time, is_daytime, local_solar_time, sun_elevation_deg
from planet_weather.time_utils import parse_instant, utc_now
from planet_weather.weather import WeatherSnapshot, daily_forecast, hourly_forecast, simulate

logger = logging.getLogger(__name__)

_TIME_FORMAT = '%Y-%m-%d %H:%M:%S'


def _configure_logging(verbose: bool = False) -> None:
    """Configure logging for CLI (stderr, level from --verbose or PLANET_WEATHER_LOG)."""
    level = logging.DEBUG if verbose else logging.WARNING
    env_level = get_log_level_name()
    if env_level is not None:
        level = getattr(logging, env_level)
    logging.basicConfig(
        level=level,
        format='%(levelname)s: %(name)s: %(message)s',
        stream=sys.stderr,
    )


def _resolve_time(value: str | None) -> datetime | None:
    """Parse --time, defaulting to now; None (and a message on stderr) if unparseable."""
    if value is None or not value.strip():
        return utc_now()
    instant = parse_instant(value)
    if instant is None:
        print(f'Error: cannot parse time {value!r}', file=sys.stderr)
    return instant


def _resolve_body(catalog: Catalog, body_id: str) -> CelestialBody | None:
    """Look up --body; None (and a message on stderr) if not in the catalog."""
    body = catalog.get(body_id)
    if body is None:
        print(
            f'Error: unknown body {body_id!r}; use one of: ' + ', '.join(catalog.ids()),
            file=sys.stderr,
        )
    return body


def _resolve_longitude(value: str | None) -> float | None:
    if value is None:
        return 0.0
    longitude = parse_longitude(value)
    if longitude is None:
        print(f'Error: cannot parse longitude {value!r}', file=sys.stderr)
    return longitude


def _make_rng(seed: int | None) -> np.random.Generator:
    """Random generator from --seed, else PLANET_WEATHER_SEED, else fresh entropy."""
    if seed is None:
        seed = get_seed()
    return np.random.default_rng(seed)


def _optional(value: float | None, fmt: str, unit: str) -> str:
    if value is None:
        return 'N/A'
    return f'{value:{fmt}} {unit}'


def write_snapshot(stream: TextIO, body: CelestialBody, weather: WeatherSnapshot) -> None:
    """Write a weather snapshot as labeled lines."""
    stream.write(f'Body:        {body.name}\n')
    stream.write(f'Time (UTC):  {weather.timestamp.strftime(_TIME_FORMAT)}\n')
    stream.write(
        f'Temperature: {weather.temperature_c:.1f} C '
        f'(H {weather.high_c:.1f} / L {weather.low_c:.1f})\n'
    )
    stream.write(
        f'Wind:        {weather.wind_speed_kmh:.0f} km/h {weather.wind_cardinal} '
        f'({weather.wind_direction_deg:.0f} deg)\n'
    )
    stream.write(f"Pressure:    {_optional(weather.pressure_bar, '.3g', 'bar')}\n")
    stream.write(f"Visibility:  {_optional(weather.visibility_km, '.1f', 'km')}\n")
    stream.write(f'Condition:   {weather.condition.label}\n')
    stream.write(f'Solar flux:  {weather.solar_flux_w_m2:.1f} W/m^2 (UV {weather.uv_index})\n')
    source = 'simulated' if weather.is_simulated else 'live'
    stream.write(f'Source:      {source}\n')
    if weather.sol is not None:
        stream.write(f'Sol:         {weather.sol}\n')


def _bodies_cmd(args: argparse.Namespace) -> int:
    """List the catalog (bodies subcommand)."""
    catalog = default_catalog()
    rows = [
        [
            (body.id, ''),
            (body.body_type.value, ''),
            (body.gravity, '.3f'),
            (body.distance_from_sun_mkm, '.1f'),
            (body.solar_day_hours, '.2f'),
            (body.orbital_period_days, '.2f'),
            ('yes' if body.has_atmosphere else 'no', ''),
        ]
        for body in catalog
    ]
    write_table(
        sys.stdout,
        ['Body', 'Type', 'Gravity', 'Dist(Mkm)', 'Day(h)', 'Year(d)', 'Atmos'],
        rows,
        [8, 12, 8, 10, 9, 10, 5],
    )
    return 0


def _weather_cmd(args: argparse.Namespace) -> int:
    """Print simulated current weather (weather subcommand)."""
    body = _resolve_body(default_catalog(), args.body)
    instant = _resolve_time(args.time)
    longitude = _resolve_longitude(args.longitude)
    if body is None or instant is None or longitude is None:
        return 1
    weather = simulate(body, instant, longitude_deg=longitude, rng=_make_rng(args.seed))
    write_snapshot(sys.stdout, body, weather)
    return 0


def _hourly_cmd(args: argparse.Namespace) -> int:
    """Print a 24 planetary-hour forecast (hourly subcommand)."""
    body = _resolve_body(default_catalog(), args.body)
    instant = _resolve_time(args.time)
    if body is None or instant is None:
        return 1
    rows = [
        [
            (point.hour, 'd'),
            (point.timestamp.strftime(_TIME_FORMAT), ''),
            (point.temperature_c, '.1f'),
            (point.wind_speed_kmh, '.0f'),
            (point.condition.label, ''),
        ]
        for point in hourly_forecast(body, instant, rng=_make_rng(args.seed))
    ]
    write_table(
        sys.stdout,
        ['Hour', 'UTC', 'Temp(C)', 'Wind', 'Condition'],
        rows,
        [4, 19, 8, 6, 0],
    )
    return 0


def _daily_cmd(args: argparse.Namespace) -> int:
    """Print a 10-day forecast (daily subcommand)."""
    body = _resolve_body(default_catalog(), args.body)
    instant = _resolve_time(args.time)
    if body is None or instant is None:
        return 1
    rows = [
        [
            (point.date.isoformat(), ''),
            (point.high_c, '.1f'),
            (point.low_c, '.1f'),
            (point.precipitation_probability * 100, '.0f'),
            (point.condition.label, ''),
        ]
        for point in daily_forecast(body, instant, rng=_make_rng(args.seed))
    ]
    write_table(
        sys.stdout,
        ['Date', 'High(C)', 'Low(C)', 'Precip%', 'Condition'],
        rows,
        [10, 8, 8, 7, 0],
    )
    return 0


def _position_cmd(args: argparse.Namespace) -> int:
    """Print orrery position and spin (position subcommand)."""
    body = _resolve_body(default_catalog(), args.body)
    instant = _resolve_time(args.time)
    if body is None or instant is None:
        return 1
    state = orbital_state(body, instant, args.radius)
    sys.stdout.write(f'Body:        {body.name}\n')
    sys.stdout.write(f'Time (UTC):  {instant.strftime(_TIME_FORMAT)}\n')
    sys.stdout.write(f'Position:    x={state.x:.4f} y={state.y:.4f} z={state.z:.4f}\n')
    sys.stdout.write(f'Spin angle:  {state.spin_angle:.6f} rad\n')
    return 0


def _solar_cmd(args: argparse.Namespace) -> int:
    """Print local solar time, day/night and sun elevation (solar subcommand)."""
    body = _resolve_body(default_catalog(), args.body)
    instant = _resolve_time(args.time)
    longitude = _resolve_longitude(args.longitude)
    if body is None or instant is None or longitude is None:
        return 1
    fraction = local_solar_time(body, instant, longitude)
    day = 'day' if is_daytime(body, instant, longitude) else 'night'
    sys.stdout.write(f'Body:        {body.name}\n')
    sys.stdout.write(f'Solar time:  {format_solar_time(body, instant, longitude)} ({fraction:.4f})\n')
    sys.stdout.write(f'Daylight:    {day}\n')
    sys.stdout.write(f'Sun elev.:   {sun_elevation_deg(body, instant, longitude):.1f} deg\n')
    return 0


def _moon_cmd(args: argparse.Namespace) -> int:
    """Print lunar phase information (moon subcommand)."""
    instant = _resolve_time(args.time)
    if instant is None:
        return 1
    state = lunar_phase_state(instant)
    sys.stdout.write(f'Phase:       {state.name.value} ({state.phase:.3f})\n')
    sys.stdout.write(f'Illuminated: {state.illumination:.1f}%\n')
    sys.stdout.write(f'Next full:   {state.next_full_moon.strftime(_TIME_FORMAT)}\n')
    sys.stdout.write(f'Next new:    {state.next_new_moon.strftime(_TIME_FORMAT)}\n')
    return 0


def _add_common(parser: argparse.ArgumentParser, *, body: bool = True) -> None:
    if body:
        parser.add_argument(
            '--body',
            type=str,
            default=get_default_body_id(),
            help='Body id (e.g. earth, mars, sun); env: PLANET_WEATHER_BODY',
        )
    parser.add_argument('--time', type=str, default=None, help='UTC time; default now')
    parser.add_argument('-v', '--verbose', action='store_true', help='Show DEBUG logs')


def main(argv: list[str] | None = None) -> int:
    """Entry point for planet-weather CLI.

    Returns:
        Exit code 0 on success, 1 on failure.
    """
    parser = argparse.ArgumentParser(
        prog='planet-weather',
        description='Simulated weather, solar time, lunar phase and orrery positions.',
    )
    subparsers = parser.add_subparsers(dest='command', required=True)

    bodies_parser = subparsers.add_parser('bodies', help='List catalog bodies')
    bodies_parser.add_argument('-v', '--verbose', action='store_true', help='Show DEBUG logs')
    bodies_parser.set_defaults(func=_bodies_cmd)

    for name, func, help_text in (
        ('weather', _weather_cmd, 'Current simulated weather'),
        ('hourly', _hourly_cmd, '24 planetary-hour forecast'),
        ('daily', _daily_cmd, '10-day forecast'),
    ):
        sub = subparsers.add_parser(name, help=help_text)
        _add_common(sub)
        sub.add_argument(
            '--seed', type=int, default=None, help='Random seed; env: PLANET_WEATHER_SEED'
        )
        if name == 'weather':
            sub.add_argument(
                '--longitude', type=str, default=None, help='Longitude: degrees or "deg min sec"'
            )
        sub.set_defaults(func=func)

    position_parser = subparsers.add_parser('position', help='Orrery position and spin')
    _add_common(position_parser)
    position_parser.add_argument(
        '--radius', type=float, default=None, help="Visual orbit radius; default the body's"
    )
    position_parser.set_defaults(func=_position_cmd)

    solar_parser = subparsers.add_parser('solar', help='Local solar time and sun elevation')
    _add_common(solar_parser)
    solar_parser.add_argument(
        '--longitude', type=str, default=None, help='Longitude: degrees or "deg min sec"'
    )
    solar_parser.set_defaults(func=_solar_cmd)

    moon_parser = subparsers.add_parser('moon', help="Phase of Earth's moon")
    _add_common(moon_parser, body=False)
    moon_parser.set_defaults(func=_moon_cmd)

    args = parser.parse_args(argv)
    _configure_logging(getattr(args, 'verbose', False))
    return int(args.func(args))


def cli_main() -> NoReturn:
    """Entry point for console_scripts; calls main() and exits with its return code."""
    sys.exit(main())


if __name__ == '__main__':
    sys.exit(main())
