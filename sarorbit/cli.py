# -*- coding: utf-8 -*-
"""
Command Line - ``sarorbit`` entry point.

Subcommands::

    sarorbit llt2rat master.PRM [-bos | -bod] [--led FILE] [-i IN] [-o OUT] [-v]
    sarorbit ldr-orbit master.PRM [--led FILE] [--earth-radius RE] [-o OUT] [-v]
    sarorbit get-prm file.PRM name

``llt2rat`` reads ``lon lat elevation`` triples (stdin by default) and writes
``range azimuth elevation lon lat`` records as text, or as binary float32
(``-bos``) or float64 (``-bod``). ``ldr-orbit`` fills the orbit geometry
fields of a PRM file. ``get-prm`` prints one PRM value.

Exit status is 0 on success and 1 on setup errors (missing or malformed
PRM and orbit files); usage errors exit with status 2.

License
-------
MIT License
Copyright (c) 2024 geoint.org
"""

import argparse
import contextlib
import logging
import os
import sys
from typing import List, Optional

from sarorbit import __version__
from sarorbit.exceptions import SarOrbitError
from sarorbit.geolocation.llt2rat import Geolocator
from sarorbit.io.led import read_led
from sarorbit.io.points import read_ground_points
from sarorbit.io.prm import PRM, read_prm, write_prm, get_prm_value
from sarorbit.io.sinks import OutputFormat, open_sink
from sarorbit.orbit.height_velocity import update_orbit_geometry
from sarorbit.utils.config import ProcessingConfig
from sarorbit.utils.logging_config import configure_logging

logger = logging.getLogger(__name__)


def resolve_led_path(prm_path: str, prm: PRM, led: Optional[str] = None) -> str:
    """
    Orbit file for a PRM.

    An explicit ``led`` path wins. Otherwise the PRM ``led_file`` is used,
    relative to the directory holding the PRM file.
    """
    if led:
        return led
    if not prm.led_file:
        raise SarOrbitError(f"{prm_path} has no led_file entry; use --led")
    if os.path.isabs(prm.led_file):
        return prm.led_file
    return os.path.join(os.path.dirname(os.path.abspath(prm_path)), prm.led_file)


def _run_llt2rat(args: argparse.Namespace) -> int:
    config = ProcessingConfig(verbose=args.verbose)
    prm = read_prm(args.prm)
    orbit = read_led(resolve_led_path(args.prm, prm, args.led))
    geolocator = Geolocator(prm, orbit, config)

    with contextlib.ExitStack() as stack:
        infile = stack.enter_context(open(args.input, 'r')) if args.input else sys.stdin
        outfile = stack.enter_context(open(args.output, 'wb')) if args.output else sys.stdout.buffer
        sink = open_sink(args.output_format, outfile)
        for coord in geolocator.geolocate(read_ground_points(infile)):
            sink.write(coord.as_record())
        sink.flush()

    logger.info("Wrote %d records (%s)", sink.count, sink.format.value)
    return 0


def _run_ldr_orbit(args: argparse.Namespace) -> int:
    config = ProcessingConfig(verbose=args.verbose)
    prm = read_prm(args.prm)
    if args.earth_radius is not None:
        prm = prm.replace(earth_radius=args.earth_radius)
    orbit = read_led(resolve_led_path(args.prm, prm, args.led))

    updated = update_orbit_geometry(prm, orbit, config)

    if args.output:
        with open(args.output, 'w') as f:
            write_prm(updated, f)
    else:
        write_prm(updated, sys.stdout)
    return 0


def _run_get_prm(args: argparse.Namespace) -> int:
    print(get_prm_value(args.prm, args.name))
    return 0


def build_parser() -> argparse.ArgumentParser:
    """Argument parser for the ``sarorbit`` command."""
    parser = argparse.ArgumentParser(
        prog='sarorbit',
        description='SAR orbit geometry and ground-to-radar geolocation.',
    )
    parser.add_argument('--version', action='version', version=f'%(prog)s {__version__}')
    subparsers = parser.add_subparsers(dest='command', required=True)

    p = subparsers.add_parser(
        'llt2rat',
        help='map lon/lat/elevation to range/azimuth pixels',
        description='Read "lon lat elevation" triples and write '
                    '"range azimuth elevation lon lat" records.',
    )
    p.add_argument('prm', help='master PRM file')
    fmt = p.add_mutually_exclusive_group()
    fmt.add_argument('-bos', dest='output_format', action='store_const',
                     const=OutputFormat.FLOAT32, help='binary float32 output')
    fmt.add_argument('-bod', dest='output_format', action='store_const',
                     const=OutputFormat.FLOAT64, help='binary float64 output')
    p.set_defaults(output_format=OutputFormat.ASCII)
    p.add_argument('--led', help='orbit file (default: led_file from the PRM)')
    p.add_argument('-i', '--input', help='ground point file (default: stdin)')
    p.add_argument('-o', '--output', help='output file (default: stdout)')
    p.add_argument('-v', '--verbose', action='store_true', help='debug logging')
    p.set_defaults(func=_run_llt2rat)

    p = subparsers.add_parser(
        'ldr-orbit',
        help='compute SC_vel, earth_radius, SC_height* and orbdir',
        description='Fill the orbit geometry fields of a PRM file.',
    )
    p.add_argument('prm', help='PRM file')
    p.add_argument('--led', help='orbit file (default: led_file from the PRM)')
    p.add_argument('--earth-radius', type=float, dest='earth_radius',
                   help='use this earth radius (m) instead of the computed one')
    p.add_argument('-o', '--output', help='updated PRM file (default: stdout)')
    p.add_argument('-v', '--verbose', action='store_true', help='debug logging')
    p.set_defaults(func=_run_ldr_orbit)

    p = subparsers.add_parser('get-prm', help='print one PRM value')
    p.add_argument('prm', help='PRM file')
    p.add_argument('name', help='parameter name')
    p.set_defaults(func=_run_get_prm, verbose=False)

    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """Run the command line; returns the exit status."""
    parser = build_parser()
    args = parser.parse_args(argv)

    configure_logging(logging.DEBUG if args.verbose else logging.WARNING)

    try:
        return args.func(args)
    except (SarOrbitError, ValueError, OSError) as exc:
        logger.error("%s: %s", args.command, exc)
        return 1


if __name__ == '__main__':
    sys.exit(main())
