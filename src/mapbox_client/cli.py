"""
Command-line interface for the application.

This module provides the ``mapbox-client`` entry point.
"""

from __future__ import annotations

import argparse
import logging
import sys
from collections.abc import Iterator
from contextlib import contextmanager

import requests

from mapbox_client import __version__
from mapbox_client.client import Client
from mapbox_client.config import get_settings
from mapbox_client.errors import MapboxError
from mapbox_client.schemas import DurationRequest
from mapbox_client.services.http import create_session

logger = logging.getLogger(__name__)

DEFAULT_LAT = 38.8971
DEFAULT_LON = -77.0366


def parse_lon_lat(value: str) -> list[float]:
    """Parse ``"lon,lat"`` from the command line."""
    parts = value.split(",")
    if len(parts) != 2:
        raise argparse.ArgumentTypeError(f"expected LON,LAT, got {value!r}")
    try:
        return [float(p) for p in parts]
    except ValueError as e:
        raise argparse.ArgumentTypeError(f"expected LON,LAT, got {value!r}") from e


def create_parser() -> argparse.ArgumentParser:
    """Create the argument parser for the CLI."""
    parser = argparse.ArgumentParser(
        prog="mapbox-client",
        description="Mapbox geocoding and driving-duration lookups",
    )
    parser.add_argument(
        "-v",
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )
    parser.add_argument(
        "--debug",
        action="store_true",
        help="Enable debug logging",
    )

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    rev_parser = subparsers.add_parser("revgeocode", help="Reverse-geocode a coordinate")
    rev_parser.add_argument("--lat", type=float, default=DEFAULT_LAT, help="latitude")
    rev_parser.add_argument("--lon", type=float, default=DEFAULT_LON, help="longitude")

    lookup_parser = subparsers.add_parser("lookup", help="Look up a place by name")
    lookup_parser.add_argument("place", help='Place name, e.g. "Los Angeles"')

    dur_parser = subparsers.add_parser("durations", help="Driving-duration matrix")
    dur_parser.add_argument(
        "coordinates",
        nargs="+",
        type=parse_lon_lat,
        metavar="LON,LAT",
        help="Two or more locations",
    )

    subparsers.add_parser("info", help="Show client configuration")

    return parser


@contextmanager
def open_client() -> Iterator[Client]:
    """Client with a fresh session, closed when the block exits."""
    settings = get_settings()
    session = create_session(timeout=settings.timeout)
    try:
        yield Client(session=session)
    finally:
        session.close()


def cmd_revgeocode(args: argparse.Namespace) -> int:
    """Handle the 'revgeocode' command."""
    with open_client() as client:
        resp = client.lookup_lat_lon(args.lat, args.lon)
    print(resp.model_dump_json(indent=2))
    return 0


def cmd_lookup(args: argparse.Namespace) -> int:
    """Handle the 'lookup' command."""
    with open_client() as client:
        resp = client.lookup_place(args.place)
    for i, feat in enumerate(resp.features):
        print(f"Match: #{i} Name: {feat.place_name!r} Relevance: {feat.relevance} Center: {feat.center}")
        for j, ctx in enumerate(feat.context):
            print(f"\tContext: #{j}: {ctx.id} {ctx.text}")
    return 0


def cmd_durations(args: argparse.Namespace) -> int:
    """Handle the 'durations' command."""
    if len(args.coordinates) < 2:
        print("Error: need at least two locations", file=sys.stderr)
        return 1

    with open_client() as client:
        resp = client.request_duration(DurationRequest(coordinates=args.coordinates))
    print(resp.model_dump_json(indent=2))
    return 0


def cmd_info(_args: argparse.Namespace) -> int:
    """Handle the 'info' command."""
    settings = get_settings()
    print(f"Application: {settings.app_name}")
    print(f"Version: {__version__}")
    print(f"API version: {settings.api_version}")
    print(f"Base URL: {settings.base_url}")
    print(f"API key set: {'yes' if settings.api_key else 'no'}")
    return 0


def main() -> int:
    """Main entry point for the CLI."""
    parser = create_parser()
    args = parser.parse_args()

    logging.basicConfig(
        level=logging.DEBUG if args.debug else logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    if args.command is None:
        parser.print_help()
        return 0

    commands = {
        "revgeocode": cmd_revgeocode,
        "lookup": cmd_lookup,
        "durations": cmd_durations,
        "info": cmd_info,
    }

    handler = commands.get(args.command)
    if not handler:
        parser.print_help()
        return 1

    try:
        return handler(args)
    except (MapboxError, requests.RequestException) as e:
        logger.debug("Command %s failed", args.command, exc_info=True)
        print(f"Error: {e}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    sys.exit(main())
