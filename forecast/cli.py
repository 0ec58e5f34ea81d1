"""Command line entry point: fetch and print normalized weather as JSON."""
from __future__ import annotations

import argparse
import json
import logging
import sys
from typing import List, Optional

from .entities import Coordinate
from .normalizer import MalformedPayloadError
from .numbers import EmptyInputError
from .providers.base import TransportFault
from .services.weather import WeatherService
from .settings import ImproperlyConfigured, Settings


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="forecast", description="Fetch normalized Open-Meteo weather")
    parser.add_argument("kind", choices=("current", "week", "day", "overview"), help="Query to run")
    parser.add_argument("--lat", type=float, required=True, help="Latitude")
    parser.add_argument("--lon", type=float, required=True, help="Longitude")
    parser.add_argument("--date", type=str, help="Day to fetch (YYYY-MM-DD), required for 'day'")
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    if args.kind == "day" and not args.date:
        parser.error("--date is required for the 'day' query")

    try:
        settings = Settings.from_env()
    except ImproperlyConfigured as exc:
        print(f"configuration error: {exc}", file=sys.stderr)
        return 2
    logging.basicConfig(level=getattr(logging, settings.log_level, logging.INFO))

    try:
        coordinate = Coordinate(args.lat, args.lon)
    except ValueError as exc:
        parser.error(str(exc))

    service = WeatherService.from_settings(settings)
    try:
        if args.kind == "current":
            payload = service.load_current(coordinate).as_dict()
        elif args.kind == "week":
            payload = service.load_week(coordinate).as_dict()
        elif args.kind == "day":
            payload = service.load_day(coordinate, args.date).as_dict()
        else:
            payload = service.load_overview(coordinate).as_dict()
    except TransportFault as exc:
        print(f"request failed: {exc}", file=sys.stderr)
        return 1
    except (EmptyInputError, MalformedPayloadError) as exc:
        print(f"no data: {exc}", file=sys.stderr)
        return 1
    except KeyError as exc:
        print(f"unexpected response: missing {exc}", file=sys.stderr)
        return 1

    sys.stdout.write(json.dumps(payload))
    sys.stdout.write("\n")
    return 0
