import argparse
import logging

from .calc import Coordinates, local_now, next_prayer
from .config import load_config
from .errors import AthanError
from .geo import geocode_city
from .methods import METHODS
from .render import render_schedule
from .timings import fetch_timings

logger = logging.getLogger(__name__)


def resolve_coordinates(args, config):
    if args.city:
        return geocode_city(
            args.city,
            config.get("google_maps_api_key"),
            url=config["geocode_url"],
            timeout=config.get("timeout")
        )
    if args.lat and args.lng:
        return Coordinates(lat=args.lat, lng=args.lng)
    return None


def handle_cli(args, parser, config):
    if args.list_methods:
        for key in METHODS:
            print(f"{key}: {METHODS[key]['name']}")
        return 0

    coords = resolve_coordinates(args, config)
    if coords is None:
        print("Please provide either -city or -lat and -lng")
        parser.print_usage()
        return 0

    now = local_now()
    method = args.method if args.method is not None else config["method"]
    day = fetch_timings(coords, method, now.date(), url=config["timings_url"], timeout=config.get("timeout"))
    upcoming = next_prayer(day.timings, now)
    logger.debug("Next prayer is %s at %s", upcoming.name, upcoming.at.isoformat())

    print(render_schedule(
        day,
        upcoming,
        show_hijri=args.hijri or bool(config.get("show_hijri")),
        time_format=config.get("time_format", "24h"),
        now=now
    ))
    return 0


def build_arg_parser():
    parser = argparse.ArgumentParser(description="Print today's Islamic prayer times")
    parser.add_argument("-city", default="", help="City name for prayer times")
    parser.add_argument("-lat", type=float, default=0.0, help="Latitude for prayer times")
    parser.add_argument("-lng", type=float, default=0.0, help="Longitude for prayer times")
    parser.add_argument("-method", type=int, help="Calculation method (default 19)")
    parser.add_argument("-hijri", action="store_true", help="Also print the Hijri date")
    parser.add_argument("-list-methods", dest="list_methods", action="store_true", help="List calculation methods")
    parser.add_argument("-v", "--verbose", action="store_true", help="Debug logging on stderr")
    return parser


def main(argv=None):
    parser = build_arg_parser()
    args = parser.parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s %(name)s %(levelname)s: %(message)s"
    )

    try:
        config = load_config()
        return handle_cli(args, parser, config)
    except AthanError as exc:
        logger.debug("Run failed", exc_info=True)
        print(f"Error: {exc}")
        return 0
