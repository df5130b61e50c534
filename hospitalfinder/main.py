"""Main entry point for hospitalfinder.

Finds hospitals from OpenStreetMap (Overpass API) data:

1. Nearby search (no query):
   - starting position from --lat/--lon or the public IP (--locate-ip)
   - hospitals within --radius metres, nearest first
2. Text search (query given):
   - hospitals inside the configured bounding box whose address
     mentions the query

Without a query on an interactive terminal the initial nearby search is
followed by a prompt; an empty line repeats the nearby search.
"""

import argparse
import json
import sys

import structlog
from dotenv import load_dotenv

from hospitalfinder.config import FinderSettings
from hospitalfinder.exceptions import ConfigurationError
from hospitalfinder.tools.location_tools import (
    IPLocationProvider,
    StaticLocationProvider,
    UnavailableLocationProvider,
)
from hospitalfinder.utils.display import render_state
from hospitalfinder.workflows import FinderState, HospitalLocatorWorkflow, state_to_dict

logger = structlog.get_logger(__name__)


def configure_logging(level: int) -> None:
    structlog.configure(
        wrapper_class=structlog.make_filtering_bound_logger(level),
        logger_factory=structlog.PrintLoggerFactory(file=sys.stderr),
    )


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="hospitalfinder",
        description="Find nearby hospitals using OpenStreetMap data",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  hospitalfinder --lat 28.6139 --lon 77.2090
    Ten nearest hospitals within 10 km

  hospitalfinder --locate-ip --radius 5000
    Nearest hospitals within 5 km of your approximate IP location

  hospitalfinder "Dwarka"
    Hospitals whose address mentions Dwarka
        """,
    )
    parser.add_argument(
        "query",
        nargs="?",
        default="",
        help="Text to match against hospital addresses (if omitted, searches nearby)",
    )
    parser.add_argument("--lat", type=float, help="Latitude of the starting position")
    parser.add_argument("--lon", type=float, help="Longitude of the starting position")
    parser.add_argument(
        "--locate-ip",
        action="store_true",
        help="Resolve the starting position from the public IP address",
    )
    parser.add_argument("--radius", type=int, help="Nearby search radius in metres")
    parser.add_argument("--json", action="store_true", help="Print results as JSON")
    return parser


def _location_provider(args: argparse.Namespace, settings: FinderSettings):
    if args.lat is not None and args.lon is not None:
        return StaticLocationProvider(args.lat, args.lon)
    if args.locate_ip:
        return IPLocationProvider(settings)
    return UnavailableLocationProvider()


def _show(state: FinderState, as_json: bool) -> None:
    if as_json:
        print(json.dumps(state_to_dict(state), indent=2, ensure_ascii=False))
        return
    text = render_state(state)
    if text:
        print(text)


def run_interactive(workflow: HospitalLocatorWorkflow, as_json: bool = False) -> FinderState:
    """Prompt for searches until the user quits; returns the last state."""
    print("\n" + "=" * 60)
    print("hospitalfinder — type an area to search, or press Enter for nearby")
    print("Type 'q', 'quit' or 'exit' to end the session")
    print("-" * 60 + "\n")

    while True:
        try:
            user_input = input("Search: ").strip()
        except (EOFError, KeyboardInterrupt):
            print("\nBye!")
            break

        if user_input.lower() in ("q", "quit", "exit"):
            print("Bye!")
            break

        state = workflow.search(user_input)
        _show(state, as_json)
        print()

    return workflow.state


def main(argv=None) -> int:
    load_dotenv()
    parser = build_parser()
    args = parser.parse_args(argv)
    if (args.lat is None) != (args.lon is None):
        parser.error("--lat and --lon must be given together")

    try:
        settings = FinderSettings.from_env()
        if args.radius is not None:
            settings = FinderSettings(**{**settings.model_dump(), "radius_m": args.radius})
        provider = _location_provider(args, settings)
    except (ConfigurationError, ValueError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 2

    configure_logging(settings.log_level_num)

    with HospitalLocatorWorkflow(settings=settings, location_provider=provider) as workflow:
        if args.query.strip():
            state = workflow.search(args.query)
            _show(state, args.json)
            return 1 if state["error"] else 0

        state = workflow.start()
        _show(state, args.json)
        if sys.stdin.isatty() and not args.json:
            state = run_interactive(workflow)
        return 1 if state["error"] else 0


if __name__ == "__main__":
    raise SystemExit(main())
