"""Command-line interface for searching stations near a place."""

import asyncio
import json
import sys
from typing import Any

import aiohttp

from nearby_departures.adapters.config import AppConfig
from nearby_departures.adapters.search_request_builder import build_search_request
from nearby_departures.adapters.serialization import serialize_stations
from nearby_departures.bootstrap import create_search_service
from nearby_departures.domain.exceptions import (
    GeocodeError,
    InvalidInputError,
    LocatorError,
)
from nearby_departures.domain.models import EnrichedStation, RouteDeparture, SearchResult
from nearby_departures.logging_setup import configure_logging


def _format_route(route: RouteDeparture) -> str:
    """Format a route as "LINE at TIME"."""
    if route.departure_instant is not None:
        when = route.departure_instant.strftime("%H:%M")
    else:
        when = route.raw_text or "?"
    return f"{route.line} at {when}"


def _format_station(index: int, station: EnrichedStation) -> list[str]:
    """Format one station as indented text lines."""
    distance = f" [{station.distance_km:.2f} km]" if station.distance_km is not None else ""
    lines = [f"{index:2d}. {station.name}{distance}", f"    {station.station.description}"]

    if station.next_departure is not None:
        lines.append(f"    Next: {_format_route(station.next_departure)}")
    elif station.enrichment_failed:
        lines.append(f"    No upcoming departures (lookup failed: {station.enrichment_error})")
    else:
        lines.append("    No upcoming departures")

    if station.routes:
        lines.append(f"    Routes: {', '.join(_format_route(r) for r in station.routes)}")
    return lines


def format_result(result: SearchResult) -> str:
    """Format a search result for terminal output."""
    header = (
        f"Stations near {result.location} "
        f"({result.origin.latitude:.4f}, {result.origin.longitude:.4f}): "
        f"{len(result.visible)} of {len(result.stations)} shown"
    )
    lines = [header]
    if result.degraded:
        lines.append("Some stations could not be enriched with departures.")
    for index, station in enumerate(result.visible, start=1):
        lines.extend(_format_station(index, station))
    return "\n".join(lines)


async def _handle_search_command(args: Any, config: AppConfig) -> None:
    """Run one search and print it."""
    request = build_search_request(
        location=args.location,
        ref_lat=args.ref_lat,
        ref_lng=args.ref_lng,
        max_distance_km=args.max_distance_km,
        name_contains=args.name,
    )

    timeout = aiohttp.ClientTimeout(total=config.http_timeout_seconds)
    async with aiohttp.ClientSession(timeout=timeout) as session:
        result = await create_search_service(config, session).search(request)

    if args.json:
        print(json.dumps(serialize_stations(result.visible), indent=2, ensure_ascii=False))
    else:
        print(format_result(result))


def _setup_argparse() -> Any:
    """Set up the argument parser."""
    import argparse

    parser = argparse.ArgumentParser(
        description="Find transit stations near a place with their next departures",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Stations around the default place
  nearby-departures search

  # Stations around an address, measured from your position, within 2 km
  nearby-departures search "Downtown Athens, GA" --ref-lat 33.9519 --ref-lng -83.3777 \\
      --max-distance-km 2

  # Only stations with "Campus" in their name, as JSON
  nearby-departures search --name campus --json

  # Serve the JSON API
  nearby-departures serve

Requires GOOGLE_MAPS_API_KEY in the environment or .env file.
        """,
    )
    parser.add_argument("--config", help="Path to TOML configuration file")

    subparsers = parser.add_subparsers(dest="command", help="Command to execute")

    search_parser = subparsers.add_parser("search", help="Search stations near a place")
    search_parser.add_argument(
        "location", nargs="?", default=None, help="Place to search around (default from config)"
    )
    search_parser.add_argument("--ref-lat", type=float, help="Latitude distances are measured from")
    search_parser.add_argument(
        "--ref-lng", type=float, help="Longitude distances are measured from"
    )
    search_parser.add_argument(
        "--max-distance-km", type=float, help="Only show stations within this distance"
    )
    search_parser.add_argument("--name", help="Only show stations whose name contains this text")
    search_parser.add_argument("--json", action="store_true", help="Output as JSON")

    subparsers.add_parser("serve", help="Serve the JSON API")

    return parser


def _load_config(config_file: str | None) -> AppConfig:
    """Load configuration, applying an explicit TOML file if given."""
    config = AppConfig(config_file=config_file) if config_file else AppConfig()
    config.load_toml_overrides()
    return config


async def main() -> None:
    """Main CLI entry point."""
    parser = _setup_argparse()
    args = parser.parse_args()

    if not args.command:
        parser.print_help()
        sys.exit(1)

    try:
        config = _load_config(args.config)
    except (FileNotFoundError, ValueError) as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)
    configure_logging("WARNING" if args.command == "search" else config.log_level)

    if args.command == "serve":
        from nearby_departures.main import main as serve

        await serve(config)
        return

    try:
        await _handle_search_command(args, config)
    except InvalidInputError as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(2)
    except GeocodeError as e:
        print(f"Geocoding failed: {e}", file=sys.stderr)
        sys.exit(1)
    except LocatorError as e:
        print(f"Failed to fetch stations: {e}", file=sys.stderr)
        sys.exit(1)
    except KeyboardInterrupt:
        print("\nInterrupted by user", file=sys.stderr)
        sys.exit(1)


def cli_main() -> None:
    """Synchronous entry point for the CLI command."""
    asyncio.run(main())


if __name__ == "__main__":
    cli_main()
