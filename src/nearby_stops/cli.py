"""CLI for ranking and searching transit stops."""

import argparse
import asyncio
import json
import logging
import sys
from typing import Any

import aiohttp

from nearby_stops.adapters.config import AppConfig
from nearby_stops.adapters.feeds import create_stop_feed
from nearby_stops.adapters.location import ConfiguredLocationProvider
from nearby_stops.adapters.terminal import StopListFormatter
from nearby_stops.application.services import (
    NearbyStopsController,
    NearbyStopsPipeline,
    StopSearchController,
)
from nearby_stops.domain.models import (
    DISTANCE_UNITS,
    NearbyStopsView,
    QueryChanged,
    StopSearchView,
)

logger = logging.getLogger(__name__)


def configure_logging(level: str = "INFO") -> None:
    """Configure root logging on stderr."""
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
        stream=sys.stderr,
    )


def build_config(args: argparse.Namespace) -> AppConfig:
    """Build configuration from environment, optional TOML file and CLI flags."""
    config = AppConfig()
    if getattr(args, "config", None):
        config.config_file = args.config
        config.load_toml_overrides()
    if getattr(args, "feed_url", None):
        config.feed_url = args.feed_url
        config.feed_provider = "http"
    if getattr(args, "feed_file", None):
        config.feed_file = args.feed_file
        config.feed_provider = "file"
    # An explicit provider wins over the one implied by --feed-url / --feed-file
    if getattr(args, "provider", None):
        config.feed_provider = args.provider
    if getattr(args, "units", None):
        config.unit_mode = args.units
    return config


async def nearby_stops(
    config: AppConfig,
    latitude: float | None = None,
    longitude: float | None = None,
    show_more: int = 0,
    expand: bool = False,
) -> NearbyStopsView:
    """Rank the stops around a position and apply the requested disclosure.

    Args:
        config: Application configuration.
        latitude: Latitude of the position, defaults to the configured one.
        longitude: Longitude of the position, defaults to the configured one.
        show_more: How many times to reveal one more stop.
        expand: Reveal every stop.

    Returns:
        The resulting view, with ``error`` set if the refresh failed.
    """
    async with aiohttp.ClientSession() as session:
        location_provider = ConfiguredLocationProvider(
            latitude if latitude is not None else config.latitude,
            longitude if longitude is not None else config.longitude,
            permission_granted=config.location_permission_granted,
        )
        pipeline = NearbyStopsPipeline(
            location_provider,
            create_stop_feed(config, session),
            unit=config.unit_mode,  # type: ignore[arg-type]
        )
        controller = NearbyStopsController(pipeline, config.disclosure_settings())
        await controller.refresh()

    for _ in range(show_more):
        controller.show_more()
    while expand and controller.disclosure.can_show_more:
        controller.show_more()
    return controller.view()


async def search_stops(config: AppConfig, query: str) -> StopSearchView:
    """Filter all stops by a free-text query."""
    async with aiohttp.ClientSession() as session:
        controller = StopSearchController(create_stop_feed(config, session))
        await controller.load()
    return await controller.handle(QueryChanged(query))


def _nearby_to_json(view: NearbyStopsView) -> dict[str, Any]:
    return {
        "status": view.status,
        "total": view.total,
        "canShowMore": view.can_show_more,
        "canCollapse": view.can_collapse,
        "stops": [r.to_feed_dict() for r in view.visible],
    }


def _search_to_json(view: StopSearchView) -> dict[str, Any]:
    return {
        "status": view.status,
        "query": view.query,
        "stops": [s.to_feed_dict() for s in view.results],
    }


def _add_feed_arguments(parser: argparse.ArgumentParser) -> None:
    parser.add_argument("--config", help="TOML configuration file")
    parser.add_argument("--provider", choices=["http", "mvg", "file"], help="Stop feed to use")
    parser.add_argument("--feed-url", help="URL of the JSON stop feed")
    parser.add_argument("--feed-file", help="Path of a JSON stop file")
    parser.add_argument("--json", action="store_true", help="Output as JSON")


def build_parser() -> argparse.ArgumentParser:
    """Argument parser for the ``nearby-stops`` command."""
    parser = argparse.ArgumentParser(
        description="Find nearby transit stops and search the stop list",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  nearby-stops nearby --lat 1.3 --lon 103.8 --feed-file stops.json
  nearby-stops nearby --lat 48.137 --lon 11.575 --provider mvg --expand
  nearby-stops search "orchard" --feed-url https://example.firebaseio.com/busStops.json
        """,
    )
    subparsers = parser.add_subparsers(dest="command", help="Command to run")

    nearby_parser = subparsers.add_parser("nearby", help="List stops nearest to a position")
    nearby_parser.add_argument("--lat", type=float, help="Latitude in degrees")
    nearby_parser.add_argument("--lon", type=float, help="Longitude in degrees")
    nearby_parser.add_argument("--units", choices=list(DISTANCE_UNITS), help="Distance unit")
    nearby_parser.add_argument(
        "--show-more", type=int, default=0, help="Reveal this many additional stops"
    )
    nearby_parser.add_argument("--expand", action="store_true", help="Show all stops")
    _add_feed_arguments(nearby_parser)

    search_parser = subparsers.add_parser("search", help="Search stops by name or address")
    search_parser.add_argument("query", help="Text to look for")
    _add_feed_arguments(search_parser)

    return parser


async def main(argv: list[str] | None = None) -> None:
    """Main CLI entry point."""
    parser = build_parser()
    args = parser.parse_args(argv)

    if not args.command:
        parser.print_help()
        sys.exit(1)

    formatter = StopListFormatter()
    try:
        config = build_config(args)
        configure_logging(config.log_level)

        if args.command == "nearby":
            view = await nearby_stops(
                config, args.lat, args.lon, show_more=args.show_more, expand=args.expand
            )
            if view.error is not None and view.status == "unavailable":
                print(f"Error: {view.error.reason}", file=sys.stderr)
                sys.exit(1)
            if args.json:
                print(json.dumps(_nearby_to_json(view), indent=2, ensure_ascii=False))
            else:
                print("\n".join(formatter.format_nearby(view)))

        elif args.command == "search":
            search_view = await search_stops(config, args.query)
            if search_view.error is not None:
                print(f"Error: {search_view.error.reason}", file=sys.stderr)
                sys.exit(1)
            if args.json:
                print(json.dumps(_search_to_json(search_view), indent=2, ensure_ascii=False))
            else:
                if not search_view.results:
                    print(f"No stops found for '{args.query}'", file=sys.stderr)
                    sys.exit(1)
                print("\n".join(formatter.format_search(search_view)))

    except KeyboardInterrupt:
        print("\nInterrupted.", file=sys.stderr)
        sys.exit(1)
    except (ValueError, FileNotFoundError) as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)


def cli_main() -> None:
    """Synchronous entry point for the CLI command."""
    asyncio.run(main())


if __name__ == "__main__":
    cli_main()
