"""Command-line interface for serving and for offline searches."""

import asyncio
import json
import sys
from dataclasses import asdict

from train_search.adapters.config import AppConfig, TrainCatalogLoader
from train_search.adapters.storage import InMemoryTrainRepository
from train_search.application.services import RouteSearchService
from train_search.domain.errors import TrainSearchError
from train_search.domain.models import ItineraryResult


def _print_results(
    results: list[ItineraryResult], source: str, destination: str, as_json: bool
) -> None:
    if as_json:
        print(json.dumps([asdict(result) for result in results], indent=2))
        return

    if not results:
        print(f"No direct trains from {source} to {destination}.")
        return

    print(f"Direct trains from {source} to {destination}:")
    print("-" * 60)
    for result in results:
        print(
            f"  {result.train:<20} {result.starting} -> {result.reaching}"
            f"  distance {result.distance}  price {result.price}"
        )


async def search_catalog(
    trains_file: str, source: str, destination: str
) -> list[ItineraryResult]:
    """Search a TOML train catalog without starting the server."""
    config = AppConfig(trains_file=trains_file)
    train_repo = InMemoryTrainRepository(TrainCatalogLoader.load(config))
    return await RouteSearchService(train_repo).search(source, destination)


async def main(argv: list[str] | None = None) -> int:
    """Main CLI entry point."""
    import argparse

    parser = argparse.ArgumentParser(
        description="Direct train fare and timing search",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Serve the HTTP API (configured through environment variables / .env)
  train-search serve

  # Search a catalog file without starting the server
  train-search search A C --trains trains.toml

  # Same, as JSON
  train-search search A C --trains trains.toml --json
        """,
    )

    subparsers = parser.add_subparsers(dest="command", help="Command to execute")

    subparsers.add_parser("serve", help="Serve the HTTP API")

    search_parser = subparsers.add_parser("search", help="Search a train catalog")
    search_parser.add_argument("source", help="Station to board at")
    search_parser.add_argument("destination", help="Station to leave the train at")
    search_parser.add_argument(
        "--trains", required=True, help="Path to a TOML catalog of [[trains]]"
    )
    search_parser.add_argument("--json", action="store_true", help="Output as JSON")

    args = parser.parse_args(argv)

    if args.command == "serve":
        from train_search.main import main as serve

        await serve()
        return 0

    if args.command == "search":
        if not args.source or not args.destination:
            print("Error: source and destination must not be empty", file=sys.stderr)
            return 2
        try:
            results = await search_catalog(args.trains, args.source, args.destination)
        except (FileNotFoundError, ValueError, TrainSearchError) as e:
            print(f"Error: {e}", file=sys.stderr)
            return 1
        _print_results(results, args.source, args.destination, args.json)
        return 0

    parser.print_help()
    return 2


def run() -> None:
    """Console script entry point."""
    sys.exit(asyncio.run(main()))


if __name__ == "__main__":
    run()
