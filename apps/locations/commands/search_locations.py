#!/usr/bin/env python3
"""
Command-line access to the UK location search.
Usage: python -m apps.locations.commands.search_locations <command> [args] [--verbose]
"""

import argparse
import json
import logging
import sys

from apps.core.config import settings
from apps.locations.schemas.suggestion import LocationSearchResponse
from apps.locations.services.location_search import create_location_search_service


def _print_response(response: LocationSearchResponse, verbose: bool) -> int:
    if not response.success:
        error = response.error
        print(f"❌ {error.message} [{error.code}]")
        if error.details:
            print(f"   - {error.details}")
        return 1

    print(f"✅ {len(response.data)} results")
    for suggestion in response.data:
        print(f"   - {suggestion.name} ({suggestion.latitude:.4f}, {suggestion.longitude:.4f})")
        if verbose:
            print(f"     {suggestion.address} [{suggestion.metadata.category}]")
    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Search UK locations via Mapbox")
    parser.add_argument("--verbose", "-v", action="store_true", help="Verbose output and debug logging")
    parser.add_argument("--json", action="store_true", help="Print the raw response envelope as JSON")
    sub = parser.add_subparsers(dest="command", required=True)

    sub.add_parser("categories", help="List the location categories")

    category = sub.add_parser("category", help="Search one category")
    category.add_argument("category_id")

    famous = sub.add_parser("famous", help="Search famous places")
    famous.add_argument("query")

    search = sub.add_parser("search", help="General search across place types")
    search.add_argument("query")

    terminals = sub.add_parser("terminals", help="Terminals or platforms of an airport/station")
    terminals.add_argument("location_id")
    terminals.add_argument("--category", choices=["airport", "train_station"], default="airport")

    return parser


def main(argv=None) -> int:
    args = build_parser().parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else getattr(logging, settings.log_level.upper(), logging.INFO),
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
    )

    service = create_location_search_service()

    if args.command == "categories":
        categories = service.get_categories()
        if args.json:
            print(json.dumps([c.to_dict() for c in categories], indent=2))
            return 0
        print(f"📂 {len(categories)} categories:")
        for c in categories:
            print(f"   - {c.icon} {c.id}: {c.name}")
            if args.verbose:
                print(f"     {c.description} ({len(c.search_queries)} seed queries)")
        return 0

    if args.command == "category":
        response = service.search_by_category(args.category_id)
    elif args.command == "famous":
        response = service.search_famous_places(args.query)
    elif args.command == "search":
        response = service.enhanced_search(args.query)
    else:
        response = service.search_terminals(args.location_id, args.category)

    if args.json:
        print(response.model_dump_json(by_alias=True, indent=2))
        return 0 if response.success else 1
    return _print_response(response, args.verbose)


if __name__ == "__main__":
    sys.exit(main())
