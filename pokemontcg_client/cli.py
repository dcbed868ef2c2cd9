#!/usr/bin/env python3
"""
Command line access to the Pokemon TCG API.

Examples:
    pokemontcg find cards xy1-1
    pokemontcg where cards q=name:charizard pageSize=50
    pokemontcg all rarities
"""

import argparse
import asyncio
import json
import logging
import sys
from typing import Any, Dict, List, Optional

import httpx
from dotenv import load_dotenv
from pydantic import BaseModel

from .config import Settings
from .models.errors import InvalidArgument, MissingArgument, PokemonTCGError
from .models.query import QueryOutcome
from .models.resource import ResourceKind
from .services.client import Client

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="pokemontcg", description="Query the Pokemon TCG API")
    parser.add_argument("--api-key", help="API key (default: POKEMON_TCG_API_KEY)")
    parser.add_argument("--env-file", help="Load environment variables from this file first")
    parser.add_argument("--single-page", action="store_true", help="Fetch only the first page of collections")
    parser.add_argument("--debug", action="store_true", help="Enable debug logging")

    resources = [kind.value for kind in ResourceKind]
    subparsers = parser.add_subparsers(dest="command", required=True)

    find = subparsers.add_parser("find", help="Find one card or set by id")
    find.add_argument("resource", choices=resources)
    find.add_argument("id")

    where = subparsers.add_parser("where", help="Fetch everything matching key=value filters")
    where.add_argument("resource", choices=resources)
    where.add_argument("filters", nargs="*", metavar="key=value")

    everything = subparsers.add_parser("all", help="Fetch a whole collection")
    everything.add_argument("resource", choices=resources)

    return parser


def parse_filters(pairs: List[str]) -> Dict[str, str]:
    """
    Turn ["q=name:pikachu", "pageSize=10"] into a filter mapping.

    Raises:
        MissingArgument: if no filters were given
        InvalidArgument: if a pair has no '=' or an empty key
    """
    if not pairs:
        raise MissingArgument(arg="filters")

    filters = {}
    for pair in pairs:
        key, sep, value = pair.partition("=")
        if not sep or not key:
            raise InvalidArgument(arg=pair)
        filters[key] = value
    return filters


def _dump(item: BaseModel) -> Any:
    return item.model_dump(mode="json", by_alias=True, exclude_none=True)


async def run(args: argparse.Namespace, transport: Optional[httpx.AsyncBaseTransport] = None) -> int:
    filters = parse_filters(args.filters) if args.command == "where" else None
    settings = Settings()
    if args.single_page:
        settings.fetch_all_pages = False

    if args.api_key:
        client = Client(args.api_key, settings=settings, transport=transport)
    else:
        client = Client.from_env(settings=settings, transport=transport)

    async with client:
        if args.command == "find":
            result = await client.lookup(args.resource, args.id)
            if not result.ok:
                if result.outcome == QueryOutcome.UNSUPPORTED:
                    print(f"{args.resource} cannot be looked up by id", file=sys.stderr)
                else:
                    print(f"{args.resource}/{args.id}: {result.outcome.value}", file=sys.stderr)
                return 1
            print(json.dumps(_dump(result.data), indent=2, ensure_ascii=False))
            return 0

        result = await client.collect(args.resource, filters)
        print(json.dumps([_dump(item) for item in result.data], indent=2, ensure_ascii=False))
        if not result.complete:
            logger.warning(f"Stopped after {result.pages} page(s): {result.outcome.value} ({result.detail})")
            return 1
        return 0


def main(argv: Optional[List[str]] = None, transport: Optional[httpx.AsyncBaseTransport] = None) -> int:
    args = build_parser().parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.debug else logging.INFO,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
    )
    if args.env_file:
        load_dotenv(args.env_file, override=True)

    try:
        return asyncio.run(run(args, transport=transport))
    except PokemonTCGError as e:
        print(f"error: {e}", file=sys.stderr)
        return 2


if __name__ == "__main__":
    sys.exit(main())
