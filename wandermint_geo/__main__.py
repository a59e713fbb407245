"""CLI entrypoint for wandermint_geo (developer tool for poking at resolution)."""

from __future__ import annotations

import argparse
import asyncio
import json

from wandermint_geo.logging_config import setup_logging
from wandermint_geo.models import Candidate


def main() -> None:
    parser = argparse.ArgumentParser(prog="wandermint-geo")
    parser.add_argument("-v", "--verbose", action="store_true", help="debug logging")
    parser.add_argument("--json-logs", action="store_true", default=None)
    sub = parser.add_subparsers(dest="command", required=True)

    resolve_parser = sub.add_parser("resolve")
    resolve_parser.add_argument("query")
    resolve_parser.add_argument("--timeout", type=float, default=None)

    curated_parser = sub.add_parser("curated")
    curated_parser.add_argument("query")

    try_parser = sub.add_parser("try")
    try_parser.add_argument("--timeout", type=float, default=None)

    args = parser.parse_args()
    setup_logging(level="DEBUG" if args.verbose else None, json_logs=args.json_logs)

    if args.command == "resolve":
        results = asyncio.run(_resolve_once(args.query, args.timeout))
        _print_json(results)
    elif args.command == "curated":
        _print_json(_curated_once(args.query))
    elif args.command == "try":
        asyncio.run(_try_mode(args.timeout))


async def _resolve_once(query: str, timeout: float | None) -> list[Candidate]:
    from wandermint_geo.resolver import DestinationResolver

    async with DestinationResolver() as resolver:
        return await resolver.resolve(query, timeout=timeout)


def _curated_once(query: str) -> list[Candidate]:
    from wandermint_geo.geocode import NominatimProvider
    from wandermint_geo.resolver import DestinationResolver

    # Provider is never called on the curated path
    resolver = DestinationResolver(provider=NominatimProvider())
    return resolver.resolve_curated(query)


def _print_json(results: list[Candidate]) -> None:
    print(json.dumps([c.model_dump(mode="json") for c in results], ensure_ascii=False, indent=2))


async def _try_mode(timeout: float | None) -> None:
    from wandermint_geo.resolver import DestinationResolver

    print("Destination autocomplete")
    print("Type part of a destination; 'quit' to exit.")

    async with DestinationResolver() as resolver:
        while True:
            query = (await asyncio.to_thread(input, "destination> ")).strip()
            if query.lower() in {"quit", "exit", "q"}:
                break
            results = await resolver.resolve(query, timeout=timeout)
            _print_cli_result(query, results)


def _print_cli_result(query: str, results: list[Candidate]) -> None:
    print("\n" + "-" * 72)
    print(f"Query: {query!r}")
    if not results:
        print("(no suggestions)")
    for i, c in enumerate(results, 1):
        print(f"{i}. {c.display_name}  [{c.source.value}]")
    if query:
        typed = Candidate.from_typed(query)
        print(f"{len(results) + 1}. Use \"{typed.title}\"  [{typed.source.value}]")


if __name__ == "__main__":
    main()
