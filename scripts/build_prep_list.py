#!/usr/bin/env python
"""Build the preparation list for a recipe page.

Reads a local HTML file (or fetches a page with --url), collects the method
ingredient mentions and prints the consolidated list, one entry per line.
With --html the rewritten document is printed instead.

Run with: uv run python scripts/build_prep_list.py recipe.html
          uv run python scripts/build_prep_list.py --url https://example.com/dal --html
"""

import argparse
import asyncio
import sys
from pathlib import Path

from preplist.document.fetch import DocumentFetcher, FetchError
from preplist.document.html import DocumentError, add_prep_list
from preplist.logging_config import LoggingContext, configure_logging, get_logger

logger = get_logger(__name__)


async def load_document(path: str | None, url: str | None) -> str:
    """Read the document from disk or fetch it."""
    if url:
        async with DocumentFetcher() as fetcher:
            return await fetcher.fetch(url)
    return Path(path).read_text(encoding="utf-8")


def run(args: argparse.Namespace) -> int:
    source = args.url or args.path
    with LoggingContext(document=source):
        try:
            html = asyncio.run(load_document(args.path, args.url))
            document, ingredients = add_prep_list(
                html,
                selector=args.selector,
                container=args.container,
                heading=args.heading,
                spoon_style=args.spoon_style,
            )
        except (OSError, FetchError, DocumentError) as e:
            logger.error(f"Failed to build prep list for {source}: {e}")
            return 1

    if args.html:
        print(document)
    else:
        for ingredient in ingredients:
            print(ingredient)
    return 0


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Build a preparation list from a recipe page")
    parser.add_argument("path", nargs="?", help="Local HTML file")
    parser.add_argument("--url", "-u", type=str, help="Fetch the recipe page from this URL")
    parser.add_argument("--selector", "-s", type=str, help="CSS selector for method mentions")
    parser.add_argument("--container", "-c", type=str, help="CSS selector for the list target")
    parser.add_argument("--heading", type=str, help="Heading placed above the list")
    parser.add_argument(
        "--spoon-style",
        choices=["name", "quantity"],
        help="Render spoon amounts as the name only or with their quantity",
    )
    parser.add_argument("--html", action="store_true", help="Print the rewritten document")
    parser.add_argument("--log-level", default="WARNING", help="Logging level")

    args = parser.parse_args(argv)
    if not args.path and not args.url:
        parser.error("either a path or --url is required")

    configure_logging(log_level=args.log_level, json_format=False)
    return run(args)


if __name__ == "__main__":
    sys.exit(main())
