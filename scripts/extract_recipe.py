#!/usr/bin/env python
"""
Extract a recipe from a URL or from pasted text and print it as JSON.

Run manually:
    python scripts/extract_recipe.py --url https://example.com/some-recipe
    python scripts/extract_recipe.py --text-file recipe.txt
    cat recipe.txt | python scripts/extract_recipe.py
"""
import argparse
import asyncio
import logging
import sys
from pathlib import Path

from recime_recipes.app.core.config import get_settings
from recime_recipes.app.services.recipe_extraction import (
    FetchError,
    extract_from_text,
    extract_from_url,
)

logging.basicConfig(level=get_settings().log_level.upper())
logger = logging.getLogger("extract_recipe")


def main() -> int:
    parser = argparse.ArgumentParser(description="Recipe extraction runner")
    source = parser.add_mutually_exclusive_group()
    source.add_argument("--url", default=None)
    source.add_argument("--text-file", default=None)
    args = parser.parse_args()

    if args.url:
        try:
            recipe = asyncio.run(extract_from_url(args.url))
        except FetchError as exc:
            logger.error("Failed to extract recipe from %s: %s", exc.url, exc.message)
            return 1
    else:
        text = Path(args.text_file).read_text() if args.text_file else sys.stdin.read()
        recipe = extract_from_text(text)

    # stdout must be JSON only
    print(recipe.model_dump_json(indent=2))
    return 0


if __name__ == "__main__":
    sys.exit(main())
