"""Recipe extraction package.

This package extracts recipes from web pages, using schema.org JSON-LD first
and CSS selectors as a fallback, and from pasted text using ordered line rules.
"""

from recime_recipes.app.services.extraction.html_fetcher import (
    FetchError,
    fetch_document,
)
from recime_recipes.app.services.extraction.models import RecipeDraft
from recime_recipes.app.services.extraction.normalizer import normalize_recipe
from recime_recipes.app.services.extraction.parsing_utils import (
    clean_text,
    first_integer,
    json_path,
    json_text,
    parse_duration,
    parse_iso8601_duration,
    parse_servings,
)

__all__ = [
    # Models
    "RecipeDraft",
    # HTML fetching
    "FetchError",
    "fetch_document",
    # Normalization
    "normalize_recipe",
    # Parsing utilities
    "clean_text",
    "first_integer",
    "json_path",
    "json_text",
    "parse_duration",
    "parse_iso8601_duration",
    "parse_servings",
]
