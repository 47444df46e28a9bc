"""Recipe extractors for different parsing strategies."""

from recime_recipes.app.services.extraction.extractors.heuristic import (
    extract_recipe_heuristic,
)
from recime_recipes.app.services.extraction.extractors.schema_org import (
    extract_recipe_from_schema_org,
)
from recime_recipes.app.services.extraction.extractors.text_classifier import (
    TEXT_RULES,
    classify_line,
    classify_recipe_text,
)

__all__ = [
    "TEXT_RULES",
    "classify_line",
    "classify_recipe_text",
    "extract_recipe_from_schema_org",
    "extract_recipe_heuristic",
]
