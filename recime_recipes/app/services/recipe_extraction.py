import logging

from recime_recipes.app.schemas.recipe import Recipe
from recime_recipes.app.services.extraction import FetchError, fetch_document, normalize_recipe
from recime_recipes.app.services.extraction.extractors import (
    classify_recipe_text,
    extract_recipe_from_schema_org,
    extract_recipe_heuristic,
)

logger = logging.getLogger(__name__)

__all__ = ["FetchError", "extract_from_text", "extract_from_url"]


async def extract_from_url(url: str) -> Recipe:
    """Fetch ``url`` and extract a recipe from it.

    Structured JSON-LD data wins when it yields a titled recipe; otherwise the
    page is read through the CSS selector cascades. Only :class:`FetchError`
    propagates.
    """
    soup = await fetch_document(url)

    draft = extract_recipe_from_schema_org(soup)
    if draft is None:
        logger.info("No usable JSON-LD recipe at %s; falling back to selectors", url)
        draft = extract_recipe_heuristic(soup)

    recipe = normalize_recipe(draft)
    logger.info("Extracted recipe %r from %s via %s", recipe.title, url, draft.strategy)
    return recipe


def extract_from_text(text: str) -> Recipe:
    """Extract a recipe from pasted text. Never raises; the result may have no ingredients or steps."""
    draft = classify_recipe_text(text)
    recipe = normalize_recipe(draft)
    logger.info(
        "Parsed recipe %r from text (%d chars)", recipe.title, len(text or "")
    )
    return recipe
