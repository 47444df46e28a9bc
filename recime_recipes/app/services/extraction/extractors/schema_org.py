"""Schema.org JSON-LD recipe extraction."""

import json
import logging
from typing import Iterator, List, Optional

from bs4 import BeautifulSoup

from recime_recipes.app.services.extraction.constants import JSON_LD_SELECTOR
from recime_recipes.app.services.extraction.models import RecipeDraft
from recime_recipes.app.services.extraction.parsing_utils import (
    json_path,
    json_text,
    parse_duration,
    parse_servings,
)

logger = logging.getLogger(__name__)

STRATEGY = "schema_org_json_ld"


def _is_recipe_type(value) -> bool:
    types = value if isinstance(value, list) else [value]
    return any(isinstance(t, str) and t.lower() == "recipe" for t in types)


def _recipe_nodes(data) -> Iterator[dict]:
    """Yield Recipe-typed objects from one parsed JSON-LD block, in block order."""
    nodes: List = []
    if isinstance(data, list):
        nodes.extend(data)
    elif isinstance(data, dict):
        nodes.append(data)
        graph = data.get("@graph")
        if isinstance(graph, list):
            nodes.extend(graph)
    for node in nodes:
        if isinstance(node, dict) and _is_recipe_type(node.get("@type")):
            yield node


def find_recipe_node(soup: BeautifulSoup) -> Optional[dict]:
    """Return the first Recipe node across all JSON-LD blocks, skipping malformed blocks."""
    scripts = soup.select(JSON_LD_SELECTOR)
    logger.info("Found %d JSON-LD script blocks", len(scripts))

    for idx, script in enumerate(scripts):
        raw_json = script.string or script.get_text()
        if not raw_json or not raw_json.strip():
            logger.debug("JSON-LD block %d is empty", idx)
            continue
        try:
            data = json.loads(raw_json)
        except (ValueError, RecursionError) as exc:
            # JSONDecodeError is a ValueError; deeply nested arrays raise RecursionError
            logger.warning(
                "JSON-LD block %d failed to parse: %s (first 200 chars: %s)",
                idx,
                exc,
                raw_json[:200],
            )
            continue

        node = next(_recipe_nodes(data), None)
        if node is not None:
            logger.info("JSON-LD block %d holds a Recipe node", idx)
            return node
        logger.debug("JSON-LD block %d has no Recipe node", idx)
    return None


def _as_list(value) -> list:
    if value is None:
        return []
    if isinstance(value, list):
        return value
    return [value]


def extract_ingredient_lines(value) -> List[str]:
    lines = [json_text(item).strip() for item in _as_list(value)]
    return [line for line in lines if line]


def extract_instruction_lines(value) -> List[str]:
    """Flatten recipeInstructions into step strings.

    Steps carrying a ``text`` field use it; HowToSection objects without text
    contribute their ``itemListElement`` steps; anything else is stringified.
    """
    steps: List[str] = []
    for entry in _as_list(value):
        if isinstance(entry, dict) and "text" in entry:
            step = json_text(entry["text"]).strip()
        elif isinstance(entry, dict) and isinstance(entry.get("itemListElement"), list):
            steps.extend(extract_instruction_lines(entry["itemListElement"]))
            continue
        else:
            step = json_text(entry).strip()
        if step:
            steps.append(step)
    return steps


def map_recipe_node(node: dict) -> RecipeDraft:
    """Map a schema.org Recipe node onto a draft."""
    draft = RecipeDraft(strategy=STRATEGY)
    draft.title = json_text(json_path(node, "name", default="")).strip()
    draft.description = json_text(json_path(node, "description", default="")).strip() or None
    draft.ingredients = extract_ingredient_lines(json_path(node, "recipeIngredient"))
    draft.instructions = extract_instruction_lines(json_path(node, "recipeInstructions"))
    draft.set_once("cook_time_minutes", parse_duration(json_text(json_path(node, "cookTime"))))
    draft.set_once("prep_time_minutes", parse_duration(json_text(json_path(node, "prepTime"))))
    draft.set_once("servings", parse_servings(json_path(node, "recipeYield")))
    return draft


def extract_recipe_from_schema_org(soup: BeautifulSoup) -> Optional[RecipeDraft]:
    """Extract a recipe draft from embedded JSON-LD, or None when no usable node exists.

    The first Recipe node wins. A node whose name is blank is rejected so the
    caller can fall back to selector-based parsing.
    """
    node = find_recipe_node(soup)
    if node is None:
        return None
    try:
        draft = map_recipe_node(node)
    except Exception as exc:  # noqa: BLE001
        logger.warning("Recipe node could not be mapped: %s", exc)
        return None

    if not draft.title:
        logger.warning("Recipe node missing title; rejecting structured data")
        return None

    logger.info(
        "Schema.org recipe: title=%s, ingredients=%d, steps=%d",
        draft.title[:50],
        len(draft.ingredients),
        len(draft.instructions),
    )
    return draft
