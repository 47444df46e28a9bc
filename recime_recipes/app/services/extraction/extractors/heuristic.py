"""Selector-based recipe extraction from HTML structure."""

import logging
from typing import List, Optional, Sequence

from bs4 import BeautifulSoup, Tag

from recime_recipes.app.services.extraction.constants import (
    COOK_TIME_SELECTORS,
    DEFAULT_SERVINGS,
    DESCRIPTION_SELECTORS,
    INGREDIENT_SELECTORS,
    INSTRUCTION_SELECTORS,
    PREP_TIME_SELECTORS,
    TITLE_SELECTORS,
)
from recime_recipes.app.services.extraction.models import RecipeDraft
from recime_recipes.app.services.extraction.parsing_utils import clean_text, parse_duration

logger = logging.getLogger(__name__)

STRATEGY = "css_selectors"


def _combined(selectors: Sequence[str]) -> str:
    return ", ".join(selectors)


def _element_text(element: Tag) -> str:
    return clean_text(element.get_text(" "))


def select_first_element(soup: BeautifulSoup, selectors: Sequence[str]) -> Optional[Tag]:
    """First element in document order matched by any selector in the cascade."""
    return soup.select_one(_combined(selectors))


def select_first_text(soup: BeautifulSoup, selectors: Sequence[str]) -> str:
    element = select_first_element(soup, selectors)
    return _element_text(element) if element is not None else ""


def select_all_text(soup: BeautifulSoup, selectors: Sequence[str]) -> List[str]:
    """Text of every element matched by the cascade, document order, blanks dropped."""
    texts = [_element_text(el) for el in soup.select(_combined(selectors))]
    return [text for text in texts if text]


def _select_duration(soup: BeautifulSoup, selectors: Sequence[str]) -> Optional[int]:
    element = select_first_element(soup, selectors)
    if element is None:
        return None
    # <meta itemprop="cookTime" content="PT20M"> and <time datetime=...> carry no text
    text = _element_text(element) or element.get("datetime") or element.get("content") or ""
    return parse_duration(text)


def extract_recipe_heuristic(soup: BeautifulSoup) -> RecipeDraft:
    """Extract a recipe draft using the fixed selector cascades.

    Always returns a draft, possibly empty. Servings are not inferred here.
    """
    draft = RecipeDraft(strategy=STRATEGY)
    draft.title = select_first_text(soup, TITLE_SELECTORS)
    draft.description = select_first_text(soup, DESCRIPTION_SELECTORS) or None
    draft.ingredients = select_all_text(soup, INGREDIENT_SELECTORS)
    draft.instructions = select_all_text(soup, INSTRUCTION_SELECTORS)
    draft.set_once("cook_time_minutes", _select_duration(soup, COOK_TIME_SELECTORS))
    draft.set_once("prep_time_minutes", _select_duration(soup, PREP_TIME_SELECTORS))
    draft.servings = DEFAULT_SERVINGS

    logger.info(
        "Heuristic recipe: title=%s, ingredients=%d, steps=%d",
        draft.title[:50] if draft.title else "None",
        len(draft.ingredients),
        len(draft.instructions),
    )
    return draft
