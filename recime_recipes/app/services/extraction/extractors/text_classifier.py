"""Line-by-line classification of pasted recipe text.

Every non-blank line is offered to ``TEXT_RULES`` in order and handled by the
first rule whose predicate accepts it. The order is load-bearing: a line that
looks like both an ingredient and an instruction is an ingredient, and a
title candidate that looks like an ingredient never becomes the title.
"""

import logging
from typing import Callable, NamedTuple, Optional

from recime_recipes.app.services.extraction.constants import (
    DURATION_UNIT_RE,
    INGREDIENT_PATTERNS,
    INSTRUCTION_PATTERNS,
)
from recime_recipes.app.services.extraction.models import RecipeDraft
from recime_recipes.app.services.extraction.parsing_utils import first_integer, parse_duration

logger = logging.getLogger(__name__)

STRATEGY = "text_heuristic"
MIN_TITLE_LENGTH = 5


def looks_like_ingredient(line: str) -> bool:
    return any(pattern.search(line) for pattern in INGREDIENT_PATTERNS)


def looks_like_instruction(line: str) -> bool:
    return any(pattern.search(line) for pattern in INSTRUCTION_PATTERNS)


def mentions_duration(line: str) -> bool:
    return bool(DURATION_UNIT_RE.search(line))


class LineRule(NamedTuple):
    name: str
    matches: Callable[[str, RecipeDraft], bool]
    apply: Callable[[str, RecipeDraft], None]


def _is_title(line: str, draft: RecipeDraft) -> bool:
    return draft.title is None and len(line) > MIN_TITLE_LENGTH and not looks_like_ingredient(line)


def _is_cook_time(line: str, draft: RecipeDraft) -> bool:
    return "cook" in line.lower() and mentions_duration(line)


def _is_prep_time(line: str, draft: RecipeDraft) -> bool:
    return "prep" in line.lower() and mentions_duration(line)


def _is_servings(line: str, draft: RecipeDraft) -> bool:
    lowered = line.lower()
    return "serves" in lowered or "serving" in lowered


def _is_ingredient(line: str, draft: RecipeDraft) -> bool:
    return looks_like_ingredient(line)


def _is_instruction(line: str, draft: RecipeDraft) -> bool:
    return looks_like_instruction(line)


TEXT_RULES = (
    LineRule("title", _is_title, lambda line, draft: draft.set_once("title", line)),
    LineRule(
        "cook_time",
        _is_cook_time,
        lambda line, draft: draft.set_once("cook_time_minutes", parse_duration(line)),
    ),
    LineRule(
        "prep_time",
        _is_prep_time,
        lambda line, draft: draft.set_once("prep_time_minutes", parse_duration(line)),
    ),
    LineRule(
        "servings",
        _is_servings,
        lambda line, draft: draft.set_once("servings", first_integer(line)),
    ),
    LineRule("ingredient", _is_ingredient, lambda line, draft: draft.ingredients.append(line)),
    LineRule("instruction", _is_instruction, lambda line, draft: draft.instructions.append(line)),
)


def classify_line(line: str, draft: RecipeDraft) -> Optional[str]:
    """Apply the first matching rule to ``draft``; return its name, or None if the line is discarded."""
    for rule in TEXT_RULES:
        if rule.matches(line, draft):
            rule.apply(line, draft)
            return rule.name
    return None


def classify_recipe_text(text: str) -> RecipeDraft:
    draft = RecipeDraft(strategy=STRATEGY)
    discarded = 0
    for raw_line in (text or "").splitlines():
        line = raw_line.strip()
        if not line:
            continue
        kind = classify_line(line, draft)
        if kind is None:
            discarded += 1
        logger.debug("Line classified as %s: %s", kind or "discarded", line[:80])

    logger.info(
        "Text recipe: title=%s, ingredients=%d, steps=%d, discarded=%d",
        draft.title[:50] if draft.title else "None",
        len(draft.ingredients),
        len(draft.instructions),
        discarded,
    )
    return draft
