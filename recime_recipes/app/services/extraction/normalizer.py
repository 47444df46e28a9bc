"""Final normalization from extractor drafts to :class:`Recipe`."""

from datetime import datetime, timezone
from typing import Optional

from recime_recipes.app.schemas.recipe import Recipe
from recime_recipes.app.services.extraction.constants import (
    DEFAULT_DESCRIPTION,
    DEFAULT_SERVINGS,
    DEFAULT_TITLE,
)
from recime_recipes.app.services.extraction.models import RecipeDraft


def normalize_recipe(draft: RecipeDraft, now: Optional[datetime] = None) -> Recipe:
    """Fill defaults and stamp creation/update times. Lists are copied as-is."""
    timestamp = now or datetime.now(timezone.utc)
    title = (draft.title or "").strip() or DEFAULT_TITLE
    return Recipe(
        title=title,
        description=draft.description or DEFAULT_DESCRIPTION,
        servings=draft.servings or DEFAULT_SERVINGS,
        ingredients=list(draft.ingredients),
        instructions=list(draft.instructions),
        prep_time_minutes=draft.prep_time_minutes or 0,
        cook_time_minutes=draft.cook_time_minutes or 0,
        creation_date=timestamp,
        update_date=timestamp,
    )
