"""Pydantic models for recipe extraction."""

from typing import Any, List, Optional

from pydantic import BaseModel, Field


class RecipeDraft(BaseModel):
    """Recipe fields as found by an extractor, before defaults are applied.

    Scalar fields stay ``None`` until an extractor sets them. Extractors that
    must keep the first value they find write through :meth:`set_once`.
    """

    title: Optional[str] = None
    description: Optional[str] = None
    servings: Optional[int] = Field(None, ge=0)
    ingredients: List[str] = Field(default_factory=list)
    instructions: List[str] = Field(default_factory=list)
    prep_time_minutes: Optional[int] = Field(None, ge=0)
    cook_time_minutes: Optional[int] = Field(None, ge=0)
    strategy: Optional[str] = None

    def set_once(self, field: str, value: Any) -> bool:
        """Assign ``value`` only if ``field`` is still unset. Returns True when assigned."""
        if value is None or getattr(self, field) is not None:
            return False
        setattr(self, field, value)
        return True
