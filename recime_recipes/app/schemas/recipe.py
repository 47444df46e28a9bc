from datetime import datetime
from typing import List, Optional

from pydantic import BaseModel, Field


class Recipe(BaseModel):
    """A normalized recipe as handed to storage and display collaborators."""

    title: str = Field(min_length=1)
    description: str
    servings: int = Field(ge=0)
    image_url: Optional[str] = None
    ingredients: List[str] = Field(default_factory=list)
    instructions: List[str] = Field(default_factory=list)
    prep_time_minutes: int = Field(0, ge=0)
    cook_time_minutes: int = Field(0, ge=0)
    creation_date: datetime
    update_date: datetime
    tags: List[str] = Field(default_factory=list)
    categories: List[str] = Field(default_factory=list)
    notes: Optional[str] = None
    rating: int = 0
