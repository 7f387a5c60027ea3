"""Pydantic models for URL recipe import."""

from enum import Enum
from typing import Any, Dict, List, Optional

from pydantic import BaseModel, Field, field_validator


class RecipeCategory(str, Enum):
    BREAKFAST = "Breakfast"
    LUNCH = "Lunch"
    DINNER = "Dinner"
    BAKING = "Baking"
    SOUPS = "Soups"
    SALADS = "Salads"
    DESSERTS = "Desserts"
    SNACKS = "Snacks"
    CONDIMENTS = "Condiments"
    DRINKS = "Drinks"


DEFAULT_CATEGORY = RecipeCategory.DINNER


class ImportRequest(BaseModel):
    """Body of an import call."""

    url: str = Field(..., min_length=1, strict=True)


class Ingredient(BaseModel):
    """A single ingredient line, quantity and unit kept together in ``qty``."""

    qty: str
    name: str


class Recipe(BaseModel):
    """The recipe contract returned to callers."""

    name: str
    category: RecipeCategory = DEFAULT_CATEGORY
    ingredients: List[Ingredient] = Field(default_factory=list)
    method: str
    notes: str = ""

    @field_validator("category", mode="before")
    @classmethod
    def default_unknown_category(cls, value: Any) -> Any:
        if isinstance(value, str):
            for category in RecipeCategory:
                if value.strip().lower() == category.value.lower():
                    return category
        return DEFAULT_CATEGORY


class ImportResult(BaseModel):
    """Result of a recipe import attempt."""

    success: bool
    status_code: int
    recipe: Optional[Dict[str, Any]] = None
    # A string, or the extraction service's own error value when it found no recipe.
    error_message: Any = None
