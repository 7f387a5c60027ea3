"""LLM-based recipe extraction."""

import logging
from typing import Any, Dict

from pydantic import ValidationError

from shlist_import.app.core.config import Settings
from shlist_import.app.services import llm_client
from shlist_import.app.services.url_parsing.errors import (
    RecipeExtractionError,
    RecipeNotFoundError,
)
from shlist_import.app.services.url_parsing.models import Recipe, RecipeCategory
from shlist_import.app.services.url_parsing.parsing_utils import parse_llm_json_content

logger = logging.getLogger(__name__)

_CATEGORY_LIST = ", ".join(category.value for category in RecipeCategory)

SYSTEM_PROMPT = f"""You are a recipe extraction assistant. Extract recipe details from webpage text and return ONLY valid JSON with no markdown, no backticks, no explanation.

Return exactly this structure:
{{"name":"","category":"","ingredients":[{{"qty":"","name":""}}],"method":"","notes":""}}

Rules:
- category must be one of: {_CATEGORY_LIST}. If unsure use Dinner.
- ingredients: split quantity and unit into qty (e.g. "2 cups"), name is just the ingredient (e.g. "flour")
- method: plain text, use newlines between steps, no numbering needed
- notes: any tips, serving suggestions, or variations. Leave empty string if none.
- If no recipe is found on the page, return {{"error":"No recipe found on this page"}}"""


def build_user_prompt(url: str, page_text: str) -> str:
    return f"Extract the recipe from this webpage.\nURL: {url}\n\n{page_text}"


def _validate_recipe(data: Dict[str, Any]) -> Dict[str, Any]:
    try:
        recipe = Recipe.model_validate(data)
    except ValidationError as exc:
        logger.warning("Extracted recipe failed validation: %s", exc)
        raise RecipeExtractionError("Recipe failed validation") from exc
    return recipe.model_dump(mode="json")


async def extract_recipe_via_llm(url: str, page_text: str, settings: Settings) -> Dict[str, Any]:
    """Ask the extraction service for the recipe on ``page_text``.

    Returns the service's JSON object untouched unless strict validation is
    enabled. Raises RecipeNotFoundError when the service answers with the
    ``{"error": ...}`` sentinel and RecipeExtractionError for everything else.
    """
    raw = await llm_client.create_message(SYSTEM_PROMPT, build_user_prompt(url, page_text), settings)

    parsed = parse_llm_json_content(raw)
    if not isinstance(parsed, dict):
        logger.error("Claude response parse failed for url=%s; raw (truncated): %s", url, raw[:1000])
        raise RecipeExtractionError("Could not parse Claude response")

    error = parsed.get("error")
    if error:
        logger.info("No recipe found on %s: %s", url, error)
        raise RecipeNotFoundError(error)

    if settings.strict_recipe_validation:
        return _validate_recipe(parsed)
    return parsed
