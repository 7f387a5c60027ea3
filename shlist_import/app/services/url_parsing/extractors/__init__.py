"""Recipe extractors."""

from shlist_import.app.services.url_parsing.extractors.llm import (
    SYSTEM_PROMPT,
    build_user_prompt,
    extract_recipe_via_llm,
)

__all__ = [
    "SYSTEM_PROMPT",
    "build_user_prompt",
    "extract_recipe_via_llm",
]
