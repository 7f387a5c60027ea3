"""URL recipe import package.

Fetches a recipe page, reduces it to plain text and hands it to the LLM
extractor.
"""

from shlist_import.app.services.url_parsing.errors import (
    PageFetchError,
    RecipeExtractionError,
    RecipeImportError,
    RecipeNotFoundError,
)
from shlist_import.app.services.url_parsing.html_fetcher import fetch_html, fetch_page_text
from shlist_import.app.services.url_parsing.models import (
    ImportRequest,
    ImportResult,
    Ingredient,
    Recipe,
    RecipeCategory,
)
from shlist_import.app.services.url_parsing.parsing_utils import (
    clean_text,
    parse_llm_json_content,
    sanitize_page_text,
)

__all__ = [
    # Models
    "ImportRequest",
    "ImportResult",
    "Ingredient",
    "Recipe",
    "RecipeCategory",
    # Errors
    "PageFetchError",
    "RecipeExtractionError",
    "RecipeImportError",
    "RecipeNotFoundError",
    # HTML fetching
    "fetch_html",
    "fetch_page_text",
    # Parsing utilities
    "clean_text",
    "parse_llm_json_content",
    "sanitize_page_text",
]
