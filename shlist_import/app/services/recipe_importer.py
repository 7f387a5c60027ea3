import logging

from shlist_import.app.core.config import Settings
from shlist_import.app.services.url_parsing.errors import RecipeImportError
from shlist_import.app.services.url_parsing.extractors import extract_recipe_via_llm
from shlist_import.app.services.url_parsing.html_fetcher import fetch_page_text
from shlist_import.app.services.url_parsing.models import ImportResult

logger = logging.getLogger(__name__)


async def import_recipe_from_url(url: str, settings: Settings) -> ImportResult:
    """Fetch ``url``, extract its recipe, and report the outcome.

    Stages run in order and the first failure ends the import.
    """
    try:
        page_text = await fetch_page_text(url, settings)
        recipe = await extract_recipe_via_llm(url, page_text, settings)
    except RecipeImportError as exc:
        return ImportResult(
            success=False,
            status_code=exc.status_code,
            error_message=exc.error_message,
        )

    logger.info("Imported recipe %r from %s", recipe.get("name"), url)
    return ImportResult(success=True, status_code=200, recipe=recipe)
