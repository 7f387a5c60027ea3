"""Recipe page fetching."""

import logging

import httpx

from shlist_import.app.core.config import Settings
from shlist_import.app.services.url_parsing.errors import PageFetchError
from shlist_import.app.services.url_parsing.parsing_utils import sanitize_page_text

logger = logging.getLogger(__name__)


def _describe(exc: Exception) -> str:
    # Some httpx timeouts carry an empty message.
    return str(exc) or exc.__class__.__name__


async def fetch_html(url: str, settings: Settings) -> str:
    """GET ``url`` and return the decoded body, following redirects."""
    headers = {
        "User-Agent": settings.scraper_user_agent,
        "Accept": "text/html",
    }
    timeout = httpx.Timeout(
        settings.page_fetch_timeout_seconds,
        connect=settings.http_connect_timeout_seconds,
    )
    try:
        async with httpx.AsyncClient(
            timeout=timeout, follow_redirects=True, headers=headers
        ) as client:
            response = await client.get(url)
    except httpx.HTTPError as exc:
        logger.warning("Failed to fetch %s: %s", url, _describe(exc))
        raise PageFetchError(_describe(exc)) from exc
    except (httpx.InvalidURL, ValueError) as exc:
        logger.warning("Refusing to fetch %s: %s", url, _describe(exc))
        raise PageFetchError(_describe(exc)) from exc

    if not response.is_success:
        logger.warning("Fetching %s returned status %s", url, response.status_code)
        raise PageFetchError(f"Page returned {response.status_code}")
    return response.text


async def fetch_page_text(url: str, settings: Settings) -> str:
    """Fetch ``url`` and return its sanitized text, or raise PageFetchError."""
    html = await fetch_html(url, settings)
    text = sanitize_page_text(html, max_length=settings.page_text_max_chars)
    if len(text) < settings.page_text_min_chars:
        logger.warning("Only %s characters of text on %s", len(text), url)
        raise PageFetchError("Could not extract text from page")
    logger.info("Fetched %s (%s chars of text)", url, len(text))
    return text
