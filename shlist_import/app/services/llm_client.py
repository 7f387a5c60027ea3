import logging
from typing import Any, Dict, List

import httpx

from shlist_import.app.core.config import Settings
from shlist_import.app.services.url_parsing.errors import RecipeExtractionError

logger = logging.getLogger(__name__)


def _join_text_blocks(data: Any) -> str:
    """Concatenate the text of every content block of a Messages API reply."""
    blocks = data.get("content") if isinstance(data, dict) else None
    if not isinstance(blocks, list):
        raise RecipeExtractionError("Claude response missing content")
    parts: List[str] = []
    for block in blocks:
        if isinstance(block, dict) and isinstance(block.get("text"), str):
            parts.append(block["text"])
    return "".join(parts).strip()


async def create_message(system_prompt: str, user_content: str, settings: Settings) -> str:
    """Send one user turn to the Anthropic Messages API and return its text."""
    if not settings.anthropic_api_key:
        raise RecipeExtractionError("ANTHROPIC_API_KEY is not configured")

    payload: Dict[str, Any] = {
        "model": settings.llm_model_name,
        "max_tokens": settings.llm_max_tokens,
        "system": system_prompt,
        "messages": [{"role": "user", "content": user_content}],
    }
    headers = {
        "Content-Type": "application/json",
        "x-api-key": settings.anthropic_api_key,
        "anthropic-version": settings.anthropic_version,
    }
    timeout = httpx.Timeout(
        settings.llm_timeout_seconds,
        connect=settings.http_connect_timeout_seconds,
    )

    try:
        async with httpx.AsyncClient(timeout=timeout) as client:
            response = await client.post(settings.anthropic_api_url, json=payload, headers=headers)
    except httpx.HTTPError as exc:
        logger.warning("Claude API request failed: %s", exc)
        raise RecipeExtractionError(str(exc) or exc.__class__.__name__) from exc

    if not response.is_success:
        logger.error(
            "Claude API returned %s: %s",
            response.status_code,
            response.text[:500],
        )
        raise RecipeExtractionError(f"Claude API error: {response.status_code}")

    try:
        data = response.json()
    except ValueError as exc:
        raise RecipeExtractionError("Claude response was not JSON") from exc
    return _join_text_blocks(data)
