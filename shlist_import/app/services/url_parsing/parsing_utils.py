"""Text helpers for turning fetched HTML and LLM replies into usable values."""

import json
import re
from typing import Any, Optional

# Blocks whose whole content is dropped, in removal order.
_STRIPPED_BLOCKS = ("script", "style", "nav", "footer", "header")
_BLOCK_PATTERNS = [
    re.compile(rf"<{tag}[\s\S]*?</{tag}>", re.IGNORECASE) for tag in _STRIPPED_BLOCKS
]
_TAG_RE = re.compile(r"<[^>]+>")
_WHITESPACE_RE = re.compile(r"\s+")
_JSON_OBJECT_RE = re.compile(r"\{[\s\S]*\}")

DEFAULT_MAX_CHARS = 8000


def clean_text(text: str) -> str:
    """Normalize whitespace in text."""
    return _WHITESPACE_RE.sub(" ", text or "").strip()


def sanitize_page_text(html: str, max_length: int = DEFAULT_MAX_CHARS) -> str:
    """Reduce raw HTML to single-spaced plain text of at most ``max_length`` chars.

    Script, style, nav, footer and header blocks are removed with their
    contents, every other tag becomes a space. Entities are left encoded.
    """
    text = html or ""
    for pattern in _BLOCK_PATTERNS:
        text = pattern.sub("", text)
    text = _TAG_RE.sub(" ", text)
    return clean_text(text)[:max_length]


def parse_llm_json_content(raw: str) -> Optional[Any]:
    """Parse LLM content into JSON, falling back to the outermost ``{...}`` span.

    Returns None when neither the whole string nor the span is valid JSON.
    """
    try:
        return json.loads(raw)
    except json.JSONDecodeError:
        pass

    # Greedy: first "{" to last "}", so prose and code fences around a single
    # object are dropped.
    match = _JSON_OBJECT_RE.search(raw)
    if not match:
        return None
    try:
        return json.loads(match.group(0))
    except json.JSONDecodeError:
        return None
