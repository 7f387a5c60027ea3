import logging
from functools import lru_cache
from typing import Optional

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    anthropic_api_key: Optional[str] = Field(None, alias="ANTHROPIC_API_KEY")
    anthropic_api_url: str = Field("https://api.anthropic.com/v1/messages", alias="ANTHROPIC_API_URL")
    anthropic_version: str = Field("2023-06-01", alias="ANTHROPIC_VERSION")
    llm_model_name: str = Field("claude-haiku-4-5-20251001", alias="RECIPE_LLM_MODEL")
    llm_max_tokens: int = Field(1500, alias="RECIPE_LLM_MAX_TOKENS")
    llm_timeout_seconds: float = Field(60.0, alias="LLM_TIMEOUT_SECONDS")
    allowed_origin: str = Field("https://marijep.github.io", alias="ALLOWED_ORIGIN")
    scraper_user_agent: str = Field(
        "Mozilla/5.0 (compatible; recipe-importer/1.0)",
        alias="SCRAPER_USER_AGENT",
    )
    page_fetch_timeout_seconds: float = Field(15.0, alias="PAGE_FETCH_TIMEOUT_SECONDS")
    http_connect_timeout_seconds: float = Field(5.0, alias="HTTP_CONNECT_TIMEOUT_SECONDS")
    page_text_max_chars: int = Field(8000, alias="PAGE_TEXT_MAX_CHARS")
    page_text_min_chars: int = Field(100, alias="PAGE_TEXT_MIN_CHARS")
    # Off by default: the extraction service's JSON is returned as-is.
    strict_recipe_validation: bool = Field(False, alias="STRICT_RECIPE_VALIDATION")
    disconnect_poll_seconds: float = Field(0.5, alias="DISCONNECT_POLL_SECONDS")
    log_level: str = Field("INFO", alias="LOG_LEVEL")

    model_config = SettingsConfigDict(
        env_file=".env",
        case_sensitive=False,
        extra="ignore",
        frozen=True,
        populate_by_name=True,
    )


logger = logging.getLogger(__name__)


@lru_cache
def get_settings() -> Settings:
    try:
        settings = Settings()
    except PermissionError:
        logger.warning("Unable to read .env; continuing with environment variables only")
        settings = Settings(_env_file=None)
    return settings
