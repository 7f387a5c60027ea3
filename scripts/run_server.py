#!/usr/bin/env python
"""
Serve the recipe import endpoint with uvicorn.

Host and port come from HOST / PORT (default 0.0.0.0:8000).
"""
import logging
import os

import uvicorn

from shlist_import.app.core.config import get_settings
from shlist_import.app.core.logging import configure_logging

logger = logging.getLogger("run_server")


def main():
    settings = get_settings()
    configure_logging(settings.log_level)
    host = os.getenv("HOST", "0.0.0.0")
    port = int(os.getenv("PORT", "8000"))
    if not settings.anthropic_api_key:
        logger.warning("ANTHROPIC_API_KEY is not set; every import will fail at extraction")
    uvicorn.run("shlist_import.app.main:app", host=host, port=port, log_level=settings.log_level.lower())


if __name__ == "__main__":
    main()
