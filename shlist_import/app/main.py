import logging
from typing import Optional

from fastapi import FastAPI, Request
from fastapi.exception_handlers import http_exception_handler
from fastapi.responses import JSONResponse, PlainTextResponse
from starlette import status
from starlette.exceptions import HTTPException as StarletteHTTPException

from shlist_import.app.api.routes import api_router
from shlist_import.app.core.config import Settings, get_settings
from shlist_import.app.core.logging import configure_logging
from shlist_import.app.core.middleware import (
    CORSHeadersMiddleware,
    RequestLoggingMiddleware,
    cors_headers,
)

logger = logging.getLogger(__name__)


async def method_not_allowed_handler(request: Request, exc: StarletteHTTPException):
    # Routing raises 405 for every method other than POST and OPTIONS.
    if exc.status_code == status.HTTP_405_METHOD_NOT_ALLOWED:
        return PlainTextResponse("Method not allowed", status_code=status.HTTP_405_METHOD_NOT_ALLOWED)
    return await http_exception_handler(request, exc)


async def unhandled_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    # Runs outside the middleware stack, so the CORS headers are added here.
    logger.exception("Unhandled error for %s %s", request.method, request.url.path)
    settings: Settings = request.app.state.settings
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"error": "Internal server error"},
        headers=cors_headers(settings.allowed_origin),
    )


def create_app(settings: Optional[Settings] = None) -> FastAPI:
    settings = settings or get_settings()
    configure_logging(settings.log_level)

    # Every path is the import endpoint, so the docs routes are disabled.
    app = FastAPI(
        title="shlist recipe import",
        version="0.1.0",
        docs_url=None,
        redoc_url=None,
        openapi_url=None,
    )
    app.state.settings = settings
    app.add_exception_handler(StarletteHTTPException, method_not_allowed_handler)
    app.add_exception_handler(Exception, unhandled_exception_handler)
    app.add_middleware(CORSHeadersMiddleware, allowed_origin=settings.allowed_origin)
    app.add_middleware(RequestLoggingMiddleware)
    app.include_router(api_router)

    logger.info(
        "Recipe import ready (origin=%s, model=%s, strict=%s)",
        settings.allowed_origin,
        settings.llm_model_name,
        settings.strict_recipe_validation,
    )
    return app


app = create_app()
