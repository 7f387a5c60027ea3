import asyncio
import logging
from contextlib import suppress
from typing import Awaitable, Optional, TypeVar

from fastapi import APIRouter, Depends, Request, Response
from fastapi.responses import JSONResponse
from pydantic import ValidationError
from starlette import status

from shlist_import.app.api.deps import get_app_settings
from shlist_import.app.core.config import Settings
from shlist_import.app.services import recipe_importer
from shlist_import.app.services.url_parsing.models import ImportRequest

logger = logging.getLogger(__name__)

router = APIRouter(tags=["import"])

# Non-standard "client closed request" status, never seen by the caller.
CLIENT_CLOSED_REQUEST = 499

T = TypeVar("T")


async def _run_until_disconnected(
    request: Request, work: Awaitable[T], poll_seconds: float
) -> Optional[T]:
    """Await ``work``, cancelling it and returning None if the client goes away."""
    task = asyncio.ensure_future(work)
    try:
        while True:
            done, _ = await asyncio.wait({task}, timeout=poll_seconds)
            if done:
                return task.result()
            if await request.is_disconnected():
                logger.info("Client disconnected; cancelling import for %s", request.url.path)
                task.cancel()
                with suppress(asyncio.CancelledError):
                    await task
                return None
    finally:
        if not task.done():
            task.cancel()


@router.options("/{path:path}", include_in_schema=False)
async def preflight() -> Response:
    return Response(status_code=status.HTTP_200_OK)


@router.post("/{path:path}", include_in_schema=False)
async def import_recipe(request: Request, settings: Settings = Depends(get_app_settings)) -> Response:
    body = await request.body()
    try:
        payload = ImportRequest.model_validate_json(body)
    except ValidationError:
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content={"error": "Invalid request body"},
        )

    result = await _run_until_disconnected(
        request,
        recipe_importer.import_recipe_from_url(payload.url, settings),
        settings.disconnect_poll_seconds,
    )
    if result is None:
        return Response(status_code=CLIENT_CLOSED_REQUEST)
    if not result.success:
        return JSONResponse(status_code=result.status_code, content={"error": result.error_message})
    return JSONResponse(status_code=status.HTTP_200_OK, content=result.recipe)

