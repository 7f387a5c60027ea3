from fastapi import APIRouter

from shlist_import.app.api.routes import import_recipe

api_router = APIRouter()
api_router.include_router(import_recipe.router)
