from fastapi import Request

from shlist_import.app.core.config import Settings


def get_app_settings(request: Request) -> Settings:
    return request.app.state.settings
