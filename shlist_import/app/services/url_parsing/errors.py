"""Failures raised by the import pipeline stages."""

from typing import Any


class RecipeImportError(Exception):
    """Base class; ``status_code`` and ``error_message`` feed the HTTP response."""

    status_code = 500
    prefix = ""

    def __init__(self, detail: str):
        super().__init__(detail)
        self.detail = detail

    @property
    def error_message(self) -> str:
        return f"{self.prefix}{self.detail}"


class PageFetchError(RecipeImportError):
    """The recipe page could not be fetched or yielded too little text."""

    status_code = 422
    prefix = "Could not fetch the recipe page: "


class RecipeExtractionError(RecipeImportError):
    """The extraction service failed or its reply could not be parsed."""

    status_code = 500
    prefix = "Recipe extraction failed: "


class RecipeNotFoundError(RecipeImportError):
    """The extraction service reported that the page holds no recipe.

    ``detail`` is the service's ``error`` value, any JSON type, returned as is.
    """

    status_code = 422

    def __init__(self, detail: Any):
        super().__init__(str(detail))
        self.detail = detail

    @property
    def error_message(self) -> Any:
        return self.detail
