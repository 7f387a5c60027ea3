import json
from typing import Callable, List

import httpx
import pytest
from fastapi.testclient import TestClient

from shlist_import.app.core.config import Settings
from shlist_import.app.main import create_app

ALLOWED_ORIGIN = "https://recipes.example.org"
RECIPE_URL = "https://cooking.example.com/pancakes"

RECIPE_HTML = """
<html>
  <head>
    <title>Fluffy Pancakes</title>
    <style>body { font-family: sans-serif; }</style>
    <script>window.analytics = "TRACKING SCRIPT TEXT";</script>
  </head>
  <body>
    <header>Site Header Banner</header>
    <nav><a href="/">Home</a> <a href="/recipes">Recipes</a></nav>
    <article>
      <h1>Fluffy Pancakes</h1>
      <h2>Ingredients</h2>
      <ul>
        <li>2 cups flour</li>
        <li>2 eggs</li>
        <li>1 1/2 cups milk</li>
        <li>1 tbsp sugar</li>
      </ul>
      <h2>Method</h2>
      <ol>
        <li>Whisk the flour and sugar together in a large bowl.</li>
        <li>Beat in the eggs and milk until smooth.</li>
        <li>Cook ladlefuls on a hot greased pan until golden on both sides.</li>
      </ol>
    </article>
    <footer>Copyright Footer Text</footer>
  </body>
</html>
"""

RECIPE = {
    "name": "Fluffy Pancakes",
    "category": "Breakfast",
    "ingredients": [
        {"qty": "2 cups", "name": "flour"},
        {"qty": "2", "name": "eggs"},
        {"qty": "1 1/2 cups", "name": "milk"},
        {"qty": "1 tbsp", "name": "sugar"},
    ],
    "method": "Whisk the flour and sugar.\nBeat in the eggs and milk.\nCook on a hot pan.",
    "notes": "",
}


def claude_reply(text: str, status: int = 200) -> httpx.Response:
    return httpx.Response(
        status,
        json={
            "id": "msg_test",
            "type": "message",
            "role": "assistant",
            "content": [{"type": "text", "text": text}],
            "stop_reason": "end_turn",
        },
    )


def html_page(html: str, status: int = 200) -> httpx.Response:
    return httpx.Response(status, text=html, headers={"content-type": "text/html; charset=utf-8"})


class FakeUpstream:
    """Answers outbound calls: Anthropic requests go to ``llm``, the rest to ``page``."""

    def __init__(self):
        self.requests: List[httpx.Request] = []
        self.client_kwargs: List[dict] = []
        self.page: Callable[[httpx.Request], httpx.Response] = lambda request: html_page(RECIPE_HTML)
        self.llm: Callable[[httpx.Request], httpx.Response] = lambda request: claude_reply(json.dumps(RECIPE))

    def handler(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if request.url.host == "api.anthropic.com":
            return self.llm(request)
        return self.page(request)

    @property
    def page_requests(self) -> List[httpx.Request]:
        return [r for r in self.requests if r.url.host != "api.anthropic.com"]

    @property
    def llm_requests(self) -> List[httpx.Request]:
        return [r for r in self.requests if r.url.host == "api.anthropic.com"]


@pytest.fixture
def upstream(monkeypatch):
    fake = FakeUpstream()
    transport = httpx.MockTransport(fake.handler)
    real_async_client = httpx.AsyncClient

    def client_factory(*args, **kwargs):
        fake.client_kwargs.append(dict(kwargs))
        kwargs["transport"] = transport
        return real_async_client(*args, **kwargs)

    monkeypatch.setattr(httpx, "AsyncClient", client_factory)
    return fake


@pytest.fixture
def settings():
    return Settings(
        _env_file=None,
        ANTHROPIC_API_KEY="test-key",
        ALLOWED_ORIGIN=ALLOWED_ORIGIN,
        DISCONNECT_POLL_SECONDS=5.0,
    )


@pytest.fixture
def app(settings):
    return create_app(settings)


@pytest.fixture
def client(app):
    return TestClient(app)
