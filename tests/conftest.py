import httpx
import pytest
from bs4 import BeautifulSoup

from recime_recipes.app.core.config import get_settings
from recime_recipes.app.services.extraction import html_fetcher


@pytest.fixture(autouse=True)
def fresh_settings():
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def make_soup():
    def _make(html: str) -> BeautifulSoup:
        return BeautifulSoup(html, "lxml")

    return _make


@pytest.fixture
def mock_transport(monkeypatch):
    """Route the fetcher's AsyncClient through an httpx.MockTransport handler."""
    real_client = httpx.AsyncClient

    def install(handler):
        def client_factory(*args, **kwargs):
            kwargs["transport"] = httpx.MockTransport(handler)
            return real_client(*args, **kwargs)

        monkeypatch.setattr(html_fetcher.httpx, "AsyncClient", client_factory)

    return install
