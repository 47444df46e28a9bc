"""HTML fetching for URL-based recipe extraction."""

import logging
from typing import Optional

import httpx
from bs4 import BeautifulSoup

from recime_recipes.app.core.config import get_settings

logger = logging.getLogger(__name__)


class FetchError(Exception):
    """Raised when a page cannot be retrieved: timeout, network failure, or non-success status."""

    def __init__(self, url: str, message: str, status_code: Optional[int] = None) -> None:
        super().__init__(message)
        self.url = url
        self.message = message
        self.status_code = status_code


async def fetch_document(url: str) -> BeautifulSoup:
    """Fetch a page once and return its parsed document tree.

    The URL is expected to be a validated http(s) URL. There is no retry; any
    transport failure or 4xx/5xx response surfaces as :class:`FetchError`.
    """
    settings = get_settings()
    headers = {
        "User-Agent": settings.scraper_user_agent,
        "Accept": "text/html,application/xhtml+xml,application/xml;q=0.9,*/*;q=0.8",
        "Accept-Language": "en-US,en;q=0.9",
    }
    if settings.scraper_cookies:
        headers["Cookie"] = settings.scraper_cookies
    timeout = httpx.Timeout(settings.scraper_timeout_seconds)

    try:
        async with httpx.AsyncClient(
            timeout=timeout, follow_redirects=True, headers=headers
        ) as client:
            response = await client.get(url)
            response.raise_for_status()
    except httpx.TimeoutException as exc:
        logger.warning("Timed out fetching %s after %.1fs", url, settings.scraper_timeout_seconds)
        raise FetchError(url, "Timed out fetching the page.") from exc
    except httpx.HTTPStatusError as exc:
        status_code = exc.response.status_code
        logger.warning("Fetching %s returned status %s", url, status_code)
        raise FetchError(url, f"Site returned status {status_code}.", status_code=status_code) from exc
    except (httpx.HTTPError, httpx.InvalidURL) as exc:
        logger.exception("Failed to fetch URL %s", url)
        raise FetchError(url, f"Network error: {exc}") from exc

    logger.info(
        "Fetched %s (status=%s, %d bytes)", url, response.status_code, len(response.content)
    )
    return BeautifulSoup(response.text, settings.html_parser)
