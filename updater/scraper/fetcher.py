"""HTTP fetcher for the vendor index page and the addon archive."""

from __future__ import annotations

import logging

import httpx

from updater.config import settings
from updater.errors import FetchError
from updater.scraper.models import DownloadedArchive, RawPage

logger = logging.getLogger(__name__)


def _headers() -> dict[str, str]:
    return {"User-Agent": settings.user_agent}


def _get(url: str) -> httpx.Response:
    """GET *url* following redirects; anything but a 200 is a :class:`FetchError`."""
    try:
        with httpx.Client(
            headers=_headers(),
            timeout=settings.request_timeout,
            follow_redirects=True,
        ) as client:
            response = client.get(url)
    except (httpx.HTTPError, httpx.InvalidURL) as e:
        raise FetchError(url, str(e) or type(e).__name__) from e

    if response.status_code != 200:
        raise FetchError(url, f"HTTP {response.status_code}")
    return response


def fetch_url(url: str) -> RawPage:
    """Fetch *url* and return a :class:`RawPage`.

    Raises:
        FetchError: On transport failure or a non-200 response.
    """
    response = _get(url)
    logger.info("Retrieved response from %s", url)
    return RawPage(url=url, html=response.text, status_code=response.status_code)


def fetch_archive(url: str) -> DownloadedArchive:
    """Download the archive at *url* into memory.

    The URL the body was finally served from (after redirects) is kept so
    the caller can name the file after it.

    Raises:
        FetchError: On transport failure or a non-200 response.
    """
    response = _get(url)
    final_url = str(response.url)
    logger.info("File downloaded from URL -> %s", final_url)
    return DownloadedArchive(url=url, final_url=final_url, content=response.content)


class HttpFetcher:
    """Default network capability injected into the update pipeline."""

    def fetch_page(self, url: str) -> RawPage:
        return fetch_url(url)

    def fetch_archive(self, url: str) -> DownloadedArchive:
        return fetch_archive(url)
