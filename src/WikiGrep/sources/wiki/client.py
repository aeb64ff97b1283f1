"""Federated Wiki HTTP client."""

from __future__ import annotations

import random
import time
from typing import Any
from urllib.parse import quote

import requests

from WikiGrep.utils.log import log

DEFAULT_TIMEOUT = 30.0
MAX_ATTEMPTS = 4
BASE_PAUSE = 0.8
MAX_SLEEP = 8.0
RETRYABLE_STATUS = {429, 500, 502, 503, 504}

HEADERS = {
    "User-Agent": "wiki-grep/0.1",
    "Accept": "application/json",
}


class WikiApiClient:
    """Low-level HTTP client for one wiki site.

    ``requests.Session`` is shared across worker threads; only ``get`` is
    called concurrently.
    """

    def __init__(self, site: str, *, timeout: float = DEFAULT_TIMEOUT) -> None:
        """Initialize the client.

        Args:
            site: Site origin, e.g. ``http://fed.wiki.org``; a bare host gets
                ``http://`` prepended.
            timeout: Per-request timeout in seconds.
        """
        site = site.strip().rstrip("/")
        if "://" not in site:
            site = f"http://{site}"
        self.site = site
        self.timeout = timeout
        self._session = requests.Session()

    def close(self) -> None:
        """Close the underlying HTTP session."""
        self._session.close()

    def fetch_sitemap(self) -> Any:
        """Fetch ``/system/sitemap.json`` and return the decoded JSON."""
        return self._get_json(f"{self.site}/system/sitemap.json")

    def fetch_page(self, slug: str) -> Any:
        """Fetch ``/<slug>.json`` and return the decoded JSON."""
        return self._get_json(f"{self.site}/{quote(slug)}.json")

    def _get_json(self, url: str) -> Any:
        response = self._get_with_retry(url)
        response.raise_for_status()
        return response.json()

    def _get_with_retry(self, url: str) -> requests.Response:
        """Issue GET with retries for transient failures."""
        last_error: Exception | None = None
        for attempt in range(1, MAX_ATTEMPTS + 1):
            try:
                response = self._session.get(url, headers=HEADERS, timeout=self.timeout)
                if response.status_code in RETRYABLE_STATUS:
                    raise requests.HTTPError(f"HTTP {response.status_code}", response=response)
                return response
            except (requests.Timeout, requests.ConnectionError, requests.HTTPError) as error:
                last_error = error
                if isinstance(error, requests.HTTPError):
                    status_code = getattr(error.response, "status_code", None)
                    if status_code not in RETRYABLE_STATUS:
                        raise
                if attempt < MAX_ATTEMPTS:
                    delay = min(BASE_PAUSE * (2 ** (attempt - 1)) + random.uniform(0, 0.3), MAX_SLEEP)
                    log.debug("Wiki retry url=%s attempt=%d/%d delay=%.2fs error=%s", url, attempt, MAX_ATTEMPTS, delay, error)
                    time.sleep(delay)

        assert last_error is not None
        raise last_error
