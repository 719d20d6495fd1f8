"""
Wikipedia client - article extracts and category listings.

Plain requests against the MediaWiki action API, with retries for transient
failures and a minimum gap between requests.
"""

import logging
import time
from typing import Optional

import requests

from config import Settings

logger = logging.getLogger(__name__)

RETRY_STATUS = {429, 500, 502, 503, 504}


class SourceError(Exception):
    """A collaborator request failed for good (after retries)."""
    pass


class WikipediaClient:
    """
    Thin MediaWiki API client.

    Usage:
        client = WikipediaClient(settings)
        text = client.fetch_article_text("Paris")   # None if missing
    """

    def __init__(self, settings: Optional[Settings] = None,
                 session: Optional[requests.Session] = None,
                 sleep=time.sleep, clock=time.monotonic):
        self.settings = settings or Settings()
        self.session = session or requests.Session()
        self.session.headers.update({"User-Agent": self.settings.user_agent})
        self._sleep = sleep
        self._clock = clock
        self._last_request: Optional[float] = None

    def _throttle(self) -> None:
        if self._last_request is None:
            return
        wait = self.settings.min_request_interval - (self._clock() - self._last_request)
        if wait > 0:
            self._sleep(wait)

    def _get(self, params: dict) -> dict:
        """GET the API with retries. Returns decoded JSON."""
        params = {"format": "json", "origin": "*", **params}
        attempts = self.settings.max_retries + 1
        last_error = None

        for attempt in range(attempts):
            if attempt:
                delay = self.settings.retry_backoff * (2 ** (attempt - 1))
                logger.info("[WIKI] Retry %d/%d in %.1fs: %s", attempt, attempts - 1, delay, last_error)
                self._sleep(delay)

            self._throttle()
            self._last_request = self._clock()
            try:
                response = self.session.get(
                    self.settings.api_url, params=params, timeout=self.settings.timeout
                )
            except (requests.ConnectionError, requests.Timeout) as e:
                last_error = str(e)
                continue

            if response.status_code in RETRY_STATUS:
                last_error = f"HTTP {response.status_code}"
                continue
            try:
                response.raise_for_status()
                return response.json()
            except (requests.HTTPError, ValueError) as e:
                raise SourceError(f"Bad response for {params}: {e}") from e

        raise SourceError(f"Giving up after {attempts} attempts: {last_error}")

    def fetch_article_text(self, title: str) -> Optional[str]:
        """Plain-text extract of an article, or None if there isn't one."""
        data = self._get({
            "action": "query",
            "explaintext": "true",
            "exsectionformat": "plain",
            "prop": "extracts",
            "titles": title,
        })
        pages = data.get("query", {}).get("pages", {})
        if not pages:
            return None
        page = next(iter(pages.values()))
        text = page.get("extract")
        if not text:
            logger.debug("[WIKI] No extract for %s", title)
            return None
        return text

    def list_category_members(self, category: str) -> list[dict]:
        """
        Members of a category (first 500), as {"ns", "title", ...} dicts.

        Raises:
            SourceError: the response has no member listing
        """
        data = self._get({
            "action": "query",
            "cmlimit": "500",
            "cmtitle": category,
            "list": "categorymembers",
        })
        try:
            return data["query"]["categorymembers"]
        except (KeyError, TypeError):
            raise SourceError(f"No category members for {category}")
