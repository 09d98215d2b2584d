"""HTTP feed fetcher."""

import logging

import httpx

from feedview.errors import FetchError
from feedview.fetchers.base import BaseFetcher

logger = logging.getLogger(__name__)


class HTTPFetcher(BaseFetcher):
    """Fetches feed bytes over HTTP(S) with httpx."""

    def connect(self, url: str) -> bytes:
        """GET the feed document, mapping transport failures to FetchError.

        A URL that cannot be parsed (bad port, unbalanced IPv6 brackets)
        counts as a failed fetch too.
        """
        logger.info("Fetching feed %s", url)
        try:
            return self._http_get(url)
        except (httpx.HTTPError, httpx.InvalidURL, ValueError) as exc:
            logger.warning("Fetch failed for %s: %s", url, exc)
            raise FetchError(f"Fetch failed for {url}: {exc}") from exc
