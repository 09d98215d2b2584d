"""Base fetcher - Template Method pattern."""

from abc import ABC, abstractmethod

import httpx

from feedview.errors import FetchError


class BaseFetcher(ABC):
    """Abstract base class for feed fetchers.

    Uses the Template Method pattern: fetch() defines the workflow,
    subclasses override connect() and may tighten validate().
    """

    def __init__(self, timeout: float = 10.0, user_agent: str = "") -> None:
        self.timeout = timeout
        self.user_agent = user_agent

    def fetch(self, url: str) -> bytes:
        """Template method: connect -> validate.

        Args:
            url: The feed URL to retrieve.

        Returns:
            Raw feed bytes, never empty.

        Raises:
            FetchError: If nothing usable could be retrieved.
        """
        raw = self.connect(url)
        return self.validate(raw, url)

    @abstractmethod
    def connect(self, url: str) -> bytes:
        """Fetch raw content from the URL.

        Args:
            url: The URL to connect to.

        Returns:
            Raw response content.
        """
        ...

    def validate(self, raw: bytes, url: str) -> bytes:
        """Reject empty or whitespace-only responses."""
        if not raw or not raw.strip():
            raise FetchError(f"Empty response from {url}")
        return raw

    def _http_get(self, url: str, headers: dict | None = None) -> bytes:
        """Shared HTTP GET helper."""
        headers = dict(headers or {})
        if self.user_agent:
            headers.setdefault("User-Agent", self.user_agent)
        with httpx.Client(timeout=self.timeout, follow_redirects=True) as client:
            resp = client.get(url, headers=headers)
            resp.raise_for_status()
            return resp.content
