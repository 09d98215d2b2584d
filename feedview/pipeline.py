"""Feed pipeline - orchestrates fetch, parse and normalize for one request."""

import logging

from feedview.config import Settings, get_settings
from feedview.errors import FeedError
from feedview.fetchers import BaseFetcher, HTTPFetcher
from feedview.models import FeedPage
from feedview.parsing import FeedDocumentParser, FeedNormalizer

logger = logging.getLogger(__name__)


class FeedPipeline:
    """Runs fetch -> parse -> normalize and folds aborts into a FeedPage.

    Uses dependency injection for the fetcher, parser and normalizer,
    making all components testable in isolation.
    """

    def __init__(
        self,
        feed_url: str,
        fetcher: BaseFetcher | None = None,
        parser: FeedDocumentParser | None = None,
        normalizer: FeedNormalizer | None = None,
    ) -> None:
        self.feed_url = feed_url
        self.fetcher = fetcher or HTTPFetcher()
        self.parser = parser or FeedDocumentParser()
        self.normalizer = normalizer or FeedNormalizer()

    @classmethod
    def from_settings(cls, settings: Settings | None = None) -> "FeedPipeline":
        settings = settings or get_settings()
        return cls(
            feed_url=settings.feed_url,
            fetcher=HTTPFetcher(
                timeout=settings.fetch_timeout, user_agent=settings.user_agent
            ),
            normalizer=FeedNormalizer(
                max_items=settings.max_items,
                display_timezone=settings.display_timezone,
            ),
        )

    def run(self) -> FeedPage:
        """Execute the pipeline once.

        Fetch and parse failures abort before normalization and come back as
        a page carrying only the user-visible message.
        """
        try:
            raw = self.fetcher.fetch(self.feed_url)
            tree = self.parser.parse(raw)
        except FeedError as exc:
            logger.error("Feed pipeline aborted for %s: %s", self.feed_url, exc)
            return FeedPage(error=exc.user_message)

        return FeedPage(feed=self.normalizer.normalize(tree))
