"""Tests for the feed pipeline orchestrator."""

import pytest
from unittest.mock import MagicMock

from feedview.config import Settings
from feedview.errors import FetchError
from feedview.fetchers import BaseFetcher, HTTPFetcher
from feedview.models import FeedPage
from feedview.parsing import FeedDocumentParser, FeedNormalizer
from feedview.pipeline import FeedPipeline

FEED_URL = "https://example.com/feed.xml"

SAMPLE_RSS = b"""<?xml version="1.0" encoding="UTF-8"?>
<rss version="2.0">
  <channel>
    <title>Test Feed</title>
    <item><title>First</title><link>https://example.com/1</link></item>
    <item><title>Second</title><link>https://example.com/2</link></item>
  </channel>
</rss>"""


class StaticFetcher(BaseFetcher):
    def __init__(self, payload: bytes):
        super().__init__()
        self.payload = payload

    def connect(self, url):
        return self.payload


class TestFeedPipeline:
    def test_successful_run(self):
        pipeline = FeedPipeline(FEED_URL, fetcher=StaticFetcher(SAMPLE_RSS))
        page = pipeline.run()
        assert page.ok
        assert page.error is None
        assert page.feed.title == "Test Feed"
        assert [item.title for item in page.feed.items] == ["First", "Second"]

    def test_empty_fetch_is_fetch_failure(self):
        pipeline = FeedPipeline(FEED_URL, fetcher=StaticFetcher(b""))
        page = pipeline.run()
        assert not page.ok
        assert page.feed is None
        assert page.error == "Unable to fetch feed."

    def test_transport_failure(self):
        fetcher = MagicMock(spec=BaseFetcher)
        fetcher.fetch.side_effect = FetchError("connection refused")
        page = FeedPipeline(FEED_URL, fetcher=fetcher).run()
        assert page.error == "Unable to fetch feed."
        fetcher.fetch.assert_called_once_with(FEED_URL)

    def test_malformed_xml_is_parse_failure(self):
        pipeline = FeedPipeline(FEED_URL, fetcher=StaticFetcher(b"<rss><channel>"))
        page = pipeline.run()
        assert page.feed is None
        assert page.error == "Invalid feed format."

    def test_parse_failure_skips_normalization(self):
        normalizer = MagicMock(spec=FeedNormalizer)
        pipeline = FeedPipeline(
            FEED_URL, fetcher=StaticFetcher(b"<broken"), normalizer=normalizer
        )
        pipeline.run()
        normalizer.normalize.assert_not_called()

    def test_structureless_document_is_empty_feed_not_error(self):
        pipeline = FeedPipeline(FEED_URL, fetcher=StaticFetcher(b"<nothing/>"))
        page = pipeline.run()
        assert page.ok
        assert page.feed.items == ()


class TestFromSettings:
    def test_wires_settings(self):
        settings = Settings(
            feed_url="https://other.example/rss",
            fetch_timeout=3.0,
            user_agent="UA/1",
            max_items=5,
            display_timezone="Europe/Oslo",
        )
        pipeline = FeedPipeline.from_settings(settings)
        assert pipeline.feed_url == "https://other.example/rss"
        assert isinstance(pipeline.fetcher, HTTPFetcher)
        assert pipeline.fetcher.timeout == 3.0
        assert pipeline.fetcher.user_agent == "UA/1"
        assert pipeline.normalizer.max_items == 5
        assert isinstance(pipeline.parser, FeedDocumentParser)

    def test_defaults_from_environment(self):
        pipeline = FeedPipeline.from_settings()
        assert pipeline.feed_url == FEED_URL
        assert pipeline.fetcher.timeout == 10.0


class TestFeedPage:
    def test_requires_exactly_one_of_feed_or_error(self):
        with pytest.raises(ValueError):
            FeedPage()


class TestMalformedFeedURL:
    def test_bad_url_is_fetch_failure(self):
        page = FeedPipeline("http://[::1").run()
        assert page.error == "Unable to fetch feed."
