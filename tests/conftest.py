"""Shared test fixtures for feedview."""

import os
import pytest

# Point the app at a fixed URL before any imports
os.environ["FEED_URL"] = "https://example.com/feed.xml"

from feedview.config import reset_settings


@pytest.fixture(autouse=True)
def _reset_config():
    """Reset settings singleton between tests."""
    reset_settings()
    yield
    reset_settings()
