"""Feed page renderer - turns a FeedPage into HTML."""

import re
from dataclasses import dataclass
from pathlib import Path
from urllib.parse import urlsplit

from bs4 import BeautifulSoup
from jinja2 import Environment, FileSystemLoader

from feedview.config import get_settings
from feedview.models import FeedPage, Item

_TEMPLATE_DIR = Path(__file__).resolve().parent / "templates"

UNKNOWN_AUTHOR = "Unknown"
DEFAULT_PAGE_TITLE = "RSS Feed"


@dataclass
class Card:
    """Display-ready view of one Item."""

    title: str
    link: str
    image: str
    author: str
    date: str
    excerpt: str


def _get_jinja_env() -> Environment:
    return Environment(
        loader=FileSystemLoader(str(_TEMPLATE_DIR)),
        autoescape=True,
    )


_SAFE_SCHEMES = {"", "http", "https"}
# Browsers drop these before reading a scheme ("java\tscript:").
_URL_IGNORED_CHARS = re.compile(r"[\x00-\x20\x7f]")


def safe_url(url: str) -> str:
    """``url`` if it is http(s) or relative, else ""."""
    if not url:
        return ""
    try:
        scheme = urlsplit(_URL_IGNORED_CHARS.sub("", url)).scheme
    except ValueError:
        return ""
    return url if scheme.lower() in _SAFE_SCHEMES else ""


def make_excerpt(body: str, length: int = 280) -> str:
    """Tag-stripped body text, cut to ``length`` characters with "..."."""
    if not body:
        return ""
    text = BeautifulSoup(body, "html.parser").get_text(" ")
    text = " ".join(text.split())
    if len(text) > length:
        text = text[: length - 3] + "..."
    return text


def make_card(item: Item, excerpt_length: int = 280) -> Card:
    return Card(
        title=item.title,
        link=safe_url(item.link),
        image=safe_url(item.image),
        author=item.author or UNKNOWN_AUTHOR,
        date=item.published_display,
        excerpt=make_excerpt(item.body, excerpt_length),
    )


def render_feed_page(page: FeedPage) -> str:
    """Render the full HTML page for a pipeline result."""
    settings = get_settings()
    feed = page.feed
    cards = []
    if feed is not None:
        cards = [
            make_card(item, settings.excerpt_length)
            for item in feed.items[: settings.display_limit]
        ]

    template = _get_jinja_env().get_template("feed.html")
    return template.render(
        title=feed.title if feed is not None else DEFAULT_PAGE_TITLE,
        description=feed.description if feed is not None else "",
        feed_link=safe_url(feed.link) if feed is not None else "",
        error=page.error,
        cards=cards,
    )
