"""Feed normalizer - turns a parsed FeedTree into an immutable Feed."""

import logging
from datetime import tzinfo
from itertools import islice

from dateutil import parser as dateutil_parser
from dateutil import tz

from feedview.models import Feed, Item
from feedview.parsing.document import FeedTree
from feedview.parsing.fields import ItemFieldResolver
from feedview.parsing.images import ImageExtractor
from feedview.parsing.namespaces import NamespaceMap
from feedview.parsing.tree import Element

logger = logging.getLogger(__name__)

MAX_ITEMS = 50


def format_display_date(raw: str, display_tz: tzinfo | None = None) -> str:
    """Render a feed date as "Jan 5, 2024, 3:42pm".

    Aware dates are converted to ``display_tz``; naive dates are shown as
    given. Unparseable input comes back unchanged.
    """
    if not raw:
        return ""
    try:
        parsed = dateutil_parser.parse(raw)
        if display_tz is not None and parsed.tzinfo is not None:
            parsed = parsed.astimezone(display_tz)
    except (ValueError, OverflowError) as exc:
        logger.debug("Unparseable date %r: %s", raw, exc)
        return raw
    hour = parsed.hour % 12 or 12
    meridiem = "am" if parsed.hour < 12 else "pm"
    return f"{parsed:%b} {parsed.day}, {parsed.year}, {hour}:{parsed:%M}{meridiem}"


class FeedNormalizer:
    """Orchestrates field resolution and image extraction over all items.

    Pure transformation: no network access and no presentation concerns.
    """

    def __init__(
        self,
        max_items: int = MAX_ITEMS,
        display_timezone: str = "UTC",
        resolver: ItemFieldResolver | None = None,
        image_extractor: ImageExtractor | None = None,
    ) -> None:
        self.max_items = max(0, min(max_items, MAX_ITEMS))
        self.display_tz = tz.gettz(display_timezone) or tz.UTC
        self.resolver = resolver or ItemFieldResolver()
        self.image_extractor = image_extractor or ImageExtractor()

    def normalize(self, tree: FeedTree) -> Feed:
        """Build the Feed from the first ``max_items`` items, in document order."""
        items = tuple(
            self.normalize_item(node) for node in islice(tree.items, self.max_items)
        )
        if len(tree.items) > len(items):
            logger.info(
                "Feed %r has %d items, keeping the first %d",
                tree.title,
                len(tree.items),
                len(items),
            )
        logger.info("Normalized %d items from %r", len(items), tree.title)
        return Feed(
            title=tree.title,
            link=tree.link,
            description=tree.description,
            items=items,
        )

    def normalize_item(self, node: Element) -> Item:
        namespaces = NamespaceMap.for_element(node)
        fields = self.resolver.resolve(node, namespaces)
        image = self.image_extractor.extract(node, namespaces, fields.body)
        return Item(
            title=fields.title,
            link=fields.link,
            published_raw=fields.published_raw,
            published_display=format_display_date(fields.published_raw, self.display_tz),
            body=fields.body,
            author=fields.author,
            image=image,
        )
