"""Feed document parsing: raw bytes to a channel/entry tree."""

import logging
import re
from dataclasses import dataclass

from lxml import etree

from feedview.errors import ParseError
from feedview.parsing.fields import resolve_link
from feedview.parsing.tree import Element, child_text, children, first_child, first_match

logger = logging.getLogger(__name__)

DEFAULT_FEED_TITLE = "Feed"


@dataclass(frozen=True)
class FeedTree:
    """Parsed feed: feed-level fields plus raw item elements in document order."""

    kind: str
    title: str
    link: str
    description: str
    items: tuple[Element, ...] = ()


_XML_DECLARATION = re.compile(r"^\s*<\?xml[^>]*\?>")


def _make_parser() -> etree.XMLParser:
    # Internal DTD entities expand to text; external ones are never loaded.
    return etree.XMLParser(
        resolve_entities="internal",
        no_network=True,
        remove_comments=True,
    )


class FeedDocumentParser:
    """Parses RSS 2.0 and Atom documents with lxml."""

    def parse(self, raw: bytes | str) -> FeedTree:
        """Parse a feed document.

        Args:
            raw: Document bytes; the XML declaration or BOM picks the encoding.
                Text input is taken as already decoded.

        Returns:
            FeedTree with zero items when the document is well-formed but has
            neither ``channel/item`` nor ``entry`` children.

        Raises:
            ParseError: If the document is not well-formed XML.
        """
        if isinstance(raw, str):
            # Already decoded; a leftover encoding declaration no longer applies.
            raw = _XML_DECLARATION.sub("", raw, count=1).encode("utf-8")
        try:
            root = etree.fromstring(raw, parser=_make_parser())
        except (etree.XMLSyntaxError, ValueError) as exc:
            logger.warning("Feed document is not well-formed XML: %s", exc)
            raise ParseError(f"Malformed feed document: {exc}") from exc

        channel = first_child(root, "channel")
        items = children(channel, "item")
        if items:
            kind = "rss"
        else:
            items = children(root, "entry")
            if items:
                kind = "atom"
            elif channel is not None:
                kind = "rss"
            elif etree.QName(root).localname == "feed":
                kind = "atom"
            else:
                kind = "unknown"

        title = first_match(
            (lambda: child_text(channel, "title"), lambda: child_text(root, "title"))
        )
        description = first_match(
            (
                lambda: child_text(channel, "description"),
                lambda: child_text(root, "subtitle"),
            )
        )
        link = resolve_link(channel) or resolve_link(root)

        logger.debug("Parsed %s document with %d items", kind, len(items))
        return FeedTree(
            kind=kind,
            title=title or DEFAULT_FEED_TITLE,
            link=link,
            description=description,
            items=tuple(items),
        )
