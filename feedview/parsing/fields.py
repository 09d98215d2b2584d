"""Per-item field resolution.

Each canonical field is resolved by an ordered list of attempt functions;
the first one that yields a non-empty string wins and unresolved fields
come back as "".
"""

import logging
from dataclasses import dataclass

from feedview.parsing.namespaces import NamespaceMap
from feedview.parsing.tree import (
    Element,
    attribute,
    child_text,
    children,
    element_text,
    first_child,
    first_match,
)

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ResolvedFields:
    """Canonical text fields of one item."""

    title: str = ""
    link: str = ""
    published_raw: str = ""
    body: str = ""
    author: str = ""


def _text_link(element: Element, namespaces: NamespaceMap | None = None) -> str | None:
    # RSS: <link>https://...</link>
    return child_text(element, "link")


def _alternate_link(element: Element, namespaces: NamespaceMap | None = None) -> str | None:
    # Atom: <link rel="alternate" href="..."/>, rel defaults to alternate
    for link in children(element, "link"):
        rel = link.get("rel")
        if rel is None or rel == "alternate":
            return attribute(link, "href")
    return None


LINK_CHAIN = (_text_link, _alternate_link)


def resolve_link(element: Element | None) -> str:
    """Resolve a link on an item, channel or Atom feed element."""
    if element is None:
        return ""
    return first_match(LINK_CHAIN, element, None)


def _child(name: str):
    def attempt(item: Element, namespaces: NamespaceMap) -> str | None:
        return child_text(item, name)

    attempt.__name__ = f"child_{name}"
    return attempt


def _author_name(item: Element, namespaces: NamespaceMap) -> str | None:
    return child_text(first_child(item, "author"), "name")


def _author_text(item: Element, namespaces: NamespaceMap) -> str | None:
    return child_text(item, "author")


def _dc_creator(item: Element, namespaces: NamespaceMap) -> str | None:
    return element_text(namespaces.find(item, "dc", "creator"))


TITLE_CHAIN = (_child("title"),)
PUBLISHED_CHAIN = (_child("pubDate"), _child("published"), _child("updated"))
BODY_CHAIN = (_child("description"), _child("summary"), _child("content"))
AUTHOR_CHAIN = (_author_name, _author_text, _dc_creator)


class ItemFieldResolver:
    """Resolves title, link, date, body and author for one raw item."""

    title_chain = TITLE_CHAIN
    link_chain = LINK_CHAIN
    published_chain = PUBLISHED_CHAIN
    body_chain = BODY_CHAIN
    author_chain = AUTHOR_CHAIN

    def resolve(self, item: Element, namespaces: NamespaceMap) -> ResolvedFields:
        fields = ResolvedFields(
            title=first_match(self.title_chain, item, namespaces),
            link=first_match(self.link_chain, item, namespaces),
            published_raw=first_match(self.published_chain, item, namespaces),
            body=first_match(self.body_chain, item, namespaces),
            author=first_match(self.author_chain, item, namespaces),
        )
        if logger.isEnabledFor(logging.DEBUG):
            missing = [name for name, value in vars(fields).items() if not value]
            if missing:
                logger.debug("Item %r has no %s", fields.title, ", ".join(missing))
        return fields
