"""Prefix-to-URI namespace maps scoped to one feed item."""

from dataclasses import dataclass, field

from lxml import etree

from feedview.parsing.tree import Element

# Vendor extensions the resolvers look for, keyed by their customary prefix.
WELL_KNOWN_NAMESPACES = {
    "dc": "http://purl.org/dc/elements/1.1/",
    "media": "http://search.yahoo.com/mrss/",
    "content": "http://purl.org/rss/1.0/modules/content/",
}


@dataclass(frozen=True)
class NamespaceMap:
    """Namespace declarations in scope for one item subtree.

    Lookups answer ``None`` for "not found" instead of raising, so a feed
    that never declares ``dc`` simply has no creator.
    """

    prefixes: dict[str, str] = field(default_factory=dict)

    @classmethod
    def for_element(cls, element: Element) -> "NamespaceMap":
        """Collect the prefixes visible on ``element`` and its descendants.

        The nearest declaration wins when a prefix is rebound lower down.
        """
        prefixes: dict[str, str] = {}
        for node in element.iter(etree.Element):
            for prefix, uri in node.nsmap.items():
                if prefix is not None:
                    prefixes.setdefault(prefix, uri)
        return cls(prefixes)

    def __contains__(self, prefix: str) -> bool:
        return self.uri(prefix) is not None

    def uri(self, prefix: str) -> str | None:
        """URI bound to ``prefix``.

        Falls back to the well-known URI for ``prefix`` when the feed declares
        it under a different prefix (``xmlns:m=".../mrss/"``).
        """
        if prefix in self.prefixes:
            return self.prefixes[prefix]
        known = WELL_KNOWN_NAMESPACES.get(prefix)
        if known is not None and known in self.prefixes.values():
            return known
        return None

    def find(self, element: Element | None, prefix: str, name: str) -> Element | None:
        """First direct child ``prefix:name`` of ``element``, if any."""
        if element is None:
            return None
        uri = self.uri(prefix)
        if uri is None:
            return None
        return element.find(f"{{{uri}}}{name}")
