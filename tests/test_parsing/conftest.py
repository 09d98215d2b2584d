"""Fixtures for parsing tests."""

import pytest
from lxml import etree

from feedview.parsing import NamespaceMap

NAMESPACES = (
    'xmlns:dc="http://purl.org/dc/elements/1.1/" '
    'xmlns:media="http://search.yahoo.com/mrss/" '
    'xmlns:content="http://purl.org/rss/1.0/modules/content/"'
)


def rss_item(inner: str, namespaces: str = NAMESPACES):
    """Parse an <item> wrapped in a minimal RSS channel and return it."""
    doc = f'<rss version="2.0" {namespaces}><channel><item>{inner}</item></channel></rss>'
    root = etree.fromstring(doc.encode("utf-8"))
    return root.find("channel/item")


def atom_entry(inner: str):
    doc = f'<feed xmlns="http://www.w3.org/2005/Atom"><entry>{inner}</entry></feed>'
    root = etree.fromstring(doc.encode("utf-8"))
    return root.find("{http://www.w3.org/2005/Atom}entry")


@pytest.fixture
def make_rss_item():
    def _make(inner: str, namespaces: str = NAMESPACES):
        item = rss_item(inner, namespaces)
        return item, NamespaceMap.for_element(item)

    return _make


@pytest.fixture
def make_atom_entry():
    def _make(inner: str):
        entry = atom_entry(inner)
        return entry, NamespaceMap.for_element(entry)

    return _make
