"""Representative image extraction for feed items."""

import re

from feedview.parsing.namespaces import NamespaceMap
from feedview.parsing.tree import Element, attribute, element_text, first_child, first_match

# Heuristic, not an HTML parse: it can also hit "<img" inside comments or
# escaped text within the markup.
_IMG_SRC = re.compile(r"""<img[^>]+src=["']([^"']+)["']""", re.IGNORECASE)


def find_img_src(html: str | None) -> str | None:
    """src of the first <img> tag in an HTML fragment."""
    if not html:
        return None
    match = _IMG_SRC.search(html)
    return match.group(1) if match else None


def _from_enclosure(item, namespaces, body, content):
    return attribute(first_child(item, "enclosure"), "url")


def _from_media(item, namespaces, body, content):
    if "media" not in namespaces:
        return None
    return attribute(namespaces.find(item, "media", "content"), "url") or attribute(
        namespaces.find(item, "media", "thumbnail"), "url"
    )


def _from_body(item, namespaces, body, content):
    return find_img_src(body)


def _from_content(item, namespaces, body, content):
    if content is None:
        content = element_text(first_child(item, "content"))
    if not content or content == body:
        return None
    return find_img_src(content)


def _from_encoded(item, namespaces, body, content):
    if "content" not in namespaces:
        return None
    return find_img_src(element_text(namespaces.find(item, "content", "encoded")))


IMAGE_CHAIN = (_from_enclosure, _from_media, _from_body, _from_content, _from_encoded)


class ImageExtractor:
    """Picks one image URL per item; "" means the item has no image."""

    chain = IMAGE_CHAIN

    def extract(
        self,
        item: Element,
        namespaces: NamespaceMap,
        body: str = "",
        encoded_content: str | None = None,
    ) -> str:
        """Run the image heuristics in order.

        Args:
            item: Raw item/entry element.
            namespaces: Namespace map scoped to ``item``.
            body: The item's resolved body HTML.
            encoded_content: Raw ``content`` HTML; looked up on ``item`` when
                not given.

        Returns:
            The first image URL found, or "".
        """
        return first_match(self.chain, item, namespaces, body, encoded_content)
