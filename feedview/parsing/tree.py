"""Null-safe helpers over lxml elements.

Every helper accepts ``None`` in place of an element and answers with
``None`` (or an empty list), so resolver steps can be written as plain
lookups without guarding each level of the tree.
"""

from collections.abc import Callable, Iterable

from lxml import etree

Element = etree._Element


def _namespace(element: Element) -> str | None:
    return etree.QName(element).namespace


def children(element: Element | None, name: str) -> list[Element]:
    """Direct children called ``name`` in the parent's own namespace."""
    if element is None:
        return []
    namespace = _namespace(element)
    found = []
    for child in element:
        if not isinstance(child.tag, str):
            continue
        qname = etree.QName(child)
        if qname.localname == name and qname.namespace == namespace:
            found.append(child)
    return found


def first_child(element: Element | None, name: str) -> Element | None:
    matches = children(element, name)
    return matches[0] if matches else None


def element_text(element: Element | None) -> str | None:
    """Direct text content of an element, stripped.

    Atom text constructs declared ``type="xhtml"`` keep their inner markup
    so HTML bodies are not flattened to whitespace.
    """
    if element is None:
        return None
    if element.get("type") == "xhtml" and len(element):
        parts = [element.text or ""]
        parts.extend(
            etree.tostring(child, encoding="unicode", with_tail=True)
            for child in element
        )
    else:
        parts = [element.text or ""]
        parts.extend(child.tail or "" for child in element)
    return "".join(parts).strip()


def attribute(element: Element | None, name: str) -> str | None:
    if element is None:
        return None
    value = element.get(name)
    return value.strip() if value is not None else None


def child_text(element: Element | None, name: str) -> str | None:
    return element_text(first_child(element, name))


def first_match(attempts: Iterable[Callable[..., str | None]], *args) -> str:
    """Run attempts in order and return the first non-empty result, else ""."""
    for attempt in attempts:
        value = attempt(*args)
        if value:
            return value
    return ""
