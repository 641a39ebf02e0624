"""Conversion of raw RSS bytes into FeedDocument models."""

import xml.etree.ElementTree as ET

from rssverify.errors import DocumentParseError

from .models import FeedDocument, FeedItem


def _local_name(tag: str) -> str:
    """Strip a '{namespace}' prefix from an element tag."""
    return tag.rsplit("}", 1)[-1]


def _namespace(tag: str) -> str:
    """Return the namespace URI of an element tag, or '' when it has none."""
    return tag[1:].split("}", 1)[0] if tag.startswith("{") else ""


def _child_text(element: ET.Element, name: str) -> str:
    """Return the text of the first child named ``name``, or ''.

    A child in the parent's own namespace wins over extension elements
    such as ``<itunes:title>`` that share the local name.
    """
    namespace = _namespace(element.tag)
    fallback = None
    for child in element:
        if _local_name(child.tag) != name:
            continue
        if _namespace(child.tag) == namespace:
            return child.text or ""
        if fallback is None:
            fallback = child
    return (fallback.text or "") if fallback is not None else ""


def _parse_item(element: ET.Element) -> FeedItem:
    return FeedItem(
        title=_child_text(element, "title"),
        description=_child_text(element, "description"),
        pub_date=_child_text(element, "pubDate"),
        guid=_child_text(element, "guid"),
    )


def parse_feed(data: bytes) -> FeedDocument:
    """
    Parse RSS XML into a FeedDocument.

    Elements are matched by local name, so namespaced feeds are accepted.
    Missing scalar elements become empty strings and are left for the
    validation rules to report.

    Args:
        data: Raw bytes of the feed file

    Returns:
        The parsed channel with its items in document order

    Raises:
        DocumentParseError: If the XML is malformed, the root is not <rss>,
            or the root has no <channel> element
    """
    try:
        root = ET.fromstring(data)
    except ET.ParseError as e:
        raise DocumentParseError(str(e)) from e

    root_name = _local_name(root.tag)
    if root_name != "rss":
        raise DocumentParseError(
            f"expected element type <rss> but have <{root_name}>"
        )

    channel = next(
        (child for child in root if _local_name(child.tag) == "channel"), None
    )
    if channel is None:
        raise DocumentParseError("missing <channel> element in <rss>")

    items = tuple(
        _parse_item(child) for child in channel if _local_name(child.tag) == "item"
    )

    return FeedDocument(
        title=_child_text(channel, "title"),
        description=_child_text(channel, "description"),
        pub_date=_child_text(channel, "pubDate"),
        items=items,
    )
