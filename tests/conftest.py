"""Shared fixtures for the RSS verifier tests."""

import pytest

from rssverify.rss.models import FeedDocument, FeedItem


def make_item(
    guid: str,
    pub_date: str = "Wed, 15 Jan 2025 10:00:00 +0000",
    title: str | None = None,
) -> FeedItem:
    """Helper to create a FeedItem for testing."""
    return FeedItem(
        title=title or f"Episode {guid}",
        description=f"About {guid}",
        pub_date=pub_date,
        guid=guid,
    )


def make_feed_xml(
    channel_date: str = "Wed, 15 Jan 2025 10:00:00 +0000",
    items: list[tuple[str, str]] | None = None,
) -> str:
    """Build an RSS document from (guid, pubDate) pairs."""
    if items is None:
        items = [
            ("ep-2", "Wed, 15 Jan 2025 10:00:00 +0000"),
            ("ep-1", "Tue, 14 Jan 2025 10:00:00 +0000"),
        ]
    entries = "".join(
        f"""
    <item>
      <title>Episode {guid}</title>
      <description>About {guid}</description>
      <pubDate>{pub_date}</pubDate>
      <guid isPermaLink="false">{guid}</guid>
    </item>"""
        for guid, pub_date in items
    )
    return f"""<?xml version="1.0" encoding="UTF-8"?>
<rss version="2.0">
  <channel>
    <title>Test Channel</title>
    <description>A channel for tests</description>
    <pubDate>{channel_date}</pubDate>{entries}
  </channel>
</rss>
"""


@pytest.fixture
def valid_document() -> FeedDocument:
    """A feed that passes every rule."""
    return FeedDocument(
        title="Test Channel",
        description="A channel for tests",
        pub_date="Wed, 15 Jan 2025 10:00:00 +0000",
        items=(
            make_item("ep-3", "Wed, 15 Jan 2025 10:00:00 +0000"),
            make_item("ep-2", "Tue, 14 Jan 2025 10:00:00 +0000"),
            make_item("ep-1", "Mon, 13 Jan 2025 10:00:00 +0000"),
        ),
    )


@pytest.fixture
def feed_xml():
    """Builder for RSS documents from (guid, pubDate) pairs."""
    return make_feed_xml
