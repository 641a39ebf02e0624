"""Pydantic models for parsed RSS feed documents."""

from pydantic import BaseModel, ConfigDict


class FeedItem(BaseModel):
    """Represents a single <item> from an RSS channel."""

    model_config = ConfigDict(frozen=True)

    title: str = ""
    description: str = ""
    pub_date: str = ""
    guid: str = ""


class FeedDocument(BaseModel):
    """Represents one RSS channel and its items in source order.

    The item at index 0 is treated as the latest entry of the channel.
    """

    model_config = ConfigDict(frozen=True)

    title: str = ""
    description: str = ""
    pub_date: str = ""
    items: tuple[FeedItem, ...] = ()

    @property
    def latest_item(self) -> FeedItem | None:
        """Return the first item, or None when the channel is empty."""
        return self.items[0] if self.items else None
