"""RSS document module for the feed verifier."""

from .models import FeedDocument, FeedItem
from .parser import parse_feed

__all__ = ["FeedDocument", "FeedItem", "parse_feed"]
