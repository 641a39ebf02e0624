"""Runs the full rule set over a feed document."""

from rssverify.rss.models import FeedDocument

from .errors import ValidationResult
from .rules import RULES


def validate_document(document: FeedDocument) -> ValidationResult:
    """Run every rule against the document and combine their errors.

    All rules run even when an earlier one fails; errors are kept in rule
    order.
    """
    return ValidationResult.join(*(rule(document) for rule in RULES))
