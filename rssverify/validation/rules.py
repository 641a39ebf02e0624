"""Validation rules run against a parsed feed document.

Each rule is a pure function of a FeedDocument that returns a
ValidationError, or None when the document satisfies it.
"""

from typing import Callable

from rssverify.rss.models import FeedDocument

from .dates import (
    DateError,
    DateFormatError,
    DayOfWeekMismatchError,
    parse_rfc1123z,
    validate_rfc1123z,
)
from .errors import ErrorKind, ValidationError

Rule = Callable[[FeedDocument], ValidationError | None]


def _date_error(prefix: str, error: DateError) -> ValidationError:
    kind = (
        ErrorKind.DAY_OF_WEEK_MISMATCH
        if isinstance(error, DayOfWeekMismatchError)
        else ErrorKind.DATE_FORMAT
    )
    return ValidationError(kind=kind, message=f"{prefix}: {error}")


def check_channel_date(document: FeedDocument) -> ValidationError | None:
    """The channel pubDate must be a canonical RFC 1123 date."""
    try:
        validate_rfc1123z(document.pub_date)
    except DateError as e:
        return _date_error("channel pub date", e)
    return None


def check_item_dates(document: FeedDocument) -> ValidationError | None:
    """Every item pubDate must be a canonical RFC 1123 date.

    Stops at the first bad item.
    """
    for item in document.items:
        try:
            validate_rfc1123z(item.pub_date)
        except DateError as e:
            return _date_error(f"item '{item.title}' pub date", e)
    return None


def check_unique_guids(document: FeedDocument) -> ValidationError | None:
    """No two items may share a guid. Reports the first repeat only."""
    seen: set[str] = set()
    for item in document.items:
        if item.guid in seen:
            return ValidationError(
                kind=ErrorKind.DUPLICATE_IDENTIFIER,
                message=f"duplicate GUID found: {item.guid}",
            )
        seen.add(item.guid)
    return None


def check_latest_item_date(document: FeedDocument) -> ValidationError | None:
    """The channel pubDate must be the same instant as the first item's."""
    latest = document.latest_item
    if latest is None:
        return None

    try:
        channel_date = parse_rfc1123z(document.pub_date)
    except DateFormatError:
        return ValidationError(
            kind=ErrorKind.DATE_FORMAT,
            message=f"invalid date format in channel '{document.pub_date}'",
        )

    try:
        item_date = parse_rfc1123z(latest.pub_date)
    except DateFormatError:
        return ValidationError(
            kind=ErrorKind.DATE_FORMAT,
            message=f"invalid date format in item '{latest.pub_date}'",
        )

    # Aware datetimes compare as instants, so +0000 and -0000 are equal.
    if channel_date != item_date:
        return ValidationError(
            kind=ErrorKind.DATE_INCONSISTENCY,
            message="publication dates of channel and item do not match",
        )
    return None


RULES: tuple[Rule, ...] = (
    check_channel_date,
    check_item_dates,
    check_unique_guids,
    check_latest_item_date,
)
