"""Feed validation rules and date checking."""

from .dates import (
    DateError,
    DateFormatError,
    DayOfWeekMismatchError,
    format_rfc1123z,
    parse_rfc1123z,
    validate_rfc1123z,
)
from .errors import ErrorKind, ValidationError, ValidationResult
from .orchestrator import validate_document
from .rules import (
    RULES,
    check_channel_date,
    check_item_dates,
    check_latest_item_date,
    check_unique_guids,
)

__all__ = [
    "RULES",
    "DateError",
    "DateFormatError",
    "DayOfWeekMismatchError",
    "ErrorKind",
    "ValidationError",
    "ValidationResult",
    "check_channel_date",
    "check_item_dates",
    "check_latest_item_date",
    "check_unique_guids",
    "format_rfc1123z",
    "parse_rfc1123z",
    "validate_document",
    "validate_rfc1123z",
]
