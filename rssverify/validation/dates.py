"""Strict RFC 1123 date checking with a numeric time zone.

Feeds must use the form ``Mon, 02 Jan 2006 15:04:05 -0700``. A date is only
accepted when parsing it and formatting the result gives back the exact
input, which rejects a weekday that does not match the calendar date.
"""

import re
from datetime import datetime, timedelta, timezone

RFC1123Z = "%a, %d %b %Y %H:%M:%S %z"

# English names are fixed by the RFC; strftime/strptime would follow the locale.
WEEKDAYS = ("Mon", "Tue", "Wed", "Thu", "Fri", "Sat", "Sun")
MONTHS = (
    "Jan", "Feb", "Mar", "Apr", "May", "Jun",
    "Jul", "Aug", "Sep", "Oct", "Nov", "Dec",
)

_DATE_RE = re.compile(
    r"(?P<weekday>[A-Za-z]{3}), (?P<day>\d{2}) (?P<month>[A-Za-z]{3}) (?P<year>\d{4}) "
    r"(?P<hour>\d{1,2}):(?P<minute>\d{2}):(?P<second>\d{2})(?:[.,]\d+)? "
    r"(?P<sign>[+-])(?P<tz_hours>\d{2})(?P<tz_minutes>\d{2})",
    re.ASCII,
)


class DateError(ValueError):
    """Base class for rejected date strings."""

    def __init__(self, message: str, value: str):
        super().__init__(message)
        self.value = value


class DateFormatError(DateError):
    """Text does not parse under the RFC 1123 numeric-zone format."""

    def __init__(self, value: str):
        super().__init__(f"invalid date format in {value}", value)


class DayOfWeekMismatchError(DateError):
    """Text parses but does not format back to itself."""

    def __init__(self, value: str, expected: str):
        super().__init__(
            f"day of week is not correct: expected {expected}, got {value}", value
        )
        self.expected = expected


def _lookup(names: tuple[str, ...], token: str) -> int:
    lowered = token.lower()
    for index, name in enumerate(names):
        if name.lower() == lowered:
            return index
    raise KeyError(token)


def parse_rfc1123z(value: str) -> datetime:
    """
    Parse a date in RFC 1123 numeric-zone form into an aware datetime.

    The weekday token must name a day but is not compared with the date.

    Raises:
        DateFormatError: If the text does not match the format or names an
            impossible date, time or offset
    """
    match = _DATE_RE.fullmatch(value)
    if match is None:
        raise DateFormatError(value)

    try:
        _lookup(WEEKDAYS, match["weekday"])
        month = _lookup(MONTHS, match["month"]) + 1
        tz_hours, tz_minutes = int(match["tz_hours"]), int(match["tz_minutes"])
        if tz_minutes >= 60:
            raise ValueError("time zone offset minutes out of range")
        offset = timedelta(hours=tz_hours, minutes=tz_minutes)
        if match["sign"] == "-":
            offset = -offset
        return datetime(
            int(match["year"]),
            month,
            int(match["day"]),
            int(match["hour"]),
            int(match["minute"]),
            int(match["second"]),
            tzinfo=timezone(offset),
        )
    except (KeyError, ValueError) as e:
        raise DateFormatError(value) from e


def format_rfc1123z(moment: datetime) -> str:
    """Render an aware datetime in canonical RFC 1123 numeric-zone form."""
    offset = moment.utcoffset() or timedelta(0)
    sign = "-" if offset < timedelta(0) else "+"
    minutes = abs(int(offset.total_seconds())) // 60
    return (
        f"{WEEKDAYS[moment.weekday()]}, {moment.day:02d} {MONTHS[moment.month - 1]} "
        f"{moment.year:04d} {moment.hour:02d}:{moment.minute:02d}:{moment.second:02d} "
        f"{sign}{minutes // 60:02d}{minutes % 60:02d}"
    )


def validate_rfc1123z(value: str) -> datetime:
    """
    Check that a date string is canonical RFC 1123 with a correct weekday.

    Returns:
        The parsed instant, for callers that also compare dates

    Raises:
        DateFormatError: If the text cannot be parsed
        DayOfWeekMismatchError: If formatting the parsed date does not
            reproduce the text exactly
    """
    moment = parse_rfc1123z(value)
    expected = format_rfc1123z(moment)
    if expected != value:
        raise DayOfWeekMismatchError(value, expected)
    return moment
