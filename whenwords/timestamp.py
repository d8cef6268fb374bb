"""Timestamp normalization and UTC calendar parts.

Every public formatter accepts a loose timestamp (Unix seconds, ISO-8601
text, or a date/time value) and funnels it through :func:`normalize_timestamp`
before doing any arithmetic.
"""

import logging
import math
from datetime import date, datetime, time, timedelta, timezone
from typing import Any, NamedTuple, TypeAlias

from dateutil.parser import isoparse

from whenwords.errors import InvalidTimestamp

logger = logging.getLogger(__name__)

TimestampInput: TypeAlias = int | float | str | datetime | date

_EPOCH = datetime(1970, 1, 1, tzinfo=timezone.utc)
_ONE_SECOND = timedelta(seconds=1)

_ACCEPTED_FORMS = (
    "Accepted forms:\n"
    "  1710504000                  # int or float (Unix seconds)\n"
    '  "2024-03-15T12:00:00Z"      # ISO-8601 text\n'
    "  datetime(2024, 3, 15, 12, tzinfo=timezone.utc)\n"
    "  date(2024, 3, 15)           # midnight UTC"
)


class CalendarParts(NamedTuple):
    """UTC calendar fields of a timestamp.

    ``month`` is 0-based (0 = January) and ``weekday`` counts from
    Sunday (0 = Sunday, 6 = Saturday).
    """

    year: int
    month: int
    day: int
    weekday: int


def _datetime_to_seconds(dt: datetime) -> int:
    if dt.tzinfo is None:
        dt = dt.replace(tzinfo=timezone.utc)
    # Floor division keeps pre-1970 fractional seconds rounding down
    return (dt - _EPOCH) // _ONE_SECOND


def normalize_timestamp(value: Any) -> int | float:
    """Convert a timestamp-like value to Unix seconds (UTC).

    Accepts:
    - int or float: passed through as-is (fractions preserved)
    - str: parsed as ISO-8601; text without an offset is read as UTC
    - datetime: converted to seconds; naive values are read as UTC
    - date: midnight UTC of that day

    Raises:
        InvalidTimestamp: If value is an unsupported type, unparseable text,
            an invalid calendar date, or a non-finite number
    """
    # bool is an int subclass but never a timestamp
    if isinstance(value, bool):
        raise InvalidTimestamp(
            f"Invalid timestamp format: {value!r}\n"
            f"Booleans are not timestamps.\n{_ACCEPTED_FORMS}"
        )
    if isinstance(value, int):
        return value
    if isinstance(value, float):
        if not math.isfinite(value):
            raise InvalidTimestamp(
                f"Invalid timestamp format: {value!r}\n"
                f"Numeric timestamps must be finite.\n{_ACCEPTED_FORMS}"
            )
        return value
    if isinstance(value, str):
        try:
            parsed = isoparse(value.strip())
        except (ValueError, OverflowError) as exc:
            raise InvalidTimestamp(
                f"Invalid timestamp format: {value!r}\n{_ACCEPTED_FORMS}"
            ) from exc
        seconds = _datetime_to_seconds(parsed)
        logger.debug("Parsed timestamp %r as %d", value, seconds)
        return seconds
    if isinstance(value, datetime):
        return _datetime_to_seconds(value)
    if isinstance(value, date):
        return _datetime_to_seconds(datetime.combine(value, time.min))
    raise InvalidTimestamp(
        f"Invalid timestamp format: {value!r}\n"
        f"Got {type(value).__name__!r}.\n{_ACCEPTED_FORMS}"
    )


def calendar_parts(timestamp: int | float) -> CalendarParts:
    """Return the UTC calendar fields for a normalized timestamp."""
    try:
        dt = _EPOCH + timedelta(seconds=math.floor(timestamp))
    except OverflowError as exc:
        raise InvalidTimestamp(
            f"Timestamp {timestamp!r} is outside the supported calendar range "
            f"(years 1 to 9999)."
        ) from exc
    return CalendarParts(
        year=dt.year,
        month=dt.month - 1,
        day=dt.day,
        weekday=dt.isoweekday() % 7,
    )
