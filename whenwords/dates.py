"""Contextual calendar phrasing ("Yesterday", "Last Friday", "March 15–20, 2024").

All calendar math is done in UTC.
"""

import math

from whenwords.timestamp import (
    CalendarParts,
    TimestampInput,
    calendar_parts,
    normalize_timestamp,
)
from whenwords.util import DAY

# Indexed by CalendarParts.weekday (0 = Sunday)
DAY_NAMES = (
    "Sunday",
    "Monday",
    "Tuesday",
    "Wednesday",
    "Thursday",
    "Friday",
    "Saturday",
)

# Indexed by CalendarParts.month (0 = January)
MONTH_NAMES = (
    "January",
    "February",
    "March",
    "April",
    "May",
    "June",
    "July",
    "August",
    "September",
    "October",
    "November",
    "December",
)

EN_DASH = "–"


def _month_day(parts: CalendarParts) -> str:
    return f"{MONTH_NAMES[parts.month]} {parts.day}"


def _full_date(parts: CalendarParts) -> str:
    return f"{_month_day(parts)}, {parts.year}"


def _same_day(a: CalendarParts, b: CalendarParts) -> bool:
    return (a.year, a.month, a.day) == (b.year, b.month, b.day)


def human_date(
    timestamp: TimestampInput, reference: TimestampInput | None = None
) -> str:
    """Describe a date relative to a reference date.

    Args:
        timestamp: The date to describe
        reference: The "today" to compare against (defaults to ``timestamp``)

    Returns:
        "Today", "Yesterday", "Tomorrow", "Last <Weekday>" (2-6 days back),
        "This <Weekday>" (2-6 days ahead), "<Month> <Day>" within the same
        year, or "<Month> <Day>, <Year>" otherwise

    Example:
        >>> human_date("2024-03-14", "2024-03-15T12:00:00Z")
        'Yesterday'
        >>> human_date("2024-03-11", "2024-03-15")
        'Last Monday'
    """
    ts = normalize_timestamp(timestamp)
    ref = ts if reference is None else normalize_timestamp(reference)

    target = calendar_parts(ts)
    today = calendar_parts(ref)
    days_diff = math.floor((ref - ts) / DAY)

    if _same_day(target, today):
        return "Today"

    same_month = (target.year, target.month) == (today.year, today.month)
    if days_diff == 1 and same_month and target.day == today.day - 1:
        return "Yesterday"
    if days_diff == -1 and same_month and target.day == today.day + 1:
        return "Tomorrow"

    # Weekday is walked from the reference so it agrees with days_diff
    if 1 < days_diff < 7:
        return f"Last {DAY_NAMES[(today.weekday - days_diff) % 7]}"
    if -7 < days_diff < -1:
        return f"This {DAY_NAMES[(today.weekday - days_diff) % 7]}"

    if target.year == today.year:
        return _month_day(target)
    return _full_date(target)


def date_range(start: TimestampInput, end: TimestampInput) -> str:
    """Format a date range, dropping repeated month and year parts.

    The endpoints may be given in either order.

    Example:
        >>> date_range("2024-03-15", "2024-03-20")
        'March 15–20, 2024'
        >>> date_range("2024-03-15", "2024-04-02")
        'March 15 – April 2, 2024'
        >>> date_range("2023-12-30", "2024-01-02")
        'December 30, 2023 – January 2, 2024'
    """
    ts = normalize_timestamp(start)
    te = normalize_timestamp(end)
    if ts > te:
        ts, te = te, ts

    first = calendar_parts(ts)
    last = calendar_parts(te)

    if _same_day(first, last):
        return _full_date(first)
    if (first.year, first.month) == (last.year, last.month):
        return f"{_month_day(first)}{EN_DASH}{last.day}, {last.year}"
    if first.year == last.year:
        return f"{_month_day(first)} {EN_DASH} {_month_day(last)}, {last.year}"
    return f"{_full_date(first)} {EN_DASH} {_full_date(last)}"
