"""Relative time phrasing ("3 hours ago", "in 2 days").

The phrase is picked from an ordered threshold table: each rule covers the
differences below its ``limit`` that earlier rules did not claim.
"""

import logging
import math
from abc import ABC, abstractmethod

from typing_extensions import override

from whenwords.timestamp import TimestampInput, normalize_timestamp
from whenwords.util import DAY, HOUR, MINUTE, MONTH, YEAR

logger = logging.getLogger(__name__)

JUST_NOW = "just now"
_JUST_NOW_LIMIT = 45


def round_half_up(value: float) -> int:
    """Round to the nearest integer, with halves going up (2.5 -> 3)."""
    return math.floor(value + 0.5)


class _Rule(ABC):
    def __init__(self, limit: float, unit: str):
        self.limit: float = limit
        self.unit: str = unit

    @abstractmethod
    def count(self, diff: float) -> int:
        """Number of units to report for this difference."""
        pass

    def phrase(self, diff: float, is_future: bool) -> str:
        n = self.count(diff)
        unit = self.unit if n == 1 else f"{self.unit}s"
        return f"in {n} {unit}" if is_future else f"{n} {unit} ago"


class _Single(_Rule):
    @override
    def count(self, diff: float) -> int:
        return 1


class _Rounded(_Rule):
    def __init__(self, limit: float, unit: str, divisor: int):
        super().__init__(limit, unit)
        self.divisor: int = divisor

    @override
    def count(self, diff: float) -> int:
        return round_half_up(diff / self.divisor)


_RULES: tuple[_Rule, ...] = (
    _Single(90, "minute"),
    _Rounded(45 * MINUTE, "minute", MINUTE),
    _Single(90 * MINUTE, "hour"),
    _Rounded(22 * HOUR, "hour", HOUR),
    _Single(36 * HOUR, "day"),
    _Rounded(26 * DAY, "day", DAY),
    _Single(46 * DAY, "month"),
    _Rounded(320 * DAY, "month", MONTH),
    _Single(548 * DAY, "year"),
    _Rounded(math.inf, "year", YEAR),
)


def timeago(
    timestamp: TimestampInput, reference: TimestampInput | None = None
) -> str:
    """Describe ``timestamp`` relative to ``reference``.

    Args:
        timestamp: The event time
        reference: The "now" to compare against (defaults to ``timestamp``,
            which always yields "just now")

    Returns:
        "just now", "<n> <unit>(s) ago" for past events, or
        "in <n> <unit>(s)" for future ones

    Example:
        >>> timeago(0, 5400)
        '2 hours ago'
        >>> timeago("2024-01-02T00:00:00Z", "2024-01-01T00:00:00Z")
        'in 1 day'
    """
    ts = normalize_timestamp(timestamp)
    ref = ts if reference is None else normalize_timestamp(reference)

    diff = abs(ref - ts)
    if diff < _JUST_NOW_LIMIT:
        return JUST_NOW

    is_future = ts > ref
    for rule in _RULES:
        if diff < rule.limit:
            logger.debug("timeago diff=%s matched %s rule", diff, rule.unit)
            return rule.phrase(diff, is_future)

    # Unreachable: the last rule has an infinite limit
    raise AssertionError(f"No threshold rule for diff={diff}")
