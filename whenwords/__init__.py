from .dates import date_range, human_date
from .duration import UNITS, DurationOptions, UnitSpec, duration
from .errors import (
    EmptyInput,
    InvalidTimestamp,
    NegativeDuration,
    NoUnitsFound,
    WhenwordsError,
)
from .parsing import parse_duration
from .relative import timeago
from .timestamp import CalendarParts, calendar_parts, normalize_timestamp
from .util import DAY, HOUR, MINUTE, MONTH, SECOND, WEEK, YEAR

__all__ = [
    "timeago",
    "duration",
    "DurationOptions",
    "UnitSpec",
    "UNITS",
    "parse_duration",
    "human_date",
    "date_range",
    "normalize_timestamp",
    "calendar_parts",
    "CalendarParts",
    "WhenwordsError",
    "InvalidTimestamp",
    "NegativeDuration",
    "EmptyInput",
    "NoUnitsFound",
    "SECOND",
    "MINUTE",
    "HOUR",
    "DAY",
    "WEEK",
    "MONTH",
    "YEAR",
]
