"""Parse human-written durations ("2h 30m", "1 hour and 5 mins", "1:30:15").

Two grammars are supported. Colon notation (``H:MM`` or ``H:MM:SS``) must
span the whole string. Anything else is scanned for ``<number><unit>``
tokens; candidates from the long-form and single-letter vocabularies are
merged by start offset and committed left to right, dropping any candidate
that overlaps one already taken.

Months are not recognized: "3mo" is ambiguous between calendar months and
minutes, so it is skipped rather than guessed.
"""

import logging
import re
from dataclasses import dataclass

from whenwords.errors import EmptyInput, NegativeDuration, NoUnitsFound
from whenwords.interval import Span
from whenwords.util import DAY, HOUR, MINUTE, SECOND, WEEK, YEAR

logger = logging.getLogger(__name__)

# A run of digits and dots; only its leading valid number is used
_NUMBER = r"([0-9.]+)"
_LEADING_NUMBER = re.compile(r"[0-9]+\.?[0-9]*|\.[0-9]+")

_NEGATIVE = re.compile(r"-\s*[0-9]")
_COLON = re.compile(r"([0-9]+):([0-9]{1,2})(?::([0-9]{1,2}))?")
_CONNECTORS = re.compile(r",\s*and\s*|\s+and\s+|,")

# Alternatives are ordered longest first so "hours" wins over "hour"
_LONG_UNITS: tuple[tuple[tuple[str, ...], int], ...] = (
    (("years", "year"), YEAR),
    (("weeks", "week", "wks", "wk"), WEEK),
    (("days", "day"), DAY),
    (("hours", "hour", "hrs", "hr"), HOUR),
    (("minutes", "minute", "mins", "min"), MINUTE),
    (("seconds", "second", "secs", "sec"), SECOND),
)

_SHORT_UNITS: tuple[tuple[str, int], ...] = (
    ("y", YEAR),
    ("w", WEEK),
    ("d", DAY),
    ("h", HOUR),
    ("m", MINUTE),
    ("s", SECOND),
)

# A single letter must not run into another letter ("m" inside "min" or "mo")
_PATTERNS: tuple[tuple[re.Pattern[str], int], ...] = tuple(
    (re.compile(_NUMBER + r"\s*(?:" + "|".join(names) + ")"), divisor)
    for names, divisor in _LONG_UNITS
) + tuple(
    (re.compile(_NUMBER + r"\s*" + letter + r"(?![a-z])"), divisor)
    for letter, divisor in _SHORT_UNITS
)


@dataclass(frozen=True, kw_only=True)
class _Candidate:
    span: Span
    value: int | float
    divisor: int


def _to_number(text: str) -> int | float | None:
    """Read the leading number of a digit-and-dot run ("1.2.3" -> 1.2)."""
    match = _LEADING_NUMBER.match(text)
    if match is None:
        return None
    number = match.group()
    return float(number) if "." in number else int(number)


def _candidates(text: str) -> list[_Candidate]:
    """Collect every number/unit match from both vocabularies, by start offset."""
    found: list[_Candidate] = []
    for pattern, divisor in _PATTERNS:
        for m in pattern.finditer(text):
            value = _to_number(m.group(1))
            # A bare run of dots is not a number
            if value is None:
                continue
            found.append(
                _Candidate(
                    span=Span(start=m.start(), end=m.end()),
                    value=value,
                    divisor=divisor,
                )
            )
    # Stable sort: at equal offsets the long-form vocabulary comes first
    found.sort(key=lambda c: c.span.start)
    return found


def _select(candidates: list[_Candidate]) -> list[_Candidate]:
    """Greedily keep candidates whose spans don't overlap an accepted one."""
    accepted: list[_Candidate] = []
    for candidate in candidates:
        if any(candidate.span.overlaps(a.span) for a in accepted):
            continue
        accepted.append(candidate)
    return accepted


def parse_duration(text: str) -> int | float:
    """Parse a human-written duration into seconds.

    Args:
        text: Duration such as "2h 30m", "1.5 hours", "2 days, 3 hours and
            5 minutes", "1:30" or "1:30:15"

    Returns:
        Total seconds; a float when any value in ``text`` was fractional

    Raises:
        EmptyInput: If ``text`` is not a string or is blank
        NegativeDuration: If ``text`` contains a negative number
        NoUnitsFound: If no number/unit pair could be recognized

    Example:
        >>> parse_duration("2h 30m")
        9000
        >>> parse_duration("1:30:15")
        5415
        >>> parse_duration("1.5 hours")
        5400.0
    """
    if not isinstance(text, str) or not text.strip():
        raise EmptyInput(
            f"Duration text must be a non-empty string, got {text!r}\n"
            f'Examples: "2h 30m", "90 minutes", "1:30"'
        )

    working = text.strip().lower()

    if _NEGATIVE.search(working):
        raise NegativeDuration(f"Negative durations not allowed: {text!r}")

    colon = _COLON.fullmatch(working)
    if colon:
        hours, minutes, seconds = colon.groups(default="0")
        return int(hours) * HOUR + int(minutes) * MINUTE + int(seconds)

    working = _CONNECTORS.sub(" ", working)
    accepted = _select(_candidates(working))
    if not accepted:
        raise NoUnitsFound(
            f"No parseable units found in {text!r}\n"
            f"Recognized units: years, weeks, days, hours, minutes, seconds\n"
            f"(or y, w, d, h, m, s)"
        )

    for candidate in accepted:
        logger.debug(
            "Committed %r as %s x %ds",
            working[candidate.span.start : candidate.span.end],
            candidate.value,
            candidate.divisor,
        )
    return sum(c.value * c.divisor for c in accepted)
