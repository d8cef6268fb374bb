"""Duration formatting ("2 hours, 30 minutes" or "2h 30m")."""

import math
from collections.abc import Mapping
from dataclasses import dataclass, fields
from numbers import Real
from typing import Any

from whenwords.errors import NegativeDuration
from whenwords.util import DAY, HOUR, MINUTE, MONTH, SECOND, YEAR


@dataclass(frozen=True, kw_only=True)
class UnitSpec:
    name: str
    plural: str
    short: str
    seconds: int

    def render(self, count: int, compact: bool) -> str:
        if compact:
            return f"{count}{self.short}"
        return f"{count} {self.name if count == 1 else self.plural}"


UNITS: tuple[UnitSpec, ...] = (
    UnitSpec(name="year", plural="years", short="y", seconds=YEAR),
    UnitSpec(name="month", plural="months", short="mo", seconds=MONTH),
    UnitSpec(name="day", plural="days", short="d", seconds=DAY),
    UnitSpec(name="hour", plural="hours", short="h", seconds=HOUR),
    UnitSpec(name="minute", plural="minutes", short="m", seconds=MINUTE),
    UnitSpec(name="second", plural="seconds", short="s", seconds=SECOND),
)


@dataclass(frozen=True, kw_only=True)
class DurationOptions:
    """Formatting options for :func:`duration`.

    Attributes:
        compact: Use short suffixes joined by spaces ("2h 30m") instead of
            full words joined by commas ("2 hours, 30 minutes")
        max_units: Maximum number of unit terms to show
    """

    compact: bool = False
    max_units: int = 2

    def __post_init__(self) -> None:
        if isinstance(self.max_units, bool) or not isinstance(self.max_units, int):
            raise ValueError(
                f"max_units must be an int, got {type(self.max_units).__name__!r}"
            )
        if self.max_units < 0:
            raise ValueError(f"max_units must be >= 0, got {self.max_units}")

    @classmethod
    def coerce(
        cls, options: "DurationOptions | Mapping[str, Any] | None"
    ) -> "DurationOptions":
        """Build options from None, a mapping, or an existing instance."""
        if options is None:
            return cls()
        if isinstance(options, DurationOptions):
            return options
        if isinstance(options, Mapping):
            known = {f.name for f in fields(cls)}
            unknown = set(options) - known
            if unknown:
                raise ValueError(
                    f"Unknown duration option(s): {', '.join(sorted(unknown))}\n"
                    f"Valid options: {', '.join(sorted(known))}"
                )
            return cls(**options)
        raise TypeError(
            f"options must be a DurationOptions, a mapping, or None.\n"
            f"Got {type(options).__name__!r}: {options!r}\n"
            f"Examples:\n"
            f"  duration(5400, DurationOptions(compact=True))\n"
            f'  duration(5400, {{"max_units": 1}})'
        )


def duration(
    seconds: float, options: DurationOptions | Mapping[str, Any] | None = None
) -> str:
    """Format a number of seconds as a human-readable duration.

    Units are taken greedily from years down to seconds, skipping zero
    counts, until ``max_units`` terms are shown. When the remainder is at
    least half of the last shown unit, that unit is rounded up; higher units
    are never carried into.

    Args:
        seconds: Non-negative duration in seconds
        options: :class:`DurationOptions` or a mapping with the same keys

    Returns:
        Formatted duration, "0 seconds" (or "0s") when nothing is shown

    Raises:
        NegativeDuration: If ``seconds`` is negative

    Example:
        >>> duration(9000)
        '2 hours, 30 minutes'
        >>> duration(9000, {"compact": True})
        '2h 30m'
        >>> duration(6000, {"max_units": 1})
        '2 hours'
    """
    if isinstance(seconds, bool) or not isinstance(seconds, Real):
        raise TypeError(
            f"seconds must be a number, got {type(seconds).__name__!r}: {seconds!r}"
        )
    if seconds < 0:
        raise NegativeDuration(f"Seconds cannot be negative, got {seconds}")
    if not math.isfinite(seconds):
        raise ValueError(f"seconds must be finite, got {seconds!r}")

    opts = DurationOptions.coerce(options)

    terms: list[tuple[int, UnitSpec]] = []
    remaining = seconds
    for unit in UNITS:
        if len(terms) >= opts.max_units:
            break
        # Floor division stays exact for large ints
        count = int(remaining // unit.seconds)
        if count > 0:
            terms.append((count, unit))
            remaining -= count * unit.seconds

    if terms and len(terms) == opts.max_units and remaining > 0:
        count, unit = terms[-1]
        # Seconds never leave a whole-unit remainder worth rounding
        if unit.seconds > SECOND and remaining / unit.seconds >= 0.5:
            terms[-1] = (count + 1, unit)

    if not terms:
        return "0s" if opts.compact else "0 seconds"

    rendered = [unit.render(count, opts.compact) for count, unit in terms]
    return " ".join(rendered) if opts.compact else ", ".join(rendered)
