"""Tests for duration formatting."""

import pytest

from whenwords import DAY, HOUR, MINUTE, MONTH, YEAR, DurationOptions, NegativeDuration, duration


@pytest.mark.parametrize(
    "seconds, expected",
    [
        (0, "0 seconds"),
        (1, "1 second"),
        (45, "45 seconds"),
        (60, "1 minute"),
        (90, "1 minute, 30 seconds"),
        (HOUR, "1 hour"),
        (HOUR + MINUTE + 1, "1 hour, 1 minute"),
        (9000, "2 hours, 30 minutes"),
        (DAY, "1 day"),
        (DAY + 2 * HOUR, "1 day, 2 hours"),
        (YEAR, "1 year"),
        (YEAR + 2 * MONTH, "1 year, 2 months"),
    ],
)
def test_verbose(seconds, expected):
    """Verbose output uses pluralized words joined by commas."""
    assert duration(seconds) == expected


@pytest.mark.parametrize(
    "seconds, expected",
    [
        (0, "0s"),
        (45, "45s"),
        (9000, "2h 30m"),
        (DAY + 2 * HOUR, "1d 2h"),
        (YEAR + 2 * MONTH, "1y 2mo"),
    ],
)
def test_compact(seconds, expected):
    """Compact output uses bare suffixes joined by spaces."""
    assert duration(seconds, {"compact": True}) == expected


def test_max_units_limits_terms():
    """Only max_units terms are shown."""
    # 1d 2h 3m 4s
    seconds = DAY + 2 * HOUR + 3 * MINUTE + 4
    assert duration(seconds, {"compact": True, "max_units": 3}) == "1d 2h 3m"
    assert duration(seconds, {"compact": True, "max_units": 4}) == "1d 2h 3m 4s"
    assert duration(seconds, {"max_units": 4}) == (
        "1 day, 2 hours, 3 minutes, 4 seconds"
    )


def test_rounds_last_unit_up():
    """A remainder of at least half the last unit rounds it up."""
    assert duration(6000, {"max_units": 1}) == "2 hours"
    assert duration(HOUR + MINUTE + 30) == "1 hour, 2 minutes"
    assert duration(5400, DurationOptions(compact=True, max_units=1)) == "2h"


def test_does_not_round_below_half():
    """A remainder under half the last unit is dropped."""
    assert duration(4800, {"max_units": 1}) == "1 hour"
    assert duration(HOUR + MINUTE + 29) == "1 hour, 1 minute"


def test_rounding_does_not_carry():
    """Rounding only bumps the last shown unit, never higher ones."""
    assert duration(3599, {"max_units": 1}) == "60 minutes"


def test_rounding_pluralizes():
    """A rounded-up single unit becomes plural."""
    assert duration(HOUR + 40 * MINUTE, {"max_units": 1}) == "2 hours"


def test_seconds_never_rounded():
    """Fractional seconds are dropped rather than rounded."""
    assert duration(61.7) == "1 minute, 1 second"
    assert duration(0.9) == "0 seconds"
    assert duration(0.9, {"compact": True}) == "0s"


def test_zero_max_units():
    """With no units allowed the zero literal is returned."""
    assert duration(9000, {"max_units": 0}) == "0 seconds"


def test_default_options():
    """Defaults are verbose with two units."""
    opts = DurationOptions()
    assert opts.compact is False
    assert opts.max_units == 2
    assert duration(9000, opts) == duration(9000) == duration(9000, None)


@pytest.mark.parametrize("seconds", [-1, -0.5, -YEAR, float("-inf")])
def test_negative_raises(seconds):
    """Negative durations are rejected."""
    with pytest.raises(NegativeDuration, match="cannot be negative"):
        duration(seconds)


def test_negative_is_value_error():
    """NegativeDuration is a ValueError."""
    with pytest.raises(ValueError):
        duration(-1)


def test_non_numeric_raises():
    """Non-numeric seconds raise TypeError."""
    with pytest.raises(TypeError, match="must be a number"):
        duration("10")
    with pytest.raises(TypeError, match="must be a number"):
        duration(True)


def test_non_finite_raises():
    """NaN and infinity are rejected."""
    with pytest.raises(ValueError, match="must be finite"):
        duration(float("nan"))
    with pytest.raises(ValueError, match="must be finite"):
        duration(float("inf"))


def test_invalid_max_units():
    """max_units must be a non-negative int."""
    with pytest.raises(ValueError, match="max_units must be >= 0"):
        DurationOptions(max_units=-1)
    with pytest.raises(ValueError, match="max_units must be an int"):
        DurationOptions(max_units=1.5)


def test_unknown_option():
    """Unknown mapping keys are rejected."""
    with pytest.raises(ValueError, match="Unknown duration option"):
        duration(60, {"maxUnits": 1})


def test_bad_options_type():
    """Options must be a DurationOptions, a mapping, or None."""
    with pytest.raises(TypeError, match="options must be"):
        duration(60, "compact")


def test_large_values_stay_exact():
    """Huge integer durations decompose without float rounding."""
    seconds = 10**22 * YEAR + 3 * DAY + 5
    assert duration(seconds, {"compact": True, "max_units": 6}) == (
        "10000000000000000000000y 3d 5s"
    )
    assert duration(seconds) == "10000000000000000000000 years, 3 days"
