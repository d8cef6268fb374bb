"""Exceptions raised by whenwords.

Every error derives from :class:`WhenwordsError`, which is a ``ValueError``,
so callers can catch the whole family or a single kind.
"""


class WhenwordsError(ValueError):
    """Base class for all whenwords errors."""


class InvalidTimestamp(WhenwordsError, TypeError):
    """Timestamp input is of the wrong type, unparseable, or out of range."""


class NegativeDuration(WhenwordsError):
    """A duration was negative."""


class EmptyInput(WhenwordsError):
    """Duration text was missing or blank."""


class NoUnitsFound(WhenwordsError):
    """Duration text contained no recognizable number and unit pair."""
