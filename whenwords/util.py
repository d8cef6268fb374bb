"""Utility constants for whenwords.

Time unit constants represent durations in seconds. Months and years are
calendar-naive: a month is always 30 days and a year always 365 days.
"""

# Time unit constants (all values in seconds)
SECOND = 1
MINUTE = 60
HOUR = 3600
DAY = 86400
WEEK = 604800
MONTH = 2592000
YEAR = 31536000
