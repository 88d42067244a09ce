"""Unit constants and helpers for bluetime.

Time unit constants represent durations in seconds. Months and years are
fixed-ratio approximations (30 and 365 days), not calendar-accurate.
"""

from typing import Literal, TypeAlias

# Time unit constants (all values in seconds)
SECOND = 1
MINUTE = 60
HOUR = 3600
DAY = 86400
WEEK = 604800
MONTH = 2592000
YEAR = 31536000

Unit: TypeAlias = Literal[
    "seconds", "minutes", "hours", "days", "weeks", "months", "years"
]

# Key order of an all-units difference result
UNITS: tuple[Unit, ...] = (
    "seconds",
    "years",
    "months",
    "weeks",
    "days",
    "hours",
    "minutes",
)

SCALES: dict[Unit, int] = {
    "seconds": SECOND,
    "minutes": MINUTE,
    "hours": HOUR,
    "days": DAY,
    "weeks": WEEK,
    "months": MONTH,
    "years": YEAR,
}
