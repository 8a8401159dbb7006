"""Internal constants for tzrules.

These constants define the limits and magic numbers used throughout
the library. This module is not part of the public API.
"""

from __future__ import annotations

# Tick (100 ns interval) conversions
TICKS_PER_MILLISECOND: int = 10_000
TICKS_PER_SECOND: int = 1_000 * TICKS_PER_MILLISECOND
TICKS_PER_MINUTE: int = 60 * TICKS_PER_SECOND
TICKS_PER_HOUR: int = 60 * TICKS_PER_MINUTE
TICKS_PER_DAY: int = 24 * TICKS_PER_HOUR  # 864_000_000_000

MINUTES_PER_DAY: int = 24 * 60

# Year limits of the civil time range
MIN_YEAR: int = 1601
MAX_YEAR: int = 30827

# Instant range: 1601-01-01 00:00:00.000 .. 30827-12-31 23:59:59.999
MIN_TICKS: int = 0
MAX_TICKS: int = 0x7FFF35F4F06C58F0

# Days in each month (non-leap year)
DAYS_IN_MONTH: tuple[int, ...] = (
    0,   # Placeholder for 1-indexed access
    31,  # January
    28,  # February (non-leap)
    31,  # March
    30,  # April
    31,  # May
    30,  # June
    31,  # July
    31,  # August
    30,  # September
    31,  # October
    30,  # November
    31,  # December
)

# Month offsets for Sakamoto's day-of-week congruence
DAY_OF_WEEK_MONTH_OFFSETS: tuple[int, ...] = (0, 3, 2, 5, 0, 3, 5, 1, 4, 6, 2, 4)

# A combined bias may move local time at most one day away from UTC
MAX_BIAS_MINUTES: int = MINUTES_PER_DAY

# Relative transition rules: occurrence 5 means "last occurrence in the month"
LAST_OCCURRENCE: int = 5


__all__ = [
    "TICKS_PER_MILLISECOND",
    "TICKS_PER_SECOND",
    "TICKS_PER_MINUTE",
    "TICKS_PER_HOUR",
    "TICKS_PER_DAY",
    "MINUTES_PER_DAY",
    "MIN_YEAR",
    "MAX_YEAR",
    "MIN_TICKS",
    "MAX_TICKS",
    "DAYS_IN_MONTH",
    "DAY_OF_WEEK_MONTH_OFFSETS",
    "MAX_BIAS_MINUTES",
    "LAST_OCCURRENCE",
]
