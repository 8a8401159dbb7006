"""Gregorian calendar arithmetic for tzrules.

Pure functions over plain integers: leap years, month lengths, date
validity, weekday and day counts relative to 1601-01-01, the first day
an Instant can represent. Nothing here keeps state, and only the
functions that say so raise.

Weekdays are numbered 0=Sunday through 6=Saturday.

Internal module; import from tzrules.core instead.
"""

from __future__ import annotations

from tzrules._internal.constants import (
    DAY_OF_WEEK_MONTH_OFFSETS,
    DAYS_IN_MONTH,
    MAX_YEAR,
    MIN_YEAR,
)

# 1601 opens a 400-year Gregorian cycle, so whole cycles can be split off
# a day count before looking at centuries.
_DAYS_PER_400_YEARS = 146_097
_DAYS_PER_100_YEARS = 36_524
_DAYS_PER_4_YEARS = 1_461

_CUMULATIVE_DAYS = (0, 0, 31, 59, 90, 120, 151, 181, 212, 243, 273, 304, 334)


def is_year_valid(year: int) -> bool:
    """Return True if 1601 <= year <= 30827."""
    return MIN_YEAR <= year <= MAX_YEAR


def is_leap_year(year: int) -> bool:
    """Return True if `year` has a February 29.

    Examples:
        >>> is_leap_year(2000), is_leap_year(1900), is_leap_year(2024)
        (True, False, True)
    """
    if year % 400 == 0:
        return True
    if year % 100 == 0:
        return False
    return year % 4 == 0


def days_in_month(year: int, month: int) -> int:
    """Return the length of a month, 28 to 31 days.

    Raises:
        ValueError: If month is not in 1-12.
    """
    if not 1 <= month <= 12:
        raise ValueError(f"month must be 1-12, got {month}")
    if month == 2 and is_leap_year(year):
        return 29
    return DAYS_IN_MONTH[month]


def days_before_month(year: int, month: int) -> int:
    """Return how many days of `year` precede the 1st of `month` (1-12)."""
    leap_day = 1 if month > 2 and is_leap_year(year) else 0
    return _CUMULATIVE_DAYS[month] + leap_day


def day_of_year(year: int, month: int, day: int) -> int:
    """Return the 1-based day of the year for a valid date."""
    return days_before_month(year, month) + day


def is_date_valid(day: int, month: int, year: int) -> bool:
    """Check if day, month and year form a valid date in the supported range.

    The argument order (day, month, year) follows the way transition rules
    are usually read: "the 31st of March 2024".

    Args:
        day: The day of the month.
        month: The month.
        year: The year.

    Returns:
        True if the year is in range, the month is 1-12 and the day exists
        in that month.

    Examples:
        >>> is_date_valid(29, 2, 2024)
        True
        >>> is_date_valid(29, 2, 2023)
        False
        >>> is_date_valid(1, 1, 1600)  # Before the supported range
        False
    """
    if not is_year_valid(year):
        return False
    if month < 1 or month > 12:
        return False
    if day < 1 or day > 31:
        return False
    return day <= days_in_month(year, month)


def day_of_week(day: int, month: int, year: int) -> int:
    """Return the day of the week for a date (0=Sunday, 6=Saturday).

    Uses Sakamoto's congruence, so no table of dates or day count is
    needed. The result for an invalid date is deterministic but meaningless;
    callers that need a guarantee must validate the date first. A month
    outside 1-12 yields 0.

    Args:
        day: The day of the month.
        month: The month (1-12).
        year: The year.

    Returns:
        Day of week in [0, 6].

    Examples:
        >>> day_of_week(1, 1, 2013)  # Tuesday
        2
        >>> day_of_week(31, 3, 2024)  # Sunday
        0
    """
    if month < 1 or month > 12:
        return 0

    y = year - 1 if month < 3 else year
    return (
        y + y // 4 - y // 100 + y // 400 + DAY_OF_WEEK_MONTH_OFFSETS[month - 1] + day
    ) % 7


def days_since_epoch(year: int, month: int, day: int) -> int:
    """Count the days from 1601-01-01 to a date.

    The date is not validated; 1601-01-01 itself is day 0.

    Examples:
        >>> days_since_epoch(1601, 1, 1)
        0
        >>> days_since_epoch(1602, 1, 1)
        365
    """
    elapsed = year - MIN_YEAR
    leap_days = elapsed // 4 - elapsed // 100 + elapsed // 400
    return elapsed * 365 + leap_days + days_before_month(year, month) + day - 1


def date_from_epoch_days(days: int) -> tuple[int, int, int]:
    """Return the (year, month, day) that lies `days` after 1601-01-01.

    Inverse of days_since_epoch().

    Raises:
        ValueError: If days is negative.
    """
    if days < 0:
        raise ValueError(f"days must not be negative, got {days}")

    cycles, days = divmod(days, _DAYS_PER_400_YEARS)
    year = MIN_YEAR + cycles * 400

    # The fourth century and the fourth year of a group each hold one extra
    # day, which the min() keeps inside the final span.
    centuries = min(days // _DAYS_PER_100_YEARS, 3)
    days -= centuries * _DAYS_PER_100_YEARS
    groups, days = divmod(days, _DAYS_PER_4_YEARS)
    years = min(days // 365, 3)
    days -= years * 365
    year += centuries * 100 + groups * 4 + years

    month = 1
    while month < 12 and days >= days_before_month(year, month + 1):
        month += 1
    return (year, month, days - days_before_month(year, month) + 1)


__all__ = [
    "is_year_valid",
    "is_leap_year",
    "days_in_month",
    "days_before_month",
    "day_of_year",
    "is_date_valid",
    "day_of_week",
    "days_since_epoch",
    "date_from_epoch_days",
]
