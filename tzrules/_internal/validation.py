"""Validation utilities for tzrules.

Raising counterparts of the calendar predicates. Each helper raises the
most specific ValidationError subclass for the first problem it finds.

This module is not part of the public API.
"""

from __future__ import annotations

from tzrules._internal.calendar import days_in_month, is_year_valid
from tzrules._internal.constants import MAX_YEAR, MIN_YEAR
from tzrules.errors import InvalidDateError, InvalidTimeError, YearOutOfRangeError


def validate_year(year: int) -> None:
    """Validate that a year is within the supported range.

    Args:
        year: The year to validate.

    Raises:
        YearOutOfRangeError: If year is outside MIN_YEAR to MAX_YEAR.
    """
    if not is_year_valid(year):
        raise YearOutOfRangeError(
            f"year must be between {MIN_YEAR} and {MAX_YEAR}, got {year}"
        )


def validate_date(year: int, month: int, day: int) -> None:
    """Validate that year, month, day form a valid date.

    Raises:
        YearOutOfRangeError: If the year is unsupported.
        InvalidDateError: If the month or day is invalid.
    """
    validate_year(year)
    if month < 1 or month > 12:
        raise InvalidDateError(f"month must be between 1 and 12, got {month}")

    max_day = days_in_month(year, month)
    if day < 1 or day > max_day:
        raise InvalidDateError(
            f"day must be between 1 and {max_day} for {year}-{month:02d}, got {day}"
        )


def validate_time_of_day(
    hour: int, minute: int, second: int, millisecond: int
) -> None:
    """Validate the time-of-day fields of a civil time.

    Raises:
        InvalidTimeError: If any field is outside its natural range.
    """
    for name, value, upper in (
        ("hour", hour, 23),
        ("minute", minute, 59),
        ("second", second, 59),
        ("millisecond", millisecond, 999),
    ):
        if value < 0 or value > upper:
            raise InvalidTimeError(
                f"{name} must be between 0 and {upper}, got {value}"
            )


def validate_day_of_week(day_of_week: int) -> None:
    """Validate that a day of week is within 0 (Sunday) to 6 (Saturday).

    Raises:
        InvalidDateError: If day_of_week is outside 0-6.
    """
    if day_of_week < 0 or day_of_week > 6:
        raise InvalidDateError(
            f"day_of_week must be between 0 and 6, got {day_of_week}"
        )


__all__ = [
    "validate_year",
    "validate_date",
    "validate_time_of_day",
    "validate_day_of_week",
]
