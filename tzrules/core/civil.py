"""CivilTime, a broken-down calendar date and time of day.

This module provides the CivilTime value type and the field-by-field
comparison helpers used by the transition and classification code.
"""

from __future__ import annotations

import time as _time

from tzrules._internal.calendar import day_of_week, day_of_year, is_date_valid
from tzrules._internal.validation import (
    validate_date,
    validate_day_of_week,
    validate_time_of_day,
)
from tzrules.errors import InvalidDateError, ValidationError

_FIELDS = (
    "year",
    "month",
    "day_of_week",
    "day",
    "hour",
    "minute",
    "second",
    "millisecond",
)


class CivilTime:
    """A civil (wall clock) timestamp with millisecond precision.

    CivilTime is a plain bag of calendar fields, either UTC or local. The
    same type also describes a DST transition rule, in which case `year` may
    be 0 (relative rule) or `month` may be 0 (ignored rule). Because of that
    the constructor only insists on non-negative integers; use
    `CivilTime.of()` to build a checked timestamp, and `is_valid()` to test
    an existing one.

    Attributes:
        year: The year (1601-30827 for a real timestamp).
        month: The month (1-12).
        day_of_week: Day of the week, 0=Sunday to 6=Saturday.
        day: The day of the month (1-31), or the occurrence (1-5) in a
            relative transition rule.
        hour: Hour (0-23).
        minute: Minute (0-59).
        second: Second (0-59).
        millisecond: Millisecond (0-999).

    Examples:
        >>> t = CivilTime.of(2013, 1, 1)
        >>> t.day_of_week  # Tuesday
        2
        >>> t.is_valid()
        True

        >>> rule = CivilTime(0, 3, 2, hour=2, day_of_week=0)  # 2nd Sunday of March
        >>> rule.is_valid()
        False
    """

    __slots__ = ("_fields",)

    def __init__(
        self,
        year: int,
        month: int,
        day: int,
        hour: int = 0,
        minute: int = 0,
        second: int = 0,
        millisecond: int = 0,
        *,
        day_of_week: int = 0,
    ) -> None:
        """Create a CivilTime without calendar validation.

        Raises:
            ValidationError: If any field is not a non-negative integer.
        """
        values = (year, month, day_of_week, day, hour, minute, second, millisecond)
        for name, value in zip(_FIELDS, values):
            if isinstance(value, bool) or not isinstance(value, int):
                raise ValidationError(
                    f"{name} must be an integer, got {type(value).__name__}"
                )
            if value < 0:
                raise ValidationError(f"{name} must not be negative, got {value}")

        self._fields: tuple[int, ...] = values

    @classmethod
    def of(
        cls,
        year: int,
        month: int,
        day: int,
        hour: int = 0,
        minute: int = 0,
        second: int = 0,
        millisecond: int = 0,
    ) -> CivilTime:
        """Create a validated CivilTime with its day of week filled in.

        Raises:
            YearOutOfRangeError: If the year is outside 1601-30827.
            InvalidDateError: If the month or day is invalid.
            InvalidTimeError: If a time-of-day field is invalid.

        Examples:
            >>> CivilTime.of(2024, 3, 31, 1, 0)
            CivilTime(2024, 3, 31, 1, 0, 0, 0, day_of_week=0)
        """
        validate_date(year, month, day)
        validate_time_of_day(hour, minute, second, millisecond)
        return cls(
            year,
            month,
            day,
            hour,
            minute,
            second,
            millisecond,
            day_of_week=day_of_week(day, month, year),
        )

    @property
    def year(self) -> int:
        return self._fields[0]

    @property
    def month(self) -> int:
        return self._fields[1]

    @property
    def day_of_week(self) -> int:
        return self._fields[2]

    @property
    def day(self) -> int:
        return self._fields[3]

    @property
    def hour(self) -> int:
        return self._fields[4]

    @property
    def minute(self) -> int:
        return self._fields[5]

    @property
    def second(self) -> int:
        return self._fields[6]

    @property
    def millisecond(self) -> int:
        return self._fields[7]

    def is_time_of_day_valid(self) -> bool:
        """Return True if hour, minute, second and millisecond are in range."""
        return (
            self.hour <= 23
            and self.minute <= 59
            and self.second <= 59
            and self.millisecond <= 999
        )

    def is_valid_ignoring_day_of_week(self) -> bool:
        """Check that this is a real date and time, ignoring day_of_week.

        Transition dates follow the host convention of not requiring the
        day of week to agree with the date.
        """
        return (
            is_date_valid(self.day, self.month, self.year)
            and self.is_time_of_day_valid()
        )

    def is_valid(self) -> bool:
        """Check that this is a real date and time with a matching day_of_week."""
        return self.is_valid_ignoring_day_of_week() and (
            self.day_of_week == day_of_week(self.day, self.month, self.year)
        )

    def validate(self, *, check_day_of_week: bool = True) -> None:
        """Raise if this is not a valid timestamp.

        Args:
            check_day_of_week: Also require day_of_week to match the date.

        Raises:
            YearOutOfRangeError: If the year is outside 1601-30827.
            InvalidDateError: If the date or day of week is invalid.
            InvalidTimeError: If a time-of-day field is invalid.
        """
        validate_date(self.year, self.month, self.day)
        validate_time_of_day(self.hour, self.minute, self.second, self.millisecond)
        if check_day_of_week:
            validate_day_of_week(self.day_of_week)
            expected = day_of_week(self.day, self.month, self.year)
            if self.day_of_week != expected:
                raise InvalidDateError(
                    f"day_of_week {self.day_of_week} does not match "
                    f"{self.year}-{self.month:02d}-{self.day:02d} "
                    f"(expected {expected})"
                )

    def replace(self, **changes: int) -> CivilTime:
        """Return a copy with the given fields replaced.

        Raises:
            TypeError: If an unknown field name is given.
        """
        unknown = set(changes) - set(_FIELDS)
        if unknown:
            raise TypeError(f"unknown CivilTime field(s): {', '.join(sorted(unknown))}")

        values = dict(zip(_FIELDS, self._fields))
        values.update(changes)
        return CivilTime(
            values["year"],
            values["month"],
            values["day"],
            values["hour"],
            values["minute"],
            values["second"],
            values["millisecond"],
            day_of_week=values["day_of_week"],
        )

    def with_computed_day_of_week(self) -> CivilTime:
        """Return a copy whose day_of_week is derived from the date."""
        return self.replace(day_of_week=day_of_week(self.day, self.month, self.year))

    def sort_key(self) -> tuple[int, ...]:
        """Return the chronological key (year .. millisecond), without day_of_week."""
        f = self._fields
        return (f[0], f[1], f[3], f[4], f[5], f[6], f[7])

    def to_struct_time(self, is_dst: bool = False) -> _time.struct_time:
        """Convert to a `time.struct_time` (milliseconds are dropped).

        Python conventions apply: tm_wday is 0=Monday and tm_yday is 1-based.

        Args:
            is_dst: Whether this time is adjusted for daylight saving time.
                Pass False for UTC times.

        Raises:
            ValidationError: If this is not a valid timestamp.
        """
        self.validate()
        return _time.struct_time(
            (
                self.year,
                self.month,
                self.day,
                self.hour,
                self.minute,
                self.second,
                (self.day_of_week + 6) % 7,
                day_of_year(self.year, self.month, self.day),
                1 if is_dst else 0,
            )
        )

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, CivilTime):
            return NotImplemented
        return self._fields == other._fields

    def __ne__(self, other: object) -> bool:
        result = self.__eq__(other)
        if result is NotImplemented:
            return NotImplemented
        return not result

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, CivilTime):
            return NotImplemented
        return compare_civil_times(self, other) < 0

    def __le__(self, other: object) -> bool:
        if not isinstance(other, CivilTime):
            return NotImplemented
        return compare_civil_times(self, other) <= 0

    def __gt__(self, other: object) -> bool:
        if not isinstance(other, CivilTime):
            return NotImplemented
        return compare_civil_times(self, other) > 0

    def __ge__(self, other: object) -> bool:
        if not isinstance(other, CivilTime):
            return NotImplemented
        return compare_civil_times(self, other) >= 0

    def __hash__(self) -> int:
        return hash(self._fields)

    def __repr__(self) -> str:
        return (
            f"CivilTime({self.year}, {self.month}, {self.day}, {self.hour}, "
            f"{self.minute}, {self.second}, {self.millisecond}, "
            f"day_of_week={self.day_of_week})"
        )

    def __str__(self) -> str:
        return (
            f"{self.year:04d}-{self.month:02d}-{self.day:02d}T"
            f"{self.hour:02d}:{self.minute:02d}:{self.second:02d}."
            f"{self.millisecond:03d}"
        )


def _sign(value: int) -> int:
    return (value > 0) - (value < 0)


def compare_civil_times_ignoring_day_of_week(a: CivilTime, b: CivilTime) -> int:
    """Compare two civil times field by field, year down to millisecond.

    Returns:
        -1 if a < b, 0 if equal, 1 if a > b.

    Examples:
        >>> compare_civil_times_ignoring_day_of_week(
        ...     CivilTime.of(2024, 3, 31), CivilTime.of(2024, 10, 27))
        -1
    """
    ka, kb = a.sort_key(), b.sort_key()
    return (ka > kb) - (ka < kb)


def compare_civil_times(a: CivilTime, b: CivilTime) -> int:
    """Compare two civil times, using day_of_week as the final tie breaker.

    Returns:
        -1 if a < b, 0 if equal, 1 if a > b.
    """
    result = compare_civil_times_ignoring_day_of_week(a, b)
    if result:
        return result
    return _sign(a.day_of_week - b.day_of_week)


__all__ = [
    "CivilTime",
    "compare_civil_times",
    "compare_civil_times_ignoring_day_of_week",
]
