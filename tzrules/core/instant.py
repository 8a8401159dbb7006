"""Instant, a monotonic 100-nanosecond tick count.

This module provides the Instant class and the minute arithmetic on
CivilTime that the classifier uses to apply a bias.

The epoch is 1601-01-01 00:00:00 (tick 0). The last representable
instant is 30827-12-31 23:59:59.999.
"""

from __future__ import annotations

from tzrules._internal.calendar import date_from_epoch_days, day_of_week, days_since_epoch
from tzrules._internal.constants import (
    MAX_TICKS,
    MIN_TICKS,
    TICKS_PER_DAY,
    TICKS_PER_HOUR,
    TICKS_PER_MILLISECOND,
    TICKS_PER_MINUTE,
    TICKS_PER_SECOND,
)
from tzrules.core.civil import CivilTime
from tzrules.errors import OverflowError, ValidationError


class Instant:
    """A point on the time line as a count of 100 ns ticks since 1601.

    Instants are immutable. Arithmetic returns a new Instant, or raises
    OverflowError when either the operand or the result is outside
    [MIN_TICKS, MAX_TICKS].

    Attributes:
        ticks: Number of 100-nanosecond intervals since 1601-01-01.

    Examples:
        >>> Instant(0).to_civil()
        CivilTime(1601, 1, 1, 0, 0, 0, 0, day_of_week=1)

        >>> i = Instant.from_civil(CivilTime.of(2013, 1, 1))
        >>> i.subtract_minutes(300).to_civil()
        CivilTime(2012, 12, 31, 19, 0, 0, 0, day_of_week=1)
    """

    __slots__ = ("_ticks",)

    MIN_TICKS = MIN_TICKS
    MAX_TICKS = MAX_TICKS

    def __init__(self, ticks: int) -> None:
        """Create an Instant from a raw tick count.

        The value is not range checked here so that an out-of-range
        count can still be inspected with `is_valid()`.

        Raises:
            ValidationError: If ticks is not an integer.
        """
        if isinstance(ticks, bool) or not isinstance(ticks, int):
            raise ValidationError(
                f"ticks must be an integer, got {type(ticks).__name__}"
            )
        self._ticks = ticks

    @classmethod
    def from_civil(cls, civil: CivilTime) -> Instant:
        """Create an Instant from a civil time. day_of_week is ignored.

        Raises:
            ValidationError: If the civil time is not a valid timestamp.
        """
        civil.validate(check_day_of_week=False)
        days = days_since_epoch(civil.year, civil.month, civil.day)
        ticks = (
            days * TICKS_PER_DAY
            + civil.hour * TICKS_PER_HOUR
            + civil.minute * TICKS_PER_MINUTE
            + civil.second * TICKS_PER_SECOND
            + civil.millisecond * TICKS_PER_MILLISECOND
        )
        return cls(ticks)

    @property
    def ticks(self) -> int:
        return self._ticks

    def is_valid(self) -> bool:
        """Return True if the tick count is within the supported range."""
        return MIN_TICKS <= self._ticks <= MAX_TICKS

    def to_civil(self) -> CivilTime:
        """Convert to a CivilTime, truncating sub-millisecond ticks.

        Raises:
            OverflowError: If the instant is out of range.
        """
        self._check_range(self._ticks)

        days, remainder = divmod(self._ticks, TICKS_PER_DAY)
        year, month, day = date_from_epoch_days(days)
        hour, remainder = divmod(remainder, TICKS_PER_HOUR)
        minute, remainder = divmod(remainder, TICKS_PER_MINUTE)
        second, remainder = divmod(remainder, TICKS_PER_SECOND)
        millisecond = remainder // TICKS_PER_MILLISECOND

        return CivilTime(
            year,
            month,
            day,
            hour,
            minute,
            second,
            millisecond,
            day_of_week=day_of_week(day, month, year),
        )

    def add_ticks(self, ticks: int) -> Instant:
        """Return a new Instant `ticks` intervals later.

        Raises:
            OverflowError: If this instant or the result is out of range.
        """
        self._check_range(self._ticks)
        result = self._ticks + ticks
        self._check_range(result)
        return Instant(result)

    def subtract_ticks(self, ticks: int) -> Instant:
        """Return a new Instant `ticks` intervals earlier."""
        return self.add_ticks(-ticks)

    def add_minutes(self, minutes: int) -> Instant:
        """Return a new Instant `minutes` later."""
        return self.add_ticks(minutes * TICKS_PER_MINUTE)

    def subtract_minutes(self, minutes: int) -> Instant:
        """Return a new Instant `minutes` earlier."""
        return self.add_ticks(-minutes * TICKS_PER_MINUTE)

    @staticmethod
    def _check_range(ticks: int) -> None:
        if ticks < MIN_TICKS or ticks > MAX_TICKS:
            raise OverflowError(
                f"tick count {ticks} is outside [{MIN_TICKS}, {MAX_TICKS}]"
            )

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Instant):
            return NotImplemented
        return self._ticks == other._ticks

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, Instant):
            return NotImplemented
        return self._ticks < other._ticks

    def __le__(self, other: object) -> bool:
        if not isinstance(other, Instant):
            return NotImplemented
        return self._ticks <= other._ticks

    def __gt__(self, other: object) -> bool:
        if not isinstance(other, Instant):
            return NotImplemented
        return self._ticks > other._ticks

    def __ge__(self, other: object) -> bool:
        if not isinstance(other, Instant):
            return NotImplemented
        return self._ticks >= other._ticks

    def __hash__(self) -> int:
        return hash(self._ticks)

    def __repr__(self) -> str:
        return f"Instant({self._ticks})"


def civil_add_minutes(civil: CivilTime, minutes: int) -> CivilTime:
    """Add minutes to a civil time through tick arithmetic.

    Unlike Instant.from_civil(), the input must be fully valid, including
    a day_of_week that matches the date.

    Raises:
        ValidationError: If `civil` is not a valid timestamp.
        OverflowError: If the result leaves the supported range.

    Examples:
        >>> civil_add_minutes(CivilTime.of(2012, 12, 31, 23, 30), 60)
        CivilTime(2013, 1, 1, 0, 30, 0, 0, day_of_week=2)
    """
    civil.validate()
    return Instant.from_civil(civil).add_minutes(minutes).to_civil()


def civil_subtract_minutes(civil: CivilTime, minutes: int) -> CivilTime:
    """Subtract minutes from a civil time. See civil_add_minutes()."""
    civil.validate()
    return Instant.from_civil(civil).subtract_minutes(minutes).to_civil()


__all__ = [
    "Instant",
    "civil_add_minutes",
    "civil_subtract_minutes",
]
