"""DST transition rules.

A transition rule is a CivilTime naming the local moment a zone switches
to standard or to daylight time. It comes in one of three forms:

    Absolute: year != 0. The rule names an exact date and time.
    Relative: year == 0. `day` (1-5) is the occurrence of `day_of_week` in
        `month`, where 5 means the last occurrence whether or not the month
        has five of them that year.
    Ignored: month == 0. The zone has no transition for this half of the
        rule (DST not observed or disabled).

The time-of-day fields are always local wall clock time in the period
that is ending: a daylight transition is given in standard time and a
standard transition in daylight time.

Examples:
    >>> second_sunday_of_march = CivilTime(0, 3, 2, 2, day_of_week=0)
    >>> to_absolute(second_sunday_of_march, 2013)
    CivilTime(2013, 3, 10, 2, 0, 0, 0, day_of_week=0)
"""

from __future__ import annotations

from enum import Enum

from tzrules._internal.calendar import day_of_week, is_date_valid
from tzrules._internal.constants import LAST_OCCURRENCE
from tzrules._internal.validation import validate_year
from tzrules.core.civil import CivilTime, compare_civil_times_ignoring_day_of_week
from tzrules.errors import InvalidTransitionRuleError


class TransitionForm(Enum):
    """The form a transition rule takes."""

    ABSOLUTE = "ABSOLUTE"
    RELATIVE = "RELATIVE"
    IGNORED = "IGNORED"
    INVALID = "INVALID"


def is_valid_relative(rule: CivilTime) -> bool:
    """Check if a rule is a valid relative ("Nth weekday of month") rule."""
    return (
        rule.year == 0
        and 1 <= rule.month <= 12
        and 0 <= rule.day_of_week <= 6
        and 1 <= rule.day <= LAST_OCCURRENCE
        and rule.is_time_of_day_valid()
    )


def is_valid_absolute(rule: CivilTime) -> bool:
    """Check if a rule is a valid absolute date and time.

    day_of_week is not required to match the date.
    """
    return rule.is_valid_ignoring_day_of_week()


def is_valid_transition(rule: CivilTime) -> bool:
    """Check if a rule is valid in either form."""
    return is_valid_relative(rule) or is_valid_absolute(rule)


def is_ignored(rule: CivilTime) -> bool:
    """Check if a rule signals "no transition" (month == 0)."""
    return rule.month == 0


def transition_form(rule: CivilTime) -> TransitionForm:
    """Classify a rule by form.

    A rule with month 0 is reported as IGNORED even though it is not a
    valid rule in either form.
    """
    if is_valid_relative(rule):
        return TransitionForm.RELATIVE
    if is_valid_absolute(rule):
        return TransitionForm.ABSOLUTE
    if is_ignored(rule):
        return TransitionForm.IGNORED
    return TransitionForm.INVALID


def to_relative(local: CivilTime, round_up_to_last_occurrence: bool) -> CivilTime:
    """Convert an absolute local date into a relative transition rule.

    The occurrence is (day - 1) // 7 + 1, so days 1-7 are the first
    occurrence of their weekday, 8-14 the second and so on. When the date
    is the fourth occurrence and also the last one in its month, setting
    `round_up_to_last_occurrence` records it as occurrence 5 ("last") so
    the rule keeps meaning "last weekday" in years with five of them.
    Dates on day 29-31 are always occurrence 5.

    Args:
        local: An absolute local date. day_of_week is ignored.
        round_up_to_last_occurrence: Record a final fourth occurrence as 5.

    Returns:
        A relative rule with year 0 and the date's real day_of_week.

    Raises:
        ValidationError: If `local` is not a valid date and time.

    Examples:
        >>> to_relative(CivilTime.of(2024, 10, 27, 3), True)
        CivilTime(0, 10, 5, 3, 0, 0, 0, day_of_week=0)
        >>> to_relative(CivilTime.of(2024, 10, 27, 3), False)
        CivilTime(0, 10, 4, 3, 0, 0, 0, day_of_week=0)
    """
    local.validate(check_day_of_week=False)

    occurrence = (local.day - 1) // 7 + 1
    if (
        occurrence == 4
        and not is_date_valid(local.day + 7, local.month, local.year)
        and round_up_to_last_occurrence
    ):
        occurrence = LAST_OCCURRENCE

    return local.replace(
        year=0,
        day=occurrence,
        day_of_week=day_of_week(local.day, local.month, local.year),
    )


def to_absolute(rule: CivilTime, year: int) -> CivilTime:
    """Convert a transition rule into the absolute local date for a year.

    An absolute rule is returned as is, with day_of_week recomputed; the
    `year` argument is not used for it. A relative rule is resolved to the
    Nth `day_of_week` of its month in `year`, falling back one week when
    the fifth occurrence does not exist.

    Args:
        rule: A valid relative or absolute rule.
        year: The year in which to resolve a relative rule.

    Returns:
        The absolute local date and time of the transition.

    Raises:
        InvalidTransitionRuleError: If the rule is neither relative nor absolute.
        YearOutOfRangeError: If the rule is relative and `year` is unsupported.

    Examples:
        >>> fifth_friday_of_april = CivilTime(0, 4, 5, day_of_week=5)
        >>> to_absolute(fifth_friday_of_april, 2024).day  # Only four Fridays
        26
    """
    if not is_valid_relative(rule):
        if is_valid_absolute(rule):
            return rule.with_computed_day_of_week()
        raise InvalidTransitionRuleError(
            f"transition rule {rule!r} is neither relative nor absolute"
        )

    validate_year(year)

    first_day_of_week = day_of_week(1, rule.month, year)
    days_after_first_occurrence = (rule.day - 1) * 7

    if first_day_of_week <= rule.day_of_week:
        day = rule.day_of_week - first_day_of_week + 1 + days_after_first_occurrence
    else:
        day = (
            (6 - first_day_of_week)
            + 1
            + rule.day_of_week
            + 1
            + days_after_first_occurrence
        )

    # Occurrence 5 asked for but the month only has four
    if not is_date_valid(day, rule.month, year):
        day -= 7

    return rule.replace(year=year, day=day)


def compare_local_to_transition(
    local: CivilTime, rule: CivilTime, year_for_relative: int | None = None
) -> int:
    """Compare a local time with the moment a transition rule names.

    Args:
        local: Local time, biased to the period the rule is written in.
        rule: A relative or absolute transition rule.
        year_for_relative: Year to resolve a relative rule in. Defaults to
            the year of `local`.

    Returns:
        -1 if local is earlier, 0 if equal, 1 if later.

    Raises:
        InvalidTransitionRuleError: If the rule cannot be resolved.
    """
    if year_for_relative is None:
        year_for_relative = local.year
    return compare_civil_times_ignoring_day_of_week(
        local, to_absolute(rule, year_for_relative)
    )


__all__ = [
    "TransitionForm",
    "is_valid_relative",
    "is_valid_absolute",
    "is_valid_transition",
    "is_ignored",
    "transition_form",
    "to_relative",
    "to_absolute",
    "compare_local_to_transition",
]
