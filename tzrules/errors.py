"""tzrules exception hierarchy.

All tzrules-specific exceptions inherit from TzRulesError.
"""

from __future__ import annotations


class TzRulesError(Exception):
    """Base exception for all tzrules errors."""

    pass


class ValidationError(TzRulesError):
    """Invalid input values.

    Raised when a civil time, transition rule or zone rule is out of range
    or malformed. Validation always happens before any result is built.
    """

    pass


class InvalidDateError(ValidationError):
    """The year/month/day triple does not name a real calendar date.

    Examples:
        - Month value outside 1-12
        - February 29 in a common year
        - A day_of_week that does not match the date (full validation only)
    """

    pass


class InvalidTimeError(ValidationError):
    """A time-of-day field is out of range.

    Examples:
        - Hour value outside 0-23
        - Millisecond value outside 0-999
    """

    pass


class YearOutOfRangeError(InvalidDateError):
    """Year outside the supported range 1601-30827."""

    pass


class BiasOverflowError(ValidationError):
    """A combined UTC bias exceeds 24 hours in either direction."""

    pass


class InvalidTransitionRuleError(ValidationError):
    """A transition rule is neither a valid relative nor a valid absolute rule."""

    pass


class OverflowError(TzRulesError):
    """Tick arithmetic left the representable range.

    Raised when adding or subtracting an offset moves an Instant before
    1601-01-01 or after 30827-12-31 23:59:59.999.
    """

    pass


class RuleProviderError(TzRulesError):
    """The rule provider has no usable rule for the requested year."""

    pass


class StrictYearMismatch(TzRulesError):
    """A strict classification produced a local time outside the rule year.

    Used internally by the year boundary resolver to move on to the next
    candidate year. Never raised from utc_to_local().
    """

    def __init__(self, rule_year: int, local_year: int | None = None) -> None:
        self.rule_year = rule_year
        self.local_year = local_year
        if local_year is None:
            message = f"no candidate local time falls in {rule_year}"
        else:
            message = f"local time falls in {local_year}, not in rule year {rule_year}"
        super().__init__(message)


class ConversionError(TzRulesError):
    """Every candidate year failed while converting UTC to local time."""

    pass


__all__ = [
    "TzRulesError",
    "ValidationError",
    "InvalidDateError",
    "InvalidTimeError",
    "YearOutOfRangeError",
    "BiasOverflowError",
    "InvalidTransitionRuleError",
    "OverflowError",
    "RuleProviderError",
    "StrictYearMismatch",
    "ConversionError",
]
