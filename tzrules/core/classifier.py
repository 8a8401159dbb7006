"""Standard/daylight classification of a UTC time under a yearly rule.

classify() takes a UTC civil time and the ZoneYearRule for the year the
local result should fall in, and decides which of the three possible
biases (unknown, standard, daylight) applies.

The transition moments are local times written in the clock of the
period that is ending, so each candidate local time is compared with the
transition written in the same clock:

    standard-biased local time  vs. daylight transition
    daylight-biased local time  vs. standard transition

When both transitions fall on the same moment the rule is degenerate.
Hosts commonly report daylight time for such a rule; here DAYLIGHT is
only reported when the daylight bias is nonzero, otherwise UNKNOWN.
"""

from __future__ import annotations

from dataclasses import dataclass

from tzrules._internal.validation import validate_year
from tzrules.core.civil import CivilTime, compare_civil_times_ignoring_day_of_week
from tzrules.core.instant import Instant
from tzrules.core.transition import is_valid_transition, to_absolute
from tzrules.core.zone_rule import ZoneYearRule, validate_rule
from tzrules.errors import StrictYearMismatch
from tzrules.units.zone_id import ZoneId


@dataclass(frozen=True)
class Classification:
    """Result of classifying a UTC time under a ZoneYearRule.

    Attributes:
        zone_id: STANDARD, DAYLIGHT or UNKNOWN.
        local: The local civil time for that classification.
        bias: Total minutes subtracted from UTC to obtain `local`.
        rule: The rule used.
        rule_year: The year the rule was applied for.
    """

    zone_id: ZoneId
    local: CivilTime
    bias: int
    rule: ZoneYearRule
    rule_year: int


def _choose(
    rule: ZoneYearRule,
    rule_year: int,
    if_standard: CivilTime,
    if_daylight: CivilTime,
) -> ZoneId:
    standard_start = to_absolute(rule.standard_transition, rule_year)
    daylight_start = to_absolute(rule.daylight_transition, rule_year)

    is_standard_before_daylight_start = (
        compare_civil_times_ignoring_day_of_week(if_standard, daylight_start) < 0
    )
    is_daylight_before_standard_start = (
        compare_civil_times_ignoring_day_of_week(if_daylight, standard_start) < 0
    )
    order = compare_civil_times_ignoring_day_of_week(standard_start, daylight_start)

    if order < 0:
        # Southern hemisphere layout: standard time starts first in the year
        if is_standard_before_daylight_start and not is_daylight_before_standard_start:
            return ZoneId.STANDARD
        return ZoneId.DAYLIGHT

    if order > 0:
        if is_daylight_before_standard_start and not is_standard_before_daylight_start:
            return ZoneId.DAYLIGHT
        return ZoneId.STANDARD

    # Both transitions coincide: DST is year round only with a real bias
    if rule.daylight_bias:
        return ZoneId.DAYLIGHT
    return ZoneId.UNKNOWN


def classify(
    utc: CivilTime,
    rule: ZoneYearRule,
    rule_year: int | None = None,
    strict: bool = False,
) -> Classification:
    """Convert a UTC time to local time under a yearly zone rule.

    Args:
        utc: A fully valid UTC civil time (day_of_week must match).
        rule: The zone's rule for `rule_year`. Ignored transitions are
            accepted and yield UNKNOWN.
        rule_year: The local year the rule describes. Defaults to
            `utc.year`.
        strict: Raise StrictYearMismatch unless the local time falls in
            `rule_year`.

    Returns:
        The classification, local time and bias.

    Raises:
        ValidationError: If `utc`, `rule_year` or the rule is invalid.
        OverflowError: If applying a bias leaves the supported range.
        StrictYearMismatch: In strict mode, if the local year differs.

    Examples:
        >>> from tzrules.core.zone_rule import ZoneYearRule
        >>> eastern = ZoneYearRule(
        ...     base_bias=300,
        ...     daylight_bias=-60,
        ...     standard_transition=CivilTime(0, 11, 1, 2, day_of_week=0),
        ...     daylight_transition=CivilTime(0, 3, 2, 2, day_of_week=0),
        ... )
        >>> result = classify(CivilTime.of(2013, 7, 4, 16), eastern)
        >>> result.zone_id, str(result.local)
        (<ZoneId.DAYLIGHT: 'DAYLIGHT'>, '2013-07-04T12:00:00.000')
    """
    if rule_year is None:
        rule_year = utc.year
    validate_year(rule_year)
    utc.validate()
    validate_rule(rule, allow_ignored_transitions=True)

    utc_instant = Instant.from_civil(utc)
    if_unknown = utc_instant.subtract_minutes(rule.base_bias).to_civil()
    if_standard = utc_instant.subtract_minutes(
        rule.base_bias + rule.standard_bias
    ).to_civil()
    if_daylight = utc_instant.subtract_minutes(
        rule.base_bias + rule.daylight_bias
    ).to_civil()

    if strict and all(
        candidate.year != rule_year
        for candidate in (if_unknown, if_standard, if_daylight)
    ):
        raise StrictYearMismatch(rule_year)

    if not (
        is_valid_transition(rule.standard_transition)
        and is_valid_transition(rule.daylight_transition)
    ):
        zone_id = ZoneId.UNKNOWN
    else:
        zone_id = _choose(rule, rule_year, if_standard, if_daylight)

    local = {
        ZoneId.UNKNOWN: if_unknown,
        ZoneId.STANDARD: if_standard,
        ZoneId.DAYLIGHT: if_daylight,
    }[zone_id]

    if strict and local.year != rule_year:
        raise StrictYearMismatch(rule_year, local.year)

    return Classification(
        zone_id=zone_id,
        local=local,
        bias=rule.active_bias(zone_id),
        rule=rule,
        rule_year=rule_year,
    )


__all__ = [
    "Classification",
    "classify",
]
