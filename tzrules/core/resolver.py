"""UTC to local time across calendar year boundaries.

A zone's rule is defined per local calendar year, but the local year of
a UTC time is only known after a rule has been applied. Because no
supported bias exceeds 24 hours, the local year can differ from the UTC
year only when the UTC date is January 1 (local may still be in the
previous year) or December 31 (local may already be in the next year).

The resolver therefore tries candidate years in a fixed order:

    UTC date      first attempt          fallback
    Jan 1         year - 1, strict       year, loose
    Dec 31        year, strict           year + 1, loose
    other         year, strict           (none)

A strict attempt is discarded unless the local time lands in the rule's
own year. A loose attempt accepts whatever year results.
"""

from __future__ import annotations

import logging

from tzrules._internal.calendar import is_year_valid
from tzrules.config.options import DEFAULT_OPTIONS, ConversionOptions
from tzrules.core.civil import CivilTime
from tzrules.core.classifier import Classification, classify
from tzrules.core.instant import Instant
from tzrules.core.provider import RuleProvider
from tzrules.errors import (
    ConversionError,
    RuleProviderError,
    StrictYearMismatch,
    TzRulesError,
)

logger = logging.getLogger(__name__)


def candidate_years(utc: CivilTime) -> list[tuple[int, bool]]:
    """Return the (rule_year, strict) attempts for a UTC time, in order.

    Examples:
        >>> candidate_years(CivilTime.of(2013, 1, 1))
        [(2012, True), (2013, False)]
        >>> candidate_years(CivilTime.of(2012, 12, 31))
        [(2012, True), (2013, False)]
        >>> candidate_years(CivilTime.of(2013, 6, 1))
        [(2013, True)]
    """
    year = utc.year
    if utc.month == 1 and utc.day == 1:
        return [(year - 1, True), (year, False)]
    if utc.month == 12 and utc.day == 31:
        return [(year, True), (year + 1, False)]
    return [(year, True)]


def utc_to_local(
    utc: CivilTime,
    provider: RuleProvider,
    options: ConversionOptions | None = None,
) -> Classification:
    """Convert a UTC civil time to local time for the zone behind `provider`.

    Args:
        utc: A fully valid UTC civil time (day_of_week must match).
        provider: Supplies the zone's rule for a local calendar year.
        options: Conversion options. DST is left out of any candidate year
            before `options.dst_start_year`, or everywhere when
            `options.ignore_dst` is set.

    Returns:
        The classification of the first successful attempt, including the
        rule and rule year that produced it.

    Raises:
        ValidationError: If `utc` is not a valid civil time.
        ConversionError: If every candidate year failed. The last
            underlying error is chained as the cause.
    """
    if options is None:
        options = DEFAULT_OPTIONS
    utc.validate()

    last_error: TzRulesError | None = None
    for rule_year, strict in candidate_years(utc):
        if not is_year_valid(rule_year):
            last_error = RuleProviderError(f"year {rule_year} is out of range")
            continue

        try:
            rule = provider.get_rule(rule_year)
        except RuleProviderError as exc:
            logger.debug("no rule for %d: %s", rule_year, exc)
            last_error = exc
            continue

        if not options.applies_dst(rule_year):
            rule = rule.without_dst()

        try:
            result = classify(utc, rule, rule_year, strict=strict)
        except StrictYearMismatch as exc:
            logger.debug("%s: %s", utc, exc)
            last_error = exc
            continue
        except TzRulesError as exc:
            logger.debug("rule for %d rejected: %s", rule_year, exc)
            last_error = exc
            continue

        logger.debug(
            "%s UTC -> %s local (%s, rule year %d, strict=%s)",
            utc,
            result.local,
            result.zone_id,
            rule_year,
            strict,
        )
        return result

    raise ConversionError(f"no rule year could convert {utc} UTC to local time") from (
        last_error
    )


def instant_to_local(
    instant: Instant,
    provider: RuleProvider,
    options: ConversionOptions | None = None,
) -> Classification:
    """Convert a UTC Instant to local time. See utc_to_local().

    Raises:
        OverflowError: If the instant is out of range.
    """
    return utc_to_local(instant.to_civil(), provider, options)


__all__ = [
    "candidate_years",
    "utc_to_local",
    "instant_to_local",
]
