"""Per-year rule providers.

The engine never looks up zone data itself. It asks a RuleProvider for
the ZoneYearRule of a local calendar year, and treats the answer as
opaque: a provider may hand back a nearby year's data when it has no
entry for the exact year.
"""

from __future__ import annotations

import bisect
import logging
from typing import Mapping, Protocol, runtime_checkable

from tzrules._internal.calendar import is_year_valid
from tzrules._internal.constants import MAX_YEAR, MIN_YEAR
from tzrules.core.zone_rule import ZoneYearRule
from tzrules.errors import RuleProviderError

logger = logging.getLogger(__name__)


@runtime_checkable
class RuleProvider(Protocol):
    """Anything that can supply a zone's rule for a local calendar year."""

    def get_rule(self, year: int) -> ZoneYearRule:
        """Return the rule for `year`, or raise RuleProviderError."""
        ...


class StaticRuleProvider:
    """An in-memory provider keyed by the first year each rule applies.

    A requested year resolves to the entry with the greatest starting
    year not after it. Years before the earliest entry get the earliest
    entry, the way hosts fall back to their oldest known data.

    Examples:
        >>> from tzrules.core.civil import CivilTime
        >>> old = ZoneYearRule(base_bias=300, daylight_bias=-60,
        ...     standard_transition=CivilTime(0, 10, 5, 2, day_of_week=0),
        ...     daylight_transition=CivilTime(0, 4, 1, 2, day_of_week=0))
        >>> new = ZoneYearRule(base_bias=300, daylight_bias=-60,
        ...     standard_transition=CivilTime(0, 11, 1, 2, day_of_week=0),
        ...     daylight_transition=CivilTime(0, 3, 2, 2, day_of_week=0))
        >>> provider = StaticRuleProvider({1987: old, 2007: new})
        >>> provider.get_rule(2013) is new
        True
        >>> provider.get_rule(1970) is old
        True
    """

    __slots__ = ("_years", "_rules")

    def __init__(self, rules: Mapping[int, ZoneYearRule]) -> None:
        """Create a provider from {first_year: rule}.

        Raises:
            RuleProviderError: If `rules` is empty or holds an invalid year.
        """
        if not rules:
            raise RuleProviderError("at least one rule is required")
        for year in rules:
            if not is_year_valid(year):
                raise RuleProviderError(
                    f"rule year must be between {MIN_YEAR} and {MAX_YEAR}, got {year}"
                )

        self._years: list[int] = sorted(rules)
        self._rules: dict[int, ZoneYearRule] = dict(rules)

    @classmethod
    def fixed(cls, rule: ZoneYearRule) -> StaticRuleProvider:
        """Create a provider that returns the same rule for every year."""
        return cls({MIN_YEAR: rule})

    @property
    def years(self) -> tuple[int, ...]:
        """Return the starting years of the stored rules, ascending."""
        return tuple(self._years)

    def get_rule(self, year: int) -> ZoneYearRule:
        """Return the rule in force for `year`.

        Raises:
            RuleProviderError: If `year` is outside 1601-30827.
        """
        if not is_year_valid(year):
            raise RuleProviderError(
                f"year must be between {MIN_YEAR} and {MAX_YEAR}, got {year}"
            )

        index = bisect.bisect_right(self._years, year) - 1
        if index < 0:
            index = 0
        source_year = self._years[index]
        if source_year != year:
            logger.debug("rule for %d served from %d entry", year, source_year)
        return self._rules[source_year]

    def __repr__(self) -> str:
        return f"StaticRuleProvider(years={self._years!r})"


__all__ = [
    "RuleProvider",
    "StaticRuleProvider",
]
