"""tzrules: UTC to local time conversion under per-year DST rules.

tzrules converts between universal time and the civil time of a single
time zone described by a yearly rule: a base bias, standard and daylight
biases, and the two moments the zone switches between them. It handles
relative ("last Sunday of March") and absolute transition dates, and the
year boundary, where the local year can differ from the UTC year.

Core Types:
    CivilTime: Broken-down date and time, also used for transition rules
    Instant: 100 ns tick count since 1601-01-01
    ZoneYearRule: A zone's biases and transitions for one year
    Classification: Result of classifying a UTC time under a rule
    TimeInfo: A UTC time paired with its local time

Units:
    ZoneId: INVALID, UNKNOWN, STANDARD, DAYLIGHT
    Preference: LOCAL or UTC

Functions:
    classify: Classify a UTC time under one year's rule
    utc_to_local: Convert UTC to local time, resolving the rule year
    get_time_info: Convert and pair UTC with local time

Exceptions:
    TzRulesError: Base exception
    ValidationError: Invalid input values
    OverflowError: Tick arithmetic out of range
    RuleProviderError: No rule for a requested year
    ConversionError: No candidate year could convert a time

Example:
    >>> from tzrules import CivilTime, StaticRuleProvider, ZoneYearRule, utc_to_local
    >>> eastern = ZoneYearRule(
    ...     base_bias=300,
    ...     daylight_bias=-60,
    ...     standard_transition=CivilTime(0, 11, 1, 2, day_of_week=0),
    ...     daylight_transition=CivilTime(0, 3, 2, 2, day_of_week=0),
    ... )
    >>> result = utc_to_local(CivilTime.of(2013, 1, 1), StaticRuleProvider.fixed(eastern))
    >>> str(result.local), result.rule_year
    ('2012-12-31T19:00:00.000', 2012)
"""

from __future__ import annotations

__version__ = "0.1.0"

# Core types
from tzrules.core.civil import CivilTime
from tzrules.core.classifier import Classification, classify
from tzrules.core.instant import Instant
from tzrules.core.provider import RuleProvider, StaticRuleProvider
from tzrules.core.resolver import instant_to_local, utc_to_local
from tzrules.core.timeinfo import TimeInfo, get_time_info
from tzrules.core.zone_rule import ZoneYearRule

# Units
from tzrules.units.preference import Preference
from tzrules.units.zone_id import ZoneId

# Configuration
from tzrules.config.options import ConversionOptions

# Exceptions
from tzrules.errors import (
    BiasOverflowError,
    ConversionError,
    InvalidDateError,
    InvalidTimeError,
    InvalidTransitionRuleError,
    OverflowError,
    RuleProviderError,
    TzRulesError,
    ValidationError,
    YearOutOfRangeError,
)

__all__: list[str] = [
    "__version__",
    # Core types
    "CivilTime",
    "Classification",
    "Instant",
    "RuleProvider",
    "StaticRuleProvider",
    "TimeInfo",
    "ZoneYearRule",
    # Units
    "Preference",
    "ZoneId",
    # Configuration
    "ConversionOptions",
    # Functions
    "classify",
    "get_time_info",
    "instant_to_local",
    "utc_to_local",
    # Exceptions
    "TzRulesError",
    "ValidationError",
    "InvalidDateError",
    "InvalidTimeError",
    "YearOutOfRangeError",
    "BiasOverflowError",
    "InvalidTransitionRuleError",
    "OverflowError",
    "RuleProviderError",
    "ConversionError",
]
