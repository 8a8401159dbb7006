"""Core types and algorithms of tzrules.

This module provides:
    - CivilTime: broken-down date and time (also used for transition rules)
    - Instant: 100 ns tick count since 1601 with range-checked arithmetic
    - ZoneYearRule: one zone's biases and transitions for a year
    - classify: standard/daylight classification under one rule
    - utc_to_local: year-boundary aware UTC to local conversion
    - TimeInfo: UTC and local time pair
"""

from __future__ import annotations

from tzrules.core.civil import CivilTime
from tzrules.core.classifier import Classification, classify
from tzrules.core.instant import Instant
from tzrules.core.provider import RuleProvider, StaticRuleProvider
from tzrules.core.resolver import instant_to_local, utc_to_local
from tzrules.core.timeinfo import TimeInfo, get_time_info
from tzrules.core.transition import TransitionForm
from tzrules.core.zone_rule import ZoneYearRule

__all__: list[str] = [
    "CivilTime",
    "Classification",
    "Instant",
    "RuleProvider",
    "StaticRuleProvider",
    "TimeInfo",
    "TransitionForm",
    "ZoneYearRule",
    "classify",
    "get_time_info",
    "instant_to_local",
    "utc_to_local",
]
