"""Pytest configuration and fixtures for tzrules tests."""

from __future__ import annotations

import sys
from pathlib import Path

import pytest

# Add the parent directory to sys.path so tzrules can be imported
# without needing to install the package
project_root = Path(__file__).parent.parent
if str(project_root) not in sys.path:
    sys.path.insert(0, str(project_root))

from tzrules.core.civil import CivilTime  # noqa: E402
from tzrules.core.provider import StaticRuleProvider  # noqa: E402
from tzrules.core.zone_rule import ZoneYearRule  # noqa: E402


def relative(month: int, occurrence: int, weekday: int, hour: int = 0) -> CivilTime:
    """Build a relative transition rule: the Nth weekday of a month."""
    return CivilTime(0, month, occurrence, hour, day_of_week=weekday)


SUNDAY = 0
IGNORED = CivilTime(0, 0, 0)


@pytest.fixture
def eastern_rule() -> ZoneYearRule:
    """US Eastern since 2007: 2nd Sunday of March to 1st Sunday of November."""
    return ZoneYearRule(
        base_bias=300,
        standard_bias=0,
        daylight_bias=-60,
        standard_transition=relative(11, 1, SUNDAY, 2),
        daylight_transition=relative(3, 2, SUNDAY, 2),
        standard_name="Eastern Standard Time",
        daylight_name="Eastern Daylight Time",
    )


@pytest.fixture
def eastern_1987_rule() -> ZoneYearRule:
    """US Eastern 1987-2006: 1st Sunday of April to last Sunday of October."""
    return ZoneYearRule(
        base_bias=300,
        standard_bias=0,
        daylight_bias=-60,
        standard_transition=relative(10, 5, SUNDAY, 2),
        daylight_transition=relative(4, 1, SUNDAY, 2),
    )


@pytest.fixture
def central_europe_rule() -> ZoneYearRule:
    """Central Europe: last Sunday of March to last Sunday of October."""
    return ZoneYearRule(
        base_bias=-60,
        standard_bias=0,
        daylight_bias=-60,
        standard_transition=relative(10, 5, SUNDAY, 3),
        daylight_transition=relative(3, 5, SUNDAY, 2),
    )


@pytest.fixture
def sydney_rule() -> ZoneYearRule:
    """Southern hemisphere: standard time from April, daylight from October."""
    return ZoneYearRule(
        base_bias=-600,
        standard_bias=0,
        daylight_bias=-60,
        standard_transition=relative(4, 1, SUNDAY, 3),
        daylight_transition=relative(10, 1, SUNDAY, 2),
    )


@pytest.fixture
def no_dst_rule() -> ZoneYearRule:
    """A zone that does not observe DST (UTC+05:30)."""
    return ZoneYearRule(base_bias=-330)


@pytest.fixture
def eastern_provider(
    eastern_1987_rule: ZoneYearRule, eastern_rule: ZoneYearRule
) -> StaticRuleProvider:
    """US Eastern with the 2007 rule change."""
    return StaticRuleProvider({1987: eastern_1987_rule, 2007: eastern_rule})
