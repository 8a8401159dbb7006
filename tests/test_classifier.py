"""Tests for classify()."""

from __future__ import annotations

import pytest

from tzrules.core.civil import CivilTime
from tzrules.core.classifier import classify
from tzrules.core.zone_rule import ZoneYearRule
from tzrules.errors import (
    BiasOverflowError,
    InvalidDateError,
    InvalidTransitionRuleError,
    OverflowError,
    StrictYearMismatch,
    YearOutOfRangeError,
)
from tzrules.units.zone_id import ZoneId

from .conftest import IGNORED, SUNDAY, relative


class TestNorthernHemisphere:
    """US Eastern and Central Europe, where daylight time is mid-year."""

    def test_summer(self, eastern_rule: ZoneYearRule) -> None:
        """July is daylight time."""
        result = classify(CivilTime.of(2013, 7, 4, 16), eastern_rule)
        assert result.zone_id is ZoneId.DAYLIGHT
        assert result.local == CivilTime.of(2013, 7, 4, 12)
        assert result.bias == 240
        assert result.rule is eastern_rule
        assert result.rule_year == 2013

    def test_winter(self, eastern_rule: ZoneYearRule) -> None:
        """January is standard time."""
        result = classify(CivilTime.of(2013, 1, 15, 12), eastern_rule)
        assert result.zone_id is ZoneId.STANDARD
        assert result.local == CivilTime.of(2013, 1, 15, 7)
        assert result.bias == 300

    def test_daylight_starts(self, eastern_rule: ZoneYearRule) -> None:
        """At 02:00 standard time the clock jumps to 03:00."""
        before = classify(CivilTime.of(2013, 3, 10, 6, 59), eastern_rule)
        assert before.zone_id is ZoneId.STANDARD
        assert before.local == CivilTime.of(2013, 3, 10, 1, 59)

        at = classify(CivilTime.of(2013, 3, 10, 7), eastern_rule)
        assert at.zone_id is ZoneId.DAYLIGHT
        assert at.local == CivilTime.of(2013, 3, 10, 3)

    def test_standard_starts(self, eastern_rule: ZoneYearRule) -> None:
        """At 02:00 daylight time the clock falls back to 01:00."""
        before = classify(CivilTime.of(2013, 11, 3, 5, 59), eastern_rule)
        assert before.zone_id is ZoneId.DAYLIGHT
        assert before.local == CivilTime.of(2013, 11, 3, 1, 59)

        at = classify(CivilTime.of(2013, 11, 3, 6), eastern_rule)
        assert at.zone_id is ZoneId.STANDARD
        assert at.local == CivilTime.of(2013, 11, 3, 1)

    def test_central_europe_spring(self, central_europe_rule: ZoneYearRule) -> None:
        """Daylight time starts at 01:00 UTC on the last Sunday of March."""
        before = classify(CivilTime.of(2024, 3, 31, 0, 59), central_europe_rule)
        assert before.zone_id is ZoneId.STANDARD
        assert before.local == CivilTime.of(2024, 3, 31, 1, 59)

        at = classify(CivilTime.of(2024, 3, 31, 1), central_europe_rule)
        assert at.zone_id is ZoneId.DAYLIGHT
        assert at.local == CivilTime.of(2024, 3, 31, 3)
        assert at.bias == -120

    def test_central_europe_autumn(self, central_europe_rule: ZoneYearRule) -> None:
        """Standard time starts at 01:00 UTC on the last Sunday of October."""
        before = classify(CivilTime.of(2024, 10, 27, 0, 59), central_europe_rule)
        assert before.zone_id is ZoneId.DAYLIGHT
        assert before.local == CivilTime.of(2024, 10, 27, 2, 59)

        at = classify(CivilTime.of(2024, 10, 27, 1), central_europe_rule)
        assert at.zone_id is ZoneId.STANDARD
        assert at.local == CivilTime.of(2024, 10, 27, 2)
        assert at.bias == -60


class TestSouthernHemisphere:
    """Sydney, where standard time starts before daylight time in the year."""

    def test_seasons(self, sydney_rule: ZoneYearRule) -> None:
        """January and December are daylight time, June is standard time."""
        assert classify(CivilTime.of(2013, 1, 15), sydney_rule).zone_id is ZoneId.DAYLIGHT
        assert classify(CivilTime.of(2013, 6, 15), sydney_rule).zone_id is ZoneId.STANDARD
        assert classify(CivilTime.of(2013, 12, 15), sydney_rule).zone_id is ZoneId.DAYLIGHT

    def test_standard_starts(self, sydney_rule: ZoneYearRule) -> None:
        """Standard time started at 03:00 daylight time on April 7, 2013."""
        before = classify(CivilTime.of(2013, 4, 6, 15, 59), sydney_rule)
        assert before.zone_id is ZoneId.DAYLIGHT
        assert before.local == CivilTime.of(2013, 4, 7, 2, 59)

        at = classify(CivilTime.of(2013, 4, 6, 16), sydney_rule)
        assert at.zone_id is ZoneId.STANDARD
        assert at.local == CivilTime.of(2013, 4, 7, 2)
        assert at.bias == -600


class TestDegenerateRules:
    """Rules without a usable pair of transitions."""

    def test_ignored_transitions(self, no_dst_rule: ZoneYearRule) -> None:
        """A zone without DST is UNKNOWN with the base bias."""
        result = classify(CivilTime.of(2013, 6, 1), no_dst_rule)
        assert result.zone_id is ZoneId.UNKNOWN
        assert result.local == CivilTime.of(2013, 6, 1, 5, 30)
        assert result.bias == -330

    def test_one_ignored_transition(self) -> None:
        """A single ignored transition is enough for UNKNOWN."""
        rule = ZoneYearRule(
            base_bias=300,
            daylight_bias=-60,
            standard_transition=IGNORED,
            daylight_transition=relative(3, 2, SUNDAY, 2),
        )
        result = classify(CivilTime.of(2013, 7, 1), rule)
        assert result.zone_id is ZoneId.UNKNOWN
        assert result.bias == 300

    def test_coinciding_without_daylight_bias(self) -> None:
        """Coinciding transitions with no daylight bias are UNKNOWN."""
        transition = relative(3, 2, SUNDAY, 2)
        rule = ZoneYearRule(
            base_bias=300,
            standard_transition=transition,
            daylight_transition=transition,
        )
        result = classify(CivilTime.of(2013, 7, 1, 12), rule)
        assert result.zone_id is ZoneId.UNKNOWN
        assert result.local == CivilTime.of(2013, 7, 1, 7)

    def test_coinciding_with_daylight_bias(self) -> None:
        """Coinciding transitions with a daylight bias mean year-round DST."""
        transition = relative(3, 2, SUNDAY, 2)
        rule = ZoneYearRule(
            base_bias=300,
            daylight_bias=-60,
            standard_transition=transition,
            daylight_transition=transition,
        )
        for month in (1, 7, 12):
            result = classify(CivilTime.of(2013, month, 1, 12), rule)
            assert result.zone_id is ZoneId.DAYLIGHT
            assert result.bias == 240

    def test_absolute_transitions(self) -> None:
        """Absolute transitions work like relative ones."""
        rule = ZoneYearRule(
            base_bias=0,
            daylight_bias=-60,
            standard_transition=CivilTime(2013, 10, 27, 2),
            daylight_transition=CivilTime(2013, 3, 31, 1),
        )
        assert classify(CivilTime.of(2013, 6, 1), rule).zone_id is ZoneId.DAYLIGHT
        assert classify(CivilTime.of(2013, 11, 1), rule).zone_id is ZoneId.STANDARD


class TestStrictMode:
    """Tests for the strict rule year check."""

    def test_no_candidate_in_rule_year(self, eastern_rule: ZoneYearRule) -> None:
        """Strict mode fails early when no candidate is in the rule year."""
        with pytest.raises(StrictYearMismatch) as excinfo:
            classify(CivilTime.of(2013, 1, 1, 5, 30), eastern_rule, 2012, strict=True)
        assert excinfo.value.rule_year == 2012
        assert excinfo.value.local_year is None

    def test_chosen_local_outside_rule_year(self, sydney_rule: ZoneYearRule) -> None:
        """Strict mode fails when the chosen local time left the rule year."""
        utc = CivilTime.of(2012, 12, 31, 13, 30)
        with pytest.raises(StrictYearMismatch) as excinfo:
            classify(utc, sydney_rule, 2012, strict=True)
        assert excinfo.value.local_year == 2013

    def test_loose_mode_accepts_other_year(self, sydney_rule: ZoneYearRule) -> None:
        """Without strict mode the result is returned as is."""
        result = classify(CivilTime.of(2012, 12, 31, 13, 30), sydney_rule, 2012)
        assert result.zone_id is ZoneId.DAYLIGHT
        assert result.local == CivilTime.of(2013, 1, 1, 0, 30)
        assert result.rule_year == 2012

    def test_strict_match(self, eastern_rule: ZoneYearRule) -> None:
        """A local time in the rule year passes strict mode."""
        result = classify(CivilTime.of(2013, 1, 1), eastern_rule, 2012, strict=True)
        assert result.local == CivilTime.of(2012, 12, 31, 19)


class TestValidation:
    """classify() validates its inputs before converting."""

    def test_wrong_day_of_week(self, eastern_rule: ZoneYearRule) -> None:
        """The UTC time must have a matching day_of_week."""
        with pytest.raises(InvalidDateError):
            classify(CivilTime(2013, 1, 1, day_of_week=0), eastern_rule)

    def test_rule_year_out_of_range(self, eastern_rule: ZoneYearRule) -> None:
        """The rule year must be supported."""
        with pytest.raises(YearOutOfRangeError):
            classify(CivilTime.of(2013, 1, 1), eastern_rule, 1600)

    def test_bias_overflow(self) -> None:
        """Rules with oversized biases are rejected."""
        with pytest.raises(BiasOverflowError):
            classify(CivilTime.of(2013, 1, 1), ZoneYearRule(base_bias=1500))

    def test_invalid_transition(self) -> None:
        """Malformed transitions are rejected."""
        rule = ZoneYearRule(
            base_bias=300,
            standard_transition=CivilTime(0, 11, 9, day_of_week=SUNDAY),
            daylight_transition=relative(3, 2, SUNDAY, 2),
        )
        with pytest.raises(InvalidTransitionRuleError):
            classify(CivilTime.of(2013, 1, 1), rule)

    def test_range_overflow(self) -> None:
        """A bias that moves before 1601 raises OverflowError."""
        with pytest.raises(OverflowError):
            classify(CivilTime.of(1601, 1, 1), ZoneYearRule(base_bias=300))
