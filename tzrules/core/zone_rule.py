"""ZoneYearRule, one zone's behaviour for one calendar year.

Biases are minutes subtracted from UTC to get local time
(local = UTC - bias), so zones west of Greenwich have positive biases.
US Eastern, for example, is base_bias=300, standard_bias=0,
daylight_bias=-60.
"""

from __future__ import annotations

from dataclasses import dataclass, replace

from tzrules._internal.constants import MAX_BIAS_MINUTES
from tzrules.core.civil import CivilTime
from tzrules.core.transition import is_ignored, is_valid_transition
from tzrules.errors import BiasOverflowError, InvalidTransitionRuleError
from tzrules.units.zone_id import ZoneId

_NO_TRANSITION = CivilTime(0, 0, 0)


@dataclass(frozen=True)
class ZoneYearRule:
    """The biases and DST transitions of a zone for a single year.

    Attributes:
        base_bias: Minutes subtracted from UTC in every period.
        standard_bias: Extra minutes during standard time (usually 0).
        daylight_bias: Extra minutes during daylight time (usually -60).
        standard_transition: When standard time starts, in local daylight time.
        daylight_transition: When daylight time starts, in local standard time.
        standard_name: Optional label for standard time, carried for display.
        daylight_name: Optional label for daylight time, carried for display.

    Examples:
        >>> eastern = ZoneYearRule(
        ...     base_bias=300,
        ...     standard_bias=0,
        ...     daylight_bias=-60,
        ...     standard_transition=CivilTime(0, 11, 1, 2, day_of_week=0),
        ...     daylight_transition=CivilTime(0, 3, 2, 2, day_of_week=0),
        ... )
        >>> eastern.active_bias(ZoneId.DAYLIGHT)
        240
    """

    base_bias: int
    standard_bias: int = 0
    daylight_bias: int = 0
    standard_transition: CivilTime = _NO_TRANSITION
    daylight_transition: CivilTime = _NO_TRANSITION
    standard_name: str = ""
    daylight_name: str = ""

    @property
    def observes_dst(self) -> bool:
        """Return True if neither transition is ignored."""
        return not (
            is_ignored(self.standard_transition) or is_ignored(self.daylight_transition)
        )

    def active_bias(self, zone_id: ZoneId) -> int:
        """Return the total bias that applies under a classification.

        Raises:
            ValueError: For ZoneId.INVALID.
        """
        if zone_id is ZoneId.DAYLIGHT:
            return self.base_bias + self.daylight_bias
        if zone_id is ZoneId.STANDARD:
            return self.base_bias + self.standard_bias
        if zone_id is ZoneId.UNKNOWN:
            return self.base_bias
        raise ValueError(f"no bias applies to {zone_id}")

    def without_dst(self) -> ZoneYearRule:
        """Return this rule as a host reports it with automatic DST disabled.

        The base bias is kept; both extra biases are zeroed and both
        transitions become ignored, so every instant classifies as UNKNOWN.
        The daylight name is replaced by the standard name.
        """
        return replace(
            self,
            standard_bias=0,
            daylight_bias=0,
            standard_transition=_NO_TRANSITION,
            daylight_transition=_NO_TRANSITION,
            daylight_name=self.standard_name,
        )


def are_biases_valid(rule: ZoneYearRule) -> bool:
    """Check that every bias combination stays within +/- 24 hours.

    The base bias alone, base + standard and base + daylight must each be
    within [-1440, 1440] minutes.

    Examples:
        >>> are_biases_valid(ZoneYearRule(base_bias=1440, daylight_bias=60))
        False
        >>> are_biases_valid(ZoneYearRule(base_bias=1440, daylight_bias=-60))
        True
    """
    for bias in (
        rule.base_bias,
        rule.base_bias + rule.standard_bias,
        rule.base_bias + rule.daylight_bias,
    ):
        if bias < -MAX_BIAS_MINUTES or bias > MAX_BIAS_MINUTES:
            return False
    return True


def _is_transition_acceptable(rule: CivilTime, allow_ignored: bool) -> bool:
    return is_valid_transition(rule) or (allow_ignored and is_ignored(rule))


def is_rule_valid(rule: ZoneYearRule, allow_ignored_transitions: bool = False) -> bool:
    """Check the biases and both transitions of a rule.

    Args:
        rule: The rule to check.
        allow_ignored_transitions: Accept transitions with month 0, which
            hosts use to say DST is not observed.
    """
    return (
        are_biases_valid(rule)
        and _is_transition_acceptable(rule.standard_transition, allow_ignored_transitions)
        and _is_transition_acceptable(rule.daylight_transition, allow_ignored_transitions)
    )


def validate_rule(rule: ZoneYearRule, allow_ignored_transitions: bool = False) -> None:
    """Raise if a rule is invalid. See is_rule_valid().

    Raises:
        BiasOverflowError: If a bias combination exceeds 24 hours.
        InvalidTransitionRuleError: If a transition is unusable.
    """
    if not are_biases_valid(rule):
        raise BiasOverflowError(
            f"biases base={rule.base_bias} standard={rule.standard_bias} "
            f"daylight={rule.daylight_bias} exceed {MAX_BIAS_MINUTES} minutes"
        )
    for name, transition in (
        ("standard_transition", rule.standard_transition),
        ("daylight_transition", rule.daylight_transition),
    ):
        if not _is_transition_acceptable(transition, allow_ignored_transitions):
            raise InvalidTransitionRuleError(f"{name} {transition!r} is not valid")


__all__ = [
    "ZoneYearRule",
    "are_biases_valid",
    "is_rule_valid",
    "validate_rule",
]
