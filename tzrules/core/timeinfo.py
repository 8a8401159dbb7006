"""TimeInfo, a UTC time paired with its local conversion.

A formatting layer takes a TimeInfo and renders whichever half it
prefers; this module produces no strings.
"""

from __future__ import annotations

from dataclasses import dataclass

from tzrules.config.options import DEFAULT_OPTIONS, ConversionOptions
from tzrules.core.civil import CivilTime
from tzrules.core.instant import Instant
from tzrules.core.provider import RuleProvider
from tzrules.core.resolver import utc_to_local
from tzrules.units.preference import Preference
from tzrules.units.zone_id import ZoneId


@dataclass(frozen=True)
class TimeInfo:
    """A UTC time, its local time, and how one was derived from the other.

    Attributes:
        utc: The universal time.
        local: The local time (utc - bias).
        bias: Minutes subtracted from UTC to obtain local time.
        zone_id: The classification that selected the bias.
        rule_year: The year whose rule produced the conversion.
        preference: Which half consumers should treat as primary.
    """

    utc: CivilTime
    local: CivilTime
    bias: int
    zone_id: ZoneId
    rule_year: int
    preference: Preference = Preference.LOCAL

    @property
    def preferred(self) -> CivilTime:
        """Return the civil time selected by `preference`."""
        if self.preference is Preference.LOCAL:
            return self.local
        return self.utc

    @property
    def preferred_bias(self) -> int:
        """Return the bias of the preferred half (0 for UTC)."""
        if self.preference is Preference.LOCAL:
            return self.bias
        return 0

    @property
    def offset_minutes(self) -> int:
        """Return the signed UTC offset of local time, e.g. -300 for EST."""
        return -self.bias

    @property
    def is_daylight(self) -> bool:
        """Return True if the local time is daylight saving time."""
        return self.zone_id.is_daylight


def get_time_info(
    utc: CivilTime | Instant,
    provider: RuleProvider,
    options: ConversionOptions | None = None,
) -> TimeInfo:
    """Convert a UTC time and pair it with the result.

    Args:
        utc: The universal time, as a civil time or an Instant.
        provider: Supplies the zone's rule for a local calendar year.
        options: Conversion options; `prefer_local_time` sets the
            preference of the result.

    Raises:
        ValidationError: If `utc` is not a valid civil time.
        OverflowError: If an Instant is out of range.
        ConversionError: If no candidate year could convert the time.
    """
    if options is None:
        options = DEFAULT_OPTIONS
    if isinstance(utc, Instant):
        utc = utc.to_civil()

    result = utc_to_local(utc, provider, options)
    return TimeInfo(
        utc=utc,
        local=result.local,
        bias=result.bias,
        zone_id=result.zone_id,
        rule_year=result.rule_year,
        preference=Preference.from_prefer_local_time(options.prefer_local_time),
    )


__all__ = [
    "TimeInfo",
    "get_time_info",
]
