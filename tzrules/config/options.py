"""Conversion options.

Options travel with each call; nothing is stored between calls.
"""

from __future__ import annotations

from dataclasses import dataclass

from tzrules._internal.validation import validate_year


@dataclass(frozen=True)
class ConversionOptions:
    """Configuration for UTC to local time conversion.

    Attributes:
        prefer_local_time: Whether consumers should treat the local half of
            a TimeInfo as the primary one.
        dst_start_year: Earliest local year in which daylight saving time is
            applied. 1967 is the first year of the US Uniform Time Act.
        ignore_dst: Never apply daylight saving time.

    Examples:
        >>> opts = ConversionOptions(ignore_dst=True)
        >>> opts.applies_dst(2024)
        False

        >>> ConversionOptions().applies_dst(1950)
        False
    """

    prefer_local_time: bool = True
    dst_start_year: int = 1967
    ignore_dst: bool = False

    def __post_init__(self) -> None:
        validate_year(self.dst_start_year)

    def applies_dst(self, year: int) -> bool:
        """Return True if DST may be applied to local times in `year`."""
        return not self.ignore_dst and year >= self.dst_start_year


DEFAULT_OPTIONS = ConversionOptions()


__all__ = [
    "ConversionOptions",
    "DEFAULT_OPTIONS",
]
