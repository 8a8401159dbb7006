"""Zone classification enumeration.

This module provides the ZoneId enum describing which bias applies to a
civil time under a zone's yearly rule.
"""

from __future__ import annotations

from enum import Enum


class ZoneId(Enum):
    """Classification of a local time under a ZoneYearRule.

    Values:
        INVALID: No classification could be made.
        UNKNOWN: DST is not observed (or disabled); only the base bias applies.
        STANDARD: Standard time; base + standard bias applies.
        DAYLIGHT: Daylight saving time; base + daylight bias applies.

    Examples:
        >>> ZoneId.DAYLIGHT.is_daylight
        True
        >>> str(ZoneId.STANDARD)
        'STANDARD'
    """

    INVALID = "INVALID"
    UNKNOWN = "UNKNOWN"
    STANDARD = "STANDARD"
    DAYLIGHT = "DAYLIGHT"

    @property
    def is_daylight(self) -> bool:
        """Return True if this is ZoneId.DAYLIGHT."""
        return self is ZoneId.DAYLIGHT

    def __str__(self) -> str:
        return self.value


__all__ = ["ZoneId"]
