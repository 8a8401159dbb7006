"""Display preference enumeration."""

from __future__ import annotations

from enum import Enum


class Preference(Enum):
    """Which half of a TimeInfo pair a consumer should show first.

    Values:
        LOCAL: Prefer the converted local time.
        UTC: Prefer the universal time.
    """

    LOCAL = "LOCAL"
    UTC = "UTC"

    @classmethod
    def from_prefer_local_time(cls, prefer_local_time: bool) -> Preference:
        """Map the boolean option onto an enum member."""
        return cls.LOCAL if prefer_local_time else cls.UTC


__all__ = ["Preference"]
