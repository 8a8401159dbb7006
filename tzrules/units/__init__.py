"""Enumerations used by the conversion engine.

This module provides:
    - ZoneId: INVALID/UNKNOWN/STANDARD/DAYLIGHT classification
    - Preference: which of UTC or local time a consumer prefers
"""

from __future__ import annotations

from tzrules.units.preference import Preference
from tzrules.units.zone_id import ZoneId

__all__: list[str] = [
    "Preference",
    "ZoneId",
]
