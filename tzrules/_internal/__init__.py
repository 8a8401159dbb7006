"""Internal utilities for tzrules.

This module contains private implementation details:
    - Constants and magic numbers
    - Calendar math (leap years, day of week, day counts since 1601)
    - Validation helpers

Note: This module is not part of the public API.
"""

from __future__ import annotations

from tzrules._internal.validation import (
    validate_date,
    validate_day_of_week,
    validate_time_of_day,
    validate_year,
)

__all__: list[str] = [
    "validate_date",
    "validate_day_of_week",
    "validate_time_of_day",
    "validate_year",
]
