"""Configuration for tzrules.

This module provides:
    - ConversionOptions: per-call conversion settings
    - configure_logging: optional structlog setup for hosts
"""

from __future__ import annotations

from tzrules.config.logging import configure_logging
from tzrules.config.options import DEFAULT_OPTIONS, ConversionOptions

__all__: list[str] = [
    "ConversionOptions",
    "DEFAULT_OPTIONS",
    "configure_logging",
]
