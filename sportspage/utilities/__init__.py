"""Utilities - timezones, logging."""

from sportspage.utilities.logging import setup_logging
from sportspage.utilities.tz import get_timezone, now_local

__all__ = [
    "get_timezone",
    "now_local",
    "setup_logging",
]
