"""Timezone utilities.

Single source of truth for timezone operations. Calendar dates used for
bucketing are always evaluated in the display timezone, never in UTC.
"""

import logging
from datetime import date, datetime, tzinfo
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

logger = logging.getLogger(__name__)

DEFAULT_TIMEZONE = "America/New_York"

__all__ = [
    "get_timezone",
    "now_local",
    "to_local",
    "local_date",
    "format_day_label",
    "format_time",
]


def get_timezone(name: str | None) -> tzinfo:
    """Resolve a timezone name, falling back to DEFAULT_TIMEZONE."""
    try:
        return ZoneInfo(name or DEFAULT_TIMEZONE)
    except (ZoneInfoNotFoundError, ValueError):
        logger.warning("Unknown timezone '%s', using %s", name, DEFAULT_TIMEZONE)
        return ZoneInfo(DEFAULT_TIMEZONE)


def now_local(tz: tzinfo) -> datetime:
    """Get current time in the given timezone."""
    return datetime.now(tz)


def to_local(dt: datetime, tz: tzinfo) -> datetime:
    """Convert an aware datetime to the given timezone.

    Raises:
        ValueError: dt is naive
    """
    if dt.tzinfo is None:
        raise ValueError("Cannot convert naive datetime - must be timezone-aware")
    return dt.astimezone(tz)


def local_date(dt: datetime, reference: datetime) -> date:
    """Calendar date of dt as seen in reference's timezone.

    A naive reference means dt is evaluated in the process-local zone.
    """
    if dt.tzinfo is None:
        return dt.date()
    if reference.tzinfo is None:
        return dt.astimezone().date()
    return dt.astimezone(reference.tzinfo).date()


def format_day_label(day: date) -> str:
    """Bucket label for a calendar day (e.g., 'WED, OCT 21')."""
    return f"{day.strftime('%a')}, {day.strftime('%b')} {day.day}".upper()


def format_time(dt: datetime, tz: tzinfo) -> str:
    """Format kickoff time for display (e.g., '7:30 PM')."""
    local_dt = to_local(dt, tz)
    hour = local_dt.hour % 12 or 12
    return f"{hour}:{local_dt.strftime('%M %p')}"
