"""Countdown to the event start."""
from datetime import datetime

import pytz

from celebration.config import settings


def event_start(starts_at: str = None, tz_name: str = None) -> datetime:
    """Localize the configured naive start time to the event timezone."""
    naive = datetime.fromisoformat(starts_at or settings.EVENT_STARTS_AT)
    tz = pytz.timezone(tz_name or settings.EVENT_TIMEZONE)
    return tz.localize(naive)


def countdown(now: datetime, starts_at: datetime) -> dict[str, str]:
    """Days/hours/minutes/seconds left as two-digit strings; zeros once started."""
    remaining = int((starts_at - now).total_seconds())
    if remaining < 0:
        remaining = 0

    days, rest = divmod(remaining, 86400)
    hours, rest = divmod(rest, 3600)
    minutes, seconds = divmod(rest, 60)
    return {
        "days": str(days).zfill(2),
        "hours": str(hours).zfill(2),
        "minutes": str(minutes).zfill(2),
        "seconds": str(seconds).zfill(2),
    }
