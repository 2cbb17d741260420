"""
Datetime utilities for consistent timezone handling.

Stored timestamps are timezone-aware UTC. Calendar decisions (which day is
"today", which weekday it is) are made in one fixed IANA zone passed in by
the caller, never in the host's local zone.
"""

from datetime import UTC, date, datetime
from zoneinfo import ZoneInfo

DATE_FORMAT = "%Y-%m-%d"


def utc_now() -> datetime:
    """
    Return the current UTC datetime with timezone info.

    Use this instead of datetime.now() (naive, local zone) or
    datetime.utcnow() (naive, deprecated in Python 3.12).
    """
    return datetime.now(UTC)


def ensure_utc(dt: datetime | None) -> datetime | None:
    """
    Ensure a datetime is UTC-aware.

    - If None, returns None
    - If naive, assumes UTC and attaches timezone
    - If aware, converts to UTC
    """
    if dt is None:
        return None

    if dt.tzinfo is None:
        return dt.replace(tzinfo=UTC)

    return dt.astimezone(UTC)


def local_date(moment: datetime, tz_name: str) -> date:
    """
    Return the calendar date of `moment` as seen in the zone `tz_name`.

    Naive datetimes are taken as UTC.

    Args:
        moment: Wall-clock instant (e.g. invocation time)
        tz_name: IANA zone name (e.g. 'Asia/Almaty')

    Returns:
        Calendar date in that zone
    """
    aware = ensure_utc(moment)
    assert aware is not None
    return aware.astimezone(ZoneInfo(tz_name)).date()


def iso_weekday(day: date) -> int:
    """ISO day of week: 1=Monday .. 7=Sunday."""
    return day.isoweekday()


def format_ymd(day: date) -> str:
    """Format a date as YYYY-MM-DD (zero padded)."""
    return day.isoformat()


def parse_ymd(value: str) -> date:
    """Parse a YYYY-MM-DD string. Raises ValueError on any other shape."""
    if len(value) != 10:
        raise ValueError(f"expected YYYY-MM-DD, got {value!r}")
    return datetime.strptime(value, DATE_FORMAT).date()


def from_timestamp_ms_utc(timestamp_ms: int) -> datetime:
    """
    Create a UTC-aware datetime from a millisecond Unix timestamp.
    Common in JavaScript clients such as the admin SPA.
    """
    return datetime.fromtimestamp(timestamp_ms / 1000, tz=UTC)
