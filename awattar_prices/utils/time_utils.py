"""
Time utility functions for the aWATTar wire format.
Converts between timezone-aware datetimes and epoch milliseconds and
computes calendar-day boundaries in UTC or in a market timezone.
"""

from datetime import date, datetime, time, timedelta
from typing import Optional, Tuple

import pytz

EPOCH = datetime(1970, 1, 1, tzinfo=pytz.utc)
_ONE_MILLISECOND = timedelta(milliseconds=1)


def ensure_utc(value: datetime) -> datetime:
    """
    Normalize a datetime to UTC.

    Args:
        value: Aware datetime in any timezone, or a naive datetime that is
            taken to already be UTC

    Returns:
        Timezone-aware datetime in UTC

    Raises:
        TypeError: If value is not a datetime
    """
    if not isinstance(value, datetime):
        raise TypeError(f"Expected datetime, got {type(value).__name__}")

    if value.tzinfo is None or value.tzinfo.utcoffset(value) is None:
        return pytz.utc.localize(value)
    return value.astimezone(pytz.utc)


def to_epoch_millis(value: datetime) -> int:
    """Convert a datetime to integer milliseconds since the Unix epoch."""
    return (ensure_utc(value) - EPOCH) // _ONE_MILLISECOND


def from_epoch_millis(millis: int) -> datetime:
    """Convert epoch milliseconds to an aware UTC datetime."""
    return EPOCH + timedelta(milliseconds=millis)


def utc_day_bounds(day: date) -> Tuple[datetime, datetime]:
    """
    Get the [start, end) bounds of a calendar day in UTC.

    Examples:
        - 2022-08-01 -> (2022-08-01 00:00Z, 2022-08-02 00:00Z)
    """
    start = pytz.utc.localize(datetime.combine(day, time.min))
    return start, start + timedelta(days=1)


def market_day_bounds(day: date, tz: pytz.BaseTzInfo) -> Tuple[datetime, datetime]:
    """
    Get the [start, end) bounds of a calendar day in a market timezone.

    Both bounds are local midnight, so the interval is 23 or 25 hours long on
    days with a daylight saving time switch.

    Args:
        day: Calendar date in the market's local time
        tz: pytz timezone of the market

    Returns:
        Tuple of aware datetimes converted to UTC
    """
    start = tz.localize(datetime.combine(day, time.min))
    end = tz.localize(datetime.combine(day + timedelta(days=1), time.min))
    return start.astimezone(pytz.utc), end.astimezone(pytz.utc)


def utc_today(now: Optional[datetime] = None) -> date:
    """Current date in UTC; pass ``now`` to pin the clock."""
    if now is None:
        now = datetime.now(pytz.utc)
    return ensure_utc(now).date()


def market_today(tz: pytz.BaseTzInfo, now: Optional[datetime] = None) -> date:
    """Current calendar date in a market timezone; pass ``now`` to pin the clock."""
    if now is None:
        now = datetime.now(pytz.utc)
    return ensure_utc(now).astimezone(tz).date()
