from __future__ import annotations

import logging
import re
from datetime import MAXYEAR, MINYEAR, datetime
from datetime import tzinfo as TZInfo
from typing import Optional

from datekit.calendar import CalendarContext, Instant

logger = logging.getLogger(__name__)

_DAYS_IN_MONTH = (31, 28, 31, 30, 31, 30, 31, 31, 30, 31, 30, 31)
_KEY_PART = re.compile(r"[+-]?\d{1,18}")


def is_leap_year(year: int) -> bool:
    if year % 400 == 0:
        return True
    if year % 100 == 0:
        return False
    return year % 4 == 0


def days_in_month(year: int, month: int) -> int:
    if month == 2 and is_leap_year(year):
        return 29
    return _DAYS_IN_MONTH[month - 1]


def _clamp(value: int, lo: int, hi: int) -> int:
    return min(max(value, lo), hi)


def make_date(
    day: int, month: int, year: int, tzinfo: Optional[TZInfo] = None
) -> datetime:
    """
    Midnight of ``year-month-day``, clamping every component into validity
    rather than failing: month to 1..12, day to the length of that month
    (leap years included), year to the range ``datetime`` can represent.
    """
    safe_year = _clamp(year, MINYEAR, MAXYEAR)
    safe_month = _clamp(month, 1, 12)
    safe_day = _clamp(day, 1, days_in_month(safe_year, safe_month))
    return datetime(safe_year, safe_month, safe_day, tzinfo=tzinfo)


def encode_key(instant: Instant, context: Optional[CalendarContext] = None) -> str:
    """``YYYY.MM.DD`` with month and day zero-padded; time of day is dropped."""
    ctx = context or CalendarContext.default()
    year, month, day = ctx.components(instant)[:3]
    return f"{year}.{month:02d}.{day:02d}"


def decode_key(key: str, context: Optional[CalendarContext] = None) -> Optional[datetime]:
    """
    Start of day for a ``year.month.day`` key, or None when the key does not
    have exactly three integer parts. Out-of-range parts are clamped.
    """
    parts = key.split(".")
    if len(parts) != 3 or not all(_KEY_PART.fullmatch(p) for p in parts):
        logger.debug("Rejected date key %r.", key)
        return None
    year, month, day = (int(p) for p in parts)
    tzinfo = context.tzinfo if context is not None else None
    return make_date(day, month, year, tzinfo)
