from __future__ import annotations

from datetime import datetime

from dateutil.relativedelta import relativedelta

# strftime patterns resolve names through the host locale.
MONTH_FULL = "%B"
MONTH_SHORT = "%b"
WEEKDAY_FULL = "%A"
WEEKDAY_SHORT = "%a"
MERIDIEM = "%p"

# Medium dates keep the English field order whatever the locale supplies
# for the month abbreviation.
MEDIUM_DATE = "{month} {day}, {year}"


def month_name_full(instant: datetime) -> str:
    return instant.strftime(MONTH_FULL)


def month_name_short(instant: datetime) -> str:
    return instant.strftime(MONTH_SHORT)


def weekday_full(instant: datetime) -> str:
    return instant.strftime(WEEKDAY_FULL)


def weekday_short(instant: datetime) -> str:
    return instant.strftime(WEEKDAY_SHORT)


def formatted_date(instant: datetime) -> str:
    """Medium style, e.g. ``Aug 8, 2025``: month, unpadded day, comma, year."""
    return MEDIUM_DATE.format(
        month=month_name_short(instant), day=instant.day, year=instant.year
    )


def formatted_time(instant: datetime) -> str:
    """
    Short style. Locales with an AM/PM marker get a 12-hour clock
    (``2:05 PM``); the rest get ``14:05``.
    """
    meridiem = instant.strftime(MERIDIEM)
    if not meridiem:
        return f"{instant.hour:02d}:{instant.minute:02d}"
    hour = instant.hour % 12 or 12
    return f"{hour}:{instant.minute:02d} {meridiem}"


def relative_description(instant: datetime, now: datetime) -> str:
    """
    ``3 days ago`` / ``in 2 weeks``: the largest non-zero unit between
    ``instant`` and ``now``, truncated. Equal instants read ``in 0 seconds``.
    """
    future = instant >= now
    delta = relativedelta(instant, now) if future else relativedelta(now, instant)
    weeks, days = divmod(delta.days, 7)
    units = (
        ("year", delta.years),
        ("month", delta.months),
        ("week", weeks),
        ("day", days),
        ("hour", delta.hours),
        ("minute", delta.minutes),
        ("second", delta.seconds),
    )
    unit, amount = next(((u, n) for u, n in units if n), ("second", 0))
    phrase = f"{amount} {unit}{'' if amount == 1 else 's'}"
    return f"in {phrase}" if future else f"{phrase} ago"
