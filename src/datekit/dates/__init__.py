# src/datekit/dates/__init__.py
"""
datekit.dates
~~~~~~~~~~~~~

Calendar-aware accessors, predicates and arithmetic on top of ``datetime``.

Basic usage::

    from datekit.dates import CalendarDate

    d = CalendarDate.from_components(day=31, month=2, year=2023)   # clamped
    d.as_string                                                    # → "2023.02.28"
    d.is_last_day_of_month                                         # → True
    CalendarDate.from_key("2024.02.30")                            # → 2024-02-29
    CalendarDate.ago(weeks=1)                                      # start of day, 7 days back

The plain functions work on ``datetime`` values directly, and the day
arithmetic accepts NumPy arrays everywhere a scalar is::

    import numpy as np
    from datekit.dates import days_between

    starts = np.array(["2025-08-01", "2025-08-05"], dtype="datetime64[D]")
    days_between(starts, np.datetime64("2025-08-08"))              # → array([7, 3])

Public API
----------
CalendarDate     Immutable instant bound to a calendar context.
make_date        Clamped construction from day, month and year.
encode_key       ``YYYY.MM.DD`` key of an instant.
decode_key       Start of day from a key, or None.
days_between     Whole calendar days between instants.
is_within_days   Whether two instants are at most N calendar days apart.
ago / from_now   Start of the day N days/weeks/months/years from today.
"""

from __future__ import annotations

from datekit.dates.arithmetic import ago, days_between, from_now, is_within_days
from datekit.dates.dates import CalendarDate
from datekit.dates.keys import (
    days_in_month,
    decode_key,
    encode_key,
    is_leap_year,
    make_date,
)

__all__ = [
    "CalendarDate",
    "ago",
    "days_between",
    "days_in_month",
    "decode_key",
    "encode_key",
    "from_now",
    "is_leap_year",
    "is_within_days",
    "make_date",
]
