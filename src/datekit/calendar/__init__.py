# src/datekit/calendar/__init__.py
"""
datekit.calendar
~~~~~~~~~~~~~~~~

The calendar context every date operation is evaluated under: first day of
the week, weekend days, an optional zone for aware instants, and the clock
that answers "now".

Basic usage::

    from datetime import datetime
    from datekit.calendar import CalendarContext

    ctx = CalendarContext(first_weekday=6)              # weeks start on Sunday
    ctx.is_weekend(datetime(2025, 8, 9))                # → True
    ctx.week_interval(datetime(2025, 8, 8))             # → (Aug 3, Aug 10)

A fixed clock makes "now"-relative questions deterministic::

    frozen = ctx.replace(clock=lambda: datetime(2025, 8, 8, 14, 5))
    frozen.now()                                        # → 2025-08-08 14:05

Public API
----------
CalendarContext      The calendar rules and clock.
CalendarError        Base exception for all calendar-related errors.
DateArithmeticError  Calendar arithmetic left the representable range.
"""

from __future__ import annotations

from datekit.calendar._exceptions import CalendarError, DateArithmeticError
from datekit.calendar.calendar import CalendarContext, Clock, Instant

__all__ = [
    "CalendarContext",
    "CalendarError",
    "Clock",
    "DateArithmeticError",
    "Instant",
]
