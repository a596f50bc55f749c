# src/datekit/formatting/__init__.py
"""
datekit.formatting
~~~~~~~~~~~~~~~~~~

Human-readable renderings of an instant. Month and weekday names come from
the host locale; ``relative_description`` needs the "now" to measure from.

Basic usage::

    from datetime import datetime
    from datekit.formatting import formatted_date, relative_description

    formatted_date(datetime(2025, 8, 8))                               # → "Aug 8, 2025"
    relative_description(datetime(2025, 8, 5), datetime(2025, 8, 8))   # → "3 days ago"

Public API
----------
month_name_full       Locale month name, e.g. "August".
month_name_short      Locale month abbreviation, e.g. "Aug".
weekday_full          Locale weekday name, e.g. "Friday".
weekday_short         Locale weekday abbreviation, e.g. "Fri".
formatted_date        Medium date in English field order, e.g. "Aug 8, 2025".
formatted_time        Short time, e.g. "2:05 PM" or "14:05".
relative_description  "3 days ago" / "in 2 weeks" relative to a given now.
"""

from __future__ import annotations

from datekit.formatting.formatting import (
    formatted_date,
    formatted_time,
    month_name_full,
    month_name_short,
    relative_description,
    weekday_full,
    weekday_short,
)

__all__ = [
    "formatted_date",
    "formatted_time",
    "month_name_full",
    "month_name_short",
    "relative_description",
    "weekday_full",
    "weekday_short",
]
