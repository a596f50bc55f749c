# src/datekit/__init__.py
"""
datekit
~~~~~~~

Calendar conveniences for ``datetime``: component accessors, month and
weekday names, day/week/month boundary predicates, "N units ago / from now"
arithmetic and the ``YYYY.MM.DD`` date key.

Basic usage::

    from datekit import CalendarDate

    d = CalendarDate.from_key("2025.08.01")
    d.is_previous_month(of=CalendarDate.from_key("2025.09.15"))   # → True

Subpackages
-----------
datekit.calendar    Calendar context, clock and exceptions.
datekit.dates       CalendarDate, date keys and arithmetic.
datekit.formatting  Names, medium dates, short times, relative descriptions.
"""

from __future__ import annotations

import logging

from datekit.calendar import CalendarContext, CalendarError, DateArithmeticError
from datekit.dates import CalendarDate, ago, decode_key, encode_key, from_now, make_date

logging.getLogger(__name__).addHandler(logging.NullHandler())

__version__ = "0.1.0"

__all__ = [
    "CalendarContext",
    "CalendarDate",
    "CalendarError",
    "DateArithmeticError",
    "ago",
    "decode_key",
    "encode_key",
    "from_now",
    "make_date",
]
