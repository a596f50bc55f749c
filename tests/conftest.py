from datetime import datetime

import pytest

from datekit.calendar import CalendarContext

# Friday.
FIXED_NOW = datetime(2025, 8, 8, 14, 5)


@pytest.fixture
def fixed_now():
    return FIXED_NOW


@pytest.fixture
def ctx():
    """Weeks start on Monday, Sat/Sun weekend, clock frozen at FIXED_NOW."""
    return CalendarContext(first_weekday=0, weekend=(5, 6), clock=lambda: FIXED_NOW)


@pytest.fixture
def sunday_ctx(ctx):
    """Same clock, weeks start on Sunday."""
    return ctx.replace(first_weekday=6)
