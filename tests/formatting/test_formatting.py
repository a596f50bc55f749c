"""
tests/formatting/test_formatting.py

Covers:
  - Month / weekday names follow the host locale tables
  - Medium date and short time shapes
  - Relative descriptions: unit selection, direction, pluralisation
"""

import calendar
import re
from datetime import datetime, timedelta, timezone

import pytest

from datekit.formatting import (
    formatted_date,
    formatted_time,
    month_name_full,
    month_name_short,
    relative_description,
    weekday_full,
    weekday_short,
)

NOW = datetime(2025, 8, 8, 14, 5)


# ── Names ─────────────────────────────────────────────────────────────────────

class TestNames:

    @pytest.mark.parametrize("month", range(1, 13))
    def test_month_names(self, month):
        d = datetime(2025, month, 1)
        assert month_name_full(d) == calendar.month_name[month]
        assert month_name_short(d) == calendar.month_abbr[month]

    def test_weekday_names_cover_week(self):
        days = [datetime(2025, 8, 4) + timedelta(days=i) for i in range(7)]
        assert [weekday_full(d) for d in days] == list(calendar.day_name)
        assert [weekday_short(d) for d in days] == list(calendar.day_abbr)

    def test_names_non_empty(self):
        for fn in (month_name_full, month_name_short, weekday_full, weekday_short):
            assert fn(NOW)


# ── Date and time styles ──────────────────────────────────────────────────────

class TestStyles:

    def test_medium_date(self):
        assert formatted_date(NOW) == f"{calendar.month_abbr[8]} 8, 2025"

    @pytest.mark.parametrize("month", range(1, 13))
    def test_medium_date_field_order(self, month):
        d = datetime(2031, month, 7)
        assert formatted_date(d) == f"{month_name_short(d)} 7, 2031"

    def test_medium_date_day_unpadded(self):
        assert re.fullmatch(r"\S+ 1, 1999", formatted_date(datetime(1999, 12, 1)))

    def test_short_time_afternoon(self):
        assert re.fullmatch(r"(2:05 \S+|14:05)", formatted_time(NOW))

    def test_short_time_midnight_and_noon(self):
        assert re.fullmatch(r"(12:05 \S+|00:05)", formatted_time(datetime(2025, 8, 8, 0, 5)))
        assert re.fullmatch(r"12:30( \S+)?", formatted_time(datetime(2025, 8, 8, 12, 30)))

    def test_short_time_drops_seconds(self):
        assert ":59" not in formatted_time(datetime(2025, 8, 8, 9, 5, 59))


# ── Relative descriptions ─────────────────────────────────────────────────────

class TestRelativeDescription:

    @pytest.mark.parametrize(
        "instant, expected",
        [
            (datetime(2025, 8, 5, 14, 5), "3 days ago"),
            (datetime(2025, 8, 22, 14, 5), "in 2 weeks"),
            (datetime(2025, 8, 18, 14, 5), "in 1 week"),
            (datetime(2025, 8, 9, 14, 5), "in 1 day"),
            (datetime(2024, 8, 8, 14, 5), "1 year ago"),
            (datetime(2022, 1, 1), "3 years ago"),
            (datetime(2025, 6, 8, 14, 5), "2 months ago"),
            (datetime(2025, 8, 8, 19, 5), "in 5 hours"),
            (datetime(2025, 8, 8, 14, 4), "1 minute ago"),
            (datetime(2025, 8, 8, 14, 5, 30), "in 30 seconds"),
        ],
    )
    def test_phrases(self, instant, expected):
        assert relative_description(instant, NOW) == expected

    def test_same_instant(self):
        assert relative_description(NOW, NOW) == "in 0 seconds"

    def test_largest_unit_truncates(self):
        # 1 month and 20 days back still reads as a month.
        assert relative_description(datetime(2025, 6, 18, 14, 5), NOW) == "1 month ago"

    def test_aware_instants(self):
        now = datetime(2025, 8, 8, 12, tzinfo=timezone.utc)
        then = datetime(2025, 8, 8, 12, tzinfo=timezone(timedelta(hours=2)))
        assert relative_description(then, now) == "2 hours ago"
