from __future__ import annotations

import logging
from datetime import datetime, timedelta
from functools import total_ordering
from typing import Any, Optional, Union

from datekit import formatting
from datekit.calendar import CalendarContext, DateArithmeticError, Instant

from . import arithmetic
from .keys import decode_key, encode_key, make_date

logger = logging.getLogger(__name__)

DateLike = Union["CalendarDate", Instant]


def _instant_of(value: DateLike) -> Instant:
    return value.instant if isinstance(value, CalendarDate) else value


@total_ordering
class CalendarDate:
    """
    An immutable instant bound to the calendar context it is read under.

    Components, names, boundaries and predicates are all derived from the
    instant and the context; "now"-relative questions ask the context clock
    at call time. Other dates may be passed as ``CalendarDate``, ``datetime``
    or ``date``.
    """

    __slots__ = ("_instant", "_context")

    # Smallest step back from an exclusive interval end into its last day.
    _RESOLUTION: timedelta = timedelta.resolution

    def __init__(self, instant: Instant, context: Optional[CalendarContext] = None) -> None:
        ctx = context or CalendarContext.default()
        self._context: CalendarContext = ctx
        self._instant: datetime = ctx.localize(instant)

    # ── construction ─────────────────────────────────────────────────────

    @classmethod
    def from_components(
        cls,
        day: int,
        month: int,
        year: int,
        context: Optional[CalendarContext] = None,
    ) -> CalendarDate:
        """Start of ``year-month-day``; out-of-range parts are clamped, never rejected."""
        ctx = context or CalendarContext.default()
        return cls(make_date(day, month, year, ctx.tzinfo), ctx)

    @classmethod
    def from_key(
        cls, key: str, context: Optional[CalendarContext] = None
    ) -> Optional[CalendarDate]:
        ctx = context or CalendarContext.default()
        instant = decode_key(key, ctx)
        return None if instant is None else cls(instant, ctx)

    @classmethod
    def now(cls, context: Optional[CalendarContext] = None) -> CalendarDate:
        ctx = context or CalendarContext.default()
        return cls(ctx.now(), ctx)

    @classmethod
    def today(cls, context: Optional[CalendarContext] = None) -> CalendarDate:
        return cls.now(context).start_of_day

    @classmethod
    def ago(
        cls,
        days: int = 0,
        weeks: int = 0,
        months: int = 0,
        years: int = 0,
        context: Optional[CalendarContext] = None,
    ) -> CalendarDate:
        ctx = context or CalendarContext.default()
        return cls(arithmetic.ago(days, weeks, months, years, ctx), ctx)

    @classmethod
    def from_now(
        cls,
        days: int = 0,
        weeks: int = 0,
        months: int = 0,
        years: int = 0,
        context: Optional[CalendarContext] = None,
    ) -> CalendarDate:
        ctx = context or CalendarContext.default()
        return cls(arithmetic.from_now(days, weeks, months, years, ctx), ctx)

    def _wrap(self, instant: datetime) -> CalendarDate:
        return CalendarDate(instant, self._context)

    def _shifted_now(self, **delta: int) -> Optional[datetime]:
        try:
            return self._context.add(self._context.now(), **delta)
        except DateArithmeticError:
            logger.debug("Reference %r from now is out of range.", delta)
            return None

    def _shifted(self, other: DateLike, **delta: int) -> Optional[datetime]:
        try:
            return self._context.add(_instant_of(other), **delta)
        except DateArithmeticError:
            logger.debug("Reference %r from %r is out of range.", delta, other)
            return None

    # ── components ───────────────────────────────────────────────────────

    @property
    def instant(self) -> datetime:
        return self._instant

    @property
    def context(self) -> CalendarContext:
        return self._context

    @property
    def year(self) -> int:
        return self._instant.year

    @property
    def month(self) -> int:
        return self._instant.month

    @property
    def day(self) -> int:
        return self._instant.day

    @property
    def hour(self) -> int:
        return self._instant.hour

    @property
    def minute(self) -> int:
        return self._instant.minute

    @property
    def second(self) -> int:
        return self._instant.second

    # ── names and formatting ─────────────────────────────────────────────

    @property
    def month_name_full(self) -> str:
        return formatting.month_name_full(self._instant)

    @property
    def month_name_short(self) -> str:
        return formatting.month_name_short(self._instant)

    @property
    def weekday_full(self) -> str:
        return formatting.weekday_full(self._instant)

    @property
    def weekday_short(self) -> str:
        return formatting.weekday_short(self._instant)

    @property
    def formatted_date(self) -> str:
        return formatting.formatted_date(self._instant)

    @property
    def formatted_time(self) -> str:
        return formatting.formatted_time(self._instant)

    @property
    def relative_description(self) -> str:
        return formatting.relative_description(self._instant, self._context.now())

    @property
    def as_string(self) -> str:
        """The ``YYYY.MM.DD`` date key."""
        return encode_key(self._instant, self._context)

    # ── day boundaries ───────────────────────────────────────────────────

    @property
    def start_of_day(self) -> CalendarDate:
        return self._wrap(self._context.start_of_day(self._instant))

    @property
    def end_of_day(self) -> CalendarDate:
        return self._wrap(self._context.end_of_day(self._instant))

    def is_same_day(self, other: DateLike) -> bool:
        return self._context.is_same_day(self._instant, _instant_of(other))

    def is_within_days(self, days: int, other: DateLike) -> bool:
        return arithmetic.is_within_days(days, self._instant, _instant_of(other), self._context)

    def is_within_one_day(self, other: DateLike) -> bool:
        return self.is_within_days(1, other)

    def is_within_seven_days(self, other: DateLike) -> bool:
        return self.is_within_days(7, other)

    def is_within_thirty_days(self, other: DateLike) -> bool:
        return self.is_within_days(30, other)

    # ── weekday / now-relative ───────────────────────────────────────────

    @property
    def is_weekend(self) -> bool:
        return self._context.is_weekend(self._instant)

    @property
    def is_weekday(self) -> bool:
        return not self.is_weekend

    @property
    def is_in_past(self) -> bool:
        return self._instant < self._context.now()

    @property
    def is_in_future(self) -> bool:
        return self._instant > self._context.now()

    @property
    def is_today(self) -> bool:
        return self._context.is_same_day(self._instant, self._context.now())

    @property
    def is_tomorrow(self) -> bool:
        tomorrow = self._shifted_now(days=1)
        return tomorrow is not None and self._context.is_same_day(self._instant, tomorrow)

    @property
    def is_yesterday(self) -> bool:
        yesterday = self._shifted_now(days=-1)
        return yesterday is not None and self._context.is_same_day(self._instant, yesterday)

    @property
    def is_this_week(self) -> bool:
        return self._context.is_same_week(self._instant, self._context.now())

    @property
    def is_last_week(self) -> bool:
        previous = self._shifted_now(days=-7)
        return previous is not None and self._context.is_same_week(self._instant, previous)

    @property
    def is_this_month(self) -> bool:
        return self._context.is_same_month(self._instant, self._context.now())

    @property
    def is_last_month(self) -> bool:
        previous = self._shifted_now(months=-1)
        return previous is not None and self._context.is_same_month(self._instant, previous)

    # ── week / month relations ───────────────────────────────────────────

    def is_same_week(self, other: DateLike) -> bool:
        return self._context.is_same_week(self._instant, _instant_of(other))

    def is_same_month(self, other: DateLike) -> bool:
        return self._context.is_same_month(self._instant, _instant_of(other))

    def is_previous_week(self, of: DateLike) -> bool:
        previous = self._shifted(of, days=-7)
        return previous is not None and self._context.is_same_week(self._instant, previous)

    def is_previous_month(self, of: DateLike) -> bool:
        previous = self._shifted(of, months=-1)
        return previous is not None and self._context.is_same_month(self._instant, previous)

    @property
    def is_first_day_of_week(self) -> bool:
        interval = self._context.week_interval(self._instant)
        return interval is not None and self._context.is_same_day(self._instant, interval[0])

    @property
    def is_last_day_of_week(self) -> bool:
        interval = self._context.week_interval(self._instant)
        return interval is not None and self._context.is_same_day(
            self._instant, interval[1] - self._RESOLUTION
        )

    @property
    def is_first_day_of_month(self) -> bool:
        interval = self._context.month_interval(self._instant)
        return interval is not None and self._context.is_same_day(self._instant, interval[0])

    @property
    def is_last_day_of_month(self) -> bool:
        interval = self._context.month_interval(self._instant)
        return interval is not None and self._context.is_same_day(
            self._instant, interval[1] - self._RESOLUTION
        )

    # ── comparison / repr ────────────────────────────────────────────────

    def __eq__(self, other: Any) -> bool:
        if not isinstance(other, CalendarDate):
            return NotImplemented
        return self._instant == other._instant

    def __lt__(self, other: Any) -> bool:
        if not isinstance(other, CalendarDate):
            return NotImplemented
        return self._instant < other._instant

    def __hash__(self) -> int:
        return hash(self._instant)

    def __repr__(self) -> str:
        return f"CalendarDate({self._instant.isoformat()}, key={self.as_string!r})"
