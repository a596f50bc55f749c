from __future__ import annotations

import calendar as _calendar
import logging
from datetime import date, datetime, time, timedelta
from datetime import tzinfo as TZInfo
from functools import lru_cache
from typing import Any, Callable, Iterable, Optional, Tuple, Union

from dateutil.relativedelta import relativedelta

from ._exceptions import CalendarError, DateArithmeticError

logger = logging.getLogger(__name__)

Clock = Callable[[], datetime]
Instant = Union[datetime, date]
Interval = Tuple[datetime, datetime]


class CalendarContext:
    """
    Gregorian calendar rules used to decompose instants: first day of the
    week, weekend days, an optional zone for aware instants and the clock
    that answers "now".

    A context is read-only after construction; derive variants with
    ``replace()``.
    """

    _WEEK: timedelta = timedelta(days=7)

    def __init__(
        self,
        first_weekday: Optional[int] = None,
        weekend: Iterable[int] = (5, 6),
        tzinfo: Optional[TZInfo] = None,
        clock: Optional[Clock] = None,
    ) -> None:
        if first_weekday is None:
            first_weekday = _calendar.firstweekday()
        if (
            isinstance(first_weekday, bool)
            or not isinstance(first_weekday, int)
            or not 0 <= first_weekday <= 6
        ):
            raise CalendarError(
                f"first_weekday must be in 0..6 (Monday..Sunday); got {first_weekday!r}."
            )

        weekend_days = frozenset(weekend)
        for day in weekend_days:
            if isinstance(day, bool) or not isinstance(day, int) or not 0 <= day <= 6:
                raise CalendarError(f"Weekend days must be in 0..6; got {day!r}.")

        if clock is not None and not callable(clock):
            raise CalendarError(f"clock must be callable; got {clock!r}.")

        self._first_weekday: int = first_weekday
        self._weekend: frozenset[int] = weekend_days
        self._tzinfo: Optional[TZInfo] = tzinfo
        self._clock: Optional[Clock] = clock

    @classmethod
    def default(cls) -> CalendarContext:
        """The host calendar: ``calendar.firstweekday()``, Sat/Sun weekend, wall clock."""
        return _host_context()

    def replace(self, **changes: Any) -> CalendarContext:
        params: dict[str, Any] = {
            "first_weekday": self._first_weekday,
            "weekend": self._weekend,
            "tzinfo": self._tzinfo,
            "clock": self._clock,
        }
        unknown = set(changes) - set(params)
        if unknown:
            raise CalendarError(f"Unknown context settings: {sorted(unknown)}.")
        params.update(changes)
        return CalendarContext(**params)

    # ── clock / normalisation ────────────────────────────────────────────

    def now(self) -> datetime:
        if self._clock is not None:
            return self.localize(self._clock())
        return datetime.now(self._tzinfo)

    def localize(self, instant: Instant) -> datetime:
        """
        Promote dates to midnight and place instants in the context zone:
        naive ones are read as wall time there, aware ones are converted.
        """
        if not isinstance(instant, datetime):
            instant = datetime.combine(instant, time.min)
        if self._tzinfo is None:
            return instant
        if instant.tzinfo is None:
            return instant.replace(tzinfo=self._tzinfo)
        try:
            return instant.astimezone(self._tzinfo)
        except OverflowError as exc:
            raise DateArithmeticError(
                f"{instant!r} cannot be expressed in {self._tzinfo!r}."
            ) from exc

    def components(self, instant: Instant) -> Tuple[int, int, int, int, int, int]:
        dt = self.localize(instant)
        return dt.year, dt.month, dt.day, dt.hour, dt.minute, dt.second

    # ── day boundaries ───────────────────────────────────────────────────

    def start_of_day(self, instant: Instant) -> datetime:
        return self.localize(instant).replace(hour=0, minute=0, second=0, microsecond=0)

    def end_of_day(self, instant: Instant) -> datetime:
        dt = self.localize(instant)
        try:
            return dt.replace(hour=23, minute=59, second=59, microsecond=0)
        except ValueError:
            logger.debug("Cannot build end of day for %r; keeping the instant.", dt)
            return dt

    def is_same_day(self, a: Instant, b: Instant) -> bool:
        return self.localize(a).date() == self.localize(b).date()

    def day_difference(self, start: Instant, end: Instant) -> Optional[int]:
        """Whole calendar days from ``start`` to ``end``; None if uncomputable."""
        try:
            return (self.localize(end).date() - self.localize(start).date()).days
        except OverflowError:
            logger.debug("Day difference between %r and %r is uncomputable.", start, end)
            return None

    def is_weekend(self, instant: Instant) -> bool:
        return self.localize(instant).weekday() in self._weekend

    # ── arithmetic ───────────────────────────────────────────────────────

    def add(
        self,
        instant: Instant,
        days: int = 0,
        months: int = 0,
        years: int = 0,
    ) -> datetime:
        """
        Calendar addition: years and months first (day-of-month clamped to
        the target month), then days.
        """
        dt = self.localize(instant)
        try:
            return dt + relativedelta(years=years, months=months, days=days)
        except (OverflowError, ValueError) as exc:
            raise DateArithmeticError(
                f"Adding years={years}, months={months}, days={days} to {dt!r} "
                "leaves the representable range."
            ) from exc

    # ── week / month units ───────────────────────────────────────────────

    def week_key(self, instant: Instant) -> int:
        """Proleptic ordinal of the first day of the week containing ``instant``."""
        dt = self.localize(instant)
        return dt.toordinal() - (dt.weekday() - self._first_weekday) % 7

    def month_key(self, instant: Instant) -> Tuple[int, int]:
        dt = self.localize(instant)
        return dt.year, dt.month

    def is_same_week(self, a: Instant, b: Instant) -> bool:
        return self.week_key(a) == self.week_key(b)

    def is_same_month(self, a: Instant, b: Instant) -> bool:
        return self.month_key(a) == self.month_key(b)

    def week_interval(self, instant: Instant) -> Optional[Interval]:
        """Half-open [start, end) of the week containing ``instant``, or None."""
        sod = self.start_of_day(instant)
        try:
            start = datetime.combine(
                date.fromordinal(self.week_key(sod)), time.min, tzinfo=sod.tzinfo
            )
            return start, start + self._WEEK
        except (OverflowError, ValueError):
            logger.debug("No week interval for %r.", instant)
            return None

    def month_interval(self, instant: Instant) -> Optional[Interval]:
        """Half-open [start, end) of the month containing ``instant``, or None."""
        start = self.start_of_day(instant).replace(day=1)
        try:
            return start, start + relativedelta(months=1)
        except (OverflowError, ValueError):
            logger.debug("No month interval for %r.", instant)
            return None

    # ── properties / repr ────────────────────────────────────────────────

    @property
    def first_weekday(self) -> int:
        return self._first_weekday

    @property
    def weekend(self) -> frozenset[int]:
        return self._weekend

    @property
    def tzinfo(self) -> Optional[TZInfo]:
        return self._tzinfo

    @property
    def clock(self) -> Optional[Clock]:
        return self._clock

    def __repr__(self) -> str:
        return (
            f"CalendarContext(first_weekday={self._first_weekday}, "
            f"weekend={sorted(self._weekend)}, "
            f"tzinfo={self._tzinfo!r}, "
            f"clock={'wall' if self._clock is None else 'injected'})"
        )


@lru_cache(maxsize=1)
def _host_context() -> CalendarContext:
    return CalendarContext()
