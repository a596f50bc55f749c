from __future__ import annotations

import logging
from datetime import date, datetime
from typing import Optional, Union

import numpy as np

from datekit.calendar import CalendarContext, Instant

logger = logging.getLogger(__name__)

InstantLike = Union[Instant, np.datetime64, "np.ndarray"]
DaysLike = Union[int, "np.ndarray"]


# ── day differences ──────────────────────────────────────────────────────

def _as_days(values: InstantLike, ctx: CalendarContext) -> np.ndarray:
    arr = np.asarray(values)
    if np.issubdtype(arr.dtype, np.datetime64):
        return arr.astype("datetime64[D]")
    flat = [np.datetime64(_calendar_day(v, ctx), "D") for v in arr.ravel()]
    return np.array(flat, dtype="datetime64[D]").reshape(arr.shape)


def _calendar_day(value: Instant, ctx: CalendarContext) -> date:
    if isinstance(value, (datetime, date)):
        return ctx.localize(value).date()
    raise TypeError(f"Expected a date or datetime; got {type(value).__name__}.")


def days_between(
    start: InstantLike,
    end: InstantLike,
    context: Optional[CalendarContext] = None,
) -> DaysLike:
    """
    Whole calendar days from ``start`` to ``end`` (negative when ``end`` is
    earlier). Time of day is ignored. NumPy arrays are accepted everywhere a
    scalar is; a pair of scalars returns an ``int``.
    """
    ctx = context or CalendarContext.default()
    scalar = np.ndim(start) == 0 and np.ndim(end) == 0
    if scalar and not isinstance(start, np.datetime64) and not isinstance(end, np.datetime64):
        diff = ctx.day_difference(start, end)
        if diff is None:
            raise OverflowError(f"Day difference between {start!r} and {end!r} is uncomputable.")
        return diff

    s, e = np.broadcast_arrays(_as_days(start, ctx), _as_days(end, ctx))
    result = (e - s).astype(np.int64)
    return int(result.flat[0]) if scalar else result


def is_within_days(
    days: DaysLike,
    a: InstantLike,
    b: InstantLike,
    context: Optional[CalendarContext] = None,
) -> Union[bool, "np.ndarray"]:
    """
    True where ``a`` and ``b`` are at most ``days`` calendar days apart, in
    either direction. A difference that cannot be computed never qualifies.
    """
    try:
        diff = days_between(a, b, context)
    except OverflowError:
        logger.debug("Treating the distance between %r and %r as unbounded.", a, b)
        return False
    within = np.abs(diff) <= days
    return bool(within) if np.ndim(within) == 0 else within


# ── offsets from today ───────────────────────────────────────────────────

def _offset_from_today(
    sign: int,
    days: int,
    weeks: int,
    months: int,
    years: int,
    context: Optional[CalendarContext],
) -> datetime:
    ctx = context or CalendarContext.default()
    base = ctx.start_of_day(ctx.now())
    shifted = ctx.add(
        base,
        days=sign * (days + weeks * 7),
        months=sign * months,
        years=sign * years,
    )
    return ctx.start_of_day(shifted)


def ago(
    days: int = 0,
    weeks: int = 0,
    months: int = 0,
    years: int = 0,
    context: Optional[CalendarContext] = None,
) -> datetime:
    """
    Start of the day that lies the given distance before today. Days and
    weeks shift by a fixed number of days; months and years move by calendar
    units, keeping the day of month where the target month allows it.

    Raises DateArithmeticError if the result is not representable.
    """
    return _offset_from_today(-1, days, weeks, months, years, context)


def from_now(
    days: int = 0,
    weeks: int = 0,
    months: int = 0,
    years: int = 0,
    context: Optional[CalendarContext] = None,
) -> datetime:
    """Mirror of ``ago()``: the start of the day that far after today."""
    return _offset_from_today(1, days, weeks, months, years, context)
