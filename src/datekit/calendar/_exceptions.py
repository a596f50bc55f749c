class CalendarError(Exception):
    """Base exception for all calendar-related errors."""


class DateArithmeticError(CalendarError, OverflowError):
    """Calendar arithmetic left the representable date range."""
