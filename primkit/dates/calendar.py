"""
Calendar arithmetic and weekday checks.

All helpers accept ``date``/``datetime`` objects or date strings. Strings are
parsed with dateutil and come back as ``datetime``. Inputs are never
mutated; results keep the type of the input.

Month and year arithmetic is calendar based and clamps to the end of the
target month: add_months(date(2025, 1, 31), 1) == date(2025, 2, 28).
"""
import math
from datetime import date, datetime, time, timedelta
from typing import Optional, Tuple, Union
from zoneinfo import ZoneInfo

from dateutil import parser as date_parser
from dateutil.relativedelta import relativedelta

from primkit.core.config import settings
from primkit.core.logging_config import setup_logger
from primkit.core.type_system import UnsupportedTypeError
from primkit.dates.duration import Duration

logger = setup_logger(__name__)

DateLike = Union[date, datetime, str]

SATURDAY = 5
SUNDAY = 6


def _as_date(value: DateLike, func_name: str) -> date:
    """
    Coerce a date-like value to a date or datetime.

    Raises:
        UnsupportedTypeError: If value is not a date, datetime or string
        ValueError: If a string cannot be parsed as a date
    """
    if isinstance(value, date):
        return value

    if isinstance(value, str):
        parsed = date_parser.parse(value)
        logger.debug(f"{func_name}: parsed {value!r} as {parsed.isoformat()}")
        return parsed

    raise UnsupportedTypeError(func_name, value, "a date, datetime or date string")


def _align(start: date, end: date) -> Tuple[date, date]:
    """Promote a plain date to midnight when compared against a datetime."""
    start_is_dt = isinstance(start, datetime)
    end_is_dt = isinstance(end, datetime)

    if start_is_dt and not end_is_dt:
        end = datetime.combine(end, time(), tzinfo=start.tzinfo)
    elif end_is_dt and not start_is_dt:
        start = datetime.combine(start, time(), tzinfo=end.tzinfo)

    return start, end


def _timezone() -> Optional[ZoneInfo]:
    if settings.TIMEZONE:
        return ZoneInfo(settings.TIMEZONE)
    return None


# ==================== Relative days ====================


def now() -> datetime:
    """
    Right now.

    Naive local time, or an aware datetime when PRIMKIT_TIMEZONE is set.
    """
    return datetime.now(_timezone())


def today() -> datetime:
    """Today's date at midnight."""
    return now().replace(hour=0, minute=0, second=0, microsecond=0)


def tomorrow() -> datetime:
    """Tomorrow's date at midnight."""
    return add_days(today(), 1)


def yesterday() -> datetime:
    """Yesterday's date at midnight."""
    return subtract_days(today(), 1)


# ==================== Arithmetic ====================


def add_days(value: DateLike, days: float) -> date:
    """Add the given amount of days to the date."""
    return _as_date(value, "add_days") + timedelta(days=days)


def subtract_days(value: DateLike, days: float) -> date:
    """Subtract the given amount of days from the date."""
    return add_days(value, -days)


def add_months(value: DateLike, months: int) -> date:
    """Add the given amount of months, clamping to the end of the month."""
    return _as_date(value, "add_months") + relativedelta(months=months)


def subtract_months(value: DateLike, months: int) -> date:
    """Subtract the given amount of months, clamping to the end of the month."""
    return add_months(value, -months)


def add_years(value: DateLike, years: int) -> date:
    """Add the given amount of years (Feb 29 becomes Feb 28 off leap years)."""
    return add_months(value, years * 12)


def subtract_years(value: DateLike, years: int) -> date:
    """Subtract the given amount of years."""
    return add_years(value, -years)


# ==================== Intervals ====================


def days_between(start: DateLike, end: DateLike) -> int:
    """
    Calculate the whole days between two dates.

    Partial days are floored before the sign is dropped, so the result is
    always positive.

    Examples:
        days_between(date(2025, 6, 12), date(2025, 8, 6)) → 55
        days_between(date(2025, 8, 6), date(2025, 8, 4)) → 2
    """
    start, end = _align(
        _as_date(start, "days_between"), _as_date(end, "days_between")
    )
    elapsed_ms = (end - start).total_seconds() * 1000
    return abs(math.floor(elapsed_ms / Duration.days(1)))


def months_between(start: DateLike, end: DateLike) -> int:
    """
    Calculate the calendar months between two dates.

    Only year and month take part; the day of the month is ignored.

    Examples:
        months_between(date(2025, 8, 4), date(2025, 9, 6)) → 1
        months_between(date(2025, 6, 12), date(2026, 7, 6)) → 13
    """
    start = _as_date(start, "months_between")
    end = _as_date(end, "months_between")

    years = end.year - start.year
    months = end.month - start.month

    return abs(years * 12 + months)


def years_between(start: DateLike, end: DateLike) -> int:
    """
    Calculate the full years between two dates, in either order.

    A year only counts once its anniversary has been reached.

    Examples:
        years_between(date(2007, 8, 1), date(2008, 7, 31)) → 0
        years_between(date(2007, 8, 1), date(2008, 8, 1)) → 1
    """
    earlier, later = _align(
        _as_date(start, "years_between"), _as_date(end, "years_between")
    )
    if earlier > later:
        earlier, later = later, earlier

    years = later.year - earlier.year
    if (later.month, later.day) < (earlier.month, earlier.day):
        years -= 1

    return years


# ==================== Days of the week ====================


def _weekday(value: DateLike, func_name: str) -> int:
    return _as_date(value, func_name).weekday()


def is_monday(value: DateLike) -> bool:
    return _weekday(value, "is_monday") == 0


def is_tuesday(value: DateLike) -> bool:
    return _weekday(value, "is_tuesday") == 1


def is_wednesday(value: DateLike) -> bool:
    return _weekday(value, "is_wednesday") == 2


def is_thursday(value: DateLike) -> bool:
    return _weekday(value, "is_thursday") == 3


def is_friday(value: DateLike) -> bool:
    return _weekday(value, "is_friday") == 4


def is_saturday(value: DateLike) -> bool:
    return _weekday(value, "is_saturday") == SATURDAY


def is_sunday(value: DateLike) -> bool:
    return _weekday(value, "is_sunday") == SUNDAY


def is_weekend(value: DateLike) -> bool:
    """Saturday or Sunday."""
    return _weekday(value, "is_weekend") in (SATURDAY, SUNDAY)


def is_weekday(value: DateLike) -> bool:
    """Monday through Friday."""
    return not is_weekend(value)
