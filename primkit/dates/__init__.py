"""
Date arithmetic, intervals and durations.
"""
from primkit.dates.calendar import (
    add_days,
    add_months,
    add_years,
    days_between,
    is_friday,
    is_monday,
    is_saturday,
    is_sunday,
    is_thursday,
    is_tuesday,
    is_wednesday,
    is_weekday,
    is_weekend,
    months_between,
    now,
    subtract_days,
    subtract_months,
    subtract_years,
    today,
    tomorrow,
    years_between,
    yesterday,
)
from primkit.dates.duration import Duration

__all__ = [
    "Duration",
    "add_days",
    "add_months",
    "add_years",
    "days_between",
    "is_friday",
    "is_monday",
    "is_saturday",
    "is_sunday",
    "is_thursday",
    "is_tuesday",
    "is_wednesday",
    "is_weekday",
    "is_weekend",
    "months_between",
    "now",
    "subtract_days",
    "subtract_months",
    "subtract_years",
    "today",
    "tomorrow",
    "years_between",
    "yesterday",
]
