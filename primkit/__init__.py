"""
primkit - small, pure helpers over primitives.

Strings, null checks and loose equality, dates, durations, numbers, byte
sizes and US state lookups.
"""
from primkit.core import (
    UNSET,
    Shape,
    UnsupportedTypeError,
    clone,
    is_blank,
    is_empty,
    is_equal,
    is_equal_ignore_case,
    is_not_blank,
    is_not_empty,
    is_not_equal,
    is_not_equal_ignore_case,
    is_not_null,
    is_not_null_or_whitespace,
    is_null,
    is_null_or_whitespace,
    null_string,
    reverse,
    safe_string,
    shape_of,
    stringify,
    to_bool,
    unique,
)
from primkit.transform import (
    TokenStream,
    alphanumeric,
    extract_numbers,
    extract_words,
    kebab,
    numeric,
    snake,
    titleize,
    to_lower,
    to_upper,
    trim,
)
from primkit.dates import (
    Duration,
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
from primkit.units import ByteSize, is_even, is_odd, ordinalize
from primkit.registry import (
    get_state_code,
    get_state_name,
    is_state_code,
    is_state_name,
)

__version__ = "0.1.0"

__all__ = [
    # core
    "UNSET",
    "Shape",
    "UnsupportedTypeError",
    "clone",
    "is_blank",
    "is_empty",
    "is_equal",
    "is_equal_ignore_case",
    "is_not_blank",
    "is_not_empty",
    "is_not_equal",
    "is_not_equal_ignore_case",
    "is_not_null",
    "is_not_null_or_whitespace",
    "is_null",
    "is_null_or_whitespace",
    "null_string",
    "reverse",
    "safe_string",
    "shape_of",
    "stringify",
    "to_bool",
    "unique",
    # transform
    "TokenStream",
    "alphanumeric",
    "extract_numbers",
    "extract_words",
    "kebab",
    "numeric",
    "snake",
    "titleize",
    "to_lower",
    "to_upper",
    "trim",
    # dates
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
    # units
    "ByteSize",
    "is_even",
    "is_odd",
    "ordinalize",
    # registry
    "get_state_code",
    "get_state_name",
    "is_state_code",
    "is_state_name",
]
