"""
Core primitives: shape classification, coercion, null checks and equality.
"""
from primkit.core.type_system import (
    UNSET,
    Shape,
    UnsupportedTypeError,
    is_absent,
    is_composite,
    shape_of,
)
from primkit.core.coercion import (
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
    stringify,
    to_bool,
    unique,
)

__all__ = [
    "UNSET",
    "Shape",
    "UnsupportedTypeError",
    "is_absent",
    "is_composite",
    "shape_of",
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
    "stringify",
    "to_bool",
    "unique",
]
