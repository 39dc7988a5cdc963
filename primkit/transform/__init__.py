"""
Transform module for text case and format conversion.
"""
from primkit.transform.text import (
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

__all__ = [
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
]
