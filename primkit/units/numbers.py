"""
Integer parity and ordinal formatting.
"""
from numbers import Integral

from primkit.core.type_system import UnsupportedTypeError

_SUFFIXES = {1: "st", 2: "nd", 3: "rd"}


def _require_int(value, func_name: str) -> int:
    if isinstance(value, bool) or not isinstance(value, Integral):
        raise UnsupportedTypeError(func_name, value, "an integer")
    return int(value)


def is_even(num: int) -> bool:
    """
    Determine if the given integer is even.

    Examples:
        is_even(0) → True
        is_even(-2) → True
        is_even(5) → False
    """
    return _require_int(num, "is_even") % 2 == 0


def is_odd(num: int) -> bool:
    """Determine if the given integer is odd."""
    return not is_even(num)


def ordinalize(num: int) -> str:
    """
    Format an integer as an ordinal: "1st", "2nd", "3rd", "4th".

    11, 12 and 13 (and every n11-n13) take "th". Negative numbers keep
    their sign and use the suffix of their magnitude.

    Examples:
        ordinalize(1) → "1st"
        ordinalize(11) → "11th"
        ordinalize(21) → "21st"
        ordinalize(112) → "112th"
        ordinalize(-3) → "-3rd"
    """
    n = _require_int(num, "ordinalize")
    magnitude = abs(n)

    if 11 <= magnitude % 100 <= 13:
        suffix = "th"
    else:
        suffix = _SUFFIXES.get(magnitude % 10, "th")

    return f"{n}{suffix}"
