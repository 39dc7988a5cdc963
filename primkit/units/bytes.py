"""
Byte-size conversions (binary units, powers of 1024).
"""
import math
from numbers import Real
from typing import Union

from primkit.core.type_system import UnsupportedTypeError

Number = Union[int, float]

KIBIBYTE = 1024
MEBIBYTE = KIBIBYTE ** 2
GIBIBYTE = KIBIBYTE ** 3
TEBIBYTE = KIBIBYTE ** 4


def _to_bytes(amount: Number, multiplier: int, func_name: str) -> int:
    """
    Convert an amount of a unit to a whole number of bytes.

    Fractional results are rounded up: a partial byte still occupies one.

    Raises:
        UnsupportedTypeError: If amount is not a real number
        ValueError: If amount is negative
    """
    if isinstance(amount, bool) or not isinstance(amount, Real):
        raise UnsupportedTypeError(func_name, amount, "a number")
    if amount < 0:
        raise ValueError(f"{func_name}() expected a non-negative amount, got {amount}")

    return math.ceil(amount * multiplier)


class ByteSize:
    """
    Converters from byte units to a byte count.

    Examples:
        ByteSize.kilobytes(0.5) → 512
        ByteSize.megabytes(1) → 1048576
        ByteSize.gigabytes(0.001) → 1073742
    """

    @staticmethod
    def bytes(amount: Number) -> int:
        return _to_bytes(amount, 1, "bytes")

    @staticmethod
    def kilobytes(amount: Number) -> int:
        return _to_bytes(amount, KIBIBYTE, "kilobytes")

    @staticmethod
    def megabytes(amount: Number) -> int:
        return _to_bytes(amount, MEBIBYTE, "megabytes")

    @staticmethod
    def gigabytes(amount: Number) -> int:
        return _to_bytes(amount, GIBIBYTE, "gigabytes")

    @staticmethod
    def terabytes(amount: Number) -> int:
        return _to_bytes(amount, TEBIBYTE, "terabytes")
