"""
Number helpers and byte-size conversions.
"""
from primkit.units.bytes import ByteSize
from primkit.units.numbers import is_even, is_odd, ordinalize

__all__ = ["ByteSize", "is_even", "is_odd", "ordinalize"]
