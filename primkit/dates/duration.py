"""
Durations expressed in milliseconds.

Makes the intent behind raw millisecond numbers explicit:

    cache.set(key, value, ttl_ms=Duration.minutes(5))
"""
from typing import Union

Number = Union[int, float]

MS_PER_SECOND = 1000
MS_PER_MINUTE = 60 * MS_PER_SECOND
MS_PER_HOUR = 60 * MS_PER_MINUTE
MS_PER_DAY = 24 * MS_PER_HOUR


class Duration:
    """Converters from common time units to milliseconds."""

    @staticmethod
    def milliseconds(milliseconds: Number) -> Number:
        """Returns what was given."""
        return milliseconds

    @staticmethod
    def seconds(seconds: Number) -> Number:
        return seconds * MS_PER_SECOND

    @staticmethod
    def minutes(minutes: Number) -> Number:
        return minutes * MS_PER_MINUTE

    @staticmethod
    def hours(hours: Number) -> Number:
        return hours * MS_PER_HOUR

    @staticmethod
    def days(days: Number) -> Number:
        return days * MS_PER_DAY
