"""Time units attached to meters and timers."""

from enum import Enum


class TimeUnit(Enum):
    """Unit of a timer duration or a meter rate."""

    NANOSECONDS = ("ns", "nanosecond")
    MICROSECONDS = ("us", "microsecond")
    MILLISECONDS = ("ms", "millisecond")
    SECONDS = ("s", "second")
    MINUTES = ("min", "minute")
    HOURS = ("h", "hour")
    DAYS = ("d", "day")

    def short_string(self) -> str:
        """Return the abbreviated unit, e.g. ``"ms"``."""
        return self.value[0]

    def rate_string(self) -> str:
        """Return the unit as a rate denominator, e.g. ``"per second"``."""
        return f"per {self.value[1]}"
