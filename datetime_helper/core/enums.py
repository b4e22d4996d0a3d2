"""Enumerations shared across the helper."""

from enum import Enum


class DatePart(str, Enum):
    """Granularity of "today" reported by DateTimeHelper.today_date."""

    FULL = "FULL"
    YEAR = "YEAR"
    MONTH = "MONTH"
    DAY = "DAY"
