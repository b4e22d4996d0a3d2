"""
Utility functions for date/time formatting.

- MONTH_NAMES / MONTH_ABBREVIATIONS: fixed English month tables.
- month_name: full English month name for a date.
- format_date_time: `dd MMMM yyyy HH:mm` display string.

The tables are module constants instead of `calendar.month_name` so the
output never depends on the process locale.
"""

from datetime import date, datetime

MONTH_NAMES = (
    "January", "February", "March", "April", "May", "June",
    "July", "August", "September", "October", "November", "December",
)

MONTH_ABBREVIATIONS = tuple(name[:3] for name in MONTH_NAMES)


def month_name(value: date) -> str:
    """Return the full English name of the month of `value`."""
    return MONTH_NAMES[value.month - 1]


def format_date_time(value: datetime) -> str:
    """
    Format a date-time as `dd MMMM yyyy HH:mm` in English.

    Day, hour and minute are zero-padded to 2 digits, the year to 4 digits,
    and the hour uses the 24-hour clock. Seconds and tzinfo are ignored.

    Example:
      format_date_time(datetime(2000, 1, 1, 18, 0)) -> "01 January 2000 18:00"
    """
    return (
        f"{value.day:02d} {month_name(value)} {value.year:04d} "
        f"{value.hour:02d}:{value.minute:02d}"
    )
