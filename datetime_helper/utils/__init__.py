"""
Utility functions package.

Exposes English month tables, date-time formatting, fixed-format date
parsing, and pytz zone resolution.
"""

from .formatters import MONTH_NAMES, MONTH_ABBREVIATIONS, format_date_time, month_name
from .parsers import parse_basic_iso_date, parse_day_month_year
from .zones import offset_at, parse_zoned_date_time, resolve_zone

__all__ = [
    'MONTH_NAMES',
    'MONTH_ABBREVIATIONS',
    'format_date_time',
    'month_name',
    'parse_basic_iso_date',
    'parse_day_month_year',
    'offset_at',
    'parse_zoned_date_time',
    'resolve_zone',
]
