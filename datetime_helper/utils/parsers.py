"""
Fixed-format date parsers.

Both parsers follow the empty-result idiom: any malformed input returns
None and the reason is logged at DEBUG. They never raise.

- parse_basic_iso_date: `YYYYMMDD`, strict calendar validation.
- parse_day_month_year: `d MMM yyyy` with English abbreviations; a day past
  the end of the month (29-31) is moved back to the month's last day.
"""

import calendar
import logging
import re
from datetime import date
from typing import Optional

from .formatters import MONTH_ABBREVIATIONS

logger = logging.getLogger(__name__)

MAX_MONTH = 12
MAX_DAY_IN_MONTH = 31

# Character slices holding the field checked before full parsing
MONTH_FIELD = slice(4, 6)
DAY_FIELD = slice(0, 2)

BASIC_ISO_DATE_LENGTH = 8

_BASIC_ISO_DATE_RE = re.compile(r"(\d{4})(\d{2})(\d{2})", re.ASCII)
_DAY_MONTH_YEAR_RE = re.compile(r"(\d{1,2}) ([A-Za-z]{3}) (\d{4})", re.ASCII)


def _read_field(text: object, field: slice, minimum_length: int) -> Optional[int]:
    """Read the numeric field at `field`, or None if the text cannot hold it."""
    if not isinstance(text, str):
        logger.debug(f"Expected a string, got {type(text).__name__}")
        return None
    if len(text) < minimum_length:
        logger.debug(f"Input '{text}' is too short: need at least {minimum_length} characters")
        return None
    raw = text[field].strip()
    if not (raw.isascii() and raw.isdigit()):
        logger.debug(f"Field '{text[field]}' of '{text}' is not numeric")
        return None
    return int(raw)


def parse_basic_iso_date(text: str) -> Optional[date]:
    """
    Parse a basic ISO calendar date (`YYYYMMDD`).

    The month field is checked first; a month above 12 short-circuits to
    None. The whole string must then be exactly 8 ASCII digits forming a
    valid date (20200230 is rejected, not clamped).
    """
    month = _read_field(text, MONTH_FIELD, MONTH_FIELD.stop)
    if month is None:
        return None
    if month > MAX_MONTH:
        logger.debug(f"Month {month} in '{text}' exceeds {MAX_MONTH}")
        return None

    match = _BASIC_ISO_DATE_RE.fullmatch(text)
    if match is None:
        logger.debug(f"'{text}' is not a {BASIC_ISO_DATE_LENGTH}-digit basic ISO date")
        return None
    year, month, day = (int(group) for group in match.groups())
    try:
        return date(year, month, day)
    except ValueError as e:
        logger.debug(f"Failed to build date from '{text}': {e}")
        return None


def parse_day_month_year(text: str) -> Optional[date]:
    """
    Parse `d MMM yyyy` text such as "06 Sep 2019" or "6 Sep 2019".

    The day field (first two characters, surrounding whitespace ignored) is
    checked first; a day above 31 short-circuits to None. Month
    abbreviations are English and case-sensitive.
    """
    day = _read_field(text, DAY_FIELD, 1)
    if day is None:
        return None
    if day > MAX_DAY_IN_MONTH:
        logger.debug(f"Day {day} in '{text}' exceeds {MAX_DAY_IN_MONTH}")
        return None

    match = _DAY_MONTH_YEAR_RE.fullmatch(text)
    if match is None:
        logger.debug(f"'{text}' does not match 'd MMM yyyy'")
        return None
    day_text, month_text, year_text = match.groups()
    if month_text not in MONTH_ABBREVIATIONS:
        logger.debug(f"Unknown month abbreviation '{month_text}' in '{text}'")
        return None

    year = int(year_text)
    month = MONTH_ABBREVIATIONS.index(month_text) + 1
    day = int(day_text)
    if day < 1 or year < 1:
        logger.debug(f"Day or year out of range in '{text}'")
        return None
    # Day 29-31 past the end of a shorter month resolves to its last day
    day = min(day, calendar.monthrange(year, month)[1])
    return date(year, month, day)
