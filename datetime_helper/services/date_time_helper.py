"""
Date/time helper service.

This module provides DateTimeHelper, a stateless collection of small
operations over the standard datetime types: reporting today's date,
building and parsing dates, time-of-day arithmetic, comparing against
today, zone conversion, fixed offsets, and display formatting.
"""

import logging
from datetime import date, datetime, time, timedelta, timezone
from typing import Callable, Optional, Sequence

from datetime_helper.config.settings import Settings
from datetime_helper.core.enums import DatePart
from datetime_helper.core.exceptions import DateParseError, UnsupportedSelectorError
from datetime_helper.utils.formatters import format_date_time, month_name
from datetime_helper.utils.parsers import parse_basic_iso_date, parse_day_month_year
from datetime_helper.utils.zones import offset_at, parse_zoned_date_time, resolve_zone

logger = logging.getLogger(__name__)

# Fixed regional offset attached by offset_date_time
LOCAL_OFFSET = timezone(timedelta(hours=2))

SECONDS_PER_DAY = 24 * 60 * 60

Clock = Callable[[], date]


def system_today() -> date:
    """Today's date in Settings.SERVER_TZ, or host local time when unset."""
    if Settings.SERVER_TZ is not None:
        return datetime.now(Settings.SERVER_TZ).date()
    return date.today()


def _shift_time(value: time, seconds: int) -> time:
    """Move a time-of-day by `seconds`, wrapping at midnight."""
    current = value.hour * 3600 + value.minute * 60 + value.second
    total = (current + seconds) % SECONDS_PER_DAY
    hour, remainder = divmod(total, 3600)
    minute, second = divmod(remainder, 60)
    return value.replace(hour=hour, minute=minute, second=second)


class DateTimeHelper:
    """
    Stateless date/time helper.

    Every method is a pure function of its arguments, except today_date and
    before_or_after which read the clock once per call.

    Two error idioms are used:
    - get_date, parse_date, custom_parse_date return None on bad input.
    - today_date and get_date_in_specific_time_zone raise
      UnsupportedSelectorError, DateParseError or UnknownZoneError.

    Attributes:
        clock (Callable[[], date]): Source of today's date

    Example:
        >>> helper = DateTimeHelper()
        >>> helper.add_weeks(date(2020, 1, 1), 1)
        datetime.date(2020, 1, 8)
        >>> helper.format_date(datetime(2000, 1, 1, 18, 0))
        '01 January 2000 18:00'

    Note:
        - Instances hold no mutable state and are safe to share between threads
        - Month names are always English regardless of process locale
    """

    def __init__(self, clock: Optional[Clock] = None) -> None:
        """
        Initialize the helper.

        Args:
            clock: Zero-argument callable returning today's date.
                Defaults to system_today.
        """
        self.clock = clock or system_today

    def today_date(self, part: DatePart) -> str:
        """
        Return today's date, or one part of it, as a string.

        Args:
            part: Which granularity to report:
                FULL -> "YYYY-MM-DD", YEAR -> "2019",
                MONTH -> "SEPTEMBER", DAY -> "6"

        Returns:
            The requested part of today's date

        Raises:
            UnsupportedSelectorError: If `part` is not a DatePart
        """
        try:
            part = DatePart(part)
        except ValueError as e:
            raise UnsupportedSelectorError(part) from e

        today = self.clock()
        if part is DatePart.FULL:
            return today.isoformat()
        if part is DatePart.YEAR:
            return str(today.year)
        if part is DatePart.MONTH:
            return month_name(today).upper()
        return str(today.day)

    def get_date(self, components: Sequence[int]) -> Optional[date]:
        """
        Build a date from [year, month, day].

        Returns None when fewer than three components are given or they do
        not form a valid date. Extra components are ignored.
        """
        try:
            year, month, day = components[0], components[1], components[2]
            return date(year, month, day)
        except (IndexError, TypeError, ValueError, KeyError, OverflowError) as e:
            logger.debug(f"Cannot build date from {components!r}: {e}")
            return None

    def add_hours(self, value: time, hours: int) -> time:
        """Add signed hours to a time-of-day, wrapping at midnight."""
        return _shift_time(value, hours * 3600)

    def add_minutes(self, value: time, minutes: int) -> time:
        """Add signed minutes to a time-of-day, wrapping at midnight."""
        return _shift_time(value, minutes * 60)

    def add_seconds(self, value: time, seconds: int) -> time:
        """Add signed seconds to a time-of-day, wrapping at midnight."""
        return _shift_time(value, seconds)

    def add_weeks(self, value: date, weeks: int) -> date:
        return value + timedelta(weeks=weeks)

    def before_or_after(self, value: date) -> str:
        """
        Compare a date with today.

        Returns:
            "{value} is after {today}", "{value} is before {today}"
            or "{value} is today", dates rendered as ISO strings
        """
        today = self.clock()
        if value > today:
            return f"{value.isoformat()} is after {today.isoformat()}"
        if value < today:
            return f"{value.isoformat()} is before {today.isoformat()}"
        return f"{value.isoformat()} is today"

    def get_date_in_specific_time_zone(self, text: str, zone_name: str) -> datetime:
        """
        Return the local date-time observed in `zone_name` for an instant.

        The offset applied is the one `zone_name` assigns to the wall-clock
        reading written in `text`, so near a DST transition it can differ
        from the zone's offset at the instant itself.

        Args:
            text: ISO-8601 date-time with offset, e.g. "2019-09-06T10:17:00Z"
            zone_name: Region identifier, e.g. "Europe/Kiev"

        Returns:
            Naive datetime as seen in `zone_name`

        Raises:
            DateParseError: If `text` is not a date-time with an offset, or its
                instant lies outside the range datetime can represent
            UnknownZoneError: If `zone_name` is not a known region

        Example:
            >>> helper.get_date_in_specific_time_zone("2019-09-06T10:17:00Z", "Europe/Kiev")
            datetime.datetime(2019, 9, 6, 13, 17)
        """
        zoned = parse_zoned_date_time(text)
        zone = resolve_zone(zone_name)
        try:
            offset = offset_at(zone, zoned.replace(tzinfo=None))
            instant = zoned.astimezone(timezone.utc)
            return instant.astimezone(timezone(offset)).replace(tzinfo=None)
        except OverflowError as e:
            raise DateParseError(text, "instant out of supported range") from e

    def offset_date_time(self, value: datetime) -> datetime:
        """
        Attach the fixed +02:00 offset to a local date-time.

        Any tzinfo already on `value` is replaced, not converted.

        Example:
            >>> helper.offset_date_time(datetime(2019, 9, 6, 13, 17)).isoformat(timespec="minutes")
            '2019-09-06T13:17+02:00'
        """
        return value.replace(tzinfo=LOCAL_OFFSET)

    def parse_date(self, text: str) -> Optional[date]:
        """Parse `YYYYMMDD`; None when the month exceeds 12 or parsing fails."""
        return parse_basic_iso_date(text)

    def custom_parse_date(self, text: str) -> Optional[date]:
        """Parse `d MMM yyyy` (e.g. "06 Sep 2019"); None on failure."""
        return parse_day_month_year(text)

    def format_date(self, value: datetime) -> str:
        return format_date_time(value)
