"""
Timezone helpers built on pytz zone rules.

- parse_zoned_date_time: ISO-8601 date-time with a mandatory offset and an
  optional `[Region/City]` suffix.
- resolve_zone: region identifier -> pytz timezone.
- offset_at: UTC offset a zone assigns to a naive local date-time.
"""

import logging
import re
from datetime import datetime, timedelta, tzinfo

import pytz

from datetime_helper.core.exceptions import DateParseError, UnknownZoneError

logger = logging.getLogger(__name__)

_REGION_SUFFIX_RE = re.compile(r"^(?P<stamp>[^\[\]]+)\[(?P<region>[^\[\]]+)\]$")


def resolve_zone(zone_name: str) -> tzinfo:
    """
    Look up a region identifier such as "Europe/Kiev".

    Raises:
        UnknownZoneError: If pytz does not know the identifier
    """
    if not isinstance(zone_name, str) or not zone_name.strip():
        raise UnknownZoneError(zone_name)
    try:
        return pytz.timezone(zone_name.strip())
    except pytz.UnknownTimeZoneError as e:
        raise UnknownZoneError(zone_name) from e


def parse_zoned_date_time(text: str) -> datetime:
    """
    Parse an ISO-8601 date-time carrying an offset into an aware datetime.

    Accepts a 'Z' suffix for UTC and an optional bracketed region suffix,
    e.g. "2019-09-06T13:17:00+03:00[Europe/Kiev]". The region must be a
    known identifier but the written offset fixes the instant. The suffix
    is an extension over plain ISO-8601 instants: it is validated and then
    dropped, never used for the conversion.

    Fractional seconds of any length are accepted (Python 3.11+).

    Raises:
        DateParseError: If the text is not a date-time with an offset
    """
    if not isinstance(text, str):
        raise DateParseError(text, "expected a string")

    s = text.strip()
    suffix = _REGION_SUFFIX_RE.match(s)
    if suffix:
        s = suffix.group("stamp")
        try:
            resolve_zone(suffix.group("region"))
        except UnknownZoneError as e:
            raise DateParseError(text, f"unknown region '{suffix.group('region')}'") from e

    # Normalize 'Z' (Zulu/UTC) suffix to '+00:00' for fromisoformat compatibility
    if s.endswith("Z"):
        s = s[:-1] + "+00:00"

    # A bare date would parse as naive midnight
    if "T" not in s:
        raise DateParseError(text, "missing time component")
    try:
        parsed = datetime.fromisoformat(s)
    except ValueError as e:
        raise DateParseError(text, str(e)) from e

    if parsed.tzinfo is None:
        raise DateParseError(text, "missing UTC offset")
    return parsed


def offset_at(zone: tzinfo, local: datetime) -> timedelta:
    """
    Return the UTC offset `zone` assigns to the naive local date-time.

    Local times inside a DST overlap take the earlier offset, which is the
    one in force before the transition. Local times inside a DST gap also
    take the offset in force before the transition.
    """
    local = local.replace(tzinfo=None)
    try:
        return zone.localize(local, is_dst=None).utcoffset()
    except pytz.AmbiguousTimeError:
        logger.debug(f"{local} is ambiguous in {zone}, using the earlier offset")
        return zone.localize(local, is_dst=True).utcoffset()
    except pytz.NonExistentTimeError:
        logger.debug(f"{local} falls in a gap in {zone}, using the offset before the transition")
        return zone.localize(local, is_dst=False).utcoffset()
