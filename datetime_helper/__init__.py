"""
Date/time helper library.

Small, independent operations over the standard datetime types and pytz
zone rules, exposed through DateTimeHelper.
"""

from .core import (
    DatePart,
    DateTimeHelperError,
    UnsupportedSelectorError,
    DateParseError,
    UnknownZoneError,
    setup_logger,
)
from .services import DateTimeHelper, LOCAL_OFFSET

__version__ = "1.0.0"

__all__ = [
    'DateTimeHelper',
    'DatePart',
    'LOCAL_OFFSET',
    'DateTimeHelperError',
    'UnsupportedSelectorError',
    'DateParseError',
    'UnknownZoneError',
    'setup_logger',
]
