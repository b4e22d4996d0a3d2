"""
Core utilities package.

This package provides the essentials shared by the helper: the DatePart
selector, the exception hierarchy, and logging setup.
"""

from .enums import DatePart
from .exceptions import (
    DateTimeHelperError,
    UnsupportedSelectorError,
    DateParseError,
    UnknownZoneError,
)
from .logger import setup_logger

__all__ = [
    'DatePart',
    'DateTimeHelperError',
    'UnsupportedSelectorError',
    'DateParseError',
    'UnknownZoneError',
    'setup_logger',
]
