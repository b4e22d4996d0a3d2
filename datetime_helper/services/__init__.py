"""
Services package.

This package provides the DateTimeHelper service, the public call
surface of the library.
"""

from .date_time_helper import DateTimeHelper, LOCAL_OFFSET, system_today

__all__ = [
    'DateTimeHelper',
    'LOCAL_OFFSET',
    'system_today',
]
