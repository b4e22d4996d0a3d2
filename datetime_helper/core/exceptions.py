"""
Exception types raised by the helper.

Only the operations that treat bad input as a caller error raise these;
the parsing helpers return None instead.
"""

from typing import Any, Dict, Optional


class DateTimeHelperError(Exception):
    """
    Base exception for all helper errors.

    Attributes:
        message: Human-readable error message
        error_code: Machine-readable error code (the class name)
        details: The offending input and any context
    """

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None):
        super().__init__(message)
        self.message = message
        self.error_code = self.__class__.__name__
        self.details = details or {}

    def to_dict(self) -> Dict[str, Any]:
        """Convert exception to dictionary for logging or reporting."""
        return {
            "error": self.error_code,
            "message": self.message,
            "details": self.details,
        }


class UnsupportedSelectorError(DateTimeHelperError, ValueError):
    """Raised when a date part selector is not one of the DatePart members."""

    def __init__(self, selector: Any):
        super().__init__(
            f"Unsupported date part selector: {selector!r}",
            {"selector": selector},
        )


class DateParseError(DateTimeHelperError, ValueError):
    """Raised when a date-time string cannot be read as a zoned date-time."""

    def __init__(self, text: Any, reason: str):
        super().__init__(
            f"Cannot parse {text!r} as a zoned date-time: {reason}",
            {"text": text, "reason": reason},
        )


class UnknownZoneError(DateTimeHelperError, LookupError):
    """Raised when a timezone region identifier is not recognized."""

    def __init__(self, zone_name: Any):
        super().__init__(
            f"Unknown timezone region: {zone_name!r}",
            {"zone_name": zone_name},
        )
