class NotableDateError(Exception):
    """Base error."""

class InvalidArgumentError(NotableDateError, ValueError):
    """Raised when an argument is out of range (e.g. year < 1) or missing."""

class NotSupportedError(NotableDateError, TypeError):
    """Raised when a calendar system cannot be handled by a calculator."""

class CalendarConversionError(NotableDateError, ValueError):
    """Raised when a calendar rejects a (year, month, day) triple or a date."""

class ResolutionError(NotableDateError):
    """Raised when a notable date definition cannot be resolved."""
