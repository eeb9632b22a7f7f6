"""
Exceptions raised by the date helpers.

Every validation failure is reported synchronously to the caller that passed
the bad value. Nothing here is retried or corrected; callers decide what to do.
"""


class DateUtilsError(ValueError):
    """
    Base class for all date-helper validation errors.

    Subclasses ValueError so callers that already guard against bad input with
    `except ValueError` keep working.
    """
    pass


class InvalidDateError(DateUtilsError):
    """Raised when a value is not a usable Instant (not a datetime, or NaT)."""

    def __init__(self, message: str = "Invalid date provided"):
        super().__init__(message)


class InvalidAmountError(DateUtilsError):
    """Raised when an arithmetic amount is not a finite real number."""

    def __init__(self, message: str = "Invalid amount provided"):
        super().__init__(message)


class InvalidRangeError(DateUtilsError):
    """Raised when a range's lower bound is chronologically after its upper bound."""

    def __init__(self, message: str = "Invalid range: from date must be before to date"):
        super().__init__(message)
