"""
Service-level exceptions.

This module contains exceptions that can be raised by the period tracker
when user input is rejected. The message of each exception is the text
shown to the user.
"""

class PeriodTrackerError(Exception):
    """Base exception for period tracker errors."""
    pass

class ValidationError(PeriodTrackerError):
    """Raised when a date is rejected before any state is changed."""
    pass

class MissingDateError(ValidationError):
    """Raised when no date was provided."""

    def __init__(self, message: str = "Please select a date"):
        super().__init__(message)

class InvalidDateError(ValidationError):
    """Raised when the date is not a valid YYYY-MM-DD calendar date."""

    def __init__(self, value: str = ""):
        self.value = value
        super().__init__(f"Invalid date: {value!r}. Use the YYYY-MM-DD format")

class FutureDateError(ValidationError):
    """Raised when the date is later than today."""

    def __init__(self, message: str = "Period date cannot be in the future"):
        super().__init__(message)

class DuplicateDateError(ValidationError):
    """Raised when the date is already recorded."""

    def __init__(self, message: str = "This date is already recorded"):
        super().__init__(message)

class StorageError(PeriodTrackerError):
    """Raised when a change could not be saved and was rolled back."""

    def __init__(self, message: str = "Could not save your period data. Please try again"):
        super().__init__(message)
