"""
Custom exceptions for the learning progress tracker.
"""

from typing import Optional, Any, Dict


class TrackerException(Exception):
    """Base exception for all tracker errors; the message is shown to the user."""

    def __init__(self, message: str, error_code: Optional[str] = None, details: Optional[Dict[str, Any]] = None):
        super().__init__(message)
        self.message = message
        self.error_code = error_code
        self.details = details or {}


class ValidationError(TrackerException):
    """Raised when a credentials or points line has the wrong format."""
    pass


class ResourceNotFoundError(TrackerException):
    """Raised for an unknown student id or course name."""
    pass


class DuplicateEntityError(TrackerException):
    """Raised for a taken email, student id or course name."""
    pass


class ConfigurationError(TrackerException):
    """Raised when the settings file or flags cannot be loaded."""
    pass
