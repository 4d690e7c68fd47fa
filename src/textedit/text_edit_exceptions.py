"""Custom exceptions for text edit operations."""

from typing import Any


class TextEditError(Exception):
    """Base exception for text edit operations."""

    def __init__(self, message: str, error_details: dict[str, Any] | None = None):
        """
        Initialize the exception.

        Args:
            message: Error message
            error_details: Optional dictionary with detailed error information
        """
        super().__init__(message)
        self.error_details = error_details


class TextEditRangeError(TextEditError):
    """Raised when an edit refers to offsets that are not valid for the text."""


class TextEditOverlapError(TextEditError):
    """Raised when a set of edits would overlap when applied."""
