"""Custom exceptions for lint rules."""

from typing import Any


class MarkdownRuleError(Exception):
    """Base exception for lint rule failures."""

    def __init__(self, message: str, error_details: dict[str, Any] | None = None):
        """
        Initialize the exception.

        Args:
            message: Error message
            error_details: Optional dictionary with detailed error information
        """
        super().__init__(message)
        self.error_details = error_details


class MissingFootnoteError(MarkdownRuleError):
    """Raised when a footnote definition has no reference left to bind to."""

    def __init__(self, footnote: str):
        """
        Initialize the exception.

        Args:
            footnote: The text of the footnote definition that could not be placed
        """
        super().__init__(
            f'Footnote has no matching reference: {footnote}',
            {
                'footnote': footnote,
                'suggestion': 'Add a reference for the footnote or remove the duplicate definition.'
            }
        )
        self.footnote = footnote


class TooManyFootnotesError(MarkdownRuleError):
    """Raised when one footnote key has more than one distinct definition."""

    def __init__(self, footnote_key: str):
        """
        Initialize the exception.

        Args:
            footnote_key: The footnote key, for example "[^1]"
        """
        super().__init__(
            f'Footnote key {footnote_key} has more than one definition',
            {
                'footnote_key': footnote_key,
                'suggestion': 'Give each footnote definition its own key.'
            }
        )
        self.footnote_key = footnote_key
