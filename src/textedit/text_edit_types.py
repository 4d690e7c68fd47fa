"""Shared dataclasses for text edit operations."""

from dataclasses import dataclass


@dataclass(frozen=True)
class Span:
    """A half-open range of character offsets into a specific text."""

    start_index: int  # Offset of the first character in the range
    end_index: int  # Offset one past the last character in the range

    def length(self) -> int:
        """
        Get the number of characters covered by the span.

        Returns:
            The span length
        """
        return self.end_index - self.start_index


@dataclass(frozen=True)
class TextEdit:
    """Represents the replacement of one span of text with new text."""

    start_index: int
    end_index: int
    replacement: str
