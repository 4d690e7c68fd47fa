"""Offset-based editing of immutable text."""

from textedit.text_edit_exceptions import TextEditError, TextEditOverlapError, TextEditRangeError
from textedit.text_edit_types import Span, TextEdit
from textedit.text_editor import (
    apply_text_edits,
    ensure_blank_lines_around,
    get_end_of_line_index,
    get_start_of_line_index,
    replace_at,
    replace_text_between
)


__all__ = [
    "Span",
    "TextEdit",
    "TextEditError",
    "TextEditOverlapError",
    "TextEditRangeError",
    "apply_text_edits",
    "ensure_blank_lines_around",
    "get_end_of_line_index",
    "get_start_of_line_index",
    "replace_at",
    "replace_text_between",
]
