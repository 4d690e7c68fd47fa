"""
Offset-based text editing primitives.

All functions treat text as immutable and return a new string.  Callers that
apply several edits computed against the same text must apply them from the
highest offset to the lowest so earlier offsets stay valid.
"""

import re
from typing import Iterable, List

from textedit.text_edit_exceptions import TextEditOverlapError, TextEditRangeError
from textedit.text_edit_types import TextEdit


_BLOCKQUOTE_PREFIX_PATTERN = re.compile(r'^(?:[ \t]*>)*')


def _check_range(text: str, start: int, end: int) -> None:
    if start < 0 or end > len(text) or start > end:
        raise TextEditRangeError(
            f'Invalid edit range {start}-{end} for text of length {len(text)}',
            {
                'start': start,
                'end': end,
                'text_length': len(text)
            }
        )


def replace_text_between(text: str, start: int, end: int, new_value: str) -> str:
    """
    Replace the characters between two offsets.

    Args:
        text: Text to edit
        start: Offset of the first character to replace
        end: Offset one past the last character to replace
        new_value: Replacement text

    Returns:
        The edited text

    Raises:
        TextEditRangeError: If the offsets do not describe a range inside the text
    """
    _check_range(text, start, end)
    return text[:start] + new_value + text[end:]


def replace_at(text: str, search: str, replacement: str, index: int) -> str:
    """
    Replace a fixed token that is known to start at a given offset.

    Args:
        text: Text to edit
        search: Token expected at the offset
        replacement: Text to put in place of the token
        index: Offset of the token

    Returns:
        The edited text

    Raises:
        TextEditRangeError: If the token is not present at the offset
    """
    _check_range(text, index, index + len(search))
    if text[index:index + len(search)] != search:
        raise TextEditRangeError(
            f'Expected {search!r} at offset {index}',
            {
                'index': index,
                'expected': search,
                'actual': text[index:index + len(search)]
            }
        )

    return text[:index] + replacement + text[index + len(search):]


def get_start_of_line_index(text: str, index: int) -> int:
    """
    Find the offset at which the line containing an offset starts.

    Args:
        text: Text to search
        index: Offset within the line

    Returns:
        Offset of the first character of the line
    """
    start = index
    while start > 0 and text[start - 1] != '\n':
        start -= 1

    return start


def get_end_of_line_index(text: str, index: int) -> int:
    """
    Find the offset of the newline that ends the line containing an offset.

    Args:
        text: Text to search
        index: Offset within the line

    Returns:
        Offset of the terminating newline, or the text length for the last line
    """
    end = text.find('\n', index)
    if end == -1:
        return len(text)

    return end


def _blockquote_depth(line: str) -> int:
    match = _BLOCKQUOTE_PREFIX_PATTERN.match(line)
    assert match is not None
    return match.group(0).count('>')


def _is_blank_line(line: str) -> bool:
    return line.replace('>', '').strip() == ''


def _blank_line_for_depth(depth: int) -> str:
    return ' '.join(['>'] * depth)


def _ensure_blank_line_after(text: str, end: int) -> str:
    line_end = get_end_of_line_index(text, end)

    # The span's line is the last line, or only a trailing newline follows it
    if line_end >= len(text) - 1:
        return text

    next_line_start = line_end + 1
    next_line = text[next_line_start:get_end_of_line_index(text, next_line_start)]
    if _is_blank_line(next_line):
        return text

    current_line = text[get_start_of_line_index(text, end):line_end]
    depth = min(_blockquote_depth(current_line), _blockquote_depth(next_line))
    return text[:next_line_start] + _blank_line_for_depth(depth) + '\n' + text[next_line_start:]


def _ensure_blank_line_before(text: str, start: int) -> str:
    line_start = get_start_of_line_index(text, start)
    if line_start == 0:
        return text

    previous_line = text[get_start_of_line_index(text, line_start - 1):line_start - 1]
    if _is_blank_line(previous_line):
        return text

    depth = min(_blockquote_depth(text[line_start:start]), _blockquote_depth(previous_line))
    return text[:line_start] + _blank_line_for_depth(depth) + '\n' + text[line_start:]


def ensure_blank_lines_around(text: str, start: int, end: int) -> str:
    """
    Make sure the lines holding a span are separated from their neighbours by blank lines.

    At most one line is inserted on each side.  Nothing is inserted before a span on the
    first line or after a span on the last line, or where a blank line is already present.
    Inside blockquotes the inserted line carries the blockquote markers shared by both
    neighbouring lines, so the quote is not split in two.

    Args:
        text: Text to edit
        start: Offset where the span starts
        end: Offset one past where the span ends

    Returns:
        The edited text

    Raises:
        TextEditRangeError: If the offsets do not describe a range inside the text
    """
    _check_range(text, start, end)

    # Work on the later offset first so the start offset stays valid
    text = _ensure_blank_line_after(text, end)
    return _ensure_blank_line_before(text, start)


def apply_text_edits(text: str, edits: Iterable[TextEdit]) -> str:
    """
    Apply a set of edits that were all computed against the same text.

    Args:
        text: Text the edits refer to
        edits: Edits to apply, in any order

    Returns:
        The edited text

    Raises:
        TextEditRangeError: If any edit refers to offsets outside the text
        TextEditOverlapError: If any two edits overlap
    """
    ordered: List[TextEdit] = sorted(edits, key=lambda edit: (edit.start_index, edit.end_index), reverse=True)
    for edit in ordered:
        _check_range(text, edit.start_index, edit.end_index)

    # Sorted from the bottom of the text to the top, so each edit must end before the
    # previous one starts
    for i in range(len(ordered) - 1):
        later = ordered[i]
        earlier = ordered[i + 1]
        if earlier.end_index > later.start_index or earlier.start_index == later.start_index:
            raise TextEditOverlapError(
                'Edits would overlap when applied',
                {
                    'edit1_range': [earlier.start_index, earlier.end_index],
                    'edit2_range': [later.start_index, later.end_index]
                }
            )

    for edit in ordered:
        text = text[:edit.start_index] + edit.replacement + text[edit.end_index:]

    return text
