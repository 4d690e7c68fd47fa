"""
Regex-based region detection for constructs the syntax tree does not model.

Tables are not part of the parsed tree and custom ignore markers are plain HTML
comments, so both are found by scanning the text directly.
"""

from typing import List

from mdlint.regex_patterns import (
    CUSTOM_IGNORE_END_PATTERN, CUSTOM_IGNORE_START_PATTERN, TABLE_ROW_PATTERN, TABLE_SEPARATOR_PATTERN,
    TABLE_STARTING_PIPE_PATTERN
)
from textedit import Span, get_start_of_line_index


def _is_invalid_table_separator_row(full_row: str, separator: str) -> bool:
    if full_row.strip() == '':
        return True

    # The separator pattern allows two pipes back to back, which is not a valid separator
    if '||' in separator:
        return True

    # Anything other than whitespace or blockquote markers around the match means the
    # pattern only matched the tail of some other line
    non_separator_content = full_row.replace(separator, '', 1)
    return any(char not in '>' and not char.isspace() for char in non_separator_content)


def _cell_count(row: str) -> int:
    if row.endswith('|'):
        row = row[:-1]

    return len(row.split('|'))


def get_all_tables_in_text(text: str) -> List[Span]:
    """
    Find every table in the text.

    A table is a header line followed by a separator line (for example `| --- | :-: |`)
    with the same number of cells, plus any directly following lines containing a pipe.
    A separator on the first line of the text never forms a table because it has no
    header line above it.

    Args:
        text: Markdown text

    Returns:
        The table spans, ordered by descending start offset
    """
    positions: List[Span] = []
    for match in TABLE_SEPARATOR_PATTERN.finditer(text):
        separator = match.group(0)
        start_of_current_line = get_start_of_line_index(text, match.start())
        if start_of_current_line == 0:
            continue

        full_row = text[start_of_current_line:match.end()]
        if _is_invalid_table_separator_row(full_row, separator):
            continue

        start = get_start_of_line_index(text, start_of_current_line - 1)
        header_line = text[start:start_of_current_line - 1]

        # A table must have a pipe in either the header or the separator row
        if '|' not in separator and '|' not in header_line:
            continue

        starting_pipe = TABLE_STARTING_PIPE_PATTERN.match(header_line)
        if starting_pipe is not None:
            # Leave the start alone if only whitespace or the pipe itself precede the table
            if starting_pipe.group(0).strip() not in ('', '|'):
                start += len(starting_pipe.group(0)) - 1

            header_line = header_line[starting_pipe.end():]

        separator_starting_pipe = TABLE_STARTING_PIPE_PATTERN.match(separator)
        delimiter_line = separator[separator_starting_pipe.end():] if separator_starting_pipe else separator

        if _cell_count(header_line) != _cell_count(delimiter_line):
            continue

        end = match.end()
        if end >= len(text) - 1:
            positions.append(Span(start, len(text)))
            continue

        # Take following rows until one no longer looks like table content
        for row in text[end + 1:].split('\n'):
            if not TABLE_ROW_PATTERN.match(row):
                break

            end += len(row) + 1

        positions.append(Span(start, end))

    positions.reverse()
    return positions


def get_all_custom_ignore_sections_in_text(text: str) -> List[Span]:
    """
    Find every region between `<!-- linter-disable -->` and `<!-- linter-enable -->` markers.

    Markers do not nest: each start marker takes the first unused end marker after it,
    and a start marker without one runs to the end of the text.

    Args:
        text: Markdown text

    Returns:
        The region spans, including the markers, ordered by descending start offset
    """
    positions: List[Span] = []
    end_matches = list(CUSTOM_IGNORE_END_PATTERN.finditer(text))
    for start_match in CUSTOM_IGNORE_START_PATTERN.finditer(text):
        start = start_match.start()
        while end_matches and end_matches[0].start() <= start:
            end_matches.pop(0)

        end = len(text)
        if end_matches:
            end = end_matches.pop(0).end()

        positions.append(Span(start, end))

    positions.reverse()
    return positions
