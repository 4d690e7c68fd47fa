"""
Blank line enforcement around block constructs.

Every rule here finds the spans of one construct, extends them to whole lines
where the parser reports a shorter span, and inserts blank lines around them
from the last span to the first.
"""

from typing import Callable, List

from mdlint.regions import get_all_tables_in_text
from mdparse import MarkdownASTCodeBlockNode, MarkdownASTNodeType, get_nodes, get_positions
from textedit import (
    Span, ensure_blank_lines_around, get_end_of_line_index, get_start_of_line_index, replace_text_between
)


def _is_blank_or_quote_only(lines: str) -> bool:
    return all(line.replace('>', '').strip() == '' for line in lines.split('\n'))


def _extend_to_end_of_line(text: str, end: int) -> int:
    """
    Move an offset forward to the newline ending its line.

    Nested blockquotes can end before the content of their last line does, so the
    line is treated as part of the construct.
    """
    while end < len(text) - 1 and text[end] != '\n':
        end += 1

    return end


def _blockquote_spans(text: str) -> List[Span]:
    return [
        Span(position.start_index, _extend_to_end_of_line(text, position.end_index))
        for position in get_positions(MarkdownASTNodeType.BLOCKQUOTE, text)
    ]


def ensure_empty_lines_around_lists(text: str) -> str:
    """
    Make sure lists are separated from surrounding content by blank lines.

    Blank lines, including empty blockquote lines, between the start of the document
    and a list, or between a list and the end of the document, are removed.  Nested
    lists are handled as part of the list that holds them.

    Args:
        text: Markdown text

    Returns:
        The updated text
    """
    for position in get_positions(MarkdownASTNodeType.LIST, text, exclude_nested=True):
        start = position.start_index
        end = get_end_of_line_index(text, position.end_index)

        # A lone final newline is not a blank line
        tail = text[end:]
        if tail not in ('', '\n') and _is_blank_or_quote_only(tail):
            text = text[:end]

        line_start = get_start_of_line_index(text, start)
        if line_start > 0 and _is_blank_or_quote_only(text[:line_start - 1]):
            text = text[line_start:]
            start -= line_start
            end -= line_start

        text = ensure_blank_lines_around(text, start, end)

    return text


def ensure_empty_lines_around_blockquotes(text: str) -> str:
    """
    Make sure blockquotes are separated from surrounding content by blank lines.

    A nested blockquote is separated from the blockquote holding it by a line with one
    blockquote marker fewer.

    Args:
        text: Markdown text

    Returns:
        The updated text
    """
    for span in _blockquote_spans(text):
        text = ensure_blank_lines_around(text, span.start_index, span.end_index)

    return text


def ensure_empty_lines_around_fenced_code_blocks(text: str) -> str:
    """
    Make sure fenced code blocks are separated from surrounding content by blank lines.

    Indented code blocks are left alone.

    Args:
        text: Markdown text

    Returns:
        The updated text
    """
    for node in get_nodes(MarkdownASTNodeType.CODE, text):
        if not isinstance(node, MarkdownASTCodeBlockNode) or not node.fence:
            continue

        text = ensure_blank_lines_around(text, node.start, node.end)

    return text


def ensure_empty_lines_around_math_blocks(text: str, dollar_count: int = 2) -> str:
    """
    Make sure display math is separated from surrounding content by blank lines.

    Display math is either a fenced math block or inline math written with at least
    `dollar_count` dollar signs.

    Args:
        text: Markdown text
        dollar_count: Number of dollar signs that mark display math

    Returns:
        The updated text
    """
    for position in get_positions(MarkdownASTNodeType.MATH, text):
        text = ensure_blank_lines_around(text, position.start_index, position.end_index)

    for position in get_positions(MarkdownASTNodeType.INLINE_MATH, text):
        if not text[position.start_index:position.end_index].startswith('$' * dollar_count):
            continue

        text = ensure_blank_lines_around(text, position.start_index, position.end_index)

    return text


def ensure_empty_lines_around_tables(text: str) -> str:
    """
    Make sure tables are separated from surrounding content by blank lines.

    Args:
        text: Markdown text

    Returns:
        The updated text
    """
    for span in get_all_tables_in_text(text):
        text = ensure_blank_lines_around(text, span.start_index, span.end_index)

    return text


def update_blockquotes(text: str, func: Callable[[str], str]) -> str:
    """
    Apply a function to every blockquote, markers included.

    Nested blockquotes are passed to the function before the blockquotes holding them.

    Args:
        text: Markdown text
        func: Function mapping the old blockquote text to its replacement

    Returns:
        The updated text
    """
    for span in _blockquote_spans(text):
        text = replace_text_between(
            text, span.start_index, span.end_index, func(text[span.start_index:span.end_index])
        )

    return text
