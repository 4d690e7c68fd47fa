"""Layout of display math delimiters."""

import re

from mdparse import MarkdownASTNodeType, get_positions
from textedit import get_start_of_line_index, replace_text_between


_DOLLAR_RUN_PATTERN = re.compile(r'\$+')
_LINE_PREFIX_PATTERN = re.compile(r'[ \t>]*')


def _collapse_newlines(block: str, start: int, end: int) -> str:
    return block[:start] + '\n' + block[end:]


def _put_indicators_on_own_lines(text: str, start: int, end: int, dollar_count: int) -> str:
    """
    Make sure the opening and closing dollar signs of one math block sit on their own lines.

    Args:
        text: Markdown text
        start: Offset of the opening dollar signs
        end: Offset one past the end of the math block
        dollar_count: Minimum number of dollar signs in a delimiter

    Returns:
        The updated text
    """
    line_start = get_start_of_line_index(text, start)
    prefix_match = _LINE_PREFIX_PATTERN.match(text, line_start, start)
    assert prefix_match is not None
    line_prefix = prefix_match.group(0)

    block = text[start:end]
    opening_length = len(block) - len(block.lstrip('$'))
    if opening_length < dollar_count:
        return text

    closing = None
    for run in _DOLLAR_RUN_PATTERN.finditer(block, opening_length):
        if len(run.group(0)) >= dollar_count:
            closing = run

    # A block left open at the end of the document is not touched
    if closing is None:
        return text

    # Closing delimiter first so the opening delimiter's offsets stay valid
    newlines_start = closing.start()
    while newlines_start > opening_length and block[newlines_start - 1] == '\n':
        newlines_start -= 1

    if newlines_start < closing.start():
        block = _collapse_newlines(block, newlines_start, closing.start())

    else:
        closing_offset = start + closing.start()
        before_closing = text[get_start_of_line_index(text, closing_offset):closing_offset]
        if before_closing.replace('>', '').strip() != '':
            block = block[:closing.start()] + '\n' + line_prefix + block[closing.start():]

    newlines_end = opening_length
    while newlines_end < len(block) and block[newlines_end] == '\n':
        newlines_end += 1

    if newlines_end > opening_length:
        block = _collapse_newlines(block, opening_length, newlines_end)

    else:
        block = block[:opening_length] + '\n' + line_prefix + block[opening_length:]

    return replace_text_between(text, start, end, block)


def make_sure_math_block_indicators_are_on_their_own_lines(text: str, dollar_count: int = 2) -> str:
    """
    Move the delimiters of display math onto their own lines.

    Display math is either a fenced math block or inline math written with at least
    `dollar_count` dollar signs.  Inside blockquotes the new lines get the same
    blockquote markers as the line the math starts on.

    Args:
        text: Markdown text
        dollar_count: Number of dollar signs that mark display math

    Returns:
        The updated text
    """
    for position in get_positions(MarkdownASTNodeType.MATH, text):
        text = _put_indicators_on_own_lines(text, position.start_index, position.end_index, dollar_count)

    for position in get_positions(MarkdownASTNodeType.INLINE_MATH, text):
        if not text[position.start_index:position.end_index].startswith('$' * dollar_count):
            continue

        text = _put_indicators_on_own_lines(text, position.start_index, position.end_index, dollar_count)

    return text
