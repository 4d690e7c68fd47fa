"""Paragraph spacing and line break rules."""

from typing import List

from mdlint.regex_patterns import LINE_BREAK_ENDING_PATTERN
from mdparse import MarkdownASTNodeType, get_nodes, get_positions
from textedit import get_end_of_line_index, get_start_of_line_index, replace_text_between


def _split_paragraph_lines(lines: List[str]) -> List[str]:
    """
    Split the lines of a paragraph into separate paragraphs.

    Lines ending in a line break (`<br>` or two spaces) stay with the line after them.
    """
    paragraphs: List[str] = []
    next_line_is_same_paragraph = False
    for line in lines:
        if next_line_is_same_paragraph:
            paragraphs[-1] += '\n' + line

        else:
            paragraphs.append(line)

        next_line_is_same_paragraph = LINE_BREAK_ENDING_PATTERN.search(line) is not None

    return paragraphs


def make_sure_there_is_only_one_blank_line_before_and_after_paragraphs(text: str) -> str:
    """
    Make sure every paragraph has exactly one blank line before and after it.

    Each line of a paragraph becomes its own paragraph unless the line before it ends in
    a line break.  Paragraphs in blockquotes and list items are left alone, and blank
    lines at the start and end of the document are removed.

    Args:
        text: Markdown text

    Returns:
        The updated text
    """
    has_trailing_line_break = text.endswith('\n')
    paragraphs = [
        node for node in get_nodes(MarkdownASTNodeType.PARAGRAPH, text)
        if not node.has_ancestor_of_type(MarkdownASTNodeType.BLOCKQUOTE)
        and not node.has_ancestor_of_type(MarkdownASTNodeType.LIST_ITEM)
    ]
    if not paragraphs:
        return text

    for paragraph in paragraphs:
        start = get_start_of_line_index(text, paragraph.start)
        content_end = get_end_of_line_index(text, paragraph.end)
        new_paragraphs = _split_paragraph_lines(text[start:content_end].split('\n'))

        while start > 0 and text[start - 1] == '\n':
            start -= 1

        end = content_end
        while end < len(text) and text[end] == '\n':
            end += 1

        start_newlines = '' if start == 0 else '\n\n'
        end_newlines = '' if end == len(text) else '\n\n'
        text = replace_text_between(text, start, end, start_newlines + '\n\n'.join(new_paragraphs) + end_newlines)

    if has_trailing_line_break and not text.endswith('\n'):
        text += '\n'

    return text


def add_two_spaces_at_end_of_lines_followed_by_another_line_of_text_content(text: str) -> str:
    """
    End every paragraph line that is followed by another line with two spaces.

    Lines already ending in `<br>` or `<br/>` are left alone.

    Args:
        text: Markdown text

    Returns:
        The updated text
    """
    for position in get_positions(MarkdownASTNodeType.PARAGRAPH, text):
        lines = text[position.start_index:position.end_index].split('\n')
        if len(lines) < 2:
            continue

        for i in range(len(lines) - 1):
            line = lines[i].rstrip()
            if line.endswith('<br>') or line.endswith('<br/>'):
                continue

            lines[i] = line + '  '

        text = replace_text_between(text, position.start_index, position.end_index, '\n'.join(lines))

    return text
