"""Blank lines around headings."""

from typing import Dict, Tuple

from mdlint.regex_patterns import YAML_PATTERN
from mdparse import MarkdownASTNodeType, get_nodes
from textedit import TextEdit, apply_text_edits, get_end_of_line_index, get_start_of_line_index


def _newlines_before(text: str, index: int) -> int:
    while index > 0 and text[index - 1] == '\n':
        index -= 1

    return index


def _newlines_after(text: str, index: int) -> int:
    while index < len(text) and text[index] == '\n':
        index += 1

    return index


def heading_blank_lines(text: str, bottom: bool = True, empty_line_after_yaml: bool = True) -> str:
    """
    Make sure headings are surrounded by exactly one blank line.

    Blank lines before a heading that starts the document and after a heading that ends
    it are removed instead.  Headings that follow a blockquote or list marker on the same
    line are left alone.

    Args:
        text: Markdown text
        bottom: If False, headings are followed by no blank line unless another heading follows
        empty_line_after_yaml: If False, a heading directly after the frontmatter gets no blank line
            before it

    Returns:
        The updated text
    """
    yaml = YAML_PATTERN.match(text)
    yaml_end = yaml.end() if yaml is not None else -1

    # (start, end) of a run of newlines -> True if the run precedes a heading
    gaps: Dict[Tuple[int, int], bool] = {}
    for heading in get_nodes(MarkdownASTNodeType.HEADING, text):
        line_start = get_start_of_line_index(text, heading.start)
        if text[line_start:heading.start].strip() != '':
            continue

        gaps[(_newlines_before(text, line_start), line_start)] = True

        line_end = get_end_of_line_index(text, heading.end)
        after_gap = (line_end, _newlines_after(text, line_end))
        gaps.setdefault(after_gap, False)

    edits = []
    for (start, end), before_heading in gaps.items():
        if start == 0 or end == len(text):
            replacement = ''

        elif before_heading:
            replacement = '\n' if start == yaml_end and not empty_line_after_yaml else '\n\n'

        else:
            replacement = '\n\n' if bottom else '\n'

        if text[start:end] != replacement:
            edits.append(TextEdit(start, end, replacement))

    return apply_text_edits(text, edits)
