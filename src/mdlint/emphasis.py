"""Emphasis and strong text rewriting."""

from typing import Callable

from mdlint.rule_options import EmphasisStyle
from mdparse import MarkdownASTNodeType, get_positions
from textedit import replace_text_between


def make_emphasis_or_bold_consistent(text: str, style: EmphasisStyle, node_type: MarkdownASTNodeType) -> str:
    """
    Make every emphasis or strong delimiter use the same character.

    Args:
        text: Markdown text
        style: The delimiter to use; `CONSISTENT` uses the one of the first occurrence
        node_type: `MarkdownASTNodeType.EMPHASIS` or `MarkdownASTNodeType.STRONG`

    Returns:
        The updated text
    """
    positions = get_positions(node_type, text)
    if not positions:
        return text

    if style == EmphasisStyle.UNDERSCORE:
        indicator = '_'

    elif style == EmphasisStyle.ASTERISK:
        indicator = '*'

    else:
        first_position = positions[-1]
        indicator = text[first_position.start_index]

    if node_type == MarkdownASTNodeType.STRONG:
        indicator += indicator

    for position in positions:
        inner = text[position.start_index + len(indicator):position.end_index - len(indicator)]
        text = replace_text_between(
            text, position.start_index, position.end_index, indicator + inner + indicator
        )

    return text


def _update_node_text(
    text: str,
    node_type: MarkdownASTNodeType,
    delimiter_length: int,
    func: Callable[[str], str]
) -> str:
    for position in get_positions(node_type, text):
        start = position.start_index + delimiter_length
        end = position.end_index - delimiter_length
        text = replace_text_between(text, start, end, func(text[start:end]))

    return text


def update_italics_text(text: str, func: Callable[[str], str]) -> str:
    """
    Apply a function to the content of every piece of emphasised text.

    Args:
        text: Markdown text
        func: Function mapping the old content, without delimiters, to its replacement

    Returns:
        The updated text
    """
    return _update_node_text(text, MarkdownASTNodeType.EMPHASIS, 1, func)


def update_bold_text(text: str, func: Callable[[str], str]) -> str:
    """
    Apply a function to the content of every piece of strong text.

    Args:
        text: Markdown text
        func: Function mapping the old content, without delimiters, to its replacement

    Returns:
        The updated text
    """
    return _update_node_text(text, MarkdownASTNodeType.STRONG, 2, func)
