"""
Temporarily hide regions of a document from a rule.

Regions are swapped for placeholder tokens, the rule runs on the remaining text,
and the original regions are put back in order afterwards.
"""

from enum import Enum
from typing import Callable, List, Tuple

from mdlint.regex_patterns import TAG_WITH_LEADING_WHITESPACE_PATTERN, WIKI_LINK_PATTERN, YAML_PATTERN
from mdlint.regions import get_all_custom_ignore_sections_in_text, get_all_tables_in_text
from mdparse import MarkdownASTNodeType, get_positions
from textedit import Span


class IgnoreType(Enum):
    """Kinds of region that can be hidden from a rule, with their placeholder text."""

    CODE = "{IGNORED_CODE_BLOCK}"
    INLINE_CODE = "{IGNORED_INLINE_CODE}"
    MATH = "{IGNORED_MATH_BLOCK}"
    INLINE_MATH = "{IGNORED_INLINE_MATH}"
    YAML = "{IGNORED_YAML}"
    LINK = "{IGNORED_LINK}"
    WIKI_LINK = "{IGNORED_WIKI_LINK}"
    TAG = "{IGNORED_TAG}"
    TABLE = "{IGNORED_TABLE}"
    CUSTOM_IGNORE = "{IGNORED_CUSTOM_SECTION}"


def _find_regions(ignore_type: IgnoreType, text: str) -> List[Span]:
    if ignore_type == IgnoreType.CODE:
        return get_positions(MarkdownASTNodeType.CODE, text)

    if ignore_type == IgnoreType.INLINE_CODE:
        return get_positions(MarkdownASTNodeType.INLINE_CODE, text)

    if ignore_type == IgnoreType.MATH:
        return get_positions(MarkdownASTNodeType.MATH, text)

    if ignore_type == IgnoreType.INLINE_MATH:
        return get_positions(MarkdownASTNodeType.INLINE_MATH, text)

    if ignore_type == IgnoreType.LINK:
        links = get_positions(MarkdownASTNodeType.LINK, text) + get_positions(MarkdownASTNodeType.IMAGE, text)
        return sorted(links, key=lambda span: span.start_index, reverse=True)

    if ignore_type == IgnoreType.YAML:
        match = YAML_PATTERN.match(text)
        return [Span(0, match.end())] if match else []

    if ignore_type == IgnoreType.WIKI_LINK:
        spans = [Span(match.start(), match.end()) for match in WIKI_LINK_PATTERN.finditer(text)]
        spans.reverse()
        return spans

    if ignore_type == IgnoreType.TAG:
        spans = [Span(match.start(2), match.end(2)) for match in TAG_WITH_LEADING_WHITESPACE_PATTERN.finditer(text)]
        spans.reverse()
        return spans

    if ignore_type == IgnoreType.TABLE:
        return get_all_tables_in_text(text)

    return get_all_custom_ignore_sections_in_text(text)


def replace_with_placeholders(ignore_type: IgnoreType, text: str) -> Tuple[str, List[str]]:
    """
    Replace every region of one kind with its placeholder.

    Regions that overlap an already replaced region are left alone.

    Args:
        ignore_type: The kind of region to hide
        text: Markdown text

    Returns:
        The text with placeholders, and the replaced regions in document order
    """
    originals: List[str] = []
    lowest_replaced = len(text) + 1
    for span in _find_regions(ignore_type, text):
        if span.end_index > lowest_replaced:
            continue

        originals.append(text[span.start_index:span.end_index])
        text = text[:span.start_index] + ignore_type.value + text[span.end_index:]
        lowest_replaced = span.start_index

    originals.reverse()
    return text, originals


def restore_placeholders(ignore_type: IgnoreType, text: str, originals: List[str]) -> str:
    """
    Put hidden regions back in place of their placeholders, in order.

    Args:
        ignore_type: The kind of region that was hidden
        text: Text containing placeholders
        originals: The hidden regions in document order

    Returns:
        The text with the regions restored
    """
    for original in originals:
        text = text.replace(ignore_type.value, original, 1)

    return text


def ignore_list_of_types(ignore_types: List[IgnoreType], text: str, func: Callable[[str], str]) -> str:
    """
    Run a text transformation with some kinds of region hidden from it.

    Args:
        ignore_types: The kinds of region to hide, hidden in the order given
        text: Markdown text
        func: The transformation to run

    Returns:
        The transformed text with the hidden regions restored
    """
    hidden: List[Tuple[IgnoreType, List[str]]] = []
    for ignore_type in ignore_types:
        text, originals = replace_with_placeholders(ignore_type, text)
        hidden.append((ignore_type, originals))

    text = func(text)

    for ignore_type, originals in reversed(hidden):
        text = restore_placeholders(ignore_type, text, originals)

    return text
