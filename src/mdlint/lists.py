"""List indicator and list item text rewriting."""

from typing import Callable, Dict, List

from mdlint.regex_patterns import CHECKBOX_PATTERN, ORDERED_LIST_LINE_PATTERN
from mdlint.rule_options import OrderedListEndStyle, OrderedListStyle, UnorderedListStyle
from mdparse import (
    MarkdownASTListItemNode, MarkdownASTListNode, MarkdownASTNodeType, get_list_item_text_positions, get_nodes,
    get_positions
)
from textedit import get_start_of_line_index, replace_text_between


def _get_list_item_level(prefix: str) -> int:
    """
    Work out the nesting level of a list item from what precedes its indicator.

    Args:
        prefix: Whitespace and blockquote markers before the indicator

    Returns:
        The level, starting at 1 for an unindented item
    """
    last_blockquote_indicator = prefix.rfind('> ')
    if last_blockquote_indicator != -1:
        prefix = prefix[last_blockquote_indicator + 2:]

    prefix = prefix.replace('\t', '  ')
    return prefix.count(' ') // 2 + 1


class _OrderedListRenumberer:
    """Renumbers the ordered items of one list, line by line."""

    def __init__(self, number_style: OrderedListStyle, end_style: OrderedListEndStyle) -> None:
        self._number_style = number_style
        self._end_style = end_style
        self._level_to_number: Dict[int, int] = {}
        self._last_level = -1

    def _forget_levels(self, start: int, end: int) -> None:
        for level in range(start, end + 1):
            self._level_to_number.pop(level, None)

    def renumber_line(self, line: str) -> str:
        match = ORDERED_LIST_LINE_PATTERN.match(line)
        if match is None:
            return line

        prefix = match.group(1)
        level = _get_list_item_level(prefix)

        # A bullet at this level starts the numbering of this and deeper levels again
        if match.group(3) is None:
            self._forget_levels(level, max(level, self._last_level))
            return line

        number = 1
        if level in self._level_to_number:
            if self._number_style == OrderedListStyle.ASCENDING:
                number = self._level_to_number[level] + 1
                self._level_to_number[level] = number

        else:
            self._level_to_number[level] = 1

        if self._last_level > level:
            self._forget_levels(level + 1, self._last_level)

        self._last_level = level
        return f'{prefix}{number}{self._end_style.value}{match.group(4)}'


def _renumber_ordered_lists(text: str, style: OrderedListStyle, end_style: OrderedListEndStyle) -> str:
    for position in get_positions(MarkdownASTNodeType.LIST, text, exclude_nested=True):
        start = get_start_of_line_index(text, position.start_index)
        renumberer = _OrderedListRenumberer(style, end_style)
        lines = [renumberer.renumber_line(line) for line in text[start:position.end_index].split('\n')]
        text = replace_text_between(text, start, position.end_index, '\n'.join(lines))

    return text


def update_ordered_list_item_indicators(
    text: str,
    style: OrderedListStyle,
    end_style: OrderedListEndStyle
) -> str:
    """
    Renumber ordered list items and set the character that follows each number.

    Each list is handled line by line.  The nesting level of a line comes from its
    indentation (two spaces per level, a tab counting as two spaces) after any blockquote
    markers.  Every level keeps its own counter, and a bullet item resets the counters of
    its level and all deeper ones.  Adjacent lists that only differ in the character after
    their numbers become one list once that character is set, and are numbered as one.

    Args:
        text: Markdown text
        style: `ASCENDING` counts up from 1; `LAZY` numbers every item 1
        end_style: Character to put after each number

    Returns:
        The updated text
    """
    renumbered = _renumber_ordered_lists(text, style, end_style)
    if renumbered == text:
        return text

    # Setting the end character can merge neighbouring lists
    return _renumber_ordered_lists(renumbered, style, end_style)


def _is_plain_bullet_item(item: MarkdownASTListItemNode) -> bool:
    parent = item.parent
    return isinstance(parent, MarkdownASTListNode) and not parent.ordered and item.checked is None


def update_unordered_list_item_indicators(text: str, style: UnorderedListStyle) -> str:
    """
    Make every bullet list item use the same bullet character.

    Ordered items and task list items are left alone.

    Args:
        text: Markdown text
        style: The bullet to use; `CONSISTENT` uses the bullet of the first plain bullet item

    Returns:
        The updated text, or the original text if `CONSISTENT` finds no plain bullet item
    """
    items: List[MarkdownASTListItemNode] = [
        node for node in get_nodes(MarkdownASTNodeType.LIST_ITEM, text)
        if isinstance(node, MarkdownASTListItemNode) and _is_plain_bullet_item(node)
    ]
    if not items:
        return text

    if style == UnorderedListStyle.CONSISTENT:
        bullet = text[items[-1].start]

    else:
        bullet = style.value

    for item in items:
        text = replace_text_between(text, item.start, item.start + 1, bullet)

    return text


def update_list_item_text(text: str, func: Callable[[str], str]) -> str:
    """
    Apply a function to the text of every list item.

    The text passed to the function starts one character after the list indicator, so
    a function that strips leading whitespace leaves exactly one space after the
    indicator.  A task checkbox is never part of the text.

    Args:
        text: Markdown text
        func: Function mapping the old item text to its replacement

    Returns:
        The updated text
    """
    for position in get_list_item_text_positions(text):
        start = position.start_index
        while start > 0 and text[start - 1].strip() == '':
            start -= 1

        # Keep one space between the indicator and the text
        if start == 0 or text[start - 1].strip() != '':
            start += 1

        list_text = text[start:position.end_index]
        if CHECKBOX_PATTERN.match(list_text):
            start += 4
            list_text = list_text[4:]

        text = replace_text_between(text, start, position.end_index, func(list_text))

    return text
