"""
Footnote reordering and renumbering.

Both rules cut every footnote definition out of the document, work out where
each one is referenced, and append the definitions to the end of the document
in the order their references first appear.
"""

from typing import Dict, List, Tuple

from mdlint.regex_patterns import FOOTNOTE_KEY_PATTERN
from mdlint.rule_exceptions import MissingFootnoteError, TooManyFootnotesError
from mdparse import MarkdownASTNodeType, get_positions
from textedit import replace_at


def _remove_footnote_definitions(text: str) -> Tuple[str, List[str]]:
    """
    Cut every footnote definition out of the text.

    Up to two newlines directly after a definition are removed with it.

    Args:
        text: Markdown text

    Returns:
        The text without definitions, and the definitions ordered last to first
    """
    footnotes: List[str] = []
    for position in get_positions(MarkdownASTNodeType.FOOTNOTE_DEFINITION, text):
        footnotes.append(text[position.start_index:position.end_index])

        end = position.end_index
        for _ in range(2):
            if end < len(text) and text[end] == '\n':
                end += 1

        text = text[:position.start_index] + text[end:]

    return text, footnotes


def _footnote_key(footnote: str) -> str:
    match = FOOTNOTE_KEY_PATTERN.search(footnote)
    assert match is not None
    return match.group(0)


def _find_reference_positions(text: str, key: str) -> List[int]:
    """
    Find every reference to a footnote key.

    Args:
        text: Text with the footnote definitions removed
        key: The footnote key, for example `[^1]`

    Returns:
        The reference offsets ordered last to first
    """
    positions: List[int] = []
    end = len(text)
    while True:
        position = text.rfind(key, 0, end)
        if position == -1:
            break

        positions.append(position)
        end = position

    return positions


def _append_footnotes(text: str, footnotes: List[str]) -> str:
    if not footnotes:
        return text

    text = text.rstrip() + '\n'
    for footnote in footnotes:
        text += '\n' + footnote

    return text


def move_footnotes_to_end(text: str) -> str:
    """
    Move all footnote definitions to the end of the document.

    Definitions are ordered by where their references appear.  When several definitions
    share a key, they are matched to that key's references from the last one backwards.

    Args:
        text: Markdown text

    Returns:
        The text with the footnote definitions at the end

    Raises:
        MissingFootnoteError: If a definition has no reference left to bind to
    """
    text, footnotes = _remove_footnote_definitions(text)

    # Key -> definitions using it, last to first
    footnotes_by_key: Dict[str, List[str]] = {}
    for footnote in footnotes:
        footnotes_by_key.setdefault(_footnote_key(footnote), []).append(footnote)

    bound_footnotes: List[Tuple[int, str]] = []
    for key, key_footnotes in footnotes_by_key.items():
        reference_positions = _find_reference_positions(text, key)

        # Align from the tail so surplus references bind to the earliest definitions
        offset = max(0, len(reference_positions) - len(key_footnotes))
        for index, footnote in enumerate(key_footnotes):
            if offset + index >= len(reference_positions):
                raise MissingFootnoteError(footnote)

            bound_footnotes.append((reference_positions[offset + index], footnote))

    bound_footnotes.sort(key=lambda bound: bound[0])
    return _append_footnotes(text, [footnote for _position, footnote in bound_footnotes])


def reindex_footnotes(text: str) -> str:
    """
    Renumber footnotes from 1 upwards in the order they are first referenced.

    The definitions are moved to the end of the document in their new order.  Duplicate
    definitions with identical text are merged; definitions that are never referenced
    are numbered after all referenced ones.

    Args:
        text: Markdown text

    Returns:
        The text with renumbered footnotes

    Raises:
        TooManyFootnotesError: If one key has two different definitions
    """
    text, footnotes = _remove_footnote_definitions(text)
    if not footnotes:
        return text

    footnote_for_key: Dict[str, str] = {}
    for footnote in reversed(footnotes):
        key = _footnote_key(footnote)
        existing = footnote_for_key.get(key)
        if existing is not None and existing != footnote:
            raise TooManyFootnotesError(key)

        footnote_for_key[key] = footnote

    references: List[Tuple[int, str]] = []
    first_reference: Dict[str, int] = {}
    for key in footnote_for_key:
        positions = _find_reference_positions(text, key)
        references.extend((position, key) for position in positions)
        if positions:
            first_reference[key] = positions[-1]

    ordered_keys = sorted(
        footnote_for_key,
        key=lambda key: (key not in first_reference, first_reference.get(key, 0))
    )
    new_keys = {key: f'[^{index}]' for index, key in enumerate(ordered_keys, start=1)}

    references.sort(reverse=True)
    for position, key in references:
        text = replace_at(text, key, new_keys[key], position)

    renumbered = [footnote_for_key[key].replace(key, new_keys[key], 1) for key in ordered_keys]
    return _append_footnotes(text, renumbered)
