"""
Markdown and wiki link inspection and rewriting.

Markdown links are located through the syntax tree.  Wiki links (`[[target|alias]]`)
are not Markdown syntax, so they are found with a regular expression.
"""

import re
from dataclasses import dataclass
from typing import List, Tuple
from urllib.parse import quote, unquote

from mdlint.ignore_types import IgnoreType, ignore_list_of_types
from mdlint.regex_patterns import EXTERNAL_URL_PATTERN, GENERIC_LINK_PATTERN, WIKI_LINK_PATTERN
from mdlint.rule_options import LinkStyle
from mdparse import MarkdownASTNodeType, get_positions
from textedit import Span, TextEdit, apply_text_edits, replace_text_between


_IMAGE_SIZE_PATTERN = re.compile(r'\|(\d+(?:x\d+)?)$')
_WIKI_IMAGE_SIZE_PATTERN = re.compile(r'^\d+(?:x\d+)?$')


@dataclass
class LinkInfo:
    """A link or image found in a document."""

    text: str
    link: str
    position: Span
    size: str | None = None
    is_image: bool = False


def _split_markdown_link(source: str) -> Tuple[int, int]:
    """
    Find where the text of a `[text](destination)` construct ends.

    Args:
        source: The link source, optionally starting with `!`

    Returns:
        Tuple of (offset of the `]` closing the text, offset of the `(` opening the destination)
    """
    depth = 0
    index = len(source) - 1
    while index > 0:
        if source[index] == ')':
            depth += 1

        elif source[index] == '(':
            depth -= 1
            if depth == 0:
                return index - 1, index

        index -= 1

    # Fall back to the first closing bracket
    close = source.index(']')
    return close, close + 1


def _get_link_info(text: str, node_type: MarkdownASTNodeType) -> List[LinkInfo]:
    is_image = node_type == MarkdownASTNodeType.IMAGE
    text_start = 2 if is_image else 1
    link_info: List[LinkInfo] = []
    for position in get_positions(node_type, text):
        source = text[position.start_index:position.end_index]

        # Autolinks are links too, but have no text to work with
        if not GENERIC_LINK_PATTERN.match(source):
            continue

        text_end, destination_start = _split_markdown_link(source)
        link_text = source[text_start:text_end]
        size = None
        if is_image:
            size_match = _IMAGE_SIZE_PATTERN.search(link_text)
            if size_match is not None:
                size = size_match.group(1)
                link_text = link_text[:size_match.start()]

        link_info.append(LinkInfo(
            text=link_text,
            link=source[destination_start + 1:-1],
            position=position,
            size=size,
            is_image=is_image
        ))

    return link_info


def get_markdown_link_info(text: str) -> List[LinkInfo]:
    """
    Get the text, destination and position of every Markdown link.

    Images and autolinks are not included.

    Args:
        text: Markdown text

    Returns:
        The links, ordered by descending start offset
    """
    return _get_link_info(text, MarkdownASTNodeType.LINK)


def get_markdown_image_info(text: str) -> List[LinkInfo]:
    """
    Get the alternative text, source, size and position of every Markdown image.

    A size can be given at the end of the alternative text, as in `![alt|100x200](image.png)`.

    Args:
        text: Markdown text

    Returns:
        The images, ordered by descending start offset
    """
    return _get_link_info(text, MarkdownASTNodeType.IMAGE)


def get_wiki_link_info(text: str) -> List[LinkInfo]:
    """
    Get the alias, target and position of every wiki link.

    Embedded files (`![[...]]`) are not included.

    Args:
        text: Markdown text

    Returns:
        The links, ordered by descending start offset
    """
    link_info: List[LinkInfo] = []
    for match in WIKI_LINK_PATTERN.finditer(text):
        if match.group(1):
            continue

        target, _separator, alias = match.group(3).partition('|')
        link_info.append(LinkInfo(
            text=alias.strip(),
            link=target.strip(),
            position=Span(match.start(), match.end())
        ))

    link_info.reverse()
    return link_info


def remove_spaces_in_link_text(text: str) -> str:
    """
    Remove whitespace at the start and end of the text of Markdown links.

    Args:
        text: Markdown text

    Returns:
        The updated text
    """
    for position in get_positions(MarkdownASTNodeType.LINK, text):
        source = text[position.start_index:position.end_index]
        if not GENERIC_LINK_PATTERN.match(source):
            continue

        text_end, _destination_start = _split_markdown_link(source)
        new_link = '[' + source[1:text_end].strip() + source[text_end:]
        text = replace_text_between(text, position.start_index, position.end_index, new_link)

    return text


def remove_spaces_in_wiki_link_text(text: str) -> str:
    """
    Remove whitespace at the start and end of the alias of wiki links.

    Args:
        text: Markdown text

    Returns:
        The updated text
    """
    edits = []
    for match in WIKI_LINK_PATTERN.finditer(text):
        target, separator, alias = match.group(3).partition('|')
        if not separator:
            continue

        replacement = f'{match.group(1)}[[{target}|{alias.strip()}]]'
        if replacement != match.group(0):
            edits.append(TextEdit(match.start(), match.end(), replacement))

    return apply_text_edits(text, edits)


def _markdown_destination_to_wiki_target(destination: str) -> str:
    path, anchor_separator, anchor = unquote(destination).partition('#')
    if path.lower().endswith('.md'):
        path = path[:-len('.md')]

    return path + anchor_separator + anchor


def _basename(target: str) -> str:
    return target.partition('#')[0].rsplit('/', 1)[-1]


def convert_markdown_links_to_wiki_links(text: str) -> str:
    """
    Convert Markdown links and images that point at local files into wiki links.

    `[text](folder/file%20name.md#heading)` becomes `[[folder/file name#heading|text]]`.
    The alias is dropped when it is empty or matches the file name.  Links to external
    URLs and links whose destination carries a title stay as they are.

    Args:
        text: Markdown text

    Returns:
        The updated text
    """
    infos = get_markdown_link_info(text) + get_markdown_image_info(text)
    infos.sort(key=lambda info: info.position.start_index, reverse=True)

    edits = []
    lowest_start = len(text)
    for info in infos:
        # An image inside a link is converted on its own and the link is left alone
        if info.position.end_index > lowest_start:
            continue

        destination = info.link.strip()
        if destination.startswith('<') and destination.endswith('>'):
            destination = destination[1:-1]

        if not destination or EXTERNAL_URL_PATTERN.match(destination) or re.search(r'\s', destination):
            continue

        target = _markdown_destination_to_wiki_target(destination)
        parts = [target]
        alias = info.text.strip()
        if alias and alias != target and alias != _basename(target):
            parts.append(alias)

        if info.size is not None:
            parts.append(info.size)

        embed = '!' if info.is_image else ''
        edits.append(TextEdit(info.position.start_index, info.position.end_index, f'{embed}[[{"|".join(parts)}]]'))
        lowest_start = info.position.start_index

    return apply_text_edits(text, edits)


def _wiki_target_to_markdown_destination(target: str) -> str:
    path, anchor_separator, anchor = target.partition('#')
    if path and '.' not in path.rsplit('/', 1)[-1]:
        path += '.md'

    return quote(path, safe='/.-_~()') + anchor_separator + anchor.replace(' ', '%20')


def convert_wiki_links_to_markdown_links(text: str) -> str:
    """
    Convert wiki links and embeds into Markdown links and images.

    `[[folder/file name#heading|text]]` becomes `[text](folder/file%20name.md#heading)`.
    A link without an alias uses its target as the link text.

    Args:
        text: Markdown text

    Returns:
        The updated text
    """
    edits = []
    for match in WIKI_LINK_PATTERN.finditer(text):
        parts = [part.strip() for part in match.group(3).split('|')]
        target = parts[0]
        if not target:
            continue

        destination = _wiki_target_to_markdown_destination(target)
        if match.group(1):
            alias_parts = parts[1:]
            size = None
            if alias_parts and _WIKI_IMAGE_SIZE_PATTERN.match(alias_parts[-1]):
                size = alias_parts.pop()

            alt_text = '|'.join(alias_parts)
            if size is not None:
                alt_text += f'|{size}'

            replacement = f'![{alt_text}]({destination})'

        else:
            link_text = '|'.join(parts[1:]) or target
            replacement = f'[{link_text}]({destination})'

        edits.append(TextEdit(match.start(), match.end(), replacement))

    return apply_text_edits(text, edits)


def link_format(text: str, style: LinkStyle) -> str:
    """
    Convert links to one link syntax.

    Code, math and frontmatter are left alone.

    Args:
        text: Markdown text
        style: `WIKI` converts Markdown links to wiki links; `MARKDOWN` does the reverse

    Returns:
        The updated text
    """
    convert = (
        convert_markdown_links_to_wiki_links if style == LinkStyle.WIKI else convert_wiki_links_to_markdown_links
    )
    return ignore_list_of_types(
        [
            IgnoreType.CODE, IgnoreType.INLINE_CODE, IgnoreType.MATH, IgnoreType.INLINE_MATH, IgnoreType.YAML,
            IgnoreType.TAG
        ],
        text,
        convert
    )
