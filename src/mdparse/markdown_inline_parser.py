"""
Inline parser for Markdown paragraph and heading content.

The content of a block may span several source lines, each starting at a
different offset once container markers are stripped.  The parser works on the
joined content and maps every buffer index back to its source offset, so each
node it creates carries its position in the original text.
"""

import re
import string
import unicodedata
from typing import List, Tuple

from mdparse.markdown_ast_node import (
    MarkdownASTEmphasisNode, MarkdownASTFootnoteReferenceNode, MarkdownASTHtmlNode, MarkdownASTImageNode,
    MarkdownASTInlineCodeNode, MarkdownASTInlineMathNode, MarkdownASTLinkNode, MarkdownASTNode,
    MarkdownASTStrongNode, MarkdownASTTextNode
)


class _DelimiterRun:
    """A run of `*` or `_` characters that may open or close emphasis."""

    def __init__(self, char: str, start: int, end: int, can_open: bool, can_close: bool) -> None:
        self.char = char
        self.start = start
        self.end = end
        self.original_count = end - start
        self.can_open = can_open
        self.can_close = can_close

    def count(self) -> int:
        return self.end - self.start


class _BracketMarker:
    """An opening `[` or `![` that may become a link or image."""

    def __init__(self, start: int, image: bool, delimiter_bottom: int) -> None:
        self.start = start
        self.image = image
        self.delimiter_bottom = delimiter_bottom
        self.active = True

    def length(self) -> int:
        return 2 if self.image else 1


_InlineItem = MarkdownASTNode | _DelimiterRun | _BracketMarker


class MarkdownInlineParser:
    """
    Parser for inline Markdown constructs.

    Recognises code spans, inline math, autolinks, inline HTML, links, images,
    footnote references, emphasis and strong emphasis.  Emphasis is resolved with
    the CommonMark delimiter run algorithm, so nested and mixed `*`/`_` runs
    produce the same tree other CommonMark parsers produce.
    """

    _ESCAPABLE = set(string.punctuation)

    _AUTOLINK_PATTERN = re.compile(r'<([A-Za-z][A-Za-z0-9.+-]{1,31}:[^<>\x00-\x20]*)>')
    _EMAIL_AUTOLINK_PATTERN = re.compile(
        r'<([A-Za-z0-9.!#$%&\'*+/=?^_`{|}~-]+@[A-Za-z0-9](?:[A-Za-z0-9-]{0,61}[A-Za-z0-9])?'
        r'(?:\.[A-Za-z0-9](?:[A-Za-z0-9-]{0,61}[A-Za-z0-9])?)*)>'
    )
    _HTML_TAG_PATTERN = re.compile(
        r'<(?:'
        r'[A-Za-z][A-Za-z0-9-]*'
        r'(?:\s+[A-Za-z_:][A-Za-z0-9_.:-]*(?:\s*=\s*(?:[^\s"\'=<>`]+|\'[^\']*\'|"[^"]*"))?)*'
        r'\s*/?'
        r'|/[A-Za-z][A-Za-z0-9-]*\s*'
        r'|!--.*?--'
        r')>',
        re.DOTALL
    )
    _FOOTNOTE_REFERENCE_PATTERN = re.compile(r'\[\^([^\]\s]+)\]')
    _URL_TITLE_PATTERN = re.compile(r'^\s*(<[^<>\n]*>|\S*)(?:\s+("[^"]*"|\'[^\']*\'|\([^()]*\)))?\s*$', re.DOTALL)

    def parse(self, segments: List[Tuple[int, str]]) -> List[MarkdownASTNode]:
        """
        Parse inline content.

        Args:
            segments: The content lines as (source offset, text) pairs, in order

        Returns:
            The inline nodes, in document order
        """
        buffer, offsets = self._build_buffer(segments)
        if not buffer:
            return []

        return self._parse_buffer(buffer, offsets)

    def _build_buffer(self, segments: List[Tuple[int, str]]) -> Tuple[str, List[int]]:
        parts: List[str] = []
        offsets: List[int] = []
        for index, (offset, text) in enumerate(segments):
            if index > 0:
                # The joining newline maps to the end of the previous line
                previous_offset, previous_text = segments[index - 1]
                parts.append('\n')
                offsets.append(previous_offset + len(previous_text))

            parts.append(text)
            offsets.extend(range(offset, offset + len(text)))

        return ''.join(parts), offsets

    def _is_punctuation(self, char: str) -> bool:
        if char in self._ESCAPABLE:
            return True

        return unicodedata.category(char).startswith(('P', 'S'))

    def _scan_delimiter_run(self, buffer: str, start: int, end: int) -> _DelimiterRun:
        char = buffer[start]
        before = buffer[start - 1] if start > 0 else '\n'
        after = buffer[end] if end < len(buffer) else '\n'

        before_space = before.isspace()
        after_space = after.isspace()
        before_punct = self._is_punctuation(before)
        after_punct = self._is_punctuation(after)

        left_flanking = not after_space and (not after_punct or before_space or before_punct)
        right_flanking = not before_space and (not before_punct or after_space or after_punct)

        if char == '*':
            can_open = left_flanking
            can_close = right_flanking

        else:
            can_open = left_flanking and (not right_flanking or before_punct)
            can_close = right_flanking and (not left_flanking or after_punct)

        return _DelimiterRun(char, start, end, can_open, can_close)

    def _run_length(self, buffer: str, start: int) -> int:
        char = buffer[start]
        end = start
        while end < len(buffer) and buffer[end] == char:
            end += 1

        return end - start

    def _find_closing_run(self, buffer: str, start: int, char: str, length: int) -> int:
        """
        Find a run of exactly `length` copies of `char` at or after `start`.

        Returns:
            The offset of the closing run, or -1 if there is none
        """
        i = start
        while i < len(buffer):
            if buffer[i] != char:
                i += 1
                continue

            run = self._run_length(buffer, i)
            if run == length:
                return i

            i += run

        return -1

    def _find_closing_parenthesis(self, buffer: str, start: int) -> int:
        """
        Find the parenthesis closing a link destination, honouring nesting and escapes.

        Args:
            buffer: Text to search
            start: Offset just after the opening parenthesis

        Returns:
            Offset of the closing parenthesis, or -1 if it is not found
        """
        depth = 1
        i = start
        while i < len(buffer):
            char = buffer[i]
            if char == '\\' and i + 1 < len(buffer):
                i += 2
                continue

            if char == '(':
                depth += 1

            elif char == ')':
                depth -= 1
                if depth == 0:
                    return i

            i += 1

        return -1

    def _parse_url_and_title(self, url_title: str) -> Tuple[str, str | None] | None:
        match = self._URL_TITLE_PATTERN.match(url_title)
        if not match:
            return None

        url = match.group(1)
        if url.startswith('<') and url.endswith('>'):
            url = url[1:-1]

        title = match.group(2)
        if title is not None:
            title = title[1:-1]

        return url, title

    def _make_text(self, buffer: str, offsets: List[int], start: int, end: int) -> MarkdownASTTextNode:
        return MarkdownASTTextNode(buffer[start:end], offsets[start], offsets[end - 1] + 1)

    def _to_node(self, item: _InlineItem, buffer: str, offsets: List[int]) -> MarkdownASTNode | None:
        """Convert an unresolved marker to the text it was written as."""
        if isinstance(item, MarkdownASTNode):
            return item

        if isinstance(item, _DelimiterRun):
            if item.count() == 0:
                return None

            return self._make_text(buffer, offsets, item.start, item.end)

        return self._make_text(buffer, offsets, item.start, item.start + item.length())

    def _parse_buffer(self, buffer: str, offsets: List[int]) -> List[MarkdownASTNode]:
        items: List[_InlineItem] = []
        delimiters: List[_DelimiterRun] = []
        brackets: List[_BracketMarker] = []
        text_start = 0
        i = 0

        def flush_text(end: int) -> None:
            if end > text_start:
                items.append(self._make_text(buffer, offsets, text_start, end))

        while i < len(buffer):
            char = buffer[i]

            if char == '\\' and i + 1 < len(buffer) and buffer[i + 1] in self._ESCAPABLE:
                i += 2
                continue

            if char in ('`', '$'):
                run = self._run_length(buffer, i)
                close = self._find_closing_run(buffer, i + run, char, run)
                if close == -1:
                    i += run
                    continue

                flush_text(i)
                content = buffer[i + run:close]
                if char == '`':
                    content = content.replace('\n', ' ')
                    if len(content) > 2 and content.startswith(' ') and content.endswith(' ') and content.strip():
                        content = content[1:-1]

                    items.append(MarkdownASTInlineCodeNode(content, offsets[i], offsets[close + run - 1] + 1))

                else:
                    items.append(MarkdownASTInlineMathNode(content, offsets[i], offsets[close + run - 1] + 1))

                i = close + run
                text_start = i
                continue

            if char == '<':
                angle = self._parse_angle_bracket(buffer, offsets, i)
                if angle is not None:
                    flush_text(i)
                    node, i = angle
                    items.append(node)
                    text_start = i
                    continue

            if char == '!' and i + 1 < len(buffer) and buffer[i + 1] == '[':
                flush_text(i)
                marker = _BracketMarker(i, True, len(delimiters))
                items.append(marker)
                brackets.append(marker)
                i += 2
                text_start = i
                continue

            if char == '[':
                flush_text(i)
                marker = _BracketMarker(i, False, len(delimiters))
                items.append(marker)
                brackets.append(marker)
                i += 1
                text_start = i
                continue

            if char == ']' and brackets:
                flush_text(i)
                text_start = i
                next_i = self._close_bracket(buffer, offsets, i, items, delimiters, brackets)
                if next_i != -1:
                    i = next_i
                    text_start = i
                    continue

                i += 1
                continue

            if char in ('*', '_'):
                flush_text(i)
                run = self._run_length(buffer, i)
                delimiter = self._scan_delimiter_run(buffer, i, i + run)
                items.append(delimiter)
                delimiters.append(delimiter)
                i += run
                text_start = i
                continue

            i += 1

        flush_text(len(buffer))

        # Unmatched brackets are plain text
        items = [
            self._make_text(buffer, offsets, item.start, item.start + item.length())
            if isinstance(item, _BracketMarker) else item
            for item in items
        ]

        items = self._process_emphasis(buffer, offsets, items, delimiters, 0)

        nodes: List[MarkdownASTNode] = []
        for item in items:
            node = self._to_node(item, buffer, offsets)
            if node is not None:
                nodes.append(node)

        return nodes

    def _parse_angle_bracket(
        self,
        buffer: str,
        offsets: List[int],
        start: int
    ) -> Tuple[MarkdownASTNode, int] | None:
        """
        Parse an autolink or inline HTML tag starting with `<`.

        Returns:
            The node and the buffer index after it, or None if neither construct matches
        """
        match = self._AUTOLINK_PATTERN.match(buffer, start)
        if match:
            link = MarkdownASTLinkNode(match.group(1), None, offsets[start], offsets[match.end() - 1] + 1)
            link.add_child(self._make_text(buffer, offsets, start + 1, match.end() - 1))
            return link, match.end()

        match = self._EMAIL_AUTOLINK_PATTERN.match(buffer, start)
        if match:
            link = MarkdownASTLinkNode(f'mailto:{match.group(1)}', None, offsets[start], offsets[match.end() - 1] + 1)
            link.add_child(self._make_text(buffer, offsets, start + 1, match.end() - 1))
            return link, match.end()

        match = self._HTML_TAG_PATTERN.match(buffer, start)
        if match:
            return MarkdownASTHtmlNode(match.group(0), offsets[start], offsets[match.end() - 1] + 1), match.end()

        return None

    def _close_bracket(
        self,
        buffer: str,
        offsets: List[int],
        close: int,
        items: List[_InlineItem],
        delimiters: List[_DelimiterRun],
        brackets: List[_BracketMarker]
    ) -> int:
        """
        Try to turn the most recent bracket into a link, image or footnote reference.

        Returns:
            The buffer index after the construct, or -1 if the `]` is plain text
        """
        opener = brackets.pop()
        if not opener.active:
            self._replace_marker_with_text(buffer, offsets, items, opener)
            return -1

        opener_index = self._index_of(items, opener)

        if not opener.image:
            reference = self._FOOTNOTE_REFERENCE_PATTERN.fullmatch(buffer, opener.start, close + 1)
            if reference:
                del items[opener_index:]
                del delimiters[opener.delimiter_bottom:]
                items.append(
                    MarkdownASTFootnoteReferenceNode(reference.group(1), offsets[opener.start], offsets[close] + 1)
                )
                return close + 1

        if close + 1 >= len(buffer) or buffer[close + 1] != '(':
            self._replace_marker_with_text(buffer, offsets, items, opener)
            return -1

        paren_end = self._find_closing_parenthesis(buffer, close + 2)
        if paren_end == -1:
            self._replace_marker_with_text(buffer, offsets, items, opener)
            return -1

        url_title = self._parse_url_and_title(buffer[close + 2:paren_end])
        if url_title is None:
            self._replace_marker_with_text(buffer, offsets, items, opener)
            return -1

        url, title = url_title
        children = self._process_emphasis(
            buffer, offsets, items[opener_index + 1:], delimiters, opener.delimiter_bottom
        )

        node: MarkdownASTNode
        start = offsets[opener.start]
        end = offsets[paren_end] + 1
        if opener.image:
            node = MarkdownASTImageNode(url, buffer[opener.start + 2:close], title, start, end)

        else:
            node = MarkdownASTLinkNode(url, title, start, end)

            # Links may not contain other links
            for bracket in brackets:
                if not bracket.image:
                    bracket.active = False

        for child in children:
            child_node = self._to_node(child, buffer, offsets)
            if child_node is not None:
                node.add_child(child_node)

        del items[opener_index:]
        items.append(node)
        return paren_end + 1

    def _replace_marker_with_text(
        self,
        buffer: str,
        offsets: List[int],
        items: List[_InlineItem],
        marker: _BracketMarker
    ) -> None:
        index = self._index_of(items, marker)
        items[index] = self._make_text(buffer, offsets, marker.start, marker.start + marker.length())

    def _index_of(self, items: List, target: object) -> int:
        for index, item in enumerate(items):
            if item is target:
                return index

        raise ValueError("Inline item not found")

    def _process_emphasis(
        self,
        buffer: str,
        offsets: List[int],
        items: List[_InlineItem],
        delimiters: List[_DelimiterRun],
        stack_bottom: int
    ) -> List[_InlineItem]:
        """
        Resolve emphasis for the delimiter runs above `stack_bottom`.

        Args:
            buffer: The joined inline content
            offsets: Source offset for every buffer index
            items: The inline items the delimiter runs belong to
            delimiters: The delimiter stack; entries above `stack_bottom` are consumed
            stack_bottom: Index of the first delimiter to consider

        Returns:
            The items with matched runs replaced by emphasis and strong nodes
        """
        closer_index = stack_bottom
        while closer_index < len(delimiters):
            closer = delimiters[closer_index]
            if not closer.can_close:
                closer_index += 1
                continue

            opener_index = closer_index - 1
            opener: _DelimiterRun | None = None
            while opener_index >= stack_bottom:
                candidate = delimiters[opener_index]
                if candidate.char == closer.char and candidate.can_open:
                    # A run that can both open and close only pairs up when the lengths
                    # do not sum to a multiple of 3, unless both are multiples of 3
                    odd_match = (
                        (closer.can_open or candidate.can_close) and
                        (candidate.original_count + closer.original_count) % 3 == 0 and
                        not (candidate.original_count % 3 == 0 and closer.original_count % 3 == 0)
                    )
                    if not odd_match:
                        opener = candidate
                        break

                opener_index -= 1

            if opener is None:
                if not closer.can_open:
                    del delimiters[closer_index]
                    continue

                closer_index += 1
                continue

            use = 2 if opener.count() >= 2 and closer.count() >= 2 else 1
            start = offsets[opener.end - use]
            end = offsets[closer.start + use - 1] + 1
            node: MarkdownASTNode
            if use == 2:
                node = MarkdownASTStrongNode(closer.char, start, end)

            else:
                node = MarkdownASTEmphasisNode(closer.char, start, end)

            opener_item = self._index_of(items, opener)
            closer_item = self._index_of(items, closer)
            for child in items[opener_item + 1:closer_item]:
                child_node = self._to_node(child, buffer, offsets)
                if child_node is not None:
                    node.add_child(child_node)

            items = items[:opener_item + 1] + [node] + items[closer_item:]
            del delimiters[opener_index + 1:closer_index]
            closer_index = opener_index + 1

            opener.end -= use
            closer.start += use

            if opener.count() == 0:
                items.remove(opener)
                del delimiters[opener_index]
                closer_index -= 1

            if closer.count() == 0:
                items.remove(closer)
                del delimiters[closer_index]

        del delimiters[stack_bottom:]
        return items
