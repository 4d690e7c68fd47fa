"""
Parser to construct an AST from Markdown.

The builder works line by line, keeping a stack of open containers (blockquotes,
lists, list items and footnote definitions).  Every node records the source
offsets it covers so callers can edit the original text without re-rendering it.
"""

import logging
import re
from typing import List, Tuple

from mdparse.markdown_ast_node import (
    MarkdownASTBlockquoteNode, MarkdownASTCodeBlockNode, MarkdownASTDocumentNode,
    MarkdownASTFootnoteDefinitionNode, MarkdownASTHeadingNode, MarkdownASTHtmlNode, MarkdownASTListItemNode,
    MarkdownASTListNode, MarkdownASTMathNode, MarkdownASTNode, MarkdownASTParagraphNode,
    MarkdownASTThematicBreakNode, MarkdownASTYamlNode
)
from mdparse.markdown_inline_parser import MarkdownInlineParser


class ContainerContext:
    """
    Represents a container that can hold block elements.

    This tracks the current nesting context during parsing, allowing proper
    handling of block elements within lists, blockquotes, and footnote definitions.
    """

    def __init__(self, node: MarkdownASTNode, container_type: str, content_indent: int = 0) -> None:
        """
        Initialize a container context.

        Args:
            node: The AST node representing this container
            container_type: Type identifier ('document', 'blockquote', 'list', 'list_item',
                'footnote_definition')
            content_indent: Columns of indentation a line needs to continue this container,
                measured from the start of the parent container's content
        """
        self.node = node
        self.container_type = container_type
        self.content_indent = content_indent


class _LineCursor:
    """Tracks how much of a line has been consumed by container markers."""

    def __init__(self, line: str, line_offset: int) -> None:
        self.line = line
        self.line_offset = line_offset
        self.pos = 0
        self.column = 0

    def offset(self) -> int:
        return self.line_offset + self.pos

    def rest(self) -> str:
        return self.line[self.pos:]

    def peek(self, ahead: int = 0) -> str:
        index = self.pos + ahead
        if index < len(self.line):
            return self.line[index]

        return ''

    def is_blank(self) -> bool:
        return self.line[self.pos:].strip() == ''

    def indent(self) -> int:
        column = self.column
        index = self.pos
        while index < len(self.line) and self.line[index] in ' \t':
            column = column + 4 - column % 4 if self.line[index] == '\t' else column + 1
            index += 1

        return column - self.column

    def advance(self, count: int) -> None:
        for _ in range(count):
            if self.pos >= len(self.line):
                return

            if self.line[self.pos] == '\t':
                self.column += 4 - self.column % 4

            else:
                self.column += 1

            self.pos += 1

    def advance_columns(self, columns: int) -> None:
        target = self.column + columns
        while self.column < target and self.pos < len(self.line) and self.line[self.pos] in ' \t':
            self.advance(1)

    def skip_spaces(self) -> None:
        while self.pos < len(self.line) and self.line[self.pos] in ' \t':
            self.advance(1)

    def copy(self) -> '_LineCursor':
        cursor = _LineCursor(self.line, self.line_offset)
        cursor.pos = self.pos
        cursor.column = self.column
        return cursor


_HTML_BLOCK_TAGS = (
    'address|article|aside|base|basefont|blockquote|body|caption|center|col|colgroup|dd|details|dialog|'
    'dir|div|dl|dt|fieldset|figcaption|figure|footer|form|frame|frameset|h1|h2|h3|h4|h5|h6|head|header|hr|'
    'html|iframe|legend|li|link|main|menu|menuitem|nav|noframes|ol|optgroup|option|p|param|search|section|'
    'summary|table|tbody|td|tfoot|th|thead|title|tr|track|ul'
)


class MarkdownASTBuilder:
    """
    Builder class for constructing an AST from markdown text.

    The builder is deterministic and never fails: anything that is not recognised
    as a more specific construct becomes paragraph text.
    """

    # (start pattern, end pattern or None for "ends at a blank line", can interrupt a paragraph)
    _HTML_BLOCK_PATTERNS: List[Tuple[re.Pattern, re.Pattern | None, bool]] = [
        (
            re.compile(r'<(?:script|pre|style|textarea)(?:[ \t>]|$)', re.IGNORECASE),
            re.compile(r'</(?:script|pre|style|textarea)>', re.IGNORECASE),
            True
        ),
        (re.compile(r'<!--'), re.compile(r'-->'), True),
        (re.compile(r'<\?'), re.compile(r'\?>'), True),
        (re.compile(r'<!\[CDATA\['), re.compile(r'\]\]>'), True),
        (re.compile(r'<![A-Za-z]'), re.compile(r'>'), True),
        (re.compile(rf'</?(?:{_HTML_BLOCK_TAGS})(?:[ \t]|/?>|$)', re.IGNORECASE), None, True),
        (
            re.compile(
                r'(?:<[A-Za-z][A-Za-z0-9-]*'
                r'(?:[ \t]+[A-Za-z_:][A-Za-z0-9_.:-]*(?:[ \t]*=[ \t]*(?:[^\s"\'=<>`]+|\'[^\']*\'|"[^"]*"))?)*'
                r'[ \t]*/?>|</[A-Za-z][A-Za-z0-9-]*[ \t]*>)[ \t]*$'
            ),
            None,
            False
        ),
    ]

    def __init__(self) -> None:
        """Initialize the AST builder with regex patterns for markdown elements."""
        # Regular expressions for markdown elements
        self._yaml_pattern = re.compile(r'---\n(?:.*?\n)?---(?=\n|$)', re.DOTALL)
        self._atx_heading_pattern = re.compile(r'(#{1,6})(?=[ \t]|$)')
        self._atx_closing_pattern = re.compile(r'(?:^|[ \t]+)#+[ \t]*$')
        self._thematic_break_pattern = re.compile(r'(?:(?:\*[ \t]*){3,}|(?:-[ \t]*){3,}|(?:_[ \t]*){3,})$')
        self._setext_underline_pattern = re.compile(r'(=+|-+)[ \t]*$')
        self._bullet_pattern = re.compile(r'([-+*])(?=[ \t]|$)')
        self._ordered_pattern = re.compile(r'(\d{1,9})([.)])(?=[ \t]|$)')
        self._task_pattern = re.compile(r'\[([ xX])\](?=[ \t]|$)')
        self._footnote_definition_pattern = re.compile(r'\[\^([^\]\s]+)\]:')
        self._code_fence_pattern = re.compile(r'(`{3,})([^`]*)$|(~{3,})(.*)$')
        self._math_fence_pattern = re.compile(r'(\${2,})([^$]*)$')

        self._logger = logging.getLogger("MarkdownASTBuilder")
        self._inline_parser = MarkdownInlineParser()

        self._document = MarkdownASTDocumentNode()
        self._container_stack: List[ContainerContext] = []

        # Open leaf state
        self._paragraph: MarkdownASTParagraphNode | None = None
        self._paragraph_segments: List[Tuple[int, str]] = []
        self._fenced_block: MarkdownASTCodeBlockNode | MarkdownASTMathNode | None = None
        self._fence_char = ''
        self._fence_length = 0
        self._fence_indent = 0
        self._fenced_content: List[str] = []
        self._indented_code: MarkdownASTCodeBlockNode | None = None
        self._html_block: MarkdownASTHtmlNode | None = None
        self._html_end_pattern: re.Pattern | None = None

        # Blocks whose inline content gets parsed once all lines are seen
        self._inline_blocks: List[Tuple[MarkdownASTNode, List[Tuple[int, str]]]] = []

    def document(self) -> MarkdownASTDocumentNode:
        """
        Get the current document node.

        Returns:
            The document node
        """
        return self._document

    def _current_container(self) -> MarkdownASTNode:
        """
        Get the current container for adding block elements.

        Returns:
            The AST node that should receive new block elements
        """
        assert self._container_stack, "Container stack should never be empty"
        return self._container_stack[-1].node

    def _extend_open_containers(self, end: int, depth: int | None = None) -> None:
        """
        Extend the end offset of open containers to cover a new piece of content.

        Args:
            end: Offset one past the new content
            depth: Number of stack entries to extend, or None for all of them
        """
        contexts = self._container_stack if depth is None else self._container_stack[:depth]
        for context in contexts:
            if context.container_type != 'document' and context.node.end < end:
                context.node.end = end

    def _add_block(self, node: MarkdownASTNode) -> None:
        self._close_list_if_top()
        self._current_container().add_child(node)
        self._extend_open_containers(node.end)

    def _close_list_if_top(self) -> None:
        """Lists only hold list items, so any other block ends an open list."""
        if self._container_stack[-1].container_type == 'list':
            self._container_stack.pop()

    def _close_containers(self, depth: int) -> None:
        """
        Close containers until only `depth` remain on the stack.

        Args:
            depth: Number of containers to keep open
        """
        if len(self._container_stack) > depth:
            self._close_paragraph()

        while len(self._container_stack) > depth:
            context = self._container_stack.pop()
            self._logger.debug("closing %s at offset %d", context.container_type, context.node.end)

    def _close_paragraph(self) -> None:
        if self._paragraph is None:
            return

        self._inline_blocks.append((self._paragraph, self._paragraph_segments))
        self._paragraph = None
        self._paragraph_segments = []

    def _close_fenced_block(self) -> None:
        if self._fenced_block is None:
            return

        self._fenced_block.content = '\n'.join(self._fenced_content)
        self._fenced_block = None
        self._fenced_content = []

    def _close_leaf_blocks(self) -> None:
        self._close_paragraph()
        self._close_fenced_block()
        self._indented_code = None
        self._html_block = None
        self._html_end_pattern = None

    def _match_continuation(self, cursor: _LineCursor) -> int:
        """
        Work out how many of the open containers this line continues.

        Args:
            cursor: Cursor positioned at the start of the line; consumed container markers
                are skipped

        Returns:
            The number of stack entries, including the document, that the line continues
        """
        matched = 1
        for context in self._container_stack[1:]:
            if context.container_type == 'list':
                matched += 1
                continue

            if context.container_type == 'blockquote':
                probe = cursor.copy()
                probe.skip_spaces()
                if cursor.indent() > 3 or probe.peek() != '>':
                    break

                cursor.skip_spaces()
                cursor.advance(1)
                marker_end = cursor.offset()
                if cursor.peek() in (' ', '\t'):
                    cursor.advance_columns(1)

                matched += 1
                self._extend_open_containers(marker_end, matched)
                continue

            # List items and footnote definitions continue on blank or indented lines
            if cursor.is_blank():
                matched += 1
                continue

            if cursor.indent() >= context.content_indent:
                cursor.advance_columns(context.content_indent)
                matched += 1
                continue

            break

        return matched

    def _match_list_marker(self, cursor: _LineCursor) -> Tuple[bool, str, int, int] | None:
        """
        Check whether the cursor is at a list item marker.

        Returns:
            Tuple of (ordered, marker, start number, marker width) or None
        """
        rest = cursor.rest()
        match = self._bullet_pattern.match(rest)
        if match:
            return False, match.group(1), 1, 1

        match = self._ordered_pattern.match(rest)
        if match:
            return True, match.group(2), int(match.group(1)), len(match.group(0))

        return None

    def _html_block_start(self, rest: str) -> Tuple[re.Pattern | None, bool] | None:
        for start_pattern, end_pattern, can_interrupt in self._HTML_BLOCK_PATTERNS:
            if start_pattern.match(rest):
                return end_pattern, can_interrupt

        return None

    def _starts_new_block(self, cursor: _LineCursor, matched: int) -> bool:
        """
        Check whether a line would start a block that can interrupt a paragraph.

        Args:
            cursor: Cursor positioned after any matched container markers
            matched: Number of open containers the line continues

        Returns:
            True if the line is not a lazy paragraph continuation
        """
        probe = cursor.copy()
        if probe.indent() >= 4:
            return False

        probe.skip_spaces()
        rest = probe.rest()
        if rest.startswith('>'):
            return True

        if self._thematic_break_pattern.match(rest) or self._atx_heading_pattern.match(rest):
            return True

        if self._code_fence_pattern.match(rest) or self._math_fence_pattern.match(rest):
            return True

        if self._footnote_definition_pattern.match(rest):
            return True

        html = self._html_block_start(rest)
        if html is not None and html[1]:
            return True

        marker = self._match_list_marker(probe)
        if marker is not None:
            ordered, _marker, number, width = marker
            if rest[width:].strip() and (not ordered or number == 1 or self._continues_list(matched, marker)):
                return True

        return False

    def _continues_list(self, matched: int, marker: Tuple[bool, str, int, int]) -> bool:
        """
        Check whether a list marker adds an item to a list the line is already inside.

        Args:
            matched: Number of open containers the line continues
            marker: The list marker found on the line

        Returns:
            True if the innermost continued container is a list of the same kind
        """
        context = self._container_stack[matched - 1]
        if context.container_type != 'list':
            return False

        list_node = context.node
        assert isinstance(list_node, MarkdownASTListNode)
        return list_node.ordered == marker[0] and list_node.marker == marker[1]

    def _open_containers(self, cursor: _LineCursor) -> bool:
        """
        Open any new blockquotes, list items and footnote definitions that start on this line.

        Args:
            cursor: Cursor positioned after the matched containers

        Returns:
            True if at least one container was opened
        """
        opened = False
        while not cursor.is_blank():
            marker_indent = cursor.indent()
            if marker_indent >= 4:
                break

            probe = cursor.copy()
            probe.skip_spaces()
            rest = probe.rest()

            if rest.startswith('>'):
                cursor.skip_spaces()
                start = cursor.offset()
                cursor.advance(1)
                if cursor.peek() in (' ', '\t'):
                    cursor.advance_columns(1)

                self._close_paragraph()
                blockquote = MarkdownASTBlockquoteNode(start, start + 1)
                self._add_block(blockquote)
                self._container_stack.append(ContainerContext(blockquote, 'blockquote'))
                opened = True
                continue

            # A thematic break wins over a bullet made of the same characters
            if self._thematic_break_pattern.match(rest):
                break

            marker = self._match_list_marker(probe)
            if marker is not None and self._open_list_item(cursor, marker, marker_indent):
                opened = True
                continue

            footnote = self._footnote_definition_pattern.match(rest)
            if footnote is not None:
                cursor.skip_spaces()
                start = cursor.offset()
                cursor.advance(len(footnote.group(0)))
                cursor.skip_spaces()

                self._close_paragraph()
                definition = MarkdownASTFootnoteDefinitionNode(footnote.group(1), start, start + len(footnote.group(0)))
                self._add_block(definition)
                self._container_stack.append(
                    ContainerContext(definition, 'footnote_definition', marker_indent + 4)
                )
                opened = True
                continue

            break

        return opened

    def _open_list_item(self, cursor: _LineCursor, marker: Tuple[bool, str, int, int], marker_indent: int) -> bool:
        ordered, marker_char, number, width = marker
        probe = cursor.copy()
        probe.skip_spaces()
        probe.advance(width)
        empty_item = probe.is_blank()

        # Only bullets and lists starting at 1 may interrupt a paragraph, and never when empty
        if self._paragraph is not None and (empty_item or (ordered and number != 1)):
            return False

        cursor.skip_spaces()
        start = cursor.offset()
        cursor.advance(width)

        spaces = cursor.indent()
        if empty_item:
            content_indent = marker_indent + width + 1

        elif spaces > 4:
            content_indent = marker_indent + width + 1
            cursor.advance_columns(1)

        else:
            content_indent = marker_indent + width + spaces
            cursor.advance_columns(spaces)

        checked: bool | None = None
        task = self._task_pattern.match(cursor.rest())
        if task is not None and not empty_item:
            checked = task.group(1) != ' '
            cursor.advance(3)
            cursor.skip_spaces()

        self._close_paragraph()

        top = self._container_stack[-1]
        if top.container_type == 'list':
            list_node = top.node
            assert isinstance(list_node, MarkdownASTListNode)
            if list_node.ordered != ordered or list_node.marker != marker_char:
                self._container_stack.pop()

        if self._container_stack[-1].container_type != 'list':
            list_node = MarkdownASTListNode(ordered, marker_char, number, start, start + width)
            self._current_container().add_child(list_node)
            self._container_stack.append(ContainerContext(list_node, 'list'))
            self._logger.debug("opened %s list at offset %d", 'ordered' if ordered else 'bullet', start)

        item = MarkdownASTListItemNode(checked, start, start + width)
        self._current_container().add_child(item)
        self._extend_open_containers(item.end)
        self._container_stack.append(ContainerContext(item, 'list_item', content_indent))
        return True

    def _add_paragraph_line(self, cursor: _LineCursor) -> None:
        cursor.skip_spaces()
        start = cursor.offset()
        text = cursor.rest().rstrip()
        assert self._paragraph is not None
        self._paragraph_segments.append((start, text))
        self._paragraph.end = start + len(text)
        self._extend_open_containers(self._paragraph.end)

    def _start_paragraph(self, cursor: _LineCursor) -> None:
        cursor.skip_spaces()
        start = cursor.offset()
        text = cursor.rest().rstrip()
        paragraph = MarkdownASTParagraphNode(start, start + len(text))
        self._add_block(paragraph)
        self._paragraph = paragraph
        self._paragraph_segments = [(start, text)]

    def _convert_paragraph_to_setext_heading(self, cursor: _LineCursor, underline: str) -> None:
        paragraph = self._paragraph
        assert paragraph is not None and paragraph.parent is not None

        heading = MarkdownASTHeadingNode(1 if underline[0] == '=' else 2, True, paragraph.start)
        heading.end = cursor.offset() + len(underline.rstrip())
        parent = paragraph.parent
        index = parent.children.index(paragraph)
        parent.remove_child(paragraph)
        parent.children.insert(index, heading)
        heading.parent = parent

        self._inline_blocks.append((heading, self._paragraph_segments))
        self._paragraph = None
        self._paragraph_segments = []
        self._extend_open_containers(heading.end)

    def _parse_atx_heading(self, cursor: _LineCursor, hashes: str) -> None:
        start = cursor.offset()
        rest = cursor.rest().rstrip()
        content = rest[len(hashes):]
        content_start = len(hashes) + (len(content) - len(content.lstrip()))
        content = self._atx_closing_pattern.sub('', content.strip())

        heading = MarkdownASTHeadingNode(len(hashes), False, start, start + len(rest))
        self._add_block(heading)
        if content:
            self._inline_blocks.append((heading, [(start + content_start, content)]))

    def _start_fenced_block(self, cursor: _LineCursor, fence: str, info: str, indent: int) -> None:
        start = cursor.offset()
        node: MarkdownASTCodeBlockNode | MarkdownASTMathNode
        if fence[0] == '$':
            node = MarkdownASTMathNode(fence, start, start + len(cursor.rest().rstrip()))

        else:
            node = MarkdownASTCodeBlockNode(fence, info.strip(), start, start + len(cursor.rest().rstrip()))

        self._add_block(node)
        self._fenced_block = node
        self._fence_char = fence[0]
        self._fence_length = len(fence)
        self._fence_indent = indent
        self._fenced_content = []

    def _continue_fenced_block(self, cursor: _LineCursor) -> None:
        """Add a line to the open fenced block, closing it on a matching fence."""
        assert self._fenced_block is not None
        if cursor.indent() < 4:
            probe = cursor.copy()
            probe.skip_spaces()
            rest = probe.rest().rstrip()
            if (
                len(rest) >= self._fence_length and
                rest == self._fence_char * len(rest)
            ):
                self._fenced_block.end = probe.offset() + len(rest)
                self._extend_open_containers(self._fenced_block.end)
                self._close_fenced_block()
                return

        cursor.advance_columns(self._fence_indent)
        self._fenced_content.append(cursor.rest())
        if not cursor.is_blank():
            self._fenced_block.end = cursor.offset() + len(cursor.rest().rstrip())
            self._extend_open_containers(self._fenced_block.end)

    def _start_html_block(self, cursor: _LineCursor, end_pattern: re.Pattern | None) -> None:
        start = cursor.offset()
        rest = cursor.rest().rstrip()
        html = MarkdownASTHtmlNode(rest, start, start + len(rest))
        self._add_block(html)
        self._html_block = html
        self._html_end_pattern = end_pattern
        if end_pattern is not None and end_pattern.search(rest, 1):
            self._html_block = None
            self._html_end_pattern = None

    def _continue_html_block(self, cursor: _LineCursor) -> None:
        assert self._html_block is not None
        rest = cursor.rest().rstrip()
        self._html_block.content += '\n' + rest
        if rest.strip():
            self._html_block.end = cursor.offset() + len(rest)
            self._extend_open_containers(self._html_block.end)

        if self._html_end_pattern is not None and self._html_end_pattern.search(rest):
            self._html_block = None
            self._html_end_pattern = None

    def _parse_line(self, line: str, line_offset: int) -> None:
        """
        Parse a single line and add the resulting nodes to the AST.

        Args:
            line: The line to parse, without its newline
            line_offset: Offset of the line's first character in the document
        """
        cursor = _LineCursor(line, line_offset)
        matched = self._match_continuation(cursor)
        all_matched = matched == len(self._container_stack)

        # Leaf blocks that swallow their lines whole
        if self._fenced_block is not None:
            if all_matched:
                self._continue_fenced_block(cursor)
                return

            self._close_fenced_block()

        if self._indented_code is not None:
            if all_matched and (cursor.is_blank() or cursor.indent() >= 4):
                if not cursor.is_blank():
                    cursor.advance_columns(4)
                    self._indented_code.content += '\n' + cursor.rest()
                    self._indented_code.end = cursor.offset() + len(cursor.rest().rstrip())
                    self._extend_open_containers(self._indented_code.end)

                return

            self._indented_code = None

        if self._html_block is not None:
            if all_matched and not (self._html_end_pattern is None and cursor.is_blank()):
                self._continue_html_block(cursor)
                return

            self._html_block = None
            self._html_end_pattern = None

        if not all_matched:
            if self._paragraph is not None and not cursor.is_blank() and not self._starts_new_block(cursor, matched):
                # Lazy continuation line
                self._add_paragraph_line(cursor)
                return

            self._close_containers(matched)

        opened = self._open_containers(cursor)

        if cursor.is_blank():
            self._close_paragraph()
            return

        indent = cursor.indent()
        if indent >= 4:
            if self._paragraph is not None and not opened:
                self._add_paragraph_line(cursor)
                return

            self._close_paragraph()
            cursor.advance_columns(4)
            start = cursor.offset()
            code = MarkdownASTCodeBlockNode('', '', start, start + len(cursor.rest().rstrip()))
            code.content = cursor.rest()
            self._add_block(code)
            self._indented_code = code
            return

        cursor.skip_spaces()
        rest = cursor.rest()

        if self._paragraph is not None and not opened:
            underline = self._setext_underline_pattern.match(rest)
            if underline is not None:
                self._convert_paragraph_to_setext_heading(cursor, rest)
                return

        if self._thematic_break_pattern.match(rest):
            self._close_paragraph()
            start = cursor.offset()
            self._add_block(MarkdownASTThematicBreakNode(start, start + len(rest.rstrip())))
            return

        heading = self._atx_heading_pattern.match(rest)
        if heading is not None:
            self._close_paragraph()
            self._parse_atx_heading(cursor, heading.group(1))
            return

        fence = self._code_fence_pattern.match(rest)
        if fence is not None:
            self._close_paragraph()
            if fence.group(1):
                self._start_fenced_block(cursor, fence.group(1), fence.group(2), indent)

            else:
                self._start_fenced_block(cursor, fence.group(3), fence.group(4), indent)

            return

        math = self._math_fence_pattern.match(rest)
        if math is not None:
            self._close_paragraph()
            self._start_fenced_block(cursor, math.group(1), math.group(2), indent)
            return

        html = self._html_block_start(rest)
        if html is not None and (html[1] or self._paragraph is None or opened):
            self._close_paragraph()
            self._start_html_block(cursor, html[0])
            return

        if self._paragraph is not None and not opened:
            self._add_paragraph_line(cursor)
            return

        self._close_paragraph()
        self._start_paragraph(cursor)

    def build_ast(self, text: str) -> MarkdownASTDocumentNode:
        """
        Build a complete AST from the given text.

        Args:
            text: The markdown text to parse

        Returns:
            The document root node
        """
        self._document = MarkdownASTDocumentNode(0, len(text))
        self._container_stack = [ContainerContext(self._document, 'document')]
        self._paragraph = None
        self._paragraph_segments = []
        self._fenced_block = None
        self._fenced_content = []
        self._indented_code = None
        self._html_block = None
        self._html_end_pattern = None
        self._inline_blocks = []

        body_start = 0
        yaml = self._yaml_pattern.match(text)
        if yaml is not None:
            value = text[4:yaml.end() - 3].rstrip('\n')
            self._document.add_child(MarkdownASTYamlNode(value, 0, yaml.end()))
            body_start = yaml.end()

        offset = 0
        for line in text.split('\n'):
            if offset >= body_start:
                self._parse_line(line, offset)

            offset += len(line) + 1

        self._close_leaf_blocks()
        self._close_containers(1)

        for node, segments in self._inline_blocks:
            for child in self._inline_parser.parse(segments):
                node.add_child(child)

        self._logger.debug("built AST with %d top level nodes", len(self._document.children))
        return self._document
