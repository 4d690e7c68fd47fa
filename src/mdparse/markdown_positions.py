"""
Position extraction from parsed Markdown.

All functions return results ordered by descending start offset.  Callers rely
on that order: applying edits from the last span to the first keeps the offsets
of the spans still to be processed valid.
"""

from typing import List

from mdparse.markdown_ast_node import MarkdownASTNode, MarkdownASTNodeType, MarkdownASTVisitor
from mdparse.markdown_parser import default_parser
from textedit import Span


class _NodeCollector(MarkdownASTVisitor):
    """Visitor that collects every node of one kind, in document order."""

    def __init__(self, node_type: MarkdownASTNodeType, exclude_nested: bool) -> None:
        self._node_type = node_type
        self._exclude_nested = exclude_nested
        self.nodes: List[MarkdownASTNode] = []

    def generic_visit(self, node: MarkdownASTNode) -> List[None]:
        if node.node_type == self._node_type:
            if not (self._exclude_nested and node.has_ancestor_of_type(self._node_type)):
                self.nodes.append(node)

        return super().generic_visit(node)


def get_nodes(node_type: MarkdownASTNodeType, text: str, exclude_nested: bool = False) -> List[MarkdownASTNode]:
    """
    Find every node of a given kind.

    Args:
        node_type: The kind of node to find
        text: Markdown text
        exclude_nested: If True, skip nodes that sit inside another node of the same kind

    Returns:
        The nodes, ordered by descending start offset
    """
    collector = _NodeCollector(node_type, exclude_nested)
    collector.visit(default_parser().parse_text_to_ast(text))
    return sorted(collector.nodes, key=lambda node: node.start, reverse=True)


def get_positions(node_type: MarkdownASTNodeType, text: str, exclude_nested: bool = False) -> List[Span]:
    """
    Find the spans of every node of a given kind.

    Args:
        node_type: The kind of node to find
        text: Markdown text
        exclude_nested: If True, skip nodes that sit inside another node of the same kind

    Returns:
        The spans, ordered by descending start offset
    """
    return [Span(node.start, node.end) for node in get_nodes(node_type, text, exclude_nested)]


def get_list_item_text_positions(text: str) -> List[Span]:
    """
    Find the spans of the paragraphs directly inside list items.

    Args:
        text: Markdown text

    Returns:
        The spans, ordered by descending start offset
    """
    return [
        Span(node.start, node.end)
        for node in get_nodes(MarkdownASTNodeType.PARAGRAPH, text)
        if node.parent is not None and node.parent.node_type == MarkdownASTNodeType.LIST_ITEM
    ]
