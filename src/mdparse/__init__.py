"""A position-preserving parser for Markdown."""

from mdparse.markdown_ast_builder import MarkdownASTBuilder
from mdparse.markdown_ast_node import (
    MarkdownASTBlockquoteNode,
    MarkdownASTCodeBlockNode,
    MarkdownASTDocumentNode,
    MarkdownASTEmphasisNode,
    MarkdownASTFootnoteDefinitionNode,
    MarkdownASTFootnoteReferenceNode,
    MarkdownASTHeadingNode,
    MarkdownASTHtmlNode,
    MarkdownASTImageNode,
    MarkdownASTInlineCodeNode,
    MarkdownASTInlineMathNode,
    MarkdownASTLinkNode,
    MarkdownASTListItemNode,
    MarkdownASTListNode,
    MarkdownASTMathNode,
    MarkdownASTNode,
    MarkdownASTNodeType,
    MarkdownASTParagraphNode,
    MarkdownASTStrongNode,
    MarkdownASTTextNode,
    MarkdownASTThematicBreakNode,
    MarkdownASTVisitor,
    MarkdownASTYamlNode
)
from mdparse.markdown_inline_parser import MarkdownInlineParser
from mdparse.markdown_parser import MarkdownParser, default_parser, parse_text_to_ast, set_default_parser
from mdparse.markdown_position_cache import MarkdownPositionCache, hash_string_53_bit
from mdparse.markdown_positions import get_list_item_text_positions, get_nodes, get_positions


__all__ = [
    "MarkdownASTBlockquoteNode",
    "MarkdownASTBuilder",
    "MarkdownASTCodeBlockNode",
    "MarkdownASTDocumentNode",
    "MarkdownASTEmphasisNode",
    "MarkdownASTFootnoteDefinitionNode",
    "MarkdownASTFootnoteReferenceNode",
    "MarkdownASTHeadingNode",
    "MarkdownASTHtmlNode",
    "MarkdownASTImageNode",
    "MarkdownASTInlineCodeNode",
    "MarkdownASTInlineMathNode",
    "MarkdownASTLinkNode",
    "MarkdownASTListItemNode",
    "MarkdownASTListNode",
    "MarkdownASTMathNode",
    "MarkdownASTNode",
    "MarkdownASTNodeType",
    "MarkdownASTParagraphNode",
    "MarkdownASTStrongNode",
    "MarkdownASTTextNode",
    "MarkdownASTThematicBreakNode",
    "MarkdownASTVisitor",
    "MarkdownASTYamlNode",
    "MarkdownInlineParser",
    "MarkdownParser",
    "MarkdownPositionCache",
    "default_parser",
    "get_list_item_text_positions",
    "get_nodes",
    "get_positions",
    "hash_string_53_bit",
    "parse_text_to_ast",
    "set_default_parser",
]
