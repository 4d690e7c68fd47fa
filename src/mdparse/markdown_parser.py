"""
Markdown parser adapter.

Parsing is the expensive step of every rewrite operation, and a single lint run
parses the same text many times, so parsed trees are memoised by content hash.
Trees handed out by the parser are shared between callers and must be treated
as read-only.
"""

from mdparse.markdown_ast_builder import MarkdownASTBuilder
from mdparse.markdown_ast_node import MarkdownASTDocumentNode
from mdparse.markdown_position_cache import MarkdownPositionCache, hash_string_53_bit


class MarkdownParser:
    """Parses Markdown text into position-annotated syntax trees, with memoisation."""

    def __init__(self, cache: MarkdownPositionCache[MarkdownASTDocumentNode] | None = None) -> None:
        """
        Initialize the parser.

        Args:
            cache: Cache for parsed trees; a new default-sized cache is created if omitted
        """
        self._cache: MarkdownPositionCache[MarkdownASTDocumentNode] = (
            cache if cache is not None else MarkdownPositionCache()
        )

    def cache(self) -> MarkdownPositionCache[MarkdownASTDocumentNode]:
        """
        Get the cache used by this parser.

        Returns:
            The parse cache
        """
        return self._cache

    def parse_text_to_ast(self, text: str) -> MarkdownASTDocumentNode:
        """
        Parse text into a syntax tree, reusing a cached tree for identical text.

        Args:
            text: Markdown text

        Returns:
            The document root node
        """
        key = hash_string_53_bit(text)
        document = self._cache.get(key)
        if document is not None:
            return document

        document = MarkdownASTBuilder().build_ast(text)
        self._cache.set(key, document)
        return document


_default_parser = MarkdownParser()


def default_parser() -> MarkdownParser:
    """
    Get the process-wide parser used by the rewrite operations.

    Returns:
        The default parser
    """
    return _default_parser


def set_default_parser(parser: MarkdownParser) -> MarkdownParser:
    """
    Replace the process-wide parser, for example to isolate a cache per thread or test.

    Args:
        parser: The parser to use from now on

    Returns:
        The parser that was previously the default
    """
    global _default_parser  # pylint: disable=global-statement
    previous = _default_parser
    _default_parser = parser
    return previous


def parse_text_to_ast(text: str) -> MarkdownASTDocumentNode:
    """
    Parse text with the default parser.

    Args:
        text: Markdown text

    Returns:
        The document root node
    """
    return _default_parser.parse_text_to_ast(text)
