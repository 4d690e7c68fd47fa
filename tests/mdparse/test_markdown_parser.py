"""Tests for the parser adapter and its position cache."""

import pytest

from mdparse import (
    MarkdownASTNodeType,
    MarkdownParser,
    MarkdownPositionCache,
    default_parser,
    hash_string_53_bit,
    parse_text_to_ast,
    set_default_parser
)


class TestHashString53Bit:
    """Test the cache key hash."""

    def test_hash_is_deterministic(self):
        """Test that the same text always hashes the same."""
        assert hash_string_53_bit("# Heading\n\ntext") == hash_string_53_bit("# Heading\n\ntext")

    def test_hash_is_in_range(self):
        """Test that hashes fit in 53 bits."""
        for text in ("", "a", "longer text with unicode: é中", "x" * 1000):
            value = hash_string_53_bit(text)
            assert 0 <= value < 2 ** 53

    def test_different_text_hashes_differently(self):
        """Test that small changes to the text change the hash."""
        assert hash_string_53_bit("- a\n- b") != hash_string_53_bit("- a\n* b")

    def test_seed_changes_hash(self):
        """Test that a seed gives an independent hash."""
        assert hash_string_53_bit("text", seed=1) != hash_string_53_bit("text")


class TestMarkdownPositionCache:
    """Test the bounded least-recently-used cache."""

    def test_get_missing_entry(self):
        """Test that a missing key returns None."""
        cache = MarkdownPositionCache()
        assert cache.get(1) is None

    def test_set_and_get(self):
        """Test storing and reading an entry."""
        cache = MarkdownPositionCache()
        cache.set(1, "one")
        assert cache.get(1) == "one"
        assert 1 in cache
        assert len(cache) == 1

    def test_default_size(self):
        """Test the default cache bound."""
        assert MarkdownPositionCache().max_size() == MarkdownPositionCache.DEFAULT_MAX_SIZE

    def test_evicts_least_recently_used(self):
        """Test that a full cache evicts the entry unused for longest."""
        cache = MarkdownPositionCache(max_size=2)
        cache.set(1, "one")
        cache.set(2, "two")

        # Reading 1 makes 2 the least recently used entry
        assert cache.get(1) == "one"
        cache.set(3, "three")

        assert 2 not in cache
        assert cache.get(1) == "one"
        assert cache.get(3) == "three"
        assert len(cache) == 2

    def test_overwrite_refreshes_entry(self):
        """Test that setting an existing key refreshes it."""
        cache = MarkdownPositionCache(max_size=2)
        cache.set(1, "one")
        cache.set(2, "two")
        cache.set(1, "uno")
        cache.set(3, "three")

        assert cache.get(1) == "uno"
        assert 2 not in cache

    def test_clear(self):
        """Test removing all entries."""
        cache = MarkdownPositionCache()
        cache.set(1, "one")
        cache.clear()
        assert len(cache) == 0

    def test_invalid_size_raises(self):
        """Test that a cache must hold at least one entry."""
        with pytest.raises(ValueError):
            MarkdownPositionCache(max_size=0)


class TestMarkdownParser:
    """Test the memoising parser."""

    def test_identical_text_reuses_tree(self, parser):
        """Test that parsing the same text twice returns the cached tree."""
        first = parser.parse_text_to_ast("# Heading")
        second = parser.parse_text_to_ast("# Heading")
        assert first is second
        assert len(parser.cache()) == 1

    def test_different_text_parsed_separately(self, parser):
        """Test that different text gets its own tree."""
        first = parser.parse_text_to_ast("# Heading")
        second = parser.parse_text_to_ast("Paragraph")
        assert first is not second
        assert first.children[0].node_type == MarkdownASTNodeType.HEADING
        assert second.children[0].node_type == MarkdownASTNodeType.PARAGRAPH
        assert len(parser.cache()) == 2

    def test_injected_cache_used(self):
        """Test that the parser stores trees in the cache it was given."""
        cache = MarkdownPositionCache(max_size=1)
        parser = MarkdownParser(cache)
        parser.parse_text_to_ast("a")
        parser.parse_text_to_ast("b")
        assert parser.cache() is cache
        assert len(cache) == 1
        assert hash_string_53_bit("b") in cache

    def test_set_default_parser(self, parser):
        """Test swapping the process-wide parser."""
        previous = set_default_parser(parser)
        try:
            assert default_parser() is parser
            document = parse_text_to_ast("text")
            assert parser.parse_text_to_ast("text") is document

        finally:
            set_default_parser(previous)

        assert default_parser() is previous
