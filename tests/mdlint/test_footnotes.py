"""Tests for footnote moving and renumbering."""

import pytest

from mdlint import (
    MarkdownRuleError,
    MissingFootnoteError,
    TooManyFootnotesError,
    move_footnotes_to_end,
    reindex_footnotes
)


class TestMoveFootnotesToEnd:
    """Test moving footnote definitions to the end of the document."""

    def test_orders_by_first_reference(self):
        """Test that definitions follow the order of their references, not their declarations."""
        text = "Text [^b] then [^a].\n\n[^a]: A\n[^b]: B\n"
        assert move_footnotes_to_end(text) == "Text [^b] then [^a].\n\n[^b]: B\n[^a]: A"

    def test_definitions_moved_from_middle(self):
        """Test that definitions in the middle of the document are moved."""
        text = "Para one[^1].\n\n[^1]: Note one\n\nPara two[^2].\n\n[^2]: Note two"
        expected = "Para one[^1].\n\nPara two[^2].\n\n[^1]: Note one\n[^2]: Note two"
        assert move_footnotes_to_end(text) == expected

    def test_no_footnotes(self):
        """Test that text without footnotes is unchanged."""
        text = "Just text.\n"
        assert move_footnotes_to_end(text) == text

    def test_idempotent(self, helpers):
        """Test that moving twice gives the same result."""
        helpers.assert_idempotent(move_footnotes_to_end, "Text [^b] then [^a].\n\n[^a]: A\n[^b]: B\n")

    def test_duplicate_definitions_bind_to_references(self):
        """Test that repeated keys bind to their references from the last one backwards."""
        text = "A[^1] B[^1]\n\n[^1]: first\n\n[^1]: second"
        assert move_footnotes_to_end(text) == "A[^1] B[^1]\n\n[^1]: first\n[^1]: second"

    def test_definition_without_reference_raises(self):
        """Test that a definition that is never referenced is an error."""
        with pytest.raises(MissingFootnoteError) as exc_info:
            move_footnotes_to_end("Text.\n\n[^1]: orphan")

        assert exc_info.value.footnote == "[^1]: orphan"
        assert exc_info.value.error_details['footnote'] == "[^1]: orphan"
        assert isinstance(exc_info.value, MarkdownRuleError)


class TestReindexFootnotes:
    """Test renumbering footnotes."""

    def test_renumbers_in_reference_order(self):
        """Test that keys are renumbered from 1 in the order they are first referenced."""
        text = "Second[^b] first[^a]\n\n[^a]: A\n[^b]: B"
        assert reindex_footnotes(text) == "Second[^1] first[^2]\n\n[^1]: B\n[^2]: A"

    def test_repeated_references_renumbered(self):
        """Test that every reference to a key is renumbered."""
        text = "One[^x], two[^y], again[^x].\n\n[^y]: Y\n[^x]: X"
        assert reindex_footnotes(text) == "One[^1], two[^2], again[^1].\n\n[^1]: X\n[^2]: Y"

    def test_identical_duplicates_merged(self):
        """Test that a definition repeated word for word is kept once."""
        text = "A[^1]\n\n[^1]: same\n\n[^1]: same"
        assert reindex_footnotes(text) == "A[^1]\n\n[^1]: same"

    def test_unreferenced_definitions_last(self):
        """Test that definitions that are never referenced are numbered last."""
        text = "B[^x]\n\n[^u]: unused\n[^x]: used"
        assert reindex_footnotes(text) == "B[^1]\n\n[^1]: used\n[^2]: unused"

    def test_no_footnotes(self):
        """Test that text without footnotes is unchanged."""
        assert reindex_footnotes("No notes here.") == "No notes here."

    def test_idempotent(self, helpers):
        """Test that renumbering twice gives the same result."""
        helpers.assert_idempotent(reindex_footnotes, "Second[^b] first[^a]\n\n[^a]: A\n[^b]: B")

    def test_conflicting_definitions_raise(self):
        """Test that one key with two different definitions is an error."""
        with pytest.raises(TooManyFootnotesError) as exc_info:
            reindex_footnotes("A[^1]\n\n[^1]: one\n\n[^1]: two")

        assert exc_info.value.footnote_key == "[^1]"
        assert exc_info.value.error_details['footnote_key'] == "[^1]"
