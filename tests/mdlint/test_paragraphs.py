"""Tests for paragraph spacing and line break rules."""

from mdlint import (
    add_two_spaces_at_end_of_lines_followed_by_another_line_of_text_content,
    make_sure_there_is_only_one_blank_line_before_and_after_paragraphs
)


class TestParagraphBlankLines:
    """Test one blank line around each paragraph."""

    def test_lines_split_and_blank_lines_collapsed(self):
        """Test that each line becomes a paragraph and extra blank lines go."""
        text = "Line one\nLine two\n\n\n\nLine three"
        result = make_sure_there_is_only_one_blank_line_before_and_after_paragraphs(text)
        assert result == "Line one\n\nLine two\n\nLine three"

    def test_line_break_keeps_lines_together(self):
        """Test that a line ending in two spaces stays with the next line."""
        text = "Line one  \nLine two"
        assert make_sure_there_is_only_one_blank_line_before_and_after_paragraphs(text) == text

    def test_trailing_newline_kept(self):
        """Test that a final newline survives."""
        assert make_sure_there_is_only_one_blank_line_before_and_after_paragraphs("Text\n") == "Text\n"

    def test_blockquote_paragraph_left_alone(self):
        """Test that paragraphs in blockquotes are not touched."""
        text = "> a\n> b"
        assert make_sure_there_is_only_one_blank_line_before_and_after_paragraphs(text) == text

    def test_list_paragraph_left_alone(self):
        """Test that paragraphs in list items are not touched."""
        text = "- a\n  b"
        assert make_sure_there_is_only_one_blank_line_before_and_after_paragraphs(text) == text

    def test_blank_line_before_heading(self):
        """Test that a paragraph followed by a heading gets a blank line after it."""
        assert make_sure_there_is_only_one_blank_line_before_and_after_paragraphs("Text\n# H") == "Text\n\n# H"

    def test_idempotent(self, helpers):
        """Test that a second pass changes nothing."""
        helpers.assert_idempotent(
            make_sure_there_is_only_one_blank_line_before_and_after_paragraphs,
            "\n\nLine one\nLine two\n# H\nMore\n\n\n"
        )


class TestTwoSpacesBetweenLines:
    """Test line breaks between consecutive lines of text."""

    def test_spaces_added(self):
        """Test that every line but the last gets two spaces."""
        result = add_two_spaces_at_end_of_lines_followed_by_another_line_of_text_content(
            "Line one\nLine two\nLine three"
        )
        assert result == "Line one  \nLine two  \nLine three"

    def test_html_line_break_left_alone(self):
        """Test that a line ending in `<br>` is not given spaces."""
        text = "a<br>\nb"
        assert add_two_spaces_at_end_of_lines_followed_by_another_line_of_text_content(text) == text

    def test_single_line_unchanged(self):
        """Test that a one-line paragraph has nothing to change."""
        text = "One line\n\nAnother"
        assert add_two_spaces_at_end_of_lines_followed_by_another_line_of_text_content(text) == text

    def test_idempotent(self, helpers):
        """Test that a second pass changes nothing."""
        helpers.assert_idempotent(
            add_two_spaces_at_end_of_lines_followed_by_another_line_of_text_content,
            "a\nb \nc"
        )
