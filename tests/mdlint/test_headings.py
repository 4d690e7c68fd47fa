"""Tests for blank lines around headings."""

from mdlint import heading_blank_lines


class TestHeadingBlankLines:
    """Test blank line enforcement around headings."""

    def test_blank_lines_between_headings_and_content(self):
        """Test that headings are separated from content, but not from the document edges."""
        assert heading_blank_lines("# H1\nline\n## H2\n") == "# H1\n\nline\n\n## H2"

    def test_bottom_disabled(self):
        """Test that no blank line is added after a heading when bottom is disabled."""
        assert heading_blank_lines("# H1\nline\n## H2\n", bottom=False) == "# H1\nline\n\n## H2"

    def test_heading_followed_by_heading(self):
        """Test that consecutive headings are separated even when bottom is disabled."""
        assert heading_blank_lines("# A\n## B", bottom=False) == "# A\n\n## B"

    def test_extra_blank_lines_collapsed(self):
        """Test that several blank lines around a heading become one."""
        assert heading_blank_lines("text\n\n\n\n# H\n\n\n\nmore") == "text\n\n# H\n\nmore"

    def test_leading_blank_lines_removed(self):
        """Test that blank lines before a heading that starts the document are removed."""
        assert heading_blank_lines("\n\n# H\ntext") == "# H\n\ntext"

    def test_blank_line_after_frontmatter(self):
        """Test that a heading after the frontmatter gets a blank line before it."""
        text = "---\ntitle: x\n---\n# H\ntext"
        assert heading_blank_lines(text) == "---\ntitle: x\n---\n\n# H\n\ntext"

    def test_no_blank_line_after_frontmatter(self):
        """Test that the blank line after the frontmatter can be turned off."""
        text = "---\ntitle: x\n---\n\n# H\ntext"
        assert heading_blank_lines(text, empty_line_after_yaml=False) == "---\ntitle: x\n---\n# H\n\ntext"

    def test_setext_heading(self):
        """Test that setext headings are handled as a whole."""
        assert heading_blank_lines("Title\n=====\ntext") == "Title\n=====\n\ntext"

    def test_heading_in_blockquote_left_alone(self):
        """Test that headings after a blockquote marker are not touched."""
        text = "text\n> # H\n> quote"
        assert heading_blank_lines(text) == text

    def test_heading_in_code_block_left_alone(self):
        """Test that heading syntax in a code block is not a heading."""
        text = "```\n# not a heading\n```"
        assert heading_blank_lines(text) == text

    def test_idempotent(self, helpers):
        """Test that a second pass changes nothing."""
        helpers.assert_idempotent(heading_blank_lines, "# A\ntext\n## B\n### C\nmore\n")

    def test_content_preserved(self, helpers):
        """Test that only whitespace changes."""
        text = "\n# A\ntext\n\n\n## B\n### C\nmore\n"
        assert helpers.non_whitespace(heading_blank_lines(text)) == helpers.non_whitespace(text)
