"""Tests for table and custom ignore region detection, and placeholder handling."""

from mdlint import IgnoreType, get_all_custom_ignore_sections_in_text, get_all_tables_in_text, ignore_list_of_types
from mdlint.ignore_types import replace_with_placeholders, restore_placeholders
from textedit import Span


class TestGetAllTablesInText:
    """Test table detection."""

    def test_simple_table(self):
        """Test a table that is the whole document."""
        text = "| a | b |\n| - | - |\n| 1 | 2 |"
        assert get_all_tables_in_text(text) == [Span(0, 29)]

    def test_table_between_paragraphs(self):
        """Test that the table ends at the first line without a pipe."""
        text = "Intro\n\n| a | b |\n| --- | --- |\n| 1 | 2 |\n\nAfter"
        positions = get_all_tables_in_text(text)
        assert positions == [Span(7, 40)]
        assert text[7:40] == "| a | b |\n| --- | --- |\n| 1 | 2 |"

    def test_table_without_outer_pipes(self):
        """Test a table written without leading and trailing pipes."""
        text = "a | b\n--- | ---"
        assert get_all_tables_in_text(text) == [Span(0, 15)]

    def test_separator_on_first_line_is_not_a_table(self):
        """Test that a separator row needs a header line above it."""
        text = "| - | - |\n| a | b |"
        assert get_all_tables_in_text(text) == []

    def test_cell_count_mismatch(self):
        """Test that the header and separator must have the same number of cells."""
        assert get_all_tables_in_text("a | b | c\n--- | ---") == []

    def test_dash_at_end_of_sentence(self):
        """Test that a dash ending a line of prose is not a separator."""
        assert get_all_tables_in_text("a | b\nsome text -") == []

    def test_multiple_tables_descending(self):
        """Test that several tables are returned from last to first."""
        table = "| a | b |\n| - | - |"
        text = table + "\n\ntext\n\n" + table
        positions = get_all_tables_in_text(text)
        assert positions == [Span(27, 46), Span(0, 19)]


class TestGetAllCustomIgnoreSectionsInText:
    """Test custom ignore region detection."""

    def test_region_includes_markers(self):
        """Test that a region runs from the start marker to the end of the end marker."""
        text = "a\n<!-- linter-disable -->\nb\n<!-- linter-enable -->\nc"
        assert get_all_custom_ignore_sections_in_text(text) == [Span(2, 50)]

    def test_unterminated_region_runs_to_end(self):
        """Test that a start marker without an end marker runs to the end of the text."""
        text = "x <!-- linter-disable --> y"
        assert get_all_custom_ignore_sections_in_text(text) == [Span(2, len(text))]

    def test_end_marker_before_start_is_ignored(self):
        """Test that an end marker cannot close a later start marker."""
        text = "<!-- linter-enable -->a<!-- linter-disable -->b"
        assert get_all_custom_ignore_sections_in_text(text) == [Span(23, len(text))]

    def test_multiple_regions_descending(self):
        """Test that each start marker takes the next unused end marker."""
        region = "<!-- linter-disable -->x<!-- linter-enable -->"
        text = region + "\n" + region
        assert get_all_custom_ignore_sections_in_text(text) == [Span(47, 93), Span(0, 46)]

    def test_no_markers(self):
        """Test text without markers."""
        assert get_all_custom_ignore_sections_in_text("plain") == []


class TestIgnoreTypes:
    """Test hiding regions from a rule."""

    def test_replace_yaml_with_placeholder(self):
        """Test swapping the frontmatter for its placeholder."""
        text, originals = replace_with_placeholders(IgnoreType.YAML, "---\na: 1\n---\nbody")
        assert text == "{IGNORED_YAML}\nbody"
        assert originals == ["---\na: 1\n---"]

    def test_restore_in_order(self):
        """Test that regions are put back in document order."""
        text, originals = replace_with_placeholders(IgnoreType.INLINE_CODE, "`a` and `b`")
        assert text == "{IGNORED_INLINE_CODE} and {IGNORED_INLINE_CODE}"
        assert originals == ["`a`", "`b`"]
        assert restore_placeholders(IgnoreType.INLINE_CODE, text, originals) == "`a` and `b`"

    def test_function_does_not_see_hidden_regions(self):
        """Test that a transformation leaves hidden regions alone."""
        result = ignore_list_of_types([IgnoreType.INLINE_CODE], "a `b` c `d`", lambda text: text.upper())
        assert result == "A `b` C `d`"

    def test_several_types(self):
        """Test hiding more than one kind of region."""
        seen = []

        def record(text):
            seen.append(text)
            return text

        text = "<!-- linter-disable -->\n#tag\n<!-- linter-enable -->\n$x$ and `y`"
        result = ignore_list_of_types(
            [IgnoreType.CUSTOM_IGNORE, IgnoreType.INLINE_MATH, IgnoreType.INLINE_CODE], text, record
        )
        assert result == text
        assert seen == ["{IGNORED_CUSTOM_SECTION}\n{IGNORED_INLINE_MATH} and {IGNORED_INLINE_CODE}"]

    def test_tables_hidden(self):
        """Test hiding tables."""
        text = "Intro\n\n| a | b |\n| - | - |\n\nEnd"
        result, originals = replace_with_placeholders(IgnoreType.TABLE, text)
        assert result == "Intro\n\n{IGNORED_TABLE}\n\nEnd"
        assert originals == ["| a | b |\n| - | - |"]

    def test_links_and_images_hidden(self):
        """Test hiding Markdown links and images."""
        text = "See [a](b.md) and ![i](p.png)."
        result, originals = replace_with_placeholders(IgnoreType.LINK, text)
        assert result == "See {IGNORED_LINK} and {IGNORED_LINK}."
        assert originals == ["[a](b.md)", "![i](p.png)"]
        assert restore_placeholders(IgnoreType.LINK, result, originals) == text

    def test_wiki_links_and_embeds_hidden(self):
        """Test hiding wiki links, including embeds."""
        text = "[[a]] and ![[b.png]]"
        result, originals = replace_with_placeholders(IgnoreType.WIKI_LINK, text)
        assert result == "{IGNORED_WIKI_LINK} and {IGNORED_WIKI_LINK}"
        assert originals == ["[[a]]", "![[b.png]]"]
        assert restore_placeholders(IgnoreType.WIKI_LINK, result, originals) == text

    def test_tags_hidden(self):
        """Test that tags are hidden but the whitespace before them is kept."""
        text = "#one and #two."
        result, originals = replace_with_placeholders(IgnoreType.TAG, text)
        assert result == "{IGNORED_TAG} and {IGNORED_TAG}."
        assert originals == ["#one", "#two"]
        assert restore_placeholders(IgnoreType.TAG, result, originals) == text
