"""Tests for running lint rules through the linter."""

import logging

from mdlint import (
    HeadingBlankLinesOptions,
    LinterOptions,
    MarkdownLinter,
    OrderedListStyle,
    UnorderedListStyle
)


class TestMarkdownLinter:
    """Test the linter."""

    def test_default_options_change_nothing(self):
        """Test that no rule runs unless enabled."""
        text = "# H\ntext\n- a\n* b"
        result = MarkdownLinter().lint(text)
        assert result.text == text
        assert result.rules_applied == []
        assert result.errors == []

    def test_options(self):
        """Test that the linter reports the options it was given."""
        options = LinterOptions.create_default()
        assert MarkdownLinter(options).options() is options
        assert isinstance(MarkdownLinter().options().heading_blank_lines, HeadingBlankLinesOptions)

    def test_enabled_rule_applied(self, linter_factory):
        """Test that an enabled rule rewrites the text."""
        result = linter_factory('heading_blank_lines').lint("# H\ntext")
        assert result.text == "# H\n\ntext"
        assert result.rules_applied == ['heading_blank_lines']

    def test_rules_run_in_sequence(self, linter_factory):
        """Test that each rule sees the output of the previous one."""
        linter = linter_factory(
            ordered_list_style={'number_style': OrderedListStyle.LAZY},
            unordered_list_style={'list_style': UnorderedListStyle.DASH}
        )
        result = linter.lint("1. a\n2. b\n\n* c\n+ d")
        assert result.text == "1. a\n1. b\n\n- c\n- d"
        assert result.rules_applied == ['ordered_list_style', 'unordered_list_style']

    def test_failing_rule_skipped(self, linter_factory, caplog):
        """Test that a rule error is recorded and the other rules still run."""
        linter = linter_factory('heading_blank_lines', 'move_footnotes_to_the_bottom')
        with caplog.at_level(logging.WARNING, logger="MarkdownLinter"):
            result = linter.lint("# H\ntext[^1]\n\n[^1]: a\n[^2]: b")

        assert result.text == "# H\n\ntext[^1]\n\n[^1]: a\n[^2]: b"
        assert result.rules_applied == ['heading_blank_lines']
        assert len(result.errors) == 1
        assert result.errors[0].rule == 'move_footnotes_to_the_bottom'
        assert result.errors[0].error_details['footnote'] == "[^2]: b"
        assert "skipping rule move_footnotes_to_the_bottom" in caplog.text

    def test_custom_ignore_region(self, linter_factory):
        """Test that text between linter-disable and linter-enable markers is not changed."""
        text = "<!-- linter-disable -->\n# A\ntext\n<!-- linter-enable -->\n# B\ntext"
        result = linter_factory('heading_blank_lines').lint(text)
        assert result.text == "<!-- linter-disable -->\n# A\ntext\n<!-- linter-enable -->\n\n# B\n\ntext"

    def test_code_hidden_from_list_numbering(self, linter_factory):
        """Test that ordered list syntax in code blocks is not renumbered."""
        text = "```\n1. a\n1. b\n```"
        assert linter_factory('ordered_list_style').lint(text).text == text

    def test_links_and_tags_restored_around_headings(self, linter_factory):
        """Test that links, wiki links and tags hidden from the heading rule come back unchanged."""
        text = "# [Title](t.md)\n#tag and [[Page]]\n## Next"
        result = linter_factory('heading_blank_lines').lint(text)
        assert result.text == "# [Title](t.md)\n\n#tag and [[Page]]\n\n## Next"

    def test_tags_hidden_from_link_format(self, linter_factory):
        """Test that a tag inside link text survives conversion to a wiki link."""
        result = linter_factory('link_format').lint("[see #a](x.md)")
        assert result.text == "[[x|see #a]]"
