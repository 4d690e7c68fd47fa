"""Tests for lint rule options."""

from mdlint import (
    EmphasisStyle,
    HeadingBlankLinesOptions,
    LinterOptions,
    MathBlockOptions,
    UnorderedListStyle,
    YamlArrayFormat
)


class TestRuleOptions:
    """Test options for a single rule."""

    def test_defaults(self):
        """Test that rules are disabled by default."""
        options = HeadingBlankLinesOptions()
        assert options.enabled is False
        assert options.bottom is True
        assert options.empty_line_after_yaml is True

    def test_from_dict(self):
        """Test loading values, including an enum given by its value."""
        options = LinterOptions.from_dict({
            'heading_blank_lines': {'enabled': True, 'bottom': False},
            'emphasis_style': {'enabled': True, 'style': 'underscore'},
            'empty_line_around_math_blocks': {'dollar_count': '3'},
        })
        assert options.heading_blank_lines.enabled is True
        assert options.heading_blank_lines.bottom is False
        assert options.emphasis_style.style == EmphasisStyle.UNDERSCORE
        assert options.empty_line_around_math_blocks.dollar_count == 3

    def test_invalid_enum_value_uses_default(self):
        """Test that an unknown enum value falls back to the default."""
        options = LinterOptions.from_dict({'unordered_list_style': {'list_style': 'bogus'}})
        assert options.unordered_list_style.list_style == UnorderedListStyle.CONSISTENT

    def test_unknown_keys_ignored(self):
        """Test that unknown rules and option names are skipped."""
        options = LinterOptions.from_dict({
            'no_such_rule': {'enabled': True},
            'math_indicators_on_own_lines': {'enabled': True, 'colour': 'red'},
            'paragraph_blank_lines': 'not a mapping',
        })
        assert options.math_indicators_on_own_lines == MathBlockOptions(enabled=True)
        assert options.paragraph_blank_lines.enabled is False


class TestLinterOptions:
    """Test options for the whole linter."""

    def test_create_default(self):
        """Test that every rule starts disabled."""
        data = LinterOptions.create_default().to_dict()
        assert all(not rule['enabled'] for rule in data.values())

    def test_to_dict_uses_enum_values(self):
        """Test that enums are written as their values."""
        options = LinterOptions.create_default()
        options.move_tags_to_yaml.tag_array_style = YamlArrayFormat.MULTI_LINE
        assert options.to_dict()['move_tags_to_yaml']['tag_array_style'] == 'multi-line'

    def test_round_trip(self):
        """Test that options survive conversion to a mapping and back."""
        options = LinterOptions.create_default()
        options.strong_style.enabled = True
        options.strong_style.style = EmphasisStyle.ASTERISK
        options.ordered_list_style.enabled = True
        assert LinterOptions.from_dict(options.to_dict()) == options
