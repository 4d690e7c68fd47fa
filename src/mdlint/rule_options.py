"""Options for the lint rules."""

from dataclasses import dataclass, field, fields
from enum import Enum
from typing import Any, Dict, Type, TypeVar


class EmphasisStyle(Enum):
    """Delimiter style for emphasis and strong text."""

    CONSISTENT = "consistent"
    UNDERSCORE = "underscore"
    ASTERISK = "asterisk"


class OrderedListStyle(Enum):
    """Numbering style for ordered list items."""

    ASCENDING = "ascending"
    LAZY = "lazy"


class OrderedListEndStyle(Enum):
    """Character that follows the number of an ordered list item."""

    PERIOD = "."
    PARENTHESIS = ")"


class UnorderedListStyle(Enum):
    """Bullet character for unordered list items."""

    CONSISTENT = "consistent"
    DASH = "-"
    ASTERISK = "*"
    PLUS = "+"


class LinkStyle(Enum):
    """Link syntax to convert internal links to."""

    WIKI = "wiki"
    MARKDOWN = "markdown"


class YamlArrayFormat(Enum):
    """Formats for writing a list of values into YAML frontmatter."""

    SINGLE_LINE = "single-line"
    MULTI_LINE = "multi-line"
    SINGLE_LINE_SPACE_DELIMITED = "single-line space delimited"
    SINGLE_STRING_SPACE_DELIMITED = "single string space delimited"
    SINGLE_STRING_COMMA_DELIMITED = "single string comma delimited"
    SINGLE_STRING_TO_SINGLE_LINE = "single string to single-line"
    SINGLE_STRING_TO_MULTI_LINE = "single string to multi-line"


R = TypeVar('R', bound='RuleOptions')


@dataclass
class RuleOptions:
    """Options shared by every rule."""

    enabled: bool = False

    @classmethod
    def from_dict(cls: Type[R], data: Dict[str, Any]) -> R:
        """
        Create options from a mapping, such as one loaded from a settings file.

        Unknown keys are ignored.  Enum values are given by their value string; values
        that do not name a member fall back to the default.

        Args:
            data: Mapping of option names to values

        Returns:
            The options
        """
        options = cls()
        for option in fields(cls):
            if option.name not in data:
                continue

            default = getattr(options, option.name)
            value = data[option.name]
            if isinstance(default, Enum):
                try:
                    value = type(default)(value)

                except ValueError:
                    value = default

            elif isinstance(default, bool):
                value = bool(value)

            elif isinstance(default, int):
                value = int(value)

            setattr(options, option.name, value)

        return options

    def to_dict(self) -> Dict[str, Any]:
        """
        Convert the options to a mapping that `from_dict` accepts.

        Returns:
            Mapping of option names to plain values
        """
        data: Dict[str, Any] = {}
        for option in fields(self):
            value = getattr(self, option.name)
            data[option.name] = value.value if isinstance(value, Enum) else value

        return data


@dataclass
class HeadingBlankLinesOptions(RuleOptions):
    """Options for blank lines around headings."""

    bottom: bool = True
    empty_line_after_yaml: bool = True


@dataclass
class EmphasisStyleOptions(RuleOptions):
    """Options for making emphasis or strong delimiters consistent."""

    style: EmphasisStyle = EmphasisStyle.CONSISTENT


@dataclass
class OrderedListOptions(RuleOptions):
    """Options for ordered list item numbering."""

    number_style: OrderedListStyle = OrderedListStyle.ASCENDING
    list_end_style: OrderedListEndStyle = OrderedListEndStyle.PERIOD


@dataclass
class UnorderedListOptions(RuleOptions):
    """Options for unordered list item bullets."""

    list_style: UnorderedListStyle = UnorderedListStyle.CONSISTENT


@dataclass
class LinkFormatOptions(RuleOptions):
    """Options for converting between Markdown and wiki links."""

    style: LinkStyle = LinkStyle.WIKI


@dataclass
class MoveTagsToYamlOptions(RuleOptions):
    """Options for moving body tags into the frontmatter."""

    tag_array_style: YamlArrayFormat = YamlArrayFormat.SINGLE_LINE
    remove_hashtags_from_tags_in_body: bool = False


@dataclass
class MathBlockOptions(RuleOptions):
    """Options for rules that deal with display math."""

    dollar_count: int = 2


@dataclass
class LinterOptions:
    """
    Options for every rule the linter can run.

    All rules are disabled by default.
    """

    move_tags_to_yaml: MoveTagsToYamlOptions = field(default_factory=MoveTagsToYamlOptions)
    heading_blank_lines: HeadingBlankLinesOptions = field(default_factory=HeadingBlankLinesOptions)
    move_footnotes_to_the_bottom: RuleOptions = field(default_factory=RuleOptions)
    re_index_footnotes: RuleOptions = field(default_factory=RuleOptions)
    emphasis_style: EmphasisStyleOptions = field(default_factory=EmphasisStyleOptions)
    strong_style: EmphasisStyleOptions = field(default_factory=EmphasisStyleOptions)
    ordered_list_style: OrderedListOptions = field(default_factory=OrderedListOptions)
    unordered_list_style: UnorderedListOptions = field(default_factory=UnorderedListOptions)
    link_format: LinkFormatOptions = field(default_factory=LinkFormatOptions)
    remove_space_around_link_text: RuleOptions = field(default_factory=RuleOptions)
    paragraph_blank_lines: RuleOptions = field(default_factory=RuleOptions)
    empty_line_around_blockquotes: RuleOptions = field(default_factory=RuleOptions)
    empty_line_around_lists: RuleOptions = field(default_factory=RuleOptions)
    empty_line_around_code_fences: RuleOptions = field(default_factory=RuleOptions)
    empty_line_around_math_blocks: MathBlockOptions = field(default_factory=MathBlockOptions)
    empty_line_around_tables: RuleOptions = field(default_factory=RuleOptions)
    two_spaces_between_lines_with_content: RuleOptions = field(default_factory=RuleOptions)
    math_indicators_on_own_lines: MathBlockOptions = field(default_factory=MathBlockOptions)

    @classmethod
    def create_default(cls) -> "LinterOptions":
        """Create a new LinterOptions object with every rule disabled."""
        return cls()

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "LinterOptions":
        """
        Create linter options from a mapping of rule names to rule option mappings.

        Args:
            data: Mapping such as {"heading_blank_lines": {"enabled": true, "bottom": false}}

        Returns:
            LinterOptions object with loaded values
        """
        settings = cls.create_default()
        for rule in fields(cls):
            rule_data = data.get(rule.name)
            if not isinstance(rule_data, dict):
                continue

            rule_options = getattr(settings, rule.name)
            setattr(settings, rule.name, type(rule_options).from_dict(rule_data))

        return settings

    def to_dict(self) -> Dict[str, Dict[str, Any]]:
        """
        Convert the options to a mapping that `from_dict` accepts.

        Returns:
            Mapping of rule names to rule option mappings
        """
        return {rule.name: getattr(self, rule.name).to_dict() for rule in fields(self)}
