"""
Structural lint rules for Markdown documents.

Every rule is a pure function from text (and options) to text.  Rules locate the
constructs they work on through the position-preserving parser in `mdparse` and
rewrite only those regions, leaving the rest of the document untouched.
"""

from mdlint.blank_lines import (
    ensure_empty_lines_around_blockquotes,
    ensure_empty_lines_around_fenced_code_blocks,
    ensure_empty_lines_around_lists,
    ensure_empty_lines_around_math_blocks,
    ensure_empty_lines_around_tables,
    update_blockquotes
)
from mdlint.emphasis import make_emphasis_or_bold_consistent, update_bold_text, update_italics_text
from mdlint.footnotes import move_footnotes_to_end, reindex_footnotes
from mdlint.headings import heading_blank_lines
from mdlint.ignore_types import IgnoreType, ignore_list_of_types
from mdlint.links import (
    LinkInfo,
    convert_markdown_links_to_wiki_links,
    convert_wiki_links_to_markdown_links,
    get_markdown_image_info,
    get_markdown_link_info,
    get_wiki_link_info,
    link_format,
    remove_spaces_in_link_text,
    remove_spaces_in_wiki_link_text
)
from mdlint.lists import (
    update_list_item_text,
    update_ordered_list_item_indicators,
    update_unordered_list_item_indicators
)
from mdlint.markdown_linter import LintResult, MarkdownLinter, RuleFailure
from mdlint.math_blocks import make_sure_math_block_indicators_are_on_their_own_lines
from mdlint.paragraphs import (
    add_two_spaces_at_end_of_lines_followed_by_another_line_of_text_content,
    make_sure_there_is_only_one_blank_line_before_and_after_paragraphs
)
from mdlint.regions import get_all_custom_ignore_sections_in_text, get_all_tables_in_text
from mdlint.rule_exceptions import MarkdownRuleError, MissingFootnoteError, TooManyFootnotesError
from mdlint.rule_options import (
    EmphasisStyle,
    EmphasisStyleOptions,
    HeadingBlankLinesOptions,
    LinkFormatOptions,
    LinkStyle,
    LinterOptions,
    MathBlockOptions,
    MoveTagsToYamlOptions,
    OrderedListEndStyle,
    OrderedListOptions,
    OrderedListStyle,
    RuleOptions,
    UnorderedListOptions,
    UnorderedListStyle,
    YamlArrayFormat
)
from mdlint.tags import move_tags_to_yaml


__all__ = [
    # Exceptions
    "MarkdownRuleError",
    "MissingFootnoteError",
    "TooManyFootnotesError",
    # Options
    "EmphasisStyle",
    "EmphasisStyleOptions",
    "HeadingBlankLinesOptions",
    "LinkFormatOptions",
    "LinkStyle",
    "LinterOptions",
    "MathBlockOptions",
    "MoveTagsToYamlOptions",
    "OrderedListEndStyle",
    "OrderedListOptions",
    "OrderedListStyle",
    "RuleOptions",
    "UnorderedListOptions",
    "UnorderedListStyle",
    "YamlArrayFormat",
    # Linter
    "LintResult",
    "MarkdownLinter",
    "RuleFailure",
    # Regions
    "IgnoreType",
    "get_all_custom_ignore_sections_in_text",
    "get_all_tables_in_text",
    "ignore_list_of_types",
    # Rules
    "LinkInfo",
    "add_two_spaces_at_end_of_lines_followed_by_another_line_of_text_content",
    "convert_markdown_links_to_wiki_links",
    "convert_wiki_links_to_markdown_links",
    "ensure_empty_lines_around_blockquotes",
    "ensure_empty_lines_around_fenced_code_blocks",
    "ensure_empty_lines_around_lists",
    "ensure_empty_lines_around_math_blocks",
    "ensure_empty_lines_around_tables",
    "get_markdown_image_info",
    "get_markdown_link_info",
    "get_wiki_link_info",
    "heading_blank_lines",
    "link_format",
    "make_emphasis_or_bold_consistent",
    "make_sure_math_block_indicators_are_on_their_own_lines",
    "make_sure_there_is_only_one_blank_line_before_and_after_paragraphs",
    "move_footnotes_to_end",
    "move_tags_to_yaml",
    "reindex_footnotes",
    "remove_spaces_in_link_text",
    "remove_spaces_in_wiki_link_text",
    "update_blockquotes",
    "update_bold_text",
    "update_italics_text",
    "update_list_item_text",
    "update_ordered_list_item_indicators",
    "update_unordered_list_item_indicators",
]
