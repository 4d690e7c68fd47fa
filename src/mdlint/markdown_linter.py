"""Run the enabled lint rules over a document."""

import logging
from dataclasses import dataclass, field
from typing import Any, Callable, Dict, List

from mdlint.blank_lines import (
    ensure_empty_lines_around_blockquotes, ensure_empty_lines_around_fenced_code_blocks,
    ensure_empty_lines_around_lists, ensure_empty_lines_around_math_blocks, ensure_empty_lines_around_tables
)
from mdlint.emphasis import make_emphasis_or_bold_consistent
from mdlint.footnotes import move_footnotes_to_end, reindex_footnotes
from mdlint.headings import heading_blank_lines
from mdlint.ignore_types import IgnoreType, ignore_list_of_types
from mdlint.links import link_format, remove_spaces_in_link_text, remove_spaces_in_wiki_link_text
from mdlint.lists import update_ordered_list_item_indicators, update_unordered_list_item_indicators
from mdlint.math_blocks import make_sure_math_block_indicators_are_on_their_own_lines
from mdlint.paragraphs import (
    add_two_spaces_at_end_of_lines_followed_by_another_line_of_text_content,
    make_sure_there_is_only_one_blank_line_before_and_after_paragraphs
)
from mdlint.rule_exceptions import MarkdownRuleError
from mdlint.rule_options import LinterOptions, RuleOptions
from mdlint.tags import move_tags_to_yaml
from mdparse import MarkdownASTNodeType


@dataclass
class RuleFailure:
    """A rule that raised an error and was skipped."""

    rule: str
    message: str
    error_details: Dict[str, Any] | None = None


@dataclass
class LintResult:
    """Result of linting a document."""

    text: str
    rules_applied: List[str] = field(default_factory=list)
    errors: List[RuleFailure] = field(default_factory=list)


@dataclass
class _LintRule:
    """A rule, the option set that controls it, and the regions hidden from it."""

    name: str
    apply: Callable[[str, Any], str]
    ignore_types: List[IgnoreType] = field(default_factory=list)


# Frontmatter rules run first, then headings and footnotes, then content and spacing
_RULES: List[_LintRule] = [
    _LintRule(
        'move_tags_to_yaml',
        lambda text, options: move_tags_to_yaml(
            text, options.tag_array_style, options.remove_hashtags_from_tags_in_body
        )
    ),
    _LintRule(
        'heading_blank_lines',
        lambda text, options: heading_blank_lines(text, options.bottom, options.empty_line_after_yaml),
        [IgnoreType.LINK, IgnoreType.WIKI_LINK, IgnoreType.TAG]
    ),
    _LintRule('move_footnotes_to_the_bottom', lambda text, _options: move_footnotes_to_end(text)),
    _LintRule('re_index_footnotes', lambda text, _options: reindex_footnotes(text)),
    _LintRule(
        'emphasis_style',
        lambda text, options: make_emphasis_or_bold_consistent(text, options.style, MarkdownASTNodeType.EMPHASIS)
    ),
    _LintRule(
        'strong_style',
        lambda text, options: make_emphasis_or_bold_consistent(text, options.style, MarkdownASTNodeType.STRONG)
    ),
    _LintRule(
        'ordered_list_style',
        lambda text, options: update_ordered_list_item_indicators(
            text, options.number_style, options.list_end_style
        ),
        [IgnoreType.CODE, IgnoreType.MATH]
    ),
    _LintRule(
        'unordered_list_style',
        lambda text, options: update_unordered_list_item_indicators(text, options.list_style)
    ),
    _LintRule('link_format', lambda text, options: link_format(text, options.style)),
    _LintRule(
        'remove_space_around_link_text',
        lambda text, _options: remove_spaces_in_wiki_link_text(remove_spaces_in_link_text(text)),
        [IgnoreType.CODE, IgnoreType.INLINE_CODE, IgnoreType.MATH, IgnoreType.INLINE_MATH]
    ),
    _LintRule(
        'paragraph_blank_lines',
        lambda text, _options: make_sure_there_is_only_one_blank_line_before_and_after_paragraphs(text),
        [IgnoreType.TABLE]
    ),
    _LintRule('empty_line_around_blockquotes', lambda text, _options: ensure_empty_lines_around_blockquotes(text)),
    _LintRule('empty_line_around_lists', lambda text, _options: ensure_empty_lines_around_lists(text)),
    _LintRule(
        'empty_line_around_code_fences',
        lambda text, _options: ensure_empty_lines_around_fenced_code_blocks(text)
    ),
    _LintRule(
        'empty_line_around_math_blocks',
        lambda text, options: ensure_empty_lines_around_math_blocks(text, options.dollar_count)
    ),
    _LintRule(
        'empty_line_around_tables',
        lambda text, _options: ensure_empty_lines_around_tables(text),
        [IgnoreType.CODE, IgnoreType.MATH, IgnoreType.YAML]
    ),
    _LintRule(
        'two_spaces_between_lines_with_content',
        lambda text, _options: add_two_spaces_at_end_of_lines_followed_by_another_line_of_text_content(text),
        [IgnoreType.TABLE]
    ),
    _LintRule(
        'math_indicators_on_own_lines',
        lambda text, options: make_sure_math_block_indicators_are_on_their_own_lines(text, options.dollar_count)
    ),
]


class MarkdownLinter:
    """
    Applies the enabled lint rules to Markdown text.

    Rules run one after another, each on the output of the one before.  A rule that
    raises a `MarkdownRuleError` is skipped and the remaining rules still run.
    """

    def __init__(self, options: LinterOptions | None = None) -> None:
        """
        Initialize the linter.

        Args:
            options: Which rules to run and how; every rule is disabled if not given
        """
        self._options = options if options is not None else LinterOptions.create_default()
        self._logger = logging.getLogger("MarkdownLinter")

    def options(self) -> LinterOptions:
        """Get the options the linter runs with."""
        return self._options

    def lint(self, text: str) -> LintResult:
        """
        Apply the enabled rules to a document.

        Regions between `<!-- linter-disable -->` and `<!-- linter-enable -->` are
        hidden from every rule.

        Args:
            text: Markdown text

        Returns:
            LintResult with the updated text, the rules that ran and the rules that failed
        """
        result = LintResult(text)
        for rule in _RULES:
            rule_options: RuleOptions = getattr(self._options, rule.name)
            if not rule_options.enabled:
                continue

            ignore_types = [IgnoreType.CUSTOM_IGNORE] + rule.ignore_types
            try:
                result.text = ignore_list_of_types(
                    ignore_types, result.text, lambda text, rule=rule, options=rule_options: rule.apply(text, options)
                )

            except MarkdownRuleError as e:
                self._logger.warning("skipping rule %s: %s", rule.name, e)
                result.errors.append(RuleFailure(rule.name, str(e), e.error_details))
                continue

            result.rules_applied.append(rule.name)

        return result
