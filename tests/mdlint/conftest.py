"""Shared fixtures and utilities for lint rule tests."""

import re

import pytest

from mdlint import LinterOptions, MarkdownLinter
from mdparse import MarkdownParser, MarkdownPositionCache, set_default_parser


@pytest.fixture(autouse=True)
def isolated_default_parser():
    """Give every test a default parser with an empty cache."""
    previous = set_default_parser(MarkdownParser(MarkdownPositionCache()))
    yield
    set_default_parser(previous)


@pytest.fixture
def linter_factory():
    """Factory for linters with selected rules enabled."""
    def _create_linter(*rule_names: str, **rule_options):
        options = LinterOptions.create_default()
        for rule_name in rule_names:
            getattr(options, rule_name).enabled = True

        for rule_name, values in rule_options.items():
            rule = getattr(options, rule_name)
            rule.enabled = True
            for name, value in values.items():
                setattr(rule, name, value)

        return MarkdownLinter(options)
    return _create_linter


class LintTestHelpers:
    """Helper utilities for lint rule testing."""

    @staticmethod
    def non_whitespace(text: str) -> str:
        """Strip all whitespace from text."""
        return re.sub(r'\s', '', text)

    @staticmethod
    def assert_idempotent(func, text: str) -> str:
        """Apply a rule twice and check the second pass changes nothing."""
        once = func(text)
        assert func(once) == once
        return once


@pytest.fixture
def helpers():
    """Provide test helper utilities."""
    return LintTestHelpers
