"""Shared fixtures for markdown parser tests."""

import pytest

from mdparse import MarkdownASTBuilder, MarkdownParser, MarkdownPositionCache, set_default_parser


@pytest.fixture
def ast_builder():
    """Fixture providing a markdown AST builder instance."""
    return MarkdownASTBuilder()


@pytest.fixture
def parser():
    """Fixture providing a parser with its own cache."""
    return MarkdownParser(MarkdownPositionCache())


@pytest.fixture(autouse=True)
def isolated_default_parser():
    """Give every test a default parser with an empty cache."""
    previous = set_default_parser(MarkdownParser(MarkdownPositionCache()))
    yield
    set_default_parser(previous)
