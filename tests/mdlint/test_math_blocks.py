"""Tests for display math delimiter layout."""

from mdlint import make_sure_math_block_indicators_are_on_their_own_lines


def test_inline_display_math_split():
    """Test that display math written on one line is split over three."""
    assert make_sure_math_block_indicators_are_on_their_own_lines("$$x = 1$$") == "$$\nx = 1\n$$"


def test_blockquote_prefix_carried():
    """Test that new lines in a blockquote keep the blockquote markers."""
    assert make_sure_math_block_indicators_are_on_their_own_lines("> $$x$$") == "> $$\n> x\n> $$"


def test_fenced_math_unchanged():
    """Test that delimiters already on their own lines stay put."""
    text = "$$\nx\n$$"
    assert make_sure_math_block_indicators_are_on_their_own_lines(text) == text


def test_content_on_delimiter_lines():
    """Test that content sharing a line with either delimiter is moved off it."""
    assert make_sure_math_block_indicators_are_on_their_own_lines("$$x\ny$$") == "$$\nx\ny\n$$"


def test_single_dollar_math_left_alone():
    """Test that ordinary inline math is not display math."""
    text = "Inline $x$ math"
    assert make_sure_math_block_indicators_are_on_their_own_lines(text) == text


def test_dollar_count():
    """Test that display math needs at least the configured number of dollar signs."""
    text = "$$x$$"
    assert make_sure_math_block_indicators_are_on_their_own_lines(text, dollar_count=3) == text


def test_unterminated_math_block_unchanged():
    """Test that a math block with no closing delimiter is left alone."""
    text = "text\n\n$$"
    result = make_sure_math_block_indicators_are_on_their_own_lines(text)
    assert result == text
    assert make_sure_math_block_indicators_are_on_their_own_lines(result) == text


def test_unterminated_math_block_with_content_unchanged():
    """Test that content after an unclosed opening delimiter is not moved."""
    text = "Text\n\n$$\nx = 1\n"
    assert make_sure_math_block_indicators_are_on_their_own_lines(text) == text


def test_idempotent(helpers):
    """Test that a second pass changes nothing."""
    helpers.assert_idempotent(make_sure_math_block_indicators_are_on_their_own_lines, "Text\n\n$$a + b$$\n\nMore")
