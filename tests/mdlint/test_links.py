"""Tests for link inspection and link rewriting."""

import pytest

from mdlint import (
    LinkInfo,
    LinkStyle,
    convert_markdown_links_to_wiki_links,
    convert_wiki_links_to_markdown_links,
    get_markdown_image_info,
    get_markdown_link_info,
    get_wiki_link_info,
    link_format,
    remove_spaces_in_link_text,
    remove_spaces_in_wiki_link_text
)
from textedit import Span


class TestGetMarkdownLinkInfo:
    """Test extracting Markdown link details."""

    def test_no_links(self):
        """Test that bare URLs are not Markdown links."""
        assert get_markdown_link_info("Here is some text\nHere is a link: https://github.com/") == []

    def test_images_are_not_links(self):
        """Test that images are not reported as links."""
        text = "Here is some text\nHere is a link: https://github.com/\nHere is an image link: ![](image.jpg)"
        assert get_markdown_link_info(text) == []

    def test_single_link(self):
        """Test the text, destination and position of one link."""
        text = "Here is some text\nHere is a markdown link: [github.com](https://github.com/)"
        assert get_markdown_link_info(text) == [LinkInfo('github.com', 'https://github.com/', Span(43, 76))]

    def test_multiple_links_descending(self):
        """Test that links are returned from last to first."""
        text = (
            "Here is some text\n"
            "Here is a markdown link: [github.com](https://github.com/)\n"
            "More text here\n"
            "[markdown file](markdown%20file.md)"
        )
        assert get_markdown_link_info(text) == [
            LinkInfo('markdown file', 'markdown%20file.md', Span(92, 127)),
            LinkInfo('github.com', 'https://github.com/', Span(43, 76)),
        ]

    def test_autolinks_skipped(self):
        """Test that autolinks have no link text to report."""
        assert get_markdown_link_info("<https://example.com>") == []


class TestGetImageAndWikiLinkInfo:
    """Test extracting image and wiki link details."""

    def test_image_size(self):
        """Test that a size at the end of the alternative text is split off."""
        info = get_markdown_image_info("![alt|100x200](image.png)")
        assert info == [LinkInfo('alt', 'image.png', Span(0, 25), size='100x200', is_image=True)]

    def test_image_without_size(self):
        """Test an image with plain alternative text."""
        info = get_markdown_image_info("![a picture](pic.png)")
        assert info[0].text == 'a picture'
        assert info[0].size is None

    def test_wiki_links(self):
        """Test that wiki links are found and embeds are skipped."""
        info = get_wiki_link_info("See [[Page|Alias]] and ![[img.png]] and [[Other]]")
        assert info == [
            LinkInfo('', 'Other', Span(40, 49)),
            LinkInfo('Alias', 'Page', Span(4, 18)),
        ]


class TestRemoveSpacesInLinkText:
    """Test trimming link text."""

    def test_markdown_link(self):
        """Test trimming the text of a Markdown link."""
        assert remove_spaces_in_link_text("[ text ](url)") == "[text](url)"

    def test_wiki_link(self):
        """Test trimming the alias of a wiki link."""
        assert remove_spaces_in_wiki_link_text("[[Page| Alias ]]") == "[[Page|Alias]]"

    def test_wiki_link_without_alias(self):
        """Test that a wiki link without an alias is unchanged."""
        assert remove_spaces_in_wiki_link_text("[[ Page ]]") == "[[ Page ]]"


class TestMarkdownToWikiLinks:
    """Test converting Markdown links to wiki links."""

    @pytest.mark.parametrize("text,expected", [
        ("[text](file.md#^0b927e)", "[[file#^0b927e|text]]"),
        ("[file name](folder/file%20name.md)", "[[folder/file name]]"),
        ("![alt|100](pic.png)", "![[pic.png|alt|100]]"),
        ("[](note.md)", "[[note]]"),
    ])
    def test_converted(self, text, expected):
        """Test links to local files."""
        assert convert_markdown_links_to_wiki_links(text) == expected

    @pytest.mark.parametrize("text", [
        "[GitHub](https://github.com)",
        "[mail](mailto:someone@example.com)",
        '[a](b.md "title")',
    ])
    def test_left_alone(self, text):
        """Test that external links and links with titles are not converted."""
        assert convert_markdown_links_to_wiki_links(text) == text


class TestWikiToMarkdownLinks:
    """Test converting wiki links to Markdown links."""

    @pytest.mark.parametrize("text,expected", [
        ("[[file#^0b927e|text]]", "[text](file.md#^0b927e)"),
        ("[[folder/file name]]", "[folder/file name](folder/file%20name.md)"),
        ("![[pic.png|alt|100]]", "![alt|100](pic.png)"),
        ("[[Heading#Some Section]]", "[Heading#Some Section](Heading.md#Some%20Section)"),
    ])
    def test_converted(self, text, expected):
        """Test wiki links and embeds."""
        assert convert_wiki_links_to_markdown_links(text) == expected


class TestLinkFormat:
    """Test the link format rule."""

    def test_code_ignored(self):
        """Test that links in code are not converted."""
        assert link_format("`[a](b.md)` and [c](d.md)", LinkStyle.WIKI) == "`[a](b.md)` and [[d|c]]"

    def test_markdown_style(self):
        """Test converting to Markdown links."""
        assert link_format("See [[Page]].", LinkStyle.MARKDOWN) == "See [Page](Page.md)."
