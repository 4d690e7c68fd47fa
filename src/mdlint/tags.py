"""Move body tags into the YAML frontmatter."""

from typing import List

from mdlint.ignore_types import IgnoreType, ignore_list_of_types
from mdlint.regex_patterns import TAG_WITH_LEADING_WHITESPACE_PATTERN, YAML_PATTERN
from mdlint.rule_options import YamlArrayFormat
from mdlint.yaml_frontmatter import (
    TAGS_KEY, convert_tag_value_to_list, format_yaml_array_value, get_yaml_body, get_yaml_frontmatter,
    get_yaml_section_value, init_yaml, replace_yaml_body, set_yaml_section
)


def _find_body_tags(body: str) -> List[str]:
    tags: List[str] = []
    for match in TAG_WITH_LEADING_WHITESPACE_PATTERN.finditer(body):
        tag = match.group(2).strip()[1:]
        if tag not in tags:
            tags.append(tag)

    return tags


def move_tags_to_yaml(
    text: str,
    tag_array_style: YamlArrayFormat = YamlArrayFormat.SINGLE_LINE,
    remove_hashtags_from_tags_in_body: bool = False
) -> str:
    """
    Add every `#tag` in the body of a document to the `tags` key of its frontmatter.

    Frontmatter is created if the document has none.  Tags already listed keep their
    position and new ones are appended in order of first appearance.  Tags inside code
    and math are left alone.

    Args:
        text: Markdown text
        tag_array_style: Format to write the `tags` value in
        remove_hashtags_from_tags_in_body: If True, drop the `#` from the tags in the body

    Returns:
        The updated text

    Raises:
        MarkdownRuleError: If the existing frontmatter is not valid YAML
    """
    def _move_tags(text: str) -> str:
        frontmatter = get_yaml_frontmatter(text)
        body_start = len(frontmatter) if frontmatter is not None else 0
        new_tags = _find_body_tags(text[body_start:])
        if not new_tags:
            return text

        text = init_yaml(text)
        frontmatter = get_yaml_frontmatter(text)
        assert frontmatter is not None
        yaml_body = get_yaml_body(frontmatter)

        tags = convert_tag_value_to_list(get_yaml_section_value(yaml_body, TAGS_KEY))
        for tag in new_tags:
            if tag not in tags:
                tags.append(tag)

        yaml_body = set_yaml_section(yaml_body, TAGS_KEY, format_yaml_array_value(tags, tag_array_style))
        text = replace_yaml_body(text, yaml_body)

        if remove_hashtags_from_tags_in_body:
            match = YAML_PATTERN.match(text)
            assert match is not None
            body = TAG_WITH_LEADING_WHITESPACE_PATTERN.sub(
                lambda tag: tag.group(1) + tag.group(2)[1:], text[match.end():]
            )
            text = text[:match.end()] + body

        return text

    return ignore_list_of_types(
        [IgnoreType.CODE, IgnoreType.INLINE_CODE, IgnoreType.MATH, IgnoreType.INLINE_MATH], text, _move_tags
    )
