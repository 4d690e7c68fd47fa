"""
Helpers for reading and rewriting YAML frontmatter.

Values are read with PyYAML, but sections are rewritten textually so the rest of
the frontmatter keeps its exact formatting, comments included.
"""

import re
from typing import Any, Dict, List

import yaml

from mdlint.regex_patterns import WORD_SPLITTER_PATTERN, YAML_PATTERN
from mdlint.rule_exceptions import MarkdownRuleError
from mdlint.rule_options import YamlArrayFormat


TAGS_KEY = 'tags'


def get_yaml_frontmatter(text: str) -> str | None:
    """
    Get the frontmatter block at the start of a document.

    Args:
        text: Markdown text

    Returns:
        The frontmatter including its `---` delimiters, or None if there is none
    """
    match = YAML_PATTERN.match(text)
    if match is None:
        return None

    return match.group(0)


def get_yaml_body(frontmatter: str) -> str:
    """
    Strip the delimiters from a frontmatter block.

    Args:
        frontmatter: Frontmatter including its `---` delimiters

    Returns:
        The YAML between the delimiters; non-empty bodies end with a newline
    """
    return frontmatter[len('---\n'):-len('---')]


def init_yaml(text: str) -> str:
    """
    Make sure a document starts with a frontmatter block, adding an empty one if needed.

    Args:
        text: Markdown text

    Returns:
        The text with frontmatter
    """
    if get_yaml_frontmatter(text) is not None:
        return text

    return f'---\n---\n{text}'


def replace_yaml_body(text: str, body: str) -> str:
    """
    Replace the YAML between the frontmatter delimiters.

    Args:
        text: Markdown text that starts with frontmatter
        body: New YAML, ending with a newline unless empty

    Returns:
        The text with the new frontmatter

    Raises:
        MarkdownRuleError: If the text has no frontmatter
    """
    match = YAML_PATTERN.match(text)
    if match is None:
        raise MarkdownRuleError('Text has no YAML frontmatter to replace', {'reason': 'missing frontmatter'})

    return f'---\n{body}---{text[match.end():]}'


def load_yaml(body: str) -> Dict[str, Any]:
    """
    Parse YAML frontmatter.

    Args:
        body: The YAML between the frontmatter delimiters

    Returns:
        The parsed mapping; empty if the YAML is empty or not a mapping

    Raises:
        MarkdownRuleError: If the YAML cannot be parsed
    """
    try:
        data = yaml.safe_load(body)

    except yaml.YAMLError as e:
        raise MarkdownRuleError(
            f'Unable to parse YAML frontmatter: {e}',
            {
                'reason': str(e),
                'suggestion': 'Fix the frontmatter so that it is valid YAML.'
            }
        ) from e

    if not isinstance(data, dict):
        return {}

    return data


def get_yaml_section_value(body: str, key: str) -> Any:
    """
    Get the value of one top-level frontmatter key.

    Args:
        body: The YAML between the frontmatter delimiters
        key: The key to look up

    Returns:
        The parsed value, or None if the key is missing
    """
    return load_yaml(body).get(key)


def convert_tag_value_to_list(value: Any) -> List[str]:
    """
    Normalise a `tags` value into a list of tag names.

    Strings may hold several tags separated by commas or whitespace; a leading `#` is dropped.

    Args:
        value: The value as parsed from YAML

    Returns:
        The tag names in order
    """
    if value is None:
        return []

    if isinstance(value, list):
        raw_tags = [str(tag) for tag in value if tag is not None]

    else:
        raw_tags = WORD_SPLITTER_PATTERN.split(str(value))

    tags = []
    for tag in raw_tags:
        tag = tag.strip()
        if tag.startswith('#'):
            tag = tag[1:]

        if tag:
            tags.append(tag)

    return tags


def set_yaml_section(body: str, key: str, raw_value: str) -> str:
    """
    Set a top-level frontmatter key, replacing the lines of any existing value.

    Args:
        body: The YAML between the frontmatter delimiters
        key: The key to set
        raw_value: Text to put after `key:`, already formatted (see `format_yaml_array_value`)

    Returns:
        The updated YAML
    """
    section_pattern = re.compile(rf'^{re.escape(key)}:[^\n]*(?:\n(?:[ \t][^\n]*|-[^\n]*))*\n?', re.MULTILINE)
    replacement = f'{key}:{raw_value}\n'
    if section_pattern.search(body) is None:
        return f'{body}{replacement}'

    return section_pattern.sub(lambda _match: replacement, body, count=1)


def format_yaml_array_value(values: List[str], style: YamlArrayFormat) -> str:
    """
    Format a list of values as the text that follows a YAML key.

    Args:
        values: The values to write
        style: The array format to use

    Returns:
        The formatted value, including its leading space or newline
    """
    if style in (YamlArrayFormat.SINGLE_STRING_TO_SINGLE_LINE, YamlArrayFormat.SINGLE_STRING_TO_MULTI_LINE):
        if len(values) == 0:
            return ''

        if len(values) == 1:
            return f' {values[0]}'

        style = (
            YamlArrayFormat.SINGLE_LINE
            if style == YamlArrayFormat.SINGLE_STRING_TO_SINGLE_LINE
            else YamlArrayFormat.MULTI_LINE
        )

    if style == YamlArrayFormat.MULTI_LINE:
        if len(values) == 0:
            return ' []'

        return ''.join(f'\n  - {value}' for value in values)

    if style == YamlArrayFormat.SINGLE_LINE_SPACE_DELIMITED:
        return f' [{" ".join(values)}]'

    if style == YamlArrayFormat.SINGLE_STRING_SPACE_DELIMITED:
        return f' {" ".join(values)}'

    if style == YamlArrayFormat.SINGLE_STRING_COMMA_DELIMITED:
        return f' {", ".join(values)}'

    return f' [{", ".join(values)}]'
