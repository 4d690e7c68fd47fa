"""Regular expressions shared by the lint rules."""

import re


YAML_PATTERN = re.compile(r'^---\n(?:.*?\n)?---(?=\n|$)', re.DOTALL)

FOOTNOTE_KEY_PATTERN = re.compile(r'\[\^.*?\]')

GENERIC_LINK_PATTERN = re.compile(r'(!?)\[([^\[]*)\](\(.*\))')

WIKI_LINK_PATTERN = re.compile(r'(!?)(\[{2}([^\[\]\n]*?)\]{2})')

TAG_WITH_LEADING_WHITESPACE_PATTERN = re.compile(r'(\s|^)(#[^\s#;.,><?!=+]+)')

ORDERED_LIST_LINE_PATTERN = re.compile(r'^((?: |\t|> )*)((\d+[.)])|[-*+])([^\n]*)$')

CHECKBOX_PATTERN = re.compile(r'^\[.\]')

TABLE_SEPARATOR_PATTERN = re.compile(r'(\|? *:?-+:? *\|?)(\| *:?-+:? *\|?)*( |\t)*$', re.MULTILINE)

TABLE_STARTING_PIPE_PATTERN = re.compile(r'(((>[ ]?)*)|([ ]{0,3}))\|')

TABLE_ROW_PATTERN = re.compile(r'[^\n]*?\|[^\n]*?(\n|$)')

CUSTOM_IGNORE_START_PATTERN = re.compile(r'<!-{2,} *linter-disable *-{2,}>')

CUSTOM_IGNORE_END_PATTERN = re.compile(r'<!-{2,} *linter-enable *-{2,}>')

LINE_BREAK_ENDING_PATTERN = re.compile(r'(<br */?>|  )$')

WORD_SPLITTER_PATTERN = re.compile(r'[,\s]+')

EXTERNAL_URL_PATTERN = re.compile(r'^[A-Za-z][A-Za-z0-9+.-]*:')
