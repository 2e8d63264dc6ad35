"""
Single-line tokenizer for oracle text.

Splits one line of card text into header, symbol, bold, italic and plain
runs. Each position is tried against the rules in priority order and the
first match wins; a consumed run is never re-scanned.
"""

import re
from typing import Dict, List

from .mana_symbols import SYMBOL_PATTERN

HEADER_PATTERN = re.compile(r'(#{1,6})(\s+)(.*)')
BOLD_PATTERN = re.compile(r'\*\*([^*]+?)\*\*')
ITALIC_PATTERN = re.compile(r'\*([^*]+?)\*')
PLAIN_PATTERN = re.compile(r'[^{*]+')

DELIMITERS = '{*'


def header_level(marker: str) -> int:
    """
    Map a run of '#' characters to one of the three supported header levels.

    '##' is level 2 and '###' is level 3; a single '#' and four to six
    '#' all share the generic level 4 tier.
    """
    if len(marker) == 2:
        return 2
    if len(marker) == 3:
        return 3
    return 4


def _token(kind: str, text: str, source: str) -> Dict:
    return {'kind': kind, 'text': text, 'source': source}


def tokenize(line: str) -> List[Dict]:
    """
    Tokenize one line of oracle text.

    Args:
        line: A single line without its trailing newline

    Returns:
        Ordered list of {'kind': 'header'|'symbol'|'bold'|'italic'|'plain',
        'text': str, 'source': str}. Header tokens also carry 'level'.
        Unterminated braces and stray asterisks come back as plain text.
    """
    tokens = []
    if not line:
        return tokens

    header = HEADER_PATTERN.fullmatch(line)
    if header:
        token = _token('header', header.group(3), line)
        token['level'] = header_level(header.group(1))
        return [token]

    pos = 0
    length = len(line)
    while pos < length:
        char = line[pos]

        if char == '{':
            match = SYMBOL_PATTERN.match(line, pos)
            if match:
                tokens.append(_token('symbol', match.group(0), match.group(0)))
                pos = match.end()
                continue
        elif char == '*':
            match = BOLD_PATTERN.match(line, pos)
            if match:
                tokens.append(_token('bold', match.group(1), match.group(0)))
                pos = match.end()
                continue
            match = ITALIC_PATTERN.match(line, pos)
            if match:
                tokens.append(_token('italic', match.group(1), match.group(0)))
                pos = match.end()
                continue

        # Plain run. A delimiter that failed to open a run is kept as text
        # together with whatever follows it up to the next delimiter.
        end = pos + 1 if char in DELIMITERS else pos
        match = PLAIN_PATTERN.match(line, end)
        if match:
            end = match.end()
        text = line[pos:end]
        tokens.append(_token('plain', text, text))
        pos = end

    return tokens
