"""
Mana symbol table for Magic: The Gathering card text.

Maps every known bracketed token ({W}, {2/U}, {T}, {-3}, ...) to a canonical
glyph identifier and the kind of symbol it represents. Lookups are
case-insensitive; the table is built once at import time and exposed
read-only.
"""

import re
from types import MappingProxyType
from typing import Dict, Iterator, List, Optional, Tuple

SYMBOL_PATTERN = re.compile(r'\{[^{}]+\}')

COLOR_NAMES = {
    'W': 'white',
    'U': 'blue',
    'B': 'black',
    'R': 'red',
    'G': 'green',
}

# Allied and enemy pairs in the order they are printed on cards
HYBRID_PAIRS = ['WU', 'UB', 'BR', 'RG', 'GW', 'WB', 'UR', 'BG', 'RW', 'GU']
HYBRID_PHYREXIAN_PAIRS = ['WU', 'UB', 'BR', 'RG', 'GW']

SPECIAL_SYMBOLS = {
    '{T}': 'tap',
    '{Q}': 'untap',
    '{E}': 'energy',
    '{S}': 'snow',
    '{CHAOS}': 'chaos',
    '{A}': 'acorn',
}

MAX_GENERIC = 20
MAX_LOYALTY = 8

SYMBOL_KINDS = (
    'basic', 'generic', 'variable', 'hybrid', 'phyrexian',
    'hybrid_phyrexian', 'special', 'planeswalker', 'loyalty',
)


def _build_symbol_table() -> Dict[str, Tuple[str, str]]:
    """Build the token -> (glyph, kind) table in display order."""
    table = {}

    # Basic mana
    for letter, name in COLOR_NAMES.items():
        table[f'{{{letter}}}'] = (name, 'basic')
    table['{C}'] = ('colorless', 'basic')

    # Generic mana
    for amount in range(MAX_GENERIC + 1):
        table[f'{{{amount}}}'] = (f'generic-{amount}', 'generic')

    # Variable costs
    for letter in 'XYZ':
        table[f'{{{letter}}}'] = (f'variable-{letter.lower()}', 'variable')

    # Hybrid mana
    for first, second in HYBRID_PAIRS:
        glyph = f'hybrid-{COLOR_NAMES[first]}-{COLOR_NAMES[second]}'
        table[f'{{{first}/{second}}}'] = (glyph, 'hybrid')

    # Phyrexian mana
    for letter, name in COLOR_NAMES.items():
        table[f'{{{letter}/P}}'] = (f'phyrexian-{name}', 'phyrexian')

    # Hybrid/Phyrexian
    for first, second in HYBRID_PHYREXIAN_PAIRS:
        glyph = f'hybrid-phyrexian-{COLOR_NAMES[first]}-{COLOR_NAMES[second]}'
        table[f'{{{first}/{second}/P}}'] = (glyph, 'hybrid_phyrexian')

    # Special symbols
    for token, glyph in SPECIAL_SYMBOLS.items():
        table[token] = (glyph, 'special')

    # Planeswalker symbols
    table['{PW}'] = ('planeswalker', 'planeswalker')
    for amount in range(1, MAX_LOYALTY + 1):
        table[f'{{+{amount}}}'] = (f'loyalty-up-{amount}', 'loyalty')
        table[f'{{-{amount}}}'] = (f'loyalty-down-{amount}', 'loyalty')
    table['{-X}'] = ('loyalty-down-x', 'loyalty')
    table['{0L}'] = ('loyalty-zero', 'loyalty')

    return table


MANA_SYMBOLS = MappingProxyType(_build_symbol_table())


def normalize_token(token: str) -> str:
    """Uppercase a bracketed token for table lookup."""
    return token.strip().upper()


def resolve(token: str) -> Optional[str]:
    """
    Resolve a bracketed token to its glyph identifier.

    Args:
        token: Token text including braces, in any case (e.g. '{w/u}')

    Returns:
        The glyph identifier, or None when the token is not a known symbol.
        None is not an error: callers show the literal token instead.
    """
    entry = MANA_SYMBOLS.get(normalize_token(token))
    return entry[0] if entry else None


def symbol_kind(token: str) -> Optional[str]:
    """Return the kind of a bracketed token ('basic', 'hybrid', ...) or None."""
    entry = MANA_SYMBOLS.get(normalize_token(token))
    return entry[1] if entry else None


def iter_symbols() -> Iterator[Tuple[str, str, str]]:
    """Yield (token, glyph, kind) for every known symbol in table order."""
    for token, (glyph, kind) in MANA_SYMBOLS.items():
        yield token, glyph, kind


def find_symbol_tokens(text: str) -> List[str]:
    """Return every brace-delimited token in text, left to right."""
    return SYMBOL_PATTERN.findall(text or '')


def extract_colors(cost_text: str) -> List[str]:
    """
    Extract the colors referenced by the symbols in a mana cost.

    Hybrid and Phyrexian symbols contribute each of their colors. Returns
    color letters in WUBRG order without duplicates.
    """
    found = set()
    for token in find_symbol_tokens(cost_text):
        kind = symbol_kind(token)
        if kind not in ('basic', 'hybrid', 'phyrexian', 'hybrid_phyrexian'):
            continue
        for part in normalize_token(token)[1:-1].split('/'):
            if part in COLOR_NAMES:
                found.add(part)

    return [letter for letter in COLOR_NAMES if letter in found]


def mana_value(cost_text: str) -> int:
    """
    Calculate the mana value (converted mana cost) of a cost string.

    Generic symbols count their number, X/Y/Z count zero, every other mana
    symbol counts one. Tap, loyalty and other non-mana symbols count zero.
    """
    total = 0
    for token in find_symbol_tokens(cost_text):
        kind = symbol_kind(token)
        if kind == 'generic':
            total += int(normalize_token(token)[1:-1])
        elif kind in ('basic', 'hybrid', 'phyrexian', 'hybrid_phyrexian'):
            total += 1
        elif resolve(token) == 'snow':
            # Snow mana is still mana
            total += 1
    return total
