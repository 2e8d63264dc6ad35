"""
Text processing modules for oracle text rendering.

This package contains the mana symbol table, the single-line tokenizer, the
render node composer and the mana cost parser used to turn Magic: The
Gathering card text into renderer-independent nodes.
"""

# Import main functions for easy access
from .mana_symbols import (
    MANA_SYMBOLS,
    SYMBOL_KINDS,
    resolve,
    symbol_kind,
    iter_symbols,
    find_symbol_tokens,
    extract_colors,
    mana_value
)

from .line_tokenizer import (
    tokenize,
    header_level
)

from .node_composer import (
    compose,
    compose_text,
    source_text,
    plain_text,
    symbol_node,
    line_break_node,
    normalize_size_hint,
    coerce_size_hint
)

from .mana_cost import (
    parse_mana_cost
)

__all__ = [
    # Symbol table
    'MANA_SYMBOLS',
    'SYMBOL_KINDS',
    'resolve',
    'symbol_kind',
    'iter_symbols',
    'find_symbol_tokens',
    'extract_colors',
    'mana_value',

    # Tokenizing
    'tokenize',
    'header_level',

    # Node composition
    'compose',
    'compose_text',
    'source_text',
    'plain_text',
    'symbol_node',
    'line_break_node',
    'normalize_size_hint',
    'coerce_size_hint',

    # Mana costs
    'parse_mana_cost'
]
