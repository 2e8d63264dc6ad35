"""
Render node composition for oracle text.

Turns tokenized lines into an ordered list of render nodes. Nodes are plain
dictionaries so they can be returned from the API as-is. Every node keeps
the exact span of input it came from under 'source', which makes the node
list a lossless view of the text.
"""

import logging
from typing import Dict, Iterable, List

from config import DEFAULT_SYMBOL_SIZE, SIZE_HINTS

from .line_tokenizer import tokenize
from .mana_symbols import resolve, symbol_kind

logger = logging.getLogger(__name__)

LINE_BREAK = '\n'


def normalize_size_hint(size) -> str:
    """
    Validate a caller supplied size hint.

    Raises:
        ValueError: If size is not one of SIZE_HINTS
    """
    if size is None:
        return DEFAULT_SYMBOL_SIZE
    normalized = str(size).strip().lower()
    if normalized not in SIZE_HINTS:
        raise ValueError(f"Invalid size hint '{size}', expected one of: {', '.join(SIZE_HINTS)}")
    return normalized


def coerce_size_hint(size) -> str:
    """Like normalize_size_hint, but falls back to the default instead of raising."""
    try:
        return normalize_size_hint(size)
    except ValueError:
        logger.warning("Unknown size hint %r, using '%s'", size, DEFAULT_SYMBOL_SIZE)
        return DEFAULT_SYMBOL_SIZE


def line_break_node() -> Dict:
    return {'type': 'line_break', 'source': LINE_BREAK}


def symbol_node(token: str, size: str = DEFAULT_SYMBOL_SIZE, source: str = None) -> Dict:
    """
    Build the node for a bracketed token.

    Known symbols become 'symbol' nodes with their glyph; anything else
    becomes an 'unresolved_symbol' node that keeps the literal token.
    """
    if source is None:
        source = token
    glyph = resolve(token)
    if glyph is None:
        return {'type': 'unresolved_symbol', 'original': token, 'source': source}
    return {
        'type': 'symbol',
        'glyph': glyph,
        'kind': symbol_kind(token),
        'original': token,
        'size': size,
        'source': source,
    }


def token_to_node(token: Dict, size: str = DEFAULT_SYMBOL_SIZE) -> Dict:
    """Map one raw token from the line tokenizer to its render node."""
    kind = token['kind']
    if kind == 'header':
        return {'type': 'header', 'level': token['level'], 'text': token['text'], 'source': token['source']}
    if kind == 'symbol':
        return symbol_node(token['text'], size)
    if kind == 'bold':
        return {'type': 'bold', 'text': token['text'], 'source': token['source']}
    if kind == 'italic':
        return {'type': 'italic', 'text': token['text'], 'source': token['source']}
    return {'type': 'text', 'text': token['text'], 'source': token['source']}


def compose(lines: Iterable[str], size: str = DEFAULT_SYMBOL_SIZE) -> List[Dict]:
    """
    Compose render nodes for a sequence of lines.

    A line break node precedes every line except the first. Tokens map to
    nodes one to one; adjacent text nodes are never merged.

    Args:
        lines: Lines of oracle text without their newlines
        size: Size hint attached to every symbol node

    Returns:
        Ordered list of render nodes
    """
    size = coerce_size_hint(size)
    nodes = []
    for index, line in enumerate(lines):
        if index > 0:
            nodes.append(line_break_node())
        for token in tokenize(line):
            nodes.append(token_to_node(token, size))
    return nodes


def compose_text(text: str, size: str = DEFAULT_SYMBOL_SIZE) -> List[Dict]:
    """Compose a block of text, splitting it on newlines."""
    if not text:
        return []
    return compose(text.split(LINE_BREAK), size)


def source_text(nodes: Iterable[Dict]) -> str:
    """Reconstruct the original input from a node list."""
    return ''.join(node['source'] for node in nodes)


def plain_text(nodes: Iterable[Dict]) -> str:
    """
    Flatten nodes to their display text.

    Emphasis loses its asterisks, headers lose their '#' marker and symbols
    show their original token.
    """
    parts = []
    for node in nodes:
        node_type = node['type']
        if node_type == 'line_break':
            parts.append(LINE_BREAK)
        elif node_type in ('symbol', 'unresolved_symbol'):
            parts.append(node['original'])
        else:
            parts.append(node['text'])
    return ''.join(parts)
