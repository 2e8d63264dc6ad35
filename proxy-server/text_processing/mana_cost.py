"""
Mana cost parsing.

A cost string is read for its bracketed symbols only; emphasis, headers and
loose characters carry no meaning in a cost.
"""

from typing import Dict, List

from config import DEFAULT_SYMBOL_SIZE

from .mana_symbols import SYMBOL_PATTERN
from .node_composer import coerce_size_hint, symbol_node


def parse_mana_cost(cost_text: str, size: str = DEFAULT_SYMBOL_SIZE) -> List[Dict]:
    """
    Parse a cost string into its ordered symbol nodes.

    Characters outside braces are skipped for display, but are folded into
    the 'source' of the neighbouring symbol so the nodes still reconstruct
    the cost text. A cost without any symbols yields an empty list, which is
    a valid cost (lands, zero cost permanents).

    Args:
        cost_text: Cost string such as '{2}{W}{W}'
        size: Size hint attached to every symbol node

    Returns:
        List of 'symbol' / 'unresolved_symbol' nodes, left to right
    """
    if not cost_text:
        return []

    size = coerce_size_hint(size)
    nodes = []
    last_end = 0
    for match in SYMBOL_PATTERN.finditer(cost_text):
        skipped = cost_text[last_end:match.start()]
        nodes.append(symbol_node(match.group(0), size, source=skipped + match.group(0)))
        last_end = match.end()

    if nodes and last_end < len(cost_text):
        nodes[-1]['source'] += cost_text[last_end:]

    return nodes
