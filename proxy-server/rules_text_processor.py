"""
Rules text rendering pipeline for Magic: The Gathering cards.

This module is the entry point for turning a block of oracle text into render
nodes. It recognizes the conventional "Mana Cost:" line, renders that line as
a cost (symbols only), and composes everything else as regular rules text.
"""

import logging
from typing import Dict, List, Optional, Tuple

from config import DEBUG_TEXT_PROCESSING, DEFAULT_SYMBOL_SIZE, MANA_COST_LABEL, MANA_COST_MARKER
from text_processing import coerce_size_hint, compose_text, line_break_node, parse_mana_cost

logger = logging.getLogger(__name__)


def split_mana_cost_section(full_text: str) -> Optional[Tuple[str, str, str, bool]]:
    """
    Split oracle text around its first "Mana Cost:" marker.

    Args:
        full_text: The complete oracle text

    Returns:
        (before, cost_line, after, has_newline) where has_newline tells
        whether the cost line was terminated by a newline. Returns None when
        the marker does not appear. Only the first occurrence is used.
    """
    index = full_text.find(MANA_COST_MARKER)
    if index < 0:
        return None

    before = full_text[:index]
    remainder = full_text[index + len(MANA_COST_MARKER):]
    cost_line, newline, after = remainder.partition('\n')
    return before, cost_line, after, bool(newline)


def mana_cost_label_node() -> Dict:
    return {'type': 'bold', 'text': MANA_COST_LABEL, 'source': MANA_COST_MARKER}


def render_oracle_text(full_text: str, size: str = DEFAULT_SYMBOL_SIZE) -> List[Dict]:
    """
    Render oracle text into an ordered list of render nodes.

    If the text contains "Mana Cost:", the text before it is composed
    normally, followed by a bold "Mana Cost: " label, the symbols of the
    cost line, and then a line break and the rest of the text composed
    normally. Without the marker the whole text is composed normally.

    Never raises: malformed markup degrades to plain text and unknown
    symbols come back as 'unresolved_symbol' nodes.

    Args:
        full_text: Oracle text, possibly empty
        size: Size hint for symbol glyphs ('small', 'medium', 'large', 'xlarge')

    Returns:
        List of render node dictionaries
    """
    if not full_text:
        return []

    size = coerce_size_hint(size)
    sections = split_mana_cost_section(full_text)
    if sections is None:
        nodes = compose_text(full_text, size)
        if DEBUG_TEXT_PROCESSING:
            logger.debug("Rendered %d nodes from %d characters", len(nodes), len(full_text))
        return nodes

    before, cost_line, after, has_newline = sections
    nodes = compose_text(before, size)

    label = mana_cost_label_node()
    cost_nodes = parse_mana_cost(cost_line, size)
    if not cost_nodes:
        # Nothing to show for the cost, keep its characters on the label
        label['source'] += cost_line
    nodes.append(label)
    nodes.extend(cost_nodes)

    if has_newline:
        nodes.append(line_break_node())
        nodes.extend(compose_text(after, size))

    if DEBUG_TEXT_PROCESSING:
        logger.debug(
            "Rendered %d nodes with a %d symbol mana cost (before=%r, cost=%r)",
            len(nodes), len(cost_nodes), before[:40], cost_line,
        )
    return nodes
