"""
HTML presentation of render nodes.

Maps glyph identifiers to Mana icon font classes and render nodes to markup.
All card text is escaped with markupsafe before it reaches the output.
"""

from typing import Dict, Iterable

from markupsafe import Markup, escape

from config import DEFAULT_SYMBOL_SIZE
from text_processing import iter_symbols, parse_mana_cost

SIZE_CLASSES = {
    'small': 'ms-cost',
    'medium': '',
    'large': 'ms-2x',
    'xlarge': 'ms-3x',
}

SPECIAL_FONT_CLASSES = {
    'tap': 'ms-tap',
    'untap': 'ms-untap',
    'energy': 'ms-e',
    'snow': 'ms-s',
    'chaos': 'ms-chaos',
    'acorn': 'ms-acorn',
    'planeswalker': 'ms-planeswalker',
    'loyalty-down-x': 'ms-loyalty-down ms-loyalty-x',
    'loyalty-zero': 'ms-loyalty-zero ms-loyalty-0',
}


def _font_class(token: str, glyph: str, kind: str) -> str:
    if glyph in SPECIAL_FONT_CLASSES:
        return SPECIAL_FONT_CLASSES[glyph]
    if kind == 'loyalty':
        # loyalty-up-3 -> ms-loyalty-up ms-loyalty-3
        direction, amount = glyph.rsplit('-', 1)
        return f'ms-{direction} ms-loyalty-{amount}'
    # {W} -> ms-w, {W/U} -> ms-wu, {W/U/P} -> ms-wup, {12} -> ms-12
    return 'ms-' + token[1:-1].replace('/', '').lower()


FONT_CLASSES = {glyph: _font_class(token, glyph, kind) for token, glyph, kind in iter_symbols()}


def symbol_html(node: Dict) -> Markup:
    """Render a symbol node as a Mana font icon, or its raw text if unresolved."""
    if node['type'] == 'unresolved_symbol':
        return Markup('<span>{}</span>').format(node['original'])

    classes = ['ms', FONT_CLASSES[node['glyph']]]
    size_class = SIZE_CLASSES.get(node.get('size', DEFAULT_SYMBOL_SIZE), '')
    if size_class:
        classes.append(size_class)
    classes.append('ms-shadow')
    return Markup('<i class="{}" title="{}" aria-label="{}"></i>').format(
        ' '.join(classes), node['original'], node['original']
    )


def node_html(node: Dict) -> Markup:
    node_type = node['type']
    if node_type in ('symbol', 'unresolved_symbol'):
        return symbol_html(node)
    if node_type == 'header':
        tag = f"h{node['level']}"
        return Markup(f'<{tag}>{{}}</{tag}>').format(node['text'])
    if node_type == 'bold':
        return Markup('<strong>{}</strong>').format(node['text'])
    if node_type == 'italic':
        return Markup('<em>{}</em>').format(node['text'])
    if node_type == 'line_break':
        return Markup('<br>')
    return escape(node['text'])


def render_nodes_html(nodes: Iterable[Dict]) -> Markup:
    """Render a node list to an HTML fragment."""
    return Markup('').join(node_html(node) for node in nodes)


def render_mana_cost_html(cost: str, size: str = DEFAULT_SYMBOL_SIZE) -> Markup:
    """
    Render a mana cost as a row of symbols.

    A cost without any bracketed symbols is shown as its raw text.
    """
    symbols = parse_mana_cost(cost, size)
    if not symbols:
        return Markup('<span>{}</span>').format(cost or '')

    inner = Markup('').join(symbol_html(node) for node in symbols)
    return Markup('<span class="inline-flex items-center gap-0.5">{}</span>').format(inner)


def render_card_name(name: str, legendary: bool = False) -> Markup:
    if legendary:
        class_name = 'font-bold text-yellow-400 text-lg'
    else:
        class_name = 'font-bold text-white text-lg'
    return Markup('<h3 class="{}">{}</h3>').format(class_name, name)


def card_type_tone(type_line: str) -> str:
    """Pick the display tone for a type line: legendary beats planeswalker beats creature."""
    if 'Legendary' in type_line:
        return 'legendary'
    if 'Planeswalker' in type_line:
        return 'planeswalker'
    if 'Creature' in type_line:
        return 'creature'
    return 'other'


TYPE_TONE_CLASSES = {
    'legendary': 'text-yellow-300',
    'planeswalker': 'text-purple-300',
    'creature': 'text-green-300',
    'other': 'text-gray-300',
}


def render_card_type(type_line: str) -> Markup:
    class_name = 'font-medium ' + TYPE_TONE_CLASSES[card_type_tone(type_line)]
    return Markup('<p class="{}">{}</p>').format(class_name, type_line)


def render_power_toughness(power: str, toughness: str) -> Markup:
    return Markup('<span class="font-bold text-gray-200">{}/{}</span>').format(power, toughness)
