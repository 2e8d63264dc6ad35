from html_renderer import (
    FONT_CLASSES, render_nodes_html, render_mana_cost_html, render_card_name,
    render_card_type, card_type_tone, render_power_toughness
)
from rules_text_processor import render_oracle_text
from text_processing import iter_symbols


def test_every_glyph_has_a_font_class():
    assert set(FONT_CLASSES) == {glyph for _, glyph, _ in iter_symbols()}


def test_font_classes():
    assert FONT_CLASSES['white'] == 'ms-w'
    assert FONT_CLASSES['generic-12'] == 'ms-12'
    assert FONT_CLASSES['variable-x'] == 'ms-x'
    assert FONT_CLASSES['hybrid-white-blue'] == 'ms-wu'
    assert FONT_CLASSES['phyrexian-green'] == 'ms-gp'
    assert FONT_CLASSES['hybrid-phyrexian-red-green'] == 'ms-rgp'
    assert FONT_CLASSES['tap'] == 'ms-tap'
    assert FONT_CLASSES['energy'] == 'ms-e'
    assert FONT_CLASSES['loyalty-up-1'] == 'ms-loyalty-up ms-loyalty-1'
    assert FONT_CLASSES['loyalty-down-7'] == 'ms-loyalty-down ms-loyalty-7'
    assert FONT_CLASSES['loyalty-down-x'] == 'ms-loyalty-down ms-loyalty-x'
    assert FONT_CLASSES['loyalty-zero'] == 'ms-loyalty-zero ms-loyalty-0'


def test_symbol_markup_with_size_classes():
    small = str(render_nodes_html(render_oracle_text('{W}', 'small')))
    assert small == '<i class="ms ms-w ms-cost ms-shadow" title="{W}" aria-label="{W}"></i>'

    medium = str(render_nodes_html(render_oracle_text('{w}', 'medium')))
    assert medium == '<i class="ms ms-w ms-shadow" title="{w}" aria-label="{w}"></i>'

    xlarge = str(render_nodes_html(render_oracle_text('{T}', 'xlarge')))
    assert 'class="ms ms-tap ms-3x ms-shadow"' in xlarge


def test_rich_text_markup():
    html = str(render_nodes_html(render_oracle_text('## Title\n**Flying** and *haste* {FOO}')))
    assert html == '<h2>Title</h2><br><strong>Flying</strong> and <em>haste</em> <span>{FOO}</span>'


def test_text_is_escaped():
    html = str(render_nodes_html(render_oracle_text('<script>alert(1)</script> **<b>**')))
    assert '<script>' not in html
    assert '&lt;script&gt;' in html
    assert '<strong>&lt;b&gt;</strong>' in html


def test_mana_cost_markup():
    html = str(render_mana_cost_html('{2}{U}'))
    assert html.startswith('<span class="inline-flex items-center gap-0.5">')
    assert html.count('<i class="ms ') == 2
    assert 'ms-2 ms-cost' in html


def test_mana_cost_without_symbols_shows_raw_text():
    assert str(render_mana_cost_html('none')) == '<span>none</span>'
    assert str(render_mana_cost_html('')) == '<span></span>'


def test_card_chrome():
    assert str(render_card_name('Urza')) == '<h3 class="font-bold text-white text-lg">Urza</h3>'
    assert 'text-yellow-400' in str(render_card_name('Urza', legendary=True))
    assert str(render_power_toughness('3', '*')) == '<span class="font-bold text-gray-200">3/*</span>'


def test_card_type_tone():
    assert card_type_tone('Legendary Planeswalker — Jace') == 'legendary'
    assert card_type_tone('Planeswalker — Jace') == 'planeswalker'
    assert card_type_tone('Artifact Creature — Golem') == 'creature'
    assert card_type_tone('Instant') == 'other'
    assert 'text-purple-300' in str(render_card_type('Planeswalker — Jace'))
