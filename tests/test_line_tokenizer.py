import pytest

from text_processing import tokenize, header_level


def kinds_and_texts(line):
    return [(token['kind'], token['text']) for token in tokenize(line)]


def test_empty_line_has_no_tokens():
    assert tokenize('') == []


def test_symbols_and_plain_text():
    assert kinds_and_texts('{2}{W}: Draw a card.') == [
        ('symbol', '{2}'),
        ('symbol', '{W}'),
        ('plain', ': Draw a card.'),
    ]


def test_emphasis_extraction():
    assert kinds_and_texts('**bold** and *italic*') == [
        ('bold', 'bold'),
        ('plain', ' and '),
        ('italic', 'italic'),
    ]


def test_bold_wins_over_italic():
    tokens = tokenize('**Flying**')
    assert len(tokens) == 1
    assert tokens[0]['kind'] == 'bold'
    assert tokens[0]['source'] == '**Flying**'


@pytest.mark.parametrize('line,level,text', [
    ('## Title', 2, 'Title'),
    ('### Title', 3, 'Title'),
    ('# Title', 4, 'Title'),
    ('#### Title', 4, 'Title'),
    ('##### Title', 4, 'Title'),
    ('###### Title', 4, 'Title'),
    ('##\tTabbed {W}', 2, 'Tabbed {W}'),
])
def test_headers(line, level, text):
    tokens = tokenize(line)
    assert len(tokens) == 1
    assert tokens[0]['kind'] == 'header'
    assert tokens[0]['level'] == level
    assert tokens[0]['text'] == text
    assert tokens[0]['source'] == line


@pytest.mark.parametrize('line', ['#Title', '####### Title', 'Level # 2', 'a ## b'])
def test_not_headers(line):
    assert all(token['kind'] != 'header' for token in tokenize(line))
    assert ''.join(token['text'] for token in tokenize(line)) == line


def test_header_level_mapping():
    assert header_level('#') == 4
    assert header_level('##') == 2
    assert header_level('###') == 3
    assert header_level('######') == 4


def test_unterminated_brace_is_plain():
    assert kinds_and_texts('Lone { brace') == [
        ('plain', 'Lone '),
        ('plain', '{ brace'),
    ]


def test_nested_brace_resumes_at_inner_symbol():
    assert kinds_and_texts('{a{b}') == [
        ('plain', '{a'),
        ('symbol', '{b}'),
    ]


def test_empty_braces_are_plain():
    assert kinds_and_texts('{}') == [('plain', '{}')]


def test_stray_asterisks_are_plain():
    assert kinds_and_texts('odd * star') == [
        ('plain', 'odd '),
        ('plain', '* star'),
    ]
    assert kinds_and_texts('***') == [('plain', '*'), ('plain', '*'), ('plain', '*')]


def test_unbalanced_bold_falls_back_to_italic():
    assert kinds_and_texts('**bold*') == [
        ('plain', '*'),
        ('italic', 'bold'),
    ]


def test_sources_cover_the_line():
    line = '**Kicker** {2}{R} *(You may pay* an additional {2}{R} {oops'
    assert ''.join(token['source'] for token in tokenize(line)) == line
