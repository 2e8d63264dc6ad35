import base64

import pytest

from app import app


@pytest.fixture
def client():
    app.config['TESTING'] = True
    with app.test_client() as test_client:
        yield test_client


def test_health(client):
    response = client.get('/health')
    assert response.status_code == 200
    body = response.get_json()
    assert body['status'] == 'healthy'
    assert body['symbols'] == 75


def test_render_text(client):
    response = client.post('/api/v1/render_text', json={'text': '{T}: Add {G}.'})
    assert response.status_code == 200
    body = response.get_json()
    assert [node['type'] for node in body['nodes']] == ['symbol', 'text', 'symbol', 'text']
    assert body['nodes'][0]['glyph'] == 'tap'
    assert 'ms-tap' in body['html']
    assert response.headers['Access-Control-Allow-Origin'] == '*'


def test_render_text_with_mana_cost_and_size(client):
    response = client.post('/api/v1/render_text', json={
        'text': 'Mana Cost: {1}{R}\nHaste',
        'size': 'large'
    })
    assert response.status_code == 200
    nodes = response.get_json()['nodes']
    assert nodes[0] == {'type': 'bold', 'text': 'Mana Cost: ', 'source': 'Mana Cost:'}
    assert {node['size'] for node in nodes if node['type'] == 'symbol'} == {'large'}


def test_render_text_accepts_empty_text(client):
    response = client.post('/api/v1/render_text', json={'text': ''})
    assert response.status_code == 200
    assert response.get_json() == {'nodes': [], 'html': ''}


@pytest.mark.parametrize('payload,message', [
    ({}, 'No text provided'),
    ({'text': 42}, 'text must be a string'),
    ({'text': '{W}', 'size': 'huge'}, "Invalid size hint 'huge'"),
])
def test_render_text_rejects_bad_input(client, payload, message):
    response = client.post('/api/v1/render_text', json=payload)
    assert response.status_code == 400
    assert message in response.get_json()['error']


def test_render_text_requires_json(client):
    response = client.post('/api/v1/render_text', data='not json', content_type='text/plain')
    assert response.status_code == 400
    assert response.get_json()['error'] == 'No JSON data provided'


def test_options_preflight(client):
    response = client.options('/api/v1/render_text')
    assert response.status_code == 200
    assert response.get_json() == {'status': 'ok'}


def test_render_mana_cost(client):
    response = client.post('/api/v1/render_mana_cost', json={'cost': '{2}{W}{U/B}'})
    assert response.status_code == 200
    body = response.get_json()
    assert [node['glyph'] for node in body['symbols']] == ['generic-2', 'white', 'hybrid-blue-black']
    assert body['colors'] == ['W', 'U', 'B']
    assert body['mana_value'] == 4
    assert body['html'].count('<i class="ms ') == 3


def test_render_mana_cost_without_symbols(client):
    response = client.post('/api/v1/render_mana_cost', json={'cost': 'none'})
    body = response.get_json()
    assert body['symbols'] == []
    assert body['html'] == '<span>none</span>'
    assert body['mana_value'] == 0


def test_render_text_image(client):
    response = client.post('/api/v1/render_text_image', json={'text': '{T}: Add {G}.', 'width': 200})
    assert response.status_code == 200
    body = response.get_json()
    assert body['width'] == 200
    assert body['height'] > 0
    assert base64.b64decode(body['image']).startswith(b'\x89PNG')


@pytest.mark.parametrize('width', ['wide', 0, 100000, True])
def test_render_text_image_rejects_bad_width(client, width):
    response = client.post('/api/v1/render_text_image', json={'text': '{T}', 'width': width})
    assert response.status_code == 400


def test_list_symbols(client):
    response = client.get('/api/v1/symbols')
    assert response.status_code == 200
    symbols = response.get_json()['symbols']
    assert len(symbols) == 75
    assert symbols[0] == {'token': '{W}', 'glyph': 'white', 'kind': 'basic'}
    assert {'token': '{0L}', 'glyph': 'loyalty-zero', 'kind': 'loyalty'} in symbols


def test_render_card(client):
    response = client.post('/api/v1/render_card', json={
        'name': 'Llanowar Elves',
        'type_line': 'Creature — Elf Druid',
        'mana_cost': '{G}',
        'text': '{T}: Add {G}.',
        'power': '1',
        'toughness': '1',
    })
    assert response.status_code == 200
    card = response.get_json()
    assert card['name'] == '<h3 class="font-bold text-white text-lg">Llanowar Elves</h3>'
    assert 'text-green-300' in card['type_line']
    assert card['mana_cost'].count('ms-g') == 1
    assert 'ms-tap' in card['text']
    assert card['power_toughness'] == '<span class="font-bold text-gray-200">1/1</span>'
    assert response.headers['Access-Control-Allow-Origin'] == '*'


def test_render_card_legendary_from_type_line(client):
    response = client.post('/api/v1/render_card', json={
        'name': 'Jace <Beleren>',
        'type_line': 'Legendary Planeswalker — Jace',
        'text': '{+2}: Each player draws a card.',
    })
    assert response.status_code == 200
    card = response.get_json()
    assert 'text-yellow-400' in card['name']
    assert '&lt;Beleren&gt;' in card['name']
    assert 'text-yellow-300' in card['type_line']
    assert card['mana_cost'] == ''
    assert card['power_toughness'] == ''


@pytest.mark.parametrize('payload,message', [
    ({'type_line': 'Instant'}, 'No name provided'),
    ({'name': 'Shock', 'legendary': 'yes'}, 'legendary must be a boolean'),
    ({'name': 'Shock', 'power': 2}, 'power must be a string'),
])
def test_render_card_rejects_bad_input(client, payload, message):
    response = client.post('/api/v1/render_card', json=payload)
    assert response.status_code == 400
    assert message in response.get_json()['error']
