# Import all configuration constants
from config import (
    HOST, PORT, DEFAULT_SYMBOL_SIZE, DEFAULT_TEXT_WIDTH, MAX_TEXT_WIDTH
)

# Import text processing modules
from text_processing import (
    MANA_SYMBOLS, iter_symbols, extract_colors, mana_value,
    parse_mana_cost, normalize_size_hint
)

# Import rules text rendering pipeline
from rules_text_processor import render_oracle_text

# Import presenters
from html_renderer import (
    render_nodes_html, render_mana_cost_html,
    render_card_name, render_card_type, render_power_toughness
)
from card_renderer import card_renderer

from flask import Flask, request, jsonify
from flask_cors import CORS
import logging

# Configure logging
logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)

app = Flask(__name__)
CORS(app)


class RequestError(Exception):
    """A client error that should be answered with HTTP 400"""


def add_cors_headers(response):
    """Add headers for cross origin browser clients"""
    response.headers['Access-Control-Allow-Origin'] = '*'
    response.headers['Access-Control-Allow-Headers'] = 'Content-Type,Authorization,Accept,Cache-Control'
    response.headers['Access-Control-Allow-Methods'] = 'GET,POST,OPTIONS'
    return response


def error_response(message, status):
    response = jsonify({'error': message})
    return add_cors_headers(response), status


def get_json_body():
    """Parse the request body, raising RequestError when it is not a JSON object"""
    data = request.get_json(silent=True)
    if not isinstance(data, dict):
        raise RequestError('No JSON data provided')
    return data


def get_string_field(data, field, required=True):
    value = data.get(field)
    if value is None:
        if required:
            raise RequestError(f'No {field} provided')
        return ''
    if not isinstance(value, str):
        raise RequestError(f'{field} must be a string')
    return value


def get_size_hint(data):
    try:
        return normalize_size_hint(data.get('size', DEFAULT_SYMBOL_SIZE))
    except ValueError as e:
        raise RequestError(str(e))


def get_width(data):
    width = data.get('width', DEFAULT_TEXT_WIDTH)
    if isinstance(width, bool) or not isinstance(width, int):
        raise RequestError('width must be an integer')
    if width <= 0 or width > MAX_TEXT_WIDTH:
        raise RequestError(f'width must be between 1 and {MAX_TEXT_WIDTH}')
    return width


@app.errorhandler(RequestError)
def handle_request_error(e):
    logger.info(f"Rejected request to {request.path}: {e}")
    return error_response(str(e), 400)


@app.route('/api/v1/render_text', methods=['POST', 'OPTIONS'])
def render_text():
    """Render oracle text to nodes and HTML"""
    # Handle OPTIONS request for CORS preflight
    if request.method == 'OPTIONS':
        response = jsonify({'status': 'ok'})
        return add_cors_headers(response)

    data = get_json_body()
    text = get_string_field(data, 'text')
    size = get_size_hint(data)

    try:
        nodes = render_oracle_text(text, size)
        response = jsonify({
            'nodes': nodes,
            'html': str(render_nodes_html(nodes))
        })
        return add_cors_headers(response), 200
    except Exception as e:
        logger.exception("Error rendering text")
        return error_response(f'Text rendering failed: {str(e)}', 500)


@app.route('/api/v1/render_mana_cost', methods=['POST', 'OPTIONS'])
def render_mana_cost():
    """Render a mana cost to symbol nodes and HTML"""
    if request.method == 'OPTIONS':
        response = jsonify({'status': 'ok'})
        return add_cors_headers(response)

    data = get_json_body()
    cost = get_string_field(data, 'cost')
    size = get_size_hint(data)

    try:
        response = jsonify({
            'symbols': parse_mana_cost(cost, size),
            'html': str(render_mana_cost_html(cost, size)),
            'colors': extract_colors(cost),
            'mana_value': mana_value(cost)
        })
        return add_cors_headers(response), 200
    except Exception as e:
        logger.exception("Error rendering mana cost")
        return error_response(f'Mana cost rendering failed: {str(e)}', 500)


@app.route('/api/v1/render_card', methods=['POST', 'OPTIONS'])
def render_card():
    """Render the name, type line, cost, rules text and P/T of a card as HTML"""
    if request.method == 'OPTIONS':
        response = jsonify({'status': 'ok'})
        return add_cors_headers(response)

    data = get_json_body()
    name = get_string_field(data, 'name')
    type_line = get_string_field(data, 'type_line', required=False)
    mana_cost = get_string_field(data, 'mana_cost', required=False)
    text = get_string_field(data, 'text', required=False)
    power = get_string_field(data, 'power', required=False)
    toughness = get_string_field(data, 'toughness', required=False)
    size = get_size_hint(data)

    legendary = data.get('legendary', 'Legendary' in type_line)
    if not isinstance(legendary, bool):
        raise RequestError('legendary must be a boolean')

    try:
        card = {
            'name': str(render_card_name(name, legendary)),
            'type_line': str(render_card_type(type_line)),
            'mana_cost': str(render_mana_cost_html(mana_cost, size)) if mana_cost else '',
            'text': str(render_nodes_html(render_oracle_text(text, size))),
            'power_toughness': '',
        }
        # Only creatures and vehicles print a P/T box
        if power and toughness:
            card['power_toughness'] = str(render_power_toughness(power, toughness))
        response = jsonify(card)
        return add_cors_headers(response), 200
    except Exception as e:
        logger.exception("Error rendering card")
        return error_response(f'Card rendering failed: {str(e)}', 500)


@app.route('/api/v1/render_text_image', methods=['POST', 'OPTIONS'])
def render_text_image():
    """Render oracle text to a base64 PNG"""
    if request.method == 'OPTIONS':
        response = jsonify({'status': 'ok'})
        return add_cors_headers(response)

    data = get_json_body()
    text = get_string_field(data, 'text')
    size = get_size_hint(data)
    width = get_width(data)

    try:
        image, (image_width, image_height) = card_renderer.generate_text_image(text, size, width)
        response = jsonify({
            'image': image,
            'width': image_width,
            'height': image_height
        })
        return add_cors_headers(response), 200
    except Exception as e:
        logger.exception("Error rendering text image")
        return error_response(f'Image rendering failed: {str(e)}', 500)


@app.route('/api/v1/symbols', methods=['GET', 'OPTIONS'])
def list_symbols():
    """List every known symbol token with its glyph and kind"""
    if request.method == 'OPTIONS':
        response = jsonify({'status': 'ok'})
        return add_cors_headers(response)

    symbols = [
        {'token': token, 'glyph': glyph, 'kind': kind}
        for token, glyph, kind in iter_symbols()
    ]
    response = jsonify({'symbols': symbols})
    return add_cors_headers(response), 200


@app.route('/health', methods=['GET'])
def health_check():
    """Health check endpoint - always returns 200 to indicate server is running"""
    response = jsonify({
        'status': 'healthy',
        'symbols': len(MANA_SYMBOLS),
        'message': 'Server is running'
    })
    return add_cors_headers(response), 200


if __name__ == '__main__':
    logger.info("[STARTUP] Starting oracle text rendering server...")
    logger.info("Available endpoints:")
    logger.info("  POST /api/v1/render_text - Render oracle text to nodes and HTML")
    logger.info("  POST /api/v1/render_mana_cost - Render a mana cost")
    logger.info("  POST /api/v1/render_card - Render card name, type, cost, text and P/T as HTML")
    logger.info("  POST /api/v1/render_text_image - Render oracle text to a PNG")
    logger.info("  GET  /api/v1/symbols - List known symbols")
    logger.info("  GET  /health - Health check")
    logger.info('Example request body: {"text": "{T}: Add {G}.", "size": "small"}')

    app.run(debug=False, host=HOST, port=PORT)
