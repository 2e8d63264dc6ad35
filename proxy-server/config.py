"""
Configuration constants for the oracle text rendering service.
"""

import logging
import os

# ===== SERVER =====
HOST = os.environ.get('ORACLE_RENDER_HOST', '0.0.0.0')
PORT = int(os.environ.get('ORACLE_RENDER_PORT', '5000'))

# ===== SYMBOL SIZING =====
# Size hints are a rendering parameter only, never parsed from card text
SIZE_HINTS = ('small', 'medium', 'large', 'xlarge')
FALLBACK_SYMBOL_SIZE = 'small'
DEFAULT_SYMBOL_SIZE = os.environ.get('ORACLE_RENDER_SYMBOL_SIZE', FALLBACK_SYMBOL_SIZE).strip().lower()
if DEFAULT_SYMBOL_SIZE not in SIZE_HINTS:
    logging.getLogger(__name__).warning(
        "ORACLE_RENDER_SYMBOL_SIZE=%r is not one of %s, using '%s'",
        DEFAULT_SYMBOL_SIZE, ', '.join(SIZE_HINTS), FALLBACK_SYMBOL_SIZE
    )
    DEFAULT_SYMBOL_SIZE = FALLBACK_SYMBOL_SIZE

# ===== MANA COST SECTION =====
MANA_COST_MARKER = 'Mana Cost:'
MANA_COST_LABEL = 'Mana Cost: '

# ===== ASSET PATHS =====
ASSETS_DIR = os.environ.get(
    'ORACLE_RENDER_ASSETS_DIR',
    os.path.join(os.path.dirname(__file__), 'assets')
)
FONTS_DIR = os.path.join(ASSETS_DIR, 'fonts')
MANA_SYMBOLS_DIR = os.path.join(ASSETS_DIR, 'manaSymbols')
TEXT_FONT_FILE = 'Beleren2016-Bold.ttf'

# ===== IMAGE LAYOUT =====
DEFAULT_TEXT_WIDTH = 385    # Same width as the rules text box on a rendered card
MAX_TEXT_WIDTH = 2000
DEFAULT_FONT_SIZE = 17
TEXT_PADDING = 8
TEXT_COLOR = (0, 0, 0, 255)
EMPHASIS_COLOR = (60, 60, 60, 255)
BACKGROUND_COLOR = (255, 255, 255, 0)

# Symbol edge length relative to the font size, per size hint
SYMBOL_SCALE = {
    'small': 0.8,
    'medium': 1.0,
    'large': 2.0,
    'xlarge': 3.0,
}

# Header font size relative to the body font, per header level
HEADER_SCALE = {
    2: 1.5,
    3: 1.25,
    4: 1.1,
}

# ===== DEBUGGING FLAGS =====
DEBUG_TEXT_PROCESSING = os.environ.get('ORACLE_RENDER_DEBUG', '').lower() in ('1', 'true', 'yes')
